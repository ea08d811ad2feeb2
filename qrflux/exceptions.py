"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/exceptions.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Exception types raised when bill data is invalid or QR code
                text cannot be decoded.
------------------------------------------------------------------------------
"""

from enum import Enum

from qrflux import constants as c
from qrflux.models.types import MessageType
from qrflux.models.validation import ValidationResult


class DecodeError(str, Enum):
    """Field of the QR code text that failed structural decoding."""
    QR_TYPE = c.FIELD_QR_TYPE
    VERSION = c.FIELD_VERSION
    CODING_TYPE = c.FIELD_CODING_TYPE
    TRAILER = c.FIELD_TRAILER
    AMOUNT = c.FIELD_AMOUNT


class QRBillError(Exception):
    """Base exception for QR bill errors."""


class QRBillValidationError(QRBillError):
    """Bill data is invalid. The validation result lists the errors."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        super().__init__(f"QR bill data is invalid: {result.description}")


class QRBillDecodeError(QRBillValidationError):
    """QR code text is invalid. Exactly one error message is reported."""

    def __init__(self, error: DecodeError, message_key: str) -> None:
        result = ValidationResult()
        result.add_message(MessageType.ERROR, error.value, message_key)
        self.error = error
        super().__init__(result)
