"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/models/types.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Centralized enumeration and type definitions.
------------------------------------------------------------------------------
"""

from enum import Enum


class AddressType(str, Enum):
    """Address structure, derived from the fields written so far."""
    UNDETERMINED = "UNDETERMINED"
    STRUCTURED = "STRUCTURED"
    COMBINED_ELEMENTS = "COMBINED_ELEMENTS"
    CONFLICTING = "CONFLICTING"


class ReferenceType(str, Enum):
    """Payment reference type as used in the QR code text."""
    NO_REF = "NON"
    QR_REF = "QRR"
    CREDITOR_REF = "SCOR"


class QrDataSeparator(str, Enum):
    """Line separator used in the QR code text."""
    LF = "LF"
    CRLF = "CRLF"

    @property
    def newline(self) -> str:
        return "\n" if self is QrDataSeparator.LF else "\r\n"


class QrBillStandardVersion(str, Enum):
    """Supported version of the Swiss Payment Standards."""
    V2_0 = "V2_0"


class MessageType(str, Enum):
    """Severity of a validation message."""
    WARNING = "WARNING"
    ERROR = "ERROR"
