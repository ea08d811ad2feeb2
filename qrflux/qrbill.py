"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/qrbill.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Entry points for applications: validation, creation of the
                QR code text (with validation), decoding, QR code image
                generation and configuration driven defaults.
------------------------------------------------------------------------------
"""

from typing import Optional

from qrflux import qr_text, validator
from qrflux.config import AppConfig
from qrflux.exceptions import QRBillValidationError
from qrflux.logger import get_logger, setup_logging
from qrflux.models.bill import Bill
from qrflux.models.validation import ValidationResult

logger = get_logger("qrbill")


def validate(bill: Bill) -> ValidationResult:
    """
    Validates and cleans the bill data.

    Args:
        bill: The bill data. It is not modified.

    Returns:
        Validation messages and the cleaned bill.
    """
    return validator.validate(bill)


def encode_qr_code_text(bill: Bill) -> str:
    """
    Validates the bill data and creates the text for the QR code from the
    cleaned bill.

    Raises:
        QRBillValidationError: If the bill data has validation errors.
    """
    result = validator.validate(bill)
    if result.has_errors:
        raise QRBillValidationError(result)
    return qr_text.encode(result.cleaned_bill)


def decode_qr_code_text(text: str, allow_invalid_amount: bool = False) -> Bill:
    """
    Decodes the text of a QR code into bill data.

    The result is only checked structurally; call validate() for a full
    check.

    Raises:
        QRBillDecodeError: If the text is not valid QR bill data.
    """
    return qr_text.decode(text, allow_invalid_amount=allow_invalid_amount)


def get_qr_image(text: str):
    """
    Attempts to generate a PIL Image for the QR code text.
    Requires 'qrcode' and 'Pillow' packages.

    Returns:
        The image or None if the packages are not installed.
    """
    try:
        import qrcode
    except ImportError:
        logger.warning("Package 'qrcode' not found. Cannot generate image.")
        return None

    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(text.encode("utf-8"))
    qr.make(fit=True)
    return qr.make_image(fill_color="black", back_color="white")


def new_bill(config: Optional[AppConfig] = None) -> Bill:
    """Creates an empty bill preset with the configured currency and encoding options."""
    config = config or AppConfig()
    return Bill(
        currency=config.get_currency(),
        character_set=config.get_character_set(),
        separator=config.get_separator(),
    )


def configure_logging(config: Optional[AppConfig] = None, log_file: Optional[str] = None) -> None:
    """
    Sets up logging with the configured global and component levels.
    Logs are written to the profile's log file unless another file is given.
    """
    config = config or AppConfig()
    setup_logging(
        level=config.get_log_level(),
        log_file=log_file or str(config.get_log_file_path()),
        component_levels=config.get_log_components(),
    )
