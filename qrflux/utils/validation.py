"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/utils/validation.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validation and creation of Swiss payment identifiers:
                IBAN / QR-IBAN, QR references (ISR) and ISO 11649 creditor
                references, plus text validity helpers.
------------------------------------------------------------------------------
"""

import re
from typing import Optional

from qrflux.utils.charset import CharacterSet
from qrflux.utils.checksums import calculate_mod10, calculate_mod97, has_valid_mod97_check_digits
from qrflux.utils.cleanup import whitespace_removed
from qrflux.utils.cleanup import is_valid_text as _is_valid_text

_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]*")
_NUMERIC = re.compile(r"[0-9]*")
_ALPHA = re.compile(r"[A-Za-z]*")

# Check digits never issued for IBANs
_INVALID_IBAN_CHECK_DIGITS = ("00", "01", "99")

QR_REFERENCE_LENGTH = 27
ISO11649_MAX_LENGTH = 25


def is_numeric(value: str) -> bool:
    """Checks if the value consists of ASCII digits only (empty is numeric)."""
    return bool(_NUMERIC.fullmatch(value))


def is_alphanumeric(value: str) -> bool:
    """Checks if the value consists of ASCII letters and digits only."""
    return bool(_ALPHANUMERIC.fullmatch(value))


def is_alpha(value: str) -> bool:
    """Checks if the value consists of ASCII letters only."""
    return bool(_ALPHA.fullmatch(value))


def is_valid_iban(iban: str) -> bool:
    """
    Validates an IBAN according to ISO 13616.

    Whitespace is ignored. Only the country code format, the check digits
    and the MOD97 checksum are verified, not the country-specific length.

    Args:
        iban: The IBAN string to validate.

    Returns:
        True if the IBAN is valid, False otherwise.
    """
    iban = whitespace_removed(iban)
    if len(iban) < 5:
        return False
    if not is_alphanumeric(iban):
        return False

    # Country code and check digits
    if not is_alpha(iban[:2]):
        return False
    check_digits = iban[2:4]
    if not is_numeric(check_digits):
        return False
    if check_digits in _INVALID_IBAN_CHECK_DIGITS:
        return False

    return has_valid_mod97_check_digits(iban)


def is_qr_iban(iban: str) -> bool:
    """
    Checks if the IBAN is a valid QR-IBAN.

    QR-IBANs are Swiss or Liechtenstein IBANs with an institution
    identifier in the range 30000 to 31999.
    """
    iban = whitespace_removed(iban).upper()
    return (
        is_valid_iban(iban)
        and iban[:2] in ("CH", "LI")
        and iban[4] == "3"
        and iban[5] in ("0", "1")
    )


def format_iban(iban: str) -> str:
    """Formats an IBAN in blocks of 4 characters separated by a space."""
    return " ".join(iban[pos:pos + 4] for pos in range(0, len(iban), 4))


def is_valid_qr_reference(reference: str) -> bool:
    """Checks if the reference is a valid 27-digit QR reference with a MOD10 check digit."""
    reference = whitespace_removed(reference)
    if not is_numeric(reference) or len(reference) != QR_REFERENCE_LENGTH:
        return False
    return calculate_mod10(reference) == 0


def create_qr_reference(raw_reference: str) -> str:
    """
    Creates a QR reference by padding the raw reference with zeros and
    appending the MOD10 check digit.

    Args:
        raw_reference: Up to 26 digits, whitespace is ignored.

    Returns:
        The 27-digit QR reference.

    Raises:
        ValueError: If the reference contains non-digits or is too long.
    """
    raw = whitespace_removed(raw_reference)
    if not is_numeric(raw):
        raise ValueError("Invalid character in reference (digits allowed only)")
    if len(raw) > QR_REFERENCE_LENGTH - 1:
        raise ValueError("Reference number is too long")

    padded = raw.rjust(QR_REFERENCE_LENGTH - 1, "0")
    return padded + str(calculate_mod10(padded))


def format_qr_reference(reference: str) -> str:
    """Formats a QR reference in blocks of 5 digits counted from the right."""
    head = len(reference) % 5
    blocks = [reference[:head]] if head else []
    blocks.extend(reference[pos:pos + 5] for pos in range(head, len(reference), 5))
    return " ".join(blocks)


def is_valid_iso11649_reference(reference: str) -> bool:
    """
    Checks if the reference is a valid ISO 11649 creditor reference
    ("RF", two check digits, up to 21 alphanumeric characters).
    """
    reference = whitespace_removed(reference)
    if not 5 <= len(reference) <= ISO11649_MAX_LENGTH:
        return False
    if not is_alphanumeric(reference):
        return False
    if not reference.startswith("RF") or not is_numeric(reference[2:4]):
        return False
    return has_valid_mod97_check_digits(reference)


def create_iso11649_reference(raw_reference: str) -> str:
    """
    Creates an ISO 11649 creditor reference by prefixing the raw reference
    with "RF" and the MOD97 check digits.

    Args:
        raw_reference: Alphanumeric payload of at most 21 characters,
            whitespace is ignored.

    Returns:
        The creditor reference, e.g. "RF91B334BOPQE39D902DC".

    Raises:
        ValueError: If the payload contains invalid characters or is too long.
    """
    raw = whitespace_removed(raw_reference)
    if not is_alphanumeric(raw):
        raise ValueError("Invalid character in reference (letters and digits allowed only)")
    if len(raw) > ISO11649_MAX_LENGTH - 4:
        raise ValueError("Reference is too long")

    modulo = calculate_mod97("RF00" + raw)
    return f"RF{98 - modulo:02d}{raw}"


def is_valid_text(text: Optional[str], character_set: CharacterSet = CharacterSet.LATIN1_SUBSET) -> bool:
    """Checks if the text only consists of characters of the character set."""
    return _is_valid_text(text, character_set)

