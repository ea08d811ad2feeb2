"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/utils/checksums.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Check digit algorithms for Swiss payments: MOD97 (ISO 7064,
                used by IBAN and ISO 11649 creditor references) and the
                recursive MOD10 used by QR references.
------------------------------------------------------------------------------
"""

# Carry table of the recursive MOD10 algorithm
MOD10_TABLE = (0, 9, 4, 6, 8, 2, 7, 1, 3, 5)

# Running sum is reduced modulo 97 once it exceeds this value
_MOD97_THRESHOLD = 9999999


def calculate_mod97(value: str) -> int:
    """
    Calculates the MOD97 checksum of an IBAN or creditor reference.

    The first four characters are moved to the end, digits are taken as-is
    and letters are mapped to 10..35 (case-insensitive).

    Args:
        value: Alphanumeric string with at least 5 characters.

    Returns:
        The remainder (0..96). A number with valid check digits yields 1.

    Raises:
        ValueError: If the value is too short or contains invalid characters.
    """
    if len(value) < 5:
        raise ValueError("Insufficient characters for checksum calculation")

    rearranged = value[4:] + value[:4]
    total = 0
    for ch in rearranged:
        if "0" <= ch <= "9":
            total = total * 10 + (ord(ch) - ord("0"))
        elif "A" <= ch <= "Z":
            total = total * 100 + (ord(ch) - ord("A") + 10)
        elif "a" <= ch <= "z":
            total = total * 100 + (ord(ch) - ord("a") + 10)
        else:
            raise ValueError(f"Invalid character in reference: {ch}")
        if total > _MOD97_THRESHOLD:
            total %= 97

    return total % 97


def has_valid_mod97_check_digits(value: str) -> bool:
    """Checks if the embedded MOD97 check digits are correct."""
    return calculate_mod97(value) == 1


def calculate_mod10(digits: str) -> int:
    """
    Calculates the recursive MOD10 check digit over a string of digits.

    Returns 0 if the string already ends with a valid check digit.
    """
    carry = 0
    for ch in digits:
        carry = MOD10_TABLE[(carry + ord(ch) - ord("0")) % 10]
    return (10 - carry) % 10
