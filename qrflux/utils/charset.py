"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/utils/charset.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Character sets of the Swiss Payment Standards. Each character
                set answers whether a Unicode code point is permitted in the
                text fields of a QR bill.
------------------------------------------------------------------------------
"""

from enum import Enum

# Code points between 0xC0 and 0xFD that are not part of the Latin-1 subset
_LATIN1_GAPS = frozenset((
    0xC3, 0xC5, 0xC6,
    0xD0, 0xD5, 0xD7, 0xD8,
    0xDD, 0xDE,
    0xE3, 0xE5, 0xE6,
    0xF0, 0xF5, 0xF8,
))


def _in_latin1_subset(code_point: int) -> bool:
    if code_point < 0x20:
        return False
    if code_point == 0x5E:
        return False
    if code_point <= 0x7E:
        return True
    if code_point in (0xA3, 0xB4):
        return True
    if code_point < 0xC0 or code_point > 0xFD:
        return False
    return code_point not in _LATIN1_GAPS


def _in_extended_latin(code_point: int) -> bool:
    # Basic Latin
    if 0x20 <= code_point <= 0x7E:
        return True
    # Latin-1 Supplement and Latin Extended-A
    if 0xA0 <= code_point <= 0x17F:
        return True
    # S and T with comma below
    if 0x218 <= code_point <= 0x21B:
        return True
    return code_point == 0x20AC


class CharacterSet(str, Enum):
    """
    Character set for the text fields of a QR bill.

    LATIN1_SUBSET is the restrictive set valid since version 2.0 of the
    standard and supported by all banks. EXTENDED_LATIN adds the characters
    of the SEPA character set (Latin-1 Supplement, Latin Extended-A, Euro
    sign). FULL_UNICODE accepts every code point.
    """
    LATIN1_SUBSET = "LATIN1_SUBSET"
    EXTENDED_LATIN = "EXTENDED_LATIN"
    FULL_UNICODE = "FULL_UNICODE"

    def contains(self, code_point: int) -> bool:
        """Checks if the code point is part of this character set."""
        if self is CharacterSet.LATIN1_SUBSET:
            return _in_latin1_subset(code_point)
        if self is CharacterSet.EXTENDED_LATIN:
            return _in_extended_latin(code_point)
        return True


class LegacyCharacterSet:
    """
    The fixed character set of the first generation of QR bill software.

    Kept for callers that validate text against the historical rule set;
    the permitted code points match the Latin-1 subset.
    """

    def contains(self, code_point: int) -> bool:
        if code_point > 0xFFFF:
            return False
        return _in_latin1_subset(code_point)

    def __repr__(self) -> str:
        return "LegacyCharacterSet()"


LEGACY_CHARACTER_SET = LegacyCharacterSet()
