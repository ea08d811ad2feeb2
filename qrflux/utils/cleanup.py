"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/utils/cleanup.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Text cleanup for QR bill fields. Characters outside of the
                selected character set are repaired (Unicode composition),
                replaced by similar characters (decomposition, lookup tables)
                or by a single placeholder dot.
------------------------------------------------------------------------------
"""

import bisect
import unicodedata
from dataclasses import dataclass
from typing import Optional, Protocol

from qrflux.logger import get_logger

logger = get_logger("cleanup")


class Repertoire(Protocol):
    """Anything that can tell whether a code point is permitted."""

    def contains(self, code_point: int) -> bool: ...


# Sorted by code point. Each character maps to a single character of the
# Latin-1 subset at the same position in _QUICK_REPLACEMENTS_TO.
_QUICK_REPLACEMENTS_FROM = (
    "¨¯¸ÃÅÕÝãåõÿĀāĂăĄąĆćĈĉĊċČčĎďĒēĔĕĖėĘęĚěĜĝĞğĠġĢģĤĥĨĩĪīĬĭĮįİĴĵĶķĹĺĻļĽľŃńŅņŇňŌōŎŏŐőŔŕŖŗŘřŚśŜŝŞşŠšŢţŤťŨũŪūŬŭŮůŰűŲųŴŵŶŷŸŹźŻżŽžƠơƯưǍǎǏǐǑǒǓǔǕǖǗǘǙǚǛǜǞǟǠǡǦǧǨǩǪǫǬǭǰǴǵǸǹǺǻȀȁȂȃȄȅȆȇȈȉȊȋȌȍȎȏȐȑȒȓȔȕȖȗȘșȚțȞȟȦȧȨȩȪȫȬȭȮȯȰȱȲȳ˘˙˚˛˜˝ͺ΄΅ḀḁḂḃḄḅḆḇḈḉḊḋḌḍḎḏḐḑḒḓḔḕḖḗḘḙḚḛḜḝḞḟḠḡḢḣḤḥḦḧḨḩḪḫḬḭḮḯḰḱḲḳḴḵḶḷḸḹḺḻḼḽḾḿṀṁṂṃṄṅṆṇṈṉṊṋṌṍṎṏṐṑṒṓṔṕṖṗṘṙṚṛṜṝṞṟṠṡṢṣṤṥṦṧṨṩṪṫṬṭṮṯṰṱṲṳṴṵṶṷṸṹṺṻṼṽṾṿẀẁẂẃẄẅẆẇẈẉẊẋẌẍẎẏẐẑẒẓẔẕẖẗẘẙẛẠạẢảẤấẦầẨẩẪẫẬậẮắẰằẲẳẴẵẶặẸẹẺẻẼẽẾếỀềỂểỄễỆệỈỉỊịỌọỎỏỐốỒồỔổỖỗỘộỚớỜờỞởỠỡỢợỤụỦủỨứỪừỬửỮữỰựỲỳỴỵỶỷỸỹ᾽᾿῀῁῍῎῏῝῞῟῭΅´῾‗‾Å≠≮≯﹉﹊﹋﹌￣"
)
_QUICK_REPLACEMENTS_TO = (
    "   AAOYaaoyAaAaAaCcCcCcCcDdEeEeEeEeEeGgGgGgGgHhIiIiIiIiIJjKkLlLlLlNnNnNnOoOoOoRrRrRrSsSsSsSsTtTtUuUuUuUuUuUuWwYyYZzZzZzOoUuAaIiOoUuUuUuUuUuAaAaGgKkOoOojGgNnAaAaAaEeEeIiIiOoOoRrRrUuUuSsTtHhAaEeOoOoOoOoYy         AaBbBbBbCcDdDdDdDdDdEeEeEeEeEeFfGgHhHhHhHhHhIiIiKkKkKkLlLlLlLlMmMmMmNnNnNnNnOoOoOoOoPpPpRrRrRrRrSsSsSsSsSsTtTtTtTtUuUuUuUuUuVvVvWwWwWwWwWwXxXxYyZzZzZzhtwysAaAaAaAaAaAaAaAaAaAaAaAaEeEeEeEeEeEeEeEeIiIiOoOoOoOoOoOoOoOoOoOoOoOoUuUuUuUuUuUuUuYyYyYyYy                A=<>     "
)

# Replacements not covered by Unicode decomposition
_ADDITIONAL_REPLACEMENTS = {
    "Œ": "OE",
    "œ": "oe",
    "Æ": "AE",
    "æ": "ae",
    "Ǣ": "AE",
    "ǣ": "ae",
    "Ǽ": "AE",
    "ǽ": "ae",
    "Ǿ": "O",
    "ǿ": "o",
    "ȸ": "db",
    "ȹ": "qp",
    "Ø": "O",
    "ø": "o",
    "€": "E",
    "^": ".",
    "¡": "! ",
    "¢": "c",
    "¤": " ",
    "¥": "Y",
    "¦": "/",
    "§": "S",
    "©": "(c)",
    "«": "<<",
    "¬": "-",
    "­": "",  # soft hyphen
    "®": "(r)",
    "°": "o",
    "±": "+-",
    "µ": "u",
    "¶": "P",
    "·": "-",
    "»": ">>",
    "¿": "? ",
    "Ð": "D",
    "×": "x",
    "Þ": "TH",
    "ð": "d",
    "þ": "th",
    "Đ": "D",
    "đ": "d",
    "Ħ": "H",
    "ħ": "h",
    "ı": "i",
    "ĸ": "k",
    "Ŀ": "L",
    "ŀ": "l",
    "Ł": "L",
    "ł": "l",
    "ŉ": "n",
    "Ŋ": "N",
    "ŋ": "n",
    "Ŧ": "T",
    "ŧ": "t",
    "⁄": "/",  # fraction slash
}

_FRACTION_SLASH = "⁄"
_PLACEHOLDER = "."


@dataclass(frozen=True)
class CleaningResult:
    """Cleaned text and whether unsupported characters had to be replaced."""
    cleaned_string: Optional[str] = None
    replaced_unsupported_chars: bool = False


def is_valid_text(text: Optional[str], character_set: Repertoire) -> bool:
    """
    Checks if all characters of the text are part of the character set.

    Letters built from a base letter and a combining accent are not
    recognized as valid. None is valid.
    """
    if text is None:
        return True
    return all(character_set.contains(ord(ch)) for ch in text)


def clean_text(text: Optional[str], character_set: Repertoire, trim_whitespace: bool = False) -> CleaningResult:
    """
    Cleans the text for use in a QR bill.

    1. Text consisting of valid characters only is returned unchanged.
    2. Otherwise it is converted to NFC and checked again.
    3. Otherwise each invalid code point is replaced (see _replace_code_point);
       consecutive code points without replacement become a single dot.

    Args:
        text: The text to clean, possibly None.
        character_set: The permitted characters.
        trim_whitespace: Remove leading/trailing whitespace and collapse
            runs of spaces into a single space.

    Returns:
        CleaningResult. The cleaned string is None if the result is empty.
    """
    if text is None:
        return CleaningResult()

    replaced = False
    if not is_valid_text(text, character_set):
        normalized = unicodedata.normalize("NFC", text)
        if normalized != text and is_valid_text(normalized, character_set):
            text = normalized
        else:
            text = _replace_characters(normalized, character_set)
            replaced = True
            logger.debug("Replaced unsupported characters in text of length %d", len(normalized))

    if trim_whitespace:
        text = spaces_cleaned(text)
    return CleaningResult(text if text else None, replaced)


def cleaned_text(text: Optional[str], character_set: Repertoire) -> Optional[str]:
    """Returns the cleaned text (see clean_text) without trimming."""
    return clean_text(text, character_set, False).cleaned_string


def cleaned_and_trimmed_text(text: Optional[str], character_set: Repertoire) -> Optional[str]:
    """Returns the cleaned text with whitespace trimmed and collapsed."""
    return clean_text(text, character_set, True).cleaned_string


def _replace_characters(text: str, character_set: Repertoire) -> str:
    parts = []
    in_fallback = False
    for ch in text:
        if character_set.contains(ord(ch)):
            parts.append(ch)
            in_fallback = False
            continue

        replacement = _replace_code_point(ch, character_set)
        if replacement is not None:
            parts.append(replacement)
            in_fallback = False
        elif not in_fallback:
            parts.append(_PLACEHOLDER)
            in_fallback = True
    return "".join(parts)


def _replace_code_point(ch: str, character_set: Repertoire) -> Optional[str]:
    # whitespace is replaced with a space
    if _is_whitespace(ch):
        return " "

    # precomputed single character replacements
    pos = bisect.bisect_left(_QUICK_REPLACEMENTS_FROM, ch)
    if pos < len(_QUICK_REPLACEMENTS_FROM) and _QUICK_REPLACEMENTS_FROM[pos] == ch:
        return _QUICK_REPLACEMENTS_TO[pos]

    canonical = _decomposed_string(ch, character_set, "NFD")
    if canonical is not None:
        return canonical

    compatibility = _decomposed_string(ch, character_set, "NFKD")
    if compatibility is not None:
        return compatibility

    return _ADDITIONAL_REPLACEMENTS.get(ch)


def _decomposed_string(ch: str, character_set: Repertoire, form: str) -> Optional[str]:
    """
    Decomposes the character and returns the result if it consists of valid
    characters, optionally followed by a single combining diacritical mark
    (which is dropped). Returns None otherwise.
    """
    decomposed = unicodedata.normalize(form, ch)
    has_fraction_slash = False
    last = len(decomposed) - 1
    for i, part in enumerate(decomposed):
        if character_set.contains(ord(part)):
            continue
        if i == last and _is_combining_diacritical_mark(part):
            return decomposed[:i]
        if part == _FRACTION_SLASH:
            has_fraction_slash = True
        else:
            return None

    if has_fraction_slash:
        return decomposed.replace(_FRACTION_SLASH, "/")
    return decomposed


def _is_combining_diacritical_mark(ch: str) -> bool:
    return "̀" <= ch <= "ͯ"


def _is_whitespace(ch: str) -> bool:
    # Unlike str.isspace(), the information separators U+001C..U+001F are not whitespace
    if "\t" <= ch <= "\r" or ch == "\x85":
        return True
    return unicodedata.category(ch) in ("Zs", "Zl", "Zp")


def spaces_cleaned(value: str) -> str:
    """Trims the value and collapses runs of spaces into a single space."""
    value = value.strip()
    parts = []
    in_whitespace = False
    for ch in value:
        if ch == " " and in_whitespace:
            continue
        in_whitespace = ch == " "
        parts.append(ch)
    return "".join(parts)


def trimmed(value: Optional[str]) -> Optional[str]:
    """Strips whitespace and returns None for empty results."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def whitespace_removed(value: str) -> str:
    """Removes all spaces and control characters (code points <= 0x20)."""
    return "".join(ch for ch in value if ch > " ")
