"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/qr_text.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Encodes bill data into the text embedded in the Swiss QR code
                and decodes such text back into bill data.
                Reference: Swiss Implementation Guidelines QR-bill, ch. 4.3
------------------------------------------------------------------------------
"""

import re
from decimal import Decimal
from typing import List, Optional

from qrflux import constants as c
from qrflux.exceptions import DecodeError, QRBillDecodeError
from qrflux.logger import get_logger
from qrflux.models.address import Address
from qrflux.models.bill import AlternativeScheme, Bill
from qrflux.models.types import AddressType, QrBillStandardVersion, QrDataSeparator
from qrflux.utils.formatting import format_amount_for_code

logger = get_logger("codec")

_VALID_VERSION = re.compile(r"^02\d\d$")
# Invariant number format: '.' as decimal point, no grouping
_VALID_AMOUNT = re.compile(r"^\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)\s*$")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_MIN_LINES = 31
_MAX_LINES = 34
_ADDRESS_LINES = 7

# Line offsets
_LINE_ACCOUNT = 3
_LINE_CREDITOR = 4
_LINE_AMOUNT = 18
_LINE_CURRENCY = 19
_LINE_DEBTOR = 20
_LINE_REFERENCE_TYPE = 27
_LINE_REFERENCE = 28
_LINE_UNSTRUCTURED_MESSAGE = 29
_LINE_TRAILER = 30
_LINE_BILL_INFORMATION = 31
_LINE_ALT_SCHEMES = 32


def encode(bill: Bill) -> str:
    """
    Creates the text embedded in the QR code.

    The bill data should already be validated and cleaned. Missing values
    are written as empty lines.

    Args:
        bill: The (cleaned) bill data.

    Returns:
        The QR code text, lines separated according to bill.separator.
    """
    lines = [
        c.QR_TYPE,                     # QRType
        c.VERSION_0200,                # Version
        c.CODING_TYPE_UTF8,            # Coding
        bill.account,                  # IBAN
    ]
    lines += _address_lines(bill.creditor)   # Cdtr
    lines += _address_lines(None)            # UltmtCdtr (reserved)
    lines += [
        format_amount_for_code(bill.amount),  # Amt
        bill.currency,                        # Ccy
    ]
    lines += _address_lines(bill.debtor)     # UltmtDbtr
    lines += [
        bill.reference_type,           # Tp
        bill.reference,                # Ref
        bill.unstructured_message,     # Unstrd
        c.TRAILER_EPD,                 # Trailer
    ]

    schemes = bill.alternative_schemes or []
    if schemes or bill.bill_information is not None:
        lines.append(bill.bill_information)  # StrdBkgInf
    for scheme in schemes[:c.MAX_ALT_SCHEMES]:
        lines.append(scheme.instruction)     # AltPmt

    text = bill.separator.newline.join(line or "" for line in lines)
    logger.debug("Encoded QR code text with %d lines", len(lines))
    return text


def _address_lines(address: Optional[Address]) -> List[Optional[str]]:
    if address is None:
        return [None] * _ADDRESS_LINES

    structured = address.type is AddressType.STRUCTURED
    return [
        c.ADDRESS_TYPE_STRUCTURED if structured else c.ADDRESS_TYPE_COMBINED,  # AdrTp
        address.name,                                                # Name
        address.street if structured else address.address_line1,     # StrtNmOrAdrLine1
        address.house_no if structured else address.address_line2,   # BldgNbOrAdrLine2
        address.postal_code,                                         # PstCd
        address.town,                                                # TwnNm
        address.country_code,                                        # Ctry
    ]


def decode(text: str, allow_invalid_amount: bool = False) -> Bill:
    """
    Decodes the text embedded in a QR code.

    Only the structure (line count, header, trailer) and the amount are
    checked. Use the validator for a full validation of the result.

    Args:
        text: The QR code text.
        allow_invalid_amount: Decode an unparsable amount as None instead
            of raising.

    Returns:
        The decoded bill data.

    Raises:
        QRBillDecodeError: If the text is not valid QR bill data. The error
            result contains exactly one message.
    """
    lines = _LINE_BREAK.split(text)
    if not _MIN_LINES <= len(lines) <= _MAX_LINES:
        # A trailing line break is illegal but found in practice
        if len(lines) == _MAX_LINES + 1 and lines[_MAX_LINES] == "":
            logger.warning("QR code text ends with an extra line break; ignoring it")
        else:
            raise QRBillDecodeError(DecodeError.QR_TYPE, c.KEY_DATA_STRUCTURE_INVALID)

    if lines[0] != c.QR_TYPE:
        raise QRBillDecodeError(DecodeError.QR_TYPE, c.KEY_DATA_STRUCTURE_INVALID)
    if not _VALID_VERSION.match(lines[1]):
        raise QRBillDecodeError(DecodeError.VERSION, c.KEY_VERSION_UNSUPPORTED)
    if lines[2] != c.CODING_TYPE_UTF8:
        raise QRBillDecodeError(DecodeError.CODING_TYPE, c.KEY_CODING_TYPE_UNSUPPORTED)

    bill = Bill(
        version=QrBillStandardVersion.V2_0,
        separator=QrDataSeparator.CRLF if "\r\n" in text else QrDataSeparator.LF,
        account=_optional(lines[_LINE_ACCOUNT]),
        creditor=_decode_address(lines, _LINE_CREDITOR, False),
    )

    bill.amount = _decode_amount(lines[_LINE_AMOUNT], allow_invalid_amount)
    bill.currency = _optional(lines[_LINE_CURRENCY])
    bill.debtor = _decode_address(lines, _LINE_DEBTOR, True)

    # Reference first: setting it derives the reference type
    bill.reference = _optional(lines[_LINE_REFERENCE])
    bill.reference_type = lines[_LINE_REFERENCE_TYPE]
    bill.unstructured_message = _optional(lines[_LINE_UNSTRUCTURED_MESSAGE])

    if lines[_LINE_TRAILER] != c.TRAILER_EPD:
        raise QRBillDecodeError(DecodeError.TRAILER, c.KEY_DATA_STRUCTURE_INVALID)

    if len(lines) > _LINE_BILL_INFORMATION:
        bill.bill_information = _optional(lines[_LINE_BILL_INFORMATION])

    instructions = lines[_LINE_ALT_SCHEMES:]
    if instructions and instructions[-1] == "":
        logger.warning("Ignoring empty alternative scheme at end of QR code text")
        instructions = instructions[:-1]
    bill.alternative_schemes = [AlternativeScheme(instruction=_optional(i)) for i in instructions] or None

    logger.debug("Decoded QR code text with %d lines", len(lines))
    return bill


def _optional(value: str) -> Optional[str]:
    """Empty lines stand for missing values."""
    return value if value else None


def _decode_amount(value: str, allow_invalid_amount: bool) -> Optional[Decimal]:
    if not value:
        return None
    if _VALID_AMOUNT.match(value):
        return Decimal(value.strip())
    if allow_invalid_amount:
        logger.warning("Ignoring invalid amount in QR code text: %r", value)
        return None
    raise QRBillDecodeError(DecodeError.AMOUNT, c.KEY_NUMBER_INVALID)


def _decode_address(lines: List[str], start: int, optional: bool) -> Optional[Address]:
    fields = lines[start:start + _ADDRESS_LINES]
    if optional and all(f == "" for f in fields):
        return None

    addr_type, name, line1, line2, postal_code, town, country_code = fields
    address = Address()
    address.name = _optional(name)
    if addr_type == c.ADDRESS_TYPE_STRUCTURED:
        address.street = _optional(line1)
        address.house_no = _optional(line2)
    else:
        address.address_line1 = _optional(line1)
        address.address_line2 = _optional(line2)
    if postal_code:
        address.postal_code = postal_code
    if town:
        address.town = town
    address.country_code = _optional(country_code)
    return address
