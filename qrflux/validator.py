"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/validator.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validates QR bill data field by field. Produces an ordered
                list of errors and warnings and a new, cleaned bill. The input
                bill is never modified.
------------------------------------------------------------------------------
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from qrflux import constants as c
from qrflux.logger import get_logger
from qrflux.models.address import Address
from qrflux.models.bill import AlternativeScheme, Bill, reference_type_for
from qrflux.models.types import AddressType, MessageType, ReferenceType
from qrflux.models.validation import ValidationResult
from qrflux.utils.cleanup import clean_text, trimmed, whitespace_removed
from qrflux.utils.validation import (
    QR_REFERENCE_LENGTH,
    is_alpha,
    is_numeric,
    is_qr_iban,
    is_valid_iban,
    is_valid_iso11649_reference,
    is_valid_qr_reference,
)

logger = get_logger("validator")

_CENT = Decimal("0.01")
_MIN_AMOUNT = Decimal("0.00")
_MAX_AMOUNT = Decimal("999999999.99")
_AMOUNT_LIMIT = Decimal("1000000000")


def validate(bill: Bill) -> ValidationResult:
    """
    Validates the bill data.

    Args:
        bill: The bill to validate. It is not modified.

    Returns:
        The validation result with all messages and the cleaned bill.
    """
    result = _BillValidator(bill).validate()
    logger.debug(
        "Validated bill: %d message(s), errors=%s, warnings=%s",
        len(result.validation_messages), result.has_errors, result.has_warnings,
    )
    return result


class _BillValidator:
    """Single validation run. Collects messages and cleaned values."""

    def __init__(self, bill: Bill):
        self.bill_in = bill
        self.result = ValidationResult()
        self.character_set = bill.character_set

        self.account: Optional[str] = None
        self.creditor: Optional[Address] = None
        self.currency: Optional[str] = None
        self.amount: Optional[Decimal] = None
        self.debtor: Optional[Address] = None
        self.reference: Optional[str] = None
        self.unstructured_message: Optional[str] = None
        self.bill_information: Optional[str] = None
        self.alternative_schemes: Optional[List[AlternativeScheme]] = None

    def validate(self) -> ValidationResult:
        self._validate_account()
        self._validate_creditor()
        self._validate_currency()
        self._validate_amount()
        self._validate_debtor()
        self._validate_reference()
        self._validate_additional_information()
        self._validate_alternative_schemes()

        self.result.cleaned_bill = Bill(
            version=self.bill_in.version,
            account=self.account,
            creditor=self.creditor if self.creditor is not None else Address(),
            currency=self.currency,
            amount=self.amount,
            debtor=self.debtor,
            reference=self.reference,
            reference_type=reference_type_for(self.reference),
            unstructured_message=self.unstructured_message,
            bill_information=self.bill_information,
            alternative_schemes=self.alternative_schemes,
            separator=self.bill_in.separator,
            character_set=self.bill_in.character_set,
        )
        return self.result

    # --- Payment fields ---

    def _validate_account(self) -> None:
        account = trimmed(self.bill_in.account)
        if not self._validate_mandatory(account, c.FIELD_ACCOUNT):
            return

        account = whitespace_removed(account).upper()
        if not is_valid_iban(account):
            self._error(c.FIELD_ACCOUNT, c.KEY_ACCOUNT_IBAN_INVALID)
            return

        if not account.startswith(("CH", "LI")):
            self._error(c.FIELD_ACCOUNT, c.KEY_ACCOUNT_IBAN_NOT_FROM_CH_OR_LI)
        elif len(account) != c.IBAN_LENGTH_CH_LI:
            self._error(c.FIELD_ACCOUNT, c.KEY_ACCOUNT_IBAN_INVALID)
        else:
            self.account = account

    def _validate_currency(self) -> None:
        currency = trimmed(self.bill_in.currency)
        if not self._validate_mandatory(currency, c.FIELD_CURRENCY):
            return

        currency = currency.upper()
        if currency not in c.SUPPORTED_CURRENCIES:
            self._error(c.FIELD_CURRENCY, c.KEY_CURRENCY_NOT_CHF_OR_EUR)
        else:
            self.currency = currency

    def _validate_amount(self) -> None:
        amount = self.bill_in.amount
        if amount is None:
            # open amount
            return

        amount = Decimal(amount)
        # quantize() fails for values that exceed the context precision
        if not amount.is_finite() or abs(amount) >= _AMOUNT_LIMIT:
            self._error(c.FIELD_AMOUNT, c.KEY_AMOUNT_OUTSIDE_VALID_RANGE)
            return

        amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
        if amount < _MIN_AMOUNT or amount > _MAX_AMOUNT:
            self._error(c.FIELD_AMOUNT, c.KEY_AMOUNT_OUTSIDE_VALID_RANGE)
        else:
            # -0.00 would be written with a sign
            self.amount = amount.copy_abs() if amount == 0 else amount

    # --- Reference ---

    def _validate_reference(self) -> None:
        account = self.account
        is_qr_bill_iban = account is not None and is_qr_iban(account)

        reference = trimmed(self.bill_in.reference)
        has_reference_error = False
        if reference is not None:
            reference = whitespace_removed(reference)
            if is_numeric(reference):
                self._validate_qr_reference(reference)
            else:
                self._validate_iso_reference(reference)
            has_reference_error = self.reference is None

        reference_type = reference_type_for(self.reference)
        if is_qr_bill_iban:
            if reference_type == ReferenceType.NO_REF.value and not has_reference_error:
                self._error(c.FIELD_REFERENCE, c.KEY_QR_REF_MISSING)
            elif reference_type == ReferenceType.CREDITOR_REF.value:
                self._error(c.FIELD_REFERENCE, c.KEY_CRED_REF_INVALID_USE_FOR_QR_IBAN)
        elif account is not None:
            if reference_type == ReferenceType.QR_REF.value:
                self._error(c.FIELD_REFERENCE, c.KEY_QR_REF_INVALID_USE_FOR_NON_QR_IBAN)

    def _validate_qr_reference(self, reference: str) -> None:
        reference = reference.rjust(QR_REFERENCE_LENGTH, "0")
        if not is_valid_qr_reference(reference):
            self._error(c.FIELD_REFERENCE, c.KEY_REF_INVALID)
            return

        self.reference = reference
        if self.bill_in.reference_type != ReferenceType.QR_REF.value:
            self._error(c.FIELD_REFERENCE_TYPE, c.KEY_REF_TYPE_INVALID)

    def _validate_iso_reference(self, reference: str) -> None:
        if not is_valid_iso11649_reference(reference):
            self._error(c.FIELD_REFERENCE, c.KEY_REF_INVALID)
            return

        self.reference = reference
        if self.bill_in.reference_type != ReferenceType.CREDITOR_REF.value:
            self._error(c.FIELD_REFERENCE_TYPE, c.KEY_REF_TYPE_INVALID)

    # --- Additional information ---

    def _validate_additional_information(self) -> None:
        bill_information = trimmed(self.bill_in.bill_information)
        unstructured_message = trimmed(self.bill_in.unstructured_message)

        if bill_information is not None and (not bill_information.startswith("//") or len(bill_information) < 4):
            self._error(c.FIELD_BILL_INFORMATION, c.KEY_BILL_INFO_INVALID)
            bill_information = None

        if bill_information is None and unstructured_message is None:
            return

        if bill_information is None:
            unstructured_message = self._cleaned_value(unstructured_message, c.FIELD_UNSTRUCTURED_MESSAGE)
            if self._validate_length(unstructured_message, c.MAX_ADDITIONAL_INFO_LENGTH, c.FIELD_UNSTRUCTURED_MESSAGE):
                self.unstructured_message = unstructured_message

        elif unstructured_message is None:
            bill_information = self._cleaned_value(bill_information, c.FIELD_BILL_INFORMATION)
            if self._validate_length(bill_information, c.MAX_ADDITIONAL_INFO_LENGTH, c.FIELD_BILL_INFORMATION):
                self.bill_information = bill_information

        else:
            bill_information = self._cleaned_value(bill_information, c.FIELD_BILL_INFORMATION)
            unstructured_message = self._cleaned_value(unstructured_message, c.FIELD_UNSTRUCTURED_MESSAGE)
            combined_length = len(bill_information or "") + len(unstructured_message or "")
            if combined_length > c.MAX_ADDITIONAL_INFO_LENGTH:
                self._error(c.FIELD_UNSTRUCTURED_MESSAGE, c.KEY_ADDITIONAL_INFO_TOO_LONG)
                self._error(c.FIELD_BILL_INFORMATION, c.KEY_ADDITIONAL_INFO_TOO_LONG)
            else:
                self.unstructured_message = unstructured_message
                self.bill_information = bill_information

    def _validate_alternative_schemes(self) -> None:
        schemes_in = self.bill_in.alternative_schemes
        if schemes_in is None:
            return

        schemes_out: List[AlternativeScheme] = []
        for scheme_in in schemes_in:
            scheme_out = AlternativeScheme(
                name=trimmed(scheme_in.name),
                instruction=trimmed(scheme_in.instruction),
            )
            if scheme_out.name is None and scheme_out.instruction is None:
                continue
            if self._validate_length(scheme_out.instruction, c.MAX_ALT_SCHEME_LENGTH, c.FIELD_ALTERNATIVE_SCHEMES):
                schemes_out.append(scheme_out)

        if len(schemes_out) > c.MAX_ALT_SCHEMES:
            self._error(c.FIELD_ALTERNATIVE_SCHEMES, c.KEY_ALT_SCHEME_MAX_EXCEEDED)
            schemes_out = schemes_out[:c.MAX_ALT_SCHEMES]

        self.alternative_schemes = schemes_out or None

    # --- Addresses ---

    def _validate_creditor(self) -> None:
        self.creditor = self._validate_address(self.bill_in.creditor, c.FIELDROOT_CREDITOR, True)

    def _validate_debtor(self) -> None:
        self.debtor = self._validate_address(self.bill_in.debtor, c.FIELDROOT_DEBTOR, False)

    def _validate_address(self, address_in: Optional[Address], field_root: str, mandatory: bool) -> Optional[Address]:
        address_out = self._cleaned_person(address_in, field_root)
        if address_out is None:
            if mandatory:
                for subfield in (c.SUBFIELD_NAME, c.SUBFIELD_POSTAL_CODE, c.SUBFIELD_ADDRESS_LINE_2,
                                 c.SUBFIELD_TOWN, c.SUBFIELD_COUNTRY_CODE):
                    self._error(field_root + subfield, c.KEY_FIELD_VALUE_MISSING)
            return None

        if address_out.type is AddressType.CONFLICTING:
            self._emit_errors_for_conflicting_type(address_out, field_root)

        self._check_mandatory_address_fields(address_out, field_root)

        country_code = address_out.country_code
        if country_code is not None and (len(country_code) != 2 or not is_alpha(country_code)):
            self._error(field_root + c.SUBFIELD_COUNTRY_CODE, c.KEY_COUNTRY_CODE_INVALID)

        self._clip_address_fields(address_out, field_root)
        return address_out

    def _cleaned_person(self, address_in: Optional[Address], field_root: str) -> Optional[Address]:
        """
        Creates a new address with cleaned field values. Only non-empty
        structured/combined values are written so the address type reflects
        the cleaned data.

        Returns:
            The cleaned address or None if it is empty.
        """
        if address_in is None:
            return None

        address_out = Address(name=self._cleaned_value(address_in.name, field_root + c.SUBFIELD_NAME))
        for attr, subfield in (
            ("address_line1", c.SUBFIELD_ADDRESS_LINE_1),
            ("address_line2", c.SUBFIELD_ADDRESS_LINE_2),
            ("street", c.SUBFIELD_STREET),
            ("house_no", c.SUBFIELD_HOUSE_NO),
            ("postal_code", c.SUBFIELD_POSTAL_CODE),
            ("town", c.SUBFIELD_TOWN),
        ):
            value = self._cleaned_value(getattr(address_in, attr), field_root + subfield)
            if value is not None:
                setattr(address_out, attr, value)
        address_out.country_code = trimmed(address_in.country_code)

        if (address_out.name is None and address_out.country_code is None
                and address_out.type is AddressType.UNDETERMINED):
            return None
        return address_out

    def _emit_errors_for_conflicting_type(self, address: Address, field_root: str) -> None:
        for attr, subfield in (
            ("address_line1", c.SUBFIELD_ADDRESS_LINE_1),
            ("address_line2", c.SUBFIELD_ADDRESS_LINE_2),
            ("street", c.SUBFIELD_STREET),
            ("house_no", c.SUBFIELD_HOUSE_NO),
            ("postal_code", c.SUBFIELD_POSTAL_CODE),
            ("town", c.SUBFIELD_TOWN),
        ):
            if getattr(address, attr) is not None:
                self._error(field_root + subfield, c.KEY_ADDRESS_TYPE_CONFLICT)

    def _check_mandatory_address_fields(self, address: Address, field_root: str) -> None:
        address_type = address.type
        self._validate_mandatory(address.name, field_root + c.SUBFIELD_NAME)
        if address_type in (AddressType.STRUCTURED, AddressType.UNDETERMINED):
            self._validate_mandatory(address.postal_code, field_root + c.SUBFIELD_POSTAL_CODE)
            self._validate_mandatory(address.town, field_root + c.SUBFIELD_TOWN)
        if address_type in (AddressType.COMBINED_ELEMENTS, AddressType.UNDETERMINED):
            self._validate_mandatory(address.address_line2, field_root + c.SUBFIELD_ADDRESS_LINE_2)
        self._validate_mandatory(address.country_code, field_root + c.SUBFIELD_COUNTRY_CODE)

    def _clip_address_fields(self, address: Address, field_root: str) -> None:
        address.name = self._clipped_value(address.name, c.MAX_NAME_LENGTH, field_root + c.SUBFIELD_NAME)
        if address.type is AddressType.STRUCTURED:
            address.street = self._clipped_value(
                address.street, c.MAX_STREET_LENGTH, field_root + c.SUBFIELD_STREET)
            address.house_no = self._clipped_value(
                address.house_no, c.MAX_HOUSE_NO_LENGTH, field_root + c.SUBFIELD_HOUSE_NO)
            address.postal_code = self._clipped_value(
                address.postal_code, c.MAX_POSTAL_CODE_LENGTH, field_root + c.SUBFIELD_POSTAL_CODE)
            address.town = self._clipped_value(
                address.town, c.MAX_TOWN_LENGTH, field_root + c.SUBFIELD_TOWN)
        if address.type is AddressType.COMBINED_ELEMENTS:
            address.address_line1 = self._clipped_value(
                address.address_line1, c.MAX_ADDRESS_LINE_LENGTH, field_root + c.SUBFIELD_ADDRESS_LINE_1)
            address.address_line2 = self._clipped_value(
                address.address_line2, c.MAX_ADDRESS_LINE_LENGTH, field_root + c.SUBFIELD_ADDRESS_LINE_2)
        if address.country_code is not None:
            address.country_code = address.country_code.upper()

    # --- Helpers ---

    def _error(self, field: str, message_key: str, params: Optional[List[str]] = None) -> None:
        self.result.add_message(MessageType.ERROR, field, message_key, params)

    def _warning(self, field: str, message_key: str, params: Optional[List[str]] = None) -> None:
        self.result.add_message(MessageType.WARNING, field, message_key, params)

    def _validate_mandatory(self, value: Optional[str], field: str) -> bool:
        if value:
            return True
        self._error(field, c.KEY_FIELD_VALUE_MISSING)
        return False

    def _validate_length(self, value: Optional[str], max_length: int, field: str) -> bool:
        if value is None or len(value) <= max_length:
            return True
        self._error(field, c.KEY_FIELD_VALUE_TOO_LONG, [str(max_length)])
        return False

    def _clipped_value(self, value: Optional[str], max_length: int, field: str) -> Optional[str]:
        if value is None or len(value) <= max_length:
            return value
        self._warning(field, c.KEY_FIELD_VALUE_CLIPPED, [str(max_length)])
        return value[:max_length]

    def _cleaned_value(self, value: Optional[str], field: str) -> Optional[str]:
        cleaning = clean_text(value, self.character_set, True)
        if cleaning.replaced_unsupported_chars:
            self._warning(field, c.KEY_REPLACED_UNSUPPORTED_CHARACTERS)
        return cleaning.cleaned_string
