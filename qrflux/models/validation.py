"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/models/validation.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validation messages and the result of a bill validation,
                including human readable English descriptions.
------------------------------------------------------------------------------
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from qrflux import constants as c
from .bill import Bill
from .types import MessageType

# English descriptions; {0} is the field name, {1} the first parameter
_DESCRIPTIONS = {
    c.KEY_CURRENCY_NOT_CHF_OR_EUR: 'currency should be "CHF" or "EUR"',
    c.KEY_AMOUNT_OUTSIDE_VALID_RANGE: "amount should be between 0.00 and 999 999 999.99",
    c.KEY_ACCOUNT_IBAN_NOT_FROM_CH_OR_LI: 'account number should start with "CH" or "LI"',
    c.KEY_ACCOUNT_IBAN_INVALID: "account number is not a valid IBAN (invalid format or checksum)",
    c.KEY_REF_INVALID: "reference is invalid; it is neither a valid QR reference nor a valid ISO 11649 reference",
    c.KEY_QR_REF_MISSING: "QR reference is missing; it is mandatory for payments to a QR-IBAN account",
    c.KEY_CRED_REF_INVALID_USE_FOR_QR_IBAN:
        "for payments to a QR-IBAN account, a QR reference is required (an ISO 11649 reference may not be used)",
    c.KEY_QR_REF_INVALID_USE_FOR_NON_QR_IBAN: "a QR reference is only allowed for payments to a QR-IBAN account",
    c.KEY_REF_TYPE_INVALID: 'reference type should be one of "QRR", "SCOR" and "NON" and match the reference',
    c.KEY_FIELD_VALUE_MISSING: 'field "{0}" may not be empty',
    c.KEY_ADDRESS_TYPE_CONFLICT: "fields for either structured address or combined elements address may be filled but not both",
    c.KEY_COUNTRY_CODE_INVALID: "country code is invalid; it should consist of two letters",
    c.KEY_FIELD_VALUE_CLIPPED:
        'the value for field "{0}" has been clipped to not exceed the maximum length of {1} characters',
    c.KEY_FIELD_VALUE_TOO_LONG: 'the value for field "{0}" should not exceed a length of {1} characters',
    c.KEY_ADDITIONAL_INFO_TOO_LONG:
        "the additional information and the structured bill information combined should not exceed 140 characters",
    c.KEY_REPLACED_UNSUPPORTED_CHARACTERS: 'unsupported characters have been replaced in field "{0}"',
    c.KEY_ALT_SCHEME_MAX_EXCEEDED: "no more than two alternative schemes may be used",
    c.KEY_BILL_INFO_INVALID: 'structured bill information must start with "//"',
    c.KEY_DATA_STRUCTURE_INVALID: "the data structure of the QR code text is invalid",
    c.KEY_VERSION_UNSUPPORTED: "the QR code text version is not supported (only version 2.x)",
    c.KEY_CODING_TYPE_UNSUPPORTED: 'the coding type is not supported (only "1" for UTF-8)',
    c.KEY_NUMBER_INVALID: 'the value for field "{0}" is not a valid number',
}


class ValidationMessage(BaseModel):
    """
    Single validation message.

    Errors reject the field value; warnings report an automatic adjustment
    (e.g. clipped value or replaced characters).
    """
    type: MessageType
    field: str
    message_key: str
    message_parameters: Optional[List[str]] = None

    @property
    def description(self) -> str:
        """English description of the message."""
        template = _DESCRIPTIONS.get(self.message_key)
        if template is None:
            return "Unknown error"
        params = self.message_parameters or []
        return template.format(self.field, *params)


class ValidationResult(BaseModel):
    """Ordered validation messages and the cleaned bill."""
    validation_messages: List[ValidationMessage] = Field(default_factory=list)
    cleaned_bill: Optional[Bill] = None

    @property
    def has_messages(self) -> bool:
        return len(self.validation_messages) > 0

    @property
    def has_warnings(self) -> bool:
        return any(msg.type == MessageType.WARNING for msg in self.validation_messages)

    @property
    def has_errors(self) -> bool:
        return any(msg.type == MessageType.ERROR for msg in self.validation_messages)

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    def add_message(self, message_type: MessageType, field: str, message_key: str,
                    message_parameters: Optional[List[str]] = None) -> None:
        """Appends a validation message."""
        self.validation_messages.append(ValidationMessage(
            type=message_type,
            field=field,
            message_key=message_key,
            message_parameters=message_parameters,
        ))

    @property
    def description(self) -> str:
        """
        Description of all errors, separated by "; ".
        Each description is followed by its message key in parentheses.
        """
        if not self.has_errors:
            return "Valid bill data"
        return "; ".join(
            f"{msg.description} ({msg.message_key})"
            for msg in self.validation_messages
            if msg.type == MessageType.ERROR
        )
