"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/constants.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Field names, message keys and limits shared by the validator
                and the QR code text codec.
------------------------------------------------------------------------------
"""

# --- Message keys ---
KEY_CURRENCY_NOT_CHF_OR_EUR = "currency_not_chf_or_eur"
KEY_AMOUNT_OUTSIDE_VALID_RANGE = "amount_outside_valid_range"
KEY_ACCOUNT_IBAN_NOT_FROM_CH_OR_LI = "account_iban_not_from_ch_or_li"
KEY_ACCOUNT_IBAN_INVALID = "account_iban_invalid"
KEY_REF_INVALID = "ref_invalid"
KEY_QR_REF_MISSING = "qr_ref_missing"
KEY_CRED_REF_INVALID_USE_FOR_QR_IBAN = "cred_ref_invalid_use_for_qr_iban"
KEY_QR_REF_INVALID_USE_FOR_NON_QR_IBAN = "qr_ref_invalid_use_for_non_qr_iban"
KEY_REF_TYPE_INVALID = "ref_type_invalid"
KEY_FIELD_VALUE_MISSING = "field_value_missing"
KEY_ADDRESS_TYPE_CONFLICT = "address_type_conflict"
KEY_COUNTRY_CODE_INVALID = "country_code_invalid"
KEY_FIELD_VALUE_CLIPPED = "field_value_clipped"
KEY_FIELD_VALUE_TOO_LONG = "field_value_too_long"
KEY_ADDITIONAL_INFO_TOO_LONG = "additional_info_too_long"
KEY_REPLACED_UNSUPPORTED_CHARACTERS = "replaced_unsupported_characters"
KEY_DATA_STRUCTURE_INVALID = "data_structure_invalid"
KEY_VERSION_UNSUPPORTED = "version_unsupported"
KEY_CODING_TYPE_UNSUPPORTED = "coding_type_unsupported"
KEY_NUMBER_INVALID = "number_invalid"
KEY_ALT_SCHEME_MAX_EXCEEDED = "alt_scheme_max_exceed"
KEY_BILL_INFO_INVALID = "bill_info_invalid"

# --- Field names ---
FIELD_QR_TYPE = "qrText"
FIELD_VERSION = "version"
FIELD_CODING_TYPE = "codingType"
FIELD_TRAILER = "trailer"
FIELD_CURRENCY = "currency"
FIELD_AMOUNT = "amount"
FIELD_ACCOUNT = "account"
FIELD_REFERENCE_TYPE = "referenceType"
FIELD_REFERENCE = "reference"
FIELD_UNSTRUCTURED_MESSAGE = "unstructuredMessage"
FIELD_BILL_INFORMATION = "billInformation"
FIELD_ALTERNATIVE_SCHEMES = "altSchemes"

FIELDROOT_CREDITOR = "creditor"
FIELDROOT_DEBTOR = "debtor"

SUBFIELD_NAME = ".name"
SUBFIELD_ADDRESS_LINE_1 = ".addressLine1"
SUBFIELD_ADDRESS_LINE_2 = ".addressLine2"
SUBFIELD_STREET = ".street"
SUBFIELD_HOUSE_NO = ".houseNo"
SUBFIELD_POSTAL_CODE = ".postalCode"
SUBFIELD_TOWN = ".town"
SUBFIELD_COUNTRY_CODE = ".countryCode"

FIELD_CREDITOR_NAME = FIELDROOT_CREDITOR + SUBFIELD_NAME
FIELD_CREDITOR_ADDRESS_LINE_1 = FIELDROOT_CREDITOR + SUBFIELD_ADDRESS_LINE_1
FIELD_CREDITOR_ADDRESS_LINE_2 = FIELDROOT_CREDITOR + SUBFIELD_ADDRESS_LINE_2
FIELD_CREDITOR_STREET = FIELDROOT_CREDITOR + SUBFIELD_STREET
FIELD_CREDITOR_HOUSE_NO = FIELDROOT_CREDITOR + SUBFIELD_HOUSE_NO
FIELD_CREDITOR_POSTAL_CODE = FIELDROOT_CREDITOR + SUBFIELD_POSTAL_CODE
FIELD_CREDITOR_TOWN = FIELDROOT_CREDITOR + SUBFIELD_TOWN
FIELD_CREDITOR_COUNTRY_CODE = FIELDROOT_CREDITOR + SUBFIELD_COUNTRY_CODE

FIELD_DEBTOR_NAME = FIELDROOT_DEBTOR + SUBFIELD_NAME
FIELD_DEBTOR_ADDRESS_LINE_1 = FIELDROOT_DEBTOR + SUBFIELD_ADDRESS_LINE_1
FIELD_DEBTOR_ADDRESS_LINE_2 = FIELDROOT_DEBTOR + SUBFIELD_ADDRESS_LINE_2
FIELD_DEBTOR_STREET = FIELDROOT_DEBTOR + SUBFIELD_STREET
FIELD_DEBTOR_HOUSE_NO = FIELDROOT_DEBTOR + SUBFIELD_HOUSE_NO
FIELD_DEBTOR_POSTAL_CODE = FIELDROOT_DEBTOR + SUBFIELD_POSTAL_CODE
FIELD_DEBTOR_TOWN = FIELDROOT_DEBTOR + SUBFIELD_TOWN
FIELD_DEBTOR_COUNTRY_CODE = FIELDROOT_DEBTOR + SUBFIELD_COUNTRY_CODE

# --- Limits ---
MAX_NAME_LENGTH = 70
MAX_STREET_LENGTH = 70
MAX_HOUSE_NO_LENGTH = 16
MAX_POSTAL_CODE_LENGTH = 16
MAX_TOWN_LENGTH = 35
MAX_ADDRESS_LINE_LENGTH = 70
MAX_ADDITIONAL_INFO_LENGTH = 140
MAX_ALT_SCHEME_LENGTH = 100
MAX_ALT_SCHEMES = 2
IBAN_LENGTH_CH_LI = 21

# --- QR code text ---
QR_TYPE = "SPC"
VERSION_0200 = "0200"
CODING_TYPE_UTF8 = "1"
TRAILER_EPD = "EPD"
ADDRESS_TYPE_STRUCTURED = "S"
ADDRESS_TYPE_COMBINED = "K"
SUPPORTED_CURRENCIES = ("CHF", "EUR")
