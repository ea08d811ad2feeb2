"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           tests/unit/test_address_validation.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validation of creditor and debtor addresses: mandatory
                fields, conflicting address types, clipping and cleaning.
------------------------------------------------------------------------------
"""

from qrflux.models.address import Address
from qrflux.models.types import AddressType, MessageType
from qrflux.utils.charset import CharacterSet
from qrflux.validator import validate

def messages(result):
    return [(m.type, m.field, m.message_key) for m in result.validation_messages]

def errors(*pairs):
    return [(MessageType.ERROR, field, key) for field, key in pairs]

# --- Creditor ---

def test_structured_creditor(valid_bill):
    result = validate(valid_bill)
    assert not result.has_messages
    creditor = result.cleaned_bill.creditor
    assert creditor.type is AddressType.STRUCTURED
    assert creditor == valid_bill.creditor

def test_combined_creditor(valid_bill):
    valid_bill.creditor = Address(
        name="Robert Schneider AG",
        address_line1="Rue du Lac 1268",
        address_line2="2501 Biel",
        country_code="CH",
    )
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.creditor.type is AddressType.COMBINED_ELEMENTS
    assert result.cleaned_bill.creditor.address_line2 == "2501 Biel"

def test_empty_creditor(valid_bill):
    valid_bill.creditor = Address()
    result = validate(valid_bill)
    assert messages(result) == errors(
        ("creditor.name", "field_value_missing"),
        ("creditor.postalCode", "field_value_missing"),
        ("creditor.addressLine2", "field_value_missing"),
        ("creditor.town", "field_value_missing"),
        ("creditor.countryCode", "field_value_missing"),
    )

def test_blank_creditor_is_empty(valid_bill):
    valid_bill.creditor = Address(name="  ", street=" ", country_code="")
    result = validate(valid_bill)
    assert len(result.validation_messages) == 5

def test_creditor_with_name_only(valid_bill):
    valid_bill.creditor = Address(name="Robert Schneider AG")
    result = validate(valid_bill)
    assert messages(result) == errors(
        ("creditor.postalCode", "field_value_missing"),
        ("creditor.town", "field_value_missing"),
        ("creditor.addressLine2", "field_value_missing"),
        ("creditor.countryCode", "field_value_missing"),
    )

def test_structured_creditor_without_town(valid_bill):
    valid_bill.creditor.town = None
    result = validate(valid_bill)
    assert messages(result) == errors(("creditor.town", "field_value_missing"))

def test_combined_creditor_without_line2(valid_bill):
    valid_bill.creditor = Address(name="Robert Schneider AG", address_line1="Rue du Lac 1268", country_code="CH")
    result = validate(valid_bill)
    assert messages(result) == errors(("creditor.addressLine2", "field_value_missing"))

def test_conflicting_creditor(valid_bill):
    valid_bill.creditor.address_line2 = "2501 Biel"
    result = validate(valid_bill)
    assert messages(result) == errors(
        ("creditor.addressLine2", "address_type_conflict"),
        ("creditor.street", "address_type_conflict"),
        ("creditor.houseNo", "address_type_conflict"),
        ("creditor.postalCode", "address_type_conflict"),
        ("creditor.town", "address_type_conflict"),
    )
    assert result.cleaned_bill.creditor.type is AddressType.CONFLICTING

def test_invalid_country_code(valid_bill):
    for code in ("Schweiz", "C1", "C"):
        valid_bill.creditor.country_code = code
        result = validate(valid_bill)
        assert messages(result) == errors(("creditor.countryCode", "country_code_invalid")), code

def test_country_code_is_trimmed_and_uppercased(valid_bill):
    valid_bill.creditor.country_code = " ch "
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.creditor.country_code == "CH"

def test_fields_are_clipped(valid_bill):
    valid_bill.creditor.name = "N" * 71
    valid_bill.creditor.street = "S" * 71
    valid_bill.creditor.house_no = "1" * 17
    valid_bill.creditor.postal_code = "2" * 17
    valid_bill.creditor.town = "T" * 36
    result = validate(valid_bill)

    assert not result.has_errors
    assert [(m.type, m.field, m.message_key, m.message_parameters) for m in result.validation_messages] == [
        (MessageType.WARNING, "creditor.name", "field_value_clipped", ["70"]),
        (MessageType.WARNING, "creditor.street", "field_value_clipped", ["70"]),
        (MessageType.WARNING, "creditor.houseNo", "field_value_clipped", ["16"]),
        (MessageType.WARNING, "creditor.postalCode", "field_value_clipped", ["16"]),
        (MessageType.WARNING, "creditor.town", "field_value_clipped", ["35"]),
    ]
    creditor = result.cleaned_bill.creditor
    assert creditor.name == "N" * 70
    assert creditor.street == "S" * 70
    assert creditor.house_no == "1" * 16
    assert creditor.postal_code == "2" * 16
    assert creditor.town == "T" * 35

def test_combined_lines_are_clipped(valid_bill):
    valid_bill.creditor = Address(name="A", address_line1="L" * 71, address_line2="M" * 80, country_code="CH")
    result = validate(valid_bill)
    assert [m.field for m in result.validation_messages] == ["creditor.addressLine1", "creditor.addressLine2"]
    assert result.cleaned_bill.creditor.address_line1 == "L" * 70
    assert result.cleaned_bill.creditor.address_line2 == "M" * 70

def test_whitespace_is_cleaned(valid_bill):
    valid_bill.creditor.name = "  Robert   Schneider AG "
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.creditor.name == "Robert Schneider AG"

def test_unsupported_characters_are_replaced(valid_bill):
    valid_bill.creditor.street = "abc\U0001F1E8\U0001F1EDdef"
    result = validate(valid_bill)
    assert messages(result) == [(MessageType.WARNING, "creditor.street", "replaced_unsupported_characters")]
    assert result.has_warnings
    assert result.is_valid
    assert result.cleaned_bill.creditor.street == "abc.def"

def test_accents_are_kept_with_extended_latin(valid_bill):
    valid_bill.creditor.town = "Bălăceanu"
    valid_bill.character_set = CharacterSet.EXTENDED_LATIN
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.creditor.town == "Bălăceanu"

    valid_bill.character_set = CharacterSet.LATIN1_SUBSET
    result = validate(valid_bill)
    assert result.cleaned_bill.creditor.town == "Balaceanu"
    assert result.has_warnings

# --- Debtor ---

def test_missing_debtor_is_valid(valid_bill):
    valid_bill.debtor = None
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.debtor is None

def test_empty_debtor_is_removed(valid_bill):
    valid_bill.debtor = Address(name=" ", street="", town=None)
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.debtor is None

def test_valid_debtor(sample_bill_1):
    result = validate(sample_bill_1)
    assert not result.has_messages
    assert result.cleaned_bill.debtor == sample_bill_1.debtor

def test_incomplete_debtor(valid_bill):
    valid_bill.debtor = Address(name="Pia Rutschmann", street="Marktgasse", country_code="CH")
    result = validate(valid_bill)
    assert messages(result) == errors(
        ("debtor.postalCode", "field_value_missing"),
        ("debtor.town", "field_value_missing"),
    )
