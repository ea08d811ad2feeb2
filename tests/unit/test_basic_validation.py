"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           tests/unit/test_basic_validation.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validation of account number, currency and amount.
------------------------------------------------------------------------------
"""

from decimal import Decimal

import pytest
from qrflux.models.types import MessageType
from qrflux.validator import validate

def assert_single_error(result, field, key):
    assert result.has_errors
    assert len(result.validation_messages) == 1, result.validation_messages
    msg = result.validation_messages[0]
    assert msg.type is MessageType.ERROR
    assert msg.field == field
    assert msg.message_key == key

# --- Complete bills ---

def test_sample_bills_are_valid(sample_bill_1, sample_bill_2):
    for bill in (sample_bill_1, sample_bill_2):
        result = validate(bill)
        assert not result.has_messages, result.validation_messages
        assert result.is_valid
        assert result.cleaned_bill == bill

def test_input_bill_is_not_modified(sample_bill_1):
    sample_bill_1.account = "  ch58 0079 1123 0008 8901 2 "
    sample_bill_1.currency = "chf"
    snapshot = sample_bill_1.model_copy(deep=True)

    result = validate(sample_bill_1)
    assert result.cleaned_bill.account == "CH5800791123000889012"
    assert sample_bill_1 == snapshot
    assert result.cleaned_bill is not sample_bill_1
    assert result.cleaned_bill.creditor is not sample_bill_1.creditor

# --- Account ---

@pytest.mark.parametrize("account, expected", [
    ("CH5800791123000889012", "CH5800791123000889012"),
    ("  CH58 0079 1123 0008 8901 2 ", "CH5800791123000889012"),
    ("ch5800791123000889012", "CH5800791123000889012"),
    ("LI21088100002324013AA", "LI21088100002324013AA"),
])
def test_valid_account(valid_bill, account, expected):
    valid_bill.account = account
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.account == expected

@pytest.mark.parametrize("account", [None, "", "   "])
def test_missing_account(valid_bill, account):
    valid_bill.account = account
    result = validate(valid_bill)
    assert_single_error(result, "account", "field_value_missing")
    assert result.cleaned_bill.account is None

def test_foreign_account(valid_bill):
    valid_bill.account = "DE89370400440532013000"
    result = validate(valid_bill)
    assert_single_error(result, "account", "account_iban_not_from_ch_or_li")
    assert result.cleaned_bill.account is None

@pytest.mark.parametrize("account", [
    "CH4431999123000889013",   # checksum
    "CH0031999123000889012",   # reserved check digits
    "CH570079112300088901234",  # valid checksum, wrong length
    "CH44-3199-9123-0008-8901-2",
])
def test_invalid_account(valid_bill, account):
    valid_bill.account = account
    result = validate(valid_bill)
    assert_single_error(result, "account", "account_iban_invalid")

# --- Currency ---

@pytest.mark.parametrize("currency, expected", [
    ("CHF", "CHF"),
    ("EUR", "EUR"),
    (" eur ", "EUR"),
    ("chf", "CHF"),
])
def test_valid_currency(valid_bill, currency, expected):
    valid_bill.currency = currency
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.currency == expected

@pytest.mark.parametrize("currency", [None, " "])
def test_missing_currency(valid_bill, currency):
    valid_bill.currency = currency
    result = validate(valid_bill)
    assert_single_error(result, "currency", "field_value_missing")

def test_invalid_currency(valid_bill):
    valid_bill.currency = "USD"
    result = validate(valid_bill)
    assert_single_error(result, "currency", "currency_not_chf_or_eur")
    assert result.cleaned_bill.currency is None

# --- Amount ---

def test_open_amount(valid_bill):
    valid_bill.amount = None
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.amount is None

@pytest.mark.parametrize("amount, expected", [
    (Decimal("50"), Decimal("50.00")),
    (Decimal("0.00"), Decimal("0.00")),
    (Decimal("0.005"), Decimal("0.01")),
    (Decimal("12.344"), Decimal("12.34")),
    (Decimal("12.345"), Decimal("12.35")),
    (Decimal("-0.004"), Decimal("0.00")),
    (Decimal("999999999.99"), Decimal("999999999.99")),
    (Decimal("999999999.994"), Decimal("999999999.99")),
])
def test_valid_amount(valid_bill, amount, expected):
    valid_bill.amount = amount
    result = validate(valid_bill)
    assert not result.has_messages
    assert result.cleaned_bill.amount == expected
    assert result.cleaned_bill.amount.as_tuple().exponent == -2

@pytest.mark.parametrize("amount", [
    Decimal("-0.01"),
    Decimal("-0.005"),
    Decimal("999999999.995"),
    Decimal("1000000000"),
])
def test_amount_outside_range(valid_bill, amount):
    valid_bill.amount = amount
    result = validate(valid_bill)
    assert_single_error(result, "amount", "amount_outside_valid_range")
    assert result.cleaned_bill.amount is None

@pytest.mark.parametrize("amount", [
    Decimal("1" * 30),
    Decimal("-" + "9" * 40),
    Decimal("1E+50"),
    Decimal("Infinity"),
])
def test_huge_amount_is_outside_range(valid_bill, amount):
    valid_bill.amount = amount
    result = validate(valid_bill)
    assert_single_error(result, "amount", "amount_outside_valid_range")
    assert result.cleaned_bill.amount is None

@pytest.mark.parametrize("amount", [Decimal("-0.001"), Decimal("-0"), Decimal("-0.00")])
def test_negative_zero_amount_loses_sign(valid_bill, amount):
    valid_bill.amount = amount
    result = validate(valid_bill)
    assert not result.has_messages
    assert not result.cleaned_bill.amount.is_signed()
    assert str(result.cleaned_bill.amount) == "0.00"
