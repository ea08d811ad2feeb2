from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

from qrflux.utils.validation import format_iban, format_qr_reference

_CENT = Decimal("0.01")


def format_amount_for_display(val: Optional[Union[Decimal, float, str]]) -> str:
    """
    Formats an amount for display on the payment part.
    Thousands are separated by a space: 1 949.75
    """
    if val is None:
        return ""
    amount = Decimal(str(val)).quantize(_CENT, rounding=ROUND_HALF_UP)
    s = f"{amount:,.2f}"
    return s.replace(",", " ")


def format_amount_for_code(val: Optional[Decimal]) -> str:
    """
    Formats an amount for the QR code text: '.' as decimal point, no grouping.
    Half cents are rounded away from zero; zero never carries a sign.
    """
    if val is None:
        return ""
    amount = Decimal(val)
    with localcontext() as ctx:
        if amount.is_finite():
            ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    if amount == 0:
        amount = amount.copy_abs()
    return f"{amount:.2f}"


def format_reference_number(reference: Optional[str]) -> str:
    """Formats a QR reference (blocks of 5) or a creditor reference (blocks of 4)."""
    if not reference:
        return ""
    reference = reference.strip()
    if reference.startswith("RF"):
        return format_iban(reference)
    return format_qr_reference(reference)


def format_account_number(account: Optional[str]) -> str:
    if not account:
        return ""
    return format_iban(account)
