from decimal import Decimal

import pytest

from qrflux.models.address import Address
from qrflux.models.bill import AlternativeScheme, Bill

QR_IBAN = "CH4431999123000889012"
IBAN_CH = "CH5800791123000889012"
IBAN_CH_2 = "CH3709000000304442225"
IBAN_LI = "LI21088100002324013AA"
QR_REFERENCE = "210000000003139471430009017"
CREDITOR_REFERENCE = "RF18539007547034"

SAMPLE_MESSAGE = "Bill no. 3139 for gardening work and disposal of waste material"
SAMPLE_BILL_INFO = "//S1/01/20170309/11/10201409/20/14000000/22/36958/30/CH106017086/40/1020/41/3010"

SAMPLE_TEXT_1 = "\n".join([
    "SPC", "0200", "1", IBAN_CH,
    "S", "Robert Schneider AG", "Rue du Lac", "1268", "2501", "Biel", "CH",
    "", "", "", "", "", "", "",
    "3949.75", "CHF",
    "S", "Pia Rutschmann", "Marktgasse", "28", "9400", "Rorschach", "CH",
    "NON", "", SAMPLE_MESSAGE, "EPD",
])

SAMPLE_TEXT_2 = "\n".join([
    "SPC", "0200", "1", QR_IBAN,
    "S", "Robert Schneider AG", "Rue du Lac", "1268", "2501", "Biel", "CH",
    "", "", "", "", "", "", "",
    "3949.75", "CHF",
    "S", "Pia Rutschmann", "Marktgasse", "28", "9400", "Rorschach", "CH",
    "QRR", QR_REFERENCE, "Order dated 18.06.2020", "EPD",
    SAMPLE_BILL_INFO,
    "UV;UltraPay005;12345",
    "XY;XYService;54321",
])


def make_creditor() -> Address:
    return Address(
        name="Robert Schneider AG",
        street="Rue du Lac",
        house_no="1268",
        postal_code="2501",
        town="Biel",
        country_code="CH",
    )


def make_debtor() -> Address:
    return Address(
        name="Pia Rutschmann",
        street="Marktgasse",
        house_no="28",
        postal_code="9400",
        town="Rorschach",
        country_code="CH",
    )


def make_sample_bill_1() -> Bill:
    return Bill(
        account=IBAN_CH,
        creditor=make_creditor(),
        amount=Decimal("3949.75"),
        currency="CHF",
        debtor=make_debtor(),
        unstructured_message=SAMPLE_MESSAGE,
    )


def make_sample_bill_2() -> Bill:
    return Bill(
        account=QR_IBAN,
        creditor=make_creditor(),
        amount=Decimal("3949.75"),
        currency="CHF",
        debtor=make_debtor(),
        reference=QR_REFERENCE,
        unstructured_message="Order dated 18.06.2020",
        bill_information=SAMPLE_BILL_INFO,
        alternative_schemes=[
            AlternativeScheme(name="Ultraviolet", instruction="UV;UltraPay005;12345"),
            AlternativeScheme(name="Xing Yong", instruction="XY;XYService;54321"),
        ],
    )


@pytest.fixture
def sample_bill_1() -> Bill:
    """Bill with structured addresses, a non QR-IBAN and no reference."""
    return make_sample_bill_1()


@pytest.fixture
def sample_bill_2() -> Bill:
    """Bill with QR-IBAN, QR reference, bill information and two alternative schemes."""
    return make_sample_bill_2()


@pytest.fixture
def valid_bill() -> Bill:
    """Minimal valid bill: creditor, account and currency only."""
    return Bill(account=IBAN_CH, creditor=make_creditor(), currency="CHF")
