"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/models/bill.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Pydantic models for the QR bill data: the bill itself and
                alternative payment schemes. Setting the reference derives
                the reference type.
------------------------------------------------------------------------------
"""

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qrflux.utils.charset import CharacterSet
from qrflux.utils.validation import create_iso11649_reference, create_qr_reference
from .address import Address
from .types import QrBillStandardVersion, QrDataSeparator, ReferenceType


def reference_type_for(reference: Optional[str]) -> str:
    """
    Derives the reference type from the lexical shape of the reference.

    Returns:
        "SCOR" for references starting with "RF", "QRR" for any other
        non-empty reference and "NON" otherwise.
    """
    rf = reference.strip() if reference is not None else ""
    if rf.startswith("RF"):
        return ReferenceType.CREDITOR_REF.value
    if rf:
        return ReferenceType.QR_REF.value
    return ReferenceType.NO_REF.value


class AlternativeScheme(BaseModel):
    """Alternative payment scheme (name and instruction line)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    instruction: Optional[str] = None


class Bill(BaseModel):
    """
    QR bill data.

    The reference type is updated whenever the reference is set. It can be
    overridden afterwards (or by passing it to the constructor), e.g. to
    represent decoded data with an unknown reference type.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: QrBillStandardVersion = QrBillStandardVersion.V2_0
    amount: Optional[Decimal] = None
    currency: Optional[str] = "CHF"
    account: Optional[str] = None
    creditor: Address = Field(default_factory=Address)
    reference_type: Optional[str] = ReferenceType.NO_REF.value
    reference: Optional[str] = None
    debtor: Optional[Address] = None
    unstructured_message: Optional[str] = None
    bill_information: Optional[str] = None
    alternative_schemes: Optional[List[AlternativeScheme]] = None

    # QR code text options
    separator: QrDataSeparator = QrDataSeparator.LF
    character_set: CharacterSet = CharacterSet.LATIN1_SUBSET

    @field_validator("reference_type", mode="before")
    @classmethod
    def unwrap_reference_type(cls, v: Any) -> Any:
        if isinstance(v, ReferenceType):
            return v.value
        return v

    def model_post_init(self, __context: Any) -> None:
        if "reference" in self.model_fields_set and "reference_type" not in self.model_fields_set:
            self.__dict__["reference_type"] = reference_type_for(self.reference)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "reference_type" and isinstance(value, ReferenceType):
            value = value.value
        super().__setattr__(name, value)
        if name == "reference":
            super().__setattr__("reference_type", reference_type_for(value))

    def create_and_set_creditor_reference(self, raw_reference: str) -> None:
        """
        Creates an ISO 11649 creditor reference from the raw payload and
        sets it as the reference.

        Raises:
            ValueError: If the payload is invalid.
        """
        self.reference = create_iso11649_reference(raw_reference)

    def create_and_set_qr_reference(self, raw_reference: str) -> None:
        """
        Creates a QR reference (with check digit) from up to 26 digits and
        sets it as the reference.

        Raises:
            ValueError: If the raw reference is invalid.
        """
        self.reference = create_qr_reference(raw_reference)
