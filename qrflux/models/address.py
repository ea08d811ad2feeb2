"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/models/address.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Pydantic model for creditor and debtor addresses. The address
                type is derived from the field groups written so far using an
                explicit state transition function.
------------------------------------------------------------------------------
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .types import AddressType


class FieldGroup(str, Enum):
    """Field groups that drive the address type."""
    NEUTRAL = "NEUTRAL"
    STRUCTURED = "STRUCTURED"
    COMBINED = "COMBINED"


STRUCTURED_FIELDS = ("street", "house_no", "postal_code", "town")
COMBINED_FIELDS = ("address_line1", "address_line2")


def field_group(name: str) -> FieldGroup:
    """Returns the field group an address attribute belongs to."""
    if name in STRUCTURED_FIELDS:
        return FieldGroup.STRUCTURED
    if name in COMBINED_FIELDS:
        return FieldGroup.COMBINED
    return FieldGroup.NEUTRAL


def apply_write(current: AddressType, group: FieldGroup) -> AddressType:
    """
    Computes the address type after a field of the given group was written.

    Neutral fields (name, country code) never change the type. The first
    structured or combined write fixes the type; a write from the other group
    makes it CONFLICTING, which no later write can undo.
    """
    if group is FieldGroup.NEUTRAL:
        return current
    desired = AddressType.STRUCTURED if group is FieldGroup.STRUCTURED else AddressType.COMBINED_ELEMENTS
    if current == desired:
        return current
    if current is AddressType.UNDETERMINED:
        return desired
    return AddressType.CONFLICTING


class Address(BaseModel):
    """
    Creditor or debtor address.

    Either the structured fields (street, house number, postal code, town) or
    the combined fields (address line 1 and 2) should be used. Name and
    country code are part of both variants.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    street: Optional[str] = None
    house_no: Optional[str] = None
    postal_code: Optional[str] = None
    town: Optional[str] = None
    country_code: Optional[str] = None

    _type: AddressType = PrivateAttr(default=AddressType.UNDETERMINED)

    def model_post_init(self, __context: Any) -> None:
        # Fields passed to the constructor count as written, in declaration order
        for name in type(self).model_fields:
            if name in self.model_fields_set:
                self._type = apply_write(self._type, field_group(name))

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        group = field_group(name)
        if group is not FieldGroup.NEUTRAL:
            self._type = apply_write(self._type, group)

    @property
    def type(self) -> AddressType:
        """The address type derived from the fields written so far."""
        return self._type

    def clear(self) -> None:
        """Resets all fields and the address type."""
        for name in type(self).model_fields:
            self.__dict__[name] = None
        self._type = AddressType.UNDETERMINED
