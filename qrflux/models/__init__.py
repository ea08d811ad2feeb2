"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/models/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Package initializer for the QR bill data models. Exports
                Address, Bill, AlternativeScheme and the validation result.
------------------------------------------------------------------------------
"""

from .address import Address
from .bill import AlternativeScheme, Bill
from .types import AddressType, MessageType, QrBillStandardVersion, QrDataSeparator, ReferenceType
from .validation import ValidationMessage, ValidationResult
