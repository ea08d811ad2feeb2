"""
------------------------------------------------------------------------------
Project:        QRBillFlux
File:           qrflux/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Swiss QR bill validation and QR code text encoding/decoding.
------------------------------------------------------------------------------
"""
