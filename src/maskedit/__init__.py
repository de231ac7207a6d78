# -*- coding: utf-8 -*-
"""
MaskEdit Package.

Fixed-format text entry (phone numbers, social security numbers and any other
template of literal and variable character slots) for desktop text fields.
The editing engine lives in `maskedit.core` and has no GUI dependency; the
PyQt6 field and demo application live in `maskedit.gui` and `maskedit.app`.
"""

__version__ = "0.1.0"

from .core import (
    PHONE_NUMBER,
    SSN,
    ClickAt,
    DoubleClickAt,
    Intent,
    InvalidFormat,
    MaskedBuffer,
    OutOfRange,
    Template,
    create_buffer,
)

__all__ = [
    "ClickAt",
    "DoubleClickAt",
    "Intent",
    "InvalidFormat",
    "MaskedBuffer",
    "OutOfRange",
    "PHONE_NUMBER",
    "SSN",
    "Template",
    "create_buffer",
]
