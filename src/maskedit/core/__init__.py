# -*- coding: utf-8 -*-
"""
The Core Editing Package for MaskEdit.

This package holds the masked editing engine, independent of any widget
toolkit:
- `template`: the immutable slot layout of a fixed-format field.
- `masked_buffer`: the buffer that applies insert, remove and replace while
  keeping the layout intact.
- `navigation`: caret and selection intents and their placement rules.
- `errors`: the two recoverable error kinds.
"""

from .errors import InvalidFormat, MaskedEditError, OutOfRange
from .masked_buffer import EditState, MaskedBuffer, PendingRemoval, create_buffer
from .navigation import ClickAt, DoubleClickAt, Intent, Selection
from .template import PHONE_NUMBER, SSN, CharacterClass, Literal, Template, Variable

__all__ = [
    "CharacterClass",
    "ClickAt",
    "DoubleClickAt",
    "EditState",
    "Intent",
    "InvalidFormat",
    "Literal",
    "MaskedBuffer",
    "MaskedEditError",
    "OutOfRange",
    "PHONE_NUMBER",
    "PendingRemoval",
    "SSN",
    "Selection",
    "Template",
    "Variable",
    "create_buffer",
]
