# -*- coding: utf-8 -*-
"""
The GUI Package for MaskEdit.

PyQt6 widgets that put the masked editing engine behind a text field. The
widgets translate keyboard and mouse input into buffer edits and navigation
intents and display the result; all formatting rules stay in `maskedit.core`.
"""

from .masked_field import MaskedLineEdit

__all__ = [
    "MaskedLineEdit",
]
