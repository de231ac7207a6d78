# -*- coding: utf-8 -*-
"""
The Utilities Package for MaskEdit.

Helpers shared by the GUI layer that do not belong to the editing engine.

Modules:
- clipboard_manager: copy and paste through the system clipboard.
"""

from .clipboard_manager import copy_to_clipboard, paste_from_clipboard

__all__ = [
    "copy_to_clipboard",
    "paste_from_clipboard",
]
