# -*- coding: utf-8 -*-
"""
src/maskedit/core/errors.py

Exceptions raised by the masked editing engine.

Both kinds are recoverable: an `OutOfRange` is a caller programming error, an
`InvalidFormat` is a rejected edit that the widget layer turns into an
audible or visual cue. In either case the buffer is left as it was before
the call.
"""

from typing import Optional


class MaskedEditError(Exception):
    """Base class for all masked editing errors."""


class OutOfRange(MaskedEditError, IndexError):
    """An offset or count falls outside the template."""


class InvalidFormat(MaskedEditError, ValueError):
    """
    The proposed text would break the template's slot classes or capacity.

    Attributes:
        offset (int): The buffer offset the edit was aimed at.
        value (str): The text that was rejected.
    """

    def __init__(self, message: str, offset: Optional[int] = None, value: Optional[str] = None):
        super().__init__(message)
        self.offset = offset
        self.value = value
