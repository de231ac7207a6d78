# -*- coding: utf-8 -*-
"""
src/maskedit/core/navigation.py

Navigation intents and caret placement rules for masked buffers.

The widget layer translates key presses and mouse clicks into the intents
defined here and hands them to `MaskedBuffer.navigate`. The placement
functions decide where a caret (insert mode) or a one-slot selection
(overtype mode) may rest, using only the template's slot layout.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .template import Template

FORWARD = 1
BACKWARD = -1


class Intent(Enum):
    """Keyboard-driven navigation requests."""

    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    MOVE_HOME = "home"
    MOVE_END = "end"
    TOGGLE_OVERTYPE = "toggle_overtype"
    SELECT_ALL = "select_all"
    SELECT_HOME = "select_home"
    SELECT_END = "select_end"


@dataclass(frozen=True)
class ClickAt:
    """
    A mouse release at `position`.

    When the press happened elsewhere (a drag), `anchor` holds the press
    position and the click describes a selection.
    """

    position: int
    anchor: Optional[int] = None


@dataclass(frozen=True)
class DoubleClickAt:
    """A double click at `position`."""

    position: int


class Selection(NamedTuple):
    """Caret and selection after a navigation step."""

    caret: int
    start: int
    end: int


def _clamp(template: Template, position: int) -> int:
    return max(0, min(position, template.length))


def insert_caret(template: Template, position: int, direction: int = FORWARD) -> int:
    """
    Where an insert-mode caret computed at `position` comes to rest.

    A caret rests in front of a variable slot or at the end of the buffer.
    Landing on a literal moves it past the literal in the direction of
    travel; when nothing lies that way it goes the other way instead.

    Args:
        template (Template): The layout to place the caret in.
        position (int): The computed caret offset.
        direction (int): FORWARD or BACKWARD.

    Returns:
        int: The resting caret offset.
    """
    position = _clamp(template, position)
    if position == template.length or template.is_variable(position):
        return position
    if direction == BACKWARD:
        found = template.previous_variable(position)
        if found is not None:
            return found
    found = template.next_variable(position)
    return template.length if found is None else found


def overtype_slot(template: Template, position: int, direction: int = FORWARD) -> int:
    """
    The variable slot an overtype-mode selection covers for `position`.

    Returns:
        int: The start of the one-character selection.
    """
    position = _clamp(template, position)
    if template.is_variable(position):
        return position
    if direction == BACKWARD:
        found = template.previous_variable(position)
        return found if found is not None else template.next_variable(position)
    found = template.next_variable(position)
    return found if found is not None else template.previous_variable(position)
