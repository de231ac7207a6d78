# -*- coding: utf-8 -*-
"""
src/maskedit/core/masked_buffer.py

The masked text buffer: a fixed-length string kept in the shape of a
`Template` under insert, remove and replace, plus the caret, selection and
insert/overtype mode a text field needs.

Every mutation either completes or raises with the buffer untouched. A
replace records what its removal step took so that a rejected insertion can
put the buffer back exactly as it was.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from .errors import InvalidFormat, OutOfRange
from .navigation import (
    BACKWARD,
    FORWARD,
    ClickAt,
    DoubleClickAt,
    Intent,
    Selection,
    insert_caret,
    overtype_slot,
)
from .template import Literal, Template

logger = logging.getLogger(__name__)


class EditState(Enum):
    """Whether a replace is in progress."""

    IDLE = "idle"
    REPLACING = "replacing"


class _Snapshot(NamedTuple):
    content: str
    caret: int
    selection_start: int
    selection_end: int


@dataclass(frozen=True)
class PendingRemoval:
    """
    What the removal half of a replace took out of the buffer.

    Attributes:
        offset (int): Where the removal actually happened.
        text (str): The removed characters.
        snapshot (_Snapshot): The buffer state before the replace began.
    """

    offset: int
    text: str
    snapshot: _Snapshot


class MaskedBuffer:
    """
    Holds the formatted content of one masked field.

    Attributes:
        template (Template): The format this buffer is bound to.
        overtype (bool): True when typing replaces the slot under the caret.
        edit_state (EditState): REPLACING only while `replace` runs.
        pending_removal (Optional[PendingRemoval]): Set only during a replace.
    """

    def __init__(self, template: Template, overtype: bool = False):
        self.template = template
        self.overtype = overtype
        self.edit_state = EditState.IDLE
        self.pending_removal: Optional[PendingRemoval] = None

        self._content = template.default_fill()
        self._caret = 0
        self._selection_start = 0
        self._selection_end = 0
        self._place(template.first_variable, FORWARD)

    # --- Read-only views ---

    @property
    def content(self) -> str:
        """The full formatted string, literals and placeholders included."""
        return self._content

    @property
    def caret(self) -> int:
        return self._caret

    @property
    def selection_start(self) -> int:
        return self._selection_start

    @property
    def selection_end(self) -> int:
        return self._selection_end

    @property
    def selection(self) -> Selection:
        return Selection(self._caret, self._selection_start, self._selection_end)

    @property
    def selected_text(self) -> str:
        return self._content[self._selection_start:self._selection_end]

    @property
    def value(self) -> str:
        """The characters entered into variable slots, without literals or placeholders."""
        return self.template.project(self._content)

    @property
    def is_complete(self) -> bool:
        """True when every variable slot holds a character."""
        return len(self.value) == self.template.capacity

    # --- Formatting primitives ---

    def extract_digits(self, raw: str) -> str:
        """
        Keeps only the characters of `raw` that belong in variable slots.

        Text laid out like the template (buffer content, a formatted paste)
        is read slot by slot, so literal characters never count as entered
        data. Anything else is filtered by character class.
        """
        if self.template.lines_up(raw):
            return self.template.project(raw)
        return self.template.extract(raw)

    def format(self, offset: int, raw: str) -> str:
        """
        Lays `raw` into the template starting at `offset`.

        Literal positions emit their literal without consuming input;
        variable positions consume the next input character. Output stops
        as soon as the input is used up or the template ends.

        Args:
            offset (int): The template position of the first output character.
            raw (str): Characters destined for variable slots.

        Returns:
            str: The formatted run, to be written at `offset`.
        """
        slots = self.template.slots
        output = []
        position = offset
        index = 0
        while index < len(raw) and position < len(slots):
            slot = slots[position]
            if isinstance(slot, Literal):
                output.append(slot.char)
            else:
                output.append(raw[index])
                index += 1
            position += 1
        return "".join(output)

    def validate(self, offset: int, value: str) -> bool:
        """
        Decides whether `value` may be inserted at `offset`.

        The default fill is always accepted. Otherwise the incoming variable
        characters must fit in the slots left from `offset` and, together with
        the characters already present, within the template's capacity. Text
        whose characters match the literals it covers is taken as already
        formatted and is read slot by slot; text holding anything a variable
        slot could not take is accepted only in that form.
        """
        template = self.template
        if value == template.default_fill():
            return True

        incoming = self._incoming(offset, value)
        if incoming is None or len(incoming) > template.variable_slots_from(offset):
            return False

        formatted = self.format(offset, incoming)
        covered = (offset, offset + len(formatted)) if self.overtype else None
        if self._count_entered(excluding=covered) + len(incoming) > template.capacity:
            return False

        for index, char in enumerate(formatted):
            position = offset + index
            if template.is_variable(position) and not template.accepts(position, char):
                return False
        return True

    # --- Mutations ---

    def insert(self, offset: int, text: str) -> int:
        """
        Inserts `text` at `offset`, keeping the template intact.

        In insert mode the characters at and after `offset` shift right to
        make room; in overtype mode they are overwritten in place. A shift
        that pushes entered characters past the last variable slot drops
        them, as when typing into a filled last slot after blanks were left
        earlier in the buffer.

        Returns:
            int: The new caret position.

        Raises:
            OutOfRange: If `offset` is outside [0, length].
            InvalidFormat: If the text does not fit the template. A replace in
                progress is rolled back before this is raised.
        """
        self._check_offset(offset)
        template = self.template
        default = template.default_fill()

        if text and text != default and template.is_literal(offset - 1) \
                and text[0] == template.slots[offset - 1].char:
            text = text[1:]

        if not self.validate(offset, text):
            self._reject(offset, text)

        if not text:
            return self._finish_empty_insert()

        if text == default:
            self._content = self._content[:offset] + default[offset:]
            return self._place(offset, FORWARD)

        current = self._content
        formatted = self.format(offset, self._incoming(offset, text))
        end = offset + len(formatted)
        if self.overtype:
            updated = current[:offset] + formatted + current[end:]
        else:
            trailing = template.project(current[offset:], offset)[:template.variable_slots_from(end)]
            shifted = self.format(end, trailing)
            updated = current[:offset] + formatted + shifted + default[end + len(shifted):]
        if not self._conforms(updated):
            self._reject(offset, text)

        self._content = updated
        logger.debug(f"Inserted {formatted!r} at {offset}: {self._content!r}")
        return self._place(end, FORWARD)

    def remove(self, offset: int, count: int) -> int:
        """
        Removes `count` characters starting at `offset`.

        Literals are never removed. A removal that starts on a literal moves
        back to the nearest variable slot before it (or, in front of the first
        variable slot, forward onto it). Outside a replace the characters
        after the removed run shift left and the tail falls back to the
        default fill; inside a replace the removed slots are only blanked and
        the insertion that follows lays the characters out again.

        Returns:
            int: The new caret position.

        Raises:
            OutOfRange: If the range is outside [0, length].
        """
        self._check_range(offset, count)
        adjusted, count = self._adjust_removal(offset, count)
        if count == 0:
            return self._caret

        current = self._content
        end = adjusted + count
        if self.edit_state is EditState.REPLACING:
            self.pending_removal = PendingRemoval(adjusted, current[adjusted:end], self._snapshot())
            self._content = current[:adjusted] + self._blank(current, adjusted, end) + current[end:]
            logger.debug(f"Cleared {current[adjusted:end]!r} at {adjusted} for replacement.")
            return self._caret

        self._shift_left(adjusted, end)
        logger.debug(f"Removed {current[adjusted:end]!r} at {adjusted}: {self._content!r}")
        return self._place(adjusted, BACKWARD)

    def replace(self, offset: int, count: int, text: str) -> int:
        """
        Replaces `count` characters at `offset` with `text`.

        If `text` is rejected the buffer is restored to its state before the
        call and `InvalidFormat` propagates.

        Returns:
            int: The new caret position.
        """
        self._check_range(offset, count)
        self.edit_state = EditState.REPLACING
        try:
            self.remove(offset, count)
            return self.insert(offset, text)
        finally:
            self.edit_state = EditState.IDLE
            self.pending_removal = None

    def clear(self) -> int:
        """Resets every slot to the default fill."""
        self._content = self.template.default_fill()
        return self._place(self.template.first_variable, FORWARD)

    def set_value(self, raw: str) -> int:
        """
        Replaces the whole content with `raw` laid out from the first slot.

        Raises:
            InvalidFormat: If `raw` does not fit; the buffer is unchanged.
        """
        snapshot = self._snapshot()
        self.clear()
        if not raw:
            return self._caret
        try:
            return self.insert(self.template.first_variable, raw)
        except InvalidFormat:
            self._restore(snapshot)
            raise

    # --- Navigation ---

    def toggle_overtype(self) -> bool:
        """
        Switches between insert and overtype mode.

        The caret becomes a one-slot selection (or the reverse) anchored at
        the same position.

        Returns:
            bool: True if overtype mode is now enabled.
        """
        anchor = self._selection_start if self.overtype else self._caret
        self.overtype = not self.overtype
        self._place(anchor, FORWARD)
        logger.debug(f"Overtype {'enabled' if self.overtype else 'disabled'} at {anchor}.")
        return self.overtype

    def navigate(self, intent: Union[Intent, ClickAt, DoubleClickAt]) -> Selection:
        """
        Applies a navigation intent.

        Returns:
            Selection: The caret and selection afterwards.
        """
        template = self.template
        length = template.length

        if isinstance(intent, ClickAt):
            self._click(intent)
        elif isinstance(intent, DoubleClickAt):
            self._check_offset(intent.position)
            start, end = template.group_at(intent.position)
            self._select(start, end, end)
        elif intent is Intent.MOVE_LEFT:
            if self.overtype:
                previous = template.previous_variable(self._selection_start - 1)
                self._place(self._selection_start if previous is None else previous, BACKWARD)
            else:
                self._place(self._caret - 1, BACKWARD)
        elif intent is Intent.MOVE_RIGHT:
            if self.overtype:
                following = template.next_variable(self._selection_start + 1)
                self._place(self._selection_start if following is None else following, FORWARD)
            elif self._caret < length:
                self._place(self._caret + 1, FORWARD)
        elif intent is Intent.MOVE_HOME:
            self._place(0, FORWARD)
        elif intent is Intent.MOVE_END:
            self._place(length, BACKWARD)
        elif intent is Intent.SELECT_ALL:
            self._select(template.first_variable, length, length)
        elif intent is Intent.SELECT_HOME:
            if not self.overtype:
                start = min(template.first_variable, self._caret)
                self._select(start, max(template.first_variable, self._caret), self._caret)
        elif intent is Intent.SELECT_END:
            if not self.overtype:
                self._select(self._caret, length, length)
        elif intent is Intent.TOGGLE_OVERTYPE:
            self.toggle_overtype()
        else:
            raise ValueError(f"Unknown navigation intent: {intent!r}")

        return self.selection

    def _click(self, click: ClickAt):
        self._check_offset(click.position)
        if click.anchor is None or click.anchor == click.position:
            self._place(click.position, FORWARD)
            return
        self._check_offset(click.anchor)
        start, end = sorted((click.anchor, click.position))
        if start < self.template.first_variable:
            start = self.template.first_variable
        if start >= end:
            self._place(start, FORWARD)
            return
        self._select(start, end, end if click.position >= click.anchor else start)

    # --- Internals ---

    def _place(self, position: int, direction: int) -> int:
        """Moves the caret to `position` under the current mode's resting rule."""
        if self.overtype:
            slot = overtype_slot(self.template, position, direction)
            self._select(slot, slot + 1, slot)
        else:
            caret = insert_caret(self.template, position, direction)
            self._select(caret, caret, caret)
        return self._caret

    def _select(self, start: int, end: int, caret: int):
        self._selection_start = start
        self._selection_end = end
        self._caret = caret

    def _shift_left(self, start: int, end: int):
        """
        Drops [start, end) and pulls the following variable characters into place.

        When a pulled character would land in a slot of another class (mixed
        templates), the removed slots are blanked in place instead.
        """
        current = self._content
        shifted = self.format(start, self.template.project(current[end:], end))
        updated = current[:start] + shifted + self.template.default_fill()[start + len(shifted):]
        if not self._conforms(updated):
            updated = current[:start] + self._blank(current, start, end) + current[end:]
        self._content = updated

    def _blank(self, current: str, start: int, end: int) -> str:
        template = self.template
        return "".join(
            template.placeholder if template.is_variable(position) else current[position]
            for position in range(start, end)
        )

    def _conforms(self, content: str) -> bool:
        template = self.template
        return all(
            content[position] == template.placeholder or template.accepts(position, content[position])
            for position in template.variable_positions
        )

    def _reject(self, offset: int, text: str):
        """Rolls back a replace in progress and raises InvalidFormat."""
        if self.pending_removal is not None:
            self._restore(self.pending_removal.snapshot)
            logger.debug(f"Restored {self.pending_removal.text!r} after a rejected replace.")
        logger.info(f"Rejected {text!r} at offset {offset} for {self.template!r}.")
        raise InvalidFormat(
            f"{text!r} does not fit {self.template!r} at offset {offset}.", offset=offset, value=text
        )

    def _incoming(self, offset: int, text: str) -> Optional[str]:
        """
        The characters `text` puts into variable slots, or None if it cannot be placed.

        Text that lines up with the literals from `offset` is read slot by
        slot and every variable slot it covers must accept its character.
        Other text may only hold characters some variable slot could take.
        """
        template = self.template
        if template.lines_up(text, offset):
            incoming = template.project(text, offset)
            covered = sum(1 for index in range(len(text)) if template.is_variable(offset + index))
            return incoming if len(incoming) == covered else None
        if all(template.is_variable_char(char) for char in text):
            return text
        return None

    def _finish_empty_insert(self) -> int:
        pending = self.pending_removal
        if pending is None:
            return self._caret
        if not self.overtype:
            self._shift_left(pending.offset, pending.offset)
        return self._place(pending.offset, FORWARD)

    def _adjust_removal(self, offset: int, count: int) -> Tuple[int, int]:
        if count == 0 or not self.template.is_literal(offset):
            return offset, count
        previous = self.template.previous_variable(offset)
        if previous is not None:
            return previous, count
        following = self.template.next_variable(offset)
        if following is None or following >= offset + count:
            return offset, 0
        return following, count - (following - offset)

    def _count_entered(self, excluding: Optional[Tuple[int, int]] = None) -> int:
        placeholder = self.template.placeholder
        count = 0
        for position in self.template.variable_positions:
            if excluding and excluding[0] <= position < excluding[1]:
                continue
            if self._content[position] != placeholder:
                count += 1
        return count

    def _snapshot(self) -> _Snapshot:
        return _Snapshot(self._content, self._caret, self._selection_start, self._selection_end)

    def _restore(self, snapshot: _Snapshot):
        self._content = snapshot.content
        self._select(snapshot.selection_start, snapshot.selection_end, snapshot.caret)

    def _check_offset(self, offset: int):
        if not 0 <= offset <= self.template.length:
            raise OutOfRange(f"Offset {offset} is outside [0, {self.template.length}].")

    def _check_range(self, offset: int, count: int):
        self._check_offset(offset)
        if count < 0 or offset + count > self.template.length:
            raise OutOfRange(
                f"Range ({offset}, {count}) is outside [0, {self.template.length}]."
            )

    def __repr__(self) -> str:
        mode = "overtype" if self.overtype else "insert"
        return f"{self.__class__.__name__}({self._content!r}, caret={self._caret}, {mode})"


def create_buffer(template: Template, overtype: bool = False) -> MaskedBuffer:
    """Creates a buffer bound to `template`, filled with its default content."""
    return MaskedBuffer(template, overtype=overtype)
