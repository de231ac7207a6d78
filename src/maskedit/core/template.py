# -*- coding: utf-8 -*-
"""
src/maskedit/core/template.py

Immutable description of a fixed-length input format.

A template is an ordered sequence of slots. A `Literal` slot always holds the
same character (the parentheses and dash of a phone number); a `Variable`
slot holds either the placeholder or one character of its `CharacterClass`.
Templates answer classification queries only and never change once built,
so a single instance is shared by every buffer that uses the format.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from .errors import OutOfRange

# --- Pattern syntax ---
PATTERN_ESCAPE = "\\"
DEFAULT_PLACEHOLDER = " "


class CharacterClass(Enum):
    """The set of characters a variable slot accepts."""

    DIGIT = "#"
    LETTER = "A"
    ALPHANUMERIC = "*"

    def matches(self, char: str) -> bool:
        """Returns True if `char` is a single character of this class."""
        if len(char) != 1:
            return False
        if self is CharacterClass.DIGIT:
            return char.isdigit()
        if self is CharacterClass.LETTER:
            return char.isalpha()
        return char.isalnum()


@dataclass(frozen=True)
class Literal:
    """A slot that always holds `char`."""

    char: str


@dataclass(frozen=True)
class Variable:
    """A slot accepting one character of `character_class`."""

    character_class: CharacterClass


Slot = Union[Literal, Variable]


class Template:
    """
    A fixed-length layout of literal and variable character slots.

    Attributes:
        slots (Tuple[Slot, ...]): One descriptor per character position.
        placeholder (str): The character shown in an empty variable slot.
        name (Optional[str]): A label for logs and the demo window.
    """

    def __init__(self, slots: Iterable[Slot], placeholder: str = DEFAULT_PLACEHOLDER,
                 name: Optional[str] = None):
        self.slots: Tuple[Slot, ...] = tuple(slots)
        self.placeholder = placeholder
        self.name = name

        if len(placeholder) != 1:
            raise ValueError(f"Placeholder must be a single character, got {placeholder!r}.")

        self._variables = tuple(
            index for index, slot in enumerate(self.slots) if isinstance(slot, Variable)
        )
        if not self._variables:
            raise ValueError("A template needs at least one variable slot.")

        for slot in self.slots:
            if isinstance(slot, Variable) and slot.character_class.matches(placeholder):
                raise ValueError(
                    f"Placeholder {placeholder!r} is accepted by {slot.character_class.name} slots."
                )
            if isinstance(slot, Literal) and slot.char == placeholder:
                raise ValueError(f"Placeholder {placeholder!r} collides with a literal slot.")

        self._classes = frozenset(self.slots[index].character_class for index in self._variables)
        self._default_fill = "".join(
            slot.char if isinstance(slot, Literal) else placeholder for slot in self.slots
        )

    @classmethod
    def from_pattern(cls, pattern: str, placeholder: str = DEFAULT_PLACEHOLDER,
                     name: Optional[str] = None) -> "Template":
        """
        Builds a template from a compact pattern string.

        `#` is a digit slot, `A` a letter slot and `*` an alphanumeric slot.
        A backslash makes the next character a literal; every other character
        is a literal as written.

        Args:
            pattern (str): The pattern, e.g. "(###)###-####".
            placeholder (str): Filler for empty variable slots.
            name (Optional[str]): Optional label for the template.

        Returns:
            Template: The parsed template.
        """
        by_symbol = {member.value: member for member in CharacterClass}
        slots = []
        escaped = False
        for char in pattern:
            if escaped:
                slots.append(Literal(char))
                escaped = False
            elif char == PATTERN_ESCAPE:
                escaped = True
            elif char in by_symbol:
                slots.append(Variable(by_symbol[char]))
            else:
                slots.append(Literal(char))
        if escaped:
            raise ValueError(f"Pattern {pattern!r} ends with a dangling escape.")
        return cls(slots, placeholder=placeholder, name=name)

    # --- Shape ---

    @property
    def length(self) -> int:
        """Total number of character positions."""
        return len(self.slots)

    @property
    def capacity(self) -> int:
        """Number of variable slots."""
        return len(self._variables)

    @property
    def variable_positions(self) -> Tuple[int, ...]:
        return self._variables

    @property
    def first_variable(self) -> int:
        return self._variables[0]

    @property
    def last_variable(self) -> int:
        return self._variables[-1]

    def default_fill(self) -> str:
        """The content of a buffer in which every variable slot is empty."""
        return self._default_fill

    # --- Classification ---

    def slot_at(self, position: int) -> Slot:
        """
        Returns the slot descriptor at `position`.

        Raises:
            OutOfRange: If `position` is outside [0, length).
        """
        if not 0 <= position < self.length:
            raise OutOfRange(f"Position {position} is outside [0, {self.length}).")
        return self.slots[position]

    def is_literal(self, position: int) -> bool:
        return 0 <= position < self.length and isinstance(self.slots[position], Literal)

    def is_variable(self, position: int) -> bool:
        return 0 <= position < self.length and isinstance(self.slots[position], Variable)

    def accepts(self, position: int, char: str) -> bool:
        """Returns True if the variable slot at `position` accepts `char`."""
        if not self.is_variable(position):
            return False
        return self.slots[position].character_class.matches(char)

    def is_variable_char(self, char: str) -> bool:
        """Returns True if some variable slot of this template could hold `char`."""
        return any(character_class.matches(char) for character_class in self._classes)

    def extract(self, raw: str) -> str:
        """
        Projects free-form `raw` down to the characters a variable slot could hold.

        Filters by character class alone, so it suits typed or pasted text
        that is not aligned to the slots. Use `project` for buffer content.
        """
        return "".join(char for char in raw if self.is_variable_char(char))

    def project(self, text: str, offset: int = 0) -> str:
        """
        Reads the entered characters out of slot-aligned `text`.

        `text[i]` is taken to sit at position `offset + i`. Only characters
        in variable slots that the slot accepts are kept, so literals and
        placeholders drop out even when a literal is itself a digit or letter.
        """
        return "".join(char for index, char in enumerate(text) if self.accepts(offset + index, char))

    def lines_up(self, text: str, offset: int = 0) -> bool:
        """
        Returns True if `text` reads as formatted content placed at `offset`.

        The text must fit within the template, cover at least one literal
        slot, and hold exactly that literal at every literal slot it covers.
        """
        if offset < 0 or offset + len(text) > self.length:
            return False
        covered = [offset + index for index in range(len(text)) if self.is_literal(offset + index)]
        return bool(covered) and all(text[position - offset] == self.slots[position].char
                                     for position in covered)

    # --- Slot searches ---

    def variable_slots_from(self, offset: int) -> int:
        """Number of variable slots in [offset, length)."""
        return sum(1 for index in self._variables if index >= offset)

    def next_variable(self, position: int) -> Optional[int]:
        """The first variable slot at or after `position`, or None."""
        for index in self._variables:
            if index >= position:
                return index
        return None

    def previous_variable(self, position: int) -> Optional[int]:
        """The last variable slot at or before `position`, or None."""
        for index in reversed(self._variables):
            if index <= position:
                return index
        return None

    def group_at(self, position: int) -> Tuple[int, int]:
        """
        The run of consecutive variable slots around `position`.

        A literal position (or the end of the template) resolves to the group
        just before it, falling back to the group after it.

        Returns:
            Tuple[int, int]: The half-open range (start, end) of the group.
        """
        anchor = position if self.is_variable(position) else self.previous_variable(position)
        if anchor is None:
            anchor = self.next_variable(position)
        start = end = anchor
        while self.is_variable(start - 1):
            start -= 1
        while self.is_variable(end + 1):
            end += 1
        return start, end + 1

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        pattern = "".join(
            slot.character_class.value if isinstance(slot, Variable) else slot.char
            for slot in self.slots
        )
        return f"{self.__class__.__name__}({pattern!r}, placeholder={self.placeholder!r})"


# --- Presets ---
PHONE_NUMBER = Template.from_pattern("(###)###-####", name="phone")
SSN = Template.from_pattern("###-##-####", name="ssn")
