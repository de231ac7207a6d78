"""Tests for the MaskedLineEdit widget, driven through synthetic key events."""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QKeyEvent

from maskedit.core import PHONE_NUMBER, Intent
from maskedit.gui import MaskedLineEdit
from maskedit.gui import masked_field

FULL_PHONE = "(555)123-4567"
EMPTY_PHONE = "(   )   -    "


def press(field, key, text="", modifiers=Qt.KeyboardModifier.NoModifier):
    field.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, key, modifiers, text))


def type_keys(field, chars):
    for char in chars:
        press(field, ord(char), char)


@pytest.fixture
def field(quiet_config):
    widget = MaskedLineEdit(PHONE_NUMBER)
    yield widget
    widget.deleteLater()


@pytest.fixture
def signals(field):
    """Records every signal the field emits."""
    seen = {"rejected": [], "overtype": [], "value": []}
    field.edit_rejected.connect(seen["rejected"].append)
    field.overtype_changed.connect(seen["overtype"].append)
    field.value_changed.connect(seen["value"].append)
    return seen


# =============================================================================
# Typing
# =============================================================================


class TestTyping:
    """Test suite for character keys."""

    def test_starts_empty(self, field):
        assert field.text() == EMPTY_PHONE
        assert field.cursorPosition() == 1
        assert field.maxLength() == 13

    def test_type_full_number(self, field, signals):
        type_keys(field, "5551234567")
        assert field.text() == FULL_PHONE
        assert field.value() == "5551234567"
        assert field.cursorPosition() == 13
        assert signals["value"][-1] == "5551234567"

    def test_rejected_key(self, field, signals):
        type_keys(field, "55a")
        assert field.text() == "(55 )   -    "
        assert signals["rejected"] == ["a"]

    def test_typing_over_selection(self, field):
        type_keys(field, "5551234567")
        field.navigate(Intent.SELECT_ALL)
        type_keys(field, "8005550199")
        assert field.text() == "(800)555-0199"


# =============================================================================
# Editing Keys
# =============================================================================


class TestEditingKeys:
    """Test suite for Backspace, Delete and Insert."""

    def test_backspace_over_literal(self, field):
        type_keys(field, "555")
        press(field, Qt.Key.Key_Backspace.value)
        assert field.text() == "(55 )   -    "
        assert field.cursorPosition() == 3

    def test_delete_forward(self, field):
        field.set_value("5551234567")
        press(field, Qt.Key.Key_Home.value)
        press(field, Qt.Key.Key_Delete.value)
        assert field.text() == "(551)234-567 "

    def test_insert_key_toggles_overtype(self, field, signals):
        press(field, Qt.Key.Key_Insert.value)
        assert field.is_overtype()
        assert signals["overtype"] == [True]
        assert field.selectionStart() == 1
        assert field.selectedText() == " "

    def test_overtype_typing(self, field):
        field.set_value("5551234567")
        press(field, Qt.Key.Key_Insert.value)
        press(field, Qt.Key.Key_Home.value)
        type_keys(field, "9")
        assert field.text() == "(955)123-4567"
        assert field.selectionStart() == 2

    def test_arrow_keys(self, field):
        press(field, Qt.Key.Key_Right.value)
        press(field, Qt.Key.Key_Right.value)
        press(field, Qt.Key.Key_Right.value)
        assert field.cursorPosition() == 5
        press(field, Qt.Key.Key_Left.value)
        assert field.cursorPosition() == 3

    def test_shift_end_selects(self, field):
        field.set_value("5551234567")
        press(field, Qt.Key.Key_Home.value)
        press(field, Qt.Key.Key_End.value, modifiers=Qt.KeyboardModifier.ShiftModifier)
        assert field.selectedText() == "555)123-4567"


# =============================================================================
# Clipboard and Programmatic Access
# =============================================================================


class TestClipboard:
    """Test suite for copy, cut and paste."""

    def test_paste_strips_whitespace(self, field, monkeypatch):
        monkeypatch.setattr(masked_field, "paste_from_clipboard", lambda: " (555)123-4567\n")
        field.paste()
        assert field.text() == FULL_PHONE

    def test_paste_nothing(self, field, monkeypatch):
        monkeypatch.setattr(masked_field, "paste_from_clipboard", lambda: None)
        field.paste()
        assert field.text() == EMPTY_PHONE

    def test_copy_selection(self, field, monkeypatch):
        copied = []
        monkeypatch.setattr(masked_field, "copy_to_clipboard", lambda text: copied.append(text) or True)
        field.set_value("5551234567")
        field.navigate(Intent.SELECT_ALL)
        field.copy()
        assert copied == ["555)123-4567"]

    def test_cut_selection(self, field, monkeypatch):
        copied = []
        monkeypatch.setattr(masked_field, "copy_to_clipboard", lambda text: copied.append(text) or True)
        field.set_value("5551234567")
        field.navigate(Intent.SELECT_ALL)
        field.cut()
        assert copied == ["555)123-4567"]
        assert field.text() == EMPTY_PHONE

    def test_cut_keeps_text_when_copy_fails(self, field, monkeypatch):
        monkeypatch.setattr(masked_field, "copy_to_clipboard", lambda text: False)
        field.set_value("5551234567")
        field.navigate(Intent.SELECT_ALL)
        field.cut()
        assert field.text() == FULL_PHONE


class TestProgrammaticAccess:
    """Test suite for set_value, setText and clear."""

    def test_set_value(self, field):
        assert field.set_value("5551234567") is True
        assert field.text() == FULL_PHONE

    def test_set_value_rejected(self, field, signals):
        field.set_value("5551234567")
        assert field.set_value("abc") is False
        assert field.text() == FULL_PHONE
        assert signals["rejected"] == ["abc"]

    def test_set_text_goes_through_template(self, field):
        field.setText("(555)123-4567")
        assert field.value() == "5551234567"

    def test_clear(self, field):
        field.set_value("5551234567")
        field.clear()
        assert field.text() == EMPTY_PHONE
