# -*- coding: utf-8 -*-
"""
src/maskedit/gui/masked_field.py

Defines the MaskedLineEdit widget, a QLineEdit bound to a masked buffer.

The widget owns no formatting logic. Key presses and mouse releases are
turned into edits and navigation intents for its `MaskedBuffer`, and the
buffer's content, caret and selection are mirrored back into the line edit
after every step. A rejected edit beeps (when configured) and emits
`edit_rejected`.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QKeySequence, QMouseEvent, QPalette
from PyQt6.QtWidgets import QApplication, QLineEdit, QWidget

from ..config import config
from ..core import ClickAt, DoubleClickAt, Intent, InvalidFormat, MaskedBuffer, Template
from ..utils.clipboard_manager import copy_to_clipboard, paste_from_clipboard

logger = logging.getLogger(__name__)

SELECTION_COLOR = QColor(10, 36, 106)

# Keys handled without modifiers (or with Shift, for Home/End)
NAVIGATION_KEYS = {
    Qt.Key.Key_Left.value: Intent.MOVE_LEFT,
    Qt.Key.Key_Right.value: Intent.MOVE_RIGHT,
    Qt.Key.Key_Home.value: Intent.MOVE_HOME,
    Qt.Key.Key_End.value: Intent.MOVE_END,
    Qt.Key.Key_Insert.value: Intent.TOGGLE_OVERTYPE,
}
SHIFTED_NAVIGATION_KEYS = {
    Qt.Key.Key_Home.value: Intent.SELECT_HOME,
    Qt.Key.Key_End.value: Intent.SELECT_END,
}


class MaskedLineEdit(QLineEdit):
    """
    A single-line text field that only accepts input matching a template.

    Signals:
        edit_rejected (str): The text of an edit the template refused.
        overtype_changed (bool): The new overtype state after Insert.
        value_changed (str): The entered characters after a successful edit.
    """
    edit_rejected = pyqtSignal(str)
    overtype_changed = pyqtSignal(bool)
    value_changed = pyqtSignal(str)

    def __init__(self, template: Template, parent: Optional[QWidget] = None):
        """
        Initializes the field.

        Args:
            template (Template): The format the field enforces.
            parent (QWidget, optional): The parent widget. Defaults to None.
        """
        super().__init__(parent)
        self.buffer = MaskedBuffer(template, overtype=config.start_in_overtype)

        self.setFont(QFont(config.font_family, config.font_size))
        self.setMaxLength(template.length)
        self.setAcceptDrops(False)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.NoContextMenu)

        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Highlight, SELECTION_COLOR)
        palette.setColor(QPalette.ColorRole.HighlightedText, QColor(Qt.GlobalColor.white))
        self.setPalette(palette)

        self._sync()
        logger.debug(f"Created masked field for {template!r}.")

    # --- Public API ---

    @property
    def template(self) -> Template:
        return self.buffer.template

    def value(self) -> str:
        """The entered characters without literals or placeholders."""
        return self.buffer.value

    def set_value(self, raw: str) -> bool:
        """
        Replaces the field content with `raw`.

        Returns:
            bool: False if the template rejected `raw`.
        """
        return self._apply(lambda: self.buffer.set_value(raw), raw)

    def setText(self, text: str):
        self.set_value(text)

    def clear(self):
        self.buffer.clear()
        self._sync()
        self.value_changed.emit(self.buffer.value)

    def is_overtype(self) -> bool:
        return self.buffer.overtype

    # --- Edit actions ---

    def type_text(self, text: str) -> bool:
        """Types `text` over the current selection, or at the caret."""
        buffer = self.buffer
        start, end = buffer.selection_start, buffer.selection_end
        if end > start:
            return self._apply(lambda: buffer.replace(start, end - start, text), text)
        return self._apply(lambda: buffer.insert(buffer.caret, text), text)

    def delete_backward(self):
        buffer = self.buffer
        start, end = buffer.selection_start, buffer.selection_end
        if end > start and not buffer.overtype:
            self._apply(lambda: buffer.remove(start, end - start), "")
        elif buffer.overtype:
            self._apply(lambda: buffer.remove(start, 1), "")
        elif buffer.caret > 0:
            self._apply(lambda: buffer.remove(buffer.caret - 1, 1), "")

    def delete_forward(self):
        buffer = self.buffer
        start, end = buffer.selection_start, buffer.selection_end
        if end > start:
            self._apply(lambda: buffer.remove(start, end - start), "")
        elif buffer.caret < self.template.length:
            self._apply(lambda: buffer.remove(buffer.caret, 1), "")

    def copy(self):
        text = self.buffer.selected_text
        if text:
            copy_to_clipboard(text)

    def cut(self):
        buffer = self.buffer
        start, end = buffer.selection_start, buffer.selection_end
        if end > start and copy_to_clipboard(buffer.selected_text):
            self._apply(lambda: buffer.replace(start, end - start, ""), "")

    def paste(self):
        text = paste_from_clipboard()
        if text:
            self.type_text(text.strip())

    def navigate(self, intent):
        selection = self.buffer.navigate(intent)
        self._sync()
        if intent is Intent.TOGGLE_OVERTYPE:
            self.overtype_changed.emit(self.buffer.overtype)
        return selection

    # --- Qt event handlers ---

    def keyPressEvent(self, event: QKeyEvent):
        key = event.key()
        modifiers = event.modifiers()
        shift = bool(modifiers & Qt.KeyboardModifier.ShiftModifier)

        if event.matches(QKeySequence.StandardKey.SelectAll):
            self.navigate(Intent.SELECT_ALL)
        elif event.matches(QKeySequence.StandardKey.Copy):
            self.copy()
        elif event.matches(QKeySequence.StandardKey.Cut):
            self.cut()
        elif event.matches(QKeySequence.StandardKey.Paste):
            self.paste()
        elif shift and key in SHIFTED_NAVIGATION_KEYS:
            self.navigate(SHIFTED_NAVIGATION_KEYS[key])
        elif key in NAVIGATION_KEYS:
            self.navigate(NAVIGATION_KEYS[key])
        elif key == Qt.Key.Key_Backspace.value:
            self.delete_backward()
        elif key == Qt.Key.Key_Delete.value:
            self.delete_forward()
        elif event.text() and event.text().isprintable() and not (
                modifiers & (Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.AltModifier)):
            self.type_text(event.text())
        else:
            # Tab, Enter, Escape and shortcuts belong to the surrounding window
            super().keyPressEvent(event)
            return
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        super().mouseReleaseEvent(event)
        if event.button() != Qt.MouseButton.LeftButton:
            return
        if self.hasSelectedText():
            start = self.selectionStart()
            end = start + len(self.selectedText())
            anchor, position = (end, start) if self.cursorPosition() == start else (start, end)
            self.navigate(ClickAt(position, anchor))
        else:
            self.navigate(ClickAt(self.cursorPosition()))

    def mouseDoubleClickEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseDoubleClickEvent(event)
            return
        position = self.cursorPositionAt(event.position().toPoint())
        self.navigate(DoubleClickAt(position))
        event.accept()

    # --- Internals ---

    def _apply(self, edit, text: str) -> bool:
        """Runs one buffer edit, then mirrors the buffer or signals the rejection."""
        try:
            edit()
        except InvalidFormat as e:
            logger.info(f"Edit rejected: {e}")
            if config.beep_on_error:
                QApplication.beep()
            self._sync()
            self.edit_rejected.emit(text)
            return False
        self._sync()
        self.value_changed.emit(self.buffer.value)
        return True

    def _sync(self):
        """Copies content, caret and selection from the buffer into the widget."""
        buffer = self.buffer
        self.blockSignals(True)
        try:
            super().setText(buffer.content)
            start, end = buffer.selection_start, buffer.selection_end
            if end > start:
                if buffer.caret == start:
                    self.setSelection(end, start - end)
                else:
                    self.setSelection(start, end - start)
            else:
                self.setCursorPosition(buffer.caret)
        finally:
            self.blockSignals(False)


if __name__ == '__main__':
    import sys

    from ..core import PHONE_NUMBER

    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')

    app = QApplication(sys.argv)
    field = MaskedLineEdit(PHONE_NUMBER)
    field.edit_rejected.connect(lambda text: print(f"Rejected: {text!r}"))
    field.value_changed.connect(lambda value: print(f"Value: {value!r}"))
    field.show()
    sys.exit(app.exec())
