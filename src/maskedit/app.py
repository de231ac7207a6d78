# -*- coding: utf-8 -*-
"""
src/maskedit/app.py

Application controller for the MaskEdit demo.

`MaskEditApp` builds one masked field per template configured in the
[Templates] section of config.ini, lays them out in a small window and
reports rejected edits and overtype changes in a status line.
"""

import logging
from typing import Dict, Optional

from PyQt6.QtWidgets import QApplication, QFormLayout, QLabel, QVBoxLayout, QWidget

from .config import APP_NAME, Config, config as default_config
from .core import Template
from .gui.masked_field import MaskedLineEdit

logger = logging.getLogger(__name__)

READY_MESSAGE = "Insert toggles overtype. Ctrl+A selects the whole field."


def build_templates(settings: Config) -> Dict[str, Template]:
    """
    Parses the configured template patterns.

    Patterns that cannot be parsed are logged and skipped.

    Returns:
        Dict[str, Template]: Templates keyed by field name, in file order.
    """
    templates = {}
    for name, pattern in settings.templates.items():
        try:
            templates[name] = Template.from_pattern(pattern, placeholder=settings.placeholder, name=name)
        except ValueError as e:
            logger.error(f"Skipping template '{name}' ({pattern!r}): {e}")
    return templates


class MaskEditApp:
    """
    The main application controller. Owns the window and its fields.
    """

    def __init__(self, app: Optional[QApplication] = None, settings: Optional[Config] = None):
        self.app = app
        self.settings = settings or default_config
        self.fields: Dict[str, MaskedLineEdit] = {}

        self.window = QWidget()
        self.window.setWindowTitle(APP_NAME)
        self.status_label = QLabel(READY_MESSAGE)

        self.setup_window()
        logger.info(f"{APP_NAME} started with fields: {', '.join(self.fields) or 'none'}")

    def setup_window(self):
        """Creates a labelled field for every configured template."""
        layout = QVBoxLayout(self.window)
        form = QFormLayout()

        for name, template in build_templates(self.settings).items():
            field = MaskedLineEdit(template)
            field.edit_rejected.connect(lambda text, name=name: self.on_edit_rejected(name, text))
            field.overtype_changed.connect(lambda enabled, name=name: self.on_overtype_changed(name, enabled))
            field.value_changed.connect(lambda value, name=name: self.on_value_changed(name, value))
            form.addRow(QLabel(name.upper() if len(name) <= 3 else name.capitalize()), field)
            self.fields[name] = field

        layout.addLayout(form)
        layout.addWidget(self.status_label)

    def on_edit_rejected(self, name: str, text: str):
        message = f"{name}: '{text}' does not fit {self.fields[name].template!r}"
        logger.info(message)
        self.status_label.setText(message)

    def on_overtype_changed(self, name: str, enabled: bool):
        self.status_label.setText(f"{name}: {'overtype' if enabled else 'insert'} mode")

    def on_value_changed(self, name: str, value: str):
        field = self.fields.get(name)
        if field is not None and field.buffer.is_complete:
            self.status_label.setText(f"{name}: {field.buffer.content} complete")

    def show(self):
        self.window.show()

    def quit_app(self):
        logger.info(f"Quitting {APP_NAME}...")
        self.window.close()
        if self.app is not None:
            self.app.quit()
