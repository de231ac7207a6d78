"""Shared fixtures for the MaskEdit test suite."""

import os
import tempfile

# maskedit.config writes its config.ini under the home directory on import;
# point it at a throwaway directory before any test module imports it.
_HOME = tempfile.mkdtemp(prefix="maskedit-home-")
os.environ["HOME"] = _HOME
os.environ["USERPROFILE"] = _HOME
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from maskedit.core import PHONE_NUMBER, SSN, create_buffer


@pytest.fixture
def buffer():
    """A fresh phone-number buffer."""
    return create_buffer(PHONE_NUMBER)


@pytest.fixture
def full_buffer():
    """A phone-number buffer holding (555)123-4567, caret at the end."""
    phone = create_buffer(PHONE_NUMBER)
    phone.insert(1, "5551234567")
    return phone


@pytest.fixture
def ssn_buffer():
    return create_buffer(SSN)


@pytest.fixture(scope="session")
def qapp():
    """A QApplication for widget tests; skips when PyQt6 is unavailable."""
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app


@pytest.fixture
def quiet_config(tmp_path, monkeypatch, qapp):
    """Points the masked field at a config with the error beep turned off."""
    from maskedit.config import Config
    from maskedit.gui import masked_field

    (tmp_path / "config.ini").write_text("[Editing]\nbeep_on_error = no\n")
    settings = Config(app_dir=tmp_path)
    monkeypatch.setattr(masked_field, "config", settings)
    return settings
