"""Tests for the MaskEdit demo window."""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from maskedit.app import MaskEditApp, build_templates
from maskedit.config import Config
from maskedit.core import Intent


@pytest.fixture
def settings(tmp_path):
    return Config(app_dir=tmp_path / "app")


@pytest.fixture
def window(quiet_config, settings):
    return MaskEditApp(settings=settings)


class TestBuildTemplates:
    """Test suite for build_templates."""

    def test_defaults(self, settings):
        templates = build_templates(settings)
        assert list(templates) == ["phone", "ssn"]
        assert templates["phone"].default_fill() == "(___)___-____"

    def test_bad_pattern_is_skipped(self, tmp_path):
        (tmp_path / "config.ini").write_text("[Templates]\nbad = ()\nzip = #####\n")
        templates = build_templates(Config(app_dir=tmp_path))
        assert list(templates) == ["zip"]

    def test_percent_pattern(self, tmp_path):
        (tmp_path / "config.ini").write_text("[Templates]\nrate = ##.#%\n")
        templates = build_templates(Config(app_dir=tmp_path))
        assert templates["rate"].default_fill() == "__._%"


class TestMaskEditApp:
    """Test suite for MaskEditApp."""

    def test_one_field_per_template(self, window):
        assert set(window.fields) == {"phone", "ssn"}
        assert window.fields["ssn"].text() == "___-__-____"

    def test_complete_value_is_reported(self, window):
        window.fields["phone"].set_value("5551234567")
        assert window.status_label.text() == "phone: (555)123-4567 complete"

    def test_rejection_is_reported(self, window):
        window.fields["ssn"].set_value("x")
        assert "'x' does not fit" in window.status_label.text()

    def test_overtype_is_reported(self, window):
        window.fields["phone"].navigate(Intent.TOGGLE_OVERTYPE)
        assert window.status_label.text() == "phone: overtype mode"
