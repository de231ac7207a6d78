# -*- coding: utf-8 -*-
"""
src/maskedit/config.py

Module for handling application configuration.

This module defines the default settings for MaskEdit: the log level, the
editing behaviour of masked fields (placeholder character, initial overtype
mode, whether a rejected edit beeps), the field font and the named templates
shown in the demo window. User settings are read from a config.ini in the
application data directory, which is created with default values on the
first run.
"""

import configparser
import logging
import platform
from pathlib import Path
from typing import Dict, Optional

# --- Constants ---
APP_NAME = "MaskEdit"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_PLACEHOLDER = "_"
DEFAULT_TEMPLATES = {
    "phone": "(###)###-####",
    "ssn": "###-##-####",
}

logger = logging.getLogger(__name__)


def get_app_dir() -> Path:
    """
    Gets the application's data directory in a cross-platform way.

    - Windows: %APPDATA%/MaskEdit
    - macOS: ~/Library/Application Support/MaskEdit
    - Linux: ~/.config/MaskEdit

    Returns:
        Path: A Path object to the application's data directory.
    """
    if platform.system() == "Windows":
        app_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:
        app_dir = Path.home() / ".config" / APP_NAME

    try:
        app_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create application directory {app_dir}: {e}")
    return app_dir


class Config:
    """
    Manages application configuration by loading defaults and overriding
    them with settings from a user-specific config file.
    """

    def __init__(self, app_dir: Optional[Path] = None):
        """
        Initializes the configuration manager.

        Args:
            app_dir (Optional[Path]): Directory holding config.ini. Defaults to
                                      the per-platform application directory.
        """
        # Patterns are stored verbatim; `%` is an ordinary literal
        self.parser = configparser.ConfigParser(interpolation=None)
        self.app_dir = Path(app_dir) if app_dir is not None else get_app_dir()
        self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        """Sets the default configuration values in the parser object."""
        self.parser["General"] = {
            "log_level": "INFO"
        }
        self.parser["Editing"] = {
            "placeholder": DEFAULT_PLACEHOLDER,
            "start_in_overtype": "False",
            "beep_on_error": "True"
        }
        self.parser["Display"] = {
            "font_family": "Monospace",
            "font_size": "12"
        }
        self.parser["Templates"] = dict(DEFAULT_TEMPLATES)

    def _load_from_file(self):
        """
        Loads settings from the config.ini file, overriding defaults.
        If the file doesn't exist, it will be created with default values.
        """
        if not self.config_file_path.exists():
            self._save_defaults()
        else:
            # A [Templates] section in the file replaces the default fields
            self.parser.remove_section("Templates")
            self.parser.read(self.config_file_path)

    def _save_defaults(self):
        """Saves the current (default) configuration to the config file."""
        try:
            self.app_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, 'w') as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# Template patterns: # digit, A letter, * letter or digit, \\ escapes a literal.\n")
                configfile.write("# An empty placeholder means a space.\n\n")
                self.parser.write(configfile)
        except OSError as e:
            logger.error(f"Could not write to config file at {self.config_file_path}: {e}")

    # --- Properties to access settings easily and with correct types ---

    @property
    def log_level(self) -> int:
        """The logging level name from [General], as a logging constant."""
        name = self.parser.get("General", "log_level", fallback="INFO").upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @property
    def placeholder(self) -> str:
        """The character shown in empty variable slots."""
        value = self.parser.get("Editing", "placeholder", fallback=DEFAULT_PLACEHOLDER)
        return value[0] if value else " "

    @property
    def start_in_overtype(self) -> bool:
        """Whether new fields start in overtype mode."""
        return self.parser.getboolean("Editing", "start_in_overtype", fallback=False)

    @property
    def beep_on_error(self) -> bool:
        """Whether a rejected edit sounds the system beep."""
        return self.parser.getboolean("Editing", "beep_on_error", fallback=True)

    @property
    def font_family(self) -> str:
        return self.parser.get("Display", "font_family", fallback="Monospace")

    @property
    def font_size(self) -> int:
        return self.parser.getint("Display", "font_size", fallback=12)

    @property
    def templates(self) -> Dict[str, str]:
        """Template patterns by field name, in file order."""
        if not self.parser.has_section("Templates"):
            return dict(DEFAULT_TEMPLATES)
        return dict(self.parser.items("Templates"))


# --- Singleton Instance ---
# Other modules import this instance directly:
# from maskedit.config import config
config = Config()


if __name__ == '__main__':
    print(f"--- {APP_NAME} Configuration ---")
    print(f"Application Data Directory: {config.app_dir}")
    print(f"Config file path: {config.config_file_path}")

    print("\n--- Loaded Settings ---")
    print(f"Log level: {logging.getLevelName(config.log_level)}")
    print(f"Placeholder: {config.placeholder!r}")
    print(f"Start in overtype: {config.start_in_overtype}")
    print(f"Beep on error: {config.beep_on_error}")
    print(f"Font: {config.font_family} {config.font_size}pt")
    for name, pattern in config.templates.items():
        print(f"Template {name}: {pattern}")
