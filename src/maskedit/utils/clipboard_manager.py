# -*- coding: utf-8 -*-
"""
src/maskedit/utils/clipboard_manager.py

A thin wrapper around 'pyperclip' for the masked fields' cut, copy and paste.

Clipboard access can fail on machines without a clipboard backend; these
helpers log the failure and report it through their return value so that a
field keeps working without one.
"""

import logging
from typing import Optional

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copies the given text to the system clipboard.

    Args:
        text (str): The string to be copied.

    Returns:
        bool: True if the text was copied successfully, False otherwise.
    """
    try:
        pyperclip.copy(text)
        logger.info(f"Copied to clipboard: '{text}'")
        return True
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to copy text to clipboard: {e}")
        logger.warning(
            "Clipboard functionality may not be available on this system. "
            "If on Linux, please ensure 'xclip' or 'xsel' is installed."
        )
        return False


def paste_from_clipboard() -> Optional[str]:
    """
    Reads the current text of the system clipboard.

    Returns:
        Optional[str]: The clipboard text, or None if it could not be read.
    """
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to read the clipboard: {e}")
        return None
    logger.debug(f"Pasting from clipboard: '{text}'")
    return text


if __name__ == '__main__':
    # Run with `python -m maskedit.utils.clipboard_manager`.
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    sample = "(555)123-4567"
    print("--- Testing Clipboard Manager ---")
    if copy_to_clipboard(sample):
        print(f"Pasted back: {paste_from_clipboard()!r}")
    else:
        print("Copy failed; this is expected on a system without a clipboard utility.")
