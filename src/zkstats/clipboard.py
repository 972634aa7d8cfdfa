"""Clipboard placement for generated notes."""
import logging

import pyperclip

from zkstats.errors import ClipboardError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """Place *text* on the system clipboard.

    Raises ClipboardError when pyperclip finds no copy mechanism
    (headless Linux without xclip/xsel/wl-copy, for instance).
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(str(e)) from e
    logger.debug("Copied %d characters to clipboard", len(text))
