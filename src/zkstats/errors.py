"""Error codes and exceptions for the stats tools.

create_stats_note raises CreationCancelled when the title prompt is
dismissed, FileExistsError when a note with the same timestamp and title
exists, and ValueError for a title that would leave the vault. The FastMCP
wrapper turns those into "ERROR [{CODE}]: {message}" strings; a missing
clipboard becomes a CLIPBOARD_UNAVAILABLE line appended to a successful result.
"""
from enum import Enum


class ErrorCode(str, Enum):
    CANCELLED = "CANCELLED"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    CLIPBOARD_UNAVAILABLE = "CLIPBOARD_UNAVAILABLE"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


CANCELLED = ErrorCode.CANCELLED
ALREADY_EXISTS = ErrorCode.ALREADY_EXISTS
CLIPBOARD_UNAVAILABLE = ErrorCode.CLIPBOARD_UNAVAILABLE
NOT_CONFIGURED = ErrorCode.NOT_CONFIGURED
INVALID_ARGUMENT = ErrorCode.INVALID_ARGUMENT


class CreationCancelled(Exception):
    """The title prompt was cancelled; nothing was written."""


class ClipboardError(Exception):
    """No clipboard mechanism is available on this system."""


def error(code: ErrorCode, message: str) -> str:
    """Format a structured error string for tool return values."""
    return f"ERROR [{code.value}]: {message}"
