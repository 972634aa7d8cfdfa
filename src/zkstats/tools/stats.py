"""Stats tool: create_stats_note."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from fastmcp import FastMCP

from zkstats.clipboard import copy_to_clipboard
from zkstats.config import clipboard_enabled
from zkstats.errors import (
    ALREADY_EXISTS,
    CANCELLED,
    CLIPBOARD_UNAVAILABLE,
    INVALID_ARGUMENT,
    ClipboardError,
    CreationCancelled,
    error,
)
from zkstats.metrics import compute_aggregates
from zkstats.report import GeneratedIdentity, StatsNote, compose_report, output_filename
from zkstats.table import render_monthly_table
from zkstats.tools._write import create_exclusive, resolve_note_path
from zkstats.vault import load_notes

logger = logging.getLogger(__name__)

NOTE_EXTENSION = ".md"

# Returns the note title, or None when the user cancels.
TitlePrompt = Callable[[], "str | None"]


def create_stats_note(
    vault: Path,
    prompt: TitlePrompt,
    now: datetime | None = None,
    clipboard: Callable[[str], None] | None = None,
    write: bool = True,
) -> StatsNote:
    """Build the statistics note for the whole vault.

    The prompt is asked once, before anything else; None aborts the run with
    CreationCancelled and nothing is written or copied. *now* is sampled
    once and used for every timestamp in the note. The document is handed to
    *clipboard* only after the file is written.
    """
    title = prompt()
    if title is None:
        raise CreationCancelled("Creation cancelled")

    if now is None:
        now = datetime.now()
    now = now.replace(second=0, microsecond=0)

    notes = load_notes(vault)
    aggregates = compute_aggregates(notes)
    identity = GeneratedIdentity.from_datetime(now, title)
    content = compose_report(identity, aggregates, render_monthly_table(aggregates.monthly_counts))
    result = StatsNote(filename=output_filename(identity), content=content)

    if write:
        file_path = resolve_note_path(result.filename + NOTE_EXTENSION, vault)
        create_exclusive(file_path, content)
        result.path = str(file_path.relative_to(vault.resolve()))
        logger.info("Created stats note %s (%d notes)", result.path, aggregates.note_count)

    if clipboard is not None:
        clipboard(content)

    return result


def _copy_best_effort(warnings: list[str]) -> Callable[[str], None]:
    def _copy(text: str) -> None:
        try:
            copy_to_clipboard(text)
        except ClipboardError as e:
            logger.warning("Clipboard unavailable: %s", e)
            warnings.append(error(CLIPBOARD_UNAVAILABLE, str(e)))
    return _copy


def run_stats_note_tool(vault: Path, title: str | None, clipboard: bool | None = None) -> str:
    """Create the stats note and return its path, or a structured error string.

    A missing clipboard does not fail the call; its error is appended on a
    second line after the path.
    """
    if clipboard is None:
        clipboard = clipboard_enabled()
    warnings: list[str] = []
    try:
        note = create_stats_note(
            vault,
            lambda: title,
            clipboard=_copy_best_effort(warnings) if clipboard else None,
        )
    except CreationCancelled as e:
        return error(CANCELLED, str(e))
    except FileExistsError as e:
        return error(ALREADY_EXISTS, str(e))
    except ValueError as e:
        return error(INVALID_ARGUMENT, str(e))
    return "\n".join([note.path or note.filename] + warnings)


# --- FastMCP tool registration ---

def _register(mcp: FastMCP, vault: Path) -> None:
    @mcp.tool()
    def create_stats_note_tool(title: str | None = None, clipboard: bool | None = None) -> str:
        """Create a note with vault statistics and a monthly breakdown table.

        title: heading and filename suffix of the new note. Omit it to cancel.
        clipboard: also place the note on the clipboard. Defaults to the
        ZKSTATS_CLIPBOARD setting (on unless disabled).
        """
        return run_stats_note_tool(vault, title, clipboard)

    @mcp.tool()
    def preview_stats_tool(title: str = "Zettelkasten Stats") -> str:
        """Return the stats note that would be created, without writing or copying it."""
        note = create_stats_note(vault, lambda: title, write=False)
        return note.content
