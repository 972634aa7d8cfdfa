"""Vault access: the note corpus read by the stats tools."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Note:
    content: str
    filename: str  # expected, not guaranteed, to hold a YYYYMMDDhhmm token


# Vault directories to skip during full-vault scans.
_SKIP_DIRS = {".zk", ".git", ".venv", "__pycache__"}


def iter_vault_md(vault: Path) -> Iterator[Path]:
    """Yield .md files in vault in sorted order, skipping tooling directories."""
    for md_file in sorted(vault.rglob("*.md")):
        if any(part in _SKIP_DIRS for part in md_file.relative_to(vault).parts):
            continue
        yield md_file


def load_notes(vault: Path) -> list[Note]:
    """Read every note in the vault into memory.

    The filename is the file stem, matching what note apps show as the
    note identifier. Files that cannot be read are logged and skipped.
    """
    notes: list[Note] = []
    for md_file in iter_vault_md(vault):
        try:
            content = md_file.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Skipping unreadable note %s: %s", md_file, e)
            continue
        notes.append(Note(content=content, filename=md_file.stem))
    logger.debug("Loaded %d notes from %s", len(notes), vault)
    return notes
