"""Exclusive creation of note files inside the vault."""
from pathlib import Path


def resolve_note_path(filename: str, vault: Path) -> Path:
    """Resolve *filename* inside the vault root.

    Raises ValueError if the path escapes the vault root (a title containing
    "../" for instance).
    """
    resolved = (vault / filename).resolve()
    try:
        resolved.relative_to(vault.resolve())
    except ValueError:
        raise ValueError(f"Path '{filename}' escapes vault root")
    return resolved


def create_exclusive(path: Path, content: str) -> None:
    """Write *content* to a new file at *path*, failing if it already exists.

    The file is opened in "x" mode, so of two concurrent runs for the same
    note exactly one creates it and an existing note is never overwritten.
    A write that fails part way removes the half-written file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        f = path.open("x", encoding="utf-8")
    except FileExistsError:
        raise FileExistsError(f"Note already exists: {path.name}")
    try:
        with f:
            f.write(content)
    except Exception:
        path.unlink(missing_ok=True)
        raise
