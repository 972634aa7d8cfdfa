from pathlib import Path

import pytest


# Notes laid out the way a timestamp-named zettelkasten stores them.
VAULT_NOTES = {
    "202401010900 First idea.md": "hello world #proofing\n",
    "202401021000 Second idea.md": "a b c d\n",
    "projects/202403151230 Project plan.md": "Plan with a link , [[202401010900]] and §[[202401021000]].\n",
    "Inbox scratch.md": ", [[x]]\n",
}


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Build a small vault in a temp directory and return its path."""
    vault_path = tmp_path / "notes"
    for name, content in VAULT_NOTES.items():
        path = vault_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return vault_path


@pytest.fixture(autouse=True)
def set_vault_env(vault: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Set ZK_NOTEBOOK_DIR to the temp vault for every test."""
    monkeypatch.setenv("ZK_NOTEBOOK_DIR", str(vault))
