"""Tests for environment-driven configuration."""
from pathlib import Path

import pytest

from zkstats.config import ConfigError, clipboard_enabled, get_vault_root


class TestGetVaultRoot:
    def test_returns_resolved_path(self, vault: Path) -> None:
        assert get_vault_root() == vault.resolve()

    def test_missing_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ZK_NOTEBOOK_DIR")
        with pytest.raises(ConfigError, match="not set"):
            get_vault_root()

    def test_nonexistent_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZK_NOTEBOOK_DIR", str(tmp_path / "missing"))
        with pytest.raises(ConfigError, match="does not exist"):
            get_vault_root()

    def test_file_instead_of_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        f = tmp_path / "file.md"
        f.write_text("x")
        monkeypatch.setenv("ZK_NOTEBOOK_DIR", str(f))
        with pytest.raises(ConfigError, match="not a directory"):
            get_vault_root()


class TestClipboardEnabled:
    def test_default_on(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ZKSTATS_CLIPBOARD", raising=False)
        assert clipboard_enabled() is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "OFF"])
    def test_disabled_values(self, value: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZKSTATS_CLIPBOARD", value)
        assert clipboard_enabled() is False

    def test_enabled_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZKSTATS_CLIPBOARD", "1")
        assert clipboard_enabled() is True
