import os
from pathlib import Path


class ConfigError(Exception):
    pass


_FALSEY = {"0", "false", "no", "off"}


def get_vault_root() -> Path:
    raw = os.environ.get("ZK_NOTEBOOK_DIR")
    if not raw:
        raise ConfigError("ZK_NOTEBOOK_DIR environment variable is not set")

    path = Path(raw).expanduser().resolve()

    if not path.exists():
        raise ConfigError(f"Vault root does not exist: {path}")

    if not path.is_dir():
        raise ConfigError(f"Vault root is not a directory: {path}")

    return path


def clipboard_enabled() -> bool:
    raw = os.environ.get("ZKSTATS_CLIPBOARD", "")
    return raw.strip().lower() not in _FALSEY
