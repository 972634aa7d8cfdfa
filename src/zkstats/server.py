import logging
from pathlib import Path

from fastmcp import FastMCP

from zkstats.config import get_vault_root, ConfigError

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

mcp = FastMCP(
    name="zkstats",
    instructions=(
        "You are connected to a personal zettelkasten. "
        "Use create_stats_note_tool to add a statistics note summarising the whole vault "
        "(note, word, link and proofing counts plus a monthly breakdown). "
        "Ask the user for a title first; call preview_stats_tool to show the report without saving it."
    ),
)

# Explicit registration: server -> tools (one direction only).
from zkstats.tools import stats  # noqa: E402


def _register_all(vault: Path) -> None:
    stats._register(mcp, vault)


def main() -> None:
    try:
        vault_root = get_vault_root()
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        raise SystemExit(1)

    logger.info("zkstats starting, vault root: %s", vault_root)

    _register_all(vault_root)
    mcp.run()


if __name__ == "__main__":
    main()
