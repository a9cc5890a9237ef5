"""Application configuration: environment variables and derived constants.

Loads ``BOT_TOKEN`` and the polling settings from the environment via
``python-dotenv``.  All values are resolved at import time so other modules
can ``from config import …`` without repeated lookups.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── local ────────────────────────────────────────────────────────────────────
from hellobot.logger import HelloBotLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"

# ── Logger (used for startup diagnostics at the bottom of this module) ───────
logger = HelloBotLogger.get_logger(LOG_LEVEL)


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_int(name: str, default: int) -> int:
    """Read a non-negative integer from the environment, falling back to *default*."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Invalid integer in environment, using default", extra={"variable": name, "default": default})
        return default
    return value if value >= 0 else default


def _parse_csv(raw: str | None) -> list[str] | None:
    """Split a comma-separated list; ``None`` when nothing is configured."""
    if not raw:
        return None
    items = [token.strip() for token in raw.split(",") if token.strip()]
    return items or None


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_SERVER: str = os.environ.get("API_SERVER", "").strip() or "https://api.telegram.org"
REQUEST_TIMEOUT: int = _parse_int("REQUEST_TIMEOUT", 10)
POLL_TIMEOUT: int = _parse_int("POLL_TIMEOUT", 30)
RETRY_DELAY: int = _parse_int("RETRY_DELAY", 5)
ALLOWED_UPDATES: list[str] | None = _parse_csv(os.environ.get("ALLOWED_UPDATES"))


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded: BOT_TOKEN is set", extra={"api_server": API_SERVER})
else:
    logger.warning("Config loaded: BOT_TOKEN is NOT set")

logger.info(
    "Polling settings resolved",
    extra={
        "request_timeout": REQUEST_TIMEOUT,
        "poll_timeout": POLL_TIMEOUT,
        "retry_delay": RETRY_DELAY,
        "allowed_updates": ALLOWED_UPDATES,
    },
)
