"""Logging setup for the console service.

Three categories can be tuned independently of the root level:

    http     outbound requests to the HR backend (httpx / httpcore)
    uvicorn  server access and error lines
    sync     Loader / Mutation Gateway / session traces and the HTTP adapters

Usage:
    from hr_admin.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys

from hr_admin.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field → logger names it governs
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_sync": (
        "EntityListEditor",
        "SessionService",
        "hr_admin.application.services",
        "hr_admin.infrastructure.backend",
    ),
}


def category_levels(settings: Settings) -> dict[str, int]:
    """Numeric level for every categorised logger name."""
    levels: dict[str, int] = {}
    for field, names in LOGGER_CATEGORIES.items():
        level = parse_level(getattr(settings, field))
        levels.update(dict.fromkeys(names, level))
    return levels


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels; add a stderr handler if the root has none."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for name, level in category_levels(settings).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, http=%s, uvicorn=%s, sync=%s",
        settings.log_level,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_sync,
    )


def parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(raw.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO
