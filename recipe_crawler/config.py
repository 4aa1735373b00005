"""Runtime settings for fetching, traversal and logging.

Each field reads an environment variable when ``Settings()`` is built.  A
``.env`` next to ``pyproject.toml`` is merged in first without overriding
variables that are already set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# The repository root holds the optional .env file.
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_float(name: str) -> float | None:
    """Read a float from *name*, treating unset or empty values as ``None``."""
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "CRAWLER_USER_AGENT",
            "Mozilla/5.0 (compatible; RecipeCrawler/1.0; +https://github.com/recipe-crawler)",
        )
    )

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    max_depth: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_MAX_DEPTH", "1"))
    )
    max_workers: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_MAX_WORKERS", "8"))
    )
    # Wall-clock budget (seconds) for a whole crawl; ``None`` means unbounded.
    crawl_timeout: float | None = field(
        default_factory=lambda: _optional_float("CRAWL_TIMEOUT")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "WARNING").upper()
    )


# Shared instance read by the CLI and the pipeline defaults:
#   from recipe_crawler.config import settings
settings = Settings()
