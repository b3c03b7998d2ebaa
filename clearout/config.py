"""Centralised settings for the ClearOut link scanner.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Batch scheduling
    # ------------------------------------------------------------------
    concurrency: int = field(
        default_factory=lambda: int(os.environ.get("SCAN_CONCURRENCY", "10"))
    )

    # ------------------------------------------------------------------
    # Network timeouts (milliseconds)
    # ------------------------------------------------------------------
    page_fetch_timeout_ms: int = field(
        default_factory=lambda: int(os.environ.get("PAGE_FETCH_TIMEOUT_MS", "15000"))
    )
    probe_timeout_ms: int = field(
        default_factory=lambda: int(os.environ.get("PROBE_TIMEOUT_MS", "10000"))
    )

    # ------------------------------------------------------------------
    # Client identity / logging
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SCAN_USER_AGENT", "ClearOut.bio Link Checker 1.0"
        )
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    @property
    def page_fetch_timeout(self) -> float:
        """Page fetch timeout in seconds."""
        return self.page_fetch_timeout_ms / 1000

    @property
    def probe_timeout(self) -> float:
        """Per-link probe timeout in seconds."""
        return self.probe_timeout_ms / 1000


# Module-level singleton — import this everywhere:
#   from clearout.config import settings
settings = Settings()
