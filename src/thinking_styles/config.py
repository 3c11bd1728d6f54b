"""
config.py — Central settings for the Thinking Styles core
=========================================================
All configuration is loaded from environment variables / .env file.
Copy .env.example → .env and adjust as needed.

  THINKING_STYLES_STRICT_IDS   reject unknown question ids (default: false)
  THINKING_STYLES_LOG_LEVEL    logging level name (default: INFO)
  THINKING_STYLES_COUNTRY      label used in report headings (default: Ghana)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env into os.environ (no-op if already set, safe to call multiple times)
load_dotenv(override=False)


# ─── Scoring ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScoringConfig:
    strict_ids: bool   # True → UnknownQuestionId instead of silently dropping


# ─── Logging ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LoggingConfig:
    level: str

    @property
    def level_number(self) -> int:
        """Numeric level; unrecognised names fall back to INFO."""
        value = logging.getLevelName(self.level.upper())
        return value if isinstance(value, int) else logging.INFO


# ─── Report ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ReportConfig:
    country: str


# ─── Master settings object ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    scoring: ScoringConfig
    logging: LoggingConfig
    report:  ReportConfig

    def status_summary(self) -> dict[str, str]:
        """Return a dict of setting → human-readable badge for the demo header."""
        return {
            "Question ids": "🔒 Strict" if self.scoring.strict_ids else "🟢 Lenient",
            "Log level":    self.logging.level.upper(),
            "Country":      self.report.country,
        }


def get_settings() -> Settings:
    """Load all configuration from environment variables."""
    _str  = lambda k, d="": os.getenv(k, d).strip()
    _bool = lambda k, d=False: os.getenv(k, str(d)).lower() in ("1", "true", "yes")

    return Settings(
        scoring=ScoringConfig(
            strict_ids = _bool("THINKING_STYLES_STRICT_IDS", False),
        ),
        logging=LoggingConfig(
            level = _str("THINKING_STYLES_LOG_LEVEL", "INFO") or "INFO",
        ),
        report=ReportConfig(
            country = _str("THINKING_STYLES_COUNTRY", "Ghana") or "Ghana",
        ),
    )
