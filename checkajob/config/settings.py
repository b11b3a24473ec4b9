"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file placed
at the project root.  The frozen dataclass ensures settings are never mutated
at runtime.

The LLM provider is optional.  Without OPENAI_API_KEY (or with
LLM_PROVIDER=none) every assessment comes from the built-in job catalog:
  LLM_PROVIDER      → "openai" (default) | "none"
  OPENAI_API_KEY    → enables the provider path when non-empty
  OPENAI_LLM_MODEL  → swap LLM model
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (two levels up from this file)
load_dotenv(Path(__file__).parent.parent.parent / ".env")


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


@dataclass(frozen=True)
class Settings:
    """Immutable application settings loaded from environment variables."""

    # ── Provider selection ──────────────────────────────────────────────────
    # Valid values: "openai" | "none"
    llm_provider: str = field(
        default_factory=lambda: _env("LLM_PROVIDER", "openai")
    )

    # ── OpenAI ─────────────────────────────────────────────────────────────
    openai_api_key: str = field(
        default_factory=lambda: _env("OPENAI_API_KEY", "")
    )
    openai_llm_model: str = field(
        default_factory=lambda: _env("OPENAI_LLM_MODEL", "gpt-4.1-mini")
    )

    # ── HTTP timeouts (seconds) ────────────────────────────────────────────
    llm_timeout: int = field(default_factory=lambda: _env_int("LLM_TIMEOUT", 30))

    # ── Delivery ───────────────────────────────────────────────────────────
    api_prefix: str = field(
        default_factory=lambda: _env("API_PREFIX", "/api")
    )
    log_level: str = field(
        default_factory=lambda: _env("LOG_LEVEL", "INFO")
    )

    @property
    def llm_enabled(self) -> bool:
        """True when the provider path should be attempted at all."""
        return self.llm_provider.lower() == "openai" and bool(self.openai_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    Use this everywhere instead of instantiating Settings() directly;
    it guarantees a single object is shared across the entire process.
    """
    return Settings()
