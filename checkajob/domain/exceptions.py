"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at CheckAJobError so callers can catch broadly
(except CheckAJobError) or narrowly (except LLMError).

None of these reach an HTTP caller during a request: provider failures are
absorbed by the assessment pipeline, which falls back to the catalog.  Only
startup errors escape:
  CatalogError        → process refuses to serve
  ConfigurationError  → process refuses to serve
"""
from __future__ import annotations


class CheckAJobError(Exception):
    """Base exception for all application errors."""


class ConfigurationError(CheckAJobError):
    """Raised when required configuration is missing or invalid."""


class AuthenticationError(CheckAJobError):
    """Raised when the LLM provider rejects or lacks credentials."""


class LLMError(CheckAJobError):
    """Raised when the LLM API call fails or returns unparseable output."""


class CatalogError(CheckAJobError):
    """Raised when the job catalog cannot be built (duplicate keys, empty)."""
