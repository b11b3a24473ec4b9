"""
adapters/openai_llm.py
──────────────────────────────────────────────────────────────────────────────
Implements LLMPort using the OpenAI Chat Completions API.

Key behaviour:
  - Uses /v1/chat/completions via raw requests (no openai SDK dependency)
  - Requests JSON output via response_format={"type": "json_object"}
  - system_prompt → system role message; user_message → user role message
  - Exactly one attempt, non-streaming, bounded by LLM_TIMEOUT; the caller
    falls back to the job catalog instead of retrying
  - Returns the raw JSON string (caller parses); None on recoverable failure

Required env vars:
  OPENAI_API_KEY     — your OpenAI secret key  (sk-...)
  OPENAI_LLM_MODEL   — default: gpt-4.1-mini
"""
from __future__ import annotations

import logging

import requests

from checkajob.config.settings import Settings
from checkajob.domain.exceptions import AuthenticationError, LLMError

logger = logging.getLogger(__name__)

_OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class OpenAILLMAdapter:
    """OpenAI GPT chat completions adapter.

    Injected into LLMAssessor via services/container.py when an
    ``OPENAI_API_KEY`` is present in the environment.

    .. note::
        OpenAI's JSON mode requires the word "JSON" to appear somewhere in
        the prompt.  ``ASSESSOR_SYSTEM_PROMPT`` in ``config/prompts.py``
        already includes it.
    """

    def __init__(self, settings: Settings) -> None:
        if not settings.openai_api_key:
            raise AuthenticationError(
                "OPENAI_API_KEY is not set. "
                "Add it to your .env file or environment."
            )
        self._settings = settings
        self._headers = {
            "Authorization": f"Bearer {settings.openai_api_key}",
            "Content-Type": "application/json",
        }
        logger.debug(
            "OpenAILLMAdapter ready | model=%s timeout=%ds",
            settings.openai_llm_model,
            settings.llm_timeout,
        )

    # ── LLMPort implementation ─────────────────────────────────────────────

    @property
    def model_name(self) -> str:
        """Name of the underlying OpenAI chat model."""
        return self._settings.openai_llm_model

    def generate_json(
        self,
        system_prompt: str,
        user_message: str,
    ) -> str | None:
        """Send a prompt and return the raw JSON response string.

        Args:
            system_prompt: System-level instruction for the model.
            user_message:  User-turn message content.

        Returns:
            Raw JSON string from the model, or ``None`` on transport error,
            timeout, non-2xx status or empty content.

        Raises:
            AuthenticationError: When OpenAI answers 401.
            LLMError: When a 2xx response body is not JSON.
        """
        payload = self._build_payload(system_prompt, user_message)
        try:
            resp = requests.post(
                _OPENAI_CHAT_URL,
                headers=self._headers,
                json=payload,
                timeout=self._settings.llm_timeout,
            )
        except requests.RequestException as exc:
            logger.warning("OpenAI LLM request error: %s", exc)
            return None

        if resp.status_code == 401:
            raise AuthenticationError(
                "OpenAI returned 401 Unauthorised. "
                "Check that OPENAI_API_KEY is valid."
            )

        if not resp.ok:
            logger.error(
                "OpenAI LLM HTTP %d: %s",
                resp.status_code, resp.text[:300],
            )
            return None

        try:
            body = resp.json()
        except ValueError as exc:
            raise LLMError(f"OpenAI response body is not JSON: {exc}") from exc
        return self._extract_text(body)

    # ── Private helpers ────────────────────────────────────────────────────

    def _build_payload(self, system_prompt: str, user_message: str) -> dict:
        """Build the OpenAI chat completions request body."""
        return {
            "model": self._settings.openai_llm_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "temperature": 0.1,
            "response_format": {"type": "json_object"},
            "stream": False,
        }

    def _extract_text(self, response_json: dict) -> str | None:
        """Pull the content string out of the chat completions response."""
        try:
            choices = response_json.get("choices", [])
            if not choices:
                logger.warning("OpenAI response contained no choices")
                return None
            content = (choices[0].get("message", {}).get("content") or "").strip()
            return content if content else None
        except (AttributeError, KeyError, IndexError, TypeError) as exc:
            logger.error("Failed to parse OpenAI response structure: %s", exc)
            return None
