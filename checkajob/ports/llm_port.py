"""
ports/llm_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for LLM (large language model) providers.

Current implementation: OpenAILLMAdapter (OpenAI chat completions)
To swap provider: write a new adapter implementing this Protocol,
then change the wiring in services/container.py.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LLMPort(Protocol):
    """Contract for a JSON-generating LLM provider."""

    @property
    def model_name(self) -> str:
        """Identifier of the underlying LLM."""
        ...

    def generate_json(
        self,
        system_prompt: str,
        user_message: str,
    ) -> str | None:
        """Send one prompt to the LLM and return its JSON response as a string.

        A single, non-streaming request.  The caller is responsible for
        parsing and validating the returned string.

        Args:
            system_prompt: System-level instruction.
            user_message:  User-turn content.

        Returns:
            Raw JSON string, or None if the call failed.

        Raises:
            AuthenticationError: When the provider rejects the credentials.
            LLMError: On unrecoverable API failure.
        """
        ...
