"""
services/llm_assessor.py
──────────────────────────────────────────────────────────────────────────────
Stage 1 of the assessment pipeline: delegate to an LLM provider.

Responsibilities:
  1. Build the persona system prompt and user message (config/prompts.py).
  2. Call the LLMPort exactly once.
  3. Parse the JSON response strictly into an Assessment.

Every failure (auth, transport, empty reply, bad JSON, wrong shape) yields
None so the pipeline moves on to the catalog.  Nothing is retried and no
partial result is surfaced.
"""
from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from checkajob.config.prompts import ASSESSOR_SYSTEM_PROMPT, build_user_message
from checkajob.domain.exceptions import CheckAJobError
from checkajob.domain.models import Assessment, AssessmentRequest, Decision
from checkajob.ports.llm_port import LLMPort
from checkajob.services.scorer import PRO_THRESHOLD

logger = logging.getLogger(__name__)


class LLMAssessor:
    """Produce an Assessment from an LLM provider, or None.

    Args:
        llm: Any object satisfying LLMPort.
    """

    def __init__(self, llm: LLMPort) -> None:
        self._llm = llm
        logger.debug("LLMAssessor init | model=%s", llm.model_name)

    @property
    def model_name(self) -> str:
        return self._llm.model_name

    # ── Public API ─────────────────────────────────────────────────────────

    def assess(self, request: AssessmentRequest) -> Assessment | None:
        """Ask the provider for an assessment.

        Args:
            request: Normalised assessment request.

        Returns:
            Validated Assessment, or None if the provider is unavailable or
            its answer does not fit the Assessment shape.
        """
        user = build_user_message(request)
        try:
            raw = self._llm.generate_json(ASSESSOR_SYSTEM_PROMPT, user)
        except CheckAJobError as exc:
            logger.warning("LLM provider unavailable (%s): %s", type(exc).__name__, exc)
            return None

        if not raw:
            logger.warning("LLM provider returned no content")
            return None
        return self._parse_response(raw)

    # ── Private helpers ────────────────────────────────────────────────────

    def _parse_response(self, raw: str) -> Assessment | None:
        """Parse the LLM JSON response into an Assessment.

        The answer must also respect the scoring contract: a non-empty
        rationale, and a decision that agrees with the score threshold.

        Returns:
            Assessment, or None on any parse or validation failure.
        """
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning("LLMAssessor: failed to parse JSON: %.200s", raw)
            return None

        if not isinstance(parsed, dict):
            logger.warning("LLMAssessor: unexpected JSON type %s", type(parsed).__name__)
            return None

        try:
            assessment = Assessment.model_validate(parsed)
        except ValidationError as exc:
            logger.warning(
                "LLMAssessor: response does not match assessment shape (%d errors)",
                exc.error_count(),
            )
            return None

        if not assessment.rationale:
            logger.warning("LLMAssessor: response has an empty rationale")
            return None
        expected = Decision.GET_A_PRO if assessment.score > PRO_THRESHOLD else Decision.DIY
        if assessment.decision is not expected:
            logger.warning(
                "LLMAssessor: decision %r contradicts score %d",
                assessment.decision.value, assessment.score,
            )
            return None
        return assessment
