"""
services/assessor.py
──────────────────────────────────────────────────────────────────────────────
Pipeline orchestrator: raw input → Assessment, in three linear stages.

  Stage 1  LLM provider      only when one is wired in; None on any failure
  Stage 2  Classify + score  keyword match against the catalog
  Stage 3  Unknown job       fixed conservative "Get a Pro" answer

Each stage returns an Assessment or None and the first Assessment wins.
There are no backward transitions and no retries, and assess() never raises
for bad input: every payload is normalised with defaults first.

This is the primary entry point for all interfaces (API, CLI, Streamlit).
It knows nothing about infrastructure and only speaks in domain objects.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from checkajob.domain.models import Assessment, AssessmentRequest, Decision
from checkajob.services.catalog import JobCatalog
from checkajob.services.classifier import JobClassifier
from checkajob.services.llm_assessor import LLMAssessor
from checkajob.services.scorer import RiskScorer

logger = logging.getLogger(__name__)

UNKNOWN_JOB_SCORE = 75


def unknown_job_assessment() -> Assessment:
    """Conservative answer for descriptions that match no catalog job."""
    return Assessment(
        decision=Decision.GET_A_PRO,
        score=UNKNOWN_JOB_SCORE,
        rationale=[
            "Unable to match your description to our known jobs.",
            "For ambiguous or unknown tasks, we err on the side of caution.",
        ],
        steps=[],
        tools=[],
        materials=[],
        safety=[
            "Please consult a professional or provide more details to get specific advice.",
        ],
    )


class AssessmentPipeline:
    """Provider → catalog → default assessment pipeline.

    Inject via services/container.py; do not instantiate directly in
    application code.

    Args:
        catalog:      Shared read-only JobCatalog.
        classifier:   JobClassifier over the same catalog.
        scorer:       RiskScorer.
        llm_assessor: Optional provider stage; None disables it.
    """

    def __init__(
        self,
        catalog: JobCatalog,
        classifier: JobClassifier,
        scorer: RiskScorer,
        llm_assessor: Optional[LLMAssessor] = None,
    ) -> None:
        self._catalog = catalog
        self._classifier = classifier
        self._scorer = scorer
        self._llm_assessor = llm_assessor

    @property
    def catalog(self) -> JobCatalog:
        return self._catalog

    @property
    def llm_model(self) -> str:
        """Provider model name, or "" when the provider stage is disabled."""
        return self._llm_assessor.model_name if self._llm_assessor else ""

    # ── Public API ─────────────────────────────────────────────────────────

    def assess(self, raw: Any) -> Assessment:
        """Assess a DIY job description.

        Args:
            raw: An AssessmentRequest, or a decoded JSON body of any shape.

        Returns:
            Assessment, always. Unknown jobs get the conservative default.
        """
        request = raw if isinstance(raw, AssessmentRequest) else AssessmentRequest.from_payload(raw)
        logger.info(
            "assess | description=%r skill=%s tags=%d postcode=%s",
            request.description[:80],
            request.skill_level.value,
            len(request.tags),
            request.postcode or "-",
        )

        # ── Stage 1: LLM provider ──────────────────────────────────────────
        if self._llm_assessor is not None:
            result = self._llm_assessor.assess(request)
            if result is not None:
                logger.info("assess | source=llm decision=%s score=%d",
                            result.decision.value, result.score)
                return result
            logger.warning("LLM assessment unavailable, falling back to catalog")

        # ── Stage 2: classify + score ──────────────────────────────────────
        result = self._assess_from_catalog(request)
        if result is not None:
            return result

        # ── Stage 3: unknown job ───────────────────────────────────────────
        logger.info("assess | source=unknown decision=%s score=%d",
                    Decision.GET_A_PRO.value, UNKNOWN_JOB_SCORE)
        return unknown_job_assessment()

    # ── Private helpers ────────────────────────────────────────────────────

    def _assess_from_catalog(self, request: AssessmentRequest) -> Assessment | None:
        key = self._classifier.classify(request)
        if key is None:
            return None
        job = self._catalog.lookup(key)
        if job is None:
            return None
        result = self._scorer.score(job, request.skill_level)
        logger.info("assess | source=catalog job=%s decision=%s score=%d",
                    key, result.decision.value, result.score)
        return result
