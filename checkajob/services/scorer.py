"""
services/scorer.py
──────────────────────────────────────────────────────────────────────────────
Catalog risk scorer: (JobDefinition, SkillLevel) → Assessment.

  score = base_difficulty × 10
        + hazard penalties (electrical +20, plumbing +10, working at height +10)
        − (skill ordinal − 1) × 10
  clamped to [1, 100];  score > 60 → "Get a Pro", otherwise "DIY".

The structural flag carries no penalty.  Duration and cost estimates are
never set on this path.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from checkajob.domain.models import Assessment, Decision, JobDefinition, SkillLevel

logger = logging.getLogger(__name__)

SCORE_MIN = 1
SCORE_MAX = 100
PRO_THRESHOLD = 60          # strictly above → Get a Pro
SKILL_DISCOUNT = 10         # per skill tier above novice

VERDICT_DIY = "This task appears feasible for your skill level."
VERDICT_PRO = "This task may be too challenging or risky for you."


class _HazardPenalty(NamedTuple):
    flag: str
    points: int
    reason: str
    below_advanced_reason: Optional[str] = None


# Applied in this order; rationale sentences follow the same order.
HAZARD_PENALTIES: tuple[_HazardPenalty, ...] = (
    _HazardPenalty(
        "electrical", 20,
        "Electrical work can be dangerous and may require certification.",
        "You indicated you are not advanced; electrical tasks are high risk.",
    ),
    _HazardPenalty(
        "plumbing", 10,
        "Plumbing jobs risk leaks and water damage if done incorrectly.",
    ),
    _HazardPenalty(
        "working_at_height", 10,
        "Working at height increases the chance of falls.",
    ),
)


class RiskScorer:
    """Deterministic scorer for catalog jobs."""

    def score(self, job: JobDefinition, skill_level: SkillLevel) -> Assessment:
        """Compute the assessment for ``job`` performed at ``skill_level``.

        Args:
            job:         Matched catalog entry.
            skill_level: User's self-reported skill.

        Returns:
            Assessment whose guidance lists are fresh copies of the job's.
        """
        skill = skill_level.ordinal
        score = job.base_difficulty * 10
        rationale: list[str] = []

        for penalty in HAZARD_PENALTIES:
            if not getattr(job.risk, penalty.flag):
                continue
            score += penalty.points
            rationale.append(penalty.reason)
            if penalty.below_advanced_reason and skill < SkillLevel.ADVANCED.ordinal:
                rationale.append(penalty.below_advanced_reason)

        score -= (skill - 1) * SKILL_DISCOUNT
        score = min(SCORE_MAX, max(SCORE_MIN, score))

        decision = Decision.GET_A_PRO if score > PRO_THRESHOLD else Decision.DIY
        rationale.insert(0, VERDICT_DIY if decision is Decision.DIY else VERDICT_PRO)

        logger.debug(
            "score | job=%s skill=%s score=%d decision=%s",
            job.key, skill_level.value, score, decision.value,
        )
        return Assessment(
            decision=decision,
            score=score,
            rationale=rationale,
            steps=list(job.steps),
            tools=list(job.tools),
            materials=list(job.materials),
            safety=list(job.safety),
        )
