"""
config/prompts.py
──────────────────────────────────────────────────────────────────────────────
All LLM prompt strings in one place.

Why centralise prompts?
  • Easy to diff and review prompt changes in version control
  • Swap or tune a prompt without touching service logic

To change the assessor persona: edit ASSESSOR_SYSTEM_PROMPT below.
The output keys listed there must match domain.models.Assessment.
"""
from __future__ import annotations

from checkajob.domain.models import AssessmentRequest

# ── Assessor system prompt ─────────────────────────────────────────────────────
ASSESSOR_SYSTEM_PROMPT = """\
You are CheckaJob, a cautious UK DIY assessor. You must be practical and \
risk-aware. Prefer safety and clarity over bravado.
Output strict JSON (a single object, no markdown fences) with the exact keys: \
decision, score, rationale, steps, tools, materials, safety, durationMin, \
costLow, costHigh.
  - decision: exactly "DIY" or "Get a Pro"
  - score: integer from 1 to 100
  - rationale, steps, tools, materials, safety: arrays of strings; the first \
rationale entry is the overall verdict
  - durationMin: integer minutes; costLow, costHigh: numbers in GBP
"""

# ── User message template ──────────────────────────────────────────────────────
ASSESSOR_USER_TEMPLATE = """\
Description: {description}
Skill level: {skill_level}
Photo tags (if any): {tags}
Constraints: UK terminology, metric units, cautious tone.
Scoring: 1 (trivial) to 100 (expert). DIY only if appropriate for the \
provided skill level.\
"""


def build_user_message(request: AssessmentRequest) -> str:
    """Assembles the user-turn message for the LLM.

    Args:
        request: Normalised assessment request.

    Returns:
        Formatted user message string.
    """
    return ASSESSOR_USER_TEMPLATE.format(
        description=request.description,
        skill_level=request.skill_level.value,
        tags=", ".join(t for t in request.tags if t),
    )
