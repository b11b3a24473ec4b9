"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure domain objects: Pydantic models with no imports from adapters or ports.

These models are the lingua franca of the entire system:
  • the catalog is built from JobDefinition objects
  • services orchestrate AssessmentRequest → Assessment
  • interfaces (API, CLI, Streamlit) serialise Assessment.to_dict()

Wire format uses camelCase keys (skillLevel, durationMin, costLow, costHigh);
Python attributes are snake_case and mapped through field aliases.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Enums ──────────────────────────────────────────────────────────────────────

class SkillLevel(str, Enum):
    """Self-reported competence tier, ordered novice < intermediate < advanced."""
    NOVICE       = "novice"
    INTERMEDIATE = "intermediate"
    ADVANCED     = "advanced"

    @property
    def ordinal(self) -> int:
        return _SKILL_ORDINALS[self]

    @classmethod
    def parse(cls, value: Any) -> "SkillLevel":
        """Lenient parse: anything unrecognised becomes NOVICE."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.NOVICE


_SKILL_ORDINALS = {
    SkillLevel.NOVICE: 1,
    SkillLevel.INTERMEDIATE: 2,
    SkillLevel.ADVANCED: 3,
}


class Decision(str, Enum):
    """Final DIY-vs-professional recommendation."""
    DIY       = "DIY"
    GET_A_PRO = "Get a Pro"


# ── Catalog entries ────────────────────────────────────────────────────────────

class RiskFlags(BaseModel):
    """Named hazards of a job.  Unset flags mean "not hazardous"."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    electrical:        bool = False
    plumbing:          bool = False
    structural:        bool = False
    working_at_height: bool = Field(False, alias="workingAtHeight")

    def active(self) -> tuple[str, ...]:
        """Names of the flags that are set, in field declaration order."""
        return tuple(
            name for name in type(self).model_fields if getattr(self, name)
        )


class JobDefinition(BaseModel):
    """A known job type in the static catalog.

    ``keywords`` are case-insensitive regular-expression alternatives; the
    classifier matches the job when any of them occurs in the input text.
    Sequences are tuples so a definition can never be mutated in place.
    """

    model_config = ConfigDict(frozen=True)

    key:             str = Field(..., min_length=1)
    name:            str
    base_difficulty: int = Field(..., ge=1, le=10)
    risk:            RiskFlags = Field(default_factory=RiskFlags)
    keywords:        tuple[str, ...] = Field(..., min_length=1)
    steps:           tuple[str, ...] = ()
    tools:           tuple[str, ...] = ()
    materials:       tuple[str, ...] = ()
    safety:          tuple[str, ...] = ()


# ── Input ──────────────────────────────────────────────────────────────────────

class AssessmentRequest(BaseModel):
    """Normalised input to the AssessmentPipeline.

    Every field is lenient: bad values are replaced by defaults rather than
    rejected, so any JSON body produces a valid request.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: str = Field("", description="Free-text description of the job")
    skill_level: SkillLevel = Field(SkillLevel.NOVICE, alias="skillLevel")
    tags:        list[str] = Field(default_factory=list,
                                   description="Optional photo / context tags")
    postcode:    Optional[str] = Field(None, description="Unvalidated, passed through")

    @field_validator("description", mode="before")
    @classmethod
    def coerce_description(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("skill_level", mode="before")
    @classmethod
    def coerce_skill_level(cls, v: Any) -> SkillLevel:
        return SkillLevel.parse(v)

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, v: Any) -> list[str]:
        if not isinstance(v, (list, tuple)):
            return []
        return [t.strip() for t in v if isinstance(t, str) and t.strip()]

    @field_validator("postcode", mode="before")
    @classmethod
    def coerce_postcode(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) and v.strip() else None

    @classmethod
    def from_payload(cls, payload: Any) -> "AssessmentRequest":
        """Build a request from a decoded JSON body of any shape."""
        if not isinstance(payload, dict):
            payload = {}
        return cls.model_validate(payload)


# ── Output ─────────────────────────────────────────────────────────────────────

class Assessment(BaseModel):
    """Risk assessment returned to the caller.

    Produced either by the LLM provider (which may also fill the duration and
    cost estimates) or by the catalog scorer (which never does).
    """

    model_config = ConfigDict(populate_by_name=True)

    decision:     Decision
    score:        int = Field(..., ge=1, le=100)
    rationale:    list[str]
    steps:        list[str]
    tools:        list[str]
    materials:    list[str]
    safety:       list[str]
    duration_min: Optional[int]   = Field(None, alias="durationMin", ge=0)
    cost_low:     Optional[float] = Field(None, alias="costLow", ge=0)
    cost_high:    Optional[float] = Field(None, alias="costHigh", ge=0)

    def to_dict(self) -> dict:
        """Serialise to the camelCase JSON body, omitting unset estimates."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
