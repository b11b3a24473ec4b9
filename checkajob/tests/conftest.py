"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures and mock adapter implementations.

Mock adapters implement the LLMPort Protocol via structural subtyping; they
do NOT inherit from any base class.  pytest uses them to test service logic
without any real OpenAI connection.

Fixture hierarchy:
  catalog          → the default JobCatalog
  classifier       → JobClassifier over catalog
  scorer           → RiskScorer
  mock_llm*        → LLMPort fakes (valid / garbage / failing)
  pipeline         → AssessmentPipeline, catalog only
  llm_pipeline     → AssessmentPipeline with mock_llm as stage 1
"""
from __future__ import annotations

import json

import pytest

from checkajob.config.settings import Settings
from checkajob.domain.exceptions import AuthenticationError
from checkajob.services.assessor import AssessmentPipeline
from checkajob.services.catalog import default_catalog
from checkajob.services.classifier import JobClassifier
from checkajob.services.llm_assessor import LLMAssessor
from checkajob.services.scorer import RiskScorer


# ── Settings fixture ───────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Return a Settings instance with the provider switched off."""
    return Settings(
        llm_provider="none",
        openai_api_key="",
        openai_llm_model="gpt-test",
        llm_timeout=5,
        api_prefix="/api",
        log_level="DEBUG",
    )


# ── Mock adapters ──────────────────────────────────────────────────────────

LLM_ASSESSMENT = {
    "decision": "DIY",
    "score": 35,
    "rationale": [
        "This task appears feasible for your skill level.",
        "Hollow walls need the right fixings.",
    ],
    "steps": ["Find the studs.", "Mark and drill.", "Fix the brackets."],
    "tools": ["Drill", "Spirit level"],
    "materials": ["Plasterboard fixings"],
    "safety": ["Check for cables before drilling."],
    "durationMin": 45,
    "costLow": 10,
    "costHigh": 25,
}


class MockLLMAdapter:
    """Returns a pre-baked, well-formed assessment and records each call."""

    model_name = "mock-llm"

    def __init__(self, response: str | None = None) -> None:
        self._response = json.dumps(LLM_ASSESSMENT) if response is None else response
        self.calls: list[tuple[str, str]] = []

    def generate_json(self, system_prompt: str, user_message: str) -> str | None:
        self.calls.append((system_prompt, user_message))
        return self._response


class MockLLMAdapterNoContent(MockLLMAdapter):
    """Simulates a provider that answered with nothing usable."""

    def generate_json(self, system_prompt: str, user_message: str) -> str | None:
        self.calls.append((system_prompt, user_message))
        return None


class MockLLMAdapterUnauthorised(MockLLMAdapter):
    """Simulates a provider rejecting the API key."""

    def generate_json(self, system_prompt: str, user_message: str) -> str | None:
        self.calls.append((system_prompt, user_message))
        raise AuthenticationError("401 Unauthorised")


# ── pytest fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def classifier(catalog):
    return JobClassifier(catalog)


@pytest.fixture
def scorer():
    return RiskScorer()


@pytest.fixture
def mock_llm():
    return MockLLMAdapter()


@pytest.fixture
def mock_llm_garbage():
    return MockLLMAdapter(response="Sure! Here is your assessment: DIY, 40/100")


@pytest.fixture
def mock_llm_no_content():
    return MockLLMAdapterNoContent()


@pytest.fixture
def mock_llm_unauthorised():
    return MockLLMAdapterUnauthorised()


@pytest.fixture
def pipeline(catalog, classifier, scorer):
    return AssessmentPipeline(catalog=catalog, classifier=classifier, scorer=scorer)


@pytest.fixture
def llm_pipeline(catalog, classifier, scorer, mock_llm):
    return AssessmentPipeline(
        catalog=catalog,
        classifier=classifier,
        scorer=scorer,
        llm_assessor=LLMAssessor(mock_llm),
    )


@pytest.fixture
def make_llm_pipeline(catalog, classifier, scorer):
    """Factory: AssessmentPipeline whose stage 1 uses the given fake LLM."""
    def _make(llm) -> AssessmentPipeline:
        return AssessmentPipeline(
            catalog=catalog,
            classifier=classifier,
            scorer=scorer,
            llm_assessor=LLMAssessor(llm),
        )
    return _make
