"""
tests/e2e/test_assess_pipeline.py
──────────────────────────────────────────────────────────────────────────────
End-to-end pipeline tests using mock adapters.

These run WITHOUT a real LLM (mock adapters from conftest.py).
They test the full wiring: raw payload → AssessmentPipeline → Assessment.

For tests that hit the live provider, see the integration/ folder
and run with: pytest -m integration
"""
from __future__ import annotations

import json

import pytest

from checkajob.domain.models import Assessment, Decision
from checkajob.services.assessor import unknown_job_assessment

UNKNOWN_RATIONALE = [
    "Unable to match your description to our known jobs.",
    "For ambiguous or unknown tasks, we err on the side of caution.",
]


class TestCatalogPath:
    def test_shelf_novice_scenario(self, pipeline):
        resp = pipeline.assess(
            {"description": "I need to hang a shelf in my bedroom", "skillLevel": "novice", "tags": []}
        )
        assert resp.score == 40
        assert resp.decision == Decision.DIY
        assert resp.rationale[0] == "This task appears feasible for your skill level."

    def test_light_fixture_novice_scenario(self, pipeline):
        resp = pipeline.assess({"description": "replace a ceiling light fixture", "skillLevel": "novice"})
        assert resp.score == 100
        assert resp.decision == Decision.GET_A_PRO

    def test_light_fixture_advanced_scenario(self, pipeline):
        resp = pipeline.assess({"description": "replace a ceiling light fixture", "skillLevel": "advanced"})
        assert resp.score == 80
        assert resp.decision == Decision.GET_A_PRO
        assert not any("not advanced" in r for r in resp.rationale)

    def test_missing_skill_level_is_novice(self, pipeline):
        resp = pipeline.assess({"description": "replace a ceiling light fixture"})
        assert resp.score == 100

    def test_invalid_skill_level_is_novice(self, pipeline):
        resp = pipeline.assess({"description": "paint my hallway", "skillLevel": "guru"})
        assert resp.score == 30

    def test_guidance_matches_catalog(self, pipeline, catalog):
        resp = pipeline.assess({"description": "dripping tap"})
        job = catalog.lookup("replace_tap_washer")
        assert resp.steps == list(job.steps)
        assert resp.safety == list(job.safety)

    def test_catalog_result_serialises_to_seven_keys(self, pipeline):
        body = pipeline.assess({"description": "paint the lounge"}).to_dict()
        assert set(body) == {
            "decision", "score", "rationale", "steps", "tools", "materials", "safety",
        }


class TestUnknownJob:
    def test_unmatched_description(self, pipeline):
        resp = pipeline.assess({"description": "quantum entanglement repair"})
        assert resp.decision == Decision.GET_A_PRO
        assert resp.score == 75
        assert resp.rationale == UNKNOWN_RATIONALE
        assert resp.steps == [] and resp.tools == [] and resp.materials == []
        assert resp.safety == [
            "Please consult a professional or provide more details to get specific advice."
        ]

    @pytest.mark.parametrize("payload", [{}, None, "shelf", 42, ["tap"]])
    def test_degenerate_payloads_never_raise(self, pipeline, payload):
        resp = pipeline.assess(payload)
        assert isinstance(resp, Assessment)
        assert resp.score == 75

    def test_default_is_fresh_each_call(self):
        first = unknown_job_assessment()
        first.rationale.clear()
        assert unknown_job_assessment().rationale == UNKNOWN_RATIONALE


class TestProviderPath:
    def test_llm_answer_wins(self, llm_pipeline, mock_llm):
        resp = llm_pipeline.assess({"description": "hang a shelf"})
        assert resp.score == 35
        assert resp.duration_min == 45
        assert len(mock_llm.calls) == 1

    def test_llm_answer_serialises_estimates(self, llm_pipeline):
        body = llm_pipeline.assess({"description": "hang a shelf"}).to_dict()
        assert body["durationMin"] == 45
        assert body["costLow"] == 10
        assert body["costHigh"] == 25
        json.dumps(body)

    def test_llm_used_even_for_unknown_jobs(self, llm_pipeline):
        resp = llm_pipeline.assess({"description": "quantum entanglement repair"})
        assert resp.score == 35

    @pytest.mark.parametrize(
        "fixture_name",
        ["mock_llm_garbage", "mock_llm_no_content", "mock_llm_unauthorised"],
    )
    def test_provider_failure_falls_back_to_catalog(self, request, make_llm_pipeline, fixture_name):
        llm = request.getfixturevalue(fixture_name)
        resp = make_llm_pipeline(llm).assess(
            {"description": "I need to hang a shelf in my bedroom", "skillLevel": "novice"}
        )
        assert resp.score == 40
        assert resp.decision == Decision.DIY
        assert resp.duration_min is None
        assert len(llm.calls) == 1

    def test_provider_failure_then_unknown_job(self, make_llm_pipeline, mock_llm_garbage):
        resp = make_llm_pipeline(mock_llm_garbage).assess({"description": "tune my harp"})
        assert resp.score == 75
        assert resp.decision == Decision.GET_A_PRO

    def test_llm_model_reported(self, llm_pipeline, pipeline):
        assert llm_pipeline.llm_model == "mock-llm"
        assert pipeline.llm_model == ""
