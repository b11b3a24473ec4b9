"""
interfaces/streamlit_app.py
──────────────────────────────────────────────────────────────────────────────
Streamlit UI for the DIY risk assessor.

Run:
  streamlit run checkajob/interfaces/streamlit_app.py

Features:
  • Job form: description, skill level, comma-separated tags, postcode
  • Decision / score / estimate metrics
  • Rationale, Steps, Tools & Materials, Safety and JSON tabs
"""
from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import streamlit as st

# ── Path setup ─────────────────────────────────────────────────────────────
# Allow running from the repo root with: streamlit run checkajob/interfaces/streamlit_app.py
_REPO_ROOT = Path(__file__).parent.parent.parent
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from checkajob.domain.models import AssessmentRequest, Decision, SkillLevel
from checkajob.services.container import get_pipeline

logger = logging.getLogger(__name__)

# ── Page configuration ─────────────────────────────────────────────────────
st.set_page_config(
    page_title="CheckaJob",
    page_icon="🔧",
    layout="centered",
)

# ── CSS ────────────────────────────────────────────────────────────────────
st.markdown(
    """
    <style>
    .stApp { background-color: #f4f6f9; }

    .verdict {
        background: white;
        border-left: 6px solid #16a34a;
        border-radius: 6px;
        padding: 14px 18px;
        margin-bottom: 12px;
        box-shadow: 0 1px 4px rgba(0,0,0,0.08);
        font-size: 1.2em;
        font-weight: 600;
        color: #1e293b;
    }
    .verdict.pro { border-left-color: #dc2626; }

    [data-testid="metric-container"] {
        background: white;
        border-radius: 8px;
        padding: 12px;
        box-shadow: 0 1px 3px rgba(0,0,0,0.06);
    }
    </style>
    """,
    unsafe_allow_html=True,
)


# ── Backend singleton ──────────────────────────────────────────────────────

@st.cache_resource(show_spinner="Loading job catalog…")
def _load_pipeline():
    """Loads and caches the AssessmentPipeline for the lifetime of the app."""
    return get_pipeline()


# ── Form ───────────────────────────────────────────────────────────────────

def _render_form() -> AssessmentRequest | None:
    """Render the job form; returns a request once submitted."""
    with st.form("job_form"):
        description = st.text_area(
            "Job description",
            placeholder="e.g.  hang a floating shelf on a plasterboard wall",
            height=100,
        )
        skill = st.selectbox(
            "Skill level",
            [s.value for s in SkillLevel],
            format_func=str.title,
        )
        tags = st.text_input(
            "Tags (comma separated, optional)",
            placeholder="e.g.  bathroom, chrome mixer tap",
        )
        postcode = st.text_input("Postcode (optional)")
        submitted = st.form_submit_button("Assess job", type="primary")

    if not (submitted and description.strip()):
        return None

    return AssessmentRequest(
        description=description,
        skill_level=skill,
        tags=[t.strip() for t in tags.split(",") if t.strip()],
        postcode=postcode.strip() or None,
    )


# ── Result rendering ───────────────────────────────────────────────────────

def _render_list(items: list[str], numbered: bool = False, empty: str = "None listed.") -> None:
    if not items:
        st.caption(empty)
        return
    lines = [f"{i}. {item}" if numbered else f"- {item}" for i, item in enumerate(items, 1)]
    st.markdown("\n".join(lines))


def _render_assessment(assessment, elapsed: float) -> None:
    is_pro = assessment.decision == Decision.GET_A_PRO
    st.markdown(
        f'<div class="verdict {"pro" if is_pro else ""}">'
        f'{"🛑" if is_pro else "✅"} {assessment.decision.value}</div>',
        unsafe_allow_html=True,
    )

    c1, c2, c3 = st.columns(3)
    c1.metric("Risk score", f"{assessment.score}/100")
    if assessment.duration_min is not None:
        c2.metric("Duration", f"{assessment.duration_min} min")
    if assessment.cost_low is not None and assessment.cost_high is not None:
        c3.metric("Cost", f"£{assessment.cost_low:.0f}–£{assessment.cost_high:.0f}")
    st.progress(assessment.score / 100)
    st.caption(f"Assessed in {elapsed:.2f}s")

    tab_why, tab_steps, tab_kit, tab_safety, tab_json = st.tabs(
        ["💬 Rationale", "🪜 Steps", "🧰 Tools & Materials", "⚠️ Safety", "{ } JSON"]
    )
    with tab_why:
        _render_list(assessment.rationale)
    with tab_steps:
        _render_list(assessment.steps, numbered=True)
    with tab_kit:
        st.markdown("**Tools**")
        _render_list(assessment.tools)
        st.markdown("**Materials**")
        _render_list(assessment.materials)
    with tab_safety:
        _render_list(assessment.safety)
    with tab_json:
        st.json(assessment.to_dict())


# ── Main ───────────────────────────────────────────────────────────────────

def main() -> None:
    st.title("🔧 CheckaJob")
    st.caption(
        "Describe your DIY project, pick your skill level and get a risk "
        "assessment, guidance and whether to tackle it yourself or call in a "
        "professional."
    )

    request = _render_form()
    if request is None:
        st.info("Describe the job above and press **Assess job**.")
        return

    pipeline = _load_pipeline()
    with st.spinner("Assessing …"):
        t0 = time.perf_counter()
        assessment = pipeline.assess(request)
        elapsed = time.perf_counter() - t0

    st.markdown("---")
    _render_assessment(assessment, elapsed)


if __name__ == "__main__":
    main()
