"""
Streamlit Dashboard
SynergyAI — Brand Partnership Evaluator

Sections:
  1. Sidebar — assessment scope, Tracxn key, rubric weights
  2. Synergy score card + recommendation
  3. Executive summary
  4. Fit profile (radar) + parameter scorecard
  5. Proposed concepts / key risks
  6. Sources
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from typing import Dict, Optional

from agents import PartnershipOrchestrator
from dashboard.markup import concept_card, recommendation_badge, source_chips
from dashboard.session import request_run, run_pending
from config.settings import settings
from models.schemas import AnalysisResult, EvaluationForm, FetchStatus
from models.weights import WeightTable


# ─── Page Config ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="SynergyAI — Brand Partnership Evaluator",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ─── Styling ─────────────────────────────────────────────────────────────────

st.markdown("""
<style>
    .rec-badge {
        border-radius: 20px;
        padding: 6px 18px;
        color: white;
        font-weight: bold;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        display: inline-block;
    }
    .concept-card {
        background: #eef2ff;
        border: 1px solid #e0e7ff;
        border-radius: 12px;
        padding: 12px 16px;
        margin-bottom: 10px;
    }
    .source-chip {
        background: #f1f5f9;
        border-radius: 6px;
        padding: 2px 8px;
        margin: 2px;
        font-size: 12px;
        display: inline-block;
    }
</style>
""", unsafe_allow_html=True)

REC_COLORS = {"Go": "#22c55e", "Pilot": "#f59e0b", "No-Go": "#ef4444"}


# ─── State Management ────────────────────────────────────────────────────────

def get_state():
    if "orchestrator" not in st.session_state:
        st.session_state.orchestrator = PartnershipOrchestrator(settings=settings)
    if "weight_table" not in st.session_state:
        st.session_state.weight_table = WeightTable()
    if "running" not in st.session_state:
        st.session_state.running = False
    if "pending_form" not in st.session_state:
        st.session_state.pending_form = None
    return st.session_state


# ─── Sidebar ─────────────────────────────────────────────────────────────────

def render_sidebar(state) -> Dict:
    table: WeightTable = state.weight_table

    with st.sidebar:
        st.title("⚡ Synergy AI")
        st.caption("Strategy Consultant Mode")
        st.divider()

        # ── Assessment Scope ─────────────────────────────────────────────────
        st.subheader("1️⃣ Assessment Scope")
        col_a, col_b = st.columns(2)
        brand_a = col_a.text_input("Brand A", settings.DEFAULT_BRAND_A, placeholder="e.g. Nike")
        brand_b = col_b.text_input("Brand B", settings.DEFAULT_BRAND_B, placeholder="e.g. Apple")
        geography = st.text_input("Geographic Focus", settings.DEFAULT_GEOGRAPHY)
        scope = st.text_area("Collaboration Scope", settings.DEFAULT_SCOPE, height=70,
                             placeholder="e.g. Co-branded product line")
        tracxn_key = st.text_input("Tracxn API Key", settings.TRACXN_API_KEY, type="password",
                                   help="Leave empty to skip company profile lookups")

        st.divider()

        # ── Weights ──────────────────────────────────────────────────────────
        st.subheader("2️⃣ Adjust Framework")
        for param in table:
            table.set_weight(param.id, st.slider(
                param.name, 0, settings.MAX_PARAMETER_WEIGHT, int(param.weight),
                key=f"weight_{param.id}",
            ))

        if table.is_balanced:
            st.success(f"Total: {table.total}/{settings.TARGET_WEIGHT_TOTAL}")
        else:
            st.warning(f"Total: {table.total}/{settings.TARGET_WEIGHT_TOTAL} (ideally {settings.TARGET_WEIGHT_TOTAL})")

        st.divider()
        run_button = st.button(
            "⏳ Analyzing..." if state.running else "🚀 Evaluate Partnership",
            type="primary",
            use_container_width=True,
            disabled=state.running,
        )

    return {
        "form": EvaluationForm(
            brand_a=brand_a,
            brand_b=brand_b,
            scope=scope,
            geography=geography,
            tracxn_key=tracxn_key,
        ),
        "run": run_button,
    }


# ─── Fetch Status ────────────────────────────────────────────────────────────

def render_fetch_status(status: Optional[FetchStatus], form: EvaluationForm):
    if status is None:
        return
    a = "✅" if status.a else "•"
    b = "✅" if status.b else "•"
    st.caption(f"Tracxn data — {a} {form.brand_a}   {b} {form.brand_b}")


# ─── Score Card ──────────────────────────────────────────────────────────────

def render_score_card(result: AnalysisResult):
    col1, col2 = st.columns([1, 2])

    with col1:
        fig = go.Figure(go.Indicator(
            mode="gauge+number",
            value=result.final_percentage,
            number={"suffix": "%"},
            title={"text": "Synergy Score"},
            gauge={
                "axis": {"range": [0, 100]},
                "bar": {"color": "#6366f1"},
                "steps": [
                    {"range": [0, 50], "color": "#fee2e2"},
                    {"range": [50, 70], "color": "#fef3c7"},
                    {"range": [70, 100], "color": "#dcfce7"},
                ],
            },
        ))
        fig.update_layout(height=230, margin=dict(t=40, b=0, l=20, r=20))
        st.plotly_chart(fig, use_container_width=True)

        color = REC_COLORS.get(result.recommendation, REC_COLORS["No-Go"])
        st.markdown(recommendation_badge(result.recommendation, color), unsafe_allow_html=True)
        st.caption(f"Model: {result.suggested_model}")

    with col2:
        st.subheader("📝 Executive Summary")
        st.write(result.executive_summary)
        st.caption(f"Raw weighted sum: {result.raw_sum:g}")


# ─── Fit Profile ─────────────────────────────────────────────────────────────

def render_radar(result: AnalysisResult):
    st.markdown("**Fit Profile**")
    if not result.parameters:
        st.info("No parameter ratings returned.")
        return

    # first word of each name keeps the axis labels short
    subjects = [p.name.split(" ")[0] for p in result.parameters]
    scores = [p.rating or 0 for p in result.parameters]

    fig = go.Figure(go.Scatterpolar(
        r=scores + scores[:1],
        theta=subjects + subjects[:1],
        fill="toself",
        name="Score",
        line=dict(color="#6366f1"),
        fillcolor="rgba(99,102,241,0.3)",
        hovertext=[p.name for p in result.parameters] + [result.parameters[0].name],
    ))
    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, 5])),
        showlegend=False,
        height=350,
        margin=dict(t=30, b=30, l=40, r=40),
    )
    st.plotly_chart(fig, use_container_width=True)


def render_scorecard(result: AnalysisResult):
    rows = [{
        "Parameter": p.name,
        "Weight": p.weight,
        "Rating (1-5)": p.rating,
        "Score": round(p.weighted_score, 1) if p.weighted_score is not None else None,
        "Rationale": p.rationale or "",
    } for p in result.parameters]

    df = pd.DataFrame(rows)

    def color_rating(val):
        if val is None or pd.isna(val):
            return ""
        if val >= 4:
            return "background-color: #dcfce7"
        if val >= 3:
            return "background-color: #fef3c7"
        return "background-color: #fee2e2"

    st.dataframe(
        df.style.map(color_rating, subset=["Rating (1-5)"]),
        use_container_width=True,
        hide_index=True,
    )


# ─── Concepts & Risks ────────────────────────────────────────────────────────

def render_concepts_and_risks(result: AnalysisResult):
    col_l, col_r = st.columns(2)

    with col_l:
        st.subheader("💡 Proposed Concepts")
        for concept in result.concepts:
            st.markdown(concept_card(concept), unsafe_allow_html=True)

    with col_r:
        st.subheader("⚠️ Key Risks & Mitigations")
        for risk in result.risks:
            st.markdown(f"**⚠️ {risk.risk}**")
            st.caption(f"↳ Mitigation: {risk.mitigation}")


def render_sources(result: AnalysisResult):
    if not result.sources:
        return
    st.divider()
    st.markdown("**Sources utilized for this analysis:**")
    st.markdown(source_chips(result.sources), unsafe_allow_html=True)


# ─── Main App ─────────────────────────────────────────────────────────────────

def main():
    st.title("⚡ Brand Partnership Evaluator")
    st.caption("Weighted partnership scoring with live market data and Google Search grounding")

    state = get_state()
    config = render_sidebar(state)
    form: EvaluationForm = config["form"]
    orchestrator: PartnershipOrchestrator = state.orchestrator

    if config["run"]:
        request_run(state, form)
        st.rerun()

    if state.running:
        with st.spinner("🤖 Fetching brand data and running the analysis..."):
            run_pending(state)
        st.rerun()

    if orchestrator.last_error:
        st.error(f"❌ {orchestrator.last_error}")

    render_fetch_status(orchestrator.fetch_status, form)

    result = orchestrator.last_result
    if result is None:
        st.info(
            "👈 **Name two brands, set the scope and weights in the sidebar, then click "
            "'Evaluate Partnership'.**\n\n"
            "Company profiles are pulled from Tracxn when a key is set; the scorecard, "
            "concepts and risks come from Gemini with live Google Search grounding."
        )
        return

    render_score_card(result)
    st.divider()

    col_chart, col_table = st.columns([1, 2])
    with col_chart:
        render_radar(result)
    with col_table:
        render_scorecard(result)
    st.divider()

    render_concepts_and_risks(result)
    render_sources(result)


if __name__ == "__main__":
    main()
