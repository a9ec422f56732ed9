"""
Prompt text for the partnership analysis call.

Search grounding rules out the provider's JSON mode, so the reply layout is
pinned down here, in the prompt, and parsed by hand in analysis_client.
"""

import json
from typing import Any, Optional

from config.settings import settings
from models.schemas import AnalysisRequest
from models.weights import DEFAULT_PARAMETERS


NO_PROFILE_MARKER = "Data not available, rely on Search."

PERSONA = (
    "You are a senior strategy consultant specializing in brand partnerships, "
    "go-to-market and commercial strategy."
)

SEARCH_GROUNDING_RULES = """**CRITICAL: SEARCH GROUNDING**
Use the Google Search tool to fetch up-to-date news articles, blogs, and social media discussions to understand **brand perception**, **brand trust**, and **current market positioning**. You must rely on recent data (last 12 months) to ensure the assessment reflects the current reality."""

SCORING_DEFINITIONS = """Specific Scoring Definitions:
- "Brand Positioning & Fit": **Mandatory Search:** Analyze recent marketing campaigns, press releases, and consumer discourse to determine current market positioning. Assess alignment in target demographics and brand ethos based on this live data. Look for overlapping values or conflicting brand messages.
- "Brand Love & Perception": **Mandatory Search:** Find recent sentiment, controversies, viral moments, and user reviews (e.g., Reddit, Twitter/X, News). Prioritize recent social listening data to gauge brand trust and affinity.
- "Historical Collaboration": Do the brands have a history of collaborating with likewise brands of similar scale and industry? Note: This evaluates their general willingness and experience with partnerships, NOT whether they have collaborated with each other specifically in the past.
- "Commercial Viability (Scale Parity)": **Mandatory Search if financials missing:** Evaluate whether the brands have similar scale in terms of revenue and valuation (Parity Check). If they don't, the likelihood of collaboration is lower due to lack of mutual benefit. Use Google Search to find latest annual revenue and valuation figures if Tracxn data is unavailable.
- "Geographic Compatibility": **Mandatory Search:** Check each brand's current footprint (stores, distribution, e-commerce reach) in {geography}. Score higher when both brands are already active there or have announced expansion into it.
- Every other parameter: score 1-5 on the evidence available, 5 being the strongest fit."""

INSTRUCTIONS = """Instructions:
1. Score each parameter 1-5 based on the provided weights and definitions.
2. Use the provided Tracxn data AND Google Search results to verify revenue/valuation for the "Commercial Viability (Scale Parity)" check.
3. Be concise, evidence-first.
4. RETURN ONLY RAW JSON. Do not include markdown formatting like ```json."""

RESPONSE_SCHEMA = """The JSON structure must be exactly this:
{
  "executiveSummary": "string",
  "parameters": [
    { "id": "string", "name": "string", "weight": number, "rating": number, "weightedScore": number, "rationale": "string" }
  ],
  "rawSum": number,
  "finalPercentage": number,
  "recommendation": "Go" | "Pilot" | "No-Go",
  "suggestedModel": "string",
  "concepts": [ { "title": "string", "description": "string" } ],
  "risks": [ { "risk": "string", "mitigation": "string" } ],
  "sources": [ "string" ]
}"""


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def profile_excerpt(profile: Optional[Any]) -> str:
    if not profile:
        return NO_PROFILE_MARKER
    return _compact(profile)[: settings.PROFILE_EXCERPT_CHARS]


def build_analysis_prompt(request: AnalysisRequest, brand_a_data: Optional[Any], brand_b_data: Optional[Any]) -> str:
    weights = dict(request.weights)
    weights_summary = ", ".join(f"{key}: {val}" for key, val in weights.items())
    names = {pid: name for pid, name, _ in DEFAULT_PARAMETERS}
    catalogue = "\n".join(f"- {pid}: {names.get(pid, pid)}" for pid in weights)

    return f"""
{PERSONA}
Evaluate the collaboration between Brand A: {request.brand_a} and Brand B: {request.brand_b}.

{SEARCH_GROUNDING_RULES}

Context:
- Scope: {request.scope}
- Geography: {request.geography}
- Weights: {weights_summary}
- Custom Weights: {_compact(weights)}

Parameters (id: name):
{catalogue}

Data Source A (Tracxn/Live Data): {profile_excerpt(brand_a_data)}
Data Source B (Tracxn/Live Data): {profile_excerpt(brand_b_data)}

{SCORING_DEFINITIONS.format(geography=request.geography)}

{INSTRUCTIONS}

{RESPONSE_SCHEMA}
""".strip()
