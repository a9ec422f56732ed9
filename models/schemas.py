"""
Core data models / schemas for the SynergyAI partnership evaluator.

Internal request objects are plain dataclasses. The analysis reply is a
pydantic model so that the model's free-text JSON is validated on the way in;
its wire names are camelCase, its Python attributes snake_case.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Wire models (analysis reply)
# ---------------------------------------------------------------------------

class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoringParameter(WireModel):
    """One weighted rubric dimension. Rating fields are set only by an analysis."""
    id: str
    name: str
    weight: Union[int, float]               # 0–40, clamped by the input control
    rating: Optional[Union[int, float]] = None  # 1–5
    weighted_score: Optional[float] = None
    rationale: Optional[str] = None


class CollaborationConcept(WireModel):
    title: str
    description: str


class Risk(WireModel):
    risk: str
    mitigation: str


Recommendation = Literal["Go", "Pilot", "No-Go"]


class AnalysisResult(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    executive_summary: str
    parameters: List[ScoringParameter] = []
    raw_sum: float
    final_percentage: float                 # 0–100
    recommendation: Recommendation
    suggested_model: str = ""
    concepts: List[CollaborationConcept] = []
    risks: List[Risk] = []
    sources: List[str] = []

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Request side
# ---------------------------------------------------------------------------

@dataclass
class EvaluationForm:
    """Raw user inputs for one submission."""
    brand_a: str
    brand_b: str
    scope: str
    geography: str
    tracxn_key: str = ""
    analysis_key: str = ""


@dataclass(frozen=True)
class AnalysisRequest:
    brand_a: str
    brand_b: str
    scope: str
    geography: str
    weights: Mapping[str, Union[int, float]] = field(default_factory=dict)
    api_key: str = ""
    tracxn_key: str = ""

    def __repr__(self):
        # keys stay out of logs
        return (
            f"AnalysisRequest(brand_a={self.brand_a!r}, brand_b={self.brand_b!r}, "
            f"scope={self.scope!r}, geography={self.geography!r}, weights={dict(self.weights)!r})"
        )


@dataclass(frozen=True)
class FetchStatus:
    """Whether each brand's profile lookup produced data."""
    a: bool
    b: bool

    def to_dict(self) -> Dict[str, bool]:
        return {"a": self.a, "b": self.b}


@dataclass(frozen=True)
class EvaluationOutcome:
    """One evaluation's result together with the fetch status it was produced from."""
    result: AnalysisResult
    fetch_status: FetchStatus
