"""
Analysis request assembly. Pure: no I/O and no validation.
"""

from typing import Dict, Iterable, Union

from models.schemas import AnalysisRequest, EvaluationForm, ScoringParameter


def flatten_weights(parameters: Iterable[ScoringParameter]) -> Dict[str, Union[int, float]]:
    weights: Dict[str, Union[int, float]] = {}
    for p in parameters:
        weights[p.id] = p.weight        # last write wins
    return weights


def build_analysis_request(
    form: EvaluationForm,
    weight_table: Iterable[ScoringParameter],
    tracxn_key: str,
    analysis_key: str,
) -> AnalysisRequest:
    return AnalysisRequest(
        brand_a=form.brand_a,
        brand_b=form.brand_b,
        scope=form.scope,
        geography=form.geography,
        weights=flatten_weights(weight_table),
        api_key=analysis_key,
        tracxn_key=tracxn_key,
    )
