"""
Core data models for the SynergyAI partnership evaluator.
"""

from .schemas import (
    ScoringParameter,
    CollaborationConcept,
    Risk,
    AnalysisResult,
    EvaluationForm,
    AnalysisRequest,
    FetchStatus,
    EvaluationOutcome,
)
from .weights import WeightTable, DEFAULT_PARAMETERS, default_parameters

__all__ = [
    "ScoringParameter",
    "CollaborationConcept",
    "Risk",
    "AnalysisResult",
    "EvaluationForm",
    "AnalysisRequest",
    "FetchStatus",
    "EvaluationOutcome",
    "WeightTable",
    "DEFAULT_PARAMETERS",
    "default_parameters",
]
