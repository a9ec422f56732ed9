"""
FastAPI Route Handlers
SynergyAI — Brand Partnership Evaluator
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException

from api.schemas import (
    EvaluateRequest, EvaluateResponse, FetchStatusResponse,
    HealthResponse, ParameterResponse, ParametersResponse,
)
from agents import PartnershipOrchestrator
from agents.exceptions import AnalysisError, ConfigurationError
from config.settings import settings
from models.schemas import EvaluationForm
from models.weights import WeightTable

logger = logging.getLogger(__name__)

router = APIRouter()

_orchestrator: Optional[PartnershipOrchestrator] = None


def get_orchestrator() -> PartnershipOrchestrator:
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = PartnershipOrchestrator(settings=settings)
    return _orchestrator


def set_orchestrator(orchestrator: Optional[PartnershipOrchestrator]) -> None:
    global _orchestrator
    _orchestrator = orchestrator


# ─── Health ──────────────────────────────────────────────────────────────────

@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    return HealthResponse(
        status="ok",
        version=settings.APP_VERSION,
        timestamp=datetime.utcnow(),
    )


# ─── Rubric ──────────────────────────────────────────────────────────────────

@router.get("/parameters", response_model=ParametersResponse, tags=["Configuration"])
async def get_parameters():
    """Default rubric parameters and their weights."""
    table = WeightTable()
    return ParametersResponse(
        parameters=[ParameterResponse(id=p.id, name=p.name, weight=p.weight) for p in table],
        total=table.total,
        target_total=settings.TARGET_WEIGHT_TOTAL,
        max_weight=settings.MAX_PARAMETER_WEIGHT,
    )


# ─── Evaluation ──────────────────────────────────────────────────────────────

@router.post("/evaluate", response_model=EvaluateResponse, tags=["Evaluation"])
def evaluate(request: EvaluateRequest):
    """
    Run one partnership evaluation:
    Tracxn profiles (A ∥ B) → Gemini analysis with search grounding → scorecard
    """
    try:
        table = WeightTable.from_weights(request.weights)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=str(e.args[0]))

    form = EvaluationForm(
        brand_a=request.brand_a,
        brand_b=request.brand_b,
        scope=request.scope,
        geography=request.geography,
        tracxn_key=request.tracxn_key or "",
    )

    orchestrator = get_orchestrator()
    try:
        outcome = orchestrator.run(form, table)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except AnalysisError as e:
        raise HTTPException(status_code=502, detail=str(e))

    result = outcome.result
    return EvaluateResponse(
        status="success",
        message=f"{result.recommendation} — synergy score {result.final_percentage}%",
        fetch_status=FetchStatusResponse(**outcome.fetch_status.to_dict()),
        weight_total=table.total,
        weights_balanced=table.is_balanced,
        result=result.to_wire(),
        run_at=datetime.utcnow(),
    )


@router.get("/result", tags=["Evaluation"])
async def get_result():
    """The most recent successful evaluation."""
    orchestrator = get_orchestrator()
    if orchestrator.last_result is None:
        detail = orchestrator.last_error or "No evaluation available. Run /evaluate first."
        raise HTTPException(status_code=404, detail=detail)
    return orchestrator.last_result.to_wire()
