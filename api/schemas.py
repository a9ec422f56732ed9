"""
Pydantic schemas for API request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Annotated, Any, Dict, List, Optional
from datetime import datetime

from config.settings import settings


Weight = Annotated[int, Field(ge=0, le=settings.MAX_PARAMETER_WEIGHT)]


# ─── Request Schemas ─────────────────────────────────────────────────────────

class EvaluateRequest(BaseModel):
    brand_a: str = settings.DEFAULT_BRAND_A
    brand_b: str = settings.DEFAULT_BRAND_B
    scope: str = settings.DEFAULT_SCOPE
    geography: str = settings.DEFAULT_GEOGRAPHY
    weights: Dict[str, Weight] = Field(
        default_factory=dict,
        description="Overrides on top of the default weights, keyed by parameter id",
    )
    tracxn_key: Optional[str] = Field(None, description="Overrides the server's Tracxn key")


# ─── Response Schemas ────────────────────────────────────────────────────────

class ParameterResponse(BaseModel):
    id: str
    name: str
    weight: int


class ParametersResponse(BaseModel):
    parameters: List[ParameterResponse]
    total: int
    target_total: int
    max_weight: int


class FetchStatusResponse(BaseModel):
    a: bool
    b: bool


class EvaluateResponse(BaseModel):
    status: str
    message: str
    fetch_status: Optional[FetchStatusResponse]
    weight_total: float
    weights_balanced: bool
    result: Dict[str, Any]
    run_at: datetime


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: datetime
