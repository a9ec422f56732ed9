from .base import Agent, AgentResult, fan_out
from .profile_fetcher import BrandProfileAgent, BrandProfileFetcher
from .request_builder import build_analysis_request
from .analysis_client import AnalysisClient
from .orchestrator import PartnershipOrchestrator

__all__ = [
    "Agent", "AgentResult", "fan_out",
    "BrandProfileAgent", "BrandProfileFetcher",
    "build_analysis_request", "AnalysisClient",
    "PartnershipOrchestrator",
]
