"""
Partnership evaluation orchestrator.

  resolve keys → fetch both profiles concurrently → build request → analyze

Credentials come from the Settings object handed in at construction; the
environment is never read here.
"""

import logging
import time
from typing import Optional

from agents.analysis_client import AnalysisClient
from agents.base import fan_out
from agents.exceptions import AnalysisError
from agents.profile_fetcher import BrandProfileAgent, BrandProfileFetcher
from agents.request_builder import build_analysis_request
from config.settings import Settings, settings as default_settings
from models.schemas import AnalysisResult, EvaluationForm, EvaluationOutcome, FetchStatus
from models.weights import WeightTable


class PartnershipOrchestrator:
    """
    Runs one evaluation per `run()` / `evaluate()` call and publishes the
    outcome on `last_result` / `last_error` / `fetch_status`.

    The published attributes are last-writer-wins when calls overlap; callers
    that serve concurrent requests read the `EvaluationOutcome` returned by
    `run()` instead.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[BrandProfileFetcher] = None,
        client: Optional[AnalysisClient] = None,
    ):
        self.settings = settings or default_settings
        self.fetcher = fetcher or BrandProfileFetcher()
        self.client = client or AnalysisClient()
        self.logger = logging.getLogger("orchestrator")

        self.last_result: Optional[AnalysisResult] = None
        self.last_error: Optional[str] = None
        self.fetch_status: Optional[FetchStatus] = None

    def resolve_tracxn_key(self, form: EvaluationForm) -> str:
        return form.tracxn_key or self.settings.TRACXN_API_KEY or ""

    def resolve_analysis_key(self, form: EvaluationForm) -> str:
        return form.analysis_key or self.settings.GEMINI_API_KEY or ""

    def evaluate(self, form: EvaluationForm, weight_table: Optional[WeightTable] = None) -> AnalysisResult:
        return self.run(form, weight_table).result

    def run(self, form: EvaluationForm, weight_table: Optional[WeightTable] = None) -> EvaluationOutcome:
        weight_table = weight_table if weight_table is not None else WeightTable()
        self.last_error = None
        self.last_result = None
        self.fetch_status = None
        total_start = time.time()

        tracxn_key = self.resolve_tracxn_key(form)
        self.logger.info(f"🚀 Evaluating {form.brand_a} × {form.brand_b} ({form.geography})")
        if not weight_table.is_balanced:
            self.logger.warning(
                f"Weights sum to {weight_table.total} "
                f"(ideally {self.settings.TARGET_WEIGHT_TOTAL}); continuing"
            )

        profile_a, profile_b = fan_out(
            [
                (BrandProfileAgent(tracxn_key, self.fetcher, label="A"), form.brand_a),
                (BrandProfileAgent(tracxn_key, self.fetcher, label="B"), form.brand_b),
            ],
            max_workers=self.settings.MAX_FETCH_WORKERS,
        )
        # empty bodies (0, false, "", {}) count as no data
        brand_a_data = profile_a.data if profile_a.success and profile_a.data else None
        brand_b_data = profile_b.data if profile_b.success and profile_b.data else None
        fetch_status = FetchStatus(a=brand_a_data is not None, b=brand_b_data is not None)
        self.fetch_status = fetch_status
        self.logger.info(f"  Profile data — A: {fetch_status.a}, B: {fetch_status.b}")

        request = build_analysis_request(
            form,
            weight_table,
            tracxn_key=tracxn_key,
            analysis_key=self.resolve_analysis_key(form),
        )

        try:
            result = self.client.analyze(request, brand_a_data, brand_b_data)
        except AnalysisError as e:
            self.last_error = str(e)
            self.logger.error(f"  ❌ Analysis failed: {e}")
            raise

        self.last_result = result
        self.logger.info(
            f"✅ Evaluation complete — {result.recommendation} at {result.final_percentage}% "
            f"in {time.time() - total_start:.2f}s"
        )
        return EvaluationOutcome(result=result, fetch_status=fetch_status)

    def summary(self) -> str:
        lines = ["Evaluation Summary:"]
        if self.fetch_status:
            lines.append(f"  Profile data: A={self.fetch_status.a}  B={self.fetch_status.b}")
        if self.last_result:
            r = self.last_result
            lines.append(f"  Recommendation: {r.recommendation}  Score: {r.final_percentage}%")
            lines.append(f"  Suggested model: {r.suggested_model}")
        if self.last_error:
            lines.append(f"  Error: {self.last_error}")
        return "\n".join(lines)
