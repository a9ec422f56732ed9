"""
Partnership Analysis Client
----------------------------
Sends the composed partnership prompt to Gemini with Google Search grounding
and turns the free-text reply into an AnalysisResult.

Google Search grounding does NOT support response_mime_type='application/json'
or response_schema, so the layout is requested in the prompt and the reply is
fence-stripped and parsed here. Citation URLs come from the grounding
metadata and are merged into the reply's own `sources`.

Input:  AnalysisRequest + two optional Tracxn profiles
Output: AnalysisResult, or one of the AnalysisError subclasses
"""

import json
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError

from agents.exceptions import (
    ConfigurationError,
    EmptyResponseError,
    MalformedResponseError,
    TransportError,
)
from agents.prompts import build_analysis_prompt
from config.settings import settings
from models.schemas import AnalysisRequest, AnalysisResult

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Gemini API Key is missing."
EMPTY_RESPONSE_MESSAGE = "No response from AI"
MALFORMED_RESPONSE_MESSAGE = "AI response was not valid JSON. Please try again."

_LEADING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?```$")


# ─── Reply helpers ───────────────────────────────────────────────────────────


def strip_code_fences(text: str) -> str:
    """Remove one leading ```json / ``` fence and one trailing ``` fence."""
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_analysis_payload(text: str) -> AnalysisResult:
    """Parse and validate the cleaned reply. Raises MalformedResponseError only."""
    try:
        payload = json.loads(text)
    except ValueError:
        logger.error(f"Failed to parse JSON: {text}")
        raise MalformedResponseError(MALFORMED_RESPONSE_MESSAGE)

    if not isinstance(payload, dict):
        logger.error(f"Reply JSON is not an object: {text}")
        raise MalformedResponseError(MALFORMED_RESPONSE_MESSAGE)

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Reply JSON does not match the analysis layout ({e.error_count()} errors): {text}")
        raise MalformedResponseError(MALFORMED_RESPONSE_MESSAGE)


def extract_grounding_sources(response: Any) -> List[str]:
    """Web URIs from candidates[0].grounding_metadata.grounding_chunks. Any level may be absent."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) if metadata else None
    if not chunks:
        return []

    uris = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None) if web else None
        if isinstance(uri, str):
            uris.append(uri)
    return uris


def merge_sources(*groups: Iterable[str]) -> List[str]:
    """Deduplicated union, first occurrence wins."""
    merged = {}
    for group in groups:
        for src in group or []:
            merged.setdefault(src, None)
    return list(merged)


# ─── Client ──────────────────────────────────────────────────────────────────


class AnalysisClient:
    """
    Gemini-backed partnership scorer.

    A `client` can be injected (anything with `models.generate_content`);
    otherwise one SDK client is created per API key and reused.
    """

    def __init__(self, client: Optional[Any] = None, model: Optional[str] = None,
                 temperature: Optional[float] = None):
        self._client = client
        self._clients: Dict[str, Any] = {}
        self.model = model or settings.GEMINI_MODEL
        self.temperature = settings.ANALYSIS_TEMPERATURE if temperature is None else temperature

    def _get_client(self, api_key: str) -> Any:
        if self._client is not None:
            return self._client
        if api_key not in self._clients:
            self._clients[api_key] = genai.Client(api_key=api_key)
        return self._clients[api_key]

    def _generate(self, api_key: str, prompt: str) -> Any:
        try:
            return self._get_client(api_key).models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    tools=[types.Tool(google_search=types.GoogleSearch())],
                    temperature=self.temperature,
                ),
            )
        except genai_errors.APIError as e:
            logger.error(f"Gemini API error {e.code}: {e.message}")
            raise TransportError(e.message or str(e)) from e
        except Exception as e:
            logger.error(f"Gemini call failed: {e}")
            raise TransportError(str(e)) from e

    def analyze(self, request: AnalysisRequest, brand_a_data: Optional[Any],
                brand_b_data: Optional[Any]) -> AnalysisResult:
        if not request.api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        prompt = build_analysis_prompt(request, brand_a_data, brand_b_data)
        logger.info(
            f"Analyzing {request.brand_a} × {request.brand_b} with {self.model} "
            f"({len(prompt)} prompt chars)"
        )

        response = self._generate(request.api_key, prompt)

        text = getattr(response, "text", None)
        if not text:
            raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE)

        result = parse_analysis_payload(strip_code_fences(text))

        grounded = extract_grounding_sources(response)
        sources = merge_sources(result.sources, grounded)
        logger.info(
            f"Analysis parsed — recommendation={result.recommendation}, "
            f"final={result.final_percentage}%, {len(grounded)} grounding URIs, {len(sources)} sources"
        )
        return result.model_copy(update={"sources": sources})
