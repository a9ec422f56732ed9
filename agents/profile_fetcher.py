"""
Brand Profile Fetcher
----------------------
Best-effort company profile lookup against the Tracxn company endpoint.

The profile is enrichment only: a missing key, a non-2xx status, a transport
error or an unparseable body all reduce to `None` after a warning. Nothing is
retried and nothing is raised to the caller.

Architecture:
  BrandProfileAgent.run(brand_name) -> Optional[profile]
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from agents.base import Agent
from agents.exceptions import ProfileFetchFailure
from config.settings import settings

logger = logging.getLogger(__name__)


class BrandProfileFetcher:
    def __init__(self, session: Optional[requests.Session] = None, base_url: Optional[str] = None):
        self.session = session or requests.Session()
        self.base_url = base_url or settings.TRACXN_COMPANY_URL

    def _get(self, brand_name: str, api_key: str) -> Any:
        """Single GET, no retry. Any failure surfaces as ProfileFetchFailure."""
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        url = f"{self.base_url}?query={quote(brand_name, safe='')}"
        try:
            resp = self.session.get(
                url,
                headers=headers,
                timeout=settings.REQUEST_TIMEOUT,
            )
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise ProfileFetchFailure(f"Tracxn API error: {e}") from e
        except requests.RequestException as e:
            raise ProfileFetchFailure(f"Tracxn fetch failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise ProfileFetchFailure(f"Tracxn returned a non-JSON body: {e}") from e

    def fetch(self, brand_name: str, api_key: str) -> Optional[Any]:
        if not api_key:
            logger.warning("No Tracxn API key provided. Skipping fetch.")
            return None

        try:
            data = self._get(brand_name, api_key)
        except ProfileFetchFailure as e:
            logger.warning(f"Profile lookup for '{brand_name}' degraded to no data: {e}")
            return None

        logger.info(f"Tracxn profile fetched for '{brand_name}'")
        return data


class BrandProfileAgent(Agent):
    """
    Profile lookup for one brand.

    Input:  brand name
    Output: raw Tracxn profile, or None
    """

    def __init__(self, api_key: str, fetcher: Optional[BrandProfileFetcher] = None, label: str = ""):
        super().__init__(name=f"BrandProfileAgent{label}")
        self.api_key = api_key
        self.fetcher = fetcher or BrandProfileFetcher()

    def run(self, brand_name: str) -> Optional[Any]:
        return self.fetcher.fetch(brand_name, self.api_key)
