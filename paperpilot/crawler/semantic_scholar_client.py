from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from paperpilot.errors import ProviderError

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "optional_key"

PAPER_FIELDS = "title,abstract,authors,year,citationCount,url,venue"
AUTHOR_FIELDS = "name,affiliations,paperCount,citationCount,homepage,papers.year,papers.title"


class SemanticScholarClient:
    """
    Thin wrapper over the Semantic Scholar Graph API search endpoints.

    One GET per call, no retry. Returns the raw ``data`` records.
    """

    provider = "semantic_scholar"

    def __init__(
        self,
        base_url: str = "https://api.semanticscholar.org/graph/v1",
        api_key: Optional[str] = None,
        timeout: int = 30,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        if self.api_key and self.api_key != PLACEHOLDER_API_KEY:
            return {"x-api-key": self.api_key}
        return {}

    def _get(self, path: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        url = f"{self.base_url}{path}"
        try:
            r = requests.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self.timeout,
            )
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            logger.error(f"❌ Semantic Scholar request failed: {url} | {e}")
            raise ProviderError(details=str(e)) from e
        except ValueError as e:
            logger.error(f"❌ Semantic Scholar returned non-JSON body: {url}")
            raise ProviderError(details=f"Invalid JSON response: {e}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        return list(data or [])

    def search_papers(self, query: str, limit: int = 10) -> List[Dict[str, Any]]:
        records = self._get(
            "/paper/search",
            {"query": query, "limit": limit, "fields": PAPER_FIELDS},
        )
        logger.info(f"🔎 semantic_scholar papers query='{query}' found={len(records)}")
        return records

    def search_authors(self, query: str, limit: int = 10) -> List[Dict[str, Any]]:
        records = self._get(
            "/author/search",
            {"query": query, "limit": limit, "fields": AUTHOR_FIELDS},
        )
        logger.info(f"🔎 semantic_scholar authors query='{query}' found={len(records)}")
        return records
