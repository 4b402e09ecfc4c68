import logging
from typing import List

import arxiv
import requests

from paperpilot.errors import ProviderError

logger = logging.getLogger(__name__)


class ArxivSearchClient:
    """
    arXiv has no author endpoint; authors are searched with the ``au:``
    field prefix against the regular query API.

    The Atom feed is parsed by the ``arxiv`` library into ``arxiv.Result``
    entries, which are what this client returns.
    """

    provider = "arxiv"

    def __init__(self, page_size: int = 100, delay_seconds: float = 3.0, num_retries: int = 0):
        self.arxiv_client = arxiv.Client(
            page_size=page_size,
            delay_seconds=delay_seconds,
            num_retries=num_retries,
        )

    def _search(self, search_query: str, max_results: int) -> List[arxiv.Result]:
        search = arxiv.Search(
            query=search_query,
            max_results=max_results,
            sort_by=arxiv.SortCriterion.LastUpdatedDate,
            sort_order=arxiv.SortOrder.Descending,
        )
        try:
            results = list(self.arxiv_client.results(search))
        except (arxiv.ArxivError, requests.RequestException) as e:
            logger.error(f"❌ arXiv request failed: '{search_query}' | {e}")
            raise ProviderError(details=str(e)) from e

        logger.info(f"🔎 arxiv query='{search_query}' found={len(results)}")
        return results

    def search_papers(self, query: str, limit: int = 10) -> List[arxiv.Result]:
        return self._search(f"all:{query}", limit)

    def search_authors(self, query: str, limit: int = 10) -> List[arxiv.Result]:
        return self._search(f"au:{query}", limit)
