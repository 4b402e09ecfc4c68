from typing import Optional, Union

from paperpilot.config import Settings

from .arxiv_client import ArxivSearchClient
from .semantic_scholar_client import SemanticScholarClient

SearchClient = Union[SemanticScholarClient, ArxivSearchClient]


def build_search_client(settings: Settings, provider: Optional[str] = None) -> SearchClient:
    """Create the search client for the configured provider."""
    provider = provider or settings.search.provider

    if provider == SemanticScholarClient.provider:
        return SemanticScholarClient(
            base_url=settings.semantic_scholar.base_url,
            api_key=settings.semantic_scholar.api_key,
            timeout=settings.semantic_scholar.timeout,
        )
    if provider == ArxivSearchClient.provider:
        return ArxivSearchClient(
            page_size=settings.arxiv.page_size,
            delay_seconds=settings.arxiv.delay_seconds,
            num_retries=settings.arxiv.num_retries,
        )

    raise ValueError(f"Unknown search provider: {provider}")


__all__ = [
    "ArxivSearchClient",
    "SearchClient",
    "SemanticScholarClient",
    "build_search_client",
]
