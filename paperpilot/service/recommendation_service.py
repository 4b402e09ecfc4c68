"""
Recommendation orchestration.

personalized:  interests -> QueryOptimizer -> provider search -> normalize
general:       query -> provider search -> normalize
researchers:   query -> provider author search -> Researcher

Results are returned in provider order; nothing is re-ranked.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from paperpilot.config import Config, Settings
from paperpilot.crawler import SearchClient
from paperpilot.database.interest_repository import InterestRepository
from paperpilot.errors import MissingQueryError, NoInterestsError
from paperpilot.model.paper import Paper, Researcher
from paperpilot.service.normalizer import (
    ARXIV,
    aggregate_arxiv_authors,
    normalize_paper,
    normalize_researcher,
)
from paperpilot.service.query_optimizer import QueryOptimizer

logger = logging.getLogger(__name__)


def _title_key(title: str) -> str:
    return " ".join(title.split()).casefold()


def deduplicate_papers(papers: Iterable[Paper]) -> List[Paper]:
    """Drop repeated titles, keeping the first occurrence."""
    seen = set()
    unique: List[Paper] = []
    for paper in papers:
        if paper.title:
            key = _title_key(paper.title)
            if key in seen:
                continue
            seen.add(key)
        unique.append(paper)
    return unique


class RecommendationService:
    def __init__(
        self,
        interest_store: InterestRepository,
        optimizer: QueryOptimizer,
        search_client: SearchClient,
        settings: Optional[Settings] = None,
    ):
        self.interest_store = interest_store
        self.optimizer = optimizer
        self.search_client = search_client
        self.settings = settings or Config

    @property
    def provider(self) -> str:
        return self.search_client.provider

    def _normalize(self, records: Iterable) -> List[Paper]:
        return deduplicate_papers(normalize_paper(self.provider, r) for r in records)

    def get_personalized_recommendations(self, user_id: str) -> List[Paper]:
        interests = self.interest_store.get(user_id)
        logger.info(f"📌 user={user_id} interests={interests}")

        if not interests:
            raise NoInterestsError()

        query = self.optimizer.optimize(interests)
        records = self.search_client.search_papers(
            query, limit=self.settings.search.personalized_limit
        )
        return self._normalize(records)

    def get_recommendations(self, query: Optional[str]) -> List[Paper]:
        if not query or not query.strip():
            raise MissingQueryError()

        records = self.search_client.search_papers(
            query.strip(), limit=self.settings.search.general_limit
        )
        return self._normalize(records)

    def search_researchers(self, query: Optional[str]) -> List[Researcher]:
        if not query or not query.strip():
            raise MissingQueryError()
        query = query.strip()

        records = self.search_client.search_authors(
            query, limit=self.settings.search.researcher_limit
        )

        if self.provider == ARXIV:
            researchers = aggregate_arxiv_authors(records, query)
        else:
            researchers = [normalize_researcher(r) for r in records]

        logger.info(f"👥 researchers query='{query}' found={len(researchers)}")
        return researchers
