"""
Provider record -> canonical Paper / Researcher.

Semantic Scholar records are JSON dicts; arXiv records are ``arxiv.Result``
entries parsed from the Atom feed. All functions here are pure.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from paperpilot.model.paper import (
    ABSTRACT_PLACEHOLDER,
    URL_PLACEHOLDER,
    Paper,
    RecentPaper,
    Researcher,
)

logger = logging.getLogger(__name__)

SEMANTIC_SCHOLAR = "semantic_scholar"
ARXIV = "arxiv"

MAX_RECENT_PAPERS = 5


def _collapse(text: Optional[str]) -> Optional[str]:
    # arXiv wraps long titles / summaries across lines
    if text is None:
        return None
    return " ".join(str(text).split())


def _recent(papers: Iterable[RecentPaper]) -> List[RecentPaper]:
    # sorted() is stable, ties keep provider order
    ordered = sorted(papers, key=lambda p: p.year or 0, reverse=True)
    return ordered[:MAX_RECENT_PAPERS]


# =========================================================
# Semantic Scholar
# =========================================================

def _semantic_scholar_paper(raw: Dict[str, Any]) -> Paper:
    return Paper(
        title=raw.get("title"),
        abstract=(raw.get("abstract") or "").strip() or ABSTRACT_PLACEHOLDER,
        authors=[a.get("name") for a in raw.get("authors") or [] if a.get("name")],
        year=raw.get("year"),
        citation_count=raw.get("citationCount") or 0,
        url=raw.get("url") or URL_PLACEHOLDER,
        venue=raw.get("venue"),
    )


def normalize_researcher(raw: Dict[str, Any]) -> Researcher:
    """Semantic Scholar author record -> Researcher."""
    papers = [
        RecentPaper(title=p.get("title"), year=p.get("year"))
        for p in raw.get("papers") or []
    ]
    return Researcher(
        name=raw.get("name") or "",
        affiliations=list(raw.get("affiliations") or []),
        paper_count=raw.get("paperCount") or 0,
        citation_count=raw.get("citationCount") or 0,
        homepage=raw.get("homepage"),
        recent_papers=_recent(papers),
    )


# =========================================================
# arXiv
# =========================================================

def _arxiv_paper(entry: Any) -> Paper:
    published = getattr(entry, "published", None)
    return Paper(
        title=_collapse(getattr(entry, "title", None)),
        abstract=_collapse(getattr(entry, "summary", None)) or ABSTRACT_PLACEHOLDER,
        authors=[author.name for author in getattr(entry, "authors", None) or []],
        year=published.year if published else None,
        citation_count=None,
        url=getattr(entry, "entry_id", None) or URL_PLACEHOLDER,
        venue="arXiv",
    )


def aggregate_arxiv_authors(entries: Iterable[Any], query: str) -> List[Researcher]:
    """
    Group the authors of arXiv entries into researchers.

    Authors are matched by exact name. Only names containing ``query``
    (case-insensitive) are kept, in first-seen order.
    """
    grouped: Dict[str, List[RecentPaper]] = {}

    for entry in entries:
        paper = _arxiv_paper(entry)
        for name in paper.authors:
            grouped.setdefault(name, []).append(
                RecentPaper(title=paper.title, year=paper.year)
            )

    needle = query.strip().lower()
    return [
        Researcher(
            name=name,
            affiliations=None,
            paper_count=len(papers),
            citation_count=None,
            recent_papers=_recent(papers),
        )
        for name, papers in grouped.items()
        if needle in name.lower()
    ]


# =========================================================
# Dispatch
# =========================================================

_PAPER_NORMALIZERS = {
    SEMANTIC_SCHOLAR: _semantic_scholar_paper,
    ARXIV: _arxiv_paper,
}


def normalize_paper(provider: str, raw: Any) -> Paper:
    try:
        normalizer = _PAPER_NORMALIZERS[provider]
    except KeyError:
        raise ValueError(f"Unknown search provider: {provider}")

    paper = normalizer(raw)
    if paper.title is None:
        logger.warning(f"⚠️ {provider} record without title: {paper.url}")
    return paper
