import pytest

from conftest import arxiv_entry, s2_paper, utc
from paperpilot.service.normalizer import (
    aggregate_arxiv_authors,
    normalize_paper,
    normalize_researcher,
)


def test_semantic_scholar_paper_maps_fields() -> None:
    paper = normalize_paper("semantic_scholar", s2_paper())

    assert paper.title == "Attention Is All You Need"
    assert paper.authors == ["Ashish Vaswani", "Noam Shazeer"]
    assert paper.year == 2017
    assert paper.citation_count == 90000
    assert paper.venue == "NeurIPS"


@pytest.mark.parametrize("missing, field, expected", [
    ("abstract", "abstract", "Abstract not available"),
    ("url", "url", "URL not available"),
    ("citationCount", "citation_count", 0),
])
def test_semantic_scholar_missing_optional_fields(missing: str, field: str, expected) -> None:
    raw = s2_paper()
    del raw[missing]

    paper = normalize_paper("semantic_scholar", raw)
    assert getattr(paper, field) == expected


def test_semantic_scholar_null_fields_use_defaults() -> None:
    raw = s2_paper(abstract=None, url=None, citationCount=None, authors=None)

    paper = normalize_paper("semantic_scholar", raw)
    assert paper.abstract == "Abstract not available"
    assert paper.url == "URL not available"
    assert paper.citation_count == 0
    assert paper.authors == []


def test_missing_title_is_passed_through_as_none() -> None:
    raw = s2_paper()
    del raw["title"]

    paper = normalize_paper("semantic_scholar", raw)
    assert paper.title is None


def test_paper_serializes_with_camel_case_keys() -> None:
    data = normalize_paper("semantic_scholar", s2_paper()).model_dump(by_alias=True)
    assert "citationCount" in data
    assert "citation_count" not in data


def test_arxiv_entry_maps_fields() -> None:
    entry = arxiv_entry(
        title="Scaling Laws\n  for Neural Language Models",
        authors=["Jared Kaplan", "Sam McCandlish"],
        published=utc(2020, 1, 23),
        entry_id="http://arxiv.org/abs/2001.08361v1",
    )

    paper = normalize_paper("arxiv", entry)

    assert paper.title == "Scaling Laws for Neural Language Models"
    assert paper.authors == ["Jared Kaplan", "Sam McCandlish"]
    assert paper.year == 2020
    assert paper.url == "http://arxiv.org/abs/2001.08361v1"
    assert paper.venue == "arXiv"
    assert paper.citation_count is None


def test_semantic_scholar_blank_abstract_uses_placeholder() -> None:
    paper = normalize_paper("semantic_scholar", s2_paper(abstract="   \n "))
    assert paper.abstract == "Abstract not available"


def test_arxiv_empty_summary_uses_placeholder() -> None:
    entry = arxiv_entry("T", ["A"], utc(2021), summary="")
    assert normalize_paper("arxiv", entry).abstract == "Abstract not available"


def test_unknown_provider_rejected() -> None:
    with pytest.raises(ValueError):
        normalize_paper("openalex", {})


def test_researcher_recent_papers_sorted_and_capped() -> None:
    raw = {
        "name": "Yoshua Bengio",
        "affiliations": ["Mila"],
        "paperCount": 900,
        "citationCount": 500000,
        "papers": [
            {"title": "p2015", "year": 2015},
            {"title": "p2020a", "year": 2020},
            {"title": "pnone", "year": None},
            {"title": "p2020b", "year": 2020},
            {"title": "p2018", "year": 2018},
            {"title": "p2022", "year": 2022},
            {"title": "p2010", "year": 2010},
        ],
    }

    researcher = normalize_researcher(raw)

    assert [p.title for p in researcher.recent_papers] == [
        "p2022", "p2020a", "p2020b", "p2018", "p2015",
    ]
    assert researcher.affiliations == ["Mila"]
    assert researcher.paper_count == 900


def test_researcher_defaults() -> None:
    researcher = normalize_researcher({"name": "Nobody"})
    assert researcher.affiliations == []
    assert researcher.paper_count == 0
    assert researcher.citation_count == 0
    assert researcher.recent_papers == []


def test_arxiv_author_seen_in_three_entries_is_merged() -> None:
    entries = [
        arxiv_entry("Old", ["Geoffrey Hinton", "Other Person"], utc(2012)),
        arxiv_entry("Newest", ["Geoffrey Hinton"], utc(2023)),
        arxiv_entry("Middle", ["Someone Else", "Geoffrey Hinton"], utc(2017)),
    ]

    researchers = aggregate_arxiv_authors(entries, "hinton")

    assert len(researchers) == 1
    hinton = researchers[0]
    assert hinton.name == "Geoffrey Hinton"
    assert hinton.paper_count == 3
    assert [p.title for p in hinton.recent_papers] == ["Newest", "Middle", "Old"]
    assert hinton.affiliations is None
    assert hinton.citation_count is None


def test_arxiv_author_recent_papers_capped_at_five() -> None:
    entries = [arxiv_entry(f"P{y}", ["Ada Lovelace"], utc(y)) for y in range(2010, 2018)]

    [ada] = aggregate_arxiv_authors(entries, "ada")

    assert ada.paper_count == 8
    assert [p.year for p in ada.recent_papers] == [2017, 2016, 2015, 2014, 2013]


def test_arxiv_authors_filtered_by_query_case_insensitive() -> None:
    entries = [arxiv_entry("X", ["Yann LeCun", "Leon Bottou"], utc(2019))]

    names = [r.name for r in aggregate_arxiv_authors(entries, "LECUN")]
    assert names == ["Yann LeCun"]
