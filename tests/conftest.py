from datetime import datetime, timezone
from typing import Any, List, Optional

import arxiv
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api import deps
from main import app
from paperpilot.database.db.models import Base


class FakeLLM:
    def __init__(self, reply: Any = "graph neural networks", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    def completion(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


class FakeSearchClient:
    def __init__(
        self,
        provider: str = "semantic_scholar",
        papers: Optional[list] = None,
        authors: Optional[list] = None,
        error: Optional[Exception] = None,
    ):
        self.provider = provider
        self.papers = papers or []
        self.authors = authors or []
        self.error = error
        self.calls: List[tuple] = []

    def search_papers(self, query: str, limit: int = 10):
        self.calls.append(("papers", query, limit))
        if self.error:
            raise self.error
        return list(self.papers)

    def search_authors(self, query: str, limit: int = 10):
        self.calls.append(("authors", query, limit))
        if self.error:
            raise self.error
        return list(self.authors)


def s2_paper(title: str = "Attention Is All You Need", **overrides) -> dict:
    record = {
        "paperId": "204e3073870fae3d05bcbc2f6a8e263d9b72e776",
        "title": title,
        "abstract": "The dominant sequence transduction models...",
        "authors": [{"authorId": "1", "name": "Ashish Vaswani"}, {"authorId": "2", "name": "Noam Shazeer"}],
        "year": 2017,
        "citationCount": 90000,
        "url": "https://www.semanticscholar.org/paper/204e3073870fae3d05bcbc2f6a8e263d9b72e776",
        "venue": "NeurIPS",
    }
    record.update(overrides)
    return record


def arxiv_entry(
    title: str,
    authors: List[str],
    published: datetime,
    entry_id: str = "http://arxiv.org/abs/2401.00001v1",
    summary: str = "We study things.",
) -> arxiv.Result:
    return arxiv.Result(
        entry_id=entry_id,
        published=published,
        updated=published,
        title=title,
        authors=[arxiv.Result.Author(name) for name in authors],
        summary=summary,
    )


def utc(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def fake_search() -> FakeSearchClient:
    return FakeSearchClient(papers=[s2_paper(), s2_paper("BERT", year=2018)])


@pytest.fixture
def client(session_factory, fake_llm, fake_search):
    app.dependency_overrides[deps.get_session_factory] = lambda: session_factory
    app.dependency_overrides[deps.get_llm_service] = lambda: fake_llm
    app.dependency_overrides[deps.get_search_client] = lambda: fake_search
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client: TestClient, email: str = "a@b.com", password: str = "pw12345") -> str:
    resp = client.post(
        "/register",
        json={"email": email, "name": "Ada", "password": password, "expertise": "ML"},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
