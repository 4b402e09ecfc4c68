from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ABSTRACT_PLACEHOLDER = "Abstract not available"
URL_PLACEHOLDER = "URL not available"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class Paper(_CamelModel):
    """
    Paper 数据模型
    - Semantic Scholar / arXiv -> 前端展示 的统一结构
    """

    # None when the provider returned no title
    title: Optional[str] = None
    abstract: str = ABSTRACT_PLACEHOLDER
    authors: List[str] = Field(default_factory=list)
    year: Optional[int] = None
    citation_count: Optional[int] = 0
    url: str = URL_PLACEHOLDER
    venue: Optional[str] = None


class RecentPaper(_CamelModel):
    title: Optional[str] = None
    year: Optional[int] = None


class Researcher(_CamelModel):
    name: str
    affiliations: Optional[List[str]] = None
    paper_count: int = 0
    citation_count: Optional[int] = None
    homepage: Optional[str] = None
    recent_papers: List[RecentPaper] = Field(default_factory=list)
