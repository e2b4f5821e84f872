"""
Entity models shared by the ranking algorithms.

Articles arrive from the application as plain dicts (camelCase keys, tags as
join-table rows). They are normalized once into these models at the boundary;
the scorers only read them and return new decorated copies.

Contains:
- Tag, Article: validated article view (pydantic)
- RecommendedArticle, TrendingArticle: decorated outputs
- Document, ScoredDocument, SearchResult: BM25 search view (dataclasses)
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Tag(BaseModel):
    """Article tag. `id` is used for identity, `name` for display and grouping."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    slug: Optional[str] = None


class Article(BaseModel):
    """
    Read-only article view consumed by all three scorers.

    Only the fields a given scorer needs must be populated:
    - BM25 search: title, subtitle, sub_content, content, tags
    - Recommendations: tags, engagement counters, created_at
    - Trending: engagement counters, created_at, author_verified, quality_score

    Unknown fields are preserved so decorated copies keep every original field.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str
    title: str = ""
    subtitle: Optional[str] = None
    content: str = ""
    sub_content: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)

    likes_count: Union[int, float] = 0
    comments_count: Union[int, float] = 0
    read_count: Union[int, float] = 0

    # None is aged as "just created"
    created_at: Optional[datetime] = None

    author_verified: Optional[bool] = None
    quality_score: Optional[float] = None

    @field_validator("tags", mode="before")
    @classmethod
    def unwrap_join_rows(cls, value: Any) -> Any:
        """Accept join-table rows ({"tag": {...}}) as well as plain tags."""
        if value is None:
            return []
        return [
            item["tag"] if isinstance(item, dict) and "tag" in item else item
            for item in value
        ]

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def tag_ids(self) -> List[str]:
        return [tag.id for tag in self.tags]

    @property
    def tag_names(self) -> List[str]:
        return [tag.name for tag in self.tags]

    def has_tag(self, tag_id: str) -> bool:
        return any(tag.id == tag_id for tag in self.tags)


class RecommendedArticle(Article):
    """Article decorated with its content similarity to a reference article."""

    similarity_score: float
    shared_tags: List[str] = Field(default_factory=list)


class TrendingArticle(Article):
    """Article decorated with its hot score and the components behind it."""

    hot_score: float
    engagement_score: float
    time_decay: float


ArticleLike = Union[Dict[str, Any], Article]
DecoratedT = TypeVar("DecoratedT", bound=Article)


def ensure_article(item: ArticleLike) -> Article:
    """Convert a dict to an Article model; Article instances pass through."""
    return item if isinstance(item, Article) else Article.model_validate(item)


def ensure_articles(items: List[ArticleLike]) -> List[Article]:
    """Convert a list of dicts or Articles to Article models for the scorers."""
    return [ensure_article(item) for item in items]


def decorate(model: Type[DecoratedT], article: Article, **scores: Any) -> DecoratedT:
    """Build a new decorated record: all original fields plus computed scores."""
    return model.model_validate({**article.model_dump(), **scores})


@dataclass
class Document:
    """Indexable text view of an article used by the BM25 scorer."""
    id: str
    text: str
    title: Optional[str] = None
    subtitle: Optional[str] = None
    tags: Optional[List[str]] = None


@dataclass
class ScoredDocument(Document):
    """Document with its BM25 relevance score"""
    score: float = 0.0


@dataclass
class SearchResult:
    """Original article re-associated with its BM25 score"""
    article: Any
    score: float
