"""Pydantic wire schemas for article and topic payloads.

These validate untrusted JSON (request bodies, CLI input files, generator
output) and convert it into the frozen dataclass models.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from unbubble_compare.data.models import Article, Leaning, SubTopic, Topic


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ArticlePayload(_CamelModel):
    """An article as sent by clients (``keyFacts``, ``subTopicName``).

    ``summary`` must hold at least one point. ``keyFacts`` and
    ``subTopicName`` may be absent or null and are read as empty.
    """

    id: str
    title: str
    source: str
    leaning: Leaning
    summary: list[str] = Field(min_length=1)
    key_facts: list[str] = Field(default_factory=list)
    sub_topic_name: str = ""
    url: str | None = None

    @field_validator("key_facts", mode="before")
    @classmethod
    def null_key_facts_are_empty(cls, v: object) -> object:
        return [] if v is None else v

    @field_validator("sub_topic_name", mode="before")
    @classmethod
    def null_sub_topic_is_empty(cls, v: object) -> object:
        return "" if v is None else v

    def to_article(self, sub_topic_name: str | None = None) -> Article:
        return Article(
            id=self.id,
            title=self.title,
            source=self.source,
            leaning=self.leaning,
            summary=tuple(self.summary),
            key_facts=tuple(self.key_facts),
            sub_topic_name=sub_topic_name if sub_topic_name is not None else self.sub_topic_name,
            url=self.url,
        )


class ComparisonRequest(_CamelModel):
    """Body of the comparison endpoints and of CLI input files."""

    articles: list[ArticlePayload]

    def to_articles(self) -> list[Article]:
        return [a.to_article() for a in self.articles]


class SubTopicPayload(_CamelModel):
    id: str
    name: str
    description: str = ""
    articles: list[ArticlePayload] = Field(default_factory=list)

    def to_sub_topic(self) -> SubTopic:
        return SubTopic(
            id=self.id,
            name=self.name,
            description=self.description,
            articles=tuple(a.to_article(sub_topic_name=self.name) for a in self.articles),
        )


class TopicPayload(_CamelModel):
    """A generated topic; must hold at least one sub-topic."""

    id: str
    name: str
    description: str = ""
    sub_topics: list[SubTopicPayload] = Field(min_length=1)

    def to_topic(self) -> Topic:
        return Topic(
            id=self.id,
            name=self.name,
            description=self.description,
            sub_topics=tuple(s.to_sub_topic() for s in self.sub_topics),
        )


class TopicRequest(BaseModel):
    """Body of the topic endpoint."""

    query: str = Field(min_length=1)

    model_config = {"frozen": True, "str_strip_whitespace": True}
