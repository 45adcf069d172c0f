from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class SummarizeRequest(BaseModel):
    url: HttpUrl


class SummaryResult(BaseModel):
    """Canonical summary payload returned by version 1 of the API."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    english_summary: str = Field(alias="englishSummary")
    urdu_summary: str = Field(alias="urduSummary")
    reading_time: str | None = Field(default=None, alias="readingTime")
    word_count: str | None = Field(default=None, alias="wordCount")
    key_points: list[str] = Field(default_factory=list, alias="keyPoints")


class SummarizeResponse(BaseModel):
    summary: SummaryResult
