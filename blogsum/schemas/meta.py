from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"


class ReadyResponse(BaseModel):
    """Readiness plus the completion backend the summaries are produced with."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok"] = "ok"
    completion_model: str = Field(alias="completionModel")


class StatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok"] = "ok"
    version: str
    api_version: str = Field(alias="apiVersion")
    environment: str
    max_content_chars: int = Field(alias="maxContentChars")
    uptime_seconds: float = Field(alias="uptimeSeconds")
