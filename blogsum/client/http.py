from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from blogsum.client.classify import map_api_error
from blogsum.client.errors import ClientError, ErrorType, create_error
from blogsum.schemas.summaries import SummaryResult

SUMMARIZE_PATH = "/api/v1/summarize"


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _invalid_response(data: dict[str, Any]) -> ClientError:
    return ClientError(
        create_error(
            ErrorType.SERVER,
            "Invalid response from server. Please try again.",
            {"data": data},
        )
    )


class SummaryApiClient:
    """Async client for the blogsum summarize endpoint."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def summarize(self, url: str) -> SummaryResult:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(SUMMARIZE_PATH, json={"url": url})

        data = _json_body(response)
        if response.is_error:
            raise ClientError(map_api_error(response.status_code, data))

        summary = data.get("summary")
        if not isinstance(summary, dict) or not summary.get("title") or not summary.get("englishSummary"):
            raise _invalid_response(data)
        try:
            return SummaryResult.model_validate(summary)
        except ValidationError as exc:
            raise _invalid_response(data) from exc
