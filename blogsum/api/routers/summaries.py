from typing import Annotated

from fastapi import APIRouter, Depends, Response

from blogsum.application.summaries import summarize_blog
from blogsum.core.config import Settings, get_settings
from blogsum.core.constants import API_VERSION
from blogsum.schemas.errors import ErrorResponse
from blogsum.schemas.summaries import SummarizeRequest, SummarizeResponse

router = APIRouter(prefix="/api", tags=["summaries"])

_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Invalid URL or non-HTML content."},
    403: {"model": ErrorResponse, "description": "The blog refused to serve the page."},
    404: {"model": ErrorResponse, "description": "Blog post not found or has no readable text."},
    429: {"model": ErrorResponse, "description": "Rate limited; see retryAfter."},
    500: {"model": ErrorResponse, "description": "Page fetch failed or unexpected server error."},
    502: {"model": ErrorResponse, "description": "Completion service returned an invalid response."},
    503: {"model": ErrorResponse, "description": "Completion service unavailable."},
}


@router.post("/v1/summarize", response_model=SummarizeResponse, responses=_RESPONSES)
@router.post("/summarize", response_model=SummarizeResponse, responses=_RESPONSES)
async def summarize(
    request: SummarizeRequest,
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> SummarizeResponse:
    response.headers["X-Api-Version"] = API_VERSION
    return await summarize_blog(request, settings)
