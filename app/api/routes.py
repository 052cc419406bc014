"""
API routes for the YouTube transcript summarizer application.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.api.schems import ErrorResponse, SummaryResponse
from app.core.context import ServiceContext, get_service_context
from app.core.transcript_fetcher import join_transcript_text
from app.utils.error_handling import error_response_for, log_error_context
from app.utils.logger import logging

router = APIRouter(prefix="/api", tags=["transcript"])


def _error(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.get(
    "/transcript",
    response_model=SummaryResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def summarize_transcript(
    video_id: Optional[str] = Query(None, alias="videoId", description="YouTube video ID"),
    context: ServiceContext = Depends(get_service_context),
):
    """
    Fetch the caption track of a video and summarize it.

    - Returns the Gemini summary together with the plain transcript text
    - Each request is independent; nothing is cached
    """
    if not video_id:
        return _error(400, ErrorResponse(error="Video ID is required"))

    try:
        logging.info(f"Fetching transcript for video: {video_id}{' using proxy' if context.uses_proxy else ''}")

        transcript = await run_in_threadpool(context.fetcher.fetch_transcript, video_id)
        if not transcript:
            return _error(404, ErrorResponse(error="No transcript available"))

        transcript_text = join_transcript_text(transcript)

        summary = await run_in_threadpool(
            context.summarizer.summarize, transcript_text, context.summary_config
        )

        return SummaryResponse(summary=summary, transcript=transcript_text)

    except Exception as e:
        log_error_context(video_id, e)
        status_code, body = error_response_for(e)
        return _error(status_code, body)
