"""
Process-wide, read-only services shared by request handlers.
"""

from fastapi import Request
from pydantic import BaseModel

from app.core.summarizer import TranscriptSummarizer
from app.core.transcript_fetcher import TranscriptFetcher
from app.models.schemas import SummaryConfig


class ServiceContext(BaseModel):
    """Clients and settings built once at startup and never mutated."""
    fetcher: TranscriptFetcher
    summarizer: TranscriptSummarizer
    summary_config: SummaryConfig = SummaryConfig()

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @property
    def uses_proxy(self) -> bool:
        return self.fetcher.uses_proxy

    @classmethod
    def from_config(cls, config) -> "ServiceContext":
        """Build the context from an application config class."""
        return cls(
            fetcher=TranscriptFetcher.from_settings(
                proxy_url=config.PROXY_URL,
                language=config.TRANSCRIPT_LANGUAGE,
            ),
            summarizer=TranscriptSummarizer(api_key=config.GEMINI_KEY),
            summary_config=SummaryConfig(
                model=config.DEFAULT_SUMMARY_MODEL,
                temperature=config.SUMMARY_TEMPERATURE,
                max_tokens=config.SUMMARY_MAX_TOKENS,
            ),
        )


def get_service_context(request: Request) -> ServiceContext:
    """
    Get the service context of the running application.

    This is a dependency that will be used in FastAPI route functions.
    """
    context = request.app.state.context
    if context is None:
        raise RuntimeError("Service context is not initialized")
    return context
