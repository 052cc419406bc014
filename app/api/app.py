"""
FastAPI application for the YouTube transcript summarizer.
"""

import time
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import config
from app.api.routes import router
from app.core.context import ServiceContext
from app.utils.logger import logging


def create_app(context: Optional[ServiceContext] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        context: Prebuilt service context. When None, one is built from the
            environment configuration on startup.
    """
    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="An API for fetching and summarizing YouTube video transcripts",
    )
    app.state.context = context

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Initialize components on application startup."""
        if app.state.context is None:
            config.initialize()
            app.state.context = ServiceContext.from_config(config)
        logging.info(
            f"{config.APP_NAME} v{config.APP_VERSION} ready "
            f"(proxy {'enabled' if app.state.context.uses_proxy else 'disabled'})"
        )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.error(f"Unhandled error on {request.url.path}: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": str(exc)},
        )

    # Include API router
    app.include_router(router)

    # Root
    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "description": "YouTube Transcript Summarizer API",
        }

    return app


app = create_app()
