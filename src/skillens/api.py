"""
FastAPI application exposing the resume analyzer.

Run with ``uvicorn skillens.api:app`` or ``skillens serve``.
"""

import logging

from fastapi import FastAPI, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from skillens.config import AppConfig, load_config
from skillens.models.analysis import AnalysisResult, AnalyzeRequest
from skillens.pipeline.analysis import analyze_document, analyze_text

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or load_config()

    app = FastAPI(title="Skillens Resume Analyzer", version=API_VERSION)
    app.state.config = config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # === Routes ===

    @app.get("/api/health")
    async def health_check():
        return {"status": "healthy", "version": API_VERSION}

    @app.post("/api/analyze", response_model=AnalysisResult)
    def analyze_resume_text(request: AnalyzeRequest) -> AnalysisResult:
        """Score resume text sent as ``{"resumeText": "..."}``."""
        return analyze_text(request.resume_text)

    @app.post("/api/analyze-file", response_model=AnalysisResult)
    async def analyze_resume_file(file: UploadFile = File(...)) -> AnalysisResult:
        """Score an uploaded PDF, DOCX, TXT or MD resume.

        Unreadable or oversized files come back as a zero score with a
        generic suggestion, never as an HTTP error.
        """
        max_bytes = config.upload.max_bytes
        # One byte past the limit is enough to know the upload is too large
        data = await file.read(max_bytes + 1)
        logger.debug("Received %s (%s, %d bytes)", file.filename, file.content_type, len(data))
        return await run_in_threadpool(
            analyze_document,
            data,
            file.filename,
            file.content_type,
            max_bytes=max_bytes,
        )

    return app


app = create_app()
