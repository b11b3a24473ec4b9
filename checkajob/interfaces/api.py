"""
interfaces/api.py
──────────────────────────────────────────────────────────────────────────────
HTTP interface for the DIY risk assessor (FastAPI).

Run:
  uvicorn checkajob.interfaces.api:app --reload
  # or via the installed entry-point
  checkajob-api

Endpoints:
  POST {API_PREFIX}/assess   JSON body {description, skillLevel, tags?, postcode?}
                             → 200 with the assessment, for every input
  GET  /health               liveness probe

Missing or malformed fields are replaced with defaults, and an unreadable
body is treated as {}, so the endpoint never answers 4xx for bad input.
"""
from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request

from checkajob.config.log_config import configure_logging
from checkajob.config.settings import get_settings
from checkajob.services.assessor import AssessmentPipeline
from checkajob.services.container import get_pipeline

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Build the pipeline before serving; a broken catalog aborts startup."""
    logger.info("api startup begin")
    pipeline = get_pipeline()
    logger.info("api startup ready | jobs=%d llm=%s",
                len(pipeline.catalog), pipeline.llm_model or "none")
    yield
    logger.info("api shutdown")


def _pipeline() -> AssessmentPipeline:
    return get_pipeline()


async def _read_payload(request: Request) -> Any:
    """Decode the JSON body, treating anything unreadable as an empty object."""
    try:
        return await request.json()
    except (ValueError, RecursionError):
        logger.warning("assess | unreadable JSON body, using defaults")
        return {}


router = APIRouter(prefix=settings.api_prefix)


@router.post("/assess")
async def assess_job(
    request: Request,
    pipeline: AssessmentPipeline = Depends(_pipeline),
) -> dict[str, Any]:
    """Assess a DIY job; always succeeds."""
    payload = await _read_payload(request)
    # The provider call blocks on network I/O; keep it off the event loop.
    assessment = await asyncio.to_thread(pipeline.assess, payload)
    return assessment.to_dict()


app = FastAPI(title="CheckaJob", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and latency for every request."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.exception("http %s %s failed after %.2fms",
                         request.method, request.url.path, duration_ms)
        raise
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info("http %s %s → %d (%.2fms)",
                request.method, request.url.path, response.status_code, duration_ms)
    return response


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(router)


def main() -> None:
    """Entry point for the checkajob-api console script."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
