"""FastAPI application exposing the comparison and topic endpoints.

Usage:
    uvicorn unbubble_compare.api.app:app --port 8000
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from unbubble_compare.config import (
    CompareConfig,
    create_from_config,
    create_topic_generator,
    get_default_config_path,
    load_config,
)
from unbubble_compare.data import (
    ComparisonRequest,
    FallbackAnalysis,
    FallbackReason,
    TopicRequest,
)
from unbubble_compare.errors import BadRequestError
from unbubble_compare.pipeline import ComparisonPipeline
from unbubble_compare.topics import TopicGenerator

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = 60

COMPARISON_BAD_REQUEST = "Invalid request. Please provide at least 2 articles to compare."
TOPIC_BAD_REQUEST = "Invalid request. Please provide a valid query string."
UNEXPECTED_ERROR = "An unexpected error occurred while processing your request."


def fallback_headers(reason: FallbackReason) -> dict[str, str]:
    """Response headers announcing which failure triggered the heuristic result."""
    headers = {"X-Fallback-Reason": reason.value}
    if reason is FallbackReason.RATE_LIMIT:
        headers["X-Rate-Limited"] = "true"
        headers["Retry-After"] = str(RETRY_AFTER_SECONDS)
    elif reason is FallbackReason.TIMEOUT:
        headers["X-Timeout"] = "true"
        headers["Retry-After"] = str(RETRY_AFTER_SECONDS)
    return headers


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _read_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as e:
        raise BadRequestError("request body is not valid JSON") from e


async def _read_comparison(request: Request) -> ComparisonRequest:
    body = await _read_body(request)
    try:
        parsed = ComparisonRequest.model_validate(body)
    except ValidationError as e:
        raise BadRequestError(f"invalid articles: {e.error_count()} validation errors") from e
    if len(parsed.articles) < 2:
        raise BadRequestError("fewer than 2 articles")
    return parsed


def _load_default_config() -> CompareConfig:
    path = get_default_config_path()
    if path.exists():
        return load_config(path)
    return CompareConfig()


def create_app(
    config: CompareConfig | None = None,
    *,
    pipeline: ComparisonPipeline | None = None,
    topic_generator: TopicGenerator | None = None,
) -> FastAPI:
    """Build the API.

    Args:
        config: Root configuration; defaults to ``configs/default.yaml`` when
            present, otherwise built-in defaults.
        pipeline: Pre-built comparison pipeline (overrides the config's).
        topic_generator: Pre-built topic generator (overrides the config's).
    """
    if config is None:
        config = _load_default_config()
    if pipeline is None:
        pipeline, _run_logger = create_from_config(config)
    if topic_generator is None:
        topic_generator = create_topic_generator(config.comparison, pipeline.generator)

    app = FastAPI(
        title="Unbubble Compare API",
        description="Compare how outlets across the political spectrum cover a story",
        version="0.1.0",
    )
    app.state.pipeline = pipeline
    app.state.topic_generator = topic_generator

    @app.post("/api/analyze-comparison")
    async def analyze_comparison(request: Request) -> JSONResponse:
        try:
            parsed = await _read_comparison(request)
            outcome = await pipeline.run(parsed.to_articles())
        except BadRequestError as e:
            logger.info(f"Rejected comparison request: {e}")
            return _error(COMPARISON_BAD_REQUEST, 400)
        except Exception:
            logger.exception("Comparison request failed")
            return _error(UNEXPECTED_ERROR, 500)

        headers = None
        if isinstance(outcome, FallbackAnalysis):
            headers = fallback_headers(outcome.reason)
        return JSONResponse(outcome.result.to_dict(), headers=headers)

    @app.post("/api/analyze-comparison/detailed")
    async def analyze_comparison_detailed(request: Request) -> JSONResponse:
        try:
            parsed = await _read_comparison(request)
        except BadRequestError as e:
            logger.info(f"Rejected detailed comparison request: {e}")
            return _error(COMPARISON_BAD_REQUEST, 400)

        articles = parsed.to_articles()
        heuristic = pipeline.heuristic
        try:
            analysis = heuristic.analyze(articles)
            perspectives = [
                {"articleId": a.id, **heuristic.explain(a, articles).to_dict()} for a in articles
            ]
        except Exception:
            logger.exception("Detailed comparison failed")
            return _error(UNEXPECTED_ERROR, 500)
        return JSONResponse({**analysis.to_dict(), "perspectives": perspectives})

    @app.post("/api/generate-topic")
    async def generate_topic(request: Request) -> JSONResponse:
        try:
            body = await _read_body(request)
            parsed = TopicRequest.model_validate(body)
        except (BadRequestError, ValidationError) as e:
            logger.info(f"Rejected topic request: {e}")
            return _error(TOPIC_BAD_REQUEST, 400)

        topic = await topic_generator.generate(parsed.query)
        return JSONResponse(topic.to_dict())

    return app


app = create_app()
