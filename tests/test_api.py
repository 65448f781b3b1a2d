"""Tests for the HTTP endpoints."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from unbubble_compare.api import create_app, fallback_headers
from unbubble_compare.api.app import COMPARISON_BAD_REQUEST, TOPIC_BAD_REQUEST, UNEXPECTED_ERROR
from unbubble_compare.config import CompareConfig, ComparisonConfig, NoOpGeneratorConfig
from unbubble_compare.data import FallbackReason, Usage
from unbubble_compare.errors import RateLimitedError
from unbubble_compare.generator import NoOpGenerator
from unbubble_compare.pipeline import ComparisonPipeline
from unbubble_compare.topics import TopicGenerator

VALID_OUTPUT = (
    '{"sharedFacts": ["Both cite 10%"], "commonThemes": [], "differences": [], '
    '"dataPoints": ["10%"]}'
)

COMPARE_URL = "/api/analyze-comparison"
DETAILED_URL = "/api/analyze-comparison/detailed"
TOPIC_URL = "/api/generate-topic"


def _client_for(generator: MagicMock, timeout_seconds: float = 55.0) -> TestClient:
    pipeline = ComparisonPipeline(generator, timeout_seconds=timeout_seconds)
    app = create_app(
        CompareConfig(),
        pipeline=pipeline,
        topic_generator=TopicGenerator(NoOpGenerator()),
    )
    return TestClient(app)


def _generator() -> MagicMock:
    gen = MagicMock()
    gen.configured = True
    gen.generate = AsyncMock(return_value=(VALID_OUTPUT, Usage()))
    return gen


@pytest.fixture
def client() -> TestClient:
    """Client for an app without a remote generator."""
    config = CompareConfig(comparison=ComparisonConfig(generator=NoOpGeneratorConfig()))
    return TestClient(create_app(config))


class TestAnalyzeComparison:
    """Tests for POST /api/analyze-comparison."""

    def test_fallback_when_unconfigured(
        self, client: TestClient, article_payloads: list[dict[str, object]]
    ) -> None:
        response = client.post(COMPARE_URL, json={"articles": article_payloads})

        assert response.status_code == 200
        assert response.headers["X-Fallback-Reason"] == "api-key-missing"
        assert "X-Rate-Limited" not in response.headers
        body = response.json()
        assert set(body) == {"sharedFacts", "commonThemes", "differences", "dataPoints"}
        assert any("10% increase" in fact for fact in body["sharedFacts"])

    def test_remote_success_has_no_fallback_header(
        self, article_payloads: list[dict[str, object]]
    ) -> None:
        client = _client_for(_generator())

        response = client.post(COMPARE_URL, json={"articles": article_payloads})

        assert response.status_code == 200
        assert "X-Fallback-Reason" not in response.headers
        assert response.json()["sharedFacts"] == ["Both cite 10%"]

    def test_rate_limit_headers(self, article_payloads: list[dict[str, object]]) -> None:
        gen = _generator()
        gen.generate = AsyncMock(side_effect=RateLimitedError("quota"))
        client = _client_for(gen)

        response = client.post(COMPARE_URL, json={"articles": article_payloads})

        assert response.status_code == 200
        assert response.headers["X-Fallback-Reason"] == "rate-limit"
        assert response.headers["X-Rate-Limited"] == "true"
        assert response.headers["Retry-After"] == "60"

    def test_timeout_headers(self, article_payloads: list[dict[str, object]]) -> None:
        async def slow(prompt: str) -> tuple[str, Usage]:
            await asyncio.sleep(10)
            return (VALID_OUTPUT, Usage())

        gen = _generator()
        gen.generate = AsyncMock(side_effect=slow)
        client = _client_for(gen, timeout_seconds=0.05)

        response = client.post(COMPARE_URL, json={"articles": article_payloads})

        assert response.status_code == 200
        assert response.headers["X-Fallback-Reason"] == "timeout"
        assert response.headers["X-Timeout"] == "true"
        assert response.headers["Retry-After"] == "60"

    def test_single_article_rejected(
        self, client: TestClient, article_payloads: list[dict[str, object]]
    ) -> None:
        response = client.post(COMPARE_URL, json={"articles": article_payloads[:1]})
        assert response.status_code == 400
        assert response.json() == {"error": COMPARISON_BAD_REQUEST}

    def test_missing_articles_rejected(self, client: TestClient) -> None:
        response = client.post(COMPARE_URL, json={})
        assert response.status_code == 400

    def test_malformed_json_rejected(self, client: TestClient) -> None:
        response = client.post(
            COMPARE_URL, content=b"{not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        assert "error" in response.json()

    def test_invalid_leaning_rejected(
        self, client: TestClient, article_payloads: list[dict[str, object]]
    ) -> None:
        payloads = [dict(article_payloads[0], leaning="sideways"), article_payloads[1]]
        response = client.post(COMPARE_URL, json={"articles": payloads})
        assert response.status_code == 400

    def test_null_key_facts_accepted(
        self, client: TestClient, article_payloads: list[dict[str, object]]
    ) -> None:
        payloads = [
            dict(article_payloads[0], keyFacts=None, subTopicName=None),
            article_payloads[1],
        ]
        response = client.post(COMPARE_URL, json={"articles": payloads})

        assert response.status_code == 200
        assert response.headers["X-Fallback-Reason"] == "api-key-missing"

    def test_empty_summary_rejected(
        self, client: TestClient, article_payloads: list[dict[str, object]]
    ) -> None:
        payloads = [dict(article_payloads[0], summary=[]), article_payloads[1]]
        response = client.post(COMPARE_URL, json={"articles": payloads})

        assert response.status_code == 400
        assert response.json() == {"error": COMPARISON_BAD_REQUEST}

    def test_unexpected_failure_is_500(self, article_payloads: list[dict[str, object]]) -> None:
        pipeline = MagicMock()
        pipeline.run = AsyncMock(side_effect=RuntimeError("kaboom"))
        app = create_app(
            CompareConfig(), pipeline=pipeline, topic_generator=TopicGenerator(NoOpGenerator())
        )

        response = TestClient(app).post(COMPARE_URL, json={"articles": article_payloads})

        assert response.status_code == 500
        assert response.json() == {"error": UNEXPECTED_ERROR}


class TestDetailedComparison:
    """Tests for POST /api/analyze-comparison/detailed."""

    def test_structured_response(
        self, client: TestClient, article_payloads: list[dict[str, object]]
    ) -> None:
        response = client.post(DETAILED_URL, json={"articles": article_payloads})

        assert response.status_code == 200
        body = response.json()
        assert body["sharedBaseline"][0] == {
            "fact": "10% increase",
            "citedBy": ["Progressive Daily", "Market Journal"],
        }
        assert [e["articleId"] for e in body["evidenceAnalysis"]] == ["left-1", "right-1"]
        assert [p["articleId"] for p in body["perspectives"]] == ["left-1", "right-1"]
        assert "framing" in body["perspectives"][0]

    def test_single_article_rejected(
        self, client: TestClient, article_payloads: list[dict[str, object]]
    ) -> None:
        response = client.post(DETAILED_URL, json={"articles": article_payloads[:1]})
        assert response.status_code == 400


class TestGenerateTopic:
    """Tests for POST /api/generate-topic."""

    def test_mock_topic_when_unconfigured(self, client: TestClient) -> None:
        response = client.post(TOPIC_URL, json={"query": "  Nuclear Energy  "})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "nuclear-energy"
        assert body["name"] == "Nuclear Energy"
        assert len(body["subTopics"]) == 2
        assert body["subTopics"][0]["articles"][0]["id"] == "nuclear-energy-article-1"

    @pytest.mark.parametrize("body", [{"query": "   "}, {"query": ""}, {}, {"query": 42}])
    def test_invalid_query_rejected(self, client: TestClient, body: dict[str, object]) -> None:
        response = client.post(TOPIC_URL, json=body)
        assert response.status_code == 400
        assert response.json() == {"error": TOPIC_BAD_REQUEST}

    def test_malformed_json_rejected(self, client: TestClient) -> None:
        response = client.post(
            TOPIC_URL, content=b"nope", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400


@pytest.mark.parametrize(
    ("reason", "expected"),
    [
        (FallbackReason.API_KEY_MISSING, {"X-Fallback-Reason": "api-key-missing"}),
        (FallbackReason.PARSE_ERROR, {"X-Fallback-Reason": "parse-error"}),
        (FallbackReason.INVALID_STRUCTURE, {"X-Fallback-Reason": "invalid-structure"}),
        (FallbackReason.API_ERROR, {"X-Fallback-Reason": "api-error"}),
        (
            FallbackReason.RATE_LIMIT,
            {"X-Fallback-Reason": "rate-limit", "X-Rate-Limited": "true", "Retry-After": "60"},
        ),
        (
            FallbackReason.TIMEOUT,
            {"X-Fallback-Reason": "timeout", "X-Timeout": "true", "Retry-After": "60"},
        ),
    ],
)
def test_fallback_headers(reason: FallbackReason, expected: dict[str, str]) -> None:
    assert fallback_headers(reason) == expected
