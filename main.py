#!/usr/bin/env python
"""CLI for comparing articles from across the political spectrum."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from unbubble_compare.config import create_from_config, get_default_config_path, load_config
from unbubble_compare.data import Article, ComparisonRequest, FallbackAnalysis
from unbubble_compare.errors import BadRequestError

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    articles: Path
    config: Path
    detailed: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("articles", "config")
    @classmethod
    def file_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"File not found: {v}")
        return v


def load_articles(path: Path) -> list[Article]:
    """Read articles from ``{"articles": [...]}`` or a bare ``[...]`` JSON file."""
    raw = json.loads(path.read_text())
    if isinstance(raw, list):
        raw = {"articles": raw}
    return ComparisonRequest.model_validate(raw).to_articles()


async def run(args: CLIArgs) -> None:
    """Compare the articles with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    pipeline, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )
    articles = load_articles(args.articles)

    logger.info(f"Comparing {len(articles)} articles from {args.articles}")
    logger.info(f"Config: {args.config}")

    if args.detailed:
        heuristic = pipeline.heuristic
        analysis = heuristic.analyze(articles)
        output = {
            **analysis.to_dict(),
            "perspectives": [
                {"articleId": a.id, **heuristic.explain(a, articles).to_dict()} for a in articles
            ],
        }
        print(json.dumps(output, indent=2))
        return

    outcome = await pipeline.run(articles)
    if isinstance(outcome, FallbackAnalysis):
        logger.warning(f"Heuristic fallback used ({outcome.reason}): {outcome.detail}")
    else:
        logger.info("Remote analysis succeeded")
        logger.info(f"Input tokens: {outcome.usage.input_tokens:,}")
        logger.info(f"Output tokens: {outcome.usage.output_tokens:,}")

    print(json.dumps(outcome.result.to_dict(), indent=2))

    if run_logger and run_logger.last_log_path:
        logger.info(f"Run log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Compare how articles from different political perspectives cover a story."
    )
    parser.add_argument(
        "articles",
        type=Path,
        help='JSON file holding {"articles": [...]} or a list of articles',
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--detailed",
        action="store_true",
        default=False,
        help="Print the structured heuristic analysis instead of the flat comparison",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable per-run JSON logging",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            articles=ns.articles,
            config=config_path,
            detailed=ns.detailed,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except (BadRequestError, ValidationError, json.JSONDecodeError) as e:
        logger.error(f"Invalid articles file: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
