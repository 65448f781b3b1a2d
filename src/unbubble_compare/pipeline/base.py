"""Pipeline protocol for article comparison."""

from typing import Protocol

from unbubble_compare.data import Article, ComparisonOutcome


class Pipeline(Protocol):
    """Interface for article comparison pipelines."""

    async def run(self, articles: list[Article]) -> ComparisonOutcome:
        """Compare a set of articles.

        Args:
            articles: Articles to compare (at least two).

        Returns:
            ``RemoteAnalysis`` when the remote path succeeded, otherwise a
            ``FallbackAnalysis`` carrying the heuristic result and the reason.

        Raises:
            BadRequestError: Fewer than two articles were supplied.
        """
        ...
