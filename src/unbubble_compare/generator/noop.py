"""Generator stand-in for heuristic-only deployments."""

from unbubble_compare.data import Usage
from unbubble_compare.errors import UnconfiguredError


class NoOpGenerator:
    """Generator that is never configured.

    Every comparison served through it takes the heuristic path with the
    ``api-key-missing`` reason, and no network call is ever attempted. This
    is useful for offline use and for deployments without a Claude key.
    """

    @property
    def configured(self) -> bool:
        return False

    async def generate(self, prompt: str) -> tuple[str, Usage]:
        """Always raises ``UnconfiguredError``.

        Args:
            prompt: Ignored.
        """
        raise UnconfiguredError("no remote generator configured")
