from typing import Protocol

from unbubble_compare.data import Usage


class TextGenerator(Protocol):
    """Interface for the remote text generator: prompt in, raw text out."""

    @property
    def configured(self) -> bool:
        """Whether a usable credential is present. Checked before any network I/O."""
        ...

    async def generate(self, prompt: str) -> tuple[str, Usage]:
        """Generate text for ``prompt``.

        Raises:
            RemoteAnalysisError: A typed failure (timeout, rate limit, auth, ...).
        """
        ...
