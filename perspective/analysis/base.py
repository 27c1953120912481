from abc import ABC, abstractmethod

from perspective.analysis.models import AnalysisResult


class BaseRequester(ABC):
    """Contract for all comment analysis requesters."""

    @abstractmethod
    async def analyze(self, body: str) -> AnalysisResult:
        """Score a comment with the configured models.

        Args:
            body: The comment text, sent as-is.

        Returns:
            AnalysisResult holding the body, the requested models and the
            response document.

        Raises:
            AnalysisError: on any transport or response failure.
        """
