from abc import ABC, abstractmethod
from typing import Any


class BaseAnalysisClient(ABC):
    """Contract for transports that deliver an analyze request to Perspective."""

    @abstractmethod
    async def analyze_comment(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Send the request body and return the decoded response object."""
