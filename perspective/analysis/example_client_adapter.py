"""Example analysis client adapter.

Use this module as a reference when implementing new transports.
Implement BaseAnalysisClient and register the provider in RequesterFactory.
"""

from typing import Any, ClassVar

from perspective.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that scores every requested model with a fixed value.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_SCORE: ClassVar[float] = 0.0

    def __init__(self, score: float | None = None) -> None:
        self._score = self.DEFAULT_SCORE if score is None else score

    async def analyze_comment(self, payload: dict[str, Any]) -> dict[str, Any]:
        requested = payload.get("requestedAttributes", {})
        return {
            "attributeScores": {
                wire_name: {
                    "summaryScore": {"value": self._score, "type": "PROBABILITY"},
                }
                for wire_name in requested
            },
            "languages": list(payload.get("languages", [])),
        }
