from collections.abc import Callable

import pytest

from perspective.analysis.catalog import Model
from perspective.analysis.models import AnalysisResult


def _score_document(scores: dict[str, float]) -> dict[str, object]:
    return {
        "attributeScores": {
            wire_name: {
                "spanScores": [],
                "summaryScore": {"value": value, "type": "PROBABILITY"},
            }
            for wire_name, value in scores.items()
        },
        "languages": ["en"],
    }


@pytest.fixture()
def make_result() -> Callable[..., AnalysisResult]:
    """Factory for AnalysisResult objects keyed by model."""

    def _make(
        scores: dict[Model, float],
        body: str = "you are wonderful",
        models: list[Model] | None = None,
    ) -> AnalysisResult:
        document = _score_document({model.value: value for model, value in scores.items()})
        return AnalysisResult(
            body=body,
            models=tuple(models if models is not None else scores),
            document=document,
        )

    return _make
