"""Checks the shape of a decoded Perspective response before it is wrapped."""

from collections.abc import Mapping
from typing import Any

from perspective.analysis.exceptions import AnalysisValidationError

ATTRIBUTE_SCORES = "attributeScores"
SUMMARY_SCORE = "summaryScore"
SCORE_VALUE = "value"


def validate_document(data: Any) -> Mapping[str, Any]:
    """Validate a decoded response document and return it.

    A missing or null ``attributeScores`` is accepted and reads as "no scores".
    Entries for wire names outside the catalog are accepted and ignored.

    Raises:
        AnalysisValidationError: if the score structure is malformed.
    """
    if not isinstance(data, Mapping):
        raise AnalysisValidationError("Response document must be an object")
    scores = data.get(ATTRIBUTE_SCORES)
    if scores is None:
        return data
    if not isinstance(scores, Mapping):
        raise AnalysisValidationError(f"'{ATTRIBUTE_SCORES}' must be an object")
    for wire_name, entry in scores.items():
        _validate_score_entry(wire_name, entry)
    return data


def _validate_score_entry(wire_name: str, entry: Any) -> None:
    if not isinstance(entry, Mapping):
        raise AnalysisValidationError(
            f"Score for {wire_name}: entry must be an object"
        )
    summary = entry.get(SUMMARY_SCORE)
    if not isinstance(summary, Mapping):
        raise AnalysisValidationError(
            f"Score for {wire_name}: '{SUMMARY_SCORE}' must be an object"
        )
    value = summary.get(SCORE_VALUE)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AnalysisValidationError(
            f"Score for {wire_name}: '{SUMMARY_SCORE}.{SCORE_VALUE}' must be a number"
        )
