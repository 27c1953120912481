from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from perspective.analysis.catalog import Model, require_model, to_wire_name
from perspective.analysis.validator import (
    ATTRIBUTE_SCORES,
    SCORE_VALUE,
    SUMMARY_SCORE,
    validate_document,
)

DEFAULT_SCORE = 0.0
REDACTED_BODY = "REDACTED"


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_freeze(item) for item in value)
    return value


class _ModelScore:
    """Read-only attribute returning ``score_of`` for one fixed model."""

    def __init__(self, model: Model) -> None:
        self._model = model

    def __get__(self, instance: "AnalysisResult | None", owner: type) -> Any:
        if instance is None:
            return self
        return instance.score_of(self._model)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one Perspective analysis request.

    ``document`` is the decoded response body. It is validated and frozen on
    construction (AnalysisValidationError if malformed), and keys the client
    does not interpret are kept as-is. Instances are immutable and safe to
    share between threads.
    """

    body: str
    models: tuple[Model, ...]
    document: Mapping[str, Any] = field(default_factory=dict, repr=False, hash=False)

    toxicity = _ModelScore(Model.TOXICITY)
    severe_toxicity = _ModelScore(Model.SEVERE_TOXICITY)
    toxicity_fast = _ModelScore(Model.TOXICITY_FAST)
    attack_on_author = _ModelScore(Model.ATTACK_ON_AUTHOR)
    attack_on_commenter = _ModelScore(Model.ATTACK_ON_COMMENTER)
    incoherent = _ModelScore(Model.INCOHERENT)
    inflammatory = _ModelScore(Model.INFLAMMATORY)
    likely_to_reject = _ModelScore(Model.LIKELY_TO_REJECT)
    obscene = _ModelScore(Model.OBSCENE)
    spam = _ModelScore(Model.SPAM)
    unsubstantial = _ModelScore(Model.UNSUBSTANTIAL)

    def __post_init__(self) -> None:
        object.__setattr__(self, "models", tuple(require_model(m) for m in self.models))
        object.__setattr__(self, "document", _freeze(validate_document(self.document)))

    def score_of(self, model: Model) -> float:
        """Return the summary score for ``model``.

        Models absent from the response (not requested, or dropped by the
        service) score ``0.0``.
        """
        wire_name = to_wire_name(model)
        entry = (self.document.get(ATTRIBUTE_SCORES) or {}).get(wire_name)
        if entry is None:
            return DEFAULT_SCORE
        return float(entry[SUMMARY_SCORE][SCORE_VALUE])

    def scores(self) -> dict[Model, float]:
        """Return the score of every requested model, in catalog order."""
        return {model: self.score_of(model) for model in Model if model in self.models}

    def describe(self, redact_body: bool = False) -> str:
        """Render a multi-line report of the body and each requested score.

        With ``redact_body`` the submitted text is replaced by ``REDACTED`` so
        the report can be logged or displayed safely.
        """
        lines = [f"Body: {REDACTED_BODY if redact_body else self.body}"]
        lines.extend(
            f"{to_wire_name(model)}: {score}" for model, score in self.scores().items()
        )
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.describe(redact_body=False)
