from collections.abc import Mapping
from typing import ClassVar

from perspective.analysis.catalog import Model, require_model
from perspective.analysis.models import AnalysisResult
from perspective.logging.logger import Log


class ThresholdFilter:
    """Decides whether an AnalysisResult should be filtered.

    Each model may carry a threshold; a model triggers when its score is at
    or above its threshold. Models without a threshold read as ``1.0``.

    Threshold state is not synchronized. Callers sharing one filter between
    threads must serialize writes themselves.
    """

    DEFAULT_THRESHOLD: ClassVar[float] = 1.0

    def __init__(self, thresholds: Mapping[Model, float] | None = None) -> None:
        self._thresholds: dict[Model, float] = {}
        self._last_filter_reason: Model | None = None
        for model, value in (thresholds or {}).items():
            self.set_threshold(model, value)

    @property
    def last_filter_reason(self) -> Model | None:
        """Model with the highest triggering score in the last filtered result.

        ``None`` until an evaluation first triggers. Evaluations that do not
        trigger leave it untouched.
        """
        return self._last_filter_reason

    @property
    def thresholds(self) -> dict[Model, float]:
        return dict(self._thresholds)

    def set_threshold(self, model: Model, value: float) -> None:
        """Set the threshold for ``model``, replacing any previous value."""
        self._thresholds[require_model(model)] = float(value)

    def clear_threshold(self, model: Model) -> None:
        self._thresholds.pop(require_model(model), None)

    def clear_all(self) -> None:
        self._thresholds.clear()

    def threshold_of(self, model: Model) -> float:
        return self._thresholds.get(require_model(model), self.DEFAULT_THRESHOLD)

    def should_filter(self, result: AnalysisResult) -> bool:
        """Return True if any thresholded model scores at or above its threshold.

        Models are visited in catalog order and a later model replaces the
        current reason on an equal score, so ties go to the model declared
        last in ``Model``.
        """
        reason: Model | None = None
        max_score = 0.0
        for model in Model:
            threshold = self._thresholds.get(model)
            if threshold is None:
                continue
            score = result.score_of(model)
            if score < threshold:
                continue
            if reason is None or score >= max_score:
                reason = model
                max_score = score

        if reason is None:
            return False
        self._last_filter_reason = reason
        Log.debug(f"Filter triggered by {reason.value} (score {max_score})")
        return True
