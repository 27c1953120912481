"""Perspective comment analyzer requester."""

from collections.abc import Iterable, Sequence
from typing import Any

from perspective.analysis.base import BaseRequester
from perspective.analysis.catalog import Model, require_model, to_wire_name
from perspective.analysis.client_base import BaseAnalysisClient
from perspective.analysis.models import AnalysisResult
from perspective.analysis.validator import validate_document
from perspective.logging.logger import Log


class Requester(BaseRequester):
    """Scores comments with a remembered list of models.

    Models come from the constructor or ``add_model``. Each ``analyze`` call
    is a single request: no retries, batching or caching.
    """

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        models: Iterable[Model] = (),
        languages: Sequence[str] = ("en",),
    ) -> None:
        self._client = client
        self._models: list[Model] = []
        self._languages = list(languages)
        for model in models:
            self.add_model(model)

    @property
    def models(self) -> tuple[Model, ...]:
        return tuple(self._models)

    def add_model(self, model: Model) -> None:
        """Request ``model`` on subsequent ``analyze`` calls."""
        self._models.append(require_model(model))

    def clear_models(self) -> None:
        self._models.clear()

    def build_request(self, body: str) -> dict[str, Any]:
        """Build the analyze request body for ``body``."""
        return {
            "comment": {"text": body},
            "languages": list(self._languages),
            "requestedAttributes": {to_wire_name(model): {} for model in self._models},
        }

    async def analyze(self, body: str) -> AnalysisResult:
        models = self.models
        if not models:
            Log.warning("Analyzing with no models requested")
        request = self.build_request(body)
        Log.debug(
            f"Analyzing {len(body)} chars with models "
            f"{list(request['requestedAttributes'])}"
        )

        document = validate_document(await self._client.analyze_comment(request))

        result = AnalysisResult(body=body, models=models, document=document)
        Log.info(f"Analysis complete: {len(models)} models requested")
        return result
