from perspective.analysis.base import BaseRequester
from perspective.analysis.catalog import from_wire_name
from perspective.analysis.example_client_adapter import ExampleClientAdapter
from perspective.analysis.filter import ThresholdFilter
from perspective.analysis.httpx_client_adapter import HttpxClientAdapter
from perspective.analysis.requester import Requester
from perspective.config.settings import Settings


class RequesterFactory:
    """Creates the configured requester."""

    PROVIDERS = ("example", "perspective")

    @classmethod
    def create(cls, settings: Settings) -> BaseRequester:
        """Create a configured requester from application settings."""
        provider = settings.perspective_provider.lower()
        models = [from_wire_name(name) for name in settings.perspective_models]
        if provider == "example":
            return Requester(
                client=ExampleClientAdapter(),
                models=models,
                languages=settings.perspective_languages,
            )
        if provider != "perspective":
            raise ValueError(
                f"Unknown perspective provider '{provider}'. "
                f"Choose from: {list(cls.PROVIDERS)}"
            )
        api_key = settings.perspective_api_key.strip()
        if not api_key:
            raise ValueError(
                "perspective_api_key is required for perspective_provider=perspective"
            )
        client = HttpxClientAdapter(
            api_key=api_key,
            endpoint=settings.perspective_endpoint,
            timeout_seconds=settings.perspective_timeout_seconds,
        )
        return Requester(
            client=client,
            models=models,
            languages=settings.perspective_languages,
        )


class FilterFactory:
    """Creates a threshold filter from configured thresholds."""

    @classmethod
    def create(cls, settings: Settings) -> ThresholdFilter:
        return ThresholdFilter(
            {
                from_wire_name(name): value
                for name, value in settings.perspective_thresholds.items()
            }
        )
