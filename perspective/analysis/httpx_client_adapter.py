from typing import Any

import httpx

from perspective.analysis.client_base import BaseAnalysisClient
from perspective.analysis.exceptions import AnalysisError, AnalysisNetworkError


class HttpxClientAdapter(BaseAnalysisClient):
    """Perspective transport built on httpx.AsyncClient.

    The API key travels as the ``key`` query parameter of every request.
    """

    def __init__(
        self,
        *,
        api_key: str,
        endpoint: str,
        timeout_seconds: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._endpoint = endpoint
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def analyze_comment(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._endpoint,
                    params={"key": self._api_key},
                    json=payload,
                )
                response.raise_for_status()
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(
                f"Perspective network error: {exc}"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise AnalysisNetworkError(
                f"Perspective API error: status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise AnalysisNetworkError(
                f"Perspective transport error: {exc}"
            ) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise AnalysisError(f"Invalid JSON response: {exc}") from exc
        if not isinstance(data, dict):
            raise AnalysisError("JSON response must be an object")
        return data
