import httpx

from protestmap.protests.urls import PROTESTS_URL


class ClientNetworkError(Exception):
    """Raised when the protests API cannot be reached."""


class ProtestsApiClient:
    """Thin HTTP client for the protests API."""

    def __init__(
        self,
        base_url: str,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
        **client_kwargs,
    ):
        self._base_url = base_url
        self._http_client_class = http_client_class
        self._client_kwargs = client_kwargs

    async def list_protests(self) -> list[dict]:
        try:
            async with self._http_client() as client:
                response = await client.get(PROTESTS_URL)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            raise ClientNetworkError(str(e)) from e

    async def create_protest(self, payload: dict) -> httpx.Response:
        """Post a new protest. Non-success statuses are returned, not raised."""
        try:
            async with self._http_client() as client:
                return await client.post(PROTESTS_URL, json=payload)
        except httpx.TransportError as e:
            raise ClientNetworkError(str(e)) from e

    def _http_client(self) -> httpx.AsyncClient:
        return self._http_client_class(base_url=self._base_url, **self._client_kwargs)
