import json
from typing import Any, Dict, Optional

import httpx

from .. import __version__
from ..actions.models import SearchType
from ..actions.search.models import SearchOptions
from ..actions.search.utils import build_request_body
from ..config import DEFAULT_SERPER_API_URL
from ..errors import SerperAPIError
from ..logger import log


class SerperClient:
    """
    Thin async client for the Serper search endpoint.

    One POST per search, no retries. The httpx client is created lazily and
    closed by `aclose()` unless it was supplied by the caller.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_SERPER_API_URL, http_client: Optional[httpx.AsyncClient] = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient()
            self._owns_client = True
        return self._client

    async def search(self, query: str, search_type: SearchType = SearchType.WEB, options: Optional[SearchOptions] = None) -> Dict[str, Any]:
        """
        Run one search against the Serper API.

        Returns:
            The decoded JSON response.

        Raises:
            SerperAPIError: on a non-2xx status, a transport failure or a body
                that is not a JSON object
        """
        if options is None:
            options = SearchOptions(query=query)
        request_body = build_request_body(query, search_type, options)
        headers = {
            "X-API-KEY": self.api_key,
            "Content-Type": "application/json",
        }

        client = self._get_client()
        try:
            req = client.build_request("POST", self.search_url, content=json.dumps(request_body), headers=headers)
            response = await client.send(req)
        except httpx.RequestError as e:
            log.error(f"Cannot reach Serper API: {e}", extra={"search_type": search_type.value})
            raise SerperAPIError(f"Cannot connect to Serper API: {e}") from e

        if not response.is_success:
            log.error(
                "Serper API returned an error",
                extra={"status_code": response.status_code, "search_type": search_type.value},
            )
            raise SerperAPIError.from_response(response.status_code, response.text)

        try:
            data = response.json()
        except json.JSONDecodeError as e:
            raise SerperAPIError("Received invalid JSON format from Serper API", status_code=response.status_code, body=response.text) from e

        if not isinstance(data, dict):
            raise SerperAPIError(
                f"Unexpected Serper API response type: {type(data).__name__}",
                status_code=response.status_code,
                body=response.text,
            )
        return data

    async def validate_api_key(self) -> bool:
        """Checks the key with a one-result test search."""
        try:
            await self.search("test query", SearchType.WEB, SearchOptions(query="test query", num_results=1))
            return True
        except SerperAPIError as e:
            log.warning(f"Serper API key validation failed: {e}")
            return False

    def get_api_info(self) -> Dict[str, str]:
        return {
            "endpoint": self.base_url,
            "version": __version__,
        }

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "SerperClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
