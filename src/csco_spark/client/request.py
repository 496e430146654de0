"""
Request executor for the Spark REST API.

Builds one HTTP request from a RequestOptions struct, sends it with
httpx.AsyncClient and classifies the response:

- 4xx status -> ClientError carrying the raw body
- `link` header present, or a binary encoding requested -> raw httpx.Response
- anything else -> decoded JSON body (None when the body is empty)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from csco_spark.config import ClientConfig

from .errors import ClientError, TransportError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class RequestOptions:
    """
    Everything needed to issue a single request.

    uri and token override the client defaults when set to a non-empty value.
    path is appended verbatim to the uri, query string included.
    body is sent as JSON; form is sent URL-encoded and takes precedence.
    encoding marks a file download (e.g. "binary"): the raw response is returned.
    """

    method: str = "GET"
    path: str = ""
    uri: str | None = None
    token: str | None = None
    body: Any = None
    form: Mapping[str, str] | None = None
    encoding: str | None = None


def is_client_error(status_code: int) -> bool:
    """True when the status code's first digit is 4."""
    return str(status_code).startswith("4")


def decode_body(response: httpx.Response) -> Any:
    """Decode a JSON response body. Empty bodies (e.g. 204) decode to None."""
    if not response.content:
        return None
    return response.json()


class RequestExecutor:
    """
    Issues requests against the configured base URI with the configured token.

    The httpx client is created lazily and reused until close(). Pass
    http_client to supply your own (e.g. one with a mock transport): it stays
    owned by the caller, so close() leaves it open.

    Example:
        executor = RequestExecutor(ClientConfig(token="..."))
        rooms = await executor.execute(RequestOptions(path="/rooms"))
        await executor.close()
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config
        self._http_client = http_client
        self._owns_http_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if not self._owns_http_client:
            if self._http_client.is_closed:
                raise RuntimeError("The supplied http_client is closed")
            return self._http_client
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                verify=self.config.verify_ssl,
                timeout=self.config.timeout,
            )
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client, unless it was supplied by the caller."""
        if not self._owns_http_client:
            return
        if self._http_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            self._http_client = None

    def build_headers(self, options: RequestOptions) -> dict[str, str]:
        headers = {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }
        token = options.token or self.config.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if options.form:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        return headers

    def build_url(self, options: RequestOptions) -> str:
        return (options.uri or self.config.base_uri) + options.path

    async def send(self, options: RequestOptions) -> httpx.Response:
        """
        Send the request and fail on transport errors or 4xx statuses.

        Returns:
            The raw httpx.Response, whatever its body

        Raises:
            TransportError: If the request could not be completed
            ClientError: If the status code starts with 4
        """
        http_client = await self._get_http_client()
        url = self.build_url(options)
        headers = self.build_headers(options)

        kwargs: dict[str, Any] = {}
        if options.form:
            kwargs["data"] = dict(options.form)
        elif options.body is not None:
            kwargs["json"] = options.body

        logger.debug(f"{options.method} {url}")
        try:
            response = await http_client.request(
                options.method, url, headers=headers, **kwargs
            )
        except httpx.RequestError as e:
            raise TransportError(e) from e

        if is_client_error(response.status_code):
            logger.debug(f"{options.method} {url} failed: {response.status_code}")
            raise ClientError(response.status_code, response.text)

        if response.status_code >= 500:
            # Passed through: decoding is left to fail on its own
            logger.warning(
                f"{options.method} {url} returned server error {response.status_code}"
            )

        return response

    async def execute(self, options: RequestOptions) -> httpx.Response | Any:
        """
        Issue the request and classify the response.

        Returns:
            The raw httpx.Response when the response has a `link` header or
            options.encoding is set; the decoded body otherwise
        """
        response = await self.send(options)
        if "link" in response.headers or options.encoding:
            return response
        return decode_body(response)
