"""
SparkClient - async client for the Cisco Spark REST API.

One method per endpoint. Listing methods follow the `link` header and return
every item; download_file returns a FileDownload.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping
from urllib.parse import urlencode

import httpx

from csco_spark.config import ClientConfig

from .files import FileDownload, classify_download
from .models import WebhookRequest
from .pagination import Page, listing_items, walk_pages
from .request import RequestExecutor, RequestOptions

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 200


class SparkClient:
    """
    Client for rooms, messages, people, memberships, webhooks and files.

    All methods are coroutines and issue their requests one after another.
    Requests use the token and base URI from the ClientConfig.

    Example:
        async with SparkClient(ClientConfig(token="...")) as spark:
            room = await spark.create_room({"title": "Ops"})
            await spark.send_message({"roomId": room["id"], "text": "Hello!"})
            messages = await spark.get_messages(room["id"])

    Raises (from every method):
        TransportError: If the request could not be completed
        ClientError: If the API answers with a 4xx status

    Listing methods also raise MalformedPageError when a page body has no
    `items`, e.g. a 5xx error body in the middle of a listing.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            config: Default base URI and token, read-only from here on
            http_client: Optional httpx client to send requests with
        """
        self.config = config or ClientConfig()
        self.executor = RequestExecutor(self.config, http_client=http_client)

    async def __aenter__(self) -> "SparkClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.executor.close()

    async def request(self, options: RequestOptions) -> httpx.Response | Any:
        """Run a single request. See RequestExecutor.execute()."""
        return await self.executor.execute(options)

    # --- Rooms ---

    async def create_room(self, room_props: Mapping[str, Any]) -> Any:
        return await self.request(
            RequestOptions(method="POST", path="/rooms", body=dict(room_props))
        )

    async def remove_room(self, room_id: str) -> Any:
        return await self.request(
            RequestOptions(method="DELETE", path=f"/rooms/{room_id}")
        )

    async def get_rooms(
        self, max_items: int = DEFAULT_PAGE_SIZE, token: str | None = None
    ) -> list[dict[str, Any]]:
        """List every room the token's user belongs to, across all pages."""
        return await self._list(f"/rooms?{urlencode({'max': max_items})}", token)

    # --- Messages ---

    async def send_message(self, message_props: Mapping[str, Any]) -> Any:
        return await self.request(
            RequestOptions(method="POST", path="/messages", body=dict(message_props))
        )

    async def delete_message(self, message_id: str) -> Any:
        return await self.request(
            RequestOptions(method="DELETE", path=f"/messages/{message_id}")
        )

    async def get_message(self, message_id: str) -> Any:
        return await self.request(RequestOptions(path=f"/messages/{message_id}"))

    async def get_messages(
        self,
        room_id: str,
        max_items: int = DEFAULT_PAGE_SIZE,
        token: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List every message of a room, across all pages.

        Args:
            room_id: Room to list
            max_items: Page size requested from the API
            token: Token for this listing instead of the configured one

        Returns:
            Messages in the order the API returned them
        """
        query = urlencode({"roomId": room_id, "max": max_items})
        return await self._list(f"/messages?{query}", token)

    # --- People and memberships ---

    async def get_person(
        self, person_id: str | None = None, email: str | None = None
    ) -> Any:
        """
        Look up a person by email (a listing) or by id (a single person).

        The email lookup wins when both are given.

        Raises:
            ValueError: If neither person_id nor email is given
        """
        if email:
            path = f"/people?{urlencode({'email': email})}"
        elif person_id:
            path = f"/people/{person_id}"
        else:
            raise ValueError("get_person() needs a person_id or an email")
        return await self.request(RequestOptions(path=path))

    async def add_member_to_room(self, member: Mapping[str, Any]) -> Any:
        """Create a membership, e.g. {"roomId": ..., "personEmail": ...}."""
        return await self.request(
            RequestOptions(method="POST", path="/memberships", body=dict(member))
        )

    async def add_user_to_room(self, room_id: str, participants: Any) -> Any:
        return await self.request(
            RequestOptions(
                method="POST",
                path=f"/rooms/{room_id}/participants",
                body=participants,
            )
        )

    async def remove_user_from_room(self, membership_id: str) -> Any:
        return await self.request(
            RequestOptions(method="DELETE", path=f"/memberships/{membership_id}")
        )

    # --- Webhooks ---

    async def add_webhook(self, name: str, hook_url: str, room_id: str) -> Any:
        """Register a webhook called for every message created in room_id."""
        webhook = WebhookRequest.for_room(name, hook_url, room_id)
        return await self.request(
            RequestOptions(method="POST", path="/webhooks", body=webhook.to_body())
        )

    async def delete_webhook(self, webhook_id: str) -> Any:
        return await self.request(
            RequestOptions(method="DELETE", path=f"/webhooks/{webhook_id}")
        )

    # --- Files ---

    async def get_file_uris(self, messages: Iterable[Mapping[str, Any]]) -> list[str]:
        """Concatenate the `files` URIs of all messages, skipping those without."""
        uris: list[str] = []
        for message in messages:
            files = message.get("files")
            if files:
                uris.extend(files)
        return uris

    async def download_file(self, uri: str, token: str | None = None) -> FileDownload:
        """
        Download a message attachment.

        Args:
            uri: Content URI, as found in a message's `files`
            token: Token for this download instead of the configured one

        Returns:
            FileDownload with a base64 payload for image, zip, octet-stream,
            office and PDF content, raw bytes otherwise
        """
        response = await self.request(
            RequestOptions(uri=uri, token=token, encoding="binary")
        )
        download = classify_download(response, uri=uri)
        logger.debug(f"Downloaded {download.file_name} ({download.content_type})")
        return download

    # --- Pagination ---

    async def fetch_page(self, uri: str, token: str | None = None) -> Page:
        """Fetch one listing page at an absolute URI (a `link` header target)."""
        response = await self.executor.send(RequestOptions(uri=uri, token=token))
        return Page.from_response(response)

    async def _list(self, path: str, token: str | None) -> list[dict[str, Any]]:
        response = await self.request(RequestOptions(path=path, token=token))
        if not isinstance(response, httpx.Response):
            # Single page, already decoded
            return listing_items(response)

        async def fetch(link: str) -> Page:
            return await self.fetch_page(link, token=token)

        items = await walk_pages(Page.from_response(response), fetch)
        logger.info(f"Listed {len(items)} items from {path}")
        return items
