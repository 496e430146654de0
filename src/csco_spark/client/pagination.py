"""
Pagination walker for `link`-header based listings.

Spark listing endpoints return `{"items": [...]}` and, when more results
exist, a header of the form:

    link: <https://api.ciscospark.com/v1/messages?cursor=abc>; rel="next"

The walker follows that header page by page until it disappears.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

import httpx

from .errors import MalformedLinkError, MalformedPageError

logger = logging.getLogger(__name__)

# Fetches the page at a link URI
PageFetcher = Callable[[str], Awaitable["Page"]]


@dataclass
class Page:
    """One response's worth of listing items plus the next-page link, if any."""

    items: list[dict[str, Any]] = field(default_factory=list)
    link: str | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "Page":
        """Build a Page from a raw listing response."""
        items = listing_items(response.json())
        header = response.headers.get("link")
        return cls(items=items, link=parse_link_header(header) if header else None)


def listing_items(body: Any) -> list[dict[str, Any]]:
    """
    Return the `items` list of a decoded listing body.

    Raises:
        MalformedPageError: If the body has no `items` list, e.g. a 5xx error body
    """
    items = body.get("items") if isinstance(body, dict) else None
    if not isinstance(items, list):
        raise MalformedPageError(f"Listing response has no items: {body!r}")
    return items


def parse_link_header(value: str) -> str:
    """
    Extract the bare URI from a `link` header value.

    Takes the text before the first `;` and strips the enclosing angle
    brackets: `<https://x/y?cursor=1>; rel="next"` -> `https://x/y?cursor=1`.

    Raises:
        MalformedLinkError: If no URI is left after stripping
    """
    uri = value.split(";")[0].strip()
    if uri.startswith("<"):
        uri = uri[1:]
    if uri.endswith(">"):
        uri = uri[:-1]
    if not uri:
        raise MalformedLinkError(f"No URI in link header: {value!r}")
    return uri


async def walk_pages(first: Page, fetch_page: PageFetcher) -> list[dict[str, Any]]:
    """
    Collect the items of every page, starting from an already fetched one.

    Pages are fetched one at a time: the next link is only known once the
    previous response is parsed. Items keep fetch order, no deduplication.

    Args:
        first: The first page (items and optional link)
        fetch_page: Coroutine fetching the page at a link

    Returns:
        All items of all pages, concatenated
    """
    items = list(first.items)
    link = first.link
    pages = 1

    while link:
        page = await fetch_page(link)
        items.extend(page.items)
        link = page.link
        pages += 1

    if pages > 1:
        logger.debug(f"Collected {len(items)} items over {pages} pages")
    return items
