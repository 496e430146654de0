"""
Spark REST client.

Usage:
    from csco_spark.client import SparkClient
    async with SparkClient(ClientConfig(token="your-token")) as spark:
        rooms = await spark.get_rooms()
"""

from .errors import (
    ClientError,
    MalformedLinkError,
    MalformedPageError,
    SparkError,
    TransportError,
)
from .files import (
    BASE64_CONTENT_MARKERS,
    FileDownload,
    classify_download,
    download_path,
    extract_file_name,
)
from .models import WebhookRequest
from .pagination import Page, listing_items, parse_link_header, walk_pages
from .request import RequestExecutor, RequestOptions
from .spark import SparkClient

__all__ = [
    "BASE64_CONTENT_MARKERS",
    "ClientError",
    "FileDownload",
    "MalformedLinkError",
    "MalformedPageError",
    "Page",
    "RequestExecutor",
    "RequestOptions",
    "SparkClient",
    "SparkError",
    "TransportError",
    "WebhookRequest",
    "classify_download",
    "download_path",
    "extract_file_name",
    "listing_items",
    "parse_link_header",
    "walk_pages",
]
