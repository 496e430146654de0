"""
csco_spark - async client for the Cisco Spark REST API.

Configuration:
    ClientConfig: Default base URI and bearer token
    load_client_config: Load a ClientConfig from spark_config.yaml
    SparkSettings: Load a ClientConfig from SPARK_* environment variables

Client:
    SparkClient: Rooms, messages, people, memberships, webhooks and files
    RequestExecutor: Single request issuing and response classification
    walk_pages: Follows `link` headers until the last page

Example:
    from csco_spark import SparkClient, load_client_config

    async with SparkClient(load_client_config("bot")) as spark:
        for room in await spark.get_rooms():
            messages = await spark.get_messages(room["id"])
            for uri in await spark.get_file_uris(messages):
                download = await spark.download_file(uri)
"""

from .config import ClientConfig, SparkSettings, get_config_path, load_client_config
from .client import (
    ClientError,
    FileDownload,
    MalformedLinkError,
    MalformedPageError,
    Page,
    RequestExecutor,
    RequestOptions,
    SparkClient,
    SparkError,
    TransportError,
    WebhookRequest,
    parse_link_header,
    walk_pages,
)

__all__ = [
    # Configuration
    "ClientConfig",
    "SparkSettings",
    "get_config_path",
    "load_client_config",
    # Client
    "SparkClient",
    "RequestExecutor",
    "RequestOptions",
    "Page",
    "FileDownload",
    "WebhookRequest",
    "parse_link_header",
    "walk_pages",
    # Errors
    "SparkError",
    "TransportError",
    "ClientError",
    "MalformedLinkError",
    "MalformedPageError",
]
