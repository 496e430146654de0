"""
File download classification.

Spark serves message attachments from content URIs. The downloaded bytes are
base64-encoded for image, archive, binary, office and PDF content types and
left as raw bytes for everything else (e.g. text/plain).
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

# Case-sensitive substrings of the content type that get base64 encoded
BASE64_CONTENT_MARKERS = ("image", "zip", "octet-stream", "officedocument", "pdf")

DEFAULT_FILE_NAME = "download"


@dataclass
class FileDownload:
    """A downloaded file: its name and its payload (base64 str or raw bytes)."""

    file_name: str
    payload: str | bytes
    content_type: str = ""

    @property
    def is_base64(self) -> bool:
        return isinstance(self.payload, str)


def extract_file_name(content_disposition: str | None, fallback: str = DEFAULT_FILE_NAME) -> str:
    """
    Return the text between the first two double quotes of a content-disposition.

    `attachment; filename="report.pdf"` -> `report.pdf`. Headers without a
    quoted name give the fallback.
    """
    if not content_disposition:
        return fallback
    parts = content_disposition.split('"')
    if len(parts) < 2 or not parts[1]:
        return fallback
    return parts[1]


def needs_base64(content_type: str) -> bool:
    return any(marker in content_type for marker in BASE64_CONTENT_MARKERS)


def encode_payload(content: bytes, content_type: str) -> str | bytes:
    if needs_base64(content_type):
        return base64.b64encode(content).decode("ascii")
    return content


def file_name_from_uri(uri: str) -> str:
    """Last path segment of a URI, or the default file name."""
    segment = urlparse(uri).path.rstrip("/").rsplit("/", 1)[-1]
    return segment or DEFAULT_FILE_NAME


def classify_download(response: httpx.Response, uri: str = "") -> FileDownload:
    """
    Build a FileDownload from a completed binary-mode response.

    uri is the download URI, used to name the file when the response has
    no content-disposition header.
    """
    content_type = response.headers.get("content-type", "")
    content_disposition = response.headers.get("content-disposition")
    if content_disposition is None:
        logger.debug(f"No content-disposition for {uri}")

    file_name = extract_file_name(content_disposition, fallback=file_name_from_uri(uri))
    return FileDownload(
        file_name=file_name,
        payload=encode_payload(response.content, content_type),
        content_type=content_type,
    )


def download_path(directory: Path, file_name: str) -> Path:
    """
    Pick a path inside directory to save a downloaded file under.

    The name comes from the server, so only its last path component is kept
    (`../../.bashrc` -> `.bashrc`). Empty, `.` and `..` names become the
    default file name. An existing file is never reused: `report.pdf` turns
    into `report (1).pdf`, `report (2).pdf` and so on.
    """
    name = PureWindowsPath(PurePosixPath(file_name).name).name
    if name in ("", ".", ".."):
        name = DEFAULT_FILE_NAME

    path = directory / name
    stem, suffix = path.stem, path.suffix
    counter = 1
    while path.exists():
        path = directory / f"{stem} ({counter}){suffix}"
        counter += 1
    return path
