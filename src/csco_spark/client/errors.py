"""
Errors raised by the Spark REST client.

Only two failure kinds come out of a request: the transport failed, or the
API answered with a 4xx status. 5xx responses are passed through untouched.
"""

from __future__ import annotations


class SparkError(Exception):
    """Base class for every error raised by csco_spark."""

    pass


class TransportError(SparkError):
    """
    Raised when the HTTP request could not be completed.

    Covers DNS, connection and timeout failures. Never retried.
    The underlying httpx exception is kept as ``cause`` and chained.
    """

    def __init__(self, cause: BaseException):
        super().__init__(f"Transport failure: {cause}")
        self.cause = cause


class ClientError(SparkError):
    """
    Raised for any response whose status code starts with 4.

    ``body`` is the raw response body as returned by the API.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Request failed with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class MalformedLinkError(SparkError, ValueError):
    """Raised when a pagination link header does not contain a URI."""

    pass


class MalformedPageError(SparkError, ValueError):
    """Raised when a listing response body has no `items` list."""

    pass
