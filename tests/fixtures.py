"""Fake Spark API and data factories for unit tests.

FakeSparkApi is an httpx.MockTransport handler: register responses per
(method, url) and inspect the recorded requests afterwards. A fresh
httpx.Response is built for every request.

Default values mirror the examples from the Spark API documentation.
"""

import uuid
from typing import Any, Dict, List, Optional

import httpx

BASE_URI = "https://api.example.com/v1"
TOKEN = "test-token"


def make_id(prefix: str) -> str:
    """Generate a Spark-style opaque id."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def next_link(uri: str) -> str:
    """Build a `link` header value pointing at uri."""
    return f'<{uri}>; rel="next"'


class FakeSparkApi:
    """Routes requests to canned responses and records them."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[tuple, Dict[str, Any]] = {}

    def add(
        self,
        method: str,
        url: str,
        status_code: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._routes[(method, str(httpx.URL(url)))] = {
            "status_code": status_code,
            "json": json,
            "content": content,
            "headers": headers or {},
        }

    def add_page(
        self, url: str, items: List[Dict[str, Any]], link: Optional[str] = None
    ) -> None:
        """Register a listing page, linked to the next one when link is given."""
        headers = {"link": next_link(link)} if link else {}
        self.add("GET", url, json={"items": items}, headers=headers)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, str(request.url)))
        if route is None:
            return httpx.Response(404, json={"message": f"No route for {request.url}"})

        if route["content"] is not None:
            return httpx.Response(
                route["status_code"], content=route["content"], headers=route["headers"]
            )
        if route["json"] is not None:
            return httpx.Response(
                route["status_code"], json=route["json"], headers=route["headers"]
            )
        return httpx.Response(route["status_code"], headers=route["headers"])


class SparkDataFactory:
    """Factory for Spark API records."""

    @staticmethod
    def room(id: Optional[str] = None, title: str = "Project Unicorn") -> Dict[str, Any]:
        return {
            "id": id or make_id("room"),
            "title": title,
            "type": "group",
            "isLocked": False,
            "created": "2016-04-21T19:01:55.966Z",
        }

    @staticmethod
    def message(
        id: Optional[str] = None,
        room_id: str = "room-1",
        text: str = "PROJECT UPDATE - A new project plan has been published",
        files: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        message = {
            "id": id or make_id("msg"),
            "roomId": room_id,
            "roomType": "group",
            "text": text,
            "personEmail": "matt@example.com",
            "created": "2015-10-18T14:26:16+00:00",
        }
        if files is not None:
            message["files"] = files
        return message

    @staticmethod
    def person(id: Optional[str] = None, email: str = "john.andersen@example.com") -> Dict[str, Any]:
        return {
            "id": id or make_id("person"),
            "emails": [email],
            "displayName": "John Andersen",
            "type": "person",
        }

    @staticmethod
    def messages(count: int, room_id: str = "room-1") -> List[Dict[str, Any]]:
        return [
            SparkDataFactory.message(id=f"msg-{i}", room_id=room_id)
            for i in range(count)
        ]


# Singleton factory instance for convenience
factory = SparkDataFactory()
