"""Pytest configuration for integration tests.

Re-exports fixtures from the parent module.
Credentials are loaded from .env.test automatically.
"""

from tests.conftest_integration import (
    get_room_id,
    get_token,
    integration_settings,
    live_spark,
    requires_room,
    requires_token,
)

__all__ = [
    "get_room_id",
    "get_token",
    "integration_settings",
    "live_spark",
    "requires_room",
    "requires_token",
]
