"""
List rooms and their message counts.

Reads the `bot` profile from spark_config.yaml in the current directory.

Run with:
    python 01_list_rooms.py
"""

import asyncio
import logging

from setup_logging import setup_logging
from csco_spark import SparkClient, load_client_config

setup_logging()
logger = logging.getLogger(__name__)


async def main():
    config = load_client_config("bot")

    async with SparkClient(config) as spark:
        rooms = await spark.get_rooms()
        logger.info(f"Found {len(rooms)} rooms")

        for room in rooms:
            messages = await spark.get_messages(room["id"])
            print(f"{room['title']}: {len(messages)} messages")


if __name__ == "__main__":
    asyncio.run(main())
