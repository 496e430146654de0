"""
Download every file posted in a room.

Credentials come from the environment (or a .env file):
    SPARK_TOKEN=xxx python 02_download_files.py <room id> <target dir>

Base64 payloads (images, PDFs, office documents, archives) are decoded
before writing; other payloads are written as is.
"""

import asyncio
import base64
import logging
import sys
from pathlib import Path

from setup_logging import setup_logging
from csco_spark import SparkClient, SparkSettings
from csco_spark.client import download_path

setup_logging()
logger = logging.getLogger(__name__)


async def main(room_id: str, target: Path):
    settings = SparkSettings()
    if not settings.token:
        raise ValueError("SPARK_TOKEN environment variable is required")

    target.mkdir(parents=True, exist_ok=True)

    async with SparkClient(settings.to_config()) as spark:
        messages = await spark.get_messages(room_id)
        uris = await spark.get_file_uris(messages)
        logger.info(f"Downloading {len(uris)} files from {len(messages)} messages")

        for uri in uris:
            download = await spark.download_file(uri)
            data = (
                base64.b64decode(download.payload)
                if download.is_base64
                else download.payload
            )
            path = download_path(target, download.file_name)
            path.write_bytes(data)
            logger.info(f"Saved {path.name}")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1], Path(sys.argv[2])))
