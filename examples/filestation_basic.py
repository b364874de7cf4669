#!/usr/bin/env python3
"""
Basic usage examples for syno-filestation.

Reads SYNOLOGY_BASE_URL and SYNOLOGY_SID from the environment (or .env).
"""

import time
from pathlib import Path

from syno_filestation import (
    FileListAdditional,
    ProtocolError,
    SynologyClient,
    SynologyError,
    ThumbnailSize,
)


def list_shares(client: SynologyClient):
    """Print every shared folder with its size."""
    print("=== Shared Folders ===")

    result = client.list_shares(additional=FileListAdditional(size=True, owner=True))
    for share in result.data.get("shares", []):
        print(f"✓ {share['path']}")


def search_videos(client: SynologyClient, folder: str):
    """Run a search task and poll until it finishes."""
    print("\n=== Search ===")

    task_id = client.search_start(folder, extension=["mkv", "mp4"]).data["taskid"]
    try:
        while True:
            result = client.search_list(task_id, limit=20)
            if result.data.get("finished"):
                break
            time.sleep(1)

        for item in result.data.get("files", []):
            print(f"✓ {item['path']}")
    finally:
        client.search_stop(task_id)
        client.search_clean(task_id)


def save_thumbnail(client: SynologyClient, image_path: str):
    """Download a thumbnail to the current directory."""
    print("\n=== Thumbnail ===")

    try:
        content = client.get_thumbnail(image_path, size=ThumbnailSize.MEDIUM)
    except ProtocolError as e:
        print(f"❌ No thumbnail: {e}")
        return

    output_path = Path("thumbnail.jpg")
    output_path.write_bytes(content)
    print(f"✓ Saved {len(content)} bytes to {output_path}")


def main():
    with SynologyClient.from_settings() as client:
        try:
            list_shares(client)
            search_videos(client, "/video")
            save_thumbnail(client, "/photo/sample.jpg")
        except SynologyError as e:
            print(f"❌ Request failed: {e}")


if __name__ == "__main__":
    main()
