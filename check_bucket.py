#!/usr/bin/env python
"""
Smoke check of the Firebase storage adapter against a live bucket.
Usage: python check_bucket.py [relative/path.txt]

Reads FIREBASE_STORAGE_BUCKET, FIREBASE_STORAGE_PREFIX and
GOOGLE_APPLICATION_CREDENTIALS from the environment (or .env).
"""
from __future__ import annotations

import sys

from firebase_storage.config import load_config
from firebase_storage.core.logging import setup_logger


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "test/test-file.txt"
    contents = b"Hello, Firebase!"

    try:
        config = load_config()
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    logger = setup_logger("firebase_storage", config)
    logger.info(f"Checking bucket {config.bucket_name} (prefix={config.storage_prefix!r})")

    print(f"\n{'='*60}")
    print(f"Bucket: {config.bucket_name}")
    print(f"Path:   {path}")
    print(f"{'='*60}\n")

    try:
        adapter = config.create_storage_adapter()

        print("Writing...")
        adapter.write(path, contents)
        print(f"  - exists: {adapter.file_exists(path)}")
        print(f"  - size: {adapter.file_size(path).file_size}")
        print(f"  - checksum: {adapter.checksum(path)}")
        print(f"  - mime type: {adapter.mime_type(path).mime_type}")

        print("Reading...")
        retrieved = adapter.read(path)
        if retrieved != contents:
            raise RuntimeError(f"Read back {retrieved!r}, expected {contents!r}")

        print("Deleting...")
        adapter.delete(path)
        print(f"  - exists: {adapter.file_exists(path)}")

        print(f"\n{'='*60}")
        print("SUCCESS")
        print(f"{'='*60}")

    except Exception as exc:
        print(f"\n{'='*60}")
        print("FAILED")
        print(f"{'='*60}")
        print(f"Error: {exc}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
