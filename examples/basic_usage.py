#!/usr/bin/env python3
"""
Basic usage example for the cloudfiles Python SDK.

Endpoints and tokens are read from CLOUDFILES_* environment variables.
"""

from cloudfiles import (
    CloudFilesClient,
    ConnectionConfig,
    ContainerAlreadyPublicError,
    StorageItemNotFoundError,
)
from cloudfiles.logging_config import configure_logging


def main():
    configure_logging(log_level="DEBUG")
    config = ConnectionConfig.from_env()

    with CloudFilesClient(config) as client:
        photos = client.container("photos")

        print("Uploading object...")
        obj = photos.add_object_from_bytes(b"Hello, CloudFiles!", "hello.txt", {"author": "example"})
        print(f"Uploaded: {obj.name} {obj.meta_tags}")

        print(f"Object exists: {photos.object_exists('hello.txt')}")

        print("Publishing container...")
        try:
            photos.mark_as_public()
            print(f"Public URL: {photos.public_url}")
        except ContainerAlreadyPublicError:
            print("Container was already public")

        print("Deleting object...")
        photos.delete_object("hello.txt")

        try:
            photos.delete_object("hello.txt")
        except StorageItemNotFoundError as e:
            print(f"Second delete failed as expected: {e}")


if __name__ == "__main__":
    main()
