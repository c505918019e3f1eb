"""objstore — An in-process object-storage emulator.

Keeps every object in a local dict while exposing the read, write,
list and delete contract of a remote bucket.  Listings emulate
directories over the flat key namespace.
"""

from objstore.buckets import DIR_DELIM, Bucket, InMemoryBucket
from objstore.config import InMemoryBucketConfig
from objstore.exceptions import (
    InvalidArgumentError,
    ObjectNotFoundError,
    ObjstoreError,
)
from objstore.helpers import delete_dir, download_file, upload_file

__all__ = [
    "DIR_DELIM",
    "Bucket",
    "InMemoryBucket",
    "InMemoryBucketConfig",
    "InvalidArgumentError",
    "ObjectNotFoundError",
    "ObjstoreError",
    "delete_dir",
    "download_file",
    "upload_file",
]
