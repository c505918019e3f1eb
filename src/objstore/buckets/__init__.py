"""Bucket backends for object storage."""

from objstore.buckets.base import DIR_DELIM, Bucket
from objstore.buckets.memory import InMemoryBucket

__all__ = ["DIR_DELIM", "Bucket", "InMemoryBucket"]
