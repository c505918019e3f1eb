"""Shared test fixtures."""

import pytest

from objstore import InMemoryBucket


@pytest.fixture
def bucket():
    return InMemoryBucket()


@pytest.fixture
async def populated(bucket):
    await bucket.upload("dir1/obj1", b"hello")
    await bucket.upload("dir1/obj2", b"world")
    await bucket.upload("dir2/obj3", b"!")
    return bucket
