"""InMemoryBucket — dict-backed bucket for development and testing."""

from __future__ import annotations

import inspect
import io
import logging
import threading
from contextlib import nullcontext
from typing import IO, TYPE_CHECKING

from objstore._internal.listing import list_dir_entries
from objstore.buckets.base import Bucket
from objstore.config import InMemoryBucketConfig
from objstore.exceptions import InvalidArgumentError, ObjectNotFoundError

if TYPE_CHECKING:
    from objstore.buckets.base import IterFunc, Payload

logger = logging.getLogger(__name__)


class InMemoryBucket(Bucket):
    """Naive bucket keeping every object in a dict.  Data is lost on process exit.

    Meant for tests only: listings scan every key on each call.

    Parameters:
        config: Delimiter and locking settings.  Defaults to
                :class:`InMemoryBucketConfig` when omitted.
    """

    def __init__(self, config: InMemoryBucketConfig | None = None) -> None:
        self._config = config or InMemoryBucketConfig()
        self._objects: dict[str, bytes] = {}
        self._lock = threading.Lock() if self._config.thread_safe else nullcontext()

    def objects(self) -> dict[str, bytes]:
        """Return the internal object map by reference, for assertions."""
        return self._objects

    @property
    def name(self) -> str:
        return "inmem"

    @property
    def delimiter(self) -> str:
        return self._config.delimiter

    # ── reads ────────────────────────────────────────────────

    async def iter(self, dir: str, f: IterFunc) -> None:
        with self._lock:
            entries = list_dir_entries(list(self._objects), dir, self._config.delimiter)

        for entry in entries:
            result = f(entry)
            if inspect.isawaitable(result):
                await result

    async def get(self, name: str) -> IO[bytes]:
        return io.BytesIO(self._lookup(name))

    async def get_range(self, name: str, off: int, length: int) -> IO[bytes]:
        body = self._lookup(name)

        if off < 0 or length < 0:
            raise InvalidArgumentError(
                f"inmem: negative range. Offset: {off}, length: {length}"
            )
        if len(body) < off:
            raise InvalidArgumentError(
                f"inmem: offset larger than content length. Len {len(body)}. Offset: {off}"
            )
        if len(body) <= off + length:
            # Best effort: return as much as we have.
            length = len(body) - off
            logger.debug("Clamped range read of %r to %d bytes", name, length)

        return io.BytesIO(body[off : off + length])

    async def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._objects

    # ── writes ───────────────────────────────────────────────

    async def upload(self, name: str, src: Payload) -> None:
        if isinstance(src, (bytes, bytearray, memoryview)):
            body = bytes(src)
        else:
            # Read failures propagate before the map is touched.
            data = src.read()
            if not isinstance(data, (bytes, bytearray, memoryview)):
                raise InvalidArgumentError("inmem: upload source must yield bytes")
            body = bytes(data)

        with self._lock:
            self._objects[name] = body
        logger.debug("Uploaded %r (%d bytes)", name, len(body))

    async def delete(self, name: str) -> None:
        with self._lock:
            if name not in self._objects:
                raise ObjectNotFoundError(name)
            del self._objects[name]
        logger.debug("Deleted %r", name)

    # ── misc ─────────────────────────────────────────────────

    def is_obj_not_found_err(self, err: BaseException) -> bool:
        return isinstance(err, ObjectNotFoundError)

    async def close(self) -> None:
        pass

    def _lookup(self, name: str) -> bytes:
        if name == "":
            raise InvalidArgumentError("inmem: object name is empty")
        with self._lock:
            try:
                return self._objects[name]
            except KeyError:
                raise ObjectNotFoundError(name) from None
