"""Bucket protocol — the object-storage capability backends implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import IO, TYPE_CHECKING, Union

if TYPE_CHECKING:
    from types import TracebackType

__all__ = ["DIR_DELIM", "Bucket", "IterFunc", "Payload"]

DIR_DELIM = "/"

Payload = Union[bytes, bytearray, memoryview, IO[bytes]]
IterFunc = Callable[[str], Union[None, Awaitable[None]]]


class Bucket(ABC):
    """Abstract base for all object-storage backends.

    Objects live in a flat namespace of string keys.  ``iter`` emulates
    directories on top of it by splitting keys on :data:`DIR_DELIM`.
    Payloads are opaque bytes.
    """

    @abstractmethod
    async def iter(self, dir: str, f: IterFunc) -> None:
        """Call *f* for each entry in *dir*.

        The argument to *f* is the full entry name including *dir*.
        Sub-directories end with the delimiter.  An exception raised by
        *f* stops the iteration and is propagated unchanged.
        """
        ...

    @abstractmethod
    async def get(self, name: str) -> IO[bytes]:
        """Return a reader over the whole object."""
        ...

    @abstractmethod
    async def get_range(self, name: str, off: int, length: int) -> IO[bytes]:
        """Return a reader over ``length`` bytes starting at ``off``."""
        ...

    @abstractmethod
    async def exists(self, name: str) -> bool:
        """Return ``True`` if the object exists."""
        ...

    @abstractmethod
    async def upload(self, name: str, src: Payload) -> None:
        """Create or overwrite an object with the contents of *src*."""
        ...

    @abstractmethod
    async def delete(self, name: str) -> None:
        """Delete an object."""
        ...

    @abstractmethod
    def is_obj_not_found_err(self, err: BaseException) -> bool:
        """Return ``True`` if *err* means the object was not found."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release any resources held by the bucket."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier of the backend, for logging and tagging."""
        ...

    @property
    def delimiter(self) -> str:
        """Separator that splits object names into directory levels."""
        return DIR_DELIM

    # ── context manager ──────────────────────────────────────

    async def __aenter__(self) -> Bucket:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
