"""Custom exceptions for the objstore package."""

from __future__ import annotations


class ObjstoreError(Exception):
    """Base exception for all bucket errors."""


class InvalidArgumentError(ObjstoreError, ValueError):
    """Raised when a caller passes a structurally invalid argument.

    Always raised before the bucket is touched (empty object name,
    range offset past the end of the object, negative range values).
    """


class ObjectNotFoundError(ObjstoreError, KeyError):
    """Raised when the requested object does not exist in the bucket."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"inmem: object not found: '{self.name}'"
