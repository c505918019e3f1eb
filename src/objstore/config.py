# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration model for in-memory buckets."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from objstore.buckets.base import DIR_DELIM


class InMemoryBucketConfig(BaseModel):
    """Settings for :class:`~objstore.buckets.memory.InMemoryBucket`.

    Attributes:
        delimiter:   Path segment separator used to emulate directories.
        thread_safe: Guard the object map with a lock.  Turning it off
                     does not change single-threaded behavior.
    """

    delimiter: str = DIR_DELIM
    thread_safe: bool = True

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be exactly one character")
        return value
