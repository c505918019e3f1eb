"""Directory emulation over a flat key namespace."""

from __future__ import annotations

from collections.abc import Iterable


def split_after(s: str, sep: str) -> list[str]:
    """Split *s* after each *sep*, keeping the separator on the left part.

    ``split_after("a/b/", "/")`` gives ``["a/", "b/", ""]``.
    """
    parts = s.split(sep)
    return [p + sep for p in parts[:-1]] + [parts[-1]]


def _sort_key(entry: str, delim: str) -> tuple[int, str]:
    # Directories first, then plain string order.
    return (0 if entry.endswith(delim) else 1, entry)


def list_dir_entries(keys: Iterable[str], dir: str, delim: str) -> list[str]:
    """Return the direct children of *dir* among *keys*, in listing order.

    Each entry is the full name including *dir*.  Entries that end in
    *delim* stand for sub-directories and sort before object entries.
    A key equal to *dir* itself is never listed.
    """
    depth = sum(1 for p in split_after(dir, delim) if p)

    unique: set[str] = set()
    for key in keys:
        if not key.startswith(dir) or key == dir:
            continue
        parts = split_after(key, delim)
        unique.add("".join(parts[: depth + 1]))

    return sorted(unique, key=lambda e: _sort_key(e, delim))
