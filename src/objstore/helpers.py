"""Bucket-agnostic helpers built on top of the :class:`Bucket` protocol."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objstore.buckets.base import Bucket

logger = logging.getLogger(__name__)


async def delete_dir(bkt: Bucket, dir: str) -> None:
    """Recursively delete every object under *dir*.

    Walks the bucket with ``iter``, descending into sub-directories and
    deleting each object.  The first failing ``delete`` stops the walk
    and its error propagates.
    """

    async def _visit(name: str) -> None:
        if name.endswith(bkt.delimiter):
            await delete_dir(bkt, name)
            return
        await bkt.delete(name)
        logger.debug("Deleted file %r from bucket %s", name, bkt.name)

    await bkt.iter(dir, _visit)


async def upload_file(bkt: Bucket, src: str | Path, dst: str) -> None:
    """Upload the local file *src* to the object *dst*."""
    path = Path(src)
    with path.open("rb") as f:
        await bkt.upload(dst, f)
    logger.debug("Uploaded file %s to %r in bucket %s", path, dst, bkt.name)


async def download_file(bkt: Bucket, src: str, dst: str | Path) -> None:
    """Download the object *src* into the local file *dst*.

    Parent directories are created as needed.  If writing fails, the
    partially written file is removed before the error is re-raised.
    """
    reader = await bkt.get(src)
    path = Path(dst)
    path.parent.mkdir(parents=True, exist_ok=True)
    with reader, path.open("wb") as f:
        try:
            shutil.copyfileobj(reader, f)
        except BaseException:
            f.close()
            path.unlink(missing_ok=True)
            raise
    logger.debug("Downloaded %r from bucket %s to %s", src, bkt.name, path)
