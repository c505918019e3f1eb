"""
objstore — Hello World

A bucket that lives in a dict.  Keys are flat, but listings behave
like directories: sub-directories first, then objects.
"""

import asyncio
import logging

from objstore import InMemoryBucket, delete_dir


async def main():
    logging.basicConfig(level=logging.DEBUG, format="  %(name)s: %(message)s")

    # ──────────────────────────────────────
    #  1. Fill the bucket
    # ──────────────────────────────────────
    bkt = InMemoryBucket()
    await bkt.upload("dir1/obj1", b"hello")
    await bkt.upload("dir1/obj2", b"world")
    await bkt.upload("dir2/obj3", b"!")

    # ──────────────────────────────────────
    #  2. Walk it like a filesystem
    # ──────────────────────────────────────
    print("\n/")
    await bkt.iter("", lambda name: print(f"  {name}"))
    print("\n/dir1/")
    await bkt.iter("dir1/", lambda name: print(f"  {name}"))

    # ──────────────────────────────────────
    #  3. Reads
    # ──────────────────────────────────────
    print("\nget dir1/obj1       ->", (await bkt.get("dir1/obj1")).read())
    print("get_range dir1/obj2 ->", (await bkt.get_range("dir1/obj2", 1, 100)).read())

    try:
        await bkt.get("missing")
    except Exception as exc:
        print(f"get missing         -> not found: {bkt.is_obj_not_found_err(exc)}")

    # ──────────────────────────────────────
    #  4. Clean up a whole directory
    # ──────────────────────────────────────
    await delete_dir(bkt, "dir1/")
    print("\nremaining objects:", sorted(bkt.objects()))

    await bkt.close()


if __name__ == "__main__":
    asyncio.run(main())
