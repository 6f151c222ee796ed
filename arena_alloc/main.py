"""Demonstration run of the free-list allocator."""

from __future__ import annotations

import argparse
import logging
import sys

from .free_list import AllocatorError, FreeList

DEFAULT_CAPACITY = 4096000


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="arena_alloc",
        description="Allocate and free a few blocks in a free-list arena.",
    )
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="show allocator diagnostics"
    )
    return parser.parse_args(argv)


def _run(capacity: int) -> None:
    free_list = FreeList(capacity)
    a = free_list.allocate(1000)
    print(f"Allocated A memory at: {a}")
    b = free_list.allocate(1000)
    print(f"Allocated B memory at: {b}")
    c = free_list.allocate(1000)
    print(f"Allocated C memory at: {c}")

    print("Deallocating A ")
    free_list.deallocate(a)
    print("Deallocating B ")
    free_list.deallocate(b)

    d = free_list.allocate(1000)
    print(f"Allocated D memory at: {d}")
    print("Deallocating D ")
    free_list.deallocate(d)


def main(argv=None) -> int:
    args = _parse_args(argv)
    package_logger = logging.getLogger("arena_alloc")
    handler = None
    previous_level = package_logger.level
    if args.verbose:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG)
    try:
        _run(args.capacity)
    except (AllocatorError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    finally:
        if handler is not None:
            package_logger.removeHandler(handler)
            package_logger.setLevel(previous_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())