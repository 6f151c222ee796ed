"""Binary layout of block headers and free-list nodes inside an arena."""

from __future__ import annotations

import struct
from dataclasses import dataclass

MAGIC_NUMBER = 123456789

_PAIR = struct.Struct("<QQ")

HEADER_SIZE = _PAIR.size
NODE_SIZE = _PAIR.size

# Stored in a node's "next" field when the node is the last one in the list.
NULL_ADDRESS = 0xFFFF_FFFF_FFFF_FFFF


@dataclass(frozen=True)
class Header:
    """Header placed in front of every allocated block."""

    magic: int
    size: int

    @property
    def is_valid(self) -> bool:
        return self.magic == MAGIC_NUMBER


@dataclass(frozen=True)
class NodeRecord:
    """A free-list node as stored in the arena."""

    next_address: int | None
    size: int


def _check_span(memory, address: int, length: int) -> None:
    if address < 0 or address + length > len(memory):
        raise IndexError(
            f"{length} bytes at {address} fall outside an arena of {len(memory)} bytes"
        )


def write_header(memory, address: int, size: int) -> int:
    """Write an allocation header and return the address just past its block."""
    _check_span(memory, address, HEADER_SIZE)
    _PAIR.pack_into(memory, address, MAGIC_NUMBER, size)
    return address + HEADER_SIZE + size


def read_header(memory, address: int) -> Header:
    """Read the allocation header stored at ``address``."""
    _check_span(memory, address, HEADER_SIZE)
    magic, size = _PAIR.unpack_from(memory, address)
    return Header(magic, size)


def write_node(memory, address: int, size: int, next_address: int | None) -> None:
    """Write a free-list node at ``address``."""
    _check_span(memory, address, NODE_SIZE)
    stored_next = NULL_ADDRESS if next_address is None else next_address
    _PAIR.pack_into(memory, address, stored_next, size)


def read_node(memory, address: int) -> NodeRecord:
    """Read the free-list node stored at ``address``."""
    _check_span(memory, address, NODE_SIZE)
    stored_next, size = _PAIR.unpack_from(memory, address)
    next_address = None if stored_next == NULL_ADDRESS else stored_next
    return NodeRecord(next_address, size)