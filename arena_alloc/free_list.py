"""First-fit free-list allocator over a fixed-size arena."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .layout import (
    HEADER_SIZE,
    NODE_SIZE,
    NodeRecord,
    read_header,
    read_node,
    write_header,
    write_node,
)

logger = logging.getLogger(__name__)


class AllocatorError(Exception):
    """Raised on misuse of the allocator or arena corruption."""


class OutOfMemoryError(AllocatorError, MemoryError):
    """Raised when no free block is large enough for a request."""


@dataclass(frozen=True)
class FreeBlock:
    """A free block: the address of its node and the bytes that follow it."""

    address: int
    size: int


class FreeList:
    """An arena of ``capacity`` bytes managed by an address-ordered free list.

    Addresses are offsets into the arena.
    """

    def __init__(self, capacity: int):
        if capacity < NODE_SIZE:
            raise ValueError(f"capacity must be at least {NODE_SIZE} bytes")
        self._capacity = capacity
        self._memory = bytearray(capacity)
        self._head: int | None = 0
        write_node(self._memory, 0, capacity - NODE_SIZE, None)
        logger.debug("Head allocated at: %d", self._head)

    @property
    def capacity(self) -> int:
        return self._capacity

    def _nodes(self) -> Iterator[tuple[int, NodeRecord]]:
        address = self._head
        while address is not None:
            record = read_node(self._memory, address)
            yield address, record
            address = record.next_address

    def free_blocks(self) -> list[FreeBlock]:
        """Return the free blocks in list order."""
        return [FreeBlock(address, record.size) for address, record in self._nodes()]

    def _log_list(self) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug("Free List Start")
        for block in self.free_blocks():
            logger.debug("\tAddress: %d, Size: %d", block.address, block.size)
        logger.debug("Free List End")

    def _find_suitable_block(self, size: int):
        minimum = size + HEADER_SIZE + NODE_SIZE
        previous = None
        for address, record in self._nodes():
            if record.size >= minimum:
                return previous, address, record
            previous = address
        return previous, None, None

    def allocate(self, size: int) -> int | None:
        """Reserve ``size`` zeroed bytes and return their address.

        A request for zero bytes returns ``None``.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if self._head is None:
            raise AllocatorError("The head of the free list was not allocated.")
        if size > self._capacity:
            raise AllocatorError(
                f"Trying to allocate {size} bytes, "
                f"when the maximum capacity is {self._capacity} bytes"
            )
        if size == 0:
            return None

        previous, current, record = self._find_suitable_block(size)
        if current is None:
            raise OutOfMemoryError(f"no free block can hold {size} bytes")

        new_node = write_header(self._memory, current, size)
        write_node(
            self._memory,
            new_node,
            record.size - (size + HEADER_SIZE),
            record.next_address,
        )
        if previous is not None:
            previous_record = read_node(self._memory, previous)
            write_node(self._memory, previous, previous_record.size, new_node)
        if current == self._head:
            logger.debug("Moving head from %d to %d", self._head, new_node)
            self._head = new_node

        payload = current + HEADER_SIZE
        self._memory[payload:payload + size] = bytes(size)
        self._log_list()
        return payload

    def deallocate(self, address: int) -> None:
        """Return the block at ``address`` to the free list."""
        header_address = address - HEADER_SIZE
        if header_address < 0 or address > self._capacity:
            raise AllocatorError(f"address {address} lies outside the arena")

        header = read_header(self._memory, header_address)
        if not header.is_valid:
            raise AllocatorError(
                "Trying to deallocate memory that was not allocated by this "
                "allocator. Alternatively memory corruption error"
            )
        full_size = header.size + HEADER_SIZE
        if header_address + full_size > self._capacity:
            raise AllocatorError(f"block at {address} overruns the arena")

        self._memory[header_address:header_address + full_size] = bytes(full_size)
        write_node(self._memory, header_address, full_size - NODE_SIZE, self._head)
        logger.debug("Moving head from %s to %d", self._head, header_address)
        self._head = header_address

        self._sort()
        self._coalesce()
        self._log_list()

    def _sort(self) -> None:
        blocks = sorted(self.free_blocks(), key=lambda block: block.address)
        followers = [block.address for block in blocks[1:]] + [None]
        for block, next_address in zip(blocks, followers):
            write_node(self._memory, block.address, block.size, next_address)
        self._head = blocks[0].address if blocks else None

    def _coalesce(self) -> None:
        current = self._head
        while current is not None:
            record = read_node(self._memory, current)
            following = record.next_address
            if following is None:
                break
            if following == current + record.size + NODE_SIZE:
                logger.debug("Merging %d and %d", current, following)
                following_record = read_node(self._memory, following)
                write_node(
                    self._memory,
                    current,
                    record.size + following_record.size + NODE_SIZE,
                    following_record.next_address,
                )
                self._memory[following:following + NODE_SIZE] = bytes(NODE_SIZE)
            else:
                current = following

    def _check_range(self, address: int, size: int) -> None:
        if address < 0 or size < 0 or address + size > self._capacity:
            raise AllocatorError(
                f"{size} bytes at {address} fall outside the arena"
            )

    def read(self, address: int, size: int) -> bytes:
        """Return ``size`` bytes of the arena starting at ``address``."""
        self._check_range(address, size)
        return bytes(self._memory[address:address + size])

    def write(self, address: int, data: bytes) -> None:
        """Copy ``data`` into the arena at ``address``."""
        self._check_range(address, len(data))
        self._memory[address:address + len(data)] = data