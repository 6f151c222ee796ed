import struct

import pytest

from arena_alloc.layout import (
    HEADER_SIZE,
    MAGIC_NUMBER,
    NODE_SIZE,
    Header,
    NodeRecord,
    read_header,
    read_node,
    write_header,
    write_node,
)


def test_header_round_trip():
    memory = bytearray(64)
    write_header(memory, 8, 20)
    header = read_header(memory, 8)
    assert header == Header(MAGIC_NUMBER, 20)
    assert header.is_valid


def test_write_header_returns_address_after_block():
    memory = bytearray(128)
    end = write_header(memory, 4, 30)
    assert end == 4 + HEADER_SIZE + 30


def test_header_starts_with_magic_number():
    memory = bytearray(32)
    write_header(memory, 0, 7)
    (magic,) = struct.unpack_from("<Q", memory, 0)
    assert magic == 123456789


def test_zeroed_memory_has_invalid_header():
    memory = bytearray(32)
    header = read_header(memory, 0)
    assert header.magic == 0
    assert not header.is_valid


def test_node_round_trip_with_next():
    memory = bytearray(64)
    write_node(memory, 16, 40, 48)
    assert read_node(memory, 16) == NodeRecord(48, 40)


def test_node_round_trip_without_next():
    memory = bytearray(64)
    write_node(memory, 0, 48, None)
    record = read_node(memory, 0)
    assert record.next_address is None
    assert record.size == 48


def test_node_and_header_share_size_field_position():
    memory = bytearray(32)
    write_header(memory, 0, 99)
    assert read_node(memory, 0).size == read_header(memory, 0).size


@pytest.mark.parametrize("address", [-1, 60])
def test_out_of_bounds_node_raises(address):
    memory = bytearray(64)
    with pytest.raises(IndexError):
        read_node(memory, address)
    with pytest.raises(IndexError):
        write_node(memory, address, 1, None)


def test_out_of_bounds_header_raises():
    memory = bytearray(NODE_SIZE)
    with pytest.raises(IndexError):
        read_header(memory, 1)
    with pytest.raises(IndexError):
        write_header(memory, 1, 0)