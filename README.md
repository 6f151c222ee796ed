# arena-alloc

`arena_alloc` simulates a first-fit free-list allocator inside one fixed-size
`bytearray`. Addresses are offsets into that arena. Every allocation gets a
16-byte header that holds a magic number and the block's size. Freed blocks go
back into the free list. The list is kept in address order, and neighbouring
free blocks are merged into one.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
from arena_alloc.free_list import FreeList, AllocatorError, OutOfMemoryError

arena = FreeList(4096)

a = arena.allocate(100)        # offset of a zeroed 100-byte block
arena.write(a, b"hello")
assert arena.read(a, 5) == b"hello"

for block in arena.free_blocks():
    print(block)               # FreeBlock(address=..., size=...)

arena.deallocate(a)            # the block returns to the list and is merged
```

### `arena_alloc.free_list`

- `FreeList(capacity)` creates a zeroed arena of `capacity` bytes. The arena
  starts with one free block at address 0. Its size is `capacity` minus the
  16-byte node. A capacity below 16 raises `ValueError`. The `capacity`
  property returns the size of the arena.
- `allocate(size)` takes the first free block that has room for `size` bytes
  plus a header and a new node, which is 32 bytes more than `size`. It returns
  the offset of the usable, zeroed memory. It returns `None` when `size` is 0.
  A negative size raises `ValueError`. A size larger than the capacity raises
  `AllocatorError`. If no free block is large enough, it raises
  `OutOfMemoryError`, which is a subclass of both `AllocatorError` and
  `MemoryError`.
- `deallocate(address)` checks the header in front of `address`. If the header
  is missing, is damaged, or its block runs past the end of the arena, it
  raises `AllocatorError`. Otherwise it zeroes the block, puts it back in the
  free list, sorts the list by address and merges adjacent free blocks.
- `free_blocks()` returns the free blocks in list order, as `FreeBlock(address,
  size)` values.
- `read(address, size)` returns bytes from the arena, and
  `write(address, data)` copies bytes into it. Both raise `AllocatorError` when
  the range falls outside the arena.

The allocator writes its diagnostics at `DEBUG` level to the
`arena_alloc.free_list` logger. These cover head moves, merges and the whole
free list after each operation.

### `arena_alloc.layout`

This module holds the binary layout. Both records are two little-endian
64-bit fields. It provides:

- `MAGIC_NUMBER`, `HEADER_SIZE` and `NODE_SIZE`. `NULL_ADDRESS` is the value
  stored as "no next node".
- `Header(magic, size)`, with an `is_valid` property, and
  `NodeRecord(next_address, size)`. `next_address` is `None` for the last
  node.
- `write_header(memory, address, size)` returns the address just past the
  block. `read_header(memory, address)`, `write_node(memory, address, size,
  next_address)` and `read_node(memory, address)` complete the set. Each one
  raises `IndexError` when the record would not fit in `memory`.

## Demo

```
arena-alloc-demo
arena-alloc-demo --capacity 8192 --verbose
```

The demo creates an arena, by default 4,096,000 bytes. It allocates three
1000-byte blocks A, B and C, and frees A and B. It then allocates D and frees
it, and prints each address along the way. `-v` / `--verbose` also prints the
allocator's diagnostics, including the free list after each step. If the
arena is too small, the demo prints `error: ...` to standard error and exits
with status 1.

## Limitations

The arena is an ordinary Python `bytearray`, not real process memory. The
package offers no resizing of blocks and no alignment control, and a
`FreeList` is not safe to share between threads without outside locking.