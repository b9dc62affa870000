"""Fixed-size block pool with a free list, a manager that hands out runs of blocks,
and an allocator that sizes requests by item count."""

from __future__ import annotations

HEADER_SIZE = 8
"""Bytes at the start of every block that record how many blocks a run spans."""

DEFAULT_BLOCK_SIZE = 4096
DEFAULT_BLOCK_COUNT = 500_000

_SIZE_MAX = 2**64 - 1


class MemoryPool:
    """``block_count`` blocks of ``block_size`` bytes, addressed from 0.

    Free blocks form a singly linked list starting at ``free_block``. An
    allocated run of blocks is identified by the payload address of its first
    block, which lies ``HEADER_SIZE`` bytes past the block start.
    """

    def __init__(self, block_size, block_count):
        if block_size <= HEADER_SIZE:
            raise ValueError(f"block size must exceed {HEADER_SIZE} bytes, got {block_size}")
        if block_count < 1:
            raise ValueError(f"block count must be positive, got {block_count}")
        self.block_size = block_size
        self.block_count = block_count
        self.free_block = 0
        # Explicit links; a block without one points at the block after it.
        self._next: dict[int, int | None] = {}
        self._runs: dict[int, int] = {}

    @property
    def capacity(self):
        """Total size of the pool in bytes."""
        return self.block_size * self.block_count

    def next_block(self, index):
        """Return the block that follows ``index`` in the free list, or None."""
        if index in self._next:
            return self._next[index]
        following = index + 1
        return following if following < self.block_count else None

    def link(self, index, following):
        """Make ``following`` the successor of block ``index`` in the free list."""
        self._next[index] = following

    def payload_address(self, index):
        """Address of the payload of block ``index``."""
        return index * self.block_size + HEADER_SIZE

    def block_index(self, address):
        """Index of the block whose payload starts at ``address``."""
        return (address - HEADER_SIZE) // self.block_size

    def claim(self, index, count):
        """Record that a run of ``count`` blocks starting at ``index`` is in use."""
        self._runs[index] = count

    def release(self, index):
        """Forget the run starting at ``index`` and return its length in blocks."""
        try:
            return self._runs.pop(index)
        except KeyError:
            raise ValueError(f"no allocation starts at block {index}") from None

    def is_valid(self, address):
        """True if ``address`` is the payload address of some block in the pool."""
        if address is None or isinstance(address, bool) or not isinstance(address, int):
            return False
        if address < 0 or address >= self.capacity:
            return False
        return (address - HEADER_SIZE) % self.block_size == 0


class MemoryManager:
    """Allocates contiguous runs of pool blocks from the free list."""

    _instance: MemoryManager | None = None

    def __init__(self, block_size=DEFAULT_BLOCK_SIZE, block_count=DEFAULT_BLOCK_COUNT):
        self.pool = MemoryPool(block_size, block_count)

    @classmethod
    def instance(cls):
        """The process-wide manager, created with the default sizes on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def allocate(self, size):
        """Reserve room for ``size`` bytes and return the payload address.

        Raises MemoryError when the pool is full or no run of contiguous free
        blocks is long enough.
        """
        if size < 0:
            raise ValueError(f"cannot allocate a negative size: {size}")
        pool = self.pool
        if pool.free_block is None:
            raise MemoryError("Memory pool is full")

        total = size + HEADER_SIZE
        count = -(-total // pool.block_size)
        current = start = pool.free_block
        run = 1
        while run < count:
            if current is None:
                raise MemoryError(
                    f"Not enough contiguous free blocks, needed {count} for {total} bytes"
                )
            following = pool.next_block(current)
            if following is not None and following == current + 1:
                run += 1
            else:
                run = 1
                start = following
            current = following

        pool.free_block = pool.next_block(current)
        pool.claim(start, count)
        return pool.payload_address(start)

    def deallocate(self, address):
        """Return the run whose payload starts at ``address`` to the free list."""
        pool = self.pool
        if not pool.is_valid(address):
            raise ValueError(f"Pointer is not valid: {address!r}")
        index = pool.block_index(address)
        count = pool.release(index)
        for offset in range(count - 1):
            pool.link(index + offset, index + offset + 1)
        pool.link(index + count - 1, pool.free_block)
        pool.free_block = index


class PoolAllocator:
    """Allocates arrays of fixed-size items through a MemoryManager."""

    def __init__(self, item_size, manager=None):
        if item_size <= 0:
            raise ValueError(f"item size must be positive, got {item_size}")
        self.item_size = item_size
        self.manager = manager if manager is not None else MemoryManager.instance()

    def allocate(self, n):
        """Reserve room for ``n`` items and return the payload address."""
        if n < 0:
            raise ValueError(f"cannot allocate a negative count: {n}")
        if n > _SIZE_MAX // self.item_size:
            raise OverflowError(f"array of {n} items of {self.item_size} bytes is too large")
        return self.manager.allocate(n * self.item_size)

    def deallocate(self, address, n):
        """Release an allocation made by ``allocate``; ``n`` is not needed."""
        self.manager.deallocate(address)