import pytest

from arborlib.heap import HEADER_SIZE, AllocationType, HeapAllocator, HeapError

SIZE = 1024


def _check_layout(heap: HeapAllocator) -> list:
    blocks = list(heap.blocks())
    offset = 0
    previous_size = 0
    for block in blocks[:-1]:
        assert block.offset == offset
        assert block.size > 0
        assert block.prev_allocation_size == previous_size
        previous_size = block.size
        offset += block.size
    end = blocks[-1]
    assert end.offset == heap.size - HEADER_SIZE
    assert end.size == 0
    assert end.type is AllocationType.RESERVED
    assert end.prev_allocation_size == previous_size
    return blocks


def test_new_heap_layout():
    heap = HeapAllocator(SIZE)
    blocks = _check_layout(heap)
    assert len(blocks) == 2
    assert blocks[0].type is AllocationType.FREE
    assert blocks[0].size == SIZE - HEADER_SIZE


def test_too_small_heap_rejected():
    with pytest.raises(ValueError):
        HeapAllocator(HEADER_SIZE)


def test_allocations_are_consecutive():
    heap = HeapAllocator(SIZE)
    first = heap.allocate(100)
    second = heap.allocate(50)
    assert first == HEADER_SIZE
    assert second == first + 100 + HEADER_SIZE
    blocks = _check_layout(heap)
    assert [b.type for b in blocks] == [
        AllocationType.RESERVED,
        AllocationType.RESERVED,
        AllocationType.FREE,
        AllocationType.RESERVED,
    ]


def test_out_of_memory():
    heap = HeapAllocator(SIZE)
    with pytest.raises(HeapError):
        heap.allocate(SIZE)


def test_exact_fit_is_refused():
    heap = HeapAllocator(SIZE)
    with pytest.raises(HeapError):
        heap.allocate(SIZE - 2 * HEADER_SIZE)
    assert heap.allocate(SIZE - 2 * HEADER_SIZE - 1) == HEADER_SIZE


def test_free_merges_with_following_block():
    heap = HeapAllocator(SIZE)
    offset = heap.allocate(100)
    heap.deallocate(offset)
    blocks = _check_layout(heap)
    assert len(blocks) == 2
    assert blocks[0].type is AllocationType.FREE
    assert blocks[0].size == SIZE - HEADER_SIZE


def test_free_merges_with_preceding_block_and_reuses_it():
    heap = HeapAllocator(SIZE)
    a = heap.allocate(100)
    b = heap.allocate(100)
    c = heap.allocate(100)
    heap.deallocate(a)
    heap.deallocate(b)
    blocks = _check_layout(heap)
    assert blocks[0].type is AllocationType.FREE
    assert blocks[0].size == 2 * (100 + HEADER_SIZE)
    assert blocks[1].offset == c - HEADER_SIZE
    assert blocks[1].type is AllocationType.RESERVED
    assert heap.allocate(150) == HEADER_SIZE


def test_total_size_preserved_after_churn():
    heap = HeapAllocator(SIZE)
    offsets = [heap.allocate(n) for n in (10, 40, 70, 5)]
    for offset in offsets[::2]:
        heap.deallocate(offset)
    blocks = _check_layout(heap)
    assert sum(b.size for b in blocks) == SIZE - HEADER_SIZE


def test_double_free_rejected():
    heap = HeapAllocator(SIZE)
    a = heap.allocate(10)
    heap.allocate(10)
    heap.deallocate(a)
    with pytest.raises(HeapError):
        heap.deallocate(a)


def test_unknown_offset_rejected():
    heap = HeapAllocator(SIZE)
    heap.allocate(10)
    with pytest.raises(HeapError):
        heap.deallocate(HEADER_SIZE + 3)
    with pytest.raises(HeapError):
        heap.deallocate(SIZE)


def test_negative_request_rejected():
    heap = HeapAllocator(SIZE)
    with pytest.raises(ValueError):
        heap.allocate(-1)