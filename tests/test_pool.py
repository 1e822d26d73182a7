import asyncio

import pytest

from nfs_mamont.allocator.pool import Allocator, Pool

BUFFER_SIZE = 13
BUFFER_COUNT = 15
CAPACITY = BUFFER_SIZE * BUFFER_COUNT


def chunks(data, size):
    return [data[i:i + size] for i in range(0, len(data), size)]


def assert_whole_and_zeroed(slice_, count):
    contents = [bytes(view) for view in slice_.iter()]
    assert len(contents) == count
    assert all(chunk == bytes(len(chunk)) for chunk in contents)


@pytest.mark.asyncio
@pytest.mark.parametrize("alloc_size", range(1, CAPACITY + 1))
async def test_allocate(alloc_size):
    pool = Pool(BUFFER_SIZE, BUFFER_COUNT)
    slice_ = await pool.allocate(alloc_size)
    verify = bytes((u + 1) % 256 for u in range(alloc_size))

    for writing in (True, False):
        iterator = slice_.iter_mut()
        for verify_chunk in chunks(verify, BUFFER_SIZE):
            view = next(iterator)
            assert len(view) == len(verify_chunk)
            if writing:
                view[:] = verify_chunk
            else:
                assert bytes(view) == verify_chunk
        assert next(iterator, None) is None
        assert next(iterator, None) is None

    slice_.release()
    assert_whole_and_zeroed(await pool.allocate(CAPACITY), BUFFER_COUNT)


@pytest.mark.asyncio
async def test_reclaiming():
    pool = Pool(BUFFER_SIZE, BUFFER_COUNT)

    for _ in range(5):
        slice_ = await pool.allocate(CAPACITY)
        assert_whole_and_zeroed(slice_, BUFFER_COUNT)

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(pool.allocate(1), timeout=0.12)

        slice_.release()

        with await pool.allocate(CAPACITY) as again:
            assert_whole_and_zeroed(again, BUFFER_COUNT)


@pytest.mark.asyncio
async def test_released_data_is_zeroed():
    pool = Pool(4, 1)
    with await pool.allocate(4) as slice_:
        next(slice_.iter_mut())[:] = b"\xff\xff\xff\xff"
    again = await pool.allocate(4)
    assert [bytes(v) for v in again.iter()] == [bytes(4)]


@pytest.mark.asyncio
@pytest.mark.parametrize("size", [0, CAPACITY + 1])
async def test_allocate_invalid_size_raises(size):
    pool = Pool(BUFFER_SIZE, BUFFER_COUNT)
    with pytest.raises(ValueError):
        await pool.allocate(size)


@pytest.mark.parametrize("size, count", [(0, 1), (1, 0)])
def test_pool_requires_positive_dimensions(size, count):
    with pytest.raises(ValueError):
        Pool(size, count)


def test_pool_capacity():
    assert Pool(BUFFER_SIZE, BUFFER_COUNT).capacity == 195


def test_allocator_is_abstract():
    with pytest.raises(TypeError):
        Allocator()