"""Tests for chunk_by_size, the fixed-size chunking."""

import itertools

import pytest

import weblinq as wl


def test_partial_last_chunk() -> None:
    assert list(wl.chunk_by_size([1, 2, 3, 4, 5], 2)) == [(1, 2), (3, 4), (5,)]


def test_exact_multiple_has_no_trailing_empty_chunk() -> None:
    assert list(wl.chunk_by_size([1, 2, 3, 4], 2)) == [(1, 2), (3, 4)]


def test_empty_source_yields_nothing() -> None:
    assert list(wl.chunk_by_size([], 3)) == []


def test_source_shorter_than_size() -> None:
    assert list(wl.chunk_by_size("ab", 5)) == [("a", "b")]


def test_size_one() -> None:
    assert list(wl.chunk_by_size(range(3), 1)) == [(0,), (1,), (2,)]


@pytest.mark.parametrize("length", [0, 1, 2, 5, 6, 7, 12, 13])
@pytest.mark.parametrize("size", [1, 2, 3, 6, 20])
def test_chunk_lengths_and_concatenation(length: int, size: int) -> None:
    """Every chunk but the last is full, and chaining them rebuilds the source."""
    data = tuple(range(length))
    chunks = list(wl.chunk_by_size(data, size))
    assert tuple(itertools.chain.from_iterable(chunks)) == data
    assert all(len(c) == size for c in chunks[:-1])
    if chunks:
        assert 1 <= len(chunks[-1]) <= size


def test_is_lazy(tracked) -> None:
    """A full chunk is emitted without looking ahead in the source."""
    source = tracked(range(10))
    chunks = wl.chunk_by_size(source, 4)
    assert source.pulled == 0
    assert next(chunks) == (0, 1, 2, 3)
    assert source.pulled == 4
    assert next(chunks) == (4, 5, 6, 7)
    assert source.pulled == 8


def test_infinite_source() -> None:
    chunks = wl.chunk_by_size(itertools.count(), 2)
    assert list(itertools.islice(chunks, 3)) == [(0, 1), (2, 3), (4, 5)]


def test_exhausted_iterator_stays_exhausted(tracked) -> None:
    source = tracked([1, 2, 3])
    chunks = wl.chunk_by_size(source, 2)
    assert list(chunks) == [(1, 2), (3,)]
    assert next(chunks, None) is None
    assert source.pulled == 3


def test_source_error_propagates() -> None:
    def broken():
        yield 1
        raise OSError("connection reset")

    chunks = wl.chunk_by_size(broken(), 3)
    with pytest.raises(OSError, match="connection reset"):
        next(chunks)
    assert list(chunks) == []


class _Flaky:
    """Iterator failing once, then resuming with the remaining elements."""

    def __init__(self) -> None:
        self._steps = iter([1, OSError("timeout"), 2, 3, 4])

    def __iter__(self) -> "_Flaky":
        return self

    def __next__(self) -> int:
        step = next(self._steps)
        if isinstance(step, Exception):
            raise step
        return step


def test_error_finishes_iteration_without_dropping_elements() -> None:
    """After a source error no later chunk is produced, so no chunk can silently miss elements."""
    chunks = wl.chunk_by_size(_Flaky(), 3)
    with pytest.raises(OSError, match="timeout"):
        next(chunks)
    assert next(chunks, None) is None


def test_iterates_source_once(passes) -> None:
    """`iter()` is called a single time on the source."""
    source = passes([1, 2, 3])
    assert list(wl.chunk_by_size(source, 2)) == [(1, 2), (3,)]
    assert source.passes == 1


class TestValidation:
    """Arguments are checked when the operator is called, not on first iteration."""

    @pytest.mark.parametrize("size", [0, -1, -100])
    def test_non_positive_size(self, size: int) -> None:
        with pytest.raises(wl.InvalidArgumentError) as exc:
            wl.chunk_by_size([1, 2, 3], size)
        assert exc.value.name == "size"

    def test_index_like_size(self) -> None:
        """Objects implementing `__index__` are accepted as sizes."""

        class Two:
            def __index__(self) -> int:
                return 2

        assert list(wl.chunk_by_size([1, 2, 3], Two())) == [(1, 2), (3,)]  # type: ignore[arg-type]

    @pytest.mark.parametrize("size", [2.0, "2", True, None])
    def test_non_int_size(self, size: object) -> None:
        with pytest.raises(wl.InvalidArgumentError, match="expected an int"):
            wl.chunk_by_size([1, 2, 3], size)  # type: ignore[arg-type]

    def test_zero_size_on_empty_source(self) -> None:
        with pytest.raises(wl.InvalidArgumentError):
            wl.chunk_by_size([], 0)

    def test_none_source(self) -> None:
        with pytest.raises(wl.InvalidArgumentError) as exc:
            wl.chunk_by_size(None, 2)  # type: ignore[arg-type]
        assert exc.value.name == "source"


class TestIterMethod:
    """`Iter.chunk_by_size` wraps each chunk into a `Seq`."""

    def test_chunks_are_seqs(self) -> None:
        chunks = wl.Iter(range(5)).chunk_by_size(2).collect()
        assert chunks == (wl.Seq((0, 1)), wl.Seq((2, 3)), wl.Seq((4,)))

    def test_invalid_size_raises_on_call(self) -> None:
        with pytest.raises(wl.InvalidArgumentError):
            wl.Iter(range(5)).chunk_by_size(0)

    def test_flatten_round_trip(self) -> None:
        data = wl.Seq(tuple(range(11)))
        assert data.iter().chunk_by_size(3).flatten().collect() == data
