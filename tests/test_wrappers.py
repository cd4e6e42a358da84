"""Tests for the Iter, Seq and Vec wrappers, Option, and display settings."""

import pytest

import weblinq as wl


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(wl.Iter(()))
    assert _check_slots(wl.Seq(()))
    assert _check_slots(wl.Vec[int].new())
    assert _check_slots(wl.Some(42))
    assert _check_slots(wl.NONE)
    assert _check_slots(wl.group_adjacent((), lambda a, b: True))
    assert _check_slots(wl.chunk_by_size((), 1))


def test_next_distinguishes_none_from_exhaustion() -> None:
    """`Iter.next` keeps None elements and reports the end as NONE."""
    it = wl.Iter([None])
    first = it.next()
    assert first.is_some()
    assert first.unwrap() is None
    assert it.next().is_none()


def test_unwrap_none_raises() -> None:
    with pytest.raises(wl.OptionUnwrapError, match="called `unwrap` on a `None`"):
        wl.NONE.unwrap()


def test_expect_none_raises_with_message() -> None:
    with pytest.raises(wl.OptionUnwrapError, match="no page left"):
        wl.Iter(()).next().expect("no page left")


def test_iter_is_single_use() -> None:
    it = wl.Iter((1, 2, 3))
    assert it.length() == 3
    assert it.length() == 0


def test_seq_equality() -> None:
    assert wl.Seq((1, 2)) == wl.Seq((1, 2))
    assert wl.Seq((1, 2)) == (1, 2)
    assert wl.Seq((1, 2)) != wl.Seq((2, 1))
    assert wl.Vec([1, 2]) == wl.Seq((1, 2))
    assert wl.Vec([1, 2]) == [1, 2]
    assert hash(wl.Seq((1, 2))) == hash((1, 2))


def test_into_and_inspect() -> None:
    seen: list[int] = []
    total = wl.Seq((1, 2, 3)).inspect(lambda s: seen.append(s.length())).into(sum)
    assert total == 6
    assert seen == [3]


class TestRepr:
    """Reprs are driven by the process-wide display settings."""

    @pytest.fixture(autouse=True)
    def _restore_config(self):
        cfg = wl.get_config()
        previous = cfg.max_items
        yield
        cfg.max_items = previous

    def test_seq_repr(self) -> None:
        assert repr(wl.Seq((1, 2, 3))) == "Seq(1, 2, 3)"
        assert repr(wl.Seq((2,))) == "Seq(2,)"
        assert repr(wl.Seq(())) == "Seq()"
        assert repr(wl.Vec(["a"])) == "Vec('a',)"

    def test_nested_repr(self) -> None:
        chunks = wl.Iter(range(3)).chunk_by_size(2).collect()
        assert repr(chunks) == "Seq(Seq(0, 1), Seq(2,))"

    def test_truncated_repr(self) -> None:
        wl.get_config().update(max_items=3)
        assert repr(wl.Seq(tuple(range(10)))) == "Seq(0, 1, 2, ...)"
        assert repr(wl.Seq((1, 2, 3))) == "Seq(1, 2, 3)"

    def test_truncated_to_one_item(self) -> None:
        wl.get_config().update(max_items=1)
        assert repr(wl.Vec([1, 2])) == "Vec(1, ...)"

    @pytest.mark.parametrize("value", [0, -1, 1.5, True])
    def test_invalid_max_items(self, value: object) -> None:
        with pytest.raises(wl.InvalidArgumentError) as exc:
            wl.get_config().update(max_items=value)  # type: ignore[arg-type]
        assert exc.value.name == "max_items"
        assert wl.get_config().max_items != value

    def test_get_config_is_shared(self) -> None:
        assert wl.get_config() is wl.get_config()


def test_none_option_type_is_not_exported() -> None:
    """Callers compare against the `NONE` singleton, the class stays internal."""
    assert "NoneOption" not in wl.__all__
    assert wl.NONE.is_none()
