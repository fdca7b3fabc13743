"""Unit tests for the Option algebra."""

from __future__ import annotations

import copy
import pickle

import pytest

from optresult import (
    NOTHING,
    Err,
    Nothing,
    Ok,
    Some,
    UnwrapError,
    bind_lookup,
    from_nullable,
    is_nothing,
    is_some,
    nothing,
    some,
    then,
    then_some,
    try_get,
)

pytestmark = pytest.mark.unit


class TestVariants:
    """Construction, identity and equality of the two variants."""

    def test_some_is_immutable(self):
        opt = Some(1)
        with pytest.raises(AttributeError):
            opt.value = 2  # type: ignore[misc]

    def test_nothing_is_a_singleton(self):
        assert Nothing() is NOTHING
        assert nothing() is NOTHING
        assert copy.copy(NOTHING) is NOTHING
        assert copy.deepcopy(NOTHING) is NOTHING
        assert pickle.loads(pickle.dumps(NOTHING)) is NOTHING

    def test_structural_equality(self):
        assert Some(1) == Some(1)
        assert Some(1) != Some(2)
        assert NOTHING == NOTHING
        assert Some(None) != NOTHING
        assert Some(1) != Ok(1)

    def test_some_none_is_not_nothing(self):
        assert some(None) == Some(None)
        assert some(None).is_some()

    def test_hashable_when_payload_is_hashable(self):
        assert len({Some(1), Some(1), NOTHING, Nothing()}) == 2

    def test_repr(self):
        assert repr(Some("a")) == "Some('a')"
        assert repr(NOTHING) == "Nothing"

    def test_structural_pattern_matching(self):
        def describe(opt):
            match opt:
                case Some(value):
                    return f"some:{value}"
                case Nothing():
                    return "nothing"

        assert describe(Some(3)) == "some:3"
        assert describe(NOTHING) == "nothing"

    def test_iteration_and_truthiness(self):
        assert list(Some(0)) == [0]
        assert list(NOTHING) == []
        assert Some(0)
        assert Some(False)
        assert not NOTHING

    def test_queries(self):
        assert Some(1).is_some() and not Some(1).is_none()
        assert NOTHING.is_none() and not NOTHING.is_some()
        assert Some(1).contains(1)
        assert not Some(1).contains(2)
        assert not NOTHING.contains(None)
        assert is_some(Some(1)) and not is_some(NOTHING)
        assert is_nothing(NOTHING) and not is_nothing(Some(1))


class TestTransformations:
    def test_map(self):
        assert Some(2).map(lambda x: x * 10) == Some(20)
        assert NOTHING.map(lambda x: x * 10) is NOTHING

    def test_map_or(self):
        assert Some(2).map_or(0, lambda x: x + 1) == 3
        assert NOTHING.map_or(0, lambda x: x + 1) == 0

    def test_map_or_else_computes_default_lazily(self, recorder):
        default = recorder(returns=-1)
        assert Some(2).map_or_else(default, lambda x: x + 1) == 3
        assert not default.called
        assert NOTHING.map_or_else(default, lambda x: x + 1) == -1
        assert default.calls == [()]

    def test_and_then(self):
        half = lambda x: Some(x // 2) if x % 2 == 0 else NOTHING  # noqa: E731
        assert Some(4).and_then(half) == Some(2)
        assert Some(3).and_then(half) is NOTHING
        assert NOTHING.and_then(half) is NOTHING

    def test_and_then_short_circuits_on_nothing(self, recorder):
        f = recorder(returns=Some(1))
        assert NOTHING.and_then(f) is NOTHING
        assert not f.called

    def test_filter(self):
        assert Some(4).filter(lambda x: x > 3) == Some(4)
        assert Some(2).filter(lambda x: x > 3) is NOTHING
        assert NOTHING.filter(lambda x: True) is NOTHING

    def test_inspect_runs_only_on_some(self, recorder):
        seen = recorder()
        opt = Some(5)
        assert opt.inspect(seen) is opt
        assert NOTHING.inspect(seen) is NOTHING
        assert seen.calls == [(5,)]

    def test_flatten(self):
        assert Some(Some(1)).flatten() == Some(1)
        assert Some(NOTHING).flatten() is NOTHING
        assert NOTHING.flatten() is NOTHING
        assert Some(Some(Some(1))).flatten() == Some(Some(1))


class TestCombination:
    def test_or(self):
        assert Some(1).or_(Some(2)) == Some(1)
        assert NOTHING.or_(Some(2)) == Some(2)
        assert NOTHING.or_(NOTHING) is NOTHING

    def test_or_else_is_lazy(self, recorder):
        fallback = recorder(returns=Some(9))
        assert Some(1).or_else(fallback) == Some(1)
        assert not fallback.called
        assert NOTHING.or_else(fallback) == Some(9)

    def test_and(self):
        assert Some(1).and_(Some("b")) == Some("b")
        assert Some(1).and_(NOTHING) is NOTHING
        assert NOTHING.and_(Some("b")) is NOTHING

    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [
            (Some(1), Some(2), NOTHING),
            (Some(1), NOTHING, Some(1)),
            (NOTHING, Some(2), Some(2)),
            (NOTHING, NOTHING, NOTHING),
        ],
    )
    def test_xor(self, left, right, expected):
        assert left.xor(right) == expected

    def test_zip(self):
        assert Some(1).zip(Some("a")) == Some((1, "a"))
        assert Some(1).zip(NOTHING) is NOTHING
        assert NOTHING.zip(Some("a")) is NOTHING

    def test_zip_with(self):
        assert Some(2).zip_with(Some(3), lambda a, b: a * b) == Some(6)
        assert Some(2).zip_with(NOTHING, lambda a, b: a * b) is NOTHING
        assert NOTHING.zip_with(Some(3), lambda a, b: a * b) is NOTHING


class TestExtraction:
    def test_unwrap(self):
        assert Some(5).unwrap() == 5

    def test_unwrap_nothing_raises(self):
        with pytest.raises(UnwrapError, match="unwrap") as exc:
            NOTHING.unwrap()
        assert exc.value.container is NOTHING

    def test_expect_uses_message(self):
        assert Some(5).expect("missing") == 5
        with pytest.raises(UnwrapError, match="^config missing$"):
            NOTHING.expect("config missing")

    def test_unwrap_or(self):
        assert Some(5).unwrap_or(0) == 5
        assert NOTHING.unwrap_or(0) == 0

    def test_unwrap_or_else_is_lazy(self, recorder):
        fallback = recorder(returns=7)
        assert Some(5).unwrap_or_else(fallback) == 5
        assert not fallback.called
        assert NOTHING.unwrap_or_else(fallback) == 7

    def test_is_some_and_is_none_or(self):
        assert Some(4).is_some_and(lambda x: x > 3)
        assert not Some(2).is_some_and(lambda x: x > 3)
        assert not NOTHING.is_some_and(lambda x: True)
        assert Some(4).is_none_or(lambda x: x > 3)
        assert not Some(2).is_none_or(lambda x: x > 3)
        assert NOTHING.is_none_or(lambda x: False)

    def test_match_runs_exactly_one_branch(self, recorder):
        on_none = recorder(returns="none")
        assert Some(2).match(lambda v: f"some {v}", on_none) == "some 2"
        assert not on_none.called
        assert NOTHING.match(lambda v: f"some {v}", on_none) == "none"

    def test_to_nullable_round_trip(self):
        assert Some(3).to_nullable() == 3
        assert NOTHING.to_nullable() is None
        assert from_nullable(3) == Some(3)
        assert from_nullable(None) is NOTHING
        assert from_nullable(0) == Some(0)


class TestConversionToResult:
    def test_ok_or(self):
        assert Some(5).ok_or("e") == Ok(5)
        assert NOTHING.ok_or("e") == Err("e")

    def test_ok_or_else_builds_error_lazily(self, recorder):
        factory = recorder(returns="boom")
        assert Some(5).ok_or_else(factory) == Ok(5)
        assert not factory.called
        assert NOTHING.ok_or_else(factory) == Err("boom")

    def test_transpose(self):
        assert NOTHING.transpose() == Ok(NOTHING)
        assert Some(Ok(1)).transpose() == Ok(Some(1))
        assert Some(Err("e")).transpose() == Err("e")


class TestFactories:
    def test_then(self, recorder):
        factory = recorder(returns="v")
        assert then(False, factory) is NOTHING
        assert not factory.called
        assert then(True, factory) == Some("v")

    def test_then_some(self):
        assert then_some(True, 1) == Some(1)
        assert then_some(False, 1) is NOTHING

    def test_try_get(self):
        assert try_get(lambda: (True, 3)) == Some(3)
        assert try_get(lambda: (False, 3)) is NOTHING

    def test_try_get_swallows_getter_exceptions(self):
        def broken():
            raise KeyError("gone")

        assert try_get(broken) is NOTHING

    def test_bind_lookup(self):
        table = {"a": 1}
        lookup = bind_lookup(lambda k: (k in table, table.get(k)))
        assert lookup("a") == Some(1)
        assert lookup("b") is NOTHING
