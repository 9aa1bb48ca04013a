from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given, strategies as st

from fallible.option import NOTHING, Some
from fallible.result import Failure, Result, Success, failure, success

values = st.one_of(st.none(), st.integers(), st.text(), st.tuples(st.integers(), st.booleans()))


@given(values)
def test_success_queries(value: object) -> None:
    res: Result[str, object] = success(value)
    assert res.is_success()
    assert not res.is_failure()
    assert res.to_option() == Some(value)


@given(values)
def test_failure_queries(error: object) -> None:
    res: Result[object, int] = failure(error)
    assert res.is_failure()
    assert not res.is_success()
    assert res.to_option() is NOTHING


def test_static_and_module_constructors_agree() -> None:
    assert Result.success(1) == success(1) == Success(1)
    assert Result.failure("e") == failure("e") == Failure("e")


def test_equality_is_structural_per_variant() -> None:
    assert success(1) == success(1)
    assert failure("x") == failure("x")
    assert success(1) != failure(1)
    assert success(1) != success(2)
    assert hash(success((1, "a"))) == hash(success((1, "a")))
    assert len({success(1), success(1), failure(1)}) == 2


def test_instances_are_immutable() -> None:
    res: Result[str, int] = success(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        res.value = 4  # type: ignore[misc]
    assert res == success(3)


def test_variant_set_is_closed() -> None:
    with pytest.raises(TypeError):
        Result()
    with pytest.raises(TypeError):

        class Third(Result[str, int]):
            pass


def test_pattern_matching() -> None:
    def describe(res: Result[str, int]) -> str:
        match res:
            case Success(value):
                return f"ok:{value}"
            case Failure(error):
                return f"err:{error}"
        raise AssertionError("unreachable")

    assert describe(success(7)) == "ok:7"
    assert describe(failure("boom")) == "err:boom"


def test_explicitly_parameterised_construction() -> None:
    assert Success[str, int](3) == success(3)
    assert Failure[str, int]("x") == failure("x")


def test_variant_interface_is_abstract() -> None:
    assert {"map", "map_f", "flat_map", "or_", "or_else", "if_present"} <= Result.__abstractmethods__
    assert "map_failure" not in Result.__abstractmethods__
