"""
Test the maybe module
"""
import copy
import pickle
import pytest
from hypothesis import given, strategies as st
from pydantic import BaseModel
from fplus.basetypes import UnwrapError
from fplus.maybe import (
    Maybe, just, nothing, is_just, is_nothing, unsafe_get_just, just_with_default, lift_maybe,
    bind_maybe, and_then_maybe, justs, transform_and_keep_justs, show_maybe, raise_on_nothing,
)
from test_utils import assert_prop, and_then, not_, sqrt_to_maybe

def square(x: int) -> int:
    return x * x

class Config(BaseModel):
    retries: Maybe[int]

class TestConstruction:
    def test_just_and_nothing(self, just_42, nothing_) -> None:
        assert is_just(just_42)
        assert not is_nothing(just_42)
        assert is_nothing(nothing_)
        assert not is_just(nothing_)

    def test_just_none_is_present(self) -> None:
        assert is_just(just(None))
        assert just(None) != nothing()

    def test_equality(self, just_42) -> None:
        assert just_42 == just(42)
        assert just_42 != just(43)
        assert nothing() == nothing()
        assert just(1) != nothing()
        # Maybe never equals a bare value
        assert just(42) != 42

    def test_hash(self) -> None:
        assert len({just(1), just(1), nothing(), nothing()}) == 2

    def test_immutable(self, just_42) -> None:
        with pytest.raises(AttributeError):
            just_42._value = 43
        with pytest.raises(AttributeError):
            del just_42._value
        assert just_42 == just(42)

    def test_copy_and_pickle(self) -> None:
        m = just([1, 2])
        assert copy.copy(m) == m
        deep = copy.deepcopy(m)
        assert deep == m and unsafe_get_just(deep) is not unsafe_get_just(m)
        assert pickle.loads(pickle.dumps(m)) == m
        assert pickle.loads(pickle.dumps(nothing())) == nothing()

    def test_iteration(self) -> None:
        assert list(just(3)) == [3]
        assert list(nothing()) == []

    def test_type_check(self) -> None:
        with pytest.raises(TypeError, match="expected a Maybe"):
            is_just(42)

class TestAccess:
    def test_unsafe_get_just(self, just_42) -> None:
        assert unsafe_get_just(just_42) == 42

    def test_unsafe_get_just_on_nothing(self, nothing_) -> None:
        with pytest.raises(UnwrapError):
            unsafe_get_just(nothing_)
        # the accessor signals a broken precondition
        with pytest.raises(AssertionError):
            unsafe_get_just(nothing_)

    def test_just_with_default(self, just_42, nothing_) -> None:
        assert just_with_default(0, just_42) == 42
        assert just_with_default(0, nothing_) == 0
        default_to_42 = just_with_default(42)
        assert default_to_42(nothing_) == 42
        assert nothing_.get_with_default(7) == 7

    def test_raise_on_nothing(self, just_42) -> None:
        assert raise_on_nothing(ValueError("raised"), just_42) == 42
        with pytest.raises(ValueError, match="raised"):
            raise_on_nothing(ValueError("raised"), nothing())

class TestLift:
    def test_lift_maybe(self) -> None:
        assert lift_maybe(square, just(2)) == just(4)
        squared = lift_maybe(square)
        assert squared(just(3)) == just(9)
        assert squared(nothing()) == nothing()

    def test_lift_does_not_call_on_nothing(self) -> None:
        calls = []
        lift_maybe(calls.append, nothing())
        assert calls == []

    def test_method_form(self) -> None:
        assert just(2).map(square).map(str) == just("4")

    @given(st.integers())
    def test_lift_matches_plain_call(self, x) -> None:
        assert lift_maybe(square, just(x)) == just(square(x))

    @given(st.integers())
    def test_functor_identity(self, x) -> None:
        assert lift_maybe(lambda y: y, just(x)) == just(x)

class TestChaining:
    def test_and_then_maybe(self, sqrt_maybe) -> None:
        sqrt_3 = and_then_maybe(sqrt_maybe, sqrt_maybe, sqrt_maybe)
        assert sqrt_3(256) == just(2)
        sqrt_4 = and_then_maybe(sqrt_maybe, sqrt_maybe, sqrt_maybe, sqrt_maybe)
        assert sqrt_4(65536) == just(2)
        assert sqrt_3(-256) == nothing()
        assert sqrt_3(255) == nothing()

    def test_single_function_chain(self, sqrt_maybe) -> None:
        assert and_then_maybe(sqrt_maybe)(16) == sqrt_maybe(16)

    def test_first_function_takes_any_arguments(self, sqrt_maybe) -> None:
        def safe_div(a: int, b: int) -> Maybe[int]:
            return just(a // b) if b else nothing()
        chained = and_then_maybe(safe_div, sqrt_maybe)
        assert chained(32, 2) == just(4)
        assert chained(32, 0) == nothing()

    def test_short_circuit(self) -> None:
        calls = []
        def fail(x: int) -> Maybe[int]:
            calls.append("fail")
            return nothing()
        def step(x: int) -> Maybe[int]:
            calls.append("step")
            return just(x + 1)
        assert and_then_maybe(step, fail, step, step)(0) == nothing()
        assert calls == ["step", "fail"]

    def test_empty_chain_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            and_then_maybe()

    def test_bind_and_operator(self, sqrt_maybe) -> None:
        assert bind_maybe(just(16), sqrt_maybe) == just(4)
        assert bind_maybe(nothing(), sqrt_maybe) == nothing()
        assert just(256) >> sqrt_maybe >> sqrt_maybe >> sqrt_maybe == just(2)

    def test_step_must_return_maybe(self) -> None:
        with pytest.raises(TypeError):
            bind_maybe(just(1), lambda x: x + 1)

    @given(st.integers(min_value=0, max_value=10 ** 6))
    def test_left_identity(self, x) -> None:
        assert bind_maybe(just(x), sqrt_to_maybe) == sqrt_to_maybe(x)

    @given(st.integers())
    def test_right_identity(self, x) -> None:
        assert bind_maybe(just(x), just) == just(x)

class TestCollections:
    def test_justs(self) -> None:
        assert justs([just(1), nothing(), just(2)]) == [1, 2]
        assert justs([]) == []

    def test_transform_and_keep_justs(self, sqrt_maybe) -> None:
        assert transform_and_keep_justs(sqrt_maybe, [-3, 4, 16, -1]) == [2, 4]

    @given(st.lists(st.integers(min_value=-50, max_value=50)))
    def test_keep_justs_equals_justs_of_transform(self, xs) -> None:
        assert transform_and_keep_justs(sqrt_to_maybe, xs) == justs([sqrt_to_maybe(x) for x in xs])

class TestShow:
    def test_show_maybe(self, just_42, nothing_) -> None:
        assert show_maybe(just_42) == "Just 42"
        assert show_maybe(nothing_) == "Nothing"
        assert show_maybe(just("x")) == "Just x"

    def test_repr(self) -> None:
        assert repr(just("x")) == "Just('x')"
        assert repr(nothing()) == "Nothing"

class TestPydantic:
    def test_validate(self) -> None:
        assert Config(retries=3).retries == just(3)
        assert Config(retries=None).retries == nothing()
        assert Config(retries=just(5)).retries == just(5)

    def test_validate_json(self) -> None:
        assert Config.model_validate_json('{"retries": 2}').retries == just(2)
        assert Config.model_validate_json('{"retries": null}').retries == nothing()

    def test_dump(self) -> None:
        assert Config(retries=3).model_dump() == {"retries": 3}
        assert Config(retries=None).model_dump() == {"retries": None}

is_present = assert_prop(and_then(is_just, not_(is_nothing)), "is_present")
is_absent = assert_prop(not_(is_just), "is_absent")

@given(st.integers())
def test_just_is_present(x) -> None:
    is_present(just(x))

def test_nothing_is_absent() -> None:
    is_absent(nothing())
