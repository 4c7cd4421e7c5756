"""
Test configuration and fixtures.
"""

# tests/conftest.py
import pytest
from typing import TypeVar, Callable, Any

from fplus.maybe import just, nothing
from fplus.result import ok, error
from test_utils import sqrt_to_maybe, sqrt_to_result

T = TypeVar('T')
TestFn = Callable[[Any], bool]

def fixture(obj: T) -> Callable[[], T]:
    @pytest.fixture
    def _fixture() -> T:
        return obj
    return _fixture

# Common test objects that will be available to all tests
test_objects = {
    "xs": [1, 2, 2, 3, 2],
    "empty_list": [],
    "str_abcd": "abcd",
    "text": "Hi,\nI am a\r\n***strange***\n\rstring.",
    "untrimmed": "  \n \t   foo  ",
    "map_one_two": {1: "one", 2: "two"},
    "just_42": just(42),
    "nothing_": nothing(),
    "ok_42": ok(42),
    "error_fail": error("fail"),
}

# Register fixtures globally
globals().update({
    name: fixture(obj)
    for name, obj in test_objects.items()
})


@pytest.fixture
def sqrt_maybe() -> Callable[[int], Any]:
    return sqrt_to_maybe


@pytest.fixture
def sqrt_result() -> Callable[[int], Any]:
    return sqrt_to_result
