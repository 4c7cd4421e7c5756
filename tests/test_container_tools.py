"""
Test the container_tools module
"""
import logging
import operator
import pytest
from hypothesis import given, strategies as st
from fplus.container_tools import (
    keep_if, drop_if, without, keep_if_with_idx, drop_if_with_idx, keep_by_idx, drop_by_idx, keep_idxs,
    drop_idxs, partition, group, group_by, group_on, group_globally, group_globally_by,
    run_length_encode, run_length_decode, trim, trim_left, trim_right, trim_by, trim_token,
    trim_token_left, trim_token_right, take_while, drop_while, repeat, replicate, infixes, inits, tails,
    fill_left, fill_right, find_first_by, find_last_by, find_first_idx_by, find_last_idx_by,
    find_first_idx, find_last_idx, find_all_idxs_by, find_all_idxs_of, find_all_instances_of_token,
    find_all_instances_of_token_non_overlapping, find_first_instance_of_token, is_infix_of,
    is_subsequence_of, split_at_idx, split_at_idxs, split_every, split_by, split, split_by_token,
    replace_if, replace_elems, replace_tokens, count_if, count, count_occurrences, any_by, any, none_by,
    none, minimum, maximum, minimum_by, maximum_by, minimum_idx, maximum_idx, minimum_idx_by,
    maximum_idx_by, mean, median, transpose, sample, transform_with_idx, transform_and_concat, generate,
    generate_by_idx, iterate,
)
from fplus.container_common import concat, join
from fplus.maybe import just, nothing
from test_utils import assert_prop, implies

def is_even(x: int) -> bool:
    return x % 2 == 0

def is_odd(x: int) -> bool:
    return not is_even(x)

class TestFiltering:
    def test_keep_drop(self, xs) -> None:
        assert keep_if(is_even, xs) == [2, 2, 2]
        assert drop_if(is_even, xs) == [1, 3]
        assert without(2, xs) == [1, 3]
        assert keep_if(str.isupper, "aBcD") == "BD"

    def test_with_idx(self, xs) -> None:
        assert keep_if_with_idx(lambda i, x: (i + x) % 2 == 0, xs) == [2, 3, 2]
        assert drop_if_with_idx(lambda i, x: (i + x) % 2 == 0, xs) == [1, 2]
        assert keep_by_idx(is_even, xs) == [1, 2, 2]
        assert drop_by_idx(is_even, xs) == [2, 3]

    @pytest.mark.parametrize("idxs", [[1, 3], [3, 1], [1, 1, 3], [1, 3, 7]])
    def test_keep_idxs(self, xs, idxs) -> None:
        assert keep_idxs(idxs, xs) == [2, 3]

    def test_drop_idxs(self, xs) -> None:
        assert drop_idxs([1, 3], xs) == [1, 2, 2]

    def test_partition(self, xs) -> None:
        assert partition(is_even, xs) == ([2, 2, 2], [1, 3])
        assert partition(is_even, (x for x in xs)) == ([2, 2, 2], [1, 3])

    @given(st.lists(st.integers()))
    def test_partition_splits_everything(self, ys) -> None:
        kept, dropped = partition(is_even, ys)
        assert sorted(kept + dropped) == sorted(ys)

class TestGrouping:
    def test_group(self, xs) -> None:
        assert group(xs) == [[1], [2, 2], [3], [2]]
        assert group_globally(xs) == [[1], [2, 2, 2], [3]]
        assert group("aab") == ["aa", "b"]
        assert group([]) == []

    def test_group_by(self) -> None:
        assert group_by(lambda a, b: abs(a - b) <= 1, [1, 2, 5, 6, 6, 9]) == [[1, 2], [5, 6, 6], [9]]
        assert group_on(is_even, [2, 4, 1, 3, 6]) == [[2, 4], [1, 3], [6]]
        assert group_globally_by(lambda a, b: a % 3 == b % 3, [1, 2, 4, 5, 7]) == [[1, 4, 7], [2, 5]]

    def test_run_length(self) -> None:
        encoded = run_length_encode([1, 2, 2, 2, 2, 3, 3, 2])
        assert encoded == [(1, 1), (4, 2), (2, 3), (1, 2)]
        assert run_length_decode(encoded) == [1, 2, 2, 2, 2, 3, 3, 2]

    @given(st.lists(st.integers(min_value=0, max_value=3)))
    def test_run_length_decode_inverts_encode(self, ys) -> None:
        assert run_length_decode(run_length_encode(ys)) == ys

    @given(st.lists(st.integers(min_value=0, max_value=3)))
    def test_group_concat(self, ys) -> None:
        assert concat(group(ys)) == ys

class TestTrimming:
    def test_trim(self) -> None:
        padded = [0, 2, 4, 5, 6, 7, 8, 0, 0]
        assert trim(0, padded) == [2, 4, 5, 6, 7, 8]
        assert trim_left(0, padded) == [2, 4, 5, 6, 7, 8, 0, 0]
        assert trim_right(0, padded) == [0, 2, 4, 5, 6, 7, 8]
        assert trim_by(is_even, [0, 2, 3, 4]) == [3]
        assert trim(0, [0, 0]) == []

    def test_trim_token(self) -> None:
        assert trim_token_left([0, 1, 2], [0, 1, 2, 0, 1, 2, 7, 5, 9]) == [7, 5, 9]
        assert trim_token_right([0, 1, 2], [7, 5, 9, 0, 1, 2, 0, 1, 2]) == [7, 5, 9]
        assert trim_token([0, 1], [0, 1, 7, 8, 9, 0, 1]) == [7, 8, 9]
        assert trim_token("ab", "ababxab") == "x"
        assert trim_token([], [1, 2]) == [1, 2]

    def test_take_drop_while(self, xs) -> None:
        assert take_while(is_odd, xs) == [1]
        assert drop_while(is_odd, xs) == [2, 2, 3, 2]
        assert take_while(is_even, xs) == []

class TestBuilding:
    def test_repeat_replicate(self) -> None:
        assert repeat(2, [1, 2]) == [1, 2, 1, 2]
        assert repeat(3, "ab") == "ababab"
        assert repeat(0, [1]) == []
        assert replicate(3, 1) == [1, 1, 1]
        assert replicate(2, [1]) == [[1], [1]]

    def test_infixes(self, xs) -> None:
        assert infixes(3, xs) == [[1, 2, 2], [2, 2, 3], [2, 3, 2]]
        assert infixes(6, xs) == []
        assert infixes(2, "abc") == ["ab", "bc"]
        with pytest.raises(ValueError):
            infixes(0, xs)

    def test_inits_tails(self) -> None:
        assert inits([0, 1, 2]) == [[], [0], [0, 1], [0, 1, 2]]
        assert tails([0, 1, 2]) == [[0, 1, 2], [1, 2], [2], []]
        assert inits("") == [""]

    def test_fill(self) -> None:
        assert fill_left(0, 6, [1, 2, 3, 4]) == [0, 0, 1, 2, 3, 4]
        assert fill_left(" ", 6, "12") == "    12"
        assert fill_right(0, 3, [1]) == [1, 0, 0]
        assert fill_left(0, 2, [1, 2, 3]) == [1, 2, 3]

    def test_generation(self, xs) -> None:
        counter = iter(range(10))
        assert generate(lambda: next(counter), 3) == [0, 1, 2]
        assert generate_by_idx(lambda i: i * i, 3) == [0, 1, 4]
        assert transform_with_idx(operator.add, xs) == [1, 3, 4, 6, 6]
        assert transform_and_concat(replicate(2), [1, 2]) == [1, 1, 2, 2]
        assert transform_and_concat(str.upper, ["ab", "c"]) == "ABC"

    @pytest.mark.parametrize("size, expected", [
        (0, []),
        (1, [3]),
        (2, [3, 6]),
        (5, [3, 6, 12, 24, 48]),
    ])
    def test_iterate(self, size, expected) -> None:
        assert iterate(lambda x: x * 2, size, 3) == expected

class TestSearching:
    def test_find_by(self, xs) -> None:
        assert find_first_by(lambda x: x == 3, xs) == just(3)
        assert find_first_by(lambda x: x == 4, xs) == nothing()
        assert find_last_by(is_odd, xs) == just(3)
        assert find_first_idx_by(lambda x: x == 2, xs) == just(1)
        assert find_last_idx_by(lambda x: x == 2, xs) == just(4)
        assert find_last_idx_by(lambda x: x == 4, xs) == nothing()

    def test_find_idx(self, xs) -> None:
        assert find_first_idx(2, xs) == just(1)
        assert find_last_idx(2, xs) == just(4)
        assert find_first_idx(9, xs) == nothing()
        assert find_all_idxs_by(is_even, xs) == [1, 2, 4]
        assert find_all_idxs_of("h", "oh, ha!") == [1, 4]

    def test_find_tokens(self) -> None:
        text = "Plus, Plus and FunctionalPlus Plus"
        assert find_all_instances_of_token("Plus", text) == [0, 6, 25, 30]
        assert find_all_instances_of_token("xx", "bxxxxc") == [1, 2, 3]
        assert find_all_instances_of_token_non_overlapping("xx", "xxxx") == [0, 2]
        assert find_all_instances_of_token([], []) == [0]
        assert find_all_instances_of_token([], [1]) == [0, 1]
        assert find_first_instance_of_token("haha", "oh, hahaha!") == just(4)
        assert find_first_instance_of_token("hihi", "oh, hahaha!") == nothing()

    def test_infix_subsequence(self, xs) -> None:
        assert is_infix_of([], [])
        assert is_infix_of([2, 3], xs)
        assert not is_infix_of([1, 3], xs)
        assert is_subsequence_of([1, 3], xs)
        assert not is_subsequence_of([3, 1], xs)
        assert is_subsequence_of([], xs)

class TestSplitting:
    def test_split_at(self, xs) -> None:
        assert split_at_idx(2, xs) == ([1, 2], [2, 3, 2])
        assert split_at_idx(0, "ab") == ("", "ab")
        assert split_at_idxs([1, 3], xs) == [[1], [2, 2], [3, 2]]
        assert split_at_idxs([3, 1], xs) == [[1], [2, 2], [3, 2]]
        with pytest.raises(ValueError):
            split_at_idx(6, xs)

    def test_split_every(self) -> None:
        assert split_every(2, [1, 2, 3, 4, 5]) == [[1, 2], [3, 4], [5]]
        assert split_every(2, "abc") == ["ab", "c"]

    def test_split(self, xs) -> None:
        assert split(3, True, xs) == [[1, 2, 2], [2]]
        assert split(2, True, [2]) == [[], []]
        assert split(2, False, [2]) == []
        assert split_by(is_even, True, [1, 3, 2, 2, 5, 5, 3, 6, 7, 9]) == [[1, 3], [], [5, 5, 3], [7, 9]]
        assert split_by(is_even, False, [1, 3, 2, 2, 5, 5, 3, 6, 7, 9]) == [[1, 3], [5, 5, 3], [7, 9]]

    def test_split_by_token(self) -> None:
        assert split_by_token([0, 0], True, [1, 0, 0, 2, 0, 0, 0, 3]) == [[1], [2], [0, 3]]
        assert split_by_token(", ", False, "a, b, , c") == ["a", "b", "c"]
        assert split_by_token([], False, [1, 2]) == [[1], [2]]
        assert split_by_token([], True, []) == [[], []]
        assert split_by_token([], True, [1, 2]) == [[], [1], [2], []]

    @given(st.lists(st.integers(min_value=0, max_value=2)))
    def test_split_then_join(self, ys) -> None:
        assert join([0], split(0, True, ys)) == ys

class TestReplacing:
    def test_replace(self, xs) -> None:
        assert replace_elems(2, 5, xs) == [1, 5, 5, 3, 5]
        assert replace_if(is_odd, 0, xs) == [0, 2, 2, 0, 2]
        assert replace_tokens("123", "_", "--123----123123") == "--_----__"
        assert replace_tokens([1, 2], [9], [1, 2, 3, 1, 2]) == [9, 3, 9]

class TestSummaries:
    def test_counting(self, xs) -> None:
        assert count(2, xs) == 3
        assert count_if(is_odd, xs) == 2
        assert count_occurrences(xs) == {1: 1, 2: 3, 3: 1}

    def test_any_none(self, xs, empty_list) -> None:
        assert any_by(is_even, xs)
        assert not any_by(is_even, empty_list)
        assert none_by(lambda x: x > 3, xs)
        assert any([0, 1]) and not any([0, 0])
        assert none([0, False])

    def test_extrema(self, xs) -> None:
        assert minimum(xs) == 1
        assert maximum(xs) == 3
        assert minimum_by(operator.gt, xs) == 3
        assert maximum_by(operator.gt, xs) == 1
        assert minimum_idx(xs) == 0
        assert maximum_idx(xs) == 3
        assert minimum_idx_by(lambda a, b: len(a) < len(b), ["ab", "c", "d"]) == 1
        assert maximum_idx_by(lambda a, b: len(a) < len(b), ["ab", "cd", "d"]) == 0
        with pytest.raises(ValueError):
            minimum([])

    def test_mean_median(self, xs) -> None:
        assert mean(xs) == 2
        assert median([3, 5]) == 4
        assert median([3, 4]) == 3.5
        assert median(xs) == 2
        assert median([9, 3, 5]) == 5
        with pytest.raises(ValueError):
            median([])

    @given(st.lists(st.integers(), min_size=1))
    def test_extrema_agree_with_builtins(self, ys) -> None:
        assert minimum(ys) == min(ys)
        assert maximum(ys) == max(ys)
        assert ys[minimum_idx(ys)] == min(ys)

class TestMisc:
    def test_transpose(self) -> None:
        assert transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]
        assert transpose(["ab", "cd"]) == ["ac", "bd"]
        assert transpose([]) == []
        with pytest.raises(ValueError):
            transpose([[1, 2], [3]])

    def test_sample(self, xs) -> None:
        picked = sample(3, xs)
        assert len(picked) == 3
        assert all(count(x, picked) <= count(x, xs) for x in picked)

    def test_sample_too_many(self, xs, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="fplus.container_tools"):
            picked = sample(10, xs)
        assert sorted(picked) == sorted(xs)
        assert "asked for 10" in caplog.text

transpose_twice = assert_prop(
    implies(lambda rows: len(rows) > 0 and len(rows[0]) > 0, lambda rows: transpose(transpose(rows)) == rows),
    "transpose is an involution on rectangles",
)

@given(st.integers(min_value=0, max_value=4).flatmap(
    lambda width: st.lists(st.lists(st.integers(), min_size=width, max_size=width), max_size=4)))
def test_transpose_twice(rows) -> None:
    transpose_twice(rows)
