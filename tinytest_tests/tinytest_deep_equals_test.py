from dataclasses import dataclass
from datetime import date

import numpy as np
import pandas as pd

from tinytest import test, run_registered, assert_that, deep_equals, AssertionFailure


def failure_of(action) -> str:
    """runs action and returns the failure message, or '' when it passed"""
    try:
        action()
    except AssertionFailure as e:
        return str(e)
    return ''


def passes(expected, actual) -> bool:
    return failure_of(lambda: deep_equals(expected, actual)) == ''


@dataclass
class Point:
    x: int
    y: int


class Slotted:
    __slots__ = ('a', 'b')

    def __init__(self, a, b):
        self.a = a
        self.b = b


# --- records ---

@test("equal dicts are deep equal")
def test_equal_dicts():
    assert_that(passes({'a': 1, 'b': 2}, {'a': 1, 'b': 2}), "identical records should match")


@test("a differing value fails")
def test_differing_value():
    message = failure_of(lambda: deep_equals({'a': 1, 'b': 2}, {'a': 1, 'b': 3}))
    assert_that(message == "deep_equals() \"2\" != \"3\" at ['b']", f"unexpected message: {message!r}")


@test("an extra key fails on the key count")
def test_extra_key():
    message = failure_of(lambda: deep_equals({'a': 1}, {'a': 1, 'b': 2}))
    assert_that(message == 'deep_equals() keys don\'t match: "[a]" != "[a,b]"', f"unexpected message: {message!r}")


@test("same key count with different keys still fails")
def test_same_size_different_keys():
    message = failure_of(lambda: deep_equals({'a': 1, 'b': 2}, {'a': 1, 'c': 2}))
    assert_that(message.startswith("deep_equals() keys don't match"), f"unexpected message: {message!r}")


@test("key order does not matter for dicts")
def test_key_order():
    assert_that(passes({'a': 1, 'b': 2}, {'b': 2, 'a': 1}), "dict key order is irrelevant")


# --- recursion ---

@test("nested records are compared recursively")
def test_nested_equal():
    assert_that(passes({'a': {'x': 1}}, {'a': {'x': 1}}), "nested records should match")


@test("the innermost mismatch is reported")
def test_nested_mismatch():
    message = failure_of(lambda: deep_equals({'a': {'x': 1}}, {'a': {'x': 2}}))
    assert_that(message == "deep_equals() \"1\" != \"2\" at ['a']['x']", f"unexpected message: {message!r}")


@test("mixed nesting of lists and dicts")
def test_mixed_nesting():
    expected = {'users': [{'id': 1, 'tags': ['a', 'b']}, {'id': 2, 'tags': []}]}
    actual = {'users': [{'id': 1, 'tags': ['a', 'b']}, {'id': 2, 'tags': []}]}
    assert_that(passes(expected, actual), "deeply nested structures should match")
    actual['users'][1]['tags'].append('c')
    message = failure_of(lambda: deep_equals(expected, actual))
    assert_that("keys don't match" in message and "['users'][1]['tags']" in message,
                f"unexpected message: {message!r}")


@test("self-referencing structures terminate")
def test_cycles():
    left, right = [1], [1]
    left.append(left)
    right.append(right)
    assert_that(passes(left, right), "equal cyclic lists should match")


# --- sequences and sets ---

@test("equal lists are deep equal")
def test_equal_lists():
    assert_that(passes([1, 2, 3], [1, 2, 3]), "identical lists should match")
    assert_that(not passes([1, 2, 3], [1, 2]), "lengths differ")
    assert_that(not passes([1, 2, 3], [1, 3, 2]), "order matters for lists")


@test("a list and a tuple are different kinds")
def test_list_vs_tuple():
    assert_that(not passes([1, 2], (1, 2)), "list and tuple should not match")


@test("sets compare by membership")
def test_sets():
    assert_that(passes({1, 2, 3}, {3, 2, 1}), "equal sets should match")
    assert_that(not passes({1, 2}, {1, 3}), "different members should fail")


# --- primitives ---

@test("primitives must be strictly equal")
def test_primitives():
    assert_that(passes(1, 1), "same ints")
    assert_that(passes(1, 1.0), "int and float of the same value")
    assert_that(passes("a", "a"), "same strings")
    assert_that(passes(None, None), "None")
    assert_that(not passes(1, "1"), "no coercion inside deep equality")
    assert_that(not passes(True, 1), "bools are not numbers")
    assert_that(not passes(None, {}), "None is not an object")
    assert_that(not passes({'a': 1}, "a"), "object versus primitive")


@test("nan is not deep equal to nan")
def test_nan():
    assert_that(not passes(float('nan'), float('nan')), "two nans never match")


@test("functions are only equal to themselves")
def test_functions():
    def f(): pass
    def g(): pass
    assert_that(passes(f, f), "same function")
    assert_that(not passes(f, g), "different functions")


# --- objects ---

@test("plain objects compare by their attributes")
def test_objects():
    assert_that(passes(Point(1, 2), Point(1, 2)), "equal points")
    assert_that(failure_of(lambda: deep_equals(Point(1, 2), Point(1, 3))).endswith("at ['y']"), "y differs")


@test("slotted objects compare by their slots")
def test_slots():
    assert_that(passes(Slotted(1, [2]), Slotted(1, [2])), "equal slotted objects")
    assert_that(not passes(Slotted(1, [2]), Slotted(1, [3])), "slot values differ")


@test("objects without members fall back to ==")
def test_opaque_objects():
    assert_that(passes(date(2024, 1, 1), date(2024, 1, 1)), "equal dates")
    assert_that(not passes(date(2024, 1, 1), date(2024, 1, 2)), "different dates")


# --- arrays and frames ---

@test("numpy arrays compare element by element")
def test_numpy_arrays():
    assert_that(passes(np.array([[1, 2], [3, 4]]), np.array([[1, 2], [3, 4]])), "equal arrays")
    assert_that(not passes(np.array([[1, 2], [3, 4]]), np.array([[1, 2], [3, 5]])), "one element differs")
    assert_that(not passes(np.array([1, 2]), np.array([1, 2, 3])), "shapes differ")
    assert_that(passes(np.array(5), np.array(5)), "0-d arrays unwrap to scalars")


@test("pandas frames compare column by column")
def test_pandas_frames():
    left = pd.DataFrame({'a': [1, 2], 'b': ['x', 'y']})
    assert_that(passes(left, left.copy()), "equal frames")
    assert_that(not passes(left, pd.DataFrame({'a': [1, 2], 'c': ['x', 'y']})), "column names differ")
    assert_that(not passes(left, pd.DataFrame({'a': [1, 2], 'b': ['x', 'z']})), "a cell differs")


@test("repeated pandas labels are compared by position")
def test_pandas_repeated_labels():
    left = pd.Series([1, 2], index=['a', 'a'])
    assert_that(passes(left, left.copy()), "equal series with repeated labels")
    assert_that(not passes(left, pd.Series([9, 2], index=['a', 'a'])), "the first 'a' differs")
    frame = pd.DataFrame([[1, 2]], columns=['x', 'x'])
    assert_that(passes(frame, frame.copy()), "equal frames with repeated columns")
    assert_that(not passes(frame, pd.DataFrame([[9, 2]], columns=['x', 'x'])), "the first 'x' column differs")


@test("pandas labels must match in order")
def test_pandas_label_order():
    message = failure_of(lambda: deep_equals(pd.Series([1, 2], index=['a', 'b']), pd.Series([1, 2], index=['b', 'a'])))
    assert_that(message == 'deep_equals() keys don\'t match: "[a,b]" != "[b,a]"', f"unexpected message: {message!r}")


if __name__ == "__main__":
    run_registered(title="tinytest deep equality")
