from __future__ import annotations

from typing import Any, Hashable, List, Set, Tuple

import numpy as np

from .equality import is_object_like, labels_match, loosely_equal, own_members, strictly_equal
from .types import AssertionFailure


# --- simple assertions ---

def fail(message: str) -> None:
    """unconditionally fails the current test."""
    raise AssertionFailure(f"fail(): {message}")


def assert_that(value: Any, message: str = "assertion failed") -> None:
    """fails when value is falsy under the usual python truthiness rules."""
    if not value:
        raise AssertionFailure(f"assert_that(): {message}")


def equals(expected: Any, actual: Any) -> None:
    """fails unless the two values are equal once coerced, so 6 and "6" pass."""
    if not loosely_equal(expected, actual):
        raise AssertionFailure(f'equals() "{expected}" != "{actual}"')


def strict_equals(expected: Any, actual: Any) -> None:
    """fails unless the two values are equal without any coercion."""
    if not strictly_equal(expected, actual):
        raise AssertionFailure(f'strict_equals() "{expected}" !== "{actual}"')


# --- deep equality ---

def deep_equals(expected: Any, actual: Any) -> None:
    """
    structural comparison of two values.
    object-like values must have the same type and exactly the same set of own keys
    (dict keys, sequence indices, set elements or instance attributes), and every
    key must hold deep-equal values on both sides. the first mismatch found is
    raised as is, so the message names the innermost differing values and the
    key path that leads to them.
    """
    _compare(expected, actual, [], set())


def _format_path(path: List[Hashable]) -> str:
    return ''.join(f"[{key!r}]" for key in path)


def _mismatch(message: str, path: List[Hashable]) -> AssertionFailure:
    if path:
        message = f"{message} at {_format_path(path)}"
    return AssertionFailure(message)


def _unwrap(value: Any) -> Any:
    # 0-d arrays carry a single scalar
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value.item()
    return value


def _compare(expected: Any, actual: Any, path: List[Hashable], active: Set[Tuple[int, int]]) -> None:
    expected, actual = _unwrap(expected), _unwrap(actual)

    if strictly_equal(expected, actual):
        return

    if (not is_object_like(expected) or not is_object_like(actual)
            or type(expected) is not type(actual)):
        raise _mismatch(f'deep_equals() "{expected}" != "{actual}"', path)

    # a pair already being compared further up is assumed equal, so cycles terminate
    pair = (id(expected), id(actual))
    if pair in active:
        return

    expected_members = own_members(expected)
    actual_members = own_members(actual)
    if expected_members is None or actual_members is None:
        if not loosely_equal(expected, actual):
            raise _mismatch(f'deep_equals() "{expected}" != "{actual}"', path)
        return

    if not labels_match(expected, actual):
        raise _keys_mismatch(list(expected.keys()), list(actual.keys()), path)

    expected_keys = list(expected_members)
    actual_keys = list(actual_members)
    if len(expected_keys) != len(actual_keys) or set(expected_keys) != set(actual_keys):
        raise _keys_mismatch(expected_keys, actual_keys, path)

    active.add(pair)
    try:
        for key in expected_keys:
            _compare(expected_members[key], actual_members[key], path + [key], active)
    finally:
        active.discard(pair)


def _join(keys: List[Hashable]) -> str:
    return ','.join(str(key) for key in keys)


def _keys_mismatch(expected_keys: List[Hashable], actual_keys: List[Hashable], path: List[Hashable]) -> AssertionFailure:
    return _mismatch(f'deep_equals() keys don\'t match: "[{_join(expected_keys)}]" != "[{_join(actual_keys)}]"', path)
