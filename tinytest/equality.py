"""
comparison predicates behind the assertion helpers.

three notions of equality live here:
  - strict: no coercion. numbers compare by value, other scalars need the same
    exact type, everything else compares by identity.
  - loose: numbers, bools and strings are coerced to numbers when their kinds
    differ, so 6 and "6" are equal. arrays and frames compare element-wise.
  - members: the key -> value view of a container or plain object that deep
    equality walks over.
"""
from __future__ import annotations

import math
import numbers
import re
import types
from collections.abc import Mapping, Sequence, Set
from typing import Any, Optional

import numpy as np
import pandas as pd

from .types import Members

_SCALARS = (str, bytes, bool, np.bool_, type(None))
_FRAMES = (pd.Series, pd.DataFrame)
_NOT_OBJECT_LIKE = (types.FunctionType, types.BuiltinFunctionType, types.MethodType, types.ModuleType, type)

# numeric string forms: plain decimals with an optional exponent, signed Infinity,
# unsigned 0x/0o/0b literals. anything else (underscores, inf, nan) is not a number
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INFINITY = re.compile(r"[+-]?Infinity")
_PREFIXED = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def is_number(value: Any) -> bool:
    """true for real and complex numbers (numpy scalars included), false for bools"""
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, np.bool_))


def is_primitive(value: Any) -> bool:
    return isinstance(value, _SCALARS) or is_number(value)


def is_object_like(value: Any) -> bool:
    """true for values deep equality can take apart: containers and plain objects"""
    return not is_primitive(value) and not isinstance(value, _NOT_OBJECT_LIKE)


def strictly_equal(expected: Any, actual: Any) -> bool:
    if expected is actual:
        return True
    if is_number(expected) and is_number(actual):
        return bool(expected == actual)
    if is_primitive(expected) or is_primitive(actual):
        return type(expected) is type(actual) and bool(expected == actual)
    return False


def _to_number(value: Any) -> Optional[Any]:
    """coerces a bool, number or string to a number; None for anything else"""
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if is_number(value):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if _DECIMAL.fullmatch(text) or _INFINITY.fullmatch(text):
            return float(text)
        if _PREFIXED.fullmatch(text):
            return int(text, 0)
        return math.nan
    return None


def loosely_equal(expected: Any, actual: Any) -> bool:
    if strictly_equal(expected, actual):
        return True
    if expected is None or actual is None:
        return False

    if is_primitive(expected) and is_primitive(actual):
        if type(expected) is type(actual):
            return False
        left, right = _to_number(expected), _to_number(actual)
        if left is None or right is None:
            return False
        return bool(left == right)

    # element-wise comparisons, reduced to a single verdict
    if isinstance(expected, _FRAMES):
        return bool(expected.equals(actual))
    if isinstance(actual, _FRAMES):
        return bool(actual.equals(expected))
    if isinstance(expected, np.ndarray) or isinstance(actual, np.ndarray):
        return bool(np.array_equal(expected, actual))
    try:
        return bool(expected == actual)
    except ValueError:
        # == handed back an array somewhere inside, so walk the members instead
        return _members_loosely_equal(expected, actual)


def _members_loosely_equal(expected: Any, actual: Any) -> bool:
    if type(expected) is not type(actual):
        return False
    left, right = own_members(expected), own_members(actual)
    if left is None or right is None or len(left) != len(right) or set(left) != set(right):
        return False
    return all(loosely_equal(left[key], right[key]) for key in left)


def _slot_names(cls: type) -> list:
    names = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ('__dict__', '__weakref__'))
    return names


def own_members(value: Any) -> Optional[Members]:
    """
    returns the own key -> value members of an object-like value, in its natural order.
    returns None for objects that expose no members at all (e.g. datetime), which
    callers should compare with == instead.
    """
    if isinstance(value, np.ndarray):
        return {i: value[i] for i in range(len(value))}
    if isinstance(value, _FRAMES):
        # keyed by position, labels may repeat; see labels_match
        return {i: item for i, (_, item) in enumerate(value.items())}
    if isinstance(value, Mapping):
        return {key: item for key, item in value.items()}
    if isinstance(value, Set):
        return {item: True for item in value}
    if isinstance(value, Sequence):
        return {i: value[i] for i in range(len(value))}

    members = dict(vars(value)) if hasattr(value, '__dict__') else {}
    for name in _slot_names(type(value)):
        if hasattr(value, name):
            members[name] = getattr(value, name)
    if not members and not hasattr(value, '__dict__'):
        return None
    return members


def labels_match(expected: Any, actual: Any) -> bool:
    """column labels of frames, index labels of series, compared in order; true for anything else"""
    if isinstance(expected, _FRAMES) and isinstance(actual, _FRAMES):
        return bool(expected.keys().equals(actual.keys()))
    return True
