"""
bare names for test files that would rather not qualify every call:

    from tinytest.shortcuts import *

    tests({
        'adds numbers': lambda: eq(6, add(2, 4)),
    })
"""
from .assertions import fail, assert_that, equals, strict_equals, deep_equals
from .runner import run

# short names for test files written against the terse api
assert_equals = equals
eq = equals
assert_strict_equals = strict_equals
assert_deep_equals = deep_equals
deep_eq = deep_equals
tests = run

# keeps pytest from collecting the alias as a test
tests.__test__ = False

__all__ = [
    "fail",
    "assert_that",
    "equals",
    "strict_equals",
    "deep_equals",
    "run",
    "assert_equals",
    "eq",
    "assert_strict_equals",
    "assert_deep_equals",
    "deep_eq",
    "tests"
]
