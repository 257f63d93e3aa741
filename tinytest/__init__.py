r"""
 _   _             _            _
| |_(_)_ __  _   _| |_ ___  ___| |_
| __| | '_ \| | | | __/ _ \/ __| __|
| |_| | | | | |_| | ||  __/\__ \ |_
 \__|_|_| |_|\__, |\__\___||___/\__|
             |___/

run a dict of named zero-argument tests, log what failed, turn the background
green or red. that's it.
"""

# expose the runner
from .runner import Runner, Registry, run, test, run_registered

# expose the assertions
from .assertions import fail, assert_that, equals, strict_equals, deep_equals

# expose supporting types and settings
from .types import AssertionFailure, RunSummary
from .config import RunConfig
from .indicator import BackgroundIndicator, PASS_COLOR, FAIL_COLOR

# define what `import *` does
__all__ = [
    "Runner",
    "Registry",
    "run",
    "test",
    "run_registered",
    "fail",
    "assert_that",
    "equals",
    "strict_equals",
    "deep_equals",
    "AssertionFailure",
    "RunSummary",
    "RunConfig",
    "BackgroundIndicator",
    "PASS_COLOR",
    "FAIL_COLOR"
]
