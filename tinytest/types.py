from typing import Any, Callable, Dict, Hashable, Mapping

TestProcedure = Callable[[], Any]
TestSuite = Mapping[str, TestProcedure]
Members = Dict[Hashable, Any]


class AssertionFailure(AssertionError):
    """raised by every assertion helper when a check does not hold"""
    pass


class RunSummary:
    """outcome of one runner pass, built once all procedures have been attempted"""

    def __init__(self, total: int, failures: int, duration_ms: float):
        self.total = total
        self.failures = failures
        self.duration_ms = duration_ms

    @property
    def passed(self) -> bool: return self.failures == 0

    @property
    def passed_count(self) -> int: return self.total - self.failures

    def __repr__(self) -> str:
        return f"RunSummary(total={self.total}, failures={self.failures}, duration_ms={self.duration_ms:.2f})"
