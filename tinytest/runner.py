import asyncio
import inspect
import logging
import time
from functools import wraps
from typing import Callable, Dict, Optional

from .config import RunConfig
from .console import configure_logging
from .indicator import BackgroundIndicator
from .types import RunSummary, TestProcedure, TestSuite

logger = logging.getLogger(__name__)


def defer(callback: Callable[[], None]) -> None:
    """
    runs callback once the current synchronous pass is over: posted to the running
    event loop when there is one, otherwise called straight away.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        callback()
        return
    loop.call_soon(callback)


class Runner:
    """runs a suite of named zero-argument procedures, one after another, counting failures"""

    def __init__(self, config: Optional[RunConfig] = None, logger: Optional[logging.Logger] = None,
                 indicator: Optional[BackgroundIndicator] = None):
        self.config = config or RunConfig.from_env()
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.indicator = indicator if indicator is not None else BackgroundIndicator(enabled=self.config.show_indicator)
        self.failures = 0
        self.summary: Optional[RunSummary] = None

    def run(self, tests: TestSuite) -> None:
        self.failures = 0
        self.summary = None
        start_time = time.perf_counter()

        total = 0
        # snapshot: procedures may edit the suite they run in
        for name, action in list(tests.items()):
            total += 1
            self._run_one(name, action)

        duration = (time.perf_counter() - start_time) * 1000
        summary = RunSummary(total, self.failures, duration)
        self.summary = summary
        defer(lambda: self._report(summary))

    def _run_one(self, name: str, action: TestProcedure) -> None:
        try:
            result = action()
        except Exception as e:
            self.failures += 1
            self.logger.error("Test: %s FAILED %s", name, e, exc_info=True)
            return

        if inspect.iscoroutine(result):
            # not awaited: whatever it would do later cannot fail this run
            result.close()
            self.logger.warning("Test: %s returned a coroutine, it was not awaited", name)
        self.logger.info("Test: %s OK", name)

    def _report(self, summary: RunSummary) -> None:
        level = logging.INFO if summary.passed else logging.WARNING
        self.logger.log(level, "ran %d tests in %.2fms, passed %d, failed %d",
                        summary.total, summary.duration_ms, summary.passed_count, summary.failures)
        self.indicator.show(summary.passed)


def run(tests: TestSuite, config: Optional[RunConfig] = None,
        indicator: Optional[BackgroundIndicator] = None) -> None:
    """runs tests and reports through the console log and the background indicator."""
    config = config or RunConfig.from_env()
    configure_logging(config)
    Runner(config=config, indicator=indicator).run(tests)


# --- registration ---

class Registry:
    """collects procedures registered with a decorator so a module can run them all at once"""

    def __init__(self):
        self.tests: Dict[str, TestProcedure] = {}

    def test(self, name: str) -> Callable:
        """decorator to register a function as a test case."""

        def decorator(func: Callable) -> Callable:
            if name in self.tests:
                logger.warning("Test: %s registered twice, keeping the latest", name)
            self.tests[name] = func

            @wraps(func)
            def wrapper(*args, **kwargs):
                return func(*args, **kwargs)

            return wrapper

        return decorator

    def run(self, title: str = "test run", config: Optional[RunConfig] = None,
            indicator: Optional[BackgroundIndicator] = None) -> None:
        """runs every registered test, then forgets them so a later run starts clean."""
        config = config or RunConfig.from_env()
        configure_logging(config)
        logger.info("--- starting: %s ---", title)
        tests, self.tests = self.tests, {}
        Runner(config=config, indicator=indicator).run(tests)


_registry = Registry()


def test(name: str) -> Callable:
    """registers the decorated function with the default registry."""
    return _registry.test(name)


# keeps pytest from collecting the decorator itself
test.__test__ = False


def run_registered(title: str = "test run", config: Optional[RunConfig] = None,
                   indicator: Optional[BackgroundIndicator] = None) -> None:
    _registry.run(title, config=config, indicator=indicator)
