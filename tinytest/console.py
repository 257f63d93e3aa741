import logging
from typing import Optional

from .config import RunConfig


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class ConsoleFormatter(logging.Formatter):
    """plain console lines, tinted by outcome when color is on"""

    def __init__(self, use_color: bool = True, fmt: str = '%(message)s'):
        super().__init__(fmt)
        self.use_color = use_color

    def _tint(self, record: logging.LogRecord) -> Optional[str]:
        if record.levelno >= logging.ERROR:
            return _c.fail
        if record.levelno >= logging.WARNING:
            return _c.warn
        message = record.getMessage()
        if message.endswith(' OK'):
            return _c.ok
        if message.startswith('--- '):
            return _c.info
        return None

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        tint = self._tint(record) if self.use_color else None
        if tint is None:
            return text
        # only the first line is tinted, tracebacks stay readable
        head, sep, rest = text.partition('\n')
        return f"{tint}{head}{_c.reset}{sep}{_c.grey}{rest}{_c.reset}" if rest else f"{tint}{head}{_c.reset}"


def configure_logging(config: Optional[RunConfig] = None) -> None:
    """
    console logging for a run, the equivalent of logging.basicConfig(format='%(message)s').
    leaves an already configured root logger alone.
    """
    config = config or RunConfig.from_env()
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(ConsoleFormatter(use_color=config.use_color))
    logging.basicConfig(level=config.log_level, handlers=[handler])
