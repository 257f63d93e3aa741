import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

_FALSY = ('0', 'false', 'no', 'off')


@dataclass
class RunConfig:
    """configuration for a test run"""
    log_level: int = logging.INFO
    use_color: bool = True
    show_indicator: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RunConfig':
        """
        builds a config from environment variables.
        NO_COLOR (non-empty) turns off colored output and the background indicator,
        TINYTEST_LOG_LEVEL takes a level name, TINYTEST_INDICATOR=0/false/no/off
        turns off the indicator only.
        """
        env = os.environ if environ is None else environ

        no_color = bool(env.get('NO_COLOR'))
        indicator = env.get('TINYTEST_INDICATOR', '').strip().lower() not in _FALSY

        level = logging.INFO
        level_name = env.get('TINYTEST_LOG_LEVEL', '').strip()
        if level_name:
            level = logging.getLevelName(level_name.upper())
            if not isinstance(level, int):
                raise ValueError(f"unknown log level: {level_name}")

        return cls(log_level=level, use_color=not no_color, show_indicator=indicator and not no_color)
