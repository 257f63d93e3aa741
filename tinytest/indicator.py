import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

PASS_COLOR = '#99ff99'
FAIL_COLOR = '#ff9999'


class BackgroundIndicator:
    """
    turns the terminal background green when every test passed, red otherwise.
    painting is best-effort: with no terminal attached (piped output, ci, a closed
    stream) the color is only recorded, never raised about.
    """

    def __init__(self, stream: Optional[TextIO] = None, enabled: bool = True):
        self.stream = stream
        self.enabled = enabled
        self.color: Optional[str] = None
        self.painted = False

    def show(self, passed: bool) -> None:
        self.color = PASS_COLOR if passed else FAIL_COLOR
        self.painted = False
        if not self.enabled:
            return
        # resolved late so redirected stdout is honoured
        stream = self.stream if self.stream is not None else sys.stdout
        try:
            if stream is None or not stream.isatty():
                return
            stream.write(f"\033]11;{self.color}\007")
            stream.flush()
            self.painted = True
        except (OSError, ValueError, AttributeError):
            logger.debug("no surface to paint the background on", exc_info=True)
