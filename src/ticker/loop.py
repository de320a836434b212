"""The emission loop."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, TextIO

from .config import DEFAULT_SETTINGS, TickerSettings
from .models import CounterState

logger = logging.getLogger(__name__)


def emit_second(
    current: int, stream: TextIO, sleep: Callable[[float], None], interval_s: float
) -> None:
    stream.write(f"{current}\n")
    stream.flush()
    sleep(interval_s)


def run_loop(
    target: int,
    stream: TextIO | None = None,
    sleep: Callable[[float], None] | None = None,
    settings: TickerSettings = DEFAULT_SETTINGS,
) -> CounterState:
    """Print ``0`` .. ``target - 1``, one line per interval.

    The sleep follows every line, the last one included, and does not account
    for time spent writing.
    """
    state = CounterState(target=target)
    out = stream if stream is not None else sys.stdout
    pause = sleep if sleep is not None else time.sleep
    logger.debug("emitting %d lines every %.3fs", target, settings.interval_s)
    while not state.done:
        emit_second(state.current, out, pause, settings.interval_s)
        state.advance()
    logger.debug("loop finished after %d lines", state.current)
    return state
