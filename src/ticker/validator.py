"""Command-line argument validation."""

from __future__ import annotations

import logging
import re
from typing import Final

from .config import DEFAULT_SETTINGS, TickerSettings
from .exceptions import InvalidInvocationError, InvocationProblem
from .models import Invocation

logger = logging.getLogger(__name__)

UNPARSED: Final[int] = 0

# C isspace whitespace, optional plus sign, then the leading run of ASCII digits.
_LEADING_DIGITS = re.compile(r"[ \t\n\v\f\r]*\+?([0-9]+)")


def parse_seconds(text: str, settings: TickerSettings = DEFAULT_SETTINGS) -> int:
    """Convert ``text`` to a count of seconds.

    Follows ``strtoul`` base-10 conventions: characters after the leading
    digits are ignored. Text that does not start with digits, a negative
    number, or a value above ``settings.max_target`` returns ``UNPARSED``,
    the same value a literal ``"0"`` produces. Callers cannot tell the two
    apart.
    """
    match = _LEADING_DIGITS.match(text)
    if match is None:
        return UNPARSED
    value = int(match.group(1))
    if value > settings.max_target:
        return UNPARSED
    return value


def validate_invocation(
    invocation: Invocation, settings: TickerSettings = DEFAULT_SETTINGS
) -> int:
    if invocation.count != 1:
        raise InvalidInvocationError(invocation.program, InvocationProblem.ARGUMENT_COUNT)
    target = parse_seconds(invocation.arguments[0], settings)
    if target == UNPARSED:
        raise InvalidInvocationError(invocation.program, InvocationProblem.UNPARSED)
    logger.debug("validated target of %d seconds", target)
    return target
