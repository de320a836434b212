"""Custom exception hierarchy."""

from __future__ import annotations

import enum


class TickerError(Exception):
    """Base exception for the ticker package."""


class InvocationProblem(str, enum.Enum):
    ARGUMENT_COUNT = "argument-count"
    # Zero and unparseable text share this outcome.
    UNPARSED = "unparsed"


class InvalidInvocationError(TickerError):
    """Raised when the command line does not name a positive number of seconds."""

    def __init__(self, program: str, reason: InvocationProblem) -> None:
        super().__init__(f"{program}: invalid invocation ({reason.value})")
        self.program = program
        self.reason = reason
