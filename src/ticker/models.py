"""Data models for ticker."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass(frozen=True, slots=True)
class Invocation:
    program: str
    arguments: List[str] = field(default_factory=list)

    @classmethod
    def from_argv(cls, argv: Sequence[str], program: str | None = None) -> "Invocation":
        if not argv:
            return cls(program=program or "ticker")
        name = program or os.path.basename(argv[0]) or "ticker"
        return cls(program=name, arguments=list(argv[1:]))

    @property
    def count(self) -> int:
        return len(self.arguments)


class CounterState:
    """Counter owned by the emission loop. ``target`` is fixed at creation."""

    __slots__ = ("_target", "current")

    def __init__(self, target: int, current: int = 0) -> None:
        if target <= 0:
            raise ValueError(f"target must be positive, got {target}")
        self._target = target
        self.current = current

    def __repr__(self) -> str:
        return f"CounterState(target={self._target}, current={self.current})"

    @property
    def target(self) -> int:
        return self._target

    @property
    def done(self) -> bool:
        return self.current == self._target

    def advance(self) -> None:
        if self.done:
            raise ValueError(f"counter already reached target {self._target}")
        self.current += 1
