"""Runtime settings for the ticker workload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

ULONG_MAX: Final[int] = 2**64 - 1


@dataclass(frozen=True, slots=True)
class TickerSettings:
    interval_s: float = 1.0
    max_target: int = ULONG_MAX
    log_level: str = "WARNING"
    usage_template: str = "Usage: {program} <seconds to sleep>"

    def usage(self, program: str) -> str:
        return self.usage_template.format(program=program)


DEFAULT_SETTINGS: Final[TickerSettings] = TickerSettings()
