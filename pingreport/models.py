from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Tuple


class Outcome(Enum):
    """Verdict for a single probed host."""
    FULL = auto()
    PARTIAL = auto()
    NONE = auto()            # indecisive, total responses != probe count
    NONE_MEASURED = auto()   # decisive, but no replies at all


class Color(Enum):
    """Console colors a report line can be printed in."""
    NEUTRAL = auto()
    STRONG_POSITIVE = auto()
    WARNING = auto()
    STRONG_NEGATIVE = auto()


@dataclass
class ExtractionResult:
    """Result of the pre-scan over all input records."""
    identifiers: List[str] = field(default_factory=list)
    invalid_lines: List[str] = field(default_factory=list)
    width: int = 0


@dataclass(frozen=True)
class ProbeResult:
    """Represents the outcome of one fixed-count ping against a host."""
    identifier: str
    success_count: int
    failure_count: int
    transcript: Tuple[str, ...] = ()

    @property
    def total_responses(self) -> int:
        return self.success_count + self.failure_count


@dataclass(frozen=True)
class Classification:
    """Display label, color and tally contribution of a probe result."""
    outcome: Outcome
    label: str
    color: Color
    responded: bool


@dataclass
class RunSummary:
    """Running tally of the hosts processed in one run."""
    total_hosts: int = 0
    hosts_responded: int = 0

    @property
    def all_responded(self) -> bool:
        return self.hosts_responded == self.total_hosts
