from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from pathlib import Path
from typing import FrozenSet, Optional

from ytclip.features.time_parsing.domain.models import TimeSpec, exact_precision

MIN_SPEED = 0.5
MAX_SPEED = 4.0
DEFAULT_SPEED = 1.0

# Speeds this close to 1.0 are treated as unchanged
SPEED_TOLERANCE = 0.01

@dataclass(frozen=True)
class HostPolicy:
    """
    How strictly the source URL is checked.
    With check_host disabled only emptiness is rejected.
    """
    check_host: bool = True
    extra_hosts: FrozenSet[str] = field(default_factory=frozenset)

@dataclass(frozen=True)
class ClipRequest:
    """
    A validated clip request. Built once by validate(), never mutated.
    """
    url: str
    video_id: str
    start: TimeSpec
    end: TimeSpec
    output: Optional[Path] = None
    speed: float = DEFAULT_SPEED

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"End time ({self.end}) must be after start time ({self.start})")
        if not MIN_SPEED <= self.speed <= MAX_SPEED:
            raise ValueError(f"Speed out of range: {self.speed}")

    @property
    def duration(self) -> Decimal:
        with localcontext() as ctx:
            ctx.prec = exact_precision(self.start.seconds, self.end.seconds)
            return self.end.seconds - self.start.seconds

    @property
    def changes_speed(self) -> bool:
        return abs(self.speed - 1.0) > SPEED_TOLERANCE
