import re
from decimal import Decimal, localcontext
from typing import List

from ..domain.errors import EmptyOrNegativeTime, InvalidTimeFormat, TimeComponentOutOfRange
from ..domain.models import TimeSpec, exact_precision

ALLOWED_CHARS = re.compile(r"^[0-9.:]+$")
INTEGER = re.compile(r"^\d+$")
DECIMAL = re.compile(r"^\d+(\.\d+)?$|^\.\d+$")

# Multipliers for [seconds], [minutes, seconds], [hours, minutes, seconds]
UNIT_SECONDS = {1: (1,), 2: (60, 1), 3: (3600, 60, 1)}
COMPONENT_NAMES = {1: ("seconds",), 2: ("minutes", "seconds"), 3: ("hours", "minutes", "seconds")}


def parse_time(text: str) -> TimeSpec:
    """
    Public Service API: Convert a user timestamp into a TimeSpec.

    Accepted forms (by colon count):
        SS        -> 90, 90.5
        MM:SS     -> 1:30
        HH:MM:SS  -> 1:02:03

    Raises:
        EmptyOrNegativeTime: empty input or a leading minus sign.
        InvalidTimeFormat: unexpected characters, too many colons, malformed numbers.
        TimeComponentOutOfRange: minutes/seconds outside [0, 60) when not leftmost.
    """
    raw = text if text is not None else ""
    cleaned = raw.strip()

    # 1. Empty / Negative
    if not cleaned:
        raise EmptyOrNegativeTime(raw, "time is empty")
    if cleaned.startswith("-"):
        raise EmptyOrNegativeTime(raw, "time cannot be negative")

    # 2. Shape
    if not ALLOWED_CHARS.match(cleaned):
        raise InvalidTimeFormat(raw, "only digits, '.' and ':' are allowed")

    parts: List[str] = cleaned.split(":")
    if len(parts) > 3:
        raise InvalidTimeFormat(raw, "expected SS, MM:SS or HH:MM:SS")

    names = COMPONENT_NAMES[len(parts)]
    values: List[Decimal] = []

    # 3. Components
    # Only the trailing seconds component may carry a fraction
    for index, (part, name) in enumerate(zip(parts, names)):
        is_last = index == len(parts) - 1
        pattern = DECIMAL if is_last else INTEGER
        if not pattern.match(part):
            raise InvalidTimeFormat(raw, f"{name} component '{part}' is not a valid number")

        value = Decimal(part)
        if index > 0 and value >= 60:
            raise TimeComponentOutOfRange(raw, f"{name} must be below 60, got {part}")
        values.append(value)

    # 4. Combine in a context wide enough that no digit is rounded away
    with localcontext() as ctx:
        ctx.prec = exact_precision(*values)
        total = sum((v * m for v, m in zip(values, UNIT_SECONDS[len(parts)])), Decimal(0))
    return TimeSpec(total)
