from dataclasses import dataclass
from decimal import Decimal, localcontext

# Default decimal context precision; wider values get a wider context
MIN_PRECISION = 28

def exact_precision(*values: Decimal) -> int:
    """Context precision that keeps sums and products of these values exact."""
    widest = 0
    for value in values:
        _, digits, exponent = value.as_tuple()
        widest = max(widest, len(digits) + max(exponent, 0), -min(exponent, 0))
    return max(MIN_PRECISION, 2 * widest + 8)

@dataclass(frozen=True, order=True)
class TimeSpec:
    """
    Value Object representing a non-negative elapsed duration.
    Seconds are kept as a Decimal so integer inputs stay exact.
    """
    seconds: Decimal

    def __post_init__(self):
        if not isinstance(self.seconds, Decimal):
            object.__setattr__(self, "seconds", Decimal(str(self.seconds)))
        if self.seconds < 0:
            raise ValueError(f"Time cannot be negative: {self.seconds}")

    def to_seconds_text(self) -> str:
        """Plain seconds for tool arguments: 90, 90.5"""
        return format_seconds(self.seconds)

    def to_clock(self) -> str:
        """Clock notation: 45, 1:30, 1:02:03 (fraction kept on the seconds)."""
        with localcontext() as ctx:
            ctx.prec = exact_precision(self.seconds)
            hours, rest = divmod(self.seconds, 3600)
            minutes, secs = divmod(rest, 60)

        secs_text = format_seconds(secs)
        if not hours and not minutes:
            return secs_text
        if secs < 10:
            secs_text = "0" + secs_text
        if hours:
            return f"{format_seconds(hours)}:{format_seconds(minutes).zfill(2)}:{secs_text}"
        return f"{format_seconds(minutes)}:{secs_text}"

    def __str__(self) -> str:
        return self.to_clock()


def format_seconds(value: Decimal) -> str:
    """Renders a Decimal without exponent or trailing zeros."""
    integral = value.to_integral_value()
    if value == integral:
        return format(integral, "f")
    with localcontext() as ctx:
        ctx.prec = exact_precision(value)
        return format(value.normalize(), "f")
