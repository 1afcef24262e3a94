# Area: Board
"""
dond_game._board.values — Denomination table and money helpers
===============================================================

All amounts inside the engine are integers in minor units (pence).
Conversion to display text happens only at the presentation boundary
through format_amount().
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict, Iterable, Iterator, List, Tuple, Union

from ..errors import ConfigurationError
from ..types import ValueDistribution

MINOR_UNITS_PER_UNIT = 100
CONTAINER_COUNT = 26

# Base-unit denominations, smallest first
STANDARD_DENOMINATIONS = (
    "0.01", "1", "5", "10", "25", "50", "75", "100", "200", "300", "400",
    "500", "750", "1000", "5000", "10000", "25000", "50000", "75000",
    "100000", "200000", "300000", "400000", "500000", "750000", "1000000",
)

# Distribution buckets (base units)
LOW_VALUE_CEILING = 1_000
HIGH_VALUE_FLOOR = 100_000

Amount = Union[int, float, str, Decimal]


def to_minor_units(amount: Amount) -> int:
    """Convert a base-unit amount to integer minor units (half-up)."""
    try:
        value = Decimal(str(amount)) * MINOR_UNITS_PER_UNIT
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Not a monetary amount: {amount!r}") from e
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def units(amount: Amount) -> int:
    """Shorthand for base-unit constants expressed in minor units."""
    return to_minor_units(amount)


def format_amount(minor: int) -> str:
    """Render minor units for display: '1p' below one unit, '£1,234' above."""
    if isinstance(minor, bool) or not isinstance(minor, int) or minor < 0:
        return "£0"
    if minor < MINOR_UNITS_PER_UNIT:
        return f"{minor}p"
    whole = (Decimal(minor) / MINOR_UNITS_PER_UNIT).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP
    )
    return f"£{int(whole):,}"


class ValueSet:
    """
    Immutable, ascending table of distinct positive denominations.

    Attributes:
        values: Tuple of denominations in minor units, smallest first
    """

    def __init__(self, values: Iterable[int]):
        table = tuple(values)
        problems = _validate_table(table)
        if problems:
            raise ConfigurationError(
                "Invalid denomination table",
                details={"problems": problems, "size": len(table)},
            )
        self._values: Tuple[int, ...] = tuple(sorted(table))

    @classmethod
    def standard(cls) -> "ValueSet":
        """The fixed 26-value table used by every session."""
        return cls(to_minor_units(v) for v in STANDARD_DENOMINATIONS)

    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    @property
    def total(self) -> int:
        return sum(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __contains__(self, item: object) -> bool:
        return item in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueSet):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"ValueSet({len(self._values)} values, max={format_amount(self._values[-1])})"


def _validate_table(table: Tuple[int, ...]) -> List[str]:
    """Return a list of problems with a candidate table (empty when valid)."""
    problems = []
    if not table:
        return ["table is empty"]
    for value in table:
        if isinstance(value, bool) or not isinstance(value, int):
            problems.append(f"{value!r} is not an integer amount of minor units")
        elif value <= 0:
            problems.append(f"{value} is not positive")
    if len(set(table)) != len(table):
        problems.append("table contains duplicate values")
    return problems


def value_distribution(values: Iterable[int]) -> ValueDistribution:
    """Bucket values into low / mid / high with counts and sums."""
    low_ceiling = units(LOW_VALUE_CEILING)
    high_floor = units(HIGH_VALUE_FLOOR)
    buckets: Dict[str, List[int]] = {"low": [], "mid": [], "high": []}
    for value in values:
        if value < low_ceiling:
            buckets["low"].append(value)
        elif value >= high_floor:
            buckets["high"].append(value)
        else:
            buckets["mid"].append(value)
    return {
        "total": sum(len(b) for b in buckets.values()),
        "low_values": len(buckets["low"]),
        "mid_values": len(buckets["mid"]),
        "high_values": len(buckets["high"]),
        "low_sum": sum(buckets["low"]),
        "mid_sum": sum(buckets["mid"]),
        "high_sum": sum(buckets["high"]),
        "total_sum": sum(sum(b) for b in buckets.values()),
    }
