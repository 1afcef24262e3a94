# Area: Board
"""
Board package: the fixed denomination table and the container board.
"""

from .board import Board
from .container import Container, ContainerState
from .values import (
    CONTAINER_COUNT,
    HIGH_VALUE_FLOOR,
    LOW_VALUE_CEILING,
    MINOR_UNITS_PER_UNIT,
    STANDARD_DENOMINATIONS,
    ValueSet,
    format_amount,
    to_minor_units,
    units,
    value_distribution,
)

__all__ = [
    "Board",
    "Container",
    "ContainerState",
    "CONTAINER_COUNT",
    "HIGH_VALUE_FLOOR",
    "LOW_VALUE_CEILING",
    "MINOR_UNITS_PER_UNIT",
    "STANDARD_DENOMINATIONS",
    "ValueSet",
    "format_amount",
    "to_minor_units",
    "units",
    "value_distribution",
]
