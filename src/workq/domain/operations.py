"""Binary float operations with IEEE-754 semantics.

Python raises on float division by zero; work items must not, so
:func:`divide` returns the signed infinity or NaN instead.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable

BinaryOperation = Callable[[float, float], float]


def divide(dividend: float, divisor: float) -> float:
    """Divide following IEEE-754: ``x / 0`` is ``±inf``, ``0 / 0`` is ``nan``."""
    if divisor != 0:
        return dividend / divisor
    if dividend == 0 or math.isnan(dividend):
        return math.nan
    return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


OPERATIONS: dict[str, BinaryOperation] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": divide,
}


def get_operation(name: str) -> BinaryOperation:
    """Look up a built-in operation by name.

    Raises:
        KeyError: If *name* is not a built-in operation.
    """
    return OPERATIONS[name]


def format_number(value: float) -> str:
    """Render a float with six decimals (``10.000000``, ``inf``, ``nan``)."""
    return f"{value:f}"
