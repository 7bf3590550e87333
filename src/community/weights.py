# src/community/weights.py - v1
"""Edge weight normalization applied once when a graph is ingested."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any

DEFAULT_WEIGHT = 1.0


def resolve_weight(value: Any) -> float:
    """Resolve a raw edge attribute into a numeric weight.

    Missing, boolean, non-numeric and NaN values fall back to
    ``DEFAULT_WEIGHT``; any other real number, Decimal included, is
    returned as a float.
    """
    if isinstance(value, Decimal):
        return DEFAULT_WEIGHT if value.is_nan() else float(value)
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return DEFAULT_WEIGHT
    weight = float(value)
    if math.isnan(weight):
        return DEFAULT_WEIGHT
    return weight
