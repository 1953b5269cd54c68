"""Input guards shared by the body metrics calculators."""

import math
from typing import Any


def is_missing(value: Any) -> bool:
    """Return True when a calculator input counts as not provided.

    Falsy values (None, 0, 0.0, "") and NaN are missing.

    Example:
        >>> is_missing(float("nan"))
        True
        >>> is_missing(70)
        False
    """
    return not value or (isinstance(value, float) and math.isnan(value))
