"""BMIService - Body Mass Index calculation."""

from typing import Any, Optional

from ..core.ports.calculators import IBMICalculator
from .inputs import is_missing


def calculate_bmi(weight: Any, height: Any) -> Optional[float]:
    """Calculate Body Mass Index.

    Formula:
        BMI = weight(kg) / (height(m))²

    Missing input is not an error: if either value is falsy or NaN (None, 0,
    empty string) the result is None. Out-of-range values such as
    negative weights are computed as-is. No rounding is applied.

    Args:
        weight: Body weight in kg
        height: Body height in cm

    Returns:
        BMI value, or None when it cannot be computed

    Example:
        >>> round(calculate_bmi(70, 175), 2)
        22.86
        >>> calculate_bmi(0, 170) is None
        True
    """
    if is_missing(weight) or is_missing(height):
        return None
    return weight / ((height / 100) ** 2)


class BMIService(IBMICalculator):
    """Stateless BMI calculator."""

    def calculate(self, weight: Any, height: Any) -> Optional[float]:
        return calculate_bmi(weight, height)
