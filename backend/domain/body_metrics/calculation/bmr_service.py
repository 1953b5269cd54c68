"""BMRService - Basal Metabolic Rate calculation."""

from typing import Any, Optional

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.sex import Sex
from .inputs import is_missing

# Harris-Benedict equation, revised by Roza and Shizgal (1984)
MALE_COEFFICIENTS = (88.362, 13.397, 4.799, 5.677)
NON_MALE_COEFFICIENTS = (447.593, 9.247, 3.098, 4.330)


def calculate_bmr(weight: Any, height: Any, age: Any, sex: Any) -> Optional[float]:
    """Calculate Basal Metabolic Rate in kcal/day.

    Formula:
        Male:  BMR = 88.362 + 13.397 × weight + 4.799 × height - 5.677 × age
        Other: BMR = 447.593 + 9.247 × weight + 3.098 × height - 4.330 × age

    The male branch is selected only when ``sex`` is exactly "male";
    every other value takes the second equation. Any falsy or NaN argument
    short-circuits to None.

    Args:
        weight: Body weight in kg
        height: Body height in cm
        age: Age in years
        sex: Sex category ("male" or other)

    Returns:
        BMR in kcal/day, or None when it cannot be computed

    Example:
        >>> round(calculate_bmr(70, 175, 30, "male"), 3)
        1695.667
    """
    if any(is_missing(v) for v in (weight, height, age, sex)):
        return None

    if Sex.is_male(sex):
        base, per_kg, per_cm, per_year = MALE_COEFFICIENTS
    else:
        base, per_kg, per_cm, per_year = NON_MALE_COEFFICIENTS

    return base + (per_kg * weight) + (per_cm * height) - (per_year * age)


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using the Harris-Benedict equation.

    References:
        Roza AM, Shizgal HM. The Harris Benedict equation reevaluated:
        resting energy requirements and the body cell mass.
        Am J Clin Nutr. 1984;40(1):168-182.
    """

    def calculate(self, weight: Any, height: Any, age: Any, sex: Any) -> Optional[float]:
        """Calculate BMR from biometric data.

        Example:
            >>> service = BMRService()
            >>> service.calculate(70, 175, 30, None) is None
            True
        """
        return calculate_bmr(weight, height, age, sex)
