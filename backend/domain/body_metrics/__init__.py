"""Body metrics domain - BMI and BMR calculations."""

from .calculation import BMIService, BMRService, calculate_bmi, calculate_bmr
from .core.value_objects import Sex

__all__ = [
    "BMIService",
    "BMRService",
    "calculate_bmi",
    "calculate_bmr",
    "Sex",
]
