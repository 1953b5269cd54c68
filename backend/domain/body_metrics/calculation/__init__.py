"""Calculation services for body metrics."""

from .bmi_service import BMIService, calculate_bmi
from .bmr_service import BMRService, calculate_bmr

__all__ = [
    "BMIService",
    "BMRService",
    "calculate_bmi",
    "calculate_bmr",
]
