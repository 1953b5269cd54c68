"""Calculator ports - interfaces for BMI/BMR calculations."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IBMICalculator(ABC):
    """Port for BMI calculation.

    Calculates Body Mass Index from weight (kg) and height (cm).
    """

    @abstractmethod
    def calculate(self, weight: Any, height: Any) -> Optional[float]:
        """Calculate BMI.

        Args:
            weight: Body weight in kg
            height: Body height in cm

        Returns:
            BMI value, or None when an input is missing
        """
        pass


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using the Harris-Benedict equation.
    """

    @abstractmethod
    def calculate(self, weight: Any, height: Any, age: Any, sex: Any) -> Optional[float]:
        """Calculate BMR.

        Args:
            weight: Body weight in kg
            height: Body height in cm
            age: Age in years
            sex: "male" or any other category

        Returns:
            BMR in kcal/day, or None when an input is missing
        """
        pass
