"""Ports for body metrics domain."""

from .calculators import IBMICalculator, IBMRCalculator

__all__ = [
    "IBMICalculator",
    "IBMRCalculator",
]
