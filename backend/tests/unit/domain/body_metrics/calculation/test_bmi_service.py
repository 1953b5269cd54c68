"""Unit tests for BMI calculation."""

import pytest

from domain.body_metrics.calculation.bmi_service import BMIService, calculate_bmi


class TestCalculateBMI:
    """Test BMI = weight / (height_m)²."""

    @pytest.mark.parametrize(
        "weight,height",
        [(70, 175), (60.5, 165.2), (120, 190), (45, 150)],
    )
    def test_matches_formula(self, weight, height):
        """Result equals weight / (height/100)² for positive inputs."""
        expected = weight / ((height / 100) ** 2)
        assert calculate_bmi(weight, height) == pytest.approx(expected)

    def test_known_value(self):
        """70 kg at 175 cm is about 22.86."""
        assert calculate_bmi(70, 175) == pytest.approx(22.857142857)

    def test_no_rounding(self):
        """Result is returned unrounded as float."""
        bmi = calculate_bmi(70, 175)
        assert isinstance(bmi, float)
        assert bmi != round(bmi, 2)

    @pytest.mark.parametrize(
        "weight,height",
        [
            (0, 170),
            (70, 0),
            (None, 170),
            (70, None),
            (None, None),
            (0.0, 170),
            (float("nan"), 170),
            (70, float("nan")),
        ],
    )
    def test_missing_input_returns_none(self, weight, height):
        """Falsy or NaN input yields the None sentinel instead of raising."""
        assert calculate_bmi(weight, height) is None

    def test_negative_values_computed_as_is(self):
        """No physiological validation beyond the falsy check."""
        assert calculate_bmi(-70, 175) == pytest.approx(-22.857142857)

    def test_idempotent(self):
        """Same inputs always give the same output."""
        assert calculate_bmi(82.3, 181) == calculate_bmi(82.3, 181)


class TestBMIService:
    def test_service_delegates_to_function(self):
        service = BMIService()
        assert service.calculate(70, 175) == calculate_bmi(70, 175)
        assert service.calculate(0, 175) is None
