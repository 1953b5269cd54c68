"""Unit tests for calculator input guards."""

import pytest

from domain.body_metrics.calculation.inputs import is_missing


@pytest.mark.parametrize("value", [None, 0, 0.0, "", float("nan")])
def test_missing_values(value):
    assert is_missing(value)


@pytest.mark.parametrize("value", [70, 0.5, -3, "male", float("inf")])
def test_present_values(value):
    assert not is_missing(value)
