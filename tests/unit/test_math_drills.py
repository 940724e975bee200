"""Unit tests for the number drills."""

import pytest

from recordbook.application.services import math_drills
from recordbook.domain.exceptions import ValidationError


@pytest.mark.parametrize("number", [0, 1, 7, 153, 370, 371, 407, 9474])
def test_armstrong_numbers(number: int):
    assert math_drills.is_armstrong(number)


@pytest.mark.parametrize("number", [10, 100, 154, 9475, -153])
def test_not_armstrong_numbers(number: int):
    assert not math_drills.is_armstrong(number)


def test_factorial():
    assert math_drills.factorial(0) == 1
    assert math_drills.factorial(1) == 1
    assert math_drills.factorial(5) == 120
    assert math_drills.factorial(20) == 2432902008176640000


def test_factorial_of_negative_is_rejected():
    with pytest.raises(ValidationError):
        math_drills.factorial(-1)


def test_simple_interest():
    assert math_drills.simple_interest(1000, 5, 2) == 100
    assert math_drills.simple_interest(1500, 4.5, 3) == pytest.approx(202.5)


def test_temperature_conversions_use_whole_degree_offset():
    assert math_drills.celsius_to_kelvin(0) == 273
    assert math_drills.kelvin_to_celsius(300) == 27
    assert math_drills.kelvin_to_celsius(math_drills.celsius_to_kelvin(21.5)) == 21.5
