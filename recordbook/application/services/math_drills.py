"""Small number drills: Armstrong numbers, factorials, simple interest, temperatures."""

from recordbook.domain.exceptions import ValidationError

# Whole-degree offset, matching the drill's worked examples (0 °C -> 273 K).
KELVIN_OFFSET = 273


def is_armstrong(number: int) -> bool:
    """True when the number equals the sum of its digits each raised to the digit count."""
    if number < 0:
        return False
    digits = str(number)
    power = len(digits)
    return sum(int(d) ** power for d in digits) == number


def factorial(number: int) -> int:
    if number < 0:
        raise ValidationError("number", "factorial is undefined for negative numbers")
    result = 1
    for n in range(2, number + 1):
        result *= n
    return result


def simple_interest(principal: float, rate: float, years: float) -> float:
    """Interest on ``principal`` at ``rate`` percent per year."""
    return principal * rate * years / 100


def celsius_to_kelvin(temperature: float) -> float:
    return temperature + KELVIN_OFFSET


def kelvin_to_celsius(temperature: float) -> float:
    return temperature - KELVIN_OFFSET
