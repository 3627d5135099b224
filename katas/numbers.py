"""Small arithmetic exercises on single integers and numeric sequences."""

from __future__ import annotations


def add_two_ints(x: int, y: int) -> int:
    """Return the sum of two integers."""
    return x + y


def smallest_even_multiple(n: int) -> int:
    """Return the smallest positive multiple of both 2 and ``n``."""
    return n if n % 2 == 0 else n * 2


def max_achievable(num: int, t: int) -> int:
    """Return the largest number reachable from ``num`` in ``t`` paired steps."""
    return num + 2 * t


def sum_difference(n: int, m: int) -> int:
    """Return the sum of 1..n not divisible by ``m`` minus the sum of those that are.

    Raises ZeroDivisionError when ``m`` is zero.
    """
    divisible = 0
    others = 0
    for i in range(1, n + 1):
        if i % m == 0:
            divisible += i
        else:
            others += i
    return others - divisible


def sum_of_multiples(n: int) -> int:
    """Return the sum of all numbers in 0..n divisible by 3, 5 or 7."""
    return sum(i for i in range(n + 1) if i % 3 == 0 or i % 5 == 0 or i % 7 == 0)


def steps_to_zero(n: int) -> int:
    """Count the halve-if-even, decrement-if-odd steps that bring ``n`` to zero."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = 0
    while n:
        n = n // 2 if n % 2 == 0 else n - 1
        steps += 1
    return steps


def tournament_matches(n: int) -> int:
    """Return the number of matches played in a knockout tournament of ``n`` teams."""
    matches = 0
    while n > 1:
        played, bye = divmod(n, 2)
        matches += played
        n = played + bye
    return matches


def convert_temperature(celsius: float) -> tuple[float, float]:
    """Return ``(kelvin, fahrenheit)`` for a temperature in degrees Celsius."""
    return celsius + 273.15, celsius * 1.80 + 32.00


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz sequence for 1..n."""
    result = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            result.append("FizzBuzz")
        elif i % 3 == 0:
            result.append("Fizz")
        elif i % 5 == 0:
            result.append("Buzz")
        else:
            result.append(str(i))
    return result


def sum_zero(n: int) -> list[int]:
    """Return distinct integers that add up to zero: 1..n-1 followed by minus their sum."""
    values = list(range(1, n))
    values.append(-sum(values))
    return values