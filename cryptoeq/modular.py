"""Modular arithmetic, greatest common divisors and congruence solving."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from itertools import combinations


@dataclass(frozen=True)
class Modulus:
    """An integer *value* taken modulo a positive *modulus*."""

    value: int
    modulus: int

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError(f"modulus must be positive, got {self.modulus}")

    def _operands(self, other: Modulus) -> tuple[int, int]:
        if not isinstance(other, Modulus):
            return NotImplemented  # type: ignore[return-value]
        if self.modulus != other.modulus:
            raise ValueError(
                f"moduli differ: {self.modulus} and {other.modulus}"
            )
        return self.value % self.modulus, other.value % other.modulus

    def __add__(self, other: Modulus) -> Modulus:
        if not isinstance(other, Modulus):
            return NotImplemented
        first, second = self._operands(other)
        return Modulus((first + second) % self.modulus, self.modulus)

    def __sub__(self, other: Modulus) -> Modulus:
        if not isinstance(other, Modulus):
            return NotImplemented
        first, second = self._operands(other)
        return Modulus((first - second) % self.modulus, self.modulus)

    def __mul__(self, other: Modulus) -> Modulus:
        if not isinstance(other, Modulus):
            return NotImplemented
        first, second = self._operands(other)
        return Modulus((first * second) % self.modulus, self.modulus)

    def __floordiv__(self, other: Modulus) -> Modulus:
        if not isinstance(other, Modulus):
            return NotImplemented
        first, second = self._operands(other)
        return Modulus((first // second) % self.modulus, self.modulus)

    def inverse(self) -> Modulus:
        """Return the multiplicative inverse under the same modulus."""
        return Modulus(multiplicative_inverse(self.value, self.modulus), self.modulus)


def mod_add(first: int, second: int, modulus: int) -> int:
    """Return ``(first + second) mod modulus``."""
    return (first % modulus + second % modulus) % modulus


def mod_subtract(first: int, second: int, modulus: int) -> int:
    """Return ``(first - second) mod modulus``."""
    return (first % modulus - second % modulus) % modulus


def mod_divide(first: int, second: int, modulus: int) -> int:
    """Integer-divide the reduced operands and reduce the quotient."""
    return ((first % modulus) // (second % modulus)) % modulus


def mod_multiply(first: int, second: int, modulus: int) -> int:
    """Return ``(first * second) mod modulus``."""
    return ((first % modulus) * (second % modulus)) % modulus


def gcd(first: int, second: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    larger, smaller = sorted((abs(first), abs(second)), reverse=True)
    while smaller:
        larger, smaller = smaller, larger % smaller
    return larger


def multi_gcd(*args: int) -> int:
    """Greatest common divisor of all arguments."""
    if not args:
        raise ValueError("multi_gcd needs at least one number")
    return reduce(gcd, args)


def is_coprime(first: int, second: int) -> bool:
    """True when the two numbers share no factor other than 1."""
    return gcd(first, second) == 1


def extended_euclid(number: int, modulo: int) -> int:
    """Return the inverse of *number* modulo *modulo* by the extended Euclid method."""
    if not is_coprime(number, modulo):
        raise ValueError(f"{number} and {modulo} are not coprime")
    divisor, dividend = number % modulo, modulo
    t_prev, t_curr = 0, 1
    while divisor:
        quotient, remainder = divmod(dividend, divisor)
        dividend, divisor = divisor, remainder
        t_prev, t_curr = t_curr, t_prev - t_curr * quotient
    return modulo + t_prev if t_prev < 0 else t_prev


def multiplicative_inverse(number: int, modulo: int) -> int:
    """Return the multiplicative inverse of *number* modulo *modulo*."""
    return extended_euclid(number, modulo)


def solve_congruences(pairs: Iterable[Modulus]) -> int:
    """Solve a system of congruences by the Chinese remainder theorem."""
    pairs = list(pairs)
    if not pairs:
        raise ValueError("at least one congruence is required")
    for left, right in combinations(pairs, 2):
        if not is_coprime(left.modulus, right.modulus):
            raise ValueError(
                f"moduli {left.modulus} and {right.modulus} are not coprime"
            )
    product = math.prod(pair.modulus for pair in pairs)
    total = 0
    for pair in pairs:
        partial = product // pair.modulus
        total += partial * extended_euclid(partial, pair.modulus) * pair.value
    return total % product