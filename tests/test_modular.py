import math

import pytest

from cryptoeq.modular import (
    Modulus,
    extended_euclid,
    gcd,
    is_coprime,
    mod_add,
    mod_divide,
    mod_multiply,
    mod_subtract,
    multi_gcd,
    multiplicative_inverse,
    solve_congruences,
)

PAIRS = [(7, 4, 5), (123, 456, 26), (-8, 3, 11), (0, 9, 13), (100, 100, 7)]


@pytest.mark.parametrize("first, second, modulus", PAIRS)
def test_mod_add_matches_modulus_add(first, second, modulus):
    result = mod_add(first, second, modulus)
    assert 0 <= result < modulus
    assert (Modulus(first, modulus) + Modulus(second, modulus)).value == result


@pytest.mark.parametrize("first, second, modulus", PAIRS)
def test_subtract_inverts_add(first, second, modulus):
    total = mod_add(first, second, modulus)
    assert mod_subtract(total, second, modulus) == first % modulus
    assert (Modulus(first, modulus) - Modulus(second, modulus)).value == mod_subtract(
        first, second, modulus
    )


@pytest.mark.parametrize("first, second, modulus", PAIRS)
def test_multiply_consistent(first, second, modulus):
    result = mod_multiply(first, second, modulus)
    assert 0 <= result < modulus
    assert mod_multiply(second, first, modulus) == result
    assert (Modulus(first, modulus) * Modulus(second, modulus)).value == result


def test_divide_consistent():
    assert mod_divide(17, 3, 5) == (Modulus(17, 5) // Modulus(3, 5)).value
    assert 0 <= mod_divide(17, 3, 5) < 5


def test_divide_by_zero_residue():
    with pytest.raises(ZeroDivisionError):
        mod_divide(3, 5, 5)
    with pytest.raises(ZeroDivisionError):
        Modulus(3, 5) // Modulus(10, 5)


def test_mismatched_moduli_raise():
    with pytest.raises(ValueError):
        Modulus(1, 5) + Modulus(1, 7)
    with pytest.raises(ValueError):
        Modulus(1, 5) * Modulus(1, 7)


def test_non_positive_modulus_rejected():
    with pytest.raises(ValueError):
        Modulus(3, 0)


@pytest.mark.parametrize("first, second", [(48, 18), (17, 5), (0, 9), (270, 192), (7, 7)])
def test_gcd_matches_math(first, second):
    assert gcd(first, second) == math.gcd(first, second)
    assert gcd(second, first) == gcd(first, second)


def test_multi_gcd_uses_every_number():
    assert multi_gcd(12, 18, 30) == math.gcd(12, 18, 30)
    assert multi_gcd(12, 18, 9) == math.gcd(12, 18, 9)
    assert multi_gcd(4, 6) == math.gcd(4, 6)


def test_multi_gcd_needs_arguments():
    with pytest.raises(ValueError):
        multi_gcd()


def test_is_coprime():
    assert is_coprime(3, 11) is True
    assert is_coprime(6, 26) is False


@pytest.mark.parametrize("number, modulo", [(3, 11), (7, 26), (15, 26), (17, 3120), (25, 26)])
def test_extended_euclid_gives_inverse(number, modulo):
    inverse = extended_euclid(number, modulo)
    assert 0 <= inverse < modulo
    assert (number * inverse) % modulo == 1
    assert inverse == pow(number, -1, modulo)


def test_extended_euclid_not_coprime():
    with pytest.raises(ValueError):
        extended_euclid(13, 26)


def test_multiplicative_inverse_agrees():
    assert multiplicative_inverse(7, 26) == extended_euclid(7, 26)
    with pytest.raises(ValueError):
        multiplicative_inverse(4, 26)


def test_modulus_inverse():
    inverse = Modulus(3, 11).inverse()
    assert inverse.modulus == 11
    assert (Modulus(3, 11) * inverse).value == 1


def test_modulus_inverse_not_coprime():
    with pytest.raises(ValueError):
        Modulus(2, 26).inverse()


def test_solve_congruences_classic():
    pairs = [Modulus(2, 3), Modulus(3, 5), Modulus(2, 7)]
    assert solve_congruences(pairs) == 23


def test_solve_congruences_satisfies_all():
    pairs = [Modulus(1, 4), Modulus(4, 9), Modulus(6, 25), Modulus(3, 7)]
    result = solve_congruences(pairs)
    assert 0 <= result < 4 * 9 * 25 * 7
    assert all(result % p.modulus == p.value % p.modulus for p in pairs)


def test_solve_congruences_requires_coprime_moduli():
    with pytest.raises(ValueError):
        solve_congruences([Modulus(1, 4), Modulus(1, 6), Modulus(1, 9)])


def test_solve_congruences_requires_pairs():
    with pytest.raises(ValueError):
        solve_congruences([])