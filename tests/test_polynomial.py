"""
Tests for interpolation from roots and evaluation.
"""

import random

import pytest

from thresholdpoly.combinations import generate_combinations
from thresholdpoly.errors import EmptyRootSet, RootMismatch
from thresholdpoly.field import BN254_FR, PrimeField
from thresholdpoly.polynomial import (
    Polynomial,
    evaluate,
    interpolate,
    multiply,
    self_check,
)


def test_scenario_mod_97(f97):
    """Roots 10, 14, 18 from [3, 7, 11] choose 2."""
    roots = generate_combinations(f97.elements([3, 7, 11]), 2)
    poly = interpolate(roots)

    # (x-10)(x-14)(x-18) = x^3 - 42x^2 + 572x - 2520
    assert poly.values() == [2, 87, 55, 1]
    for x in (10, 14, 18):
        assert evaluate(poly, f97.element(x)) == 0
    assert evaluate(poly, f97.element(5)) == 94
    assert not evaluate(poly, f97.element(5)).is_zero()


def test_empty_roots_is_empty_product(f97):
    poly = interpolate([], f97)
    assert poly.values() == [1]
    assert len(poly) == 1
    assert evaluate(poly, f97.element(33)) == 1


def test_empty_roots_without_field():
    with pytest.raises(EmptyRootSet):
        interpolate([])


def test_single_root(f97, fr):
    r = f97.element(12)
    poly = interpolate([r])
    assert len(poly) == 2
    assert poly.values() == [(-12) % 97, 1]

    big = fr.element(BN254_FR - 5)
    assert interpolate([big]).values() == [5, 1]


def test_zero_root(f97):
    assert interpolate([f97.zero()]).values() == [0, 1]


def test_length_and_monic(fr):
    roots = [fr.random() for _ in range(20)]
    poly = interpolate(roots)
    assert len(poly) == 21
    assert poly.degree == 20
    assert poly.is_monic()


def test_random_roots_vanish_bn254(fr):
    rng = random.Random(1234)
    roots = [fr.element(rng.randrange(BN254_FR)) for _ in range(30)]
    poly = interpolate(roots)
    for r in roots:
        assert evaluate(poly, r) == 0
    self_check(poly, roots)


def test_repeated_roots_are_multiplicities(f97):
    r = f97.element(3)
    poly = interpolate([r, r])
    # (x-3)^2 = x^2 - 6x + 9
    assert poly.values() == [9, 91, 1]


def test_coefficients_always_reduced(fr):
    roots = [fr.element(BN254_FR - 1 - i) for i in range(10)]
    for c in interpolate(roots):
        assert 0 <= c.value < BN254_FR


def test_product_of_batches(fr):
    """Interpolating two batches separately and multiplying matches one pass."""
    rng = random.Random(7)
    a = [fr.element(rng.randrange(BN254_FR)) for _ in range(5)]
    b = [fr.element(rng.randrange(BN254_FR)) for _ in range(6)]
    assert multiply(interpolate(a), interpolate(b)) == interpolate(a + b)


def test_evaluate_matches_power_sum(f97):
    poly = Polynomial.from_values(f97, [1, 2, 3])
    for x in range(97):
        expected = (1 + 2 * x + 3 * pow(x, 2, 97)) % 97
        assert evaluate(poly, f97.element(x)) == expected
    assert poly(f97.element(2)) == 17


def test_evaluate_rejects_foreign_point(f97):
    poly = Polynomial.from_values(f97, [1, 1])
    with pytest.raises(ValueError):
        evaluate(poly, PrimeField(101).element(1))


def test_self_check_detects_tampering(f97):
    roots = f97.elements([10, 14, 18])
    poly = interpolate(roots)
    values = poly.values()
    values[0] = (values[0] + 1) % 97
    broken = Polynomial.from_values(f97, values)

    with pytest.raises(RootMismatch) as exc:
        self_check(broken, roots)
    assert exc.value.index == 0
    assert exc.value.root == 10


def test_root_mismatch_is_fatal_type():
    assert issubclass(RootMismatch, RuntimeError)


def test_polynomial_validation(f97):
    with pytest.raises(ValueError):
        Polynomial(f97, ())
    with pytest.raises(ValueError):
        Polynomial.from_values(f97, [1, 97])
    with pytest.raises(ValueError):
        Polynomial(f97, (PrimeField(101).element(1),))


def test_polynomial_rejects_int_coefficients(f97):
    with pytest.raises(ValueError):
        Polynomial(f97, (1, 2))
    with pytest.raises(ValueError):
        Polynomial(f97, (f97.one(), 5))


def test_evaluate_matches_field_pow_bn254(fr):
    rng = random.Random(97)
    poly = Polynomial.from_values(fr, [rng.randrange(BN254_FR) for _ in range(12)])
    for _ in range(5):
        x = fr.element(rng.randrange(BN254_FR))
        expected = fr.zero()
        for d, a in enumerate(poly):
            expected = expected + a * fr.pow(x, d)
        assert evaluate(poly, x) == expected
