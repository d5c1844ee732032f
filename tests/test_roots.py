"""
Tests for combination → root mapping.
"""

import pytest

from thresholdpoly.curve import G
from thresholdpoly.roots import RootMapping, derive_roots, grumpkin_root


def test_identity_mapping(f97):
    combos = f97.elements([10, 14, 18])
    assert derive_roots(combos) == combos
    assert derive_roots(combos, RootMapping.IDENTITY) == combos


def test_grumpkin_root_of_one_is_generator_x(fr):
    assert grumpkin_root(fr.one()) == G.x == 1


def test_grumpkin_roots_match_scalar_mul(fr):
    combos = [fr.element(v) for v in (2, 3, 0xDEADBEEF)]
    roots = derive_roots(combos, RootMapping.GRUMPKIN)
    assert [r.value for r in roots] == [(c.value * G).x for c in combos]
    assert all(r.field == fr for r in roots)


def test_grumpkin_requires_bn254(f97):
    with pytest.raises(ValueError):
        grumpkin_root(f97.element(3))


def test_mapping_names():
    assert RootMapping.from_name("Grumpkin") is RootMapping.GRUMPKIN
    with pytest.raises(ValueError):
        RootMapping.from_name("sha256")
