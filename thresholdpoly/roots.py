"""
Mapping from combination sums to polynomial roots.

``IDENTITY`` uses each k-subset sum directly as a root.  ``GRUMPKIN``
publishes the x-coordinate of  sum · G  on Grumpkin instead, so the
coefficients never expose raw address sums; the verifying circuit
performs the same scalar multiplication before evaluating.
"""

from __future__ import annotations

import enum
from typing import List, Sequence

from .curve import Point
from .field import BN254_FR, FieldElement


class RootMapping(enum.Enum):
    IDENTITY = "identity"
    GRUMPKIN = "grumpkin"

    @classmethod
    def from_name(cls, name: str) -> RootMapping:
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"unknown root mapping {name!r}") from None


def grumpkin_root(combination: FieldElement) -> FieldElement:
    """x(c · G)  on Grumpkin, as an element of BN254 Fr."""
    if combination.field.modulus != BN254_FR:
        raise ValueError("grumpkin roots require combinations in BN254 Fr")
    return Point.from_scalar(combination.value).x_element()


def derive_roots(
    combinations: Sequence[FieldElement],
    mapping: RootMapping = RootMapping.IDENTITY,
) -> List[FieldElement]:
    """Apply *mapping* to every combination, preserving order."""
    if mapping is RootMapping.IDENTITY:
        return list(combinations)
    if mapping is RootMapping.GRUMPKIN:
        return [grumpkin_root(c) for c in combinations]
    raise ValueError(f"unsupported root mapping {mapping!r}")
