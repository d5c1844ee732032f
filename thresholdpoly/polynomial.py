"""
Polynomial construction from roots, and evaluation, over Z_p.

A threshold policy is the monic polynomial

    f(x) = ∏_{r ∈ R} (x − r)

whose roots  R  are the admissible subset values.  Membership of a
candidate  x  is the test  f(x) == 0.

Coefficients are stored lowest degree first:

    coefficients[i] = a_i   so  f(x) = a_0 + a_1 x + a_2 x^2 + …
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import EmptyRootSet, RootMismatch
from .field import FieldElement, PrimeField

_logger = logging.getLogger(__name__)


# ── polynomial representation ───────────────────────────────────────────

@dataclass(frozen=True)
class Polynomial:
    """Immutable coefficient vector over one field, index = degree."""

    field: PrimeField
    coefficients: Tuple[FieldElement, ...]

    def __post_init__(self) -> None:
        if not self.coefficients:
            raise ValueError("a polynomial needs at least one coefficient")
        if not all(isinstance(c, FieldElement) for c in self.coefficients):
            raise ValueError("coefficients must be field elements")
        if any(c.field != self.field for c in self.coefficients):
            raise ValueError("coefficients must belong to the polynomial's field")

    @classmethod
    def from_values(cls, field: PrimeField, values: Sequence[int]) -> Polynomial:
        """Wrap already-reduced integers; out-of-range values are rejected."""
        return cls(field, tuple(field.element(v) for v in values))

    @property
    def degree(self) -> int:
        """Index of the highest stored coefficient (trailing zeros count)."""
        return len(self.coefficients) - 1

    def is_monic(self) -> bool:
        return self.coefficients[-1] == 1

    def values(self) -> List[int]:
        return [c.value for c in self.coefficients]

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self) -> Iterator[FieldElement]:
        return iter(self.coefficients)

    def __getitem__(self, i: int) -> FieldElement:
        return self.coefficients[i]

    def __call__(self, x: FieldElement) -> FieldElement:
        return evaluate(self, x)


# ── construction ────────────────────────────────────────────────────────

def interpolate(
    roots: Sequence[FieldElement],
    field: Optional[PrimeField] = None,
) -> Polynomial:
    r"""
    Monic polynomial whose root multiset is exactly *roots*.

    Starting from  f = 1,  each root multiplies  f  by  (x − r)  in place:

    .. math::
        c'_0 = -r\,c_0, \qquad
        c'_j = -r\,c_j + c_{j-1} \;(1 \le j < L), \qquad
        c'_L = c_{L-1}

    so  m  roots give  m + 1  coefficients in  O(m²)  multiplications.
    Every intermediate is reduced into  [0, p)  as it is produced.

    Parameters
    ----------
    roots : sequence of FieldElement
        Roots, all from one field.  Repeats are kept as multiplicities.
    field : PrimeField or None
        Required only when *roots* is empty; otherwise inferred.

    Raises
    ------
    EmptyRootSet
        No roots and no field, so the result's field would be undetermined.
    """
    if not roots:
        if field is None:
            raise EmptyRootSet("cannot interpolate zero roots without a field")
        # empty product
        return Polynomial(field, (field.one(),))

    field = field if field is not None else roots[0].field
    p = field.modulus
    if any(r.field != field for r in roots):
        raise ValueError("roots must belong to the same field")

    coeffs: List[int] = [1]
    for r in roots:
        neg_r = (-r.value) % p
        L = len(coeffs)
        nxt = [0] * (L + 1)
        nxt[0] = coeffs[0] * neg_r % p
        for j in range(1, L):
            nxt[j] = (coeffs[j] * neg_r + coeffs[j - 1]) % p
        nxt[L] = coeffs[L - 1]
        coeffs = nxt

    _logger.debug("interpolated degree-%d polynomial", len(roots))
    return Polynomial(field, tuple(field.element(c) for c in coeffs))


def multiply(a: Polynomial, b: Polynomial) -> Polynomial:
    """Schoolbook product  a · b."""
    if a.field != b.field:
        raise ValueError("cannot multiply polynomials over different fields")
    p = a.field.modulus
    out = [0] * (len(a) + len(b) - 1)
    for i, ai in enumerate(a.values()):
        if ai == 0:
            continue
        for j, bj in enumerate(b.values()):
            out[i + j] = (out[i + j] + ai * bj) % p
    return Polynomial.from_values(a.field, out)


# ── evaluation ──────────────────────────────────────────────────────────

def evaluate(poly: Polynomial, x: FieldElement) -> FieldElement:
    """
    f(x) = Σ a_d · x^d  mod p, via Horner's method — O(d) mults.

    Horner's nesting computes the same sum as evaluating each  x^d  with
    the field's exponentiation, without the per-term powers.
    """
    if x.field != poly.field:
        raise ValueError("evaluation point belongs to a different field")
    p = poly.field.modulus
    xv = x.value
    acc = 0
    for c in reversed(poly.coefficients):
        acc = (acc * xv + c.value) % p
    return poly.field.element(acc)


def self_check(poly: Polynomial, roots: Sequence[FieldElement]) -> None:
    """
    Confirm  f(r) == 0  for every root used to build *poly*.

    Must pass before a policy is published; a failure means the
    interpolation or the field arithmetic is broken.

    Raises
    ------
    RootMismatch
        On the first root at which *poly* does not vanish.
    """
    for i, r in enumerate(roots):
        value = evaluate(poly, r)
        if not value.is_zero():
            raise RootMismatch(i, r.value, value.value)
    _logger.debug("self-check passed for %d roots", len(roots))
