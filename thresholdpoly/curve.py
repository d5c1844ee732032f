"""
Grumpkin curve arithmetic.

Grumpkin is the curve  y² = x³ − 17  defined over the BN254 scalar field
(``BN254_FR``); its group order is the BN254 base-field prime
(``BN254_FQ``).  Because its coordinates live in the proving system's
native field, the x-coordinate of a Grumpkin point is directly usable
as a polynomial root or as a commitment value.

Group operations are pure Python.  Scalar multiplication runs in
Jacobian coordinates (one inversion per multiplication instead of one
per step); points are stored and compared in affine form.

References
----------
- Bernstein, Lange.  Explicit-Formulas Database,
  ``dbl-2009-l`` and ``add-2007-bl`` for short Weierstrass  a = 0.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Tuple

from .field import BN254_FQ, BN254_FR, FieldElement, PrimeField
from .hash import hash_to_curve_seed

# ── Grumpkin constants ──────────────────────────────────────────────────
FIELD_PRIME = BN254_FR
ORDER = BN254_FQ
CURVE_B = (-17) % FIELD_PRIME
COORD_BYTES = 32
COMPRESSED_BYTES = COORD_BYTES + 1

GENERATOR_X = 1
GENERATOR_Y = 0x0000000000000002CF135E7506A45D632D270D45F1181294833FC48D823F272C

BASE_FIELD = PrimeField(FIELD_PRIME)

_Jacobian = Tuple[int, int, int]
_JACOBIAN_INF: _Jacobian = (1, 1, 0)


# ── Jacobian helpers (a = 0) ────────────────────────────────────────────
def _jac_double(p: _Jacobian) -> _Jacobian:
    X, Y, Z = p
    if Z == 0 or Y == 0:
        return _JACOBIAN_INF
    P = FIELD_PRIME
    A = X * X % P
    B = Y * Y % P
    C = B * B % P
    D = 2 * ((X + B) * (X + B) - A - C) % P
    E = 3 * A % P
    F = E * E % P
    X3 = (F - 2 * D) % P
    Y3 = (E * (D - X3) - 8 * C) % P
    Z3 = 2 * Y * Z % P
    return (X3, Y3, Z3)


def _jac_add(p: _Jacobian, q: _Jacobian) -> _Jacobian:
    X1, Y1, Z1 = p
    X2, Y2, Z2 = q
    if Z1 == 0:
        return q
    if Z2 == 0:
        return p
    P = FIELD_PRIME
    Z1Z1 = Z1 * Z1 % P
    Z2Z2 = Z2 * Z2 % P
    U1 = X1 * Z2Z2 % P
    U2 = X2 * Z1Z1 % P
    S1 = Y1 * Z2 * Z2Z2 % P
    S2 = Y2 * Z1 * Z1Z1 % P
    if U1 == U2:
        if S1 != S2:
            return _JACOBIAN_INF
        return _jac_double(p)
    H = (U2 - U1) % P
    R = (S2 - S1) % P
    HH = H * H % P
    HHH = H * HH % P
    V = U1 * HH % P
    X3 = (R * R - HHH - 2 * V) % P
    Y3 = (R * (V - X3) - S1 * HHH) % P
    Z3 = H * Z1 * Z2 % P
    return (X3, Y3, Z3)


def _jac_mul(p: _Jacobian, k: int) -> _Jacobian:
    acc = _JACOBIAN_INF
    for bit in bin(k)[2:]:
        acc = _jac_double(acc)
        if bit == "1":
            acc = _jac_add(acc, p)
    return acc


# ── Point ───────────────────────────────────────────────────────────────
class Point:
    """
    Point on Grumpkin in affine coordinates.

    The identity (point at infinity) is represented by a flag, matching
    the algebraic convention  P + O = P.
    """

    __slots__ = ("_x", "_y", "_inf")

    def __init__(self, x: int = 0, y: int = 0, *, infinity: bool = False) -> None:
        self._x = x
        self._y = y
        self._inf = infinity

    # constructors -----------------------------------------------------------
    @classmethod
    def generator(cls) -> Point:
        """Standard base point  G = (1, √−16)."""
        return cls(GENERATOR_X, GENERATOR_Y)

    @classmethod
    def identity(cls) -> Point:
        """Point at infinity — additive identity."""
        return cls(infinity=True)

    @classmethod
    def from_xy(cls, x: int, y: int) -> Point:
        """Affine point, validated against the curve equation."""
        if not (0 <= x < FIELD_PRIME and 0 <= y < FIELD_PRIME):
            raise ValueError("coordinate out of range")
        if (y * y - x * x * x - CURVE_B) % FIELD_PRIME != 0:
            raise ValueError("point is not on grumpkin")
        return cls(x, y)

    @classmethod
    def lift_x(cls, x: int) -> Optional[Point]:
        """Point with the given x and even y, or ``None`` if x³ − 17 is a non-residue."""
        x = x % FIELD_PRIME
        rhs = BASE_FIELD.reduce(x * x * x + CURVE_B)
        y = BASE_FIELD.sqrt(rhs)
        if y is None:
            return None
        y_int = y.value
        if y_int % 2 != 0:
            y_int = FIELD_PRIME - y_int
        return cls(x, y_int)

    @classmethod
    def from_scalar(cls, s) -> Point:
        """Compute  s · G."""
        return G * s

    @classmethod
    def _from_jacobian(cls, p: _Jacobian) -> Point:
        X, Y, Z = p
        if Z == 0:
            return cls.identity()
        z_inv = pow(Z, FIELD_PRIME - 2, FIELD_PRIME)
        z_inv2 = z_inv * z_inv % FIELD_PRIME
        return cls(X * z_inv2 % FIELD_PRIME, Y * z_inv2 * z_inv % FIELD_PRIME)

    def _to_jacobian(self) -> _Jacobian:
        if self._inf:
            return _JACOBIAN_INF
        return (self._x, self._y, 1)

    # serialisation ----------------------------------------------------------
    def to_bytes_compressed(self) -> bytes:
        if self._inf:
            return b"\x00" * COMPRESSED_BYTES
        prefix = b"\x03" if self._y % 2 else b"\x02"
        return prefix + self._x.to_bytes(COORD_BYTES, "big")

    def to_bytes(self) -> bytes:
        return self.to_bytes_compressed()

    @property
    def x(self) -> int:
        if self._inf:
            return 0
        return self._x

    @property
    def y(self) -> int:
        if self._inf:
            return 0
        return self._y

    def x_element(self) -> FieldElement:
        """x-coordinate as an element of the BN254 scalar field (0 for ∞)."""
        return BASE_FIELD.element(self.x)

    def is_inf(self) -> bool:
        return self._inf

    def is_on_curve(self) -> bool:
        if self._inf:
            return True
        return (self._y * self._y - self._x ** 3 - CURVE_B) % FIELD_PRIME == 0

    # group operations -------------------------------------------------------
    def _smul(self, k: int) -> Point:
        k %= ORDER
        if self._inf or k == 0:
            return Point.identity()
        return Point._from_jacobian(_jac_mul(self._to_jacobian(), k))

    def __neg__(self) -> Point:
        if self._inf:
            return self
        return Point(self._x, (-self._y) % FIELD_PRIME)

    def __add__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        if self._inf:
            return o
        if o._inf:
            return self
        return Point._from_jacobian(_jac_add(self._to_jacobian(), o._to_jacobian()))

    def __sub__(self, o: Point) -> Point:
        return self + (-o)

    def __mul__(self, s) -> Point:
        if isinstance(s, FieldElement):
            return self._smul(s.value)
        if isinstance(s, int):
            return self._smul(s)
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        if self._inf or o._inf:
            return self._inf and o._inf
        return self._x == o._x and self._y == o._y

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        if self._inf:
            return "Point(∞)"
        return f"Point(0x{self._x:064x})"[:42] + "…)"

    # utility ----------------------------------------------------------------
    @staticmethod
    def sum_points(points: List[Point]) -> Point:
        """Multi-point addition with a single final inversion."""
        acc = _JACOBIAN_INF
        for p in points:
            acc = _jac_add(acc, p._to_jacobian())
        return Point._from_jacobian(acc)

    @staticmethod
    def multi_scalar_mul(scalars: List[int], points: List[Point]) -> Point:
        """Σ s_i · P_i,  staying in Jacobian coordinates throughout."""
        if len(scalars) != len(points):
            raise ValueError("scalars and points must have equal length")
        acc = _JACOBIAN_INF
        for s, p in zip(scalars, points):
            s %= ORDER
            if s == 0 or p._inf:
                continue
            acc = _jac_add(acc, _jac_mul(p._to_jacobian(), s))
        return Point._from_jacobian(acc)


# ── NUMS generators ─────────────────────────────────────────────────────
@lru_cache(maxsize=None)
def nums_generator(index: int, domain: bytes = b"") -> Point:
    """
    The *index*-th independent generator, derived by try-and-increment
    hash-to-curve so that no discrete-log relation to G (or to any other
    index) is known.

    Method: hash (domain, index, counter) to a candidate x-coordinate,
    check whether x³ − 17 has a square root, and if so take the point
    with even y.
    """
    if index < 0:
        raise ValueError("generator index must be ≥ 0")
    for counter in range(256):
        x = BASE_FIELD.from_bytes_reduce(hash_to_curve_seed(domain, index, counter))
        pt = Point.lift_x(x.value)
        if pt is not None:
            return pt
    raise RuntimeError(f"failed to derive NUMS generator #{index}")


# ── module-level generator ──────────────────────────────────────────────
G = Point.generator()
