"""
Prime-field arithmetic for the threshold-polynomial engine.

Every element is bound to an explicit :class:`PrimeField`; there is no
module-level modulus baked into the algorithms.  Two standard moduli are
provided as named constants:

- ``BN254_FR`` — scalar field of BN254, the native field of the proving
  system (and the base field of Grumpkin).
- ``BN254_FQ`` — base field of BN254 (and the group order of Grumpkin).

Invariant: a :class:`FieldElement` always holds ``0 <= v < P``.  Values
coming from outside must either already be reduced (``PrimeField.element``)
or be reduced explicitly (``PrimeField.reduce``); nothing is truncated
silently.
"""

from __future__ import annotations

import secrets
from typing import Iterable, List, Optional

from .errors import FieldRangeError

# ── standard moduli ─────────────────────────────────────────────────────
BN254_FR = 21888242871839275222246405745257275088548364400416034343698204186575808495617
BN254_FQ = 21888242871839275222246405745257275088696311157297823662689037894645226208583


# ── PrimeField ──────────────────────────────────────────────────────────
class PrimeField:
    """The field  Z_p  for a prime modulus *p* supplied by the caller."""

    __slots__ = ("modulus", "byte_length")

    def __init__(self, modulus: int) -> None:
        if modulus < 2:
            raise ValueError(f"modulus must be a prime ≥ 2, got {modulus}")
        self.modulus = modulus
        self.byte_length = (modulus.bit_length() + 7) // 8

    # constructors -----------------------------------------------------------
    def element(self, value: int) -> FieldElement:
        """Wrap an already-reduced integer; raise ``FieldRangeError`` otherwise."""
        if not 0 <= value < self.modulus:
            raise FieldRangeError(value, self.modulus)
        return FieldElement._make(self, value)

    def reduce(self, value: int) -> FieldElement:
        """Explicit reduction of an arbitrary integer (hash output, sums …)."""
        return FieldElement._make(self, value % self.modulus)

    def elements(self, values: Iterable[int]) -> List[FieldElement]:
        return [self.element(v) for v in values]

    def zero(self) -> FieldElement:
        return FieldElement._make(self, 0)

    def one(self) -> FieldElement:
        return FieldElement._make(self, 1)

    def random(self) -> FieldElement:
        """Uniform in [0, p); 64 extra bits keep the modular bias negligible."""
        raw = secrets.token_bytes(self.byte_length + 8)
        return self.reduce(int.from_bytes(raw, "big"))

    def from_bytes(self, data: bytes) -> FieldElement:
        """Strict big-endian decoding; rejects values ≥ p."""
        return self.element(int.from_bytes(data, "big"))

    def from_bytes_reduce(self, data: bytes) -> FieldElement:
        """Hash-output safe: reduce arbitrary length modulo *p*."""
        return self.reduce(int.from_bytes(data, "big"))

    # operations -------------------------------------------------------------
    def add(self, a: FieldElement, b: FieldElement) -> FieldElement:
        return self._own(a) + self._own(b)

    def sub(self, a: FieldElement, b: FieldElement) -> FieldElement:
        return self._own(a) - self._own(b)

    def mul(self, a: FieldElement, b: FieldElement) -> FieldElement:
        return self._own(a) * self._own(b)

    def neg(self, a: FieldElement) -> FieldElement:
        return -self._own(a)

    def pow(self, base: FieldElement, exponent: int) -> FieldElement:
        return self._own(base) ** exponent

    def sqrt(self, a: FieldElement) -> Optional[FieldElement]:
        """
        Square root via Tonelli–Shanks, or ``None`` for a non-residue.

        BN254's fields have  p - 1  divisible by a large power of two, so
        the  p ≡ 3 (mod 4)  shortcut does not apply in general.
        """
        p = self.modulus
        v = self._own(a).value
        if v == 0:
            return self.zero()
        if pow(v, (p - 1) // 2, p) != 1:
            return None
        if p % 4 == 3:
            return self.element(pow(v, (p + 1) // 4, p))

        # p - 1 = q · 2^s  with q odd
        q, s = p - 1, 0
        while q % 2 == 0:
            q //= 2
            s += 1

        z = 2
        while pow(z, (p - 1) // 2, p) != p - 1:
            z += 1

        m = s
        c = pow(z, q, p)
        t = pow(v, q, p)
        r = pow(v, (q + 1) // 2, p)
        while t != 1:
            i, t2 = 0, t
            while t2 != 1:
                t2 = t2 * t2 % p
                i += 1
            b = pow(c, 1 << (m - i - 1), p)
            m = i
            c = b * b % p
            t = t * c % p
            r = r * b % p
        return self.element(r)

    def _own(self, a: FieldElement) -> FieldElement:
        if a.field != self:
            raise ValueError("element belongs to a different field")
        return a

    # comparison -------------------------------------------------------------
    def __eq__(self, o: object) -> bool:
        return isinstance(o, PrimeField) and o.modulus == self.modulus

    def __hash__(self) -> int:
        return hash(self.modulus)

    def __repr__(self) -> str:
        h = hex(self.modulus)
        return f"PrimeField(0x{h[2:10]}…)" if len(h) > 14 else f"PrimeField({self.modulus})"


# ── FieldElement ────────────────────────────────────────────────────────
class FieldElement:
    """Element of a :class:`PrimeField`; immutable, compared by value."""

    __slots__ = ("_f", "_v")

    def __init__(self, field: PrimeField, value: int) -> None:
        if not 0 <= value < field.modulus:
            raise FieldRangeError(value, field.modulus)
        self._f = field
        self._v = value

    @classmethod
    def _make(cls, field: PrimeField, value: int) -> FieldElement:
        # caller guarantees 0 <= value < p
        obj = object.__new__(cls)
        obj._f = field
        obj._v = value
        return obj

    # accessors --------------------------------------------------------------
    @property
    def field(self) -> PrimeField:
        return self._f

    @property
    def value(self) -> int:
        return self._v

    def is_zero(self) -> bool:
        return self._v == 0

    # serialisation ----------------------------------------------------------
    def to_bytes(self, width: Optional[int] = None) -> bytes:
        """Fixed-width big-endian encoding (field byte length by default)."""
        width = self._f.byte_length if width is None else width
        if self._v.bit_length() > 8 * width:
            raise ValueError(f"value does not fit in {width} bytes")
        return self._v.to_bytes(width, "big")

    # arithmetic -------------------------------------------------------------
    def _check(self, o: FieldElement) -> None:
        if o._f is not self._f and o._f != self._f:
            raise ValueError("cannot mix elements of different fields")

    def __add__(self, o: FieldElement) -> FieldElement:
        if not isinstance(o, FieldElement):
            return NotImplemented
        self._check(o)
        return FieldElement._make(self._f, (self._v + o._v) % self._f.modulus)

    def __radd__(self, o):
        if isinstance(o, int) and o == 0:
            return self                       # for sum()
        return NotImplemented

    def __sub__(self, o: FieldElement) -> FieldElement:
        if not isinstance(o, FieldElement):
            return NotImplemented
        self._check(o)
        return FieldElement._make(self._f, (self._v - o._v) % self._f.modulus)

    def __mul__(self, o):
        if isinstance(o, FieldElement):
            self._check(o)
            return FieldElement._make(self._f, (self._v * o._v) % self._f.modulus)
        return NotImplemented

    def __rmul__(self, o):
        if isinstance(o, int):
            return FieldElement._make(self._f, (o * self._v) % self._f.modulus)
        return NotImplemented

    def __neg__(self) -> FieldElement:
        return FieldElement._make(self._f, (-self._v) % self._f.modulus)

    def __truediv__(self, o: FieldElement) -> FieldElement:
        if not isinstance(o, FieldElement):
            return NotImplemented
        return self * o.inv()

    def __pow__(self, e: int) -> FieldElement:
        if e < 0:
            return self.inv() ** (-e)
        return FieldElement._make(self._f, pow(self._v, e, self._f.modulus))

    def inv(self) -> FieldElement:
        """Multiplicative inverse via Fermat's little theorem."""
        if self._v == 0:
            raise ZeroDivisionError("cannot invert zero")
        p = self._f.modulus
        return FieldElement._make(self._f, pow(self._v, p - 2, p))

    # comparison / hashing ---------------------------------------------------
    def __eq__(self, o: object) -> bool:
        if isinstance(o, FieldElement):
            return self._f == o._f and self._v == o._v
        if isinstance(o, int):
            return self._v == o
        return False

    def __hash__(self) -> int:
        return hash(self._v)

    def __bool__(self) -> bool:
        return self._v != 0

    def __int__(self) -> int:
        return self._v

    def __repr__(self) -> str:
        h = hex(self._v)
        return f"FieldElement(0x{h[2:10]}…)" if len(h) > 14 else f"FieldElement({h})"
