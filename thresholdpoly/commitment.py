"""
Binding commitments to a policy polynomial.

The coefficient vector can be long (one coefficient per admissible
subset); the proving system only needs a short value that binds it.
Two strategies are provided, and a deployment picks exactly one:

``HASH``
    Each coefficient becomes a fixed-width big-endian block; the blocks
    are hashed (tagged SHA-256, see :mod:`hash`) and the digest is
    reduced mod p.

``PEDERSEN``
    Vector Pedersen commitment on Grumpkin:

        C = Σ_i a_i · G_i

    with independent NUMS generators  G_i  (see :func:`curve.nums_generator`).
    The published value is  x(C)  in BN254 Fr.  Computationally binding
    under the discrete-log assumption; not hiding (no blinding term),
    since the polynomial itself is an input of the circuit.

A :class:`Commitment` records which strategy produced it, so a verifier
can never recompute with the wrong one.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List

from .curve import Point, nums_generator
from .field import BN254_FR, FieldElement
from .hash import hash_coefficient_blocks
from .polynomial import Polynomial

_logger = logging.getLogger(__name__)

PEDERSEN_DOMAIN = b"thresholdpoly/pedersen/grumpkin"
DEFAULT_BLOCK_WIDTH = 32


class CommitmentScheme(enum.Enum):
    HASH = "hash"
    PEDERSEN = "pedersen"

    @classmethod
    def from_name(cls, name: str) -> CommitmentScheme:
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"unknown commitment scheme {name!r}") from None


@dataclass(frozen=True)
class Commitment:
    """A published commitment value and the scheme that produced it."""

    value: FieldElement
    scheme: CommitmentScheme

    def to_bytes(self, width: int = DEFAULT_BLOCK_WIDTH) -> bytes:
        return self.value.to_bytes(width)

    def hex(self, width: int = DEFAULT_BLOCK_WIDTH) -> str:
        return "0x" + self.to_bytes(width).hex()


# ── hash strategy ───────────────────────────────────────────────────────

def hash_commit(poly: Polynomial, width: int = DEFAULT_BLOCK_WIDTH) -> FieldElement:
    """H(a_0 ‖ a_1 ‖ … ‖ a_d)  reduced into the polynomial's field."""
    blocks = [c.to_bytes(width) for c in poly.coefficients]
    digest = hash_coefficient_blocks(blocks, width)
    return poly.field.from_bytes_reduce(digest)


# ── Pedersen strategy ───────────────────────────────────────────────────

@dataclass(frozen=True)
class PedersenVectorCommitment:
    """C = Σ a_i · G_i  over Grumpkin."""

    point: Point

    @staticmethod
    def generators(count: int) -> List[Point]:
        return [nums_generator(i, PEDERSEN_DOMAIN) for i in range(count)]

    @staticmethod
    def commit(coeffs: List[FieldElement]) -> PedersenVectorCommitment:
        gens = PedersenVectorCommitment.generators(len(coeffs))
        C = Point.multi_scalar_mul([c.value for c in coeffs], gens)
        return PedersenVectorCommitment(point=C)

    def verify(self, coeffs: List[FieldElement]) -> bool:
        """Recompute from *coeffs* and compare."""
        return self == PedersenVectorCommitment.commit(coeffs)

    def to_bytes(self) -> bytes:
        return self.point.to_bytes_compressed()


def pedersen_commit(poly: Polynomial) -> FieldElement:
    """x(Σ a_i · G_i),  0 if the sum is the identity."""
    if poly.field.modulus != BN254_FR:
        raise ValueError("pedersen commitments are defined over BN254 Fr only")
    pc = PedersenVectorCommitment.commit(list(poly.coefficients))
    return poly.field.element(pc.point.x)


# ── dispatch ────────────────────────────────────────────────────────────

def commit(
    poly: Polynomial,
    scheme: CommitmentScheme = CommitmentScheme.HASH,
    *,
    width: int = DEFAULT_BLOCK_WIDTH,
) -> Commitment:
    """Commit to *poly* with the given strategy; deterministic."""
    if scheme is CommitmentScheme.HASH:
        value = hash_commit(poly, width)
    elif scheme is CommitmentScheme.PEDERSEN:
        value = pedersen_commit(poly)
    else:
        raise ValueError(f"unsupported commitment scheme {scheme!r}")
    _logger.debug("committed to %d coefficients with %s", len(poly), scheme.value)
    return Commitment(value=value, scheme=scheme)


def verify_commitment(
    poly: Polynomial,
    commitment: Commitment,
    *,
    width: int = DEFAULT_BLOCK_WIDTH,
) -> bool:
    """Recompute with the commitment's own scheme and compare."""
    return commit(poly, commitment.scheme, width=width).value == commitment.value
