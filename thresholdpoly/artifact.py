"""
Fixed-width prover input.

The circuit has static array sizes, so the policy reaches it as:

- the coefficient vector padded with zeros to ``coefficient_count``,
  each coefficient ``coefficient_width`` bytes big-endian;
- the commitment value;
- the 32-byte hash of the message being authorised;
- exactly ``max_signers`` signature slots.

A slot is either :class:`ActiveSlot` (public key and signature of a
participating signer) or :class:`EmptySlot`.  The serialiser matches on
the slot type; the circuit's ``should_calculate`` flag is derived from
it rather than stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple, Union

from .commitment import Commitment

PUB_KEY_COORD_BYTES = 32
SIGNATURE_BYTES = 64
MESSAGE_HASH_BYTES = 32


# ── signature slots ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class ActiveSlot:
    """A participating signer: uncompressed key coordinates and  r ‖ s."""

    pub_key_x: bytes
    pub_key_y: bytes
    signature: bytes

    def __post_init__(self) -> None:
        if len(self.pub_key_x) != PUB_KEY_COORD_BYTES:
            raise ValueError(f"pub_key_x must be {PUB_KEY_COORD_BYTES} bytes")
        if len(self.pub_key_y) != PUB_KEY_COORD_BYTES:
            raise ValueError(f"pub_key_y must be {PUB_KEY_COORD_BYTES} bytes")
        if len(self.signature) != SIGNATURE_BYTES:
            raise ValueError(f"signature must be {SIGNATURE_BYTES} bytes")


@dataclass(frozen=True)
class EmptySlot:
    """An unused slot; the circuit skips it."""


SignatureSlot = Union[ActiveSlot, EmptySlot]

_ZERO_COORD = bytes(PUB_KEY_COORD_BYTES)
_ZERO_SIG = bytes(SIGNATURE_BYTES)


def _slot_fields(slot: SignatureSlot) -> Tuple[int, bytes, bytes, bytes]:
    if isinstance(slot, ActiveSlot):
        return 1, slot.pub_key_x, slot.pub_key_y, slot.signature
    if isinstance(slot, EmptySlot):
        return 0, _ZERO_COORD, _ZERO_COORD, _ZERO_SIG
    raise TypeError(f"not a signature slot: {slot!r}")


# ── coefficient padding ─────────────────────────────────────────────────

def pad_coefficients(values: Sequence[int], count: int) -> List[int]:
    """
    Zero-pad (or trim trailing zeros) to exactly *count* entries.

    Trimming a non-zero coefficient would publish a different
    polynomial, so it is refused.
    """
    if count < 1:
        raise ValueError("coefficient count must be ≥ 1")
    values = list(values)
    if len(values) > count:
        if any(values[count:]):
            raise ValueError(
                f"polynomial has {len(values)} coefficients; "
                f"cannot fit in {count} without dropping non-zero terms"
            )
        return values[:count]
    return values + [0] * (count - len(values))


# ── artifact ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ProverArtifact:
    """Everything the circuit consumes for one authorisation."""

    coefficients: Tuple[int, ...]
    commitment: Commitment
    message_hash: bytes
    slots: Tuple[SignatureSlot, ...]
    coefficient_width: int = 32

    @property
    def active_count(self) -> int:
        return sum(1 for s in self.slots if isinstance(s, ActiveSlot))

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping: hex strings for field values, byte lists for the rest."""
        w = self.coefficient_width
        signature_data = []
        for slot in self.slots:
            flag, x, y, sig = _slot_fields(slot)
            signature_data.append({
                "should_calculate": flag,
                "pub_key_x": list(x),
                "pub_key_y": list(y),
                "signature": list(sig),
            })
        return {
            "polynomial": ["0x" + c.to_bytes(w, "big").hex() for c in self.coefficients],
            "polynomial_commitment": self.commitment.hex(w),
            "commitment_scheme": self.commitment.scheme.value,
            "message_hash": list(self.message_hash),
            "signature_data": signature_data,
        }

    def to_bytes(self) -> bytes:
        """
        Fixed-width encoding:

            coeffs (count · w) ‖ commitment (w) ‖ msg hash (32) ‖
            slots (count · (1 + 32 + 32 + 64))
        """
        w = self.coefficient_width
        parts = [c.to_bytes(w, "big") for c in self.coefficients]
        parts.append(self.commitment.to_bytes(w))
        parts.append(self.message_hash)
        for slot in self.slots:
            flag, x, y, sig = _slot_fields(slot)
            parts.append(bytes([flag]) + x + y + sig)
        return b"".join(parts)


def build_artifact(
    coefficients: Sequence[int],
    commitment: Commitment,
    message_hash: bytes,
    active_slots: Sequence[ActiveSlot],
    *,
    coefficient_count: int,
    coefficient_width: int,
    max_signers: int,
) -> ProverArtifact:
    """
    Pad coefficients and slots to the circuit's fixed sizes.

    Raises ``ValueError`` if there are more active slots than
    ``max_signers``, if the message hash is not 32 bytes, or if a
    coefficient does not fit ``coefficient_width``.
    """
    if len(message_hash) != MESSAGE_HASH_BYTES:
        raise ValueError(f"message hash must be {MESSAGE_HASH_BYTES} bytes")
    if len(active_slots) > max_signers:
        raise ValueError(
            f"{len(active_slots)} signatures exceed {max_signers} slots"
        )
    if any(not isinstance(s, ActiveSlot) for s in active_slots):
        raise TypeError("active_slots must contain ActiveSlot entries only")

    padded = pad_coefficients(coefficients, coefficient_count)
    limit = 1 << (8 * coefficient_width)
    if any(c < 0 or c >= limit for c in padded):
        raise ValueError(f"coefficient does not fit in {coefficient_width} bytes")

    slots: List[SignatureSlot] = list(active_slots)
    slots.extend(EmptySlot() for _ in range(max_signers - len(active_slots)))
    return ProverArtifact(
        coefficients=tuple(padded),
        commitment=commitment,
        message_hash=bytes(message_hash),
        slots=tuple(slots),
        coefficient_width=coefficient_width,
    )
