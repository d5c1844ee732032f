"""
Domain-separated hash functions.

Every hash call includes a unique domain tag so that outputs for
different roles (coefficient commitment, generator derivation) are
independent even when fed identical data.

Convention follows BIP-340 tagged hashes:

    H_tag(x) = SHA-256( SHA-256(tag) ‖ SHA-256(tag) ‖ x )
"""

from __future__ import annotations

import hashlib
from typing import Any, Iterable

# ── domain tags ─────────────────────────────────────────────────────────
_TAG_POLY      = b"THRESHOLDPOLY/v1/polynomial"
_TAG_GENERATOR = b"THRESHOLDPOLY/v1/generator"


# ── internal helpers ────────────────────────────────────────────────────
def _tagged_hasher(tag: bytes) -> "hashlib._Hash":
    """Return a SHA-256 context pre-loaded with the BIP-340 tag prefix."""
    tag_hash = hashlib.sha256(tag).digest()
    h = hashlib.sha256()
    h.update(tag_hash)
    h.update(tag_hash)
    return h


def _encode_item(item: Any) -> bytes:
    """
    Canonical encoding of an item for hashing.

    Length-prefixing is used for variable-length items (bytes, lists)
    to ensure unambiguous parsing.
    """
    if isinstance(item, bytes):
        return len(item).to_bytes(4, "big") + item
    if isinstance(item, int):
        return item.to_bytes(32, "big")
    if isinstance(item, (list, tuple)):
        parts = b"".join(_encode_item(x) for x in item)
        return len(item).to_bytes(4, "big") + parts
    raise TypeError(f"cannot hash item of type {type(item).__name__}")


def _tagged_hash(tag: bytes, *args: Any) -> bytes:
    h = _tagged_hasher(tag)
    for a in args:
        h.update(_encode_item(a))
    return h.digest()


# ── public hash functions ───────────────────────────────────────────────

def hash_coefficient_blocks(blocks: Iterable[bytes], width: int) -> bytes:
    """
    Digest of fixed-width coefficient blocks, concatenated in degree order.

    The block count and width are bound into the hash so that vectors of
    different lengths (e.g. with and without trailing zeros) never
    collide.
    """
    blocks = list(blocks)
    h = _tagged_hasher(_TAG_POLY)
    h.update(len(blocks).to_bytes(4, "big"))
    h.update(width.to_bytes(4, "big"))
    for b in blocks:
        if len(b) != width:
            raise ValueError(f"expected {width}-byte block, got {len(b)}")
        h.update(b)
    return h.digest()


def hash_to_curve_seed(domain: bytes, index: int, counter: int) -> bytes:
    """Candidate x-coordinate seed for the *index*-th NUMS generator."""
    return _tagged_hash(_TAG_GENERATOR, domain, index, counter)
