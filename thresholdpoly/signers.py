"""
secp256k1 signer keys via libsecp256k1.

Signers are Ethereum accounts: the signer id that enters the policy
polynomial is the account address read as an integer, and messages are
signed as EIP-191 personal messages.  Signatures are exported as the
64-byte  r ‖ s  form the circuit consumes (the recovery byte is
dropped).

Install
-------
    pip install coincurve>=18.0.0 pycryptodome>=3.18

References
----------
- SEC 2 v2 §2.4.1   secp256k1 domain parameters
- EIP-191           Signed Data Standard
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from coincurve import PrivateKey as _SK, PublicKey as _PK
from Crypto.Hash import keccak

from .artifact import ActiveSlot
from .field import FieldElement, PrimeField

COORD_BYTES = 32
SIGNATURE_BYTES = 64
ADDRESS_BYTES = 20

_EIP191_PREFIX = b"\x19Ethereum Signed Message:\n"


# ── hashing ─────────────────────────────────────────────────────────────
def keccak256(data: bytes) -> bytes:
    h = keccak.new(digest_bits=256)
    h.update(data)
    return h.digest()


def hash_message(message: Union[str, bytes]) -> bytes:
    """EIP-191 personal-message digest."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    return keccak256(_EIP191_PREFIX + str(len(message)).encode("ascii") + message)


def address_from_public_key(pk: _PK) -> bytes:
    """Last 20 bytes of  keccak256(x ‖ y)."""
    raw = pk.format(compressed=False)
    return keccak256(raw[1:])[-ADDRESS_BYTES:]


def to_checksum_address(address: bytes) -> str:
    """EIP-55 mixed-case hex."""
    lower = address.hex()
    digest = keccak256(lower.encode("ascii")).hex()
    return "0x" + "".join(
        ch.upper() if int(digest[i], 16) >= 8 else ch
        for i, ch in enumerate(lower)
    )


# ── SignerKey ───────────────────────────────────────────────────────────
@dataclass(frozen=True)
class SignerKey:
    """A signer's secp256k1 key pair."""

    _sk: _SK

    @classmethod
    def from_hex(cls, private_key: str) -> SignerKey:
        hexstr = private_key[2:] if private_key.startswith("0x") else private_key
        data = bytes.fromhex(hexstr)
        if len(data) != 32:
            raise ValueError(f"need 32-byte private key, got {len(data)}")
        return cls(_SK(data))

    @classmethod
    def generate(cls) -> SignerKey:
        return cls(_SK())

    @property
    def public_key(self) -> _PK:
        return self._sk.public_key

    @property
    def address(self) -> bytes:
        return address_from_public_key(self.public_key)

    @property
    def checksum_address(self) -> str:
        return to_checksum_address(self.address)

    def signer_id(self, field: PrimeField) -> FieldElement:
        """Address as a field element; must already be < p (no silent reduction)."""
        return field.element(int.from_bytes(self.address, "big"))

    def public_key_xy(self) -> Tuple[bytes, bytes]:
        raw = self.public_key.format(compressed=False)
        return raw[1:1 + COORD_BYTES], raw[1 + COORD_BYTES:]

    def sign_digest(self, digest: bytes) -> bytes:
        """64-byte  r ‖ s  over a 32-byte digest (low-s, RFC 6979 nonce)."""
        if len(digest) != 32:
            raise ValueError(f"need 32-byte digest, got {len(digest)}")
        return self._sk.sign_recoverable(digest, hasher=None)[:SIGNATURE_BYTES]

    def sign_message(self, message: Union[str, bytes]) -> bytes:
        return self.sign_digest(hash_message(message))

    def active_slot(self, message: Union[str, bytes]) -> ActiveSlot:
        """Signature slot for the prover artifact."""
        x, y = self.public_key_xy()
        return ActiveSlot(pub_key_x=x, pub_key_y=y, signature=self.sign_message(message))


def recover_address(signature: bytes, message: Union[str, bytes]) -> bytes:
    """
    Address that produced a 65-byte recoverable signature over *message*.

    Raises ``ValueError`` for malformed signatures.
    """
    if len(signature) != SIGNATURE_BYTES + 1:
        raise ValueError(f"need {SIGNATURE_BYTES + 1}-byte recoverable signature")
    pk = _PK.from_signature_and_message(signature, hash_message(message), hasher=None)
    return address_from_public_key(pk)


def verify_compact(
    pub_key_x: bytes,
    pub_key_y: bytes,
    signature: bytes,
    message: Union[str, bytes],
) -> bool:
    """Check a 64-byte  r ‖ s  signature by trying both recovery ids."""
    if len(signature) != SIGNATURE_BYTES:
        raise ValueError(f"need {SIGNATURE_BYTES}-byte signature, got {len(signature)}")
    expected = b"\x04" + pub_key_x + pub_key_y
    digest = hash_message(message)
    for recid in (0, 1):
        try:
            pk = _PK.from_signature_and_message(
                signature + bytes([recid]), digest, hasher=None)
        except ValueError:
            continue
        if pk.format(compressed=False) == expected:
            return True
    return False
