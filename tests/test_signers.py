"""
Tests for secp256k1 signer keys.
"""

import pytest

from thresholdpoly.artifact import ActiveSlot
from thresholdpoly.signers import (
    SignerKey,
    hash_message,
    keccak256,
    recover_address,
    verify_compact,
)

from conftest import DEV_ADDRESSES, DEV_PRIVATE_KEYS


def test_keccak_empty():
    assert keccak256(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


@pytest.mark.parametrize("i", range(len(DEV_PRIVATE_KEYS)))
def test_dev_key_addresses(i):
    key = SignerKey.from_hex(DEV_PRIVATE_KEYS[i])
    assert int.from_bytes(key.address, "big") == DEV_ADDRESSES[i]


def test_checksum_address():
    key = SignerKey.from_hex(DEV_PRIVATE_KEYS[0])
    assert key.checksum_address == "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def test_signer_id(fr):
    key = SignerKey.from_hex(DEV_PRIVATE_KEYS[1])
    sid = key.signer_id(fr)
    assert sid == DEV_ADDRESSES[1]
    assert sid.field == fr


def test_from_hex_validates_length():
    with pytest.raises(ValueError):
        SignerKey.from_hex("0x1234")


def test_public_key_xy():
    key = SignerKey.from_hex(DEV_PRIVATE_KEYS[0])
    x, y = key.public_key_xy()
    assert len(x) == 32 and len(y) == 32
    assert b"\x04" + x + y == key.public_key.format(compressed=False)


def test_hash_message_accepts_str_and_bytes():
    assert hash_message("hello") == hash_message(b"hello")
    assert len(hash_message("")) == 32
    assert hash_message("a") != hash_message("b")


def test_sign_and_verify():
    key = SignerKey.from_hex(DEV_PRIVATE_KEYS[2])
    sig = key.sign_message("transfer 1 ETH")
    assert len(sig) == 64
    x, y = key.public_key_xy()
    assert verify_compact(x, y, sig, "transfer 1 ETH")
    assert not verify_compact(x, y, sig, "transfer 2 ETH")

    other_x, other_y = SignerKey.from_hex(DEV_PRIVATE_KEYS[3]).public_key_xy()
    assert not verify_compact(other_x, other_y, sig, "transfer 1 ETH")


def test_signatures_are_deterministic():
    key = SignerKey.from_hex(DEV_PRIVATE_KEYS[0])
    assert key.sign_message("m") == key.sign_message("m")


def test_sign_digest_validates_length():
    key = SignerKey.generate()
    with pytest.raises(ValueError):
        key.sign_digest(b"\x00" * 31)


def test_recover_address():
    key = SignerKey.from_hex(DEV_PRIVATE_KEYS[4])
    sig65 = key._sk.sign_recoverable(hash_message("hi"), hasher=None)
    assert recover_address(sig65, "hi") == key.address
    with pytest.raises(ValueError):
        recover_address(sig65[:64], "hi")


def test_active_slot():
    key = SignerKey.from_hex(DEV_PRIVATE_KEYS[0])
    slot = key.active_slot("msg")
    assert isinstance(slot, ActiveSlot)
    assert verify_compact(slot.pub_key_x, slot.pub_key_y, slot.signature, "msg")
