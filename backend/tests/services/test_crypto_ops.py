"""Cryptographic Operations — keypair generation, signing, verification.

Tests cover:
    - generated keypairs are distinct and their secret re-parses to the same key
    - sign → verify round-trip
    - any single flipped bit makes verification false (never an error)
    - verification is over the exact message bytes
    - non-ASCII text signs as its UTF-8 bytes
"""

import base58
from solders.signature import Signature

from solscribe.core.parse_values import parse_secret_key
from solscribe.services import crypto_ops


def test_generated_keypairs_are_distinct():
    first = crypto_ops.generate_keypair()
    second = crypto_ops.generate_keypair()
    assert first.pubkey != second.pubkey
    assert first.secret != second.secret


def test_generated_secret_is_64_bytes_and_consistent():
    generated = crypto_ops.generate_keypair()
    assert len(base58.b58decode(generated.secret)) == 64
    assert str(parse_secret_key(generated.secret).pubkey()) == generated.pubkey


def test_sign_then_verify(keypair):
    signature = crypto_ops.sign_message(keypair, b"Hello, Solana!")
    assert len(bytes(signature)) == 64
    assert crypto_ops.verify_message(signature, keypair.pubkey(), b"Hello, Solana!")


def test_sign_then_verify_unicode_and_empty(keypair):
    for text in ["", "héllo wörld ✓", "line\nbreak"]:
        message = text.encode("utf-8")
        signature = crypto_ops.sign_message(keypair, message)
        assert crypto_ops.verify_message(signature, keypair.pubkey(), message)


def test_verify_rejects_other_message(keypair):
    signature = crypto_ops.sign_message(keypair, b"pay 1 SOL")
    assert not crypto_ops.verify_message(signature, keypair.pubkey(), b"pay 2 SOL")


def test_verify_rejects_other_key(keypair, other_keypair):
    signature = crypto_ops.sign_message(keypair, b"msg")
    assert not crypto_ops.verify_message(signature, other_keypair.pubkey(), b"msg")


def test_every_single_bit_flip_invalidates(keypair):
    raw = bytes(crypto_ops.sign_message(keypair, b"flip me"))
    for bit in range(len(raw) * 8):
        tampered = bytearray(raw)
        tampered[bit // 8] ^= 1 << (bit % 8)
        signature = Signature.from_bytes(bytes(tampered))
        assert crypto_ops.verify_message(
            signature, keypair.pubkey(), b"flip me",
        ) is False
