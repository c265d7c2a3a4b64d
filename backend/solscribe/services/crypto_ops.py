"""Cryptographic Operations — keypair generation, Ed25519 signing and verification.

Invariants:
    - Every generate_keypair() call draws fresh OS randomness (no shared seeded PRNG)
    - Messages arrive as bytes already UTF-8 encoded by core/parse_values;
      they are signed and verified as is (no hashing, no canonicalization)
    - verify_message returns a bool; malformed inputs never reach it
      (they were rejected by core/parse_values)

Design Decisions:
    - solders Keypair() over nacl: same Ed25519 implementation the ledger SDK uses
    - Secret material leaves this module only as base-58 text and is never logged
"""

from dataclasses import dataclass

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from solscribe.core.parse_values import encode_base58


@dataclass(frozen=True)
class GeneratedKeypair:
    pubkey: str
    secret: str


def generate_keypair() -> GeneratedKeypair:
    keypair = Keypair()
    return GeneratedKeypair(
        pubkey=str(keypair.pubkey()),
        secret=encode_base58(bytes(keypair)),
    )


def sign_message(keypair: Keypair, message: bytes) -> Signature:
    return keypair.sign_message(message)


def verify_message(signature: Signature, pubkey: Pubkey, message: bytes) -> bool:
    return signature.verify(pubkey, message)
