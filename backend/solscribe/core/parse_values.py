"""Value Parsers — untrusted request text to validated keys, signatures and amounts.

Invariants:
    - Every parser returns a value or raises a SolscribeError subclass (never a raw
      ValueError, never a crash)
    - Public keys decode to exactly 32 bytes; secret keys to exactly 64 bytes whose
      upper half is the public key derived from the lower half
    - Signatures decode from standard base-64 to exactly 64 bytes
    - Messages are their UTF-8 bytes; text with no UTF-8 form is an encoding error
    - Bad alphabet and bad length are distinct failures

Design Decisions:
    - base58 decodes before solders sees the bytes: alphabet and length errors
      stay distinguishable (ADR: error taxonomy)
    - Seed/public consistency checked by re-deriving the keypair from the seed,
      independent of how the SDK treats the 64-byte form
"""

import base64
import binascii

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from solscribe.core.domain_types import (
    PUBLIC_KEY_LENGTH, SECRET_KEY_LENGTH, SEED_LENGTH, SIGNATURE_LENGTH,
)
from solscribe.core.errors import (
    ErrorContext,
    InvalidAmountError,
    InvalidBase58Error,
    InvalidBase64Error,
    InvalidMessageEncodingError,
    InvalidPublicKeyError,
    InvalidSecretKeyError,
    InvalidSignatureFormatError,
)


def decode_base58(text: str) -> bytes:
    """Raw base-58 decode. Raises ValueError on characters outside the alphabet."""
    return base58.b58decode(text)


def encode_base58(raw: bytes) -> str:
    return base58.b58encode(raw).decode("ascii")


def parse_public_key(text: str, label: str, message: str | None = None) -> Pubkey:
    """Decode a base-58 public key; label names the field in the error message."""
    try:
        raw = decode_base58(text)
    except ValueError:
        raise InvalidPublicKeyError(label, message=message) from None
    if len(raw) != PUBLIC_KEY_LENGTH:
        raise InvalidPublicKeyError(label, message=message)
    return Pubkey.from_bytes(raw)


def parse_secret_key(text: str) -> Keypair:
    """Decode 64-byte base-58 secret material into a keypair."""
    ctx = ErrorContext(field="secret")
    try:
        raw = decode_base58(text)
    except ValueError:
        raise InvalidBase58Error("Invalid secret format", ctx) from None
    if len(raw) != SECRET_KEY_LENGTH:
        raise InvalidSecretKeyError(context=ctx)

    seed, public = raw[:SEED_LENGTH], raw[SEED_LENGTH:]
    keypair = Keypair.from_seed(seed)
    if bytes(keypair.pubkey()) != public:
        raise InvalidSecretKeyError(context=ctx)
    return keypair


def parse_signature(text: str) -> Signature:
    """Decode a standard base-64 signature of exactly 64 bytes."""
    ctx = ErrorContext(field="signature")
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidBase64Error("Invalid base64 signature", ctx) from None
    if len(raw) != SIGNATURE_LENGTH:
        raise InvalidSignatureFormatError(context=ctx)
    return Signature.from_bytes(raw)


def parse_message(text: str, field: str = "message") -> bytes:
    """UTF-8 bytes of a message. JSON escapes can smuggle in lone surrogates."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidMessageEncodingError(
            context=ErrorContext(field=field),
        ) from None


def check_amount(amount: int, reject_zero: bool, message: str) -> int:
    """Apply the zero-amount policy. Range is enforced by the request schema."""
    if reject_zero and amount == 0:
        raise InvalidAmountError(message, ErrorContext(field="amount"))
    return amount
