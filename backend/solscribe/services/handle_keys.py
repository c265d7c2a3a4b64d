"""Key Handlers — generate_keypair, sign_message, verify_message.

Invariants:
    - Empty message/secret/signature/pubkey text is a missing field, not a parse error
    - verify_message parses pubkey, then signature, then message bytes, then
      verifies: malformed input is an error envelope, never valid=false
    - Message text without a UTF-8 form is an encoding error, not a crash
    - Secret material and signatures are never logged

Design Decisions:
    - sign_message echoes the original message text, not its bytes
    - verify_message echoes the caller's pubkey text verbatim
"""

import logging

from solscribe.core.errors import ErrorContext, MissingFieldError
from solscribe.core.parse_values import (
    parse_message,
    parse_public_key,
    parse_secret_key,
    parse_signature,
)
from solscribe.schemas.requests import SignMessageRequest, VerifyMessageRequest
from solscribe.schemas.responses import (
    KeypairData,
    SignedMessageData,
    VerificationData,
    encode_payload,
)
from solscribe.services import crypto_ops

logger = logging.getLogger(__name__)


def _require(**fields: str) -> None:
    empty = [name for name, value in fields.items() if not value]
    if empty:
        raise MissingFieldError(context=ErrorContext(field=",".join(empty)))


class KeyHandlers:
    """Keypair and message-signature handlers."""

    def generate_keypair(self) -> KeypairData:
        generated = crypto_ops.generate_keypair()
        logger.info(
            f"Generated keypair {generated.pubkey}",
            extra={"operation": "generate_keypair"},
        )
        return KeypairData(pubkey=generated.pubkey, secret=generated.secret)

    def sign_message(self, body: SignMessageRequest) -> SignedMessageData:
        """Sign the UTF-8 bytes of body.message with body.secret."""
        _require(message=body.message, secret=body.secret)
        keypair = parse_secret_key(body.secret)
        signature = crypto_ops.sign_message(keypair, parse_message(body.message))
        return SignedMessageData(
            signature=encode_payload(bytes(signature)),
            public_key=str(keypair.pubkey()),
            message=body.message,
        )

    def verify_message(self, body: VerifyMessageRequest) -> VerificationData:
        """Check body.signature over the UTF-8 bytes of body.message."""
        _require(
            message=body.message, signature=body.signature, pubkey=body.pubkey,
        )
        pubkey = parse_public_key(
            body.pubkey, "pubkey", message="Invalid pubkey format",
        )
        signature = parse_signature(body.signature)
        valid = crypto_ops.verify_message(
            signature, pubkey, parse_message(body.message),
        )
        logger.info(
            f"Verified message for {body.pubkey}: valid={valid}",
            extra={"operation": "verify_message"},
        )
        return VerificationData(
            valid=valid, message=body.message, pubkey=body.pubkey,
        )
