"""Message Routes — sign and verify UTF-8 messages with Ed25519.

Invariants:
    - Malformed keys/signatures → error envelope; wrong signature → valid=false
"""

from fastapi import APIRouter

from solscribe.schemas.requests import SignMessageRequest, VerifyMessageRequest
from solscribe.schemas.responses import (
    ERROR_RESPONSES,
    SignedMessageData,
    SuccessEnvelope,
    VerificationData,
)
from solscribe.services.handle_keys import KeyHandlers

router = APIRouter(prefix="/message", tags=["message"])


@router.post(
    "/sign", response_model=SuccessEnvelope[SignedMessageData],
    responses=ERROR_RESPONSES,
)
async def sign_message(body: SignMessageRequest):
    """Sign message with a base-58 secret key."""
    data = KeyHandlers().sign_message(body)
    return SuccessEnvelope[SignedMessageData](data=data)


@router.post(
    "/verify", response_model=SuccessEnvelope[VerificationData],
    responses=ERROR_RESPONSES,
)
async def verify_message(body: VerifyMessageRequest):
    """Verify a base-64 signature against a base-58 public key."""
    data = KeyHandlers().verify_message(body)
    return SuccessEnvelope[VerificationData](data=data)
