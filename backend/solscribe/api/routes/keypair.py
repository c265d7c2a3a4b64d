"""Keypair Route — POST /keypair generates a fresh Ed25519 keypair."""

from fastapi import APIRouter

from solscribe.schemas.responses import KeypairData, SuccessEnvelope
from solscribe.services.handle_keys import KeyHandlers

router = APIRouter(tags=["keys"])


@router.post("/keypair", response_model=SuccessEnvelope[KeypairData])
async def generate_keypair():
    """Fresh keypair: public key and 64-byte secret, both base-58."""
    return SuccessEnvelope[KeypairData](data=KeyHandlers().generate_keypair())
