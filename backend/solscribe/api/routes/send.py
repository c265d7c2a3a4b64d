"""Send Routes — describe native SOL and SPL token transfer instructions.

Invariants:
    - /send/sol lists account addresses only; /send/token lists full account metas
    - Instructions are described, never submitted
"""

from fastapi import APIRouter, Depends

from solscribe.config import Settings, get_settings
from solscribe.schemas.requests import SendSolRequest, SendTokenRequest
from solscribe.schemas.responses import (
    ERROR_RESPONSES,
    InstructionData,
    NativeTransferData,
    SuccessEnvelope,
)
from solscribe.services.handle_transfer import TransferHandlers

router = APIRouter(prefix="/send", tags=["send"])


@router.post(
    "/sol", response_model=SuccessEnvelope[NativeTransferData],
    responses=ERROR_RESPONSES,
)
async def send_sol(
    body: SendSolRequest, settings: Settings = Depends(get_settings),
):
    """System program transfer of lamports."""
    data = TransferHandlers(settings).send_sol(body)
    return SuccessEnvelope[NativeTransferData](data=data)


@router.post(
    "/token", response_model=SuccessEnvelope[InstructionData],
    responses=ERROR_RESPONSES,
)
async def send_token(
    body: SendTokenRequest, settings: Settings = Depends(get_settings),
):
    """SPL Token transfer; account slots depend on token_account_mode."""
    data = TransferHandlers(settings).send_token(body)
    return SuccessEnvelope[InstructionData](data=data)
