"""Token Routes — describe SPL Token InitializeMint and MintTo instructions.

Invariants:
    - Instructions are described, never submitted
"""

from fastapi import APIRouter, Depends

from solscribe.config import Settings, get_settings
from solscribe.schemas.requests import CreateTokenRequest, MintTokenRequest
from solscribe.schemas.responses import (
    ERROR_RESPONSES,
    InstructionData,
    SuccessEnvelope,
)
from solscribe.services.handle_token import TokenHandlers

router = APIRouter(prefix="/token", tags=["token"])


@router.post(
    "/create", response_model=SuccessEnvelope[InstructionData],
    responses=ERROR_RESPONSES,
)
async def create_token(
    body: CreateTokenRequest, settings: Settings = Depends(get_settings),
):
    """InitializeMint instruction for an existing mint account."""
    data = TokenHandlers(settings).create_token(body)
    return SuccessEnvelope[InstructionData](data=data)


@router.post(
    "/mint", response_model=SuccessEnvelope[InstructionData],
    responses=ERROR_RESPONSES,
)
async def mint_token(
    body: MintTokenRequest, settings: Settings = Depends(get_settings),
):
    """MintTo instruction."""
    data = TokenHandlers(settings).mint_token(body)
    return SuccessEnvelope[InstructionData](data=data)
