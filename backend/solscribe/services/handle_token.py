"""Token Handlers — create_token (InitializeMint) and mint_token (MintTo).

Invariants:
    - Fields parsed in request order; the first bad field names the error
    - Zero amounts follow Settings.reject_zero_amounts
    - No freeze authority, no multisig signers

Design Decisions:
    - Handlers hold Settings, not the request: one instance can serve many calls
"""

import logging

from solscribe.config import Settings
from solscribe.core.build_instructions import build_initialize_mint, build_mint_to
from solscribe.core.domain_types import TokenAmount
from solscribe.core.parse_values import check_amount, parse_public_key
from solscribe.schemas.requests import CreateTokenRequest, MintTokenRequest
from solscribe.schemas.responses import InstructionData

logger = logging.getLogger(__name__)


class TokenHandlers:
    """SPL-token mint handlers."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def create_token(self, body: CreateTokenRequest) -> InstructionData:
        mint = parse_public_key(body.mint, "mint")
        mint_authority = parse_public_key(body.mint_authority, "mint authority")
        ix = build_initialize_mint(mint, mint_authority, body.decimals)
        logger.info(
            f"Built initialize_mint for {mint} (decimals={body.decimals})",
            extra={"operation": "initialize_mint"},
        )
        return InstructionData.from_descriptor(ix)

    def mint_token(self, body: MintTokenRequest) -> InstructionData:
        mint = parse_public_key(body.mint, "mint")
        destination = parse_public_key(body.destination, "destination")
        authority = parse_public_key(body.authority, "authority")
        amount = TokenAmount(check_amount(
            body.amount, self.settings.reject_zero_amounts, "Invalid amount",
        ))
        ix = build_mint_to(mint, destination, authority, amount)
        logger.info(
            f"Built mint_to {amount} of {mint} to {destination}",
            extra={"operation": "mint_to"},
        )
        return InstructionData.from_descriptor(ix)
