"""Transfer Handlers — send_sol (System Transfer) and send_token (SPL Transfer).

Invariants:
    - send_sol never fails once both addresses parse (no balance lookup)
    - send_token slot filling follows Settings.token_account_mode:
        literal     source=mint, destination=destination (addresses used as given)
        associated  source=ATA(owner, mint), destination=ATA(destination, mint)
    - Zero amounts follow Settings.reject_zero_amounts, checked before any address

Design Decisions:
    - literal is the default: it is the contract existing clients were built against
    - associated mode derives addresses locally; the ledger is never consulted
"""

import logging

from solscribe.config import Settings
from solscribe.core.build_instructions import (
    build_native_transfer,
    build_token_transfer,
    derive_associated_token_account,
)
from solscribe.core.domain_types import Lamports, TokenAccountMode, TokenAmount
from solscribe.core.parse_values import check_amount, parse_public_key
from solscribe.schemas.requests import SendSolRequest, SendTokenRequest
from solscribe.schemas.responses import InstructionData, NativeTransferData

logger = logging.getLogger(__name__)


class TransferHandlers:
    """Native and token transfer handlers."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def send_sol(self, body: SendSolRequest) -> NativeTransferData:
        lamports = Lamports(check_amount(
            body.lamports, self.settings.reject_zero_amounts,
            "Invalid lamports amount",
        ))
        sender = parse_public_key(body.from_, "sender")
        receiver = parse_public_key(body.to, "recipient")
        ix = build_native_transfer(sender, receiver, lamports)
        logger.info(
            f"Built transfer of {lamports} lamports {sender} -> {receiver}",
            extra={"operation": "system_transfer"},
        )
        return NativeTransferData.from_descriptor(ix)

    def send_token(self, body: SendTokenRequest) -> InstructionData:
        amount = TokenAmount(check_amount(
            body.amount, self.settings.reject_zero_amounts, "Invalid amount",
        ))
        destination = parse_public_key(body.destination, "destination")
        mint = parse_public_key(body.mint, "mint")
        owner = parse_public_key(body.owner, "owner")

        if self.settings.token_account_mode == TokenAccountMode.ASSOCIATED:
            source = derive_associated_token_account(owner, mint)
            destination = derive_associated_token_account(destination, mint)
        else:
            source = mint

        ix = build_token_transfer(source, destination, owner, amount)
        logger.info(
            f"Built token transfer of {amount} ({self.settings.token_account_mode.value})",
            extra={"operation": "token_transfer"},
        )
        return InstructionData.from_descriptor(ix)
