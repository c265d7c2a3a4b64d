"""Instruction Builders — parsed values to InstructionDescriptor, no IO.

Invariants:
    - Builders are PURE: same inputs, same descriptor, byte for byte
    - Account order and signer/writable flags are the target program's convention:
        initialize_mint  [mint w, rent sysvar]
        mint_to          [mint w, destination w, authority s]
        native transfer  [sender s+w, receiver w]
        token transfer   [source w, destination w, owner s]
    - Mint authority is set, freeze authority never is; the InitializeMint payload
      is the 35-byte canonical packing (tag, decimals, authority, None tag)
    - Multisig signer lists are always empty
    - SPL-token builders raise InstructionBuildFailedError if encoding fails;
      the native transfer builder cannot fail once its inputs parsed

Design Decisions:
    - SDK builders (spl.token, solders.system_program) produce the payload bytes:
      no hand-rolled layouts to drift from the on-chain programs
    - spl.token lays the freeze authority out as a fixed 32-byte slot even when
      absent; the payload is cut back to where the on-chain program packs None
    - Results converted to InstructionDescriptor at the boundary so routes never
      touch solders AccountMeta directly
"""

import logging
from dataclasses import replace

from solders.pubkey import Pubkey
from solders.system_program import TransferParams as SystemTransferParams
from solders.system_program import transfer as system_transfer
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import (
    InitializeMintParams,
    MintToParams,
    TransferParams as TokenTransferParams,
    get_associated_token_address,
    initialize_mint,
    mint_to,
)
from spl.token.instructions import transfer as token_transfer

from solscribe.core.domain_types import InstructionDescriptor, Lamports, TokenAmount
from solscribe.core.errors import ErrorContext, InstructionBuildFailedError

logger = logging.getLogger(__name__)

# tag (1) + decimals (1) + mint authority (32) + freeze authority None tag (1)
INITIALIZE_MINT_DATA_LENGTH = 35


def build_initialize_mint(
    mint: Pubkey, mint_authority: Pubkey, decimals: int,
) -> InstructionDescriptor:
    """SPL Token InitializeMint with no freeze authority."""
    try:
        ix = initialize_mint(InitializeMintParams(
            decimals=decimals,
            program_id=TOKEN_PROGRAM_ID,
            mint=mint,
            mint_authority=mint_authority,
            freeze_authority=None,
        ))
    except Exception as e:  # noqa: BLE001  construct raises several types
        logger.warning(f"initialize_mint encoding failed: {e}")
        raise InstructionBuildFailedError(
            "initialize_mint",
            ErrorContext(debug_info={"decimals": decimals}),
        ) from e
    descriptor = InstructionDescriptor.from_instruction(ix)
    return replace(descriptor, data=descriptor.data[:INITIALIZE_MINT_DATA_LENGTH])


def build_mint_to(
    mint: Pubkey, destination: Pubkey, authority: Pubkey, amount: TokenAmount,
) -> InstructionDescriptor:
    """SPL Token MintTo from a single (non-multisig) authority."""
    try:
        ix = mint_to(MintToParams(
            program_id=TOKEN_PROGRAM_ID,
            mint=mint,
            dest=destination,
            mint_authority=authority,
            amount=amount,
            signers=[],
        ))
    except Exception as e:  # noqa: BLE001
        logger.warning(f"mint_to encoding failed: {e}")
        raise InstructionBuildFailedError("mint_to") from e
    return InstructionDescriptor.from_instruction(ix)


def build_native_transfer(
    sender: Pubkey, receiver: Pubkey, lamports: Lamports,
) -> InstructionDescriptor:
    """System program Transfer. No balance check: ledger state is never read."""
    ix = system_transfer(SystemTransferParams(
        from_pubkey=sender, to_pubkey=receiver, lamports=lamports,
    ))
    return InstructionDescriptor.from_instruction(ix)


def build_token_transfer(
    source: Pubkey, destination: Pubkey, owner: Pubkey, amount: TokenAmount,
) -> InstructionDescriptor:
    """SPL Token Transfer between two token accounts, signed by a single owner."""
    try:
        ix = token_transfer(TokenTransferParams(
            program_id=TOKEN_PROGRAM_ID,
            source=source,
            dest=destination,
            owner=owner,
            amount=amount,
            signers=[],
        ))
    except Exception as e:  # noqa: BLE001
        logger.warning(f"transfer encoding failed: {e}")
        raise InstructionBuildFailedError("transfer") from e
    return InstructionDescriptor.from_instruction(ix)


def derive_associated_token_account(wallet: Pubkey, mint: Pubkey) -> Pubkey:
    """Associated token account address of wallet for mint."""
    return get_associated_token_address(wallet, mint)
