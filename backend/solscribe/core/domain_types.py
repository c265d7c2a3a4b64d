"""Domain Types — value objects that replace bare strings and bytes in the request layer.

Invariants:
    - AccountDescriptor and InstructionDescriptor are frozen: built once, never mutated
    - Account order inside an InstructionDescriptor is the program's order, never sorted
    - Amounts fit an unsigned 64-bit integer (0 ≤ n ≤ U64_MAX)
    - All policy choices encoded as Enums — no raw string matching

Design Decisions:
    - solders types (Pubkey, Keypair, Signature) stand in for key/signature values:
      they already enforce the byte lengths (ADR: no parallel wrapper classes)
    - NewType for amounts: zero runtime cost, full type-checker support
    - str Enums: settings values load straight from env vars
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

from solders.instruction import Instruction
from solders.pubkey import Pubkey


# ─── Sizes ───────────────────────────────────────────────────────

PUBLIC_KEY_LENGTH: int = 32
SECRET_KEY_LENGTH: int = 64
SEED_LENGTH: int = 32
SIGNATURE_LENGTH: int = 64
U64_MAX: int = 2**64 - 1
U8_MAX: int = 255


# ─── Value Types ─────────────────────────────────────────────────

Lamports = NewType("Lamports", int)       # native base units, 0–U64_MAX
TokenAmount = NewType("TokenAmount", int)  # token base units, 0–U64_MAX


# ─── Enums ───────────────────────────────────────────────────────

class TokenAccountMode(str, Enum):
    """How /send/token fills the source and destination token-account slots."""
    LITERAL = "literal"
    ASSOCIATED = "associated"


# ─── Instruction Descriptors ─────────────────────────────────────

@dataclass(frozen=True)
class AccountDescriptor:
    """One account slot of an instruction."""
    pubkey: Pubkey
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True)
class InstructionDescriptor:
    """Program id, ordered accounts and opaque payload. Described, never executed."""
    program_id: Pubkey
    accounts: tuple[AccountDescriptor, ...]
    data: bytes

    @classmethod
    def from_instruction(cls, ix: Instruction) -> "InstructionDescriptor":
        return cls(
            program_id=ix.program_id,
            accounts=tuple(
                AccountDescriptor(
                    pubkey=meta.pubkey,
                    is_signer=meta.is_signer,
                    is_writable=meta.is_writable,
                )
                for meta in ix.accounts
            ),
            data=bytes(ix.data),
        )

    @property
    def addresses(self) -> list[str]:
        return [str(account.pubkey) for account in self.accounts]
