"""Response Schemas — explicit per-operation result models and the envelope.

Invariants:
    - Success envelope is {success: true, data: <model>}; error is {success: false, error: <str>}
    - Instruction payload bytes are always base-64 text
    - Key material is always base-58 text
    - /send/sol lists bare addresses; every other instruction lists full account metas

Design Decisions:
    - Generic SuccessEnvelope[T] over an untyped dict: response shape is checked
      by FastAPI's response_model (ADR: explicit result structs)
    - Encoding done in from_descriptor classmethods, once, at the boundary
"""

import base64
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

from solscribe.core.domain_types import AccountDescriptor, InstructionDescriptor

DataT = TypeVar("DataT")


def encode_payload(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


class SuccessEnvelope(BaseModel, Generic[DataT]):
    success: Literal[True] = True
    data: DataT


class ErrorEnvelope(BaseModel):
    success: Literal[False] = False
    error: str


# ─── Instructions ────────────────────────────────────────────────

class AccountMetaData(BaseModel):
    """One account slot as published to clients."""
    pubkey: str
    is_signer: bool
    is_writable: bool

    @classmethod
    def from_descriptor(cls, account: AccountDescriptor) -> "AccountMetaData":
        return cls(
            pubkey=str(account.pubkey),
            is_signer=account.is_signer,
            is_writable=account.is_writable,
        )


class InstructionData(BaseModel):
    """/token/create, /token/mint and /send/token result."""
    program_id: str
    accounts: list[AccountMetaData]
    instruction_data: str

    @classmethod
    def from_descriptor(cls, ix: InstructionDescriptor) -> "InstructionData":
        return cls(
            program_id=str(ix.program_id),
            accounts=[AccountMetaData.from_descriptor(a) for a in ix.accounts],
            instruction_data=encode_payload(ix.data),
        )


class NativeTransferData(BaseModel):
    """/send/sol result — accounts reduced to addresses."""
    program_id: str
    accounts: list[str]
    instruction_data: str

    @classmethod
    def from_descriptor(cls, ix: InstructionDescriptor) -> "NativeTransferData":
        return cls(
            program_id=str(ix.program_id),
            accounts=ix.addresses,
            instruction_data=encode_payload(ix.data),
        )


# ─── Keys & Messages ─────────────────────────────────────────────

class KeypairData(BaseModel):
    pubkey: str
    secret: str


class SignedMessageData(BaseModel):
    signature: str
    public_key: str
    message: str


class VerificationData(BaseModel):
    valid: bool
    message: str
    pubkey: str


# OpenAPI documentation for routes that can fail validation
ERROR_RESPONSES: dict = {400: {"model": ErrorEnvelope}}
