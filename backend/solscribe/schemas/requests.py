"""Request Schemas — one model per POST route, decoded before any handler runs.

Invariants:
    - Every field is required; absence is reported as a missing field
    - Amounts are strict JSON integers in 0..U64_MAX (bools and numeric strings rejected)
    - decimals is a strict JSON integer in 0..255
    - Unknown fields are ignored

Design Decisions:
    - Strict ints over lax coercion: "100" and true are not amounts (ADR: wire contract)
    - /send/sol's "from" is a Python keyword: stored as from_ with an alias
    - mint_authority also accepts mintAuthority for camelCase clients
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from solscribe.core.domain_types import U64_MAX, U8_MAX


class CreateTokenRequest(BaseModel):
    """POST /token/create."""
    mint_authority: str = Field(
        validation_alias=AliasChoices("mint_authority", "mintAuthority"),
    )
    mint: str
    decimals: int = Field(ge=0, le=U8_MAX, strict=True)


class MintTokenRequest(BaseModel):
    """POST /token/mint."""
    mint: str
    destination: str
    authority: str
    amount: int = Field(ge=0, le=U64_MAX, strict=True)


class SignMessageRequest(BaseModel):
    """POST /message/sign."""
    message: str
    secret: str


class VerifyMessageRequest(BaseModel):
    """POST /message/verify."""
    message: str
    signature: str
    pubkey: str


class SendSolRequest(BaseModel):
    """POST /send/sol."""
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    lamports: int = Field(ge=0, le=U64_MAX, strict=True)


class SendTokenRequest(BaseModel):
    """POST /send/token."""
    destination: str
    mint: str
    owner: str
    amount: int = Field(ge=0, le=U64_MAX, strict=True)
