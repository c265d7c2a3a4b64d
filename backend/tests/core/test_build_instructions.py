"""Instruction Builders — account order, flags and payload bytes.

Tests cover:
    - initialize_mint: [mint w, rent], tag 0, decimals, authority, one-byte None
      freeze authority (35 bytes)
    - mint_to: [mint w, destination w, authority s], tag 7 + u64 amount
    - native transfer: [sender s+w, receiver w], System Transfer layout
    - token transfer: [source w, destination w, owner s], tag 3 + u64 amount
    - builders are pure (same inputs, same descriptor)
    - SDK encoding failures surface as InstructionBuildFailedError
"""

import struct

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

from solscribe.core.build_instructions import (
    build_initialize_mint,
    build_mint_to,
    build_native_transfer,
    build_token_transfer,
    derive_associated_token_account,
)
from solscribe.core.domain_types import AccountDescriptor, U64_MAX
from solscribe.core.errors import InstructionBuildFailedError

from tests.known_addresses import RENT_SYSVAR, SYSTEM_PROGRAM, TOKEN_PROGRAM


@pytest.fixture
def keys():
    return [Keypair().pubkey() for _ in range(3)]


def _flags(ix):
    return [(a.is_signer, a.is_writable) for a in ix.accounts]


# ─── initialize_mint ─────────────────────────────────────────────

def test_initialize_mint_accounts(keys):
    mint, authority, _ = keys
    ix = build_initialize_mint(mint, authority, 6)
    assert str(ix.program_id) == TOKEN_PROGRAM
    assert ix.accounts == (
        AccountDescriptor(pubkey=mint, is_signer=False, is_writable=True),
        AccountDescriptor(
            pubkey=Pubkey.from_string(RENT_SYSVAR),
            is_signer=False, is_writable=False,
        ),
    )


@pytest.mark.parametrize("decimals", [0, 9, 255])
def test_initialize_mint_payload(keys, decimals):
    mint, authority, _ = keys
    ix = build_initialize_mint(mint, authority, decimals)
    assert ix.data[0] == 0
    assert ix.data[1] == decimals
    assert ix.data[2:34] == bytes(authority)
    assert ix.data[34] == 0  # freeze authority: None
    assert len(ix.data) == 35


def test_initialize_mint_payload_exact_bytes():
    ix = build_initialize_mint(
        Pubkey.from_string("11111111111111111111111111111111"),
        Pubkey.from_string("11111111111111111111111111111112"),
        255,
    )
    assert ix.data == bytes([0, 255]) + bytes(31) + b"\x01" + b"\x00"


def test_initialize_mint_never_signs(keys):
    ix = build_initialize_mint(keys[0], keys[1], 2)
    assert not any(a.is_signer for a in ix.accounts)


def test_initialize_mint_out_of_range_decimals_fails(keys):
    with pytest.raises(InstructionBuildFailedError) as exc_info:
        build_initialize_mint(keys[0], keys[1], 256)
    assert exc_info.value.message == "Failed to create initialize_mint instruction"


# ─── mint_to ─────────────────────────────────────────────────────

def test_mint_to_accounts(keys):
    mint, destination, authority = keys
    ix = build_mint_to(mint, destination, authority, 1_000)
    assert str(ix.program_id) == TOKEN_PROGRAM
    assert [a.pubkey for a in ix.accounts] == [mint, destination, authority]
    assert _flags(ix) == [(False, True), (False, True), (True, False)]


@pytest.mark.parametrize("amount", [0, 1, 1_000_000, U64_MAX])
def test_mint_to_payload(keys, amount):
    ix = build_mint_to(*keys, amount)
    assert ix.data == struct.pack("<BQ", 7, amount)


def test_mint_to_amount_overflow_fails(keys):
    with pytest.raises(InstructionBuildFailedError) as exc_info:
        build_mint_to(*keys, U64_MAX + 1)
    assert exc_info.value.message == "Failed to create mint_to instruction"


# ─── native transfer ─────────────────────────────────────────────

def test_native_transfer_accounts():
    sender = Pubkey.from_string("11111111111111111111111111111111")
    receiver = Pubkey.from_string("11111111111111111111111111111112")
    ix = build_native_transfer(sender, receiver, 1000)
    assert str(ix.program_id) == SYSTEM_PROGRAM
    assert ix.addresses == [str(sender), str(receiver)]
    assert _flags(ix) == [(True, True), (False, True)]


@pytest.mark.parametrize("lamports", [0, 1000, U64_MAX])
def test_native_transfer_payload(keys, lamports):
    ix = build_native_transfer(keys[0], keys[1], lamports)
    assert ix.data == struct.pack("<IQ", 2, lamports)


# ─── token transfer ──────────────────────────────────────────────

def test_token_transfer_accounts(keys):
    source, destination, owner = keys
    ix = build_token_transfer(source, destination, owner, 50)
    assert str(ix.program_id) == TOKEN_PROGRAM
    assert [a.pubkey for a in ix.accounts] == [source, destination, owner]
    assert _flags(ix) == [(False, True), (False, True), (True, False)]
    assert ix.data == struct.pack("<BQ", 3, 50)


def test_token_transfer_amount_overflow_fails(keys):
    with pytest.raises(InstructionBuildFailedError) as exc_info:
        build_token_transfer(*keys, U64_MAX + 1)
    assert exc_info.value.message == "Failed to create transfer instruction"


# ─── purity ──────────────────────────────────────────────────────

def test_builders_are_deterministic(keys):
    assert build_mint_to(*keys, 5) == build_mint_to(*keys, 5)
    assert build_native_transfer(keys[0], keys[1], 5) == build_native_transfer(
        keys[0], keys[1], 5,
    )


# ─── associated token accounts ───────────────────────────────────

def test_associated_token_account_matches_program_derivation(keys):
    wallet, mint, _ = keys
    expected, _bump = Pubkey.find_program_address(
        [bytes(wallet), bytes(TOKEN_PROGRAM_ID), bytes(mint)],
        ASSOCIATED_TOKEN_PROGRAM_ID,
    )
    assert derive_associated_token_account(wallet, mint) == expected


def test_associated_token_account_differs_per_wallet(keys):
    wallet_a, mint, wallet_b = keys
    assert derive_associated_token_account(wallet_a, mint) != (
        derive_associated_token_account(wallet_b, mint)
    )
