"""Checks on which mint of a pool may serve as the quote token."""

from __future__ import annotations

from .constants import DEFAULT_QUOTE_MINTS
from .errors import ErrorCode, PoolError
from .pubkey import Pubkey


def is_whitelisted_quote_token(mint: Pubkey) -> bool:
    """Return whether ``mint`` is one of the supported quote mints."""
    return mint in DEFAULT_QUOTE_MINTS


def validate_quote_token(
    token_mint_a: Pubkey, token_mint_b: Pubkey, has_alpha_vault: bool
) -> None:
    """Raise PoolError unless token B may act as the quote token for token A.

    Token A must never be a whitelisted quote mint. Token B may be any mint,
    but a pool whose B is not whitelisted cannot have an alpha vault.
    """
    if is_whitelisted_quote_token(token_mint_a):
        raise PoolError(ErrorCode.INVALID_QUOTE_MINT)
    if not is_whitelisted_quote_token(token_mint_b) and has_alpha_vault:
        raise PoolError(ErrorCode.INVALID_QUOTE_MINT)