"""Ordering of mint keys used to derive pool account seeds."""

from __future__ import annotations

from .pubkey import Pubkey


def max_key(left: Pubkey, right: Pubkey) -> bytes:
    """Bytes of the larger of two keys, compared by their bytes."""
    return max(left, right).to_bytes()


def min_key(left: Pubkey, right: Pubkey) -> bytes:
    """Bytes of the smaller of two keys, compared by their bytes."""
    return min(left, right).to_bytes()