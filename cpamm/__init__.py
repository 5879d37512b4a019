"""Constant-product AMM curve math, constants, errors, keys and parameter validation."""

__version__ = "0.1.0"
__all__ = ["constants", "curve", "errors", "params", "pool_keys", "pubkey", "quote_tokens"]