"""Concentrated-liquidity price and amount math on Q64.64 square-root prices."""

from __future__ import annotations

import enum

from .constants import U64_MAX, U128_MAX, U256_MAX
from .errors import ErrorCode, PoolError

RESOLUTION = 64


class Rounding(enum.Enum):
    UP = "up"
    DOWN = "down"


def _checked_u256(value: int) -> int:
    if value > U256_MAX:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return value


def _u128_sub(a: int, b: int) -> int:
    if a < b:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return a - b


def _to_u64(value: int) -> int:
    if value > U64_MAX:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return value


def _to_u128(value: int) -> int:
    if value > U128_MAX:
        raise PoolError(ErrorCode.TYPE_CAST_FAILED)
    return value


def mul_div_u256(x: int, y: int, denominator: int, rounding: Rounding) -> int:
    """Compute ``x * y / denominator`` with the given rounding, within 256 bits."""
    if denominator == 0:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    quotient, remainder = divmod(x * y, denominator)
    if rounding is Rounding.UP and remainder:
        quotient += 1
    return _checked_u256(quotient)


def get_initialize_amounts(
    sqrt_min_price: int, sqrt_max_price: int, sqrt_price: int, liquidity: int
) -> tuple[int, int]:
    """Token amounts (base, quote) needed to seed ``liquidity`` at ``sqrt_price``."""
    amount_a = get_delta_amount_a_unsigned(sqrt_price, sqrt_max_price, liquidity, Rounding.UP)
    amount_b = get_delta_amount_b_unsigned(sqrt_min_price, sqrt_price, liquidity, Rounding.UP)
    return amount_a, amount_b


def get_delta_amount_a_unsigned(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, round: Rounding
) -> int:
    """Amount of token A for ``liquidity`` between two prices, as a u64."""
    return _to_u64(
        get_delta_amount_a_unsigned_unchecked(lower_sqrt_price, upper_sqrt_price, liquidity, round)
    )


def get_delta_amount_a_unsigned_unchecked(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, round: Rounding
) -> int:
    """``L * (√P_upper - √P_lower) / (√P_upper * √P_lower)`` without the u64 bound."""
    delta = _u128_sub(upper_sqrt_price, lower_sqrt_price)
    denominator = _checked_u256(lower_sqrt_price * upper_sqrt_price)
    if denominator <= 0:
        raise ValueError("sqrt prices must be positive")
    return mul_div_u256(liquidity, delta, denominator, round)


def get_delta_amount_b_unsigned(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, round: Rounding
) -> int:
    """Amount of token B for ``liquidity`` between two prices, as a u64."""
    return _to_u64(
        get_delta_amount_b_unsigned_unchecked(lower_sqrt_price, upper_sqrt_price, liquidity, round)
    )


def get_delta_amount_b_unsigned_unchecked(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, round: Rounding
) -> int:
    """``L * (√P_upper - √P_lower)`` scaled down by 2**128."""
    delta = _u128_sub(upper_sqrt_price, lower_sqrt_price)
    product = _checked_u256(liquidity * delta)
    shift = RESOLUTION * 2
    if round is Rounding.UP:
        return -(-product >> shift)
    return product >> shift


def get_next_sqrt_price_from_input(
    sqrt_price: int, liquidity: int, amount_in: int, a_for_b: bool
) -> int:
    """Next sqrt price after putting ``amount_in`` of one token into the pool."""
    if sqrt_price <= 0:
        raise ValueError("sqrt price must be positive")
    if liquidity <= 0:
        raise ValueError("liquidity must be positive")
    if a_for_b:
        return get_next_sqrt_price_from_amount_a_rounding_up(sqrt_price, liquidity, amount_in)
    return get_next_sqrt_price_from_amount_b_rounding_down(sqrt_price, liquidity, amount_in)


def get_next_sqrt_price_from_amount_a_rounding_up(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """``√P' = √P * L / (L + Δx * √P)``, rounded up."""
    if amount == 0:
        return sqrt_price
    product = _checked_u256(amount * sqrt_price)
    denominator = _checked_u256(liquidity + product)
    return _to_u128(mul_div_u256(liquidity, sqrt_price, denominator, Rounding.UP))


def get_next_sqrt_price_from_amount_b_rounding_down(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """``√P' = √P + Δy / L``, rounded down."""
    if liquidity == 0:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    quotient = _checked_u256(amount << (RESOLUTION * 2)) // liquidity
    return _to_u128(_checked_u256(sqrt_price + quotient))