# cpamm

Pure-Python building blocks for a constant-product automated market maker
that trades inside a bounded square-root price range. Prices are square
roots in Q64.64 fixed point; all arithmetic uses Python integers with
explicit 64-, 128- and 256-bit limits.

## Modules

- `cpamm.curve` – curve math. `get_initialize_amounts` gives the token A
  and token B amounts needed to seed a liquidity at a price;
  `get_delta_amount_a_unsigned` and `get_delta_amount_b_unsigned` (and their
  `_unchecked` variants without the u64 bound) give the amounts for a
  liquidity between two prices; `get_next_sqrt_price_from_input` (with
  `get_next_sqrt_price_from_amount_a_rounding_up` and
  `get_next_sqrt_price_from_amount_b_rounding_down`) gives the price after
  an input amount; `mul_div_u256` multiplies and divides with rounding. The
  `Rounding` enum has `UP` and `DOWN`.
- `cpamm.constants` – price bounds, fee limits, reward durations, activation
  and vesting buffers, account seed prefixes, the treasury, the default quote
  mints (`SOL_MINT`, `USDC_MINT`), the `ADMINS` list and `assert_eq_admin`.
- `cpamm.errors` – the `ErrorCode` enumeration (codes 6000 onwards, each with
  a `message()`) and the `PoolError` exception, whose `code` attribute holds
  the `ErrorCode`. Every failed check in the package raises `PoolError`.
- `cpamm.pubkey` – `b58encode`, `b58decode` and the immutable, ordered
  32-byte `Pubkey` with `from_string`, `default`, `to_bytes` and a base58
  `str()`.
- `cpamm.params` – `VestingParameters`, `SplitPositionParameters` and
  `SplitPositionParameters2`, each with `validate()`;
  `SplitPositionParameters.get_split_position_parameters2()` turns
  percentages into numerators over `SPLIT_POSITION_DENOMINATOR`.
- `cpamm.pool_keys` – `max_key` and `min_key`, the bytes of the larger and
  smaller of two keys, used to order mints in pool address seeds.
- `cpamm.quote_tokens` – `is_whitelisted_quote_token` and
  `validate_quote_token`: token A may never be a default quote mint, and a
  pool whose token B is not one may not have an alpha vault.

## Installation

```
pip install .
```

## Example

```python
from cpamm.constants import MIN_SQRT_PRICE, MAX_SQRT_PRICE
from cpamm.curve import get_initialize_amounts, get_next_sqrt_price_from_input
from cpamm.errors import ErrorCode, PoolError

sqrt_price = 1 << 64          # price 1.0 in Q64.64
liquidity = 1 << 80

amount_a, amount_b = get_initialize_amounts(
    MIN_SQRT_PRICE, MAX_SQRT_PRICE, sqrt_price, liquidity
)

next_price = get_next_sqrt_price_from_input(sqrt_price, liquidity, 1_000_000, True)

try:
    get_initialize_amounts(MIN_SQRT_PRICE, MAX_SQRT_PRICE, sqrt_price, 1 << 130)
except PoolError as err:
    assert err.code is ErrorCode.MATH_OVERFLOW
```

Validating a vesting schedule before locking liquidity:

```python
from cpamm.params import VestingParameters

params = VestingParameters(
    cliff_point=None,
    period_frequency=3600,
    cliff_unlock_liquidity=0,
    liquidity_per_period=1_000,
    number_of_period=24,
)
params.validate(current_point=1_000, max_vesting_duration=86_400)
total = params.get_total_lock_amount()   # 24_000
```

## What this package does not do

It holds no pool or position state and keeps no accounts: there are no
swaps, liquidity changes, fee or reward accounting, token transfers or
account address derivation. It offers the math, constants and checks that
such logic is built on, and has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```