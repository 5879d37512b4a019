"""Instruction parameters for locking and splitting positions."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Optional

from .constants import SPLIT_POSITION_DENOMINATOR, U64_MAX, U128_MAX
from .errors import ErrorCode, PoolError


def _checked(value: int, limit: int) -> int:
    if value < 0 or value > limit:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return value


def _require(condition: bool, code: ErrorCode) -> None:
    if not condition:
        raise PoolError(code)


@dataclass(frozen=True)
class VestingParameters:
    """Schedule for releasing locked liquidity back to a position."""

    period_frequency: int
    cliff_unlock_liquidity: int
    liquidity_per_period: int
    number_of_period: int
    # None starts vesting immediately.
    cliff_point: Optional[int] = None

    def get_cliff_point(self, current_point: int) -> int:
        """The cliff point, defaulting to ``current_point``."""
        return current_point if self.cliff_point is None else self.cliff_point

    def get_total_lock_amount(self) -> int:
        """Cliff liquidity plus the liquidity of every period, within u128."""
        per_periods = _checked(self.liquidity_per_period * self.number_of_period, U128_MAX)
        return _checked(self.cliff_unlock_liquidity + per_periods, U128_MAX)

    def validate(self, current_point: int, max_vesting_duration: int) -> None:
        """Raise PoolError if the schedule is not acceptable at ``current_point``."""
        cliff_point = self.get_cliff_point(current_point)
        _require(cliff_point >= current_point, ErrorCode.INVALID_VESTING_INFO)

        if cliff_point == current_point:
            _require(self.number_of_period > 0, ErrorCode.INVALID_VESTING_INFO)

        if self.number_of_period > 0:
            _require(
                self.period_frequency > 0 and self.liquidity_per_period > 0,
                ErrorCode.INVALID_VESTING_INFO,
            )

        periods_duration = _checked(self.period_frequency * self.number_of_period, U64_MAX)
        vesting_duration = _checked(
            _checked(cliff_point - current_point, U64_MAX) + periods_duration, U64_MAX
        )
        _require(vesting_duration <= max_vesting_duration, ErrorCode.INVALID_VESTING_INFO)
        _require(self.get_total_lock_amount() > 0, ErrorCode.INVALID_VESTING_INFO)


@dataclass(frozen=True)
class SplitPositionParameters2:
    """Shares moved to the second position, as numerators over SPLIT_POSITION_DENOMINATOR."""

    unlocked_liquidity_numerator: int = 0
    permanent_locked_liquidity_numerator: int = 0
    fee_a_numerator: int = 0
    fee_b_numerator: int = 0
    reward_0_numerator: int = 0
    reward_1_numerator: int = 0

    def _values(self) -> list[int]:
        return [getattr(self, f.name) for f in fields(self)]

    def validate(self) -> None:
        """Each numerator must be at most the denominator and one must be non-zero."""
        values = self._values()
        for value in values:
            _require(
                value <= SPLIT_POSITION_DENOMINATOR,
                ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS,
            )
        _require(any(v > 0 for v in values), ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS)


@dataclass(frozen=True)
class SplitPositionParameters:
    """Shares moved to the second position, as whole percentages."""

    unlocked_liquidity_percentage: int = 0
    permanent_locked_liquidity_percentage: int = 0
    fee_a_percentage: int = 0
    fee_b_percentage: int = 0
    reward_0_percentage: int = 0
    reward_1_percentage: int = 0
    padding: bytes = field(default=bytes(16), repr=False)

    def _percentages(self) -> list[int]:
        return [
            self.unlocked_liquidity_percentage,
            self.permanent_locked_liquidity_percentage,
            self.fee_a_percentage,
            self.fee_b_percentage,
            self.reward_0_percentage,
            self.reward_1_percentage,
        ]

    def validate(self) -> None:
        """Each percentage must be at most 100 and one must be non-zero."""
        percentages = self._percentages()
        for value in percentages:
            _require(value <= 100, ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS)
        _require(
            any(v > 0 for v in percentages), ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS
        )

    def get_split_position_parameters2(self) -> SplitPositionParameters2:
        """Validate and convert percentages into numerators."""
        self.validate()
        factor = SPLIT_POSITION_DENOMINATOR // 100
        return SplitPositionParameters2(
            unlocked_liquidity_numerator=factor * self.unlocked_liquidity_percentage,
            permanent_locked_liquidity_numerator=factor
            * self.permanent_locked_liquidity_percentage,
            fee_a_numerator=factor * self.fee_a_percentage,
            fee_b_numerator=factor * self.fee_b_percentage,
            reward_0_numerator=factor * self.reward_0_percentage,
            reward_1_numerator=factor * self.reward_1_percentage,
        )