import pytest

from cpamm.constants import (
    MAX_VESTING_TIME_DURATION,
    SPLIT_POSITION_DENOMINATOR,
    U128_MAX,
    U64_MAX,
)
from cpamm.errors import ErrorCode, PoolError
from cpamm.params import (
    SplitPositionParameters,
    SplitPositionParameters2,
    VestingParameters,
)


def _vesting(**overrides):
    values = dict(
        period_frequency=10,
        cliff_unlock_liquidity=1000,
        liquidity_per_period=100,
        number_of_period=5,
        cliff_point=None,
    )
    values.update(overrides)
    return VestingParameters(**values)


def test_cliff_point_defaults_to_current():
    assert _vesting().get_cliff_point(42) == 42
    assert _vesting(cliff_point=77).get_cliff_point(42) == 77


def test_total_lock_amount_without_periods_is_cliff_liquidity():
    params = _vesting(number_of_period=0, cliff_unlock_liquidity=555)
    assert params.get_total_lock_amount() == 555


def test_total_lock_amount_value():
    assert _vesting().get_total_lock_amount() == 1500


def test_total_lock_amount_overflow():
    params = _vesting(liquidity_per_period=U128_MAX, number_of_period=2)
    with pytest.raises(PoolError) as info:
        params.get_total_lock_amount()
    assert info.value.code is ErrorCode.MATH_OVERFLOW


def test_validate_accepts_valid_schedule():
    params = _vesting(cliff_point=200)
    params.validate(100, MAX_VESTING_TIME_DURATION)
    assert params.get_cliff_point(100) == 200


@pytest.mark.parametrize(
    "overrides, current",
    [
        ({"cliff_point": 50}, 100),
        ({"cliff_point": None, "number_of_period": 0}, 100),
        ({"period_frequency": 0}, 100),
        ({"liquidity_per_period": 0}, 100),
        ({"cliff_point": 200, "number_of_period": 0, "cliff_unlock_liquidity": 0}, 100),
    ],
)
def test_validate_rejects_invalid_schedules(overrides, current):
    with pytest.raises(PoolError) as info:
        _vesting(**overrides).validate(current, MAX_VESTING_TIME_DURATION)
    assert info.value.code is ErrorCode.INVALID_VESTING_INFO


def test_validate_rejects_too_long_duration():
    params = _vesting(cliff_point=100, period_frequency=10, number_of_period=5)
    with pytest.raises(PoolError) as info:
        params.validate(100, 49)
    assert info.value.code is ErrorCode.INVALID_VESTING_INFO


def test_validate_duration_overflow():
    params = _vesting(period_frequency=U64_MAX, number_of_period=2)
    with pytest.raises(PoolError) as info:
        params.validate(0, U64_MAX)
    assert info.value.code is ErrorCode.MATH_OVERFLOW


def test_split_percentages_full_convert_to_denominator():
    params = SplitPositionParameters(
        unlocked_liquidity_percentage=100,
        permanent_locked_liquidity_percentage=100,
        fee_a_percentage=100,
        fee_b_percentage=100,
        reward_0_percentage=100,
        reward_1_percentage=100,
    )
    converted = params.get_split_position_parameters2()
    assert converted == SplitPositionParameters2(*([SPLIT_POSITION_DENOMINATOR] * 6))
    converted.validate()


def test_split_percentages_half_and_zero():
    converted = SplitPositionParameters(fee_a_percentage=50).get_split_position_parameters2()
    assert converted.fee_a_numerator == SPLIT_POSITION_DENOMINATOR // 2
    assert converted.unlocked_liquidity_numerator == 0
    assert converted.reward_1_numerator == 0


def test_split_percentage_above_hundred_rejected():
    with pytest.raises(PoolError) as info:
        SplitPositionParameters(reward_0_percentage=101).get_split_position_parameters2()
    assert info.value.code is ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS


def test_split_all_zero_rejected():
    with pytest.raises(PoolError) as info:
        SplitPositionParameters().validate()
    assert info.value.code is ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS


def test_split2_numerator_above_denominator_rejected():
    with pytest.raises(PoolError) as info:
        SplitPositionParameters2(fee_b_numerator=SPLIT_POSITION_DENOMINATOR + 1).validate()
    assert info.value.code is ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS


def test_split2_all_zero_rejected():
    with pytest.raises(PoolError) as info:
        SplitPositionParameters2().validate()
    assert info.value.code is ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS


def test_split2_single_numerator_accepted():
    params = SplitPositionParameters2(reward_1_numerator=1)
    params.validate()
    assert params.reward_1_numerator == 1