from cpamm.errors import ErrorCode, PoolError


def test_every_code_gives_an_error_with_its_message():
    for code in ErrorCode:
        err = PoolError(code)
        assert err.code is code
        assert str(err) == code.message()
        assert str(err)


def test_error_messages_are_unique():
    messages = [str(PoolError(code)) for code in ErrorCode]
    assert len(set(messages)) == len(messages)


def test_message_text_from_source():
    assert ErrorCode.MATH_OVERFLOW.message() == "Math operation overflow"
    assert ErrorCode.INVALID_QUOTE_MINT.message() == "Quote token must be SOL,USDC"


def test_pool_error_carries_code_and_message():
    err = PoolError(ErrorCode.INVALID_VESTING_INFO)
    assert err.code is ErrorCode.INVALID_VESTING_INFO
    assert str(err) == "Invalid vesting information"


def test_pool_error_accepts_integer_code():
    err = PoolError(int(ErrorCode.SAME_POSITION))
    assert err.code is ErrorCode.SAME_POSITION
    assert str(err) == "Same position"


def test_pool_disabled_message():
    err = PoolError(ErrorCode.POOL_DISABLED)
    assert err.code is ErrorCode.POOL_DISABLED
    assert str(err) == "Pool disabled"


def test_integer_codes_round_trip_for_every_code():
    codes = list(ErrorCode)
    values = sorted(int(code) for code in codes)
    assert values == list(range(values[0], values[0] + len(values)))
    for code in codes:
        assert PoolError(int(code)).code is code