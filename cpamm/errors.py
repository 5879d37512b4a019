"""Error codes raised by the pool logic."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Numeric error codes of the pool program."""

    MATH_OVERFLOW = 6000
    INVALID_FEE = 6001
    EXCEEDED_SLIPPAGE = 6002
    POOL_DISABLED = 6003
    EXCEED_MAX_FEE_BPS = 6004
    INVALID_ADMIN = 6005
    AMOUNT_IS_ZERO = 6006
    TYPE_CAST_FAILED = 6007
    UNABLE_TO_MODIFY_ACTIVATION_POINT = 6008
    INVALID_AUTHORITY_TO_CREATE_THE_POOL = 6009
    INVALID_ACTIVATION_TYPE = 6010
    INVALID_ACTIVATION_POINT = 6011
    INVALID_QUOTE_MINT = 6012
    INVALID_FEE_CURVE = 6013
    INVALID_PRICE_RANGE = 6014
    PRICE_RANGE_VIOLATION = 6015
    INVALID_PARAMETERS = 6016
    INVALID_COLLECT_FEE_MODE = 6017
    INVALID_INPUT = 6018
    CANNOT_CREATE_TOKEN_BADGE_ON_SUPPORTED_MINT = 6019
    INVALID_TOKEN_BADGE = 6020
    INVALID_MINIMUM_LIQUIDITY = 6021
    INVALID_VESTING_INFO = 6022
    INSUFFICIENT_LIQUIDITY = 6023
    INVALID_VESTING_ACCOUNT = 6024
    INVALID_POOL_STATUS = 6025
    UNSUPPORT_NATIVE_MINT_TOKEN2022 = 6026
    INVALID_REWARD_INDEX = 6027
    INVALID_REWARD_DURATION = 6028
    REWARD_INITIALIZED = 6029
    REWARD_UNINITIALIZED = 6030
    INVALID_REWARD_VAULT = 6031
    MUST_WITHDRAWN_INELIGIBLE_REWARD = 6032
    IDENTICAL_REWARD_DURATION = 6033
    REWARD_CAMPAIGN_IN_PROGRESS = 6034
    IDENTICAL_FUNDER = 6035
    INVALID_FUNDER = 6036
    REWARD_NOT_ENDED = 6037
    FEE_INVERSE_IS_INCORRECT = 6038
    POSITION_IS_NOT_EMPTY = 6039
    INVALID_POOL_CREATOR_AUTHORITY = 6040
    INVALID_CONFIG_TYPE = 6041
    INVALID_POOL_CREATOR = 6042
    REWARD_VAULT_FROZEN_SKIP_REQUIRED = 6043
    INVALID_SPLIT_POSITION_PARAMETERS = 6044
    UNSUPPORT_POSITION_HAS_VESTING_LOCK = 6045
    SAME_POSITION = 6046

    def message(self) -> str:
        """Human-readable description of the error."""
        return _MESSAGES[self]


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MATH_OVERFLOW: "Math operation overflow",
    ErrorCode.INVALID_FEE: "Invalid fee setup",
    ErrorCode.EXCEEDED_SLIPPAGE: "Exceeded slippage tolerance",
    ErrorCode.POOL_DISABLED: "Pool disabled",
    ErrorCode.EXCEED_MAX_FEE_BPS: "Exceeded max fee bps",
    ErrorCode.INVALID_ADMIN: "Invalid admin",
    ErrorCode.AMOUNT_IS_ZERO: "Amount is zero",
    ErrorCode.TYPE_CAST_FAILED: "Type cast error",
    ErrorCode.UNABLE_TO_MODIFY_ACTIVATION_POINT: "Unable to modify activation point",
    ErrorCode.INVALID_AUTHORITY_TO_CREATE_THE_POOL: "Invalid authority to create the pool",
    ErrorCode.INVALID_ACTIVATION_TYPE: "Invalid activation type",
    ErrorCode.INVALID_ACTIVATION_POINT: "Invalid activation point",
    ErrorCode.INVALID_QUOTE_MINT: "Quote token must be SOL,USDC",
    ErrorCode.INVALID_FEE_CURVE: "Invalid fee curve",
    ErrorCode.INVALID_PRICE_RANGE: "Invalid Price Range",
    ErrorCode.PRICE_RANGE_VIOLATION: "Trade is over price range",
    ErrorCode.INVALID_PARAMETERS: "Invalid parameters",
    ErrorCode.INVALID_COLLECT_FEE_MODE: "Invalid collect fee mode",
    ErrorCode.INVALID_INPUT: "Invalid input",
    ErrorCode.CANNOT_CREATE_TOKEN_BADGE_ON_SUPPORTED_MINT: (
        "Cannot create token badge on supported mint"
    ),
    ErrorCode.INVALID_TOKEN_BADGE: "Invalid token badge",
    ErrorCode.INVALID_MINIMUM_LIQUIDITY: "Invalid minimum liquidity",
    ErrorCode.INVALID_VESTING_INFO: "Invalid vesting information",
    ErrorCode.INSUFFICIENT_LIQUIDITY: "Insufficient liquidity",
    ErrorCode.INVALID_VESTING_ACCOUNT: "Invalid vesting account",
    ErrorCode.INVALID_POOL_STATUS: "Invalid pool status",
    ErrorCode.UNSUPPORT_NATIVE_MINT_TOKEN2022: "Unsupported native mint token2022",
    ErrorCode.INVALID_REWARD_INDEX: "Invalid reward index",
    ErrorCode.INVALID_REWARD_DURATION: "Invalid reward duration",
    ErrorCode.REWARD_INITIALIZED: "Reward already initialized",
    ErrorCode.REWARD_UNINITIALIZED: "Reward not initialized",
    ErrorCode.INVALID_REWARD_VAULT: "Invalid reward vault",
    ErrorCode.MUST_WITHDRAWN_INELIGIBLE_REWARD: "Must withdraw ineligible reward",
    ErrorCode.IDENTICAL_REWARD_DURATION: "Reward duration is the same",
    ErrorCode.REWARD_CAMPAIGN_IN_PROGRESS: "Reward campaign in progress",
    ErrorCode.IDENTICAL_FUNDER: "Identical funder",
    ErrorCode.INVALID_FUNDER: "Invalid funder",
    ErrorCode.REWARD_NOT_ENDED: "Reward not ended",
    ErrorCode.FEE_INVERSE_IS_INCORRECT: "Fee inverse is incorrect",
    ErrorCode.POSITION_IS_NOT_EMPTY: "Position is not empty",
    ErrorCode.INVALID_POOL_CREATOR_AUTHORITY: "Invalid pool creator authority",
    ErrorCode.INVALID_CONFIG_TYPE: "Invalid config type",
    ErrorCode.INVALID_POOL_CREATOR: "Invalid pool creator",
    ErrorCode.REWARD_VAULT_FROZEN_SKIP_REQUIRED: (
        "Reward vault is frozen, must skip reward to proceed"
    ),
    ErrorCode.INVALID_SPLIT_POSITION_PARAMETERS: "Invalid parameters for split position",
    ErrorCode.UNSUPPORT_POSITION_HAS_VESTING_LOCK: (
        "Unsupported split position has vesting lock"
    ),
    ErrorCode.SAME_POSITION: "Same position",
}


class PoolError(Exception):
    """Raised when a pool operation fails; carries an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode) -> None:
        self.code = ErrorCode(code)
        super().__init__(self.code.message())

    def __repr__(self) -> str:
        return f"PoolError({self.code.name})"