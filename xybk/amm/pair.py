"""Immutable pair state.

A Pair holds the two reserves of a pool in canonical token order together
with the curve parameters. It is never mutated: swaps and liquidity
operations return a new Pair built from the updated reserves, which
re-sorts the tokens and recomputes sqrtK.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from xybk.config import DEFAULT_PAIR_CONFIG, PairConfig
from xybk.constants import (
    BPS_DENOMINATOR,
    CONSTANT_PRODUCT_SQRT_K,
    DEFAULT_FEE_BPS,
    LIQUIDITY_TOKEN_DECIMALS,
    LIQUIDITY_TOKEN_NAME,
    LIQUIDITY_TOKEN_SYMBOL,
)
from xybk.errors import AssetMismatchError, InvalidBoostError, InvalidFeeError
from xybk.math.invariant import active_boost, artificial_liquidity_term, compute_sqrt_k
from xybk.models.price import Price
from xybk.models.token import Token, TokenAmount
from xybk.pools.address import PairAddressCache, default_address_cache

if TYPE_CHECKING:
    from xybk.amm.base import SwapResult


class CurveMode(str, Enum):
    """Pricing curve of a pair."""

    CONSTANT_PRODUCT = "constantProduct"
    BOOSTED = "xybk"


class TradeState(str, Enum):
    """Which token may currently be sold into the pair."""

    SELL_ALL = "sellAll"
    SELL_TOKEN_0 = "sellToken0"
    SELL_TOKEN_1 = "sellToken1"
    SELL_NONE = "sellNone"

    def allows_selling(self, is_token0: bool) -> bool:
        """Check whether selling token0 (or token1) into the pair is allowed."""
        if self is TradeState.SELL_ALL:
            return True
        if self is TradeState.SELL_TOKEN_0:
            return is_token0
        if self is TradeState.SELL_TOKEN_1:
            return not is_token0
        return False


def _validate_boost(name: str, boost: int) -> int:
    if isinstance(boost, bool) or not isinstance(boost, int) or boost < 1:
        raise InvalidBoostError(f"{name} must be an integer >= 1, got {boost!r}")
    return boost


def _validate_fee(fee_bps: int) -> int:
    if isinstance(fee_bps, bool) or not isinstance(fee_bps, int):
        raise InvalidFeeError(f"fee_bps must be an integer, got {fee_bps!r}")
    if not 0 <= fee_bps <= BPS_DENOMINATOR:
        raise InvalidFeeError(f"fee_bps must be in [0, {BPS_DENOMINATOR}], got {fee_bps}")
    return fee_bps


@dataclass(frozen=True, init=False)
class Pair:
    """A two-token pool priced by a constant product or boosted curve.

    Attributes:
        reserve0: Reserve of the token that sorts first
        reserve1: Reserve of the other token
        curve: Constant product or boosted (xybk) pricing
        fee_bps: Swap fee in basis points, deducted from the input
        boost0: Boost applied while reserve0 > reserve1
        boost1: Boost applied otherwise (ties included)
        trade_state: Which token may be sold into the pair
        sqrt_k: Equilibrium point of the boosted curve, derived at construction
        liquidity_token: Pool share token, addressed by the pair address
    """

    reserve0: TokenAmount
    reserve1: TokenAmount
    curve: CurveMode
    fee_bps: int
    boost0: int
    boost1: int
    trade_state: TradeState
    sqrt_k: int
    liquidity_token: Token
    config: PairConfig = field(repr=False)
    address_cache: PairAddressCache = field(repr=False, compare=False)

    def __init__(
        self,
        amount_a: TokenAmount,
        amount_b: TokenAmount,
        curve: CurveMode = CurveMode.CONSTANT_PRODUCT,
        fee_bps: int = DEFAULT_FEE_BPS,
        boost0: int = 1,
        boost1: int = 1,
        trade_state: TradeState = TradeState.SELL_ALL,
        config: PairConfig = DEFAULT_PAIR_CONFIG,
        address_cache: PairAddressCache | None = None,
    ) -> None:
        """Build a pair from two reserves given in any order.

        Raises:
            InvalidBoostError: If a boost is not an integer >= 1
            InvalidFeeError: If fee_bps is outside [0, 10000]
            ChainMismatchError: If the tokens are on different chains
            AssetMismatchError: If both amounts are of the same token
        """
        _validate_boost("boost0", boost0)
        _validate_boost("boost1", boost1)
        _validate_fee(fee_bps)

        if amount_a.token.sorts_before(amount_b.token):
            reserve0, reserve1 = amount_a, amount_b
        else:
            reserve0, reserve1 = amount_b, amount_a

        curve = CurveMode(curve)
        if curve is CurveMode.BOOSTED:
            sqrt_k = compute_sqrt_k(reserve0.raw, reserve1.raw, boost0, boost1)
        else:
            sqrt_k = CONSTANT_PRODUCT_SQRT_K

        cache = address_cache if address_cache is not None else default_address_cache
        liquidity_token = Token(
            chain_id=reserve0.token.chain_id,
            address=cache.get_address(reserve0.token, reserve1.token, config),
            decimals=LIQUIDITY_TOKEN_DECIMALS,
            symbol=LIQUIDITY_TOKEN_SYMBOL,
            name=LIQUIDITY_TOKEN_NAME,
        )

        object.__setattr__(self, "reserve0", reserve0)
        object.__setattr__(self, "reserve1", reserve1)
        object.__setattr__(self, "curve", curve)
        object.__setattr__(self, "fee_bps", fee_bps)
        object.__setattr__(self, "boost0", boost0)
        object.__setattr__(self, "boost1", boost1)
        object.__setattr__(self, "trade_state", TradeState(trade_state))
        object.__setattr__(self, "sqrt_k", sqrt_k)
        object.__setattr__(self, "liquidity_token", liquidity_token)
        object.__setattr__(self, "config", config)
        object.__setattr__(self, "address_cache", cache)

    @staticmethod
    def get_address(
        token_a: Token,
        token_b: Token,
        config: PairConfig = DEFAULT_PAIR_CONFIG,
        cache: PairAddressCache | None = None,
    ) -> str:
        """Checksummed CREATE2 address of the pair for two tokens."""
        cache = cache if cache is not None else default_address_cache
        return cache.get_address(token_a, token_b, config)

    def with_reserves(self, amount_a: TokenAmount, amount_b: TokenAmount) -> Pair:
        """New pair with the same parameters and different reserves."""
        return Pair(
            amount_a,
            amount_b,
            curve=self.curve,
            fee_bps=self.fee_bps,
            boost0=self.boost0,
            boost1=self.boost1,
            trade_state=self.trade_state,
            config=self.config,
            address_cache=self.address_cache,
        )

    # --- Tokens and reserves ---

    @property
    def token0(self) -> Token:
        return self.reserve0.token

    @property
    def token1(self) -> Token:
        return self.reserve1.token

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def is_xybk(self) -> bool:
        return self.curve is CurveMode.BOOSTED

    @property
    def fee_multiplier(self) -> int:
        """Fee multiplier for pair math (10000 - fee_bps).

        For 30 bps (0.3%), this returns 9970.
        """
        return BPS_DENOMINATOR - self.fee_bps

    def involves_token(self, token: Token) -> bool:
        return token == self.token0 or token == self.token1

    def _require_token(self, token: Token) -> None:
        if not self.involves_token(token):
            raise AssetMismatchError(f"Token {token!r} not in pair")

    def reserve_of(self, token: Token) -> TokenAmount:
        """Reserve of the given token.

        Raises:
            AssetMismatchError: If token is not in the pair
        """
        self._require_token(token)
        return self.reserve0 if token == self.token0 else self.reserve1

    def get_reserves(self, token_in: Token) -> tuple[TokenAmount, TokenAmount]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        self._require_token(token_in)
        if token_in == self.token0:
            return self.reserve0, self.reserve1
        return self.reserve1, self.reserve0

    def get_token_out(self, token_in: Token) -> Token:
        """Get the output token for a given input token."""
        self._require_token(token_in)
        return self.token1 if token_in == self.token0 else self.token0

    def can_sell(self, token: Token) -> bool:
        """Check whether the trade state allows selling token into the pair."""
        self._require_token(token)
        return self.trade_state.allows_selling(token == self.token0)

    # --- Boosted curve ---

    def get_boost(self) -> int:
        """Boost governing the curve at the current reserves."""
        return active_boost(self.reserve0.raw, self.reserve1.raw, self.boost0, self.boost1)

    def artificial_liquidity_term(self, boost: int) -> int:
        """Virtual liquidity (boost - 1) * sqrtK added to both reserves."""
        return artificial_liquidity_term(boost, self.sqrt_k)

    # --- Prices ---

    @property
    def token0_price(self) -> Price:
        """Spot price of token0 in token1.

        Boosted pairs price off the virtual reserves, i.e. both reserves
        shifted by the artificial liquidity term of the active boost.
        """
        if self.is_xybk:
            term = self.artificial_liquidity_term(self.get_boost())
            return Price(self.token0, self.token1, self.reserve0.raw + term, self.reserve1.raw + term)
        return self.token0_lp_price

    @property
    def token1_price(self) -> Price:
        """Spot price of token1 in token0."""
        if self.is_xybk:
            term = self.artificial_liquidity_term(self.get_boost())
            return Price(self.token1, self.token0, self.reserve1.raw + term, self.reserve0.raw + term)
        return self.token1_lp_price

    @property
    def token0_lp_price(self) -> Price:
        """Raw reserve ratio price of token0 in token1."""
        return Price(self.token0, self.token1, self.reserve0.raw, self.reserve1.raw)

    @property
    def token1_lp_price(self) -> Price:
        """Raw reserve ratio price of token1 in token0."""
        return Price(self.token1, self.token0, self.reserve1.raw, self.reserve0.raw)

    def price_of(self, token: Token) -> Price:
        """Spot price of token in terms of the other token."""
        self._require_token(token)
        return self.token0_price if token == self.token0 else self.token1_price

    def lp_price_of(self, token: Token) -> Price:
        """Reserve ratio price of token in terms of the other token."""
        self._require_token(token)
        return self.token0_lp_price if token == self.token0 else self.token1_lp_price

    # --- Quoting and liquidity (see xybk.amm.xybk and xybk.amm.liquidity) ---

    def get_output_amount(self, amount_in: TokenAmount) -> SwapResult:
        """Quote an exact-input swap. See XybkAMM.simulate_swap."""
        from xybk.amm.xybk import xybk_amm

        return xybk_amm.simulate_swap(self, amount_in)

    def get_input_amount(self, amount_out: TokenAmount) -> SwapResult:
        """Quote an exact-output swap. See XybkAMM.simulate_swap_exact_output."""
        from xybk.amm.xybk import xybk_amm

        return xybk_amm.simulate_swap_exact_output(self, amount_out)

    def get_liquidity_minted(
        self,
        total_supply: TokenAmount,
        amount_a: TokenAmount,
        amount_b: TokenAmount,
    ) -> TokenAmount:
        from xybk.amm.liquidity import get_liquidity_minted

        return get_liquidity_minted(self, total_supply, amount_a, amount_b)

    def get_liquidity_value(
        self,
        token: Token,
        total_supply: TokenAmount,
        liquidity: TokenAmount,
        fee_on: bool = False,
        k_last: int | None = None,
    ) -> TokenAmount:
        from xybk.amm.liquidity import get_liquidity_value

        return get_liquidity_value(self, token, total_supply, liquidity, fee_on, k_last)


__all__ = ["Pair", "CurveMode", "TradeState"]
