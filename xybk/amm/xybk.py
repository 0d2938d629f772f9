"""Swap quoting for constant product and boosted (xybk) pairs.

Constant product pairs use the UniswapV2 formula with a basis-point fee:

    amount_out = (in * fee * res_out) / (res_in * 10000 + in * fee)

Boosted pairs use the same formula on virtual reserves, i.e. real reserves
plus an artificial liquidity term (boost - 1) * sqrtK. Which boost applies
depends on which side of the equilibrium point (sqrtK, sqrtK) the trade
ends on. When boost0 != boost1 a trade that starts below sqrtK on the input
side and ends above it is split in two: the first segment moves the pair to
(sqrtK, sqrtK) with no artificial term, the second continues from there with
the boost of the far side.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from xybk.amm.base import AMM, SwapResult
from xybk.constants import BPS_DENOMINATOR
from xybk.errors import (
    AssetMismatchError,
    InsufficientInputAmountError,
    InsufficientReservesError,
    TradeNotSupportedError,
)
from xybk.models.token import TokenAmount
from xybk.safe_int import S

if TYPE_CHECKING:
    from xybk.amm.pair import Pair

logger = structlog.get_logger()


class XybkAMM(AMM):
    """Exact-integer quoting for xybk pairs.

    All divisions floor except the exact-output formula, which adds one unit
    so the pair is never under-collateralized by rounding.
    """

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int = 9970,
    ) -> int:
        """Calculate output amount using constant product formula.

        Formula: amount_out = (in * fee * res_out) / (res_in * 10000 + in * fee)
        """
        return self._amount_out_with_fee(S(amount_in) * fee_multiplier, reserve_in, reserve_out)

    def _amount_out_with_fee(
        self, amount_in_with_fee: S | int, reserve_in: int, reserve_out: int
    ) -> int:
        # amount_in_with_fee is already scaled by 10000
        numerator = S(amount_in_with_fee) * reserve_out
        denominator = S(reserve_in) * BPS_DENOMINATOR + amount_in_with_fee
        return (numerator // denominator).value

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int = 9970,
    ) -> int:
        """Calculate required input for desired output.

        Formula: amount_in = (res_in * out * 10000) / ((res_out - out) * fee) + 1

        Raises:
            InsufficientReservesError: If amount_out >= reserve_out
        """
        if amount_out >= reserve_out:
            raise InsufficientReservesError(
                f"Requested {amount_out} but output reserve is {reserve_out}"
            )

        numerator = S(reserve_in) * amount_out * BPS_DENOMINATOR
        denominator = (S(reserve_out) - amount_out) * fee_multiplier

        return ((numerator // denominator) + 1).value

    def _check_tradable(self, pair: Pair, token_in_is_token0: bool) -> None:
        if not pair.trade_state.allows_selling(token_in_is_token0):
            sold = "token0" if token_in_is_token0 else "token1"
            raise TradeNotSupportedError(
                f"Trade state {pair.trade_state.value} does not allow selling {sold}"
            )
        if pair.reserve0.raw == 0 or pair.reserve1.raw == 0:
            raise InsufficientReservesError(
                f"Pair has an empty reserve: {pair.reserve0.raw}, {pair.reserve1.raw}"
            )

    def simulate_swap(self, pair: Pair, amount_in: TokenAmount) -> SwapResult:
        """Quote an exact-input swap.

        Args:
            pair: The pair to trade against
            amount_in: Amount of one of the pair's tokens to sell

        Returns:
            SwapResult with the capped output, the uncapped curve output and
            the pair state after the swap

        Raises:
            AssetMismatchError: If amount_in's token is not in the pair
            InsufficientReservesError: If either reserve is empty
            TradeNotSupportedError: If the trade state forbids selling this token
            InsufficientInputAmountError: If the output rounds down to zero
        """
        if not pair.involves_token(amount_in.token):
            raise AssetMismatchError(f"Token {amount_in.token!r} not in pair")

        is_match = amount_in.token == pair.token0
        self._check_tradable(pair, is_match)

        reserve_in_amount, reserve_out_amount = pair.get_reserves(amount_in.token)
        reserve_in = reserve_in_amount.raw
        reserve_out = reserve_out_amount.raw

        amount_in_with_fee = S(amount_in.raw) * pair.fee_multiplier
        first_trade_out = 0

        if pair.is_xybk:
            sqrt_k = pair.sqrt_k
            if amount_in_with_fee + S(reserve_in) * BPS_DENOMINATOR >= S(sqrt_k) * BPS_DENOMINATOR:
                # Input side ends at or above sqrtK: far-side boost
                term = pair.artificial_liquidity_term(pair.boost0 if is_match else pair.boost1)
                if pair.boost0 != pair.boost1 and sqrt_k > reserve_in:
                    first_trade_out = (S(reserve_out) - sqrt_k).value
                    amount_in_with_fee = amount_in_with_fee - (S(sqrt_k) - reserve_in) * BPS_DENOMINATOR
                    logger.debug(
                        "xybk_midpoint_split",
                        direction="exact_input",
                        sqrt_k=sqrt_k,
                        reserve_in=reserve_in,
                        first_trade_out=first_trade_out,
                    )
                    reserve_in = sqrt_k
                    reserve_out = sqrt_k
            else:
                term = pair.artificial_liquidity_term(pair.boost1 if is_match else pair.boost0)
            reserve_in += term
            reserve_out += term

        last_trade_out = self._amount_out_with_fee(amount_in_with_fee, reserve_in, reserve_out)
        ideal_out = first_trade_out + last_trade_out

        # Never deliver more than the real reserve left after the first segment
        available = reserve_out_amount.raw - first_trade_out
        if last_trade_out > available:
            logger.debug(
                "swap_output_clamped",
                ideal_out=ideal_out,
                reserve_out=reserve_out_amount.raw,
            )
        amount_out_raw = first_trade_out + min(last_trade_out, available)

        if amount_out_raw == 0:
            raise InsufficientInputAmountError(
                f"Input {amount_in.raw} of {amount_in.token!r} yields zero output"
            )

        amount_out = TokenAmount(reserve_out_amount.token, amount_out_raw)
        next_pair = pair.with_reserves(
            reserve_in_amount.add(amount_in),
            reserve_out_amount.subtract(amount_out),
        )
        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            ideal_amount_out=ideal_out,
            next_pair=next_pair,
        )

    def simulate_swap_exact_output(self, pair: Pair, amount_out: TokenAmount) -> SwapResult:
        """Quote an exact-output swap.

        Args:
            pair: The pair to trade against
            amount_out: Amount of one of the pair's tokens to buy

        Returns:
            SwapResult with the required input (rounded up) and the pair
            state after the swap

        Raises:
            AssetMismatchError: If amount_out's token is not in the pair
            InsufficientReservesError: If a reserve is empty or amount_out
                is not below the output reserve
            TradeNotSupportedError: If the trade state forbids selling the input token
            InsufficientInputAmountError: If amount_out is zero or the fee is 100%
        """
        if not pair.involves_token(amount_out.token):
            raise AssetMismatchError(f"Token {amount_out.token!r} not in pair")

        is_match = amount_out.token == pair.token0
        self._check_tradable(pair, not is_match)

        reserve_out_amount = pair.reserve_of(amount_out.token)
        reserve_in_amount = pair.reserve_of(pair.get_token_out(amount_out.token))
        reserve_in = reserve_in_amount.raw
        reserve_out = reserve_out_amount.raw

        if amount_out.raw >= reserve_out:
            raise InsufficientReservesError(
                f"Requested {amount_out.raw} but output reserve is {reserve_out}"
            )
        if amount_out.raw == 0:
            raise InsufficientInputAmountError("Requested output is zero")
        if pair.fee_multiplier == 0:
            raise InsufficientInputAmountError("Pair fee is 100%, no output can be bought")

        remaining_out = amount_out.raw
        first_trade_in = 0

        if pair.is_xybk:
            sqrt_k = pair.sqrt_k
            if S(reserve_out) - remaining_out > sqrt_k:
                # Output side stays above sqrtK: far-side boost
                term = pair.artificial_liquidity_term(pair.boost0 if is_match else pair.boost1)
            else:
                term = pair.artificial_liquidity_term(pair.boost1 if is_match else pair.boost0)
                if pair.boost0 != pair.boost1 and reserve_out > sqrt_k >= reserve_in:
                    remaining_out -= reserve_out - sqrt_k
                    first_trade_in = (
                        (S(sqrt_k) - reserve_in) * BPS_DENOMINATOR // pair.fee_multiplier
                    ).value
                    logger.debug(
                        "xybk_midpoint_split",
                        direction="exact_output",
                        sqrt_k=sqrt_k,
                        reserve_out=reserve_out,
                        first_trade_in=first_trade_in,
                    )
                    reserve_in = sqrt_k
                    reserve_out = sqrt_k
            reserve_in += term
            reserve_out += term

        amount_in_raw = first_trade_in + self.get_amount_in(
            remaining_out, reserve_in, reserve_out, pair.fee_multiplier
        )

        amount_in = TokenAmount(reserve_in_amount.token, amount_in_raw)
        next_pair = pair.with_reserves(
            reserve_in_amount.add(amount_in),
            reserve_out_amount.subtract(amount_out),
        )
        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            ideal_amount_out=amount_out.raw,
            next_pair=next_pair,
        )


# Singleton instance
xybk_amm = XybkAMM()


__all__ = ["XybkAMM", "xybk_amm"]
