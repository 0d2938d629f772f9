"""Liquidity share accounting.

Minting and redemption follow the UniswapV2 pair contract: the first
deposit mints sqrt(amount0 * amount1) shares minus a permanently locked
minimum, later deposits mint pro rata to the smaller side, and redemption
optionally accounts for the protocol fee (1/6 of sqrt(k) growth) that the
pair mints on the next liquidity event.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from xybk.errors import (
    AssetMismatchError,
    InsufficientInputAmountError,
    InsufficientReservesError,
    MissingKLastError,
)
from xybk.math.sqrt import isqrt
from xybk.models.token import Token, TokenAmount
from xybk.safe_int import S

if TYPE_CHECKING:
    from xybk.amm.pair import Pair

logger = structlog.get_logger()


def _require_liquidity_token(pair: Pair, amount: TokenAmount, name: str) -> None:
    if amount.token != pair.liquidity_token:
        raise AssetMismatchError(f"{name} must be an amount of the pair liquidity token")


def get_liquidity_minted(
    pair: Pair,
    total_supply: TokenAmount,
    amount_a: TokenAmount,
    amount_b: TokenAmount,
) -> TokenAmount:
    """Liquidity minted for depositing amount_a and amount_b.

    Args:
        pair: Pair receiving the deposit (reserves before the deposit)
        total_supply: Current total supply of the liquidity token
        amount_a: Deposit of one pair token
        amount_b: Deposit of the other pair token (either order)

    Returns:
        Amount of the liquidity token minted

    Raises:
        AssetMismatchError: If total_supply is not the liquidity token or the
            deposits are not the pair's two tokens
        InsufficientInputAmountError: If the deposit mints no liquidity
    """
    _require_liquidity_token(pair, total_supply, "total_supply")

    amount0, amount1 = (
        (amount_a, amount_b) if amount_a.token.sorts_before(amount_b.token) else (amount_b, amount_a)
    )
    if amount0.token != pair.token0 or amount1.token != pair.token1:
        raise AssetMismatchError("Deposit tokens do not match the pair tokens")

    if total_supply.raw == 0:
        liquidity = isqrt((S(amount0.raw) * amount1.raw).value) - pair.config.minimum_liquidity
    else:
        # An empty reserve places no bound on its side
        candidates = [
            (S(amount.raw) * total_supply.raw // reserve.raw).value
            for amount, reserve in ((amount0, pair.reserve0), (amount1, pair.reserve1))
            if reserve.raw != 0
        ]
        if not candidates:
            raise InsufficientReservesError("Both reserves are empty but total supply is not")
        liquidity = min(candidates)

    if liquidity <= 0:
        raise InsufficientInputAmountError(
            f"Deposit of {amount0.raw} and {amount1.raw} mints no liquidity"
        )

    logger.debug(
        "liquidity_minted",
        pair=pair.liquidity_token.address,
        total_supply=total_supply.raw,
        liquidity=liquidity,
    )
    return TokenAmount(pair.liquidity_token, liquidity)


def get_liquidity_value(
    pair: Pair,
    token: Token,
    total_supply: TokenAmount,
    liquidity: TokenAmount,
    fee_on: bool = False,
    k_last: int | None = None,
) -> TokenAmount:
    """Amount of token redeemable for a liquidity position.

    Args:
        pair: The pair
        token: Which pair token to value the position in
        total_supply: Current total supply of the liquidity token
        liquidity: Liquidity being valued (must not exceed total_supply)
        fee_on: Whether the protocol fee is switched on
        k_last: reserve0 * reserve1 as of the last liquidity event
            (required when fee_on)

    Returns:
        Amount of token the liquidity redeems for (floored)

    Raises:
        AssetMismatchError: If token is not in the pair, or the supply or
            liquidity are not the liquidity token
        InsufficientReservesError: If total_supply is zero or liquidity exceeds it
        MissingKLastError: If fee_on is set without k_last
    """
    if not pair.involves_token(token):
        raise AssetMismatchError(f"Token {token!r} not in pair")
    _require_liquidity_token(pair, total_supply, "total_supply")
    _require_liquidity_token(pair, liquidity, "liquidity")
    if total_supply.raw == 0:
        raise InsufficientReservesError("Pair has no liquidity supply to redeem against")
    if liquidity.raw > total_supply.raw:
        raise InsufficientReservesError(
            f"Liquidity {liquidity.raw} exceeds total supply {total_supply.raw}"
        )

    adjusted_supply = total_supply.raw
    if fee_on:
        if k_last is None:
            raise MissingKLastError("k_last is required when fee_on is set")
        if k_last != 0:
            root_k = isqrt((S(pair.reserve0.raw) * pair.reserve1.raw).value)
            root_k_last = isqrt(k_last)
            if root_k > root_k_last:
                numerator = S(total_supply.raw) * (S(root_k) - root_k_last)
                denominator = S(root_k) * 5 + root_k_last
                fee_liquidity = (numerator // denominator).value
                adjusted_supply += fee_liquidity

    return TokenAmount(
        token, (S(liquidity.raw) * pair.reserve_of(token).raw // adjusted_supply).value
    )


__all__ = ["get_liquidity_minted", "get_liquidity_value"]
