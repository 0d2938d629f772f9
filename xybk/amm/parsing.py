"""Build Pair objects from serialized snapshots."""

from __future__ import annotations

from typing import Any

import structlog

from xybk.amm.pair import CurveMode, Pair, TradeState
from xybk.config import DEFAULT_PAIR_CONFIG, PairConfig
from xybk.constants import DEFAULT_FEE_BPS
from xybk.models.snapshot import PairSnapshot, SnapshotToken
from xybk.models.token import Token, TokenAmount
from xybk.pools.address import PairAddressCache

logger = structlog.get_logger()


def _to_token(chain_id: int, token: SnapshotToken) -> Token:
    return Token(
        chain_id=chain_id,
        address=token.address,
        decimals=token.decimals,
        symbol=token.symbol,
        name=token.name,
    )


def parse_pair_snapshot(
    snapshot: PairSnapshot | dict[str, Any],
    config: PairConfig = DEFAULT_PAIR_CONFIG,
    address_cache: PairAddressCache | None = None,
) -> Pair:
    """Convert a pair snapshot into a Pair.

    Args:
        snapshot: PairSnapshot, or a dict in its JSON form
        config: Deployment config for the pair's liquidity token
        address_cache: Optional pair address cache

    Returns:
        Pair built from the snapshot (tokens re-sorted if needed)

    Raises:
        pydantic.ValidationError: If the snapshot is malformed
        PairError: If the pair parameters are invalid
    """
    if not isinstance(snapshot, PairSnapshot):
        snapshot = PairSnapshot.model_validate(snapshot)

    fee_bps = snapshot.fee
    if fee_bps is None:
        logger.warning(
            "snapshot_fee_missing",
            token0=snapshot.token0.address,
            token1=snapshot.token1.address,
            using_default=DEFAULT_FEE_BPS,
        )
        fee_bps = DEFAULT_FEE_BPS

    trade_state = TradeState.SELL_ALL
    if snapshot.trade_state is not None:
        try:
            trade_state = TradeState(snapshot.trade_state)
        except ValueError:
            # An unknown state must not silently enable trading
            logger.warning(
                "snapshot_trade_state_unknown",
                token0=snapshot.token0.address,
                token1=snapshot.token1.address,
                raw_trade_state=snapshot.trade_state,
                using_default=TradeState.SELL_NONE.value,
            )
            trade_state = TradeState.SELL_NONE

    return Pair(
        TokenAmount(_to_token(snapshot.chain_id, snapshot.token0), int(snapshot.reserve0)),
        TokenAmount(_to_token(snapshot.chain_id, snapshot.token1), int(snapshot.reserve1)),
        curve=CurveMode.BOOSTED if snapshot.is_xybk else CurveMode.CONSTANT_PRODUCT,
        fee_bps=fee_bps,
        boost0=snapshot.boost0,
        boost1=snapshot.boost1,
        trade_state=trade_state,
        config=config,
        address_cache=address_cache,
    )


__all__ = ["parse_pair_snapshot"]
