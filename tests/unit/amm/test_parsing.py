"""Tests for building pairs from snapshots."""

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from tests.helpers import DAI, USDC
from xybk.amm.pair import CurveMode, TradeState
from xybk.amm.parsing import parse_pair_snapshot
from xybk.config import PairConfig
from xybk.errors import InvalidBoostError, InvalidFeeError
from xybk.models.snapshot import PairSnapshot


def _snapshot(**overrides):
    data = {
        "chainId": 1,
        "token0": {"address": USDC.address, "symbol": "USDC"},
        "token1": {"address": DAI.address, "symbol": "DAI", "decimals": 18},
        "reserve0": "100000000000000000000",
        "reserve1": "98000000000000000000",
        "fee": 30,
    }
    data.update(overrides)
    return data


class TestParsePairSnapshot:
    """Snapshot to Pair conversion."""

    def test_constant_product(self):
        pair = parse_pair_snapshot(_snapshot())
        assert pair.curve is CurveMode.CONSTANT_PRODUCT
        assert pair.fee_bps == 30
        assert pair.trade_state is TradeState.SELL_ALL

    def test_tokens_resorted(self):
        """Snapshot token order does not have to be canonical."""
        pair = parse_pair_snapshot(_snapshot())
        assert pair.token0 == DAI
        assert pair.reserve0.raw == 98 * 10**18
        assert pair.reserve1.raw == 100 * 10**18
        assert pair.token0.symbol == "DAI"

    def test_boosted(self):
        pair = parse_pair_snapshot(
            _snapshot(isXybk=True, boost0=28, boost1=11, tradeState="sellToken1")
        )
        assert pair.is_xybk
        assert (pair.boost0, pair.boost1) == (28, 11)
        assert pair.trade_state is TradeState.SELL_TOKEN_1
        assert pair.sqrt_k > 1

    def test_accepts_model(self):
        snapshot = PairSnapshot.model_validate(_snapshot())
        assert parse_pair_snapshot(snapshot) == parse_pair_snapshot(_snapshot())

    def test_config_passed_through(self):
        config = PairConfig(minimum_liquidity=10)
        assert parse_pair_snapshot(_snapshot(), config=config).config is config

    def test_missing_fee_defaults(self):
        data = _snapshot()
        del data["fee"]
        with capture_logs() as logs:
            pair = parse_pair_snapshot(data)
        assert pair.fee_bps == 30
        assert logs[0]["event"] == "snapshot_fee_missing"
        assert logs[0]["log_level"] == "warning"

    def test_unknown_trade_state_blocks_trading(self):
        with capture_logs() as logs:
            pair = parse_pair_snapshot(_snapshot(tradeState="sellEverything"))
        assert pair.trade_state is TradeState.SELL_NONE
        assert logs[0]["event"] == "snapshot_trade_state_unknown"

    def test_invalid_boost(self):
        with pytest.raises(InvalidBoostError):
            parse_pair_snapshot(_snapshot(isXybk=True, boost0=0))

    def test_invalid_fee(self):
        with pytest.raises(InvalidFeeError):
            parse_pair_snapshot(_snapshot(fee=20_000))

    def test_malformed_snapshot(self):
        with pytest.raises(ValidationError):
            parse_pair_snapshot(_snapshot(reserve0="lots"))
