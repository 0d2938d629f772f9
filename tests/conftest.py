"""Pytest configuration and fixtures."""

import pytest

from tests.helpers import DAI, ONE_TOKEN, USDC, make_pair
from xybk.amm.pair import Pair
from xybk.pools.address import PairAddressCache


@pytest.fixture
def address_cache() -> PairAddressCache:
    """A fresh, isolated pair address cache."""
    return PairAddressCache()


@pytest.fixture
def cp_pair() -> Pair:
    """Constant product DAI/USDC pair, 100:100, 0.3% fee."""
    return make_pair(DAI, 100 * ONE_TOKEN, USDC, 100 * ONE_TOKEN)


@pytest.fixture
def single_boost_pair() -> Pair:
    """Boosted DAI/USDC pair, 10:10, boosts (10, 10)."""
    return make_pair(DAI, 10 * ONE_TOKEN, USDC, 10 * ONE_TOKEN, boost0=10, boost1=10)


@pytest.fixture
def double_boost_pair() -> Pair:
    """Boosted DAI/USDC pair, 98:100, boosts (28, 11)."""
    return make_pair(DAI, 98 * ONE_TOKEN, USDC, 100 * ONE_TOKEN, boost0=28, boost1=11)
