"""Test helpers module for shared test utilities.

- constants: Tokens and common amounts
- factories: Pair factory and tolerance check
"""

from tests.helpers.constants import (
    ARBITRUM,
    DAI,
    MAINNET,
    ONE_TOKEN,
    USDC,
    WETH,
    WETH_ARBITRUM,
)
from tests.helpers.factories import make_pair, within

__all__ = [
    # Constants
    "MAINNET",
    "ARBITRUM",
    "USDC",
    "DAI",
    "WETH",
    "WETH_ARBITRUM",
    "ONE_TOKEN",
    # Factories
    "make_pair",
    "within",
]
