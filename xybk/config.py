"""Deployment configuration for pair address derivation and liquidity math."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from xybk.constants import FACTORY_ADDRESS, INIT_CODE_HASH, MINIMUM_LIQUIDITY
from xybk.models.types import is_valid_address, normalize_address

_HASH_PATTERN = re.compile(r"^0x[a-fA-F0-9]{64}$")


@dataclass(frozen=True)
class PairConfig:
    """Deployment parameters shared by every pair built against a factory.

    Attributes:
        factory_address: Factory contract that deploys pairs via CREATE2
        init_code_hash: keccak256 of the pair contract creation code
        minimum_liquidity: Liquidity burned on the first mint
    """

    factory_address: str = FACTORY_ADDRESS
    init_code_hash: str = INIT_CODE_HASH
    minimum_liquidity: int = MINIMUM_LIQUIDITY

    def __post_init__(self) -> None:
        if not is_valid_address(self.factory_address):
            raise ValueError(f"Invalid factory address: {self.factory_address}")
        if not _HASH_PATTERN.match(self.init_code_hash):
            raise ValueError(f"Invalid init code hash: {self.init_code_hash}")
        if self.minimum_liquidity < 0:
            raise ValueError(f"minimum_liquidity cannot be negative: {self.minimum_liquidity}")
        object.__setattr__(self, "factory_address", normalize_address(self.factory_address))
        object.__setattr__(self, "init_code_hash", self.init_code_hash.lower())

    @classmethod
    def from_env(cls) -> PairConfig:
        """Build a config from environment variables.

        - XYBK_FACTORY_ADDRESS: factory address (default: FACTORY_ADDRESS)
        - XYBK_INIT_CODE_HASH: pair init code hash (default: INIT_CODE_HASH)
        - XYBK_MINIMUM_LIQUIDITY: burned first-mint liquidity (default: 1000)
        """
        raw_minimum = os.environ.get("XYBK_MINIMUM_LIQUIDITY", str(MINIMUM_LIQUIDITY))
        try:
            minimum_liquidity = int(raw_minimum)
        except ValueError as err:
            raise ValueError(f"XYBK_MINIMUM_LIQUIDITY must be an integer: '{raw_minimum}'") from err

        return cls(
            factory_address=os.environ.get("XYBK_FACTORY_ADDRESS", FACTORY_ADDRESS),
            init_code_hash=os.environ.get("XYBK_INIT_CODE_HASH", INIT_CODE_HASH),
            minimum_liquidity=minimum_liquidity,
        )


# Default configuration instance
DEFAULT_PAIR_CONFIG = PairConfig()
