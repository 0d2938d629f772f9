"""Deterministic pair addresses.

Pairs are deployed by the factory with CREATE2, salted by the sorted token
pair, so the address of any pair can be computed offline:

    salt = keccak256(abi.encodePacked(token0, token1))
    address = keccak256(0xff ++ factory ++ salt ++ init_code_hash)[12:]
"""

from __future__ import annotations

import threading

import structlog
from eth_abi.packed import encode_packed
from eth_utils import keccak, to_checksum_address

from xybk.config import DEFAULT_PAIR_CONFIG, PairConfig
from xybk.models.token import Token

logger = structlog.get_logger()


def sort_tokens(token_a: Token, token_b: Token) -> tuple[Token, Token]:
    """Order two tokens as (token0, token1).

    Raises:
        ChainMismatchError: If the tokens are on different chains
        AssetMismatchError: If the tokens are the same
    """
    return (token_a, token_b) if token_a.sorts_before(token_b) else (token_b, token_a)


def derive_pair_address(
    factory_address: str,
    init_code_hash: str,
    token_a: Token,
    token_b: Token,
) -> str:
    """Compute the CREATE2 address of the pair for two tokens.

    Args:
        factory_address: Factory contract address (0x-prefixed hex)
        init_code_hash: keccak256 of the pair creation code (0x-prefixed hex)
        token_a: One token of the pair (order does not matter)
        token_b: The other token

    Returns:
        EIP-55 checksummed pair address
    """
    token0, token1 = sort_tokens(token_a, token_b)

    salt = keccak(
        encode_packed(
            ["address", "address"],
            [bytes.fromhex(token0.address[2:]), bytes.fromhex(token1.address[2:])],
        )
    )
    digest = keccak(
        b"\xff"
        + bytes.fromhex(factory_address[2:])
        + salt
        + bytes.fromhex(init_code_hash[2:])
    )
    return to_checksum_address("0x" + digest[12:].hex())


class PairAddressCache:
    """Thread-safe memo of derived pair addresses.

    Keys are (factory, init_code_hash, token0, token1), so one cache can
    serve several deployments. All reads and writes happen under a lock.
    """

    def __init__(self) -> None:
        self._addresses: dict[tuple[str, str, str, str], str] = {}
        self._lock = threading.Lock()

    def get_address(
        self,
        token_a: Token,
        token_b: Token,
        config: PairConfig = DEFAULT_PAIR_CONFIG,
    ) -> str:
        """Return the pair address for two tokens, deriving it on first use."""
        token0, token1 = sort_tokens(token_a, token_b)
        key = (config.factory_address, config.init_code_hash, token0.address, token1.address)

        with self._lock:
            address = self._addresses.get(key)
            if address is None:
                address = derive_pair_address(
                    config.factory_address, config.init_code_hash, token0, token1
                )
                self._addresses[key] = address
                logger.debug(
                    "pair_address_derived",
                    token0=token0.address,
                    token1=token1.address,
                    factory=config.factory_address,
                    address=address,
                )
        return address

    def clear(self) -> None:
        with self._lock:
            self._addresses.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._addresses)


# Process-wide default cache; pass your own PairAddressCache to isolate callers
default_address_cache = PairAddressCache()


__all__ = [
    "sort_tokens",
    "derive_pair_address",
    "PairAddressCache",
    "default_address_cache",
]
