"""Pair address derivation and caching."""

from .address import PairAddressCache, default_address_cache, derive_pair_address, sort_tokens

__all__ = [
    "PairAddressCache",
    "default_address_cache",
    "derive_pair_address",
    "sort_tokens",
]
