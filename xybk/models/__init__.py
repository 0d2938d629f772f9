"""Value types consumed and produced by the pricing engine."""

from xybk.models.price import Price
from xybk.models.token import Token, TokenAmount
from xybk.models.types import Address, Uint256, is_valid_address, normalize_address

__all__ = [
    # Types
    "Address",
    "Uint256",
    "normalize_address",
    "is_valid_address",
    # Value types
    "Token",
    "TokenAmount",
    "Price",
]
