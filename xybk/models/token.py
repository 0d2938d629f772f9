"""Token identity and raw token amounts.

These are the value types the pricing engine consumes and produces. A Token
is identified by (chain_id, address); a TokenAmount pairs a token with a
non-negative raw integer in the token's smallest unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from xybk.errors import AssetMismatchError, ChainMismatchError
from xybk.models.types import normalize_address
from xybk.safe_int import S


@dataclass(frozen=True, eq=False)
class Token:
    """An ERC20 token on a specific chain.

    Attributes:
        chain_id: Chain the token lives on
        address: Token contract address (normalized to lowercase)
        decimals: Number of decimals of the raw unit
        symbol: Optional ticker symbol
        name: Optional display name
    """

    chain_id: int
    address: str
    decimals: int = 18
    symbol: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", normalize_address(self.address, validate=True))
        if not 0 <= self.decimals <= 77:
            raise ValueError(f"Token decimals must be in [0, 77], got {self.decimals}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.chain_id == other.chain_id and self.address == other.address

    def __hash__(self) -> int:
        return hash((self.chain_id, self.address))

    def __repr__(self) -> str:
        label = self.symbol or self.address
        return f"Token({label}, chain_id={self.chain_id})"

    def sorts_before(self, other: Token) -> bool:
        """Check if this token sorts before other (pair token0 ordering).

        Raises:
            ChainMismatchError: If the tokens are on different chains
            AssetMismatchError: If both tokens have the same address
        """
        if self.chain_id != other.chain_id:
            raise ChainMismatchError(
                f"Tokens on different chains: {self.chain_id} != {other.chain_id}"
            )
        if self.address == other.address:
            raise AssetMismatchError(f"Tokens have the same address: {self.address}")
        return int(self.address, 16) < int(other.address, 16)


@dataclass(frozen=True)
class TokenAmount:
    """A raw amount of a token.

    Attributes:
        token: The token
        raw: Amount in the token's smallest unit (non-negative)
    """

    token: Token
    raw: int

    def __post_init__(self) -> None:
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise TypeError(f"TokenAmount raw must be int, got {type(self.raw).__name__}")
        if self.raw < 0:
            raise ValueError(f"TokenAmount cannot be negative: {self.raw}")

    def _check_token(self, other: TokenAmount) -> None:
        if self.token != other.token:
            raise AssetMismatchError(f"Cannot combine {self.token!r} with {other.token!r}")

    def add(self, other: TokenAmount) -> TokenAmount:
        self._check_token(other)
        return TokenAmount(self.token, (S(self.raw) + other.raw).value)

    def subtract(self, other: TokenAmount) -> TokenAmount:
        """Subtract other from this amount.

        Raises:
            AssetMismatchError: If the amounts are of different tokens
            Underflow: If other is larger than this amount
        """
        self._check_token(other)
        return TokenAmount(self.token, (S(self.raw) - other.raw).value)

    def __add__(self, other: TokenAmount) -> TokenAmount:
        return self.add(other)

    def __sub__(self, other: TokenAmount) -> TokenAmount:
        return self.subtract(other)

    def to_decimal(self) -> Decimal:
        """Amount in whole tokens, for display only."""
        return Decimal(self.raw).scaleb(-self.token.decimals)


__all__ = ["Token", "TokenAmount"]
