"""Exact prices as integer ratios."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from xybk.errors import AssetMismatchError
from xybk.models.token import Token, TokenAmount
from xybk.safe_int import S


@dataclass(frozen=True)
class Price:
    """Price of base_token denominated in quote_token.

    The price is numerator / denominator raw quote units per raw base unit.
    Both parts are kept as integers so no precision is lost; to_decimal() is
    for display.

    Attributes:
        base_token: Token being priced
        quote_token: Token the price is expressed in
        denominator: Raw amount of base_token
        numerator: Raw amount of quote_token exchanged for denominator
    """

    base_token: Token
    quote_token: Token
    denominator: int
    numerator: int

    def __post_init__(self) -> None:
        if self.denominator <= 0:
            raise ValueError(f"Price denominator must be positive, got {self.denominator}")
        if self.numerator < 0:
            raise ValueError(f"Price numerator cannot be negative: {self.numerator}")

    def invert(self) -> Price:
        return Price(self.quote_token, self.base_token, self.numerator, self.denominator)

    def quote(self, amount: TokenAmount) -> TokenAmount:
        """Convert an amount of base_token into quote_token (floored).

        Raises:
            AssetMismatchError: If amount is not of base_token
        """
        if amount.token != self.base_token:
            raise AssetMismatchError(f"Price base is {self.base_token!r}, got {amount.token!r}")
        return TokenAmount(self.quote_token, (S(amount.raw) * self.numerator // self.denominator).value)

    def to_decimal(self, places: int = 18) -> Decimal:
        """Price in whole tokens, adjusted for both tokens' decimals."""
        with localcontext() as ctx:
            ctx.prec = max(28, places + 40)
            raw = Decimal(self.numerator) / Decimal(self.denominator)
            adjusted = raw.scaleb(self.base_token.decimals - self.quote_token.decimals)
            return adjusted.quantize(Decimal(1).scaleb(-places))


__all__ = ["Price"]
