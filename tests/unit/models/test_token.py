"""Tests for Token and TokenAmount."""

from decimal import Decimal

import pytest

from tests.helpers import DAI, USDC, WETH, WETH_ARBITRUM
from xybk.errors import AssetMismatchError, ChainMismatchError
from xybk.models.token import Token, TokenAmount
from xybk.safe_int import Underflow


class TestToken:
    """Identity, validation and ordering."""

    def test_address_normalized(self):
        assert USDC.address == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"

    def test_equality_ignores_metadata(self):
        bare = Token(1, "0x6b175474e89094c44da98b954eedeac495271d0f")
        assert bare == DAI
        assert hash(bare) == hash(DAI)

    def test_same_address_other_chain_differs(self):
        assert Token(10, DAI.address) != DAI

    def test_invalid_address(self):
        with pytest.raises(ValueError):
            Token(1, "0x1234")

    @pytest.mark.parametrize("decimals", [-1, 78])
    def test_invalid_decimals(self, decimals):
        with pytest.raises(ValueError):
            Token(1, DAI.address, decimals)

    def test_sorts_before(self):
        assert DAI.sorts_before(USDC)
        assert not USDC.sorts_before(DAI)
        assert USDC.sorts_before(WETH)

    def test_sorts_before_other_chain(self):
        with pytest.raises(ChainMismatchError):
            WETH.sorts_before(WETH_ARBITRUM)

    def test_sorts_before_same_token(self):
        with pytest.raises(AssetMismatchError):
            DAI.sorts_before(Token(1, DAI.address))

    def test_repr_uses_symbol(self):
        assert repr(DAI) == "Token(DAI, chain_id=1)"


class TestTokenAmount:
    """Raw amount arithmetic."""

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            TokenAmount(DAI, -1)

    @pytest.mark.parametrize("raw", [1.5, "10", True])
    def test_non_integer_rejected(self, raw):
        with pytest.raises(TypeError):
            TokenAmount(DAI, raw)

    def test_add(self):
        assert TokenAmount(DAI, 10) + TokenAmount(DAI, 5) == TokenAmount(DAI, 15)

    def test_subtract(self):
        assert TokenAmount(DAI, 10) - TokenAmount(DAI, 10) == TokenAmount(DAI, 0)

    def test_subtract_underflow(self):
        with pytest.raises(Underflow):
            TokenAmount(DAI, 5).subtract(TokenAmount(DAI, 6))

    def test_mixed_tokens(self):
        with pytest.raises(AssetMismatchError):
            TokenAmount(DAI, 5).add(TokenAmount(USDC, 5))

    def test_to_decimal(self):
        assert TokenAmount(DAI, 1_500_000_000_000_000_000).to_decimal() == Decimal("1.5")
        assert TokenAmount(Token(1, DAI.address, 6), 2_500_000).to_decimal() == Decimal("2.5")
