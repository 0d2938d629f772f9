"""Base classes for pair quoting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from xybk.models.token import Token, TokenAmount

if TYPE_CHECKING:
    from xybk.amm.pair import Pair


@dataclass(frozen=True)
class SwapResult:
    """Result of quoting a swap through a pair.

    Attributes:
        amount_in: Input the trader pays
        amount_out: Output the pair delivers (capped at the output reserve)
        ideal_amount_out: Curve output before capping; equals amount_out
            for exact-output quotes
        next_pair: Pair state after the swap settles
    """

    amount_in: TokenAmount
    amount_out: TokenAmount
    ideal_amount_out: int
    next_pair: Pair

    @property
    def token_in(self) -> Token:
        return self.amount_in.token

    @property
    def token_out(self) -> Token:
        return self.amount_out.token


class AMM(ABC):
    """Abstract base class for pair pricing.

    get_amount_out/get_amount_in work on raw reserves; simulate_swap and
    simulate_swap_exact_output work on Pair objects and return the next
    pair state.
    """

    @abstractmethod
    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int,
    ) -> int:
        """Calculate output amount for a given input.

        Args:
            amount_in: Input token amount
            reserve_in: (Virtual) reserve of input token
            reserve_out: (Virtual) reserve of output token
            fee_multiplier: 10000 - fee in basis points

        Returns:
            Output token amount
        """
        ...

    @abstractmethod
    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int,
    ) -> int:
        """Calculate required input for a desired output.

        Args:
            amount_out: Desired output token amount
            reserve_in: (Virtual) reserve of input token
            reserve_out: (Virtual) reserve of output token
            fee_multiplier: 10000 - fee in basis points

        Returns:
            Required input token amount
        """
        ...

    @abstractmethod
    def simulate_swap(self, pair: Pair, amount_in: TokenAmount) -> SwapResult:
        """Quote an exact-input swap through a pair."""
        ...

    @abstractmethod
    def simulate_swap_exact_output(self, pair: Pair, amount_out: TokenAmount) -> SwapResult:
        """Quote an exact-output swap through a pair."""
        ...
