"""Pydantic models for serialized pair state.

A snapshot is the JSON form of a pair as reported by an indexer or RPC
reader: token metadata, raw reserves as decimal strings and the curve
parameters. Range checks on fee and boosts are left to Pair construction so
they surface as pair errors.
"""

from pydantic import BaseModel, Field

from xybk.models.types import Address, Uint256


class SnapshotToken(BaseModel):
    """Token metadata in a pair snapshot."""

    address: Address
    decimals: int = Field(default=18, ge=0, le=77)
    symbol: str | None = None
    name: str | None = None


class PairSnapshot(BaseModel):
    """Serialized state of a single pair."""

    chain_id: int = Field(alias="chainId", ge=1)
    token0: SnapshotToken
    token1: SnapshotToken
    reserve0: Uint256
    reserve1: Uint256
    is_xybk: bool = Field(default=False, alias="isXybk")
    fee: int | None = Field(default=None, description="Swap fee in basis points")
    boost0: int = 1
    boost1: int = 1
    trade_state: str | None = Field(default=None, alias="tradeState")

    model_config = {"populate_by_name": True}


__all__ = ["SnapshotToken", "PairSnapshot"]
