"""Records exchanged between the generator, storage and statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Transfer:
    """A token transfer from one address to another at a point in time."""

    ts: int
    from_: str
    to: str
    amount: float
    usd_price: float


@dataclass(frozen=True)
class UserStats:
    """Aggregated trading figures for one address."""

    address: str
    total_volume: float
    avg_buy_price: float
    avg_sell_price: float
    max_balance: float