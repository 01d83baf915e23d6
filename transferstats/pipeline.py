"""Per-address statistics over a list of transfers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from transferstats.models import Transfer, UserStats


class StatsCalculator(ABC):
    """Turns transfers into per-address statistics."""

    @abstractmethod
    def calculate_user_stats(self, transfers: Iterable[Transfer]) -> list[UserStats]:
        """Return one ``UserStats`` per address seen in ``transfers``."""


@dataclass
class _Side:
    amount: float = 0.0
    value: float = 0.0

    def add(self, amount: float, price: float) -> None:
        self.amount += amount
        self.value += amount * price

    @property
    def average_price(self) -> float:
        return self.value / self.amount if self.amount > 0.0 else 0.0


@dataclass
class _Account:
    balance: float = 0.0
    max_balance: float = 0.0

    def __post_init__(self) -> None:
        self.bought = _Side()
        self.sold = _Side()


class MockCalculator(StatsCalculator):
    """Tracks balances in transfer order; a seller's balance never drops below zero."""

    def calculate_user_stats(self, transfers: Iterable[Transfer]) -> list[UserStats]:
        accounts: defaultdict[str, _Account] = defaultdict(_Account)

        for t in transfers:
            seller = accounts[t.from_]
            seller.balance = max(seller.balance - t.amount, 0.0)
            seller.sold.add(t.amount, t.usd_price)

            buyer = accounts[t.to]
            buyer.balance += t.amount
            buyer.max_balance = max(buyer.max_balance, buyer.balance)
            buyer.bought.add(t.amount, t.usd_price)

        return [
            UserStats(
                address=address,
                total_volume=acc.bought.amount + acc.sold.amount,
                avg_buy_price=acc.bought.average_price,
                avg_sell_price=acc.sold.average_price,
                max_balance=acc.max_balance,
            )
            for address, acc in accounts.items()
        ]