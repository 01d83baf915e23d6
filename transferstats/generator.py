"""Random transfer generation."""

from __future__ import annotations

import random
import string
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from transferstats.models import Transfer

_ALPHANUMERIC = string.ascii_letters + string.digits
_ADDRESS_SUFFIX_LEN = 10


def rand_address(rng: random.Random) -> str:
    """Return a random address: ``0x`` followed by ten alphanumeric characters."""
    return "0x" + "".join(rng.choices(_ALPHANUMERIC, k=_ADDRESS_SUFFIX_LEN))


@dataclass
class TransferGenConfig:
    """Bounds for generated transfers; lower bounds inclusive, upper exclusive."""

    min_amount: float = 1.0
    max_amount: float = 1000.0
    min_price: float = 0.1
    max_price: float = 2.0
    max_age_secs: int = 86_400 * 30


class TransferGenerator(ABC):
    """Something that produces transfers."""

    @abstractmethod
    def generate(self, count: int) -> list[Transfer]:
        """Return ``count`` transfers."""


def _uniform(rng: random.Random, low: float, high: float, what: str) -> float:
    if not low < high:
        raise ValueError(f"empty {what} range: {low}..{high}")
    value = low + rng.random() * (high - low)
    return value if value < high else low


@dataclass
class DefaultTransferGenerator(TransferGenerator):
    """Generates transfers between random addresses within the configured bounds."""

    config: TransferGenConfig = field(default_factory=TransferGenConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def generate(self, count: int) -> list[Transfer]:
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        cfg = self.config
        rng = self.rng
        now = int(time.time())

        def one() -> Transfer:
            sender = rand_address(rng)
            recipient = rand_address(rng)
            amount = _uniform(rng, cfg.min_amount, cfg.max_amount, "amount")
            usd_price = _uniform(rng, cfg.min_price, cfg.max_price, "price")
            if cfg.max_age_secs <= 0:
                raise ValueError(f"empty age range: 0..{cfg.max_age_secs}")
            ts = now - rng.randrange(cfg.max_age_secs)
            return Transfer(
                ts=ts, from_=sender, to=recipient, amount=amount, usd_price=usd_price
            )

        return [one() for _ in range(count)]