import random
import time

import pytest

from transferstats.generator import (
    DefaultTransferGenerator,
    TransferGenConfig,
    TransferGenerator,
    rand_address,
)


def test_generate_transfer_count():
    generator = DefaultTransferGenerator(
        config=TransferGenConfig(
            min_amount=1.0,
            max_amount=100.0,
            min_price=0.5,
            max_price=10.0,
            max_age_secs=60 * 60 * 24,
        )
    )
    count = 1000
    transfers = generator.generate(count)
    assert len(transfers) == count


def test_generate_transfer_ranges():
    config = TransferGenConfig(
        min_amount=10.0,
        max_amount=50.0,
        min_price=1.0,
        max_price=5.0,
        max_age_secs=3600,
    )
    generator = DefaultTransferGenerator(config=config)
    before = int(time.time())
    transfers = generator.generate(500)
    after = int(time.time())

    assert len(transfers) == 500
    for t in transfers:
        assert config.min_amount <= t.amount <= config.max_amount
        assert config.min_price <= t.usd_price <= config.max_price
        assert before - config.max_age_secs <= t.ts <= after
        assert t.from_ != t.to


def test_generate_addresses_are_randomized():
    generator = DefaultTransferGenerator(
        config=TransferGenConfig(
            min_amount=1.0,
            max_amount=100.0,
            min_price=0.5,
            max_price=10.0,
            max_age_secs=1000,
        )
    )
    transfers = generator.generate(100)
    addresses = {t.from_ for t in transfers} | {t.to for t in transfers}
    assert len(addresses) > 10


def test_rand_address_format():
    rng = random.Random(1)
    for _ in range(50):
        address = rand_address(rng)
        assert address.startswith("0x")
        assert len(address) == 12
        assert address[2:].isascii() and address[2:].isalnum()


def test_default_generator_stays_within_default_bounds():
    config = TransferGenConfig()
    transfers = DefaultTransferGenerator(rng=random.Random(3)).generate(200)
    assert len(transfers) == 200
    for t in transfers:
        assert config.min_amount <= t.amount < config.max_amount
        assert config.min_price <= t.usd_price < config.max_price


def test_same_seed_gives_same_addresses_and_amounts():
    first = DefaultTransferGenerator(rng=random.Random(42)).generate(20)
    second = DefaultTransferGenerator(rng=random.Random(42)).generate(20)
    assert [(t.from_, t.to, t.amount, t.usd_price) for t in first] == [
        (t.from_, t.to, t.amount, t.usd_price) for t in second
    ]


def test_zero_count_returns_empty_even_with_empty_ranges():
    config = TransferGenConfig(min_amount=5.0, max_amount=5.0, max_age_secs=0)
    assert DefaultTransferGenerator(config=config).generate(0) == []


@pytest.mark.parametrize(
    "config",
    [
        TransferGenConfig(min_amount=5.0, max_amount=5.0),
        TransferGenConfig(min_price=3.0, max_price=1.0),
        TransferGenConfig(max_age_secs=0),
    ],
)
def test_empty_range_raises(config):
    with pytest.raises(ValueError, match="empty"):
        DefaultTransferGenerator(config=config).generate(1)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        DefaultTransferGenerator().generate(-1)


def test_transfer_generator_is_abstract():
    with pytest.raises(TypeError):
        TransferGenerator()  # type: ignore[abstract]