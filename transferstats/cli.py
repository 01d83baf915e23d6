"""Command that generates transfers, stores them and prints per-address statistics."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from transferstats import config
from transferstats.config import ConfigError
from transferstats.generator import DefaultTransferGenerator
from transferstats.pipeline import MockCalculator
from transferstats.storage import ClickHouseStorage, StorageError

_SHOWN_STATS = 10


def init_table(url: str, name: str) -> ClickHouseStorage:
    """Return storage for table ``name`` at ``url``, creating the table if needed."""
    storage = ClickHouseStorage(url, name)
    storage.init_table()
    return storage


def _run() -> None:
    storage = init_table(config.table_url(), config.table_name())
    count = config.transfer_count()

    transfers = DefaultTransferGenerator().generate(count)
    storage.save_transfers(transfers)
    loaded = storage.load_transfers()

    stats = MockCalculator().calculate_user_stats(loaded)
    for stat in stats[:_SHOWN_STATS]:
        print(stat)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; settings come from TABLE_URL, TABLE_NAME and TRANSFER_COUNT."""
    parser = argparse.ArgumentParser(
        prog="transferstats",
        description=(
            "Generate random transfers, store them in ClickHouse and print "
            "statistics for the first addresses. Settings come from the "
            "TABLE_URL, TABLE_NAME and TRANSFER_COUNT environment variables "
            "or a .env file."
        ),
    )
    parser.parse_args(argv)
    try:
        _run()
    except (ConfigError, StorageError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())