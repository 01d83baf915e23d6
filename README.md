# transferstats

`transferstats` produces a batch of random token transfers, writes them to a
ClickHouse table through the server's HTTP interface, reads them back and
computes trading statistics for every address that took part.

For each address the statistics are:

- **total volume** – the amount bought plus the amount sold;
- **average buy price** – the USD price of incoming transfers, weighted by amount
  (0 if the address never received a positive amount);
- **average sell price** – the USD price of outgoing transfers, weighted by amount
  (0 if the address never sent a positive amount);
- **maximum balance** – the highest balance the address reached, processing
  transfers in order, where a sender's balance never drops below zero.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Configuration

The command reads its settings from environment variables. A `.env` file is
loaded too: the first one found in the working directory or one of its parents.
Variables already set in the environment take precedence over `.env` entries.

| Variable         | Meaning                                                   |
|------------------|-----------------------------------------------------------|
| `TABLE_URL`      | HTTP address of the ClickHouse server                     |
| `TABLE_NAME`     | table to create (if missing), fill and read               |
| `TRANSFER_COUNT` | number of transfers to generate (non-negative integer below 2**64) |

A `.env` file for a local server might look like this:

```
TABLE_URL=http://localhost:8123
TABLE_NAME=transfers
TRANSFER_COUNT=10000
```

Query parameters in `TABLE_URL` are kept and sent with every request.

## Usage

```
transferstats
```

The command takes no options besides `--help`. It:

1. creates the table if it does not already exist (columns `ts`, `from`, `to`,
   `amount`, `usd_price`, MergeTree engine, ordered by `ts`);
2. generates `TRANSFER_COUNT` random transfers between random addresses
   (`0x` followed by ten letters or digits), with amounts from 1 up to 1000,
   prices from 0.1 up to 2.0 USD and timestamps within the last 30 days;
3. inserts them into the table;
4. loads every row of the table back;
5. computes the statistics and prints those of the first ten addresses, in the
   order the addresses first appear in the loaded rows.

A missing variable, a `TRANSFER_COUNT` that is not a valid count, or a request
the server cannot answer or rejects makes the command print `Error: …` to
standard error and exit with status 1.

## Library

The pieces the command is built from can also be used on their own:

- `transferstats.models` – the frozen `Transfer` (`ts`, `from_`, `to`,
  `amount`, `usd_price`) and `UserStats` records;
- `transferstats.generator` – `TransferGenConfig` with the ranges used for
  random data, `rand_address`, the abstract `TransferGenerator` and
  `DefaultTransferGenerator`, which produces transfers from a config and an
  optional `random.Random` (pass a seeded one for repeatable output). It raises
  `ValueError` for a negative count or an empty range;
- `transferstats.pipeline` – the abstract `StatsCalculator` and
  `MockCalculator`, which turns a sequence of transfers into a list of
  `UserStats`;
- `transferstats.storage` – the abstract `Storage` and `ClickHouseStorage`,
  which creates the table (`init_table`), saves transfers (`save_transfers`)
  and loads them back (`load_transfers`), raising `StorageError` when the
  server cannot be reached, rejects a request or returns malformed rows;
- `transferstats.config` – `load_env_var` and the `table_url`, `table_name`
  and `transfer_count` settings, raising `ConfigError` on bad or missing values;
- `transferstats.cli` – `init_table(url, name)` and the command's `main`.

## Limitations

Storage speaks only ClickHouse's HTTP interface, with a 30-second timeout per
request; there is no support for other databases or for the native protocol.
Table names are placed into queries as given, without quoting.