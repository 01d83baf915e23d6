"""Generate transfers, store them in ClickHouse and compute per-address statistics."""

__version__ = "0.1.0"