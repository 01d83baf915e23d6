"""Persistence of transfers in a ClickHouse table over its HTTP interface."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from transferstats.models import Transfer

_COLUMNS = ("ts", "from", "to", "amount", "usd_price")


class StorageError(Exception):
    """A storage operation failed."""


class Storage(ABC):
    """A place where transfers can be saved and loaded back."""

    @abstractmethod
    def save_transfers(self, transfers: Iterable[Transfer]) -> None:
        """Store ``transfers``."""

    @abstractmethod
    def load_transfers(self) -> list[Transfer]:
        """Return every stored transfer."""


def _to_row(transfer: Transfer) -> dict[str, Any]:
    return {
        "ts": transfer.ts,
        "from": transfer.from_,
        "to": transfer.to,
        "amount": transfer.amount,
        "usd_price": transfer.usd_price,
    }


def _from_row(row: dict[str, Any]) -> Transfer:
    return Transfer(
        ts=int(row["ts"]),
        from_=str(row["from"]),
        to=str(row["to"]),
        amount=float(row["amount"]),
        usd_price=float(row["usd_price"]),
    )


def _describe(exc: Exception) -> str:
    if isinstance(exc, urllib.error.HTTPError):
        try:
            body = exc.read().decode("utf-8", errors="replace").strip()
        except OSError:
            body = ""
        return f"HTTP error {exc.code}: {body or exc.reason}"
    if isinstance(exc, urllib.error.URLError):
        return f"connection error: {exc.reason}"
    return f"connection error: {exc}"


class ClickHouseStorage(Storage):
    """Transfers kept in one ClickHouse table, reached through its HTTP endpoint."""

    timeout: float = 30.0

    def __init__(self, database_url: str, table: str) -> None:
        self.database_url = database_url
        self.table = table

    def __repr__(self) -> str:
        return f"ClickHouseStorage(database_url={self.database_url!r}, table={self.table!r})"

    def _endpoint(self, extra: list[tuple[str, str]]) -> str:
        parts = urlsplit(self.database_url)
        params = parse_qsl(parts.query, keep_blank_values=True) + extra
        return urlunsplit(
            (parts.scheme, parts.netloc, parts.path or "/", urlencode(params), "")
        )

    def _post(self, query: str, data: bytes | None = None) -> str:
        if data is None:
            url, body = self._endpoint([]), query.encode("utf-8")
        else:
            url, body = self._endpoint([("query", query)]), data
        request = urllib.request.Request(url, data=body, method="POST")
        with urllib.request.urlopen(request, timeout=self.timeout) as response:
            return response.read().decode("utf-8")

    def _run(self, context: str, query: str, data: bytes | None = None) -> str:
        try:
            return self._post(query, data)
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise StorageError(f"{context}: {_describe(exc)}") from exc

    def init_table(self) -> None:
        """Create the table unless it already exists."""
        ddl = f"""
            CREATE TABLE IF NOT EXISTS {self.table} (
                ts UInt64,
                `from` String,
                `to` String,
                amount Float64,
                usd_price Float64
            ) ENGINE = MergeTree()
            ORDER BY ts
            """
        self._run("Table creation failed", ddl)

    def save_transfers(self, transfers: Iterable[Transfer]) -> None:
        lines = []
        for t in transfers:
            try:
                lines.append(json.dumps(_to_row(t)))
            except (TypeError, ValueError) as exc:
                raise StorageError(f"Write failed for transfer: {t!r}") from exc
        if not lines:
            return
        payload = ("\n".join(lines) + "\n").encode("utf-8")
        self._run(
            "Insert commit failed",
            f"INSERT INTO {self.table} FORMAT JSONEachRow",
            payload,
        )

    def load_transfers(self) -> list[Transfer]:
        query = f"SELECT * FROM {self.table}"
        context = f"Load failed for query: `{query}`"
        text = self._run(context, f"{query} FORMAT JSONEachRow")
        try:
            return [_from_row(json.loads(line)) for line in text.splitlines() if line.strip()]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"{context}: malformed row: {exc}") from exc