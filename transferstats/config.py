"""Settings read from the environment, with an optional ``.env`` file."""

from __future__ import annotations

import os
import re

from dotenv import find_dotenv, load_dotenv

_USIZE_PATTERN = re.compile(r"\+?[0-9]+")
_USIZE_LIMIT = 2**64


class ConfigError(Exception):
    """A required setting is missing or malformed."""


def _load_dotenv_file() -> None:
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)


def load_env_var(name: str) -> str:
    """Return the value of an environment variable, loading ``.env`` first.

    Variables already present in the environment win over ``.env`` entries.
    """
    _load_dotenv_file()
    try:
        return os.environ[name]
    except KeyError:
        raise ConfigError(f"Environment variable `{name}` is not set") from None


def table_url() -> str:
    """URL of the database server (``TABLE_URL``)."""
    return load_env_var("TABLE_URL")


def table_name() -> str:
    """Name of the table holding transfers (``TABLE_NAME``)."""
    return load_env_var("TABLE_NAME")


def transfer_count() -> int:
    """Number of transfers to generate (``TRANSFER_COUNT``)."""
    value = load_env_var("TRANSFER_COUNT")
    if not _USIZE_PATTERN.fullmatch(value) or int(value) >= _USIZE_LIMIT:
        raise ConfigError(f"Environment variable `{value}` is not a valid usize")
    return int(value)