"""The shell's own copy of the process environment."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class EnvEntry:
    """One environment variable."""

    key: str
    value: str


def parse_env_entry(text: str) -> EnvEntry:
    """Split 'KEY=VALUE' at the first '='; a missing '=' gives an empty value."""
    key, _, value = text.partition("=")
    return EnvEntry(key, value)


def copy_environment(entries: Iterable[str]) -> list[EnvEntry]:
    """Parse 'KEY=VALUE' strings, keeping their order."""
    return [parse_env_entry(entry) for entry in entries]