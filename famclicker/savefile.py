"""Binary save-file format for the clicker game.

A save file holds six big-endian signed 32-bit integers followed by a
one-byte boolean, in this order: score, clicks, click value, auto-clicker
value, auto-clicker upgrade cost, click upgrade cost, auto-clicker flag.
"""

from __future__ import annotations

import os
import struct
from dataclasses import astuple, dataclass

_LAYOUT = struct.Struct(">6i?")

SIZE = _LAYOUT.size


@dataclass
class SaveData:
    """The complete persistent state of a game."""

    score: int = 0
    clicks: int = 0
    click_value: int = 1
    auto_clicker_value: int = 0
    auto_clicker_upgrade_cost: int = 1000
    upgrade_cost: int = 50
    auto_clicker_enabled: bool = False


def encode(data: SaveData) -> bytes:
    """Serialise a game state to bytes."""
    try:
        return _LAYOUT.pack(*astuple(data))
    except struct.error as exc:
        raise ValueError(f"cannot encode save data: {exc}") from exc


def decode(raw: bytes) -> SaveData:
    """Parse bytes produced by :func:`encode`; trailing bytes are ignored."""
    if len(raw) < SIZE:
        raise ValueError(f"save data is truncated: {len(raw)} of {SIZE} bytes")
    *numbers, enabled = _LAYOUT.unpack_from(raw)
    return SaveData(*numbers, auto_clicker_enabled=bool(enabled))


def write(path: str | os.PathLike[str], data: SaveData) -> None:
    """Write a game state to a file."""
    payload = encode(data)
    with open(path, "wb") as handle:
        handle.write(payload)


def read(path: str | os.PathLike[str]) -> SaveData:
    """Read a game state from a file."""
    with open(path, "rb") as handle:
        return decode(handle.read())