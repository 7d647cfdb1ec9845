"""Clock helpers for the FAT file system: timestamps and a saved clock record.

:func:`fat_timestamp` packs a moment into the 32-bit date/time word that FAT
directory entries store. :class:`RtcSnapshot` is the record kept across a
reset so that the real-time clock can be restored; it is signed with a
signature and an XOR checksum.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

SIGNATURE = 0xBABEBABE
"""Marks a snapshot that has been sealed."""

_FAT_EPOCH_YEAR = 1980

# signature (u32), then the clock: year (s16), month, day, day of week,
# hour, minute, second (s8 each).
_LAYOUT = struct.Struct("<Ihbbbbbb")
_WORDS = struct.Struct("<3I")


def wrap_ix(index: int, n: int) -> int:
    """Wrap ``index`` into range ``n``, negative indices included."""
    return index % n


def calculate_checksum(words: Sequence[int]) -> int:
    """XOR every 32-bit word but the last one together.

    The last word is left out, as the saved clock record is checksummed.
    """
    if not words:
        raise ValueError("checksum needs at least one word")
    checksum = 0
    for word in words[:-1]:
        checksum ^= word & 0xFFFFFFFF
    return checksum


def fat_timestamp(moment: datetime | None) -> int:
    """Pack ``moment`` into a FAT date/time word; 0 when there is no time."""
    if moment is None:
        return 0
    year = (moment.year - _FAT_EPOCH_YEAR) & 0xFF
    return (
        ((year & 0x7F) << 25)
        | ((moment.month & 0x0F) << 21)
        | ((moment.day & 0x1F) << 16)
        | ((moment.hour & 0x1F) << 11)
        | ((moment.minute & 0x3F) << 5)
        | ((moment.second // 2) & 0x1F)
    )


@dataclass
class RtcSnapshot:
    """A clock reading saved across a reset, with its signature and checksum."""

    year: int = 0
    month: int = 0
    day: int = 0
    dotw: int = 0
    hour: int = 0
    min: int = 0
    sec: int = 0
    signature: int = 0
    checksum: int = 0

    def _words(self) -> tuple[int, int, int]:
        packed = _LAYOUT.pack(
            self.signature & 0xFFFFFFFF,
            self.year,
            self.month,
            self.day,
            self.dotw,
            self.hour,
            self.min,
            self.sec,
        )
        return _WORDS.unpack(packed)

    def seal(self) -> None:
        """Sign the snapshot and store its checksum."""
        self.signature = SIGNATURE
        self.checksum = calculate_checksum(self._words())

    def is_valid(self) -> bool:
        """Whether the snapshot is signed and its checksum matches."""
        return (
            self.signature == SIGNATURE
            and self.checksum == calculate_checksum(self._words())
        )