"""RGB565 colour palettes used to tint monochrome Game Boy games.

The table holds the palette triplets selectable by the colour boot ROM:
45 used for known games (6 of them shared with manual selection) and 6
that only the manual selection offers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

Shades = tuple[int, int, int, int]


@dataclass(frozen=True)
class Palette:
    """Three rows of four RGB565 shades: two sprite palettes and the background."""

    obj0: Shades
    obj1: Shades
    bg: Shades

    def __iter__(self) -> Iterator[Shades]:
        yield self.obj0
        yield self.obj1
        yield self.bg


def _p(obj0: Shades, obj1: Shades, bg: Shades) -> Palette:
    return Palette(tuple(obj0), tuple(obj1), tuple(bg))


def _mono(shades: Shades) -> Palette:
    return Palette(shades, shades, shades)


_DMG_GREEN: Shades = (0xDFEA, 0xAE68, 0x74E6, 0x4388)

DMG_PALETTE = _mono(_DMG_GREEN)
"""The original Game Boy palette: four shades of green."""

_TABLE: dict[tuple[int, int], Palette] = {
    (0x00, 0x01): _p((0xFFFF, 0xFB80, 0x9200, 0x0000), (0xFFFF, 0xAD70, 0x438F, 0x0000), (0xFFFF, 0xAD70, 0x438F, 0x0000)),
    (0x00, 0x03): _p((0xFFFF, 0xFB80, 0x9200, 0x0000), (0xFFFF, 0xFB80, 0x9200, 0x0000), (0xFFFF, 0xAD70, 0x438F, 0x0000)),
    (0x00, 0x05): _p((0xFFFF, 0xFB80, 0x9200, 0x0000), (0xFFFF, 0x5DFF, 0xF800, 0x001F), (0xFFFF, 0xAD70, 0x438F, 0x0000)),
    (0x01, 0x05): _p((0xFE28, 0xFEA0, 0x91C0, 0x4800), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFF3, 0x95BF, 0x64AE, 0x01C7)),
    (0x02, 0x05): _p((0xFFFF, 0xFFFF, 0x653F, 0x001F), (0xFFFF, 0xFD6C, 0x8180, 0x0000), (0x6FE0, 0xFFFF, 0xFA89, 0x0000)),
    (0x03, 0x05): _p((0xFFFF, 0xFFFF, 0x653F, 0x001F), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0x56E0, 0xFC20, 0xFFE0, 0xFFFF)),
    (0x04, 0x03): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x7FE0, 0xB380, 0x0000)),
    (0x05, 0x00): _mono((0xFFFF, 0x57E0, 0xFA00, 0x0000)),
    (0x05, 0x03): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x57E0, 0xFA00, 0x0000)),
    (0x05, 0x04): _p((0xFFFF, 0x57E0, 0xFA00, 0x0000), (0xFFFF, 0x5DFF, 0xF800, 0x001F), (0xFFFF, 0x57E0, 0xFA00, 0x0000)),
    (0x06, 0x00): _mono((0xFFFF, 0xFCE0, 0xF800, 0x0000)),
    (0x06, 0x03): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFCE0, 0xF800, 0x0000)),
    (0x06, 0x04): _p((0xFFFF, 0xFCE0, 0xF800, 0x0000), (0xFFFF, 0x5DFF, 0xF800, 0x001F), (0xFFFF, 0xFCE0, 0xF800, 0x0000)),
    (0x07, 0x00): _mono((0xFFFF, 0xFFE0, 0xF800, 0x0000)),
    (0x07, 0x04): _p((0xFFFF, 0xFFE0, 0xF800, 0x0000), (0xFFFF, 0x5DFF, 0xF800, 0x001F), (0xFFFF, 0xFFE0, 0xF800, 0x0000)),
    (0x08, 0x00): _mono((0xA4FF, 0xFFE0, 0x0300, 0x0000)),
    (0x08, 0x03): _p((0xFB0A, 0xD000, 0x6000, 0x0000), (0xFB0A, 0xD000, 0x6000, 0x0000), (0xA4FF, 0xFFE0, 0x0300, 0x0000)),
    (0x08, 0x05): _p((0xFB0A, 0xD000, 0x6000, 0x0000), (0x001F, 0xFFFF, 0xFFEF, 0x043F), (0xA4FF, 0xFFE0, 0x0300, 0x0000)),
    (0x09, 0x05): _p((0xFFFF, 0xFB80, 0x9200, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFF9, 0x677D, 0x9C26, 0x5ACB)),
    (0x0A, 0x03): _p((0x0000, 0xFFFF, 0xFC30, 0x91C7), (0x0000, 0xFFFF, 0xFC30, 0x91C7), (0xB5BF, 0xFFF2, 0xAAC8, 0x0000)),
    (0x0B, 0x01): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000)),
    (0x0B, 0x02): _p((0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000)),
    (0x0B, 0x05): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFFEF, 0x043F, 0xF800), (0xFFFF, 0x653F, 0x001F, 0x0000)),
    (0x0C, 0x02): _p((0xFFFF, 0x8C7B, 0x5291, 0x0000), (0xFE28, 0xFEA0, 0x91C0, 0x4800), (0xFFFF, 0x8C7B, 0x5291, 0x0000)),
    (0x0C, 0x03): _p((0xFE28, 0xFEA0, 0x91C0, 0x4800), (0xFE28, 0xFEA0, 0x91C0, 0x4800), (0xFFFF, 0x8C7B, 0x5291, 0x0000)),
    (0x0C, 0x05): _p((0xFE28, 0xFEA0, 0x91C0, 0x4800), (0xFFFF, 0x5DFF, 0xF800, 0x001F), (0xFFFF, 0x8C7B, 0x5291, 0x0000)),
    (0x0D, 0x01): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x8C7B, 0x5291, 0x0000), (0xFFFF, 0x8C7B, 0x5291, 0x0000)),
    (0x0D, 0x03): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x8C7B, 0x5291, 0x0000)),
    (0x0D, 0x05): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFD6C, 0x8180, 0x0000), (0xFFFF, 0x8C7B, 0x5291, 0x0000)),
    (0x0E, 0x03): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x7FE6, 0x0420, 0x0000)),
    (0x0E, 0x05): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0x7FE6, 0x0420, 0x0000)),
    (0x0F, 0x03): _p((0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0xFD6C, 0x8180, 0x0000)),
    (0x0F, 0x05): _p((0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0xFD6C, 0x8180, 0x0000)),
    (0x10, 0x01): _p((0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000)),
    (0x10, 0x05): _p((0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000)),
    (0x11, 0x05): _p((0xFFFF, 0x07E0, 0x3420, 0x0240), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000)),
    (0x12, 0x00): _mono((0xFFFF, 0xFD6C, 0x8180, 0x0000)),
    (0x12, 0x03): _p((0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0xFD6C, 0x8180, 0x0000)),
    (0x12, 0x05): _p((0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0xFD6C, 0x8180, 0x0000)),
    (0x13, 0x00): _mono((0x0000, 0x0430, 0xFEE0, 0xFFFF)),
    (0x14, 0x05): _p((0xFFE0, 0xF800, 0x6000, 0x0000), (0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000)),
    (0x15, 0x05): _p((0xFFFF, 0xFD6C, 0x8180, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0xAD70, 0x438F, 0x0000)),
    (0x16, 0x00): _mono((0xB634, 0x8CCF, 0x63AA, 0x31C4)),
    (0x17, 0x00): _mono((0xFFF4, 0xFCB2, 0x94BF, 0x0000)),
    (0x18, 0x05): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000)),
    (0x19, 0x03): _p((0xFFFF, 0xFD6C, 0x8180, 0x0000), (0xFFFF, 0xFD6C, 0x8180, 0x0000), (0xFF38, 0xCCF0, 0x8345, 0x5981)),
    (0x1A, 0x05): _p((0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0x7FE6, 0x0420, 0x0000), (0xFFFF, 0xFFE0, 0x7A40, 0x0000)),
    (0x1B, 0x00): _mono((0xFFFF, 0xFE60, 0x9B00, 0x0000)),
    (0x1C, 0x01): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x7FE6, 0x0318, 0x0000), (0xFFFF, 0x7FE6, 0x0318, 0x0000)),
    (0x1C, 0x03): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x7FE6, 0x0318, 0x0000)),
    (0x1C, 0x05): _p((0xFFFF, 0xFC30, 0x91C7, 0x0000), (0xFFFF, 0x653F, 0x001F, 0x0000), (0xFFFF, 0x7FE6, 0x0318, 0x0000)),
    (0xFF, 0xFF): DMG_PALETTE,
}


def get_colour_palette(table_entry: int, shuffling_flags: int) -> Palette:
    """Return the palette for a table entry and its shuffling flags.

    Unknown combinations fall back to the original green DMG palette.
    """
    logger.info(
        "get_colour_palette(table_entry=0x%02X, shuffling_flags=0x%02X)",
        table_entry,
        shuffling_flags,
    )
    try:
        return _TABLE[(table_entry, shuffling_flags)]
    except KeyError:
        logger.error(
            "No palette found for table_entry=0x%02X shuffling_flags=0x%02X",
            table_entry,
            shuffling_flags,
        )
        return DMG_PALETTE