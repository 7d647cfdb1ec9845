import dataclasses
import logging

import pytest

from pocketgb.palettes import Palette, get_colour_palette


def test_entry_zero_flags_one_matches_table():
    palette = get_colour_palette(0x00, 0x01)
    assert palette.obj0 == (0xFFFF, 0xFB80, 0x9200, 0x0000)
    assert palette.obj1 == (0xFFFF, 0xAD70, 0x438F, 0x0000)
    assert palette.bg == (0xFFFF, 0xAD70, 0x438F, 0x0000)


def test_zelda_entry_matches_table():
    palette = get_colour_palette(0x11, 0x05)
    assert palette.obj0 == (0xFFFF, 0x07E0, 0x3420, 0x0240)
    assert palette.bg == (0xFFFF, 0xFC30, 0x91C7, 0x0000)


def test_dmg_palette_is_green_shades():
    palette = get_colour_palette(0xFF, 0xFF)
    for row in palette:
        assert row == (0xDFEA, 0xAE68, 0x74E6, 0x4388)


@pytest.mark.parametrize("entry, flags", [(0x1D, 0x00), (0x00, 0x00), (0x05, 0x07), (0x100, 0x01)])
def test_unknown_combination_falls_back_to_dmg(entry, flags):
    assert get_colour_palette(entry, flags) == get_colour_palette(0xFF, 0xFF)


def test_unknown_combination_logs_error(caplog):
    with caplog.at_level(logging.ERROR, logger="pocketgb.palettes"):
        palette = get_colour_palette(0x1D, 0x00)
    assert any(record.levelno == logging.ERROR for record in caplog.records)
    assert palette.bg == (0xDFEA, 0xAE68, 0x74E6, 0x4388)


def test_known_combination_logs_no_error(caplog):
    with caplog.at_level(logging.ERROR, logger="pocketgb.palettes"):
        palette = get_colour_palette(0x07, 0x00)
    assert palette.bg == (0xFFFF, 0xFFE0, 0xF800, 0x0000)
    assert [r for r in caplog.records if r.levelno >= logging.ERROR] == []


@pytest.mark.parametrize("entry", [0x05, 0x06, 0x07, 0x08, 0x12, 0x13, 0x16, 0x17, 0x1B])
def test_no_shuffling_uses_one_palette_for_all_layers(entry):
    palette = get_colour_palette(entry, 0x00)
    assert palette.obj0 == palette.obj1 == palette.bg
    assert palette != get_colour_palette(0xFF, 0xFF)


@pytest.mark.parametrize("entry", [0x00, 0x0B, 0x0D, 0x10, 0x1C])
def test_flag_one_shares_obj1_with_background(entry):
    palette = get_colour_palette(entry, 0x01)
    assert palette.obj1 == palette.bg
    assert palette.obj0 != palette.bg


@pytest.mark.parametrize("entry", [0x0B, 0x0C])
def test_flag_two_shares_obj0_with_background(entry):
    palette = get_colour_palette(entry, 0x02)
    assert palette.obj0 == palette.bg
    assert palette.obj1 != palette.bg


@pytest.mark.parametrize(
    "entry", [0x00, 0x04, 0x05, 0x06, 0x08, 0x0A, 0x0C, 0x0D, 0x0E, 0x0F, 0x12, 0x19, 0x1C]
)
def test_flag_three_shares_sprite_palettes(entry):
    palette = get_colour_palette(entry, 0x03)
    assert palette.obj0 == palette.obj1
    assert palette.obj0 != palette.bg


@pytest.mark.parametrize("entry", [0x05, 0x06, 0x07])
def test_flag_four_shares_obj0_with_background(entry):
    palette = get_colour_palette(entry, 0x04)
    assert palette.obj0 == palette.bg
    assert palette.obj1 != palette.bg


@pytest.mark.parametrize("entry, flags", [(0x00, 0x05), (0x09, 0x05), (0x1A, 0x05), (0xFF, 0xFF)])
def test_shades_are_rgb565(entry, flags):
    rows = list(get_colour_palette(entry, flags))
    assert len(rows) == 3
    for row in rows:
        assert len(row) == 4
        assert all(0 <= shade <= 0xFFFF for shade in row)


def test_iteration_order_is_obj0_obj1_bg():
    palette = get_colour_palette(0x0B, 0x05)
    assert list(palette) == [palette.obj0, palette.obj1, palette.bg]


def test_palette_is_immutable():
    palette = get_colour_palette(0x07, 0x00)
    with pytest.raises(dataclasses.FrozenInstanceError):
        palette.bg = (0, 0, 0, 0)
    assert palette.bg == (0xFFFF, 0xFFE0, 0xF800, 0x0000)


def test_repeated_lookup_is_stable():
    assert get_colour_palette(0x14, 0x05) == get_colour_palette(0x14, 0x05)
    assert isinstance(get_colour_palette(0x14, 0x05), Palette)
    assert get_colour_palette(0x14, 0x05).obj0 == (0xFFE0, 0xF800, 0x6000, 0x0000)