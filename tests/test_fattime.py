from datetime import datetime

import pytest

from pocketgb.fattime import (
    SIGNATURE,
    RtcSnapshot,
    calculate_checksum,
    fat_timestamp,
    wrap_ix,
)


def _decode(stamp):
    return (
        (stamp >> 25) + 1980,
        (stamp >> 21) & 0x0F,
        (stamp >> 16) & 0x1F,
        (stamp >> 11) & 0x1F,
        (stamp >> 5) & 0x3F,
        (stamp & 0x1F) * 2,
    )


@pytest.mark.parametrize(
    "index, n, expected",
    [(0, 5, 0), (3, 5, 3), (5, 5, 0), (-1, 5, 4), (-6, 5, 4), (7, 5, 2)],
)
def test_wrap_ix(index, n, expected):
    assert wrap_ix(index, n) == expected


@pytest.mark.parametrize("index", range(-20, 20))
def test_wrap_ix_stays_in_range(index):
    assert 0 <= wrap_ix(index, 7) < 7


def test_checksum_leaves_out_last_word():
    assert calculate_checksum([0x1234, 0xFFFFFFFF]) == 0x1234
    assert calculate_checksum([0xAAAA]) == 0


def test_checksum_xor_cancels():
    assert calculate_checksum([SIGNATURE, SIGNATURE, 99]) == 0


def test_checksum_empty_raises():
    with pytest.raises(ValueError):
        calculate_checksum([])


def test_fat_timestamp_none_is_zero():
    assert fat_timestamp(None) == 0


def test_fat_timestamp_epoch():
    assert fat_timestamp(datetime(1980, 1, 1)) == 0x00210000


@pytest.mark.parametrize(
    "moment",
    [
        datetime(2017, 6, 15, 13, 45, 50),
        datetime(1999, 12, 31, 23, 59, 58),
        datetime(2050, 2, 28, 0, 0, 0),
    ],
)
def test_fat_timestamp_round_trip(moment):
    assert _decode(fat_timestamp(moment)) == (
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
    )


def test_fat_timestamp_halves_odd_seconds():
    even = fat_timestamp(datetime(2020, 3, 4, 5, 6, 50))
    odd = fat_timestamp(datetime(2020, 3, 4, 5, 6, 51))
    assert even == odd


def test_fat_timestamp_year_field():
    assert fat_timestamp(datetime(2017, 1, 1)) >> 25 == 2017 - 1980


def test_unsealed_snapshot_is_invalid():
    snapshot = RtcSnapshot(year=2022, month=5, day=1)
    assert snapshot.is_valid() is False


def test_sealed_snapshot_is_valid():
    snapshot = RtcSnapshot(year=2022, month=5, day=1, hour=12, min=30, sec=15)
    snapshot.seal()
    assert snapshot.signature == SIGNATURE
    assert snapshot.is_valid() is True


def test_snapshot_tampered_after_seal_is_invalid():
    snapshot = RtcSnapshot(year=2022, month=5, day=1, hour=12, min=30, sec=15)
    snapshot.seal()
    snapshot.year = 2023
    assert snapshot.is_valid() is False


def test_snapshot_wrong_checksum_is_invalid():
    snapshot = RtcSnapshot(year=2021, month=2, day=3)
    snapshot.seal()
    snapshot.checksum ^= 1
    assert snapshot.is_valid() is False