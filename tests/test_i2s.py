import pytest

from pocketgb.i2s import I2SConfig


def test_set_volume_clamps_to_sixteen():
    config = I2SConfig()
    config.set_volume(40)
    assert config.volume == 16


def test_set_volume_in_range():
    config = I2SConfig()
    config.set_volume(5)
    assert config.volume == 5


def test_set_volume_negative_raises():
    with pytest.raises(ValueError):
        I2SConfig().set_volume(-1)


def test_increase_volume_stops_at_zero():
    config = I2SConfig(volume=1)
    config.increase_volume()
    config.increase_volume()
    assert config.volume == 0


def test_decrease_volume_stops_at_sixteen():
    config = I2SConfig(volume=15)
    config.decrease_volume()
    config.decrease_volume()
    assert config.volume == 16


def test_increase_then_decrease_round_trip():
    config = I2SConfig(volume=8)
    config.increase_volume()
    config.decrease_volume()
    assert config.volume == 8


def test_buffer_at_full_volume_copies_samples():
    config = I2SConfig(dma_trans_count=2)
    samples = [100, 200, 300, 400]
    assert config.prepare_dma_buffer(samples) == samples


def test_buffer_negative_samples_as_unsigned():
    config = I2SConfig(dma_trans_count=1)
    assert config.prepare_dma_buffer([-1, 5]) == [0xFFFF, 5]


def test_buffer_takes_one_transfer_only():
    config = I2SConfig(dma_trans_count=1)
    assert len(config.prepare_dma_buffer([1, 2, 3, 4, 5])) == 2


def test_buffer_attenuation_halves():
    config = I2SConfig(dma_trans_count=2)
    config.set_volume(1)
    samples = [1000, 2000, 3000, 4000]
    assert config.prepare_dma_buffer(samples) == [s // 2 for s in samples]


def test_buffer_fully_attenuated_keeps_sign_only():
    config = I2SConfig(dma_trans_count=2, volume=16)
    assert config.prepare_dma_buffer([32767, -32768, 1, -1]) == [0, 0xFFFF, 0, 0xFFFF]


def test_buffer_too_few_samples_raises():
    config = I2SConfig(dma_trans_count=3)
    with pytest.raises(ValueError):
        config.prepare_dma_buffer([0, 0, 0])