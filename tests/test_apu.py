import pytest

from pocketgb.apu import AUDIO_NSAMPLES, AUDIO_SAMPLES, Apu


def _start_square(apu: Apu, nr14: int = 0x87) -> None:
    apu.write(0xFF24, 0x77)
    apu.write(0xFF25, 0xFF)
    apu.write(0xFF12, 0xF0)
    apu.write(0xFF11, 0x80)
    apu.write(0xFF13, 0x00)
    apu.write(0xFF14, nr14)


def test_frame_size():
    assert AUDIO_NSAMPLES == 2 * AUDIO_SAMPLES
    assert len(Apu().render()) == AUDIO_NSAMPLES


def test_initial_state_is_silent():
    apu = Apu()
    assert apu.render() == [0] * AUDIO_NSAMPLES


def test_power_register_after_init():
    apu = Apu()
    assert apu.read(0xFF26) == 0x80 | 0x70


def test_wave_ram_initialised():
    apu = Apu()
    assert apu.read(0xFF30) == 0xAC
    assert apu.read(0xFF3F) == 0x48


def test_write_ignored_while_powered_off():
    apu = Apu()
    apu.write(0xFF26, 0x00)
    apu.write(0xFF24, 0x77)
    assert apu.read(0xFF24) == 0x00


def test_register_round_trip_when_powered():
    apu = Apu()
    apu.write(0xFF24, 0x77)
    assert apu.read(0xFF24) == 0x77


def test_trigger_enables_channel_and_produces_sound():
    apu = Apu()
    _start_square(apu)
    assert apu.read(0xFF26) & 0x01 == 1
    frame = apu.render()
    assert sum(abs(s) for s in frame) > 0
    assert all(-32768 <= s <= 32767 for s in frame)
    assert frame[0::2] == frame[1::2]


def test_power_off_clears_channels():
    apu = Apu()
    _start_square(apu)
    apu.write(0xFF26, 0x00)
    assert apu.read(0xFF26) & 0x0F == 0
    assert apu.render() == [0] * AUDIO_NSAMPLES


def test_panning_left_only():
    apu = Apu()
    _start_square(apu)
    apu.write(0xFF25, 0x10)
    frame = apu.render()
    assert sum(abs(s) for s in frame[0::2]) > 0
    assert frame[1::2] == [0] * AUDIO_SAMPLES


def test_reset_is_deterministic():
    a, b = Apu(), Apu()
    _start_square(a)
    _start_square(b)
    assert a.render() == b.render()


@pytest.mark.parametrize("addr", [0xFF0F, 0xFF40])
def test_out_of_range_address(addr):
    with pytest.raises(ValueError):
        Apu().read(addr)
    with pytest.raises(ValueError):
        Apu().write(addr, 0)


def test_out_of_range_value():
    with pytest.raises(ValueError):
        Apu().write(0xFF24, 0x100)