"""Emulation of the Game Boy audio processing unit.

Register writes go through :meth:`Apu.write`, and each call to
:meth:`Apu.render` produces one video frame's worth of interleaved stereo
16-bit samples at :data:`AUDIO_SAMPLE_RATE`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

AUDIO_SAMPLE_RATE = 44100
DMG_CLOCK_FREQ = 4194304.0
SCREEN_REFRESH_CYCLES = 70224.0
VERTICAL_SYNC = DMG_CLOCK_FREQ / SCREEN_REFRESH_CYCLES

AUDIO_SAMPLES = int(AUDIO_SAMPLE_RATE / VERTICAL_SYNC)
"""Stereo sample pairs produced per frame."""
AUDIO_BUFFER_SIZE_BYTES = AUDIO_SAMPLES * 4
AUDIO_NSAMPLES = AUDIO_SAMPLES * 2
"""Individual 16-bit values produced per frame (left and right interleaved)."""

REGISTER_FIRST = 0xFF10
REGISTER_LAST = 0xFF3F

_DMG_CLOCK_FREQ_U = int(DMG_CLOCK_FREQ)
_BASE = REGISTER_FIRST
_MEM_SIZE = REGISTER_LAST - REGISTER_FIRST + 1
_NR52 = 0xFF26 - _BASE

_INT16_MAX = 32767
_VOL_INIT_MAX = _INT16_MAX // 8
_VOL_INIT_MIN = -4096
_FREQ_INC_REF = AUDIO_SAMPLE_RATE * 16
_MAX_CHAN_VOLUME = 15

_U32 = 0xFFFFFFFF


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


_HIGH = _cdiv(_VOL_INIT_MAX, _MAX_CHAN_VOLUME)
_LOW = _cdiv(_VOL_INIT_MIN, _MAX_CHAN_VOLUME)
_WAVE_STEP = _INT16_MAX // 64


def _s16(v: int) -> int:
    v &= 0xFFFF
    return v - 0x10000 if v & 0x8000 else v


def _s32(v: int) -> int:
    v &= _U32
    return v - 0x100000000 if v & 0x80000000 else v


_READ_MASK = bytes((
    0x80, 0x3F, 0x00, 0xFF, 0xBF,
    0xFF, 0x3F, 0x00, 0xFF, 0xBF,
    0x7F, 0xFF, 0x9F, 0xFF, 0xBF,
    0xFF, 0xFF, 0x00, 0x00, 0xBF,
    0x00, 0x00, 0x70,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
))

_REGS_INIT = bytes((
    0x80, 0xBF, 0xF3, 0xFF, 0x3F,
    0xFF, 0x3F, 0x00, 0xFF, 0x3F,
    0x7F, 0xFF, 0x9F, 0xFF, 0x3F,
    0xFF, 0xFF, 0x00, 0x00, 0x3F,
    0x77, 0xF3, 0xF1,
))

_WAVE_INIT = bytes((
    0xAC, 0xDD, 0xDA, 0x48,
    0x36, 0x02, 0xCF, 0x16,
    0x2C, 0x04, 0xE5, 0x2C,
    0xAC, 0xDD, 0xDA, 0x48,
))

_DUTY_LOOKUP = (0x10, 0x30, 0x3C, 0xCF)
_LFSR_DIV_LUT = (8, 16, 32, 48, 64, 80, 96, 112)
_WAVE_DIV = (_INT16_MAX, 1, 2, 4)


@dataclass
class _LengthCounter:
    load: int = 0
    enabled: bool = False
    counter: int = 0
    inc: int = 0


@dataclass
class _Envelope:
    step: int = 0
    up: bool = False
    counter: int = 0
    inc: int = 0


@dataclass
class _Sweep:
    freq: int = 0
    rate: int = 0
    shift: int = 0
    up: bool = False
    counter: int = 0
    inc: int = 0


@dataclass
class _Channel:
    enabled: bool = False
    powered: bool = False
    on_left: int = 0
    on_right: int = 0
    muted: bool = False
    volume: int = 0
    volume_init: int = 0
    freq: int = 0
    freq_counter: int = 0
    freq_inc: int = 0
    val: int = 0
    length: _LengthCounter = field(default_factory=_LengthCounter)
    env: _Envelope = field(default_factory=_Envelope)
    sweep: _Sweep = field(default_factory=_Sweep)
    duty: int = 0
    duty_counter: int = 0
    lfsr_reg: int = 0
    lfsr_wide: bool = False
    lfsr_div: int = 0
    wave_sample: int = 0

    def set_note_freq(self, freq: int) -> None:
        self.freq_inc = (freq * (_FREQ_INC_REF // AUDIO_SAMPLE_RATE)) & _U32

    def update_freq(self, pos: int) -> tuple[bool, int]:
        """Advance the frequency counter; return (wrapped, new position)."""
        inc = (self.freq_inc - pos) & _U32
        self.freq_counter = (self.freq_counter + inc) & _U32
        if self.freq_counter > _FREQ_INC_REF:
            pos = (self.freq_inc - (self.freq_counter - _FREQ_INC_REF)) & _U32
            self.freq_counter = 0
            return True, pos
        return False, self.freq_inc

    def update_env(self) -> None:
        self.env.counter = (self.env.counter + self.env.inc) & _U32
        while self.env.counter > _FREQ_INC_REF:
            if self.env.step:
                self.volume = (self.volume + (1 if self.env.up else -1)) & 0xFF
                if self.volume in (0, _MAX_CHAN_VOLUME):
                    self.env.inc = 0
                self.volume = min(_MAX_CHAN_VOLUME, self.volume)
            self.env.counter -= _FREQ_INC_REF

    def update_sweep(self) -> None:
        self.sweep.counter = (self.sweep.counter + self.sweep.inc) & _U32
        while self.sweep.counter > _FREQ_INC_REF:
            if self.sweep.shift:
                inc = (self.sweep.freq >> self.sweep.shift) & 0xFFFF
                if not self.sweep.up:
                    inc = (-inc) & 0xFFFF
                self.freq = (self.freq + inc) & 0xFFFF
                if self.freq > 2047:
                    self.enabled = False
                else:
                    self.set_note_freq(_DMG_CLOCK_FREQ_U // ((2048 - self.freq) << 5))
                    self.freq_inc = (self.freq_inc * 8) & _U32
            elif self.sweep.rate:
                self.enabled = False
            self.sweep.counter -= _FREQ_INC_REF


class Apu:
    """The four sound channels and their registers at 0xFF10..0xFF3F."""

    def __init__(self) -> None:
        self._mem = bytearray(_MEM_SIZE)
        self._chans = [_Channel() for _ in range(4)]
        self._vol_l = 0
        self._vol_r = 0
        self.reset()

    def reset(self) -> None:
        """Reset the channels and write the power-on register values."""
        self._chans = [_Channel() for _ in range(4)]
        self._chans[0].val = self._chans[1].val = -1
        for offset, value in enumerate(_REGS_INIT):
            self.write(REGISTER_FIRST + offset, value)
        for offset, value in enumerate(_WAVE_INIT):
            self.write(0xFF30 + offset, value)

    @staticmethod
    def _offset(addr: int) -> int:
        if not REGISTER_FIRST <= addr <= REGISTER_LAST:
            raise ValueError(f"audio register address out of range: 0x{addr:04X}")
        return addr - _BASE

    def read(self, addr: int) -> int:
        """Read the audio register at ``addr``, with unreadable bits set."""
        offset = self._offset(addr)
        return self._mem[offset] | _READ_MASK[offset]

    def _chan_enable(self, i: int, enable: bool) -> None:
        self._chans[i].enabled = bool(enable)
        bits = sum(int(c.enabled) << n for n, c in enumerate(self._chans))
        self._mem[_NR52] = (self._mem[_NR52] & 0x80) | bits

    def _chan_trigger(self, i: int) -> None:
        c = self._chans[i]
        self._chan_enable(i, True)
        c.volume = c.volume_init

        val = self._mem[0xFF12 + i * 5 - _BASE]
        c.env.step = val & 0x07
        c.env.up = bool(val & 0x08)
        if c.env.step:
            c.env.inc = (_FREQ_INC_REF * 64) // (c.env.step * AUDIO_SAMPLE_RATE)
        else:
            c.env.inc = (8 * _FREQ_INC_REF) // AUDIO_SAMPLE_RATE
        c.env.counter = 0

        if i == 0:
            val = self._mem[0]
            c.sweep.freq = c.freq
            c.sweep.rate = (val >> 4) & 0x07
            c.sweep.up = not (val & 0x08)
            c.sweep.shift = val & 0x07
            c.sweep.inc = (
                (128 * _FREQ_INC_REF) // (c.sweep.rate * AUDIO_SAMPLE_RATE)
                if c.sweep.rate
                else 0
            )
            c.sweep.counter = _FREQ_INC_REF

        len_max = 64
        if i == 2:
            len_max = 256
            c.val = 0
        elif i == 3:
            c.lfsr_reg = 0xFFFF
            c.val = _LOW

        c.length.inc = (256 * _FREQ_INC_REF) // (AUDIO_SAMPLE_RATE * (len_max - c.length.load))
        c.length.counter = 0

    def write(self, addr: int, value: int) -> None:
        """Write ``value`` to the audio register at ``addr``."""
        offset = self._offset(addr)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"register value out of range: {value}")

        if addr == 0xFF26:
            self._mem[offset] = value & 0x80
            if not value & 0x80:
                self._mem[:_NR52] = bytes(_NR52)
                for c in self._chans:
                    c.enabled = False
            return

        if self._mem[_NR52] == 0:
            return

        self._mem[offset] = value
        i = offset // 5
        c = self._chans[i] if i < 4 else None

        if addr in (0xFF12, 0xFF17, 0xFF21):
            c.volume_init = value >> 4
            c.powered = (value >> 3) != 0
            # "Zombie mode" volume adjustment some games rely on.
            if c.powered and c.enabled:
                if c.env.step == 0 and c.env.inc != 0:
                    c.volume += 1 if value & 0x08 else 2
                else:
                    c.volume = 16 - c.volume
                c.volume &= 0x0F
                c.env.step = value & 0x07
        elif addr == 0xFF1C:
            c.volume = c.volume_init = (value >> 5) & 0x03
        elif addr in (0xFF11, 0xFF16, 0xFF20):
            c.length.load = value & 0x3F
            c.duty = _DUTY_LOOKUP[value >> 6]
            if i == 3:
                # The duty byte shares storage with the low byte of the LFSR.
                c.lfsr_reg = (c.lfsr_reg & 0xFF00) | c.duty
        elif addr == 0xFF1B:
            c.length.load = value
        elif addr in (0xFF13, 0xFF18, 0xFF1D):
            c.freq = (c.freq & 0xFF00) | value
        elif addr == 0xFF1A:
            c.powered = bool(value & 0x80)
            self._chan_enable(i, bool(value & 0x80))
        elif addr in (0xFF14, 0xFF19, 0xFF1E, 0xFF23):
            if addr != 0xFF23:
                c.freq = (c.freq & 0x00FF) | ((value & 0x07) << 8)
            c.length.enabled = bool(value & 0x40)
            if value & 0x80:
                self._chan_trigger(i)
        elif addr == 0xFF22:
            noise = self._chans[3]
            noise.freq = value >> 4
            noise.lfsr_wide = not (value & 0x08)
            noise.lfsr_div = value & 0x07
        elif addr == 0xFF24:
            self._vol_l = (value >> 4) & 0x07
            self._vol_r = value & 0x07
        elif addr == 0xFF25:
            for j, ch in enumerate(self._chans):
                ch.on_left = (value >> (4 + j)) & 1
                ch.on_right = (value >> j) & 1

    def _update_len(self, i: int) -> None:
        c = self._chans[i]
        if not c.length.enabled:
            return
        c.length.counter = (c.length.counter + c.length.inc) & _U32
        if c.length.counter > _FREQ_INC_REF:
            self._chan_enable(i, False)
            c.length.counter = 0

    def _mix(self, samples: list[int], i: int, c: _Channel, sample: int) -> None:
        samples[i] = _s16(samples[i] + sample * c.on_left * self._vol_l)
        samples[i + 1] = _s16(samples[i + 1] + sample * c.on_right * self._vol_r)

    def _update_square(self, samples: list[int], index: int) -> None:
        c = self._chans[index]
        if not c.powered or not c.enabled:
            return
        c.set_note_freq(_DMG_CLOCK_FREQ_U // ((2048 - c.freq) << 5))
        c.freq_inc = (c.freq_inc * 8) & _U32

        for i in range(0, AUDIO_NSAMPLES, 2):
            self._update_len(index)
            if not c.enabled:
                continue
            c.update_env()
            if index == 0:
                c.update_sweep()

            pos = prev_pos = 0
            sample = 0
            while True:
                wrapped, pos = c.update_freq(pos)
                if not wrapped:
                    break
                c.duty_counter = (c.duty_counter + 1) & 7
                sample = _s32(sample + ((pos - prev_pos) & _U32) // c.freq_inc * c.val)
                c.val = _HIGH if c.duty & (1 << c.duty_counter) else _LOW
                prev_pos = pos

            if c.muted:
                continue
            sample = _s32((sample + c.val) * c.volume)
            self._mix(samples, i, c, _cdiv(sample, 4))

    def _wave_sample(self, pos: int, volume: int) -> int:
        sample = self._mem[0xFF30 + pos // 2 - _BASE]
        sample = sample & 0x0F if pos & 1 else sample >> 4
        return sample >> (volume - 1) if volume else 0

    def _update_wave(self, samples: list[int]) -> None:
        c = self._chans[2]
        if not c.powered or not c.enabled:
            return
        c.set_note_freq((_DMG_CLOCK_FREQ_U // 64) // (2048 - c.freq))
        c.freq_inc = (c.freq_inc * 32) & _U32

        for i in range(0, AUDIO_NSAMPLES, 2):
            self._update_len(2)
            if not c.enabled:
                continue

            pos = prev_pos = 0
            sample = 0
            c.wave_sample = self._wave_sample(c.val, c.volume)
            while True:
                wrapped, pos = c.update_freq(pos)
                if not wrapped:
                    break
                c.val = (c.val + 1) & 31
                step = ((pos - prev_pos) & _U32) // c.freq_inc
                sample = _s32(sample + step * (c.wave_sample - 8) * _WAVE_STEP)
                c.wave_sample = self._wave_sample(c.val, c.volume)
                prev_pos = pos

            sample = _s32(sample + (c.wave_sample - 8) * _WAVE_STEP)
            if c.volume == 0:
                continue
            sample = _cdiv(sample, _WAVE_DIV[c.volume])
            if c.muted:
                continue
            self._mix(samples, i, c, _cdiv(sample, 4))

    def _update_noise(self, samples: list[int]) -> None:
        c = self._chans[3]
        if not c.powered:
            return
        c.set_note_freq(_DMG_CLOCK_FREQ_U // (_LFSR_DIV_LUT[c.lfsr_div] << c.freq))
        if c.freq >= 14:
            c.enabled = False

        for i in range(0, AUDIO_NSAMPLES, 2):
            self._update_len(3)
            if not c.enabled:
                continue
            c.update_env()

            pos = prev_pos = 0
            sample = 0
            while True:
                wrapped, pos = c.update_freq(pos)
                if not wrapped:
                    break
                c.lfsr_reg = ((c.lfsr_reg << 1) | int(c.val >= _HIGH)) & 0xFFFF
                hi, lo = (14, 13) if c.lfsr_wide else (6, 5)
                feedback = ((c.lfsr_reg >> hi) & 1) ^ ((c.lfsr_reg >> lo) & 1)
                c.val = _LOW if feedback else _HIGH
                sample = _s32(sample + ((pos - prev_pos) & _U32) // c.freq_inc * c.val)
                prev_pos = pos

            if c.muted:
                continue
            sample = _s32((sample + c.val) * c.volume)
            self._mix(samples, i, c, _cdiv(sample, 4))

    def render(self) -> list[int]:
        """Produce one frame of interleaved stereo samples (left, right, ...)."""
        samples = [0] * AUDIO_NSAMPLES
        self._update_square(samples, 0)
        self._update_square(samples, 1)
        self._update_wave(samples)
        self._update_noise(samples)
        return samples