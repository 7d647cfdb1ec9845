# pocketgb

Parts for a handheld Game Boy emulator, written in plain Python with no
third-party dependencies.

## Modules

- `pocketgb.palettes`: the RGB565 palette triplets that the Game Boy Color
  boot ROM can apply to monochrome games. A `Palette` is a frozen dataclass
  with `obj0`, `obj1` and `bg`, each holding four shades, and iterating over it
  yields those three rows in that order.
  `get_colour_palette(table_entry, shuffling_flags)` looks up a triplet. An
  unknown combination logs an error and returns `DMG_PALETTE`, the original
  four shades of green.
- `pocketgb.assign`: chooses a palette for a cartridge.
  `auto_assign_palette(game_checksum, game_title)` uses the header title
  checksum to pick a palette. Where several games share a checksum, the fourth
  character of the title decides. Unknown checksums get the green DMG palette.
  `manual_assign_palette(selection)` returns one of the
  `NUMBER_OF_MANUAL_PALETTES` (13) palettes that can be chosen with a button
  combination. Any selection outside that range gives the green DMG palette.
- `pocketgb.apu`: `Apu` emulates the four sound channels: two square waves
  (the first with a frequency sweep), the wave channel and the noise channel.
  - `read(addr)` and `write(addr, value)` access the registers from `0xFF10`
    to `0xFF3F`. An address outside that range, or a value outside 0..255,
    raises `ValueError`.
  - While the APU is powered off through `0xFF26`, writes to the other
    registers are ignored.
  - `render()` returns one video frame's worth of samples (`AUDIO_NSAMPLES`
    values) as a list of signed 16-bit ints. Left and right channels are
    interleaved, at `AUDIO_SAMPLE_RATE` (44100 Hz).
  - `reset()` puts back the power-on register and wave RAM values.
- `pocketgb.i2s`: `I2SConfig` is a dataclass holding the audio output settings
  and an attenuation volume. The volume runs from 0 (loudest) to 16, and each
  step shifts the samples right by one bit.
  - `set_volume` clamps values above 16 and rejects negative values.
  - `increase_volume` and `decrease_volume` move the volume one step at a time.
  - `prepare_dma_buffer(samples)` returns the first `2 * dma_trans_count`
    samples, shifted by the volume, as unsigned 16-bit words. It raises
    `ValueError` when too few samples are given.
- `pocketgb.results`: FAT file-system result codes.
  - `FResult` is the enum of result codes.
  - `describe(result)` returns a description and `to_errno(result)` the
    matching `errno` value. Unknown codes give "Unknown" and -1.
  - `mode_from_posix(mode)` turns `fopen`-style mode strings into `OpenMode`
    flags. Unrecognised strings give no flags.
  - `raise_for_result(result)` raises `FatFsError`, an `OSError`, for any code
    other than `FResult.OK`.
- `pocketgb.fattime`: clock helpers.
  - `fat_timestamp(moment)` packs a `datetime` into the 32-bit FAT date/time
    word. It returns 0 for `None`.
  - `RtcSnapshot` is a saved clock reading. `seal()` signs it with `SIGNATURE`
    and an XOR checksum, and `is_valid()` checks both.
  - `calculate_checksum(words)` XORs every word except the last.
  - `wrap_ix(index, n)` wraps an index into range, negative indices included.

## Example

```python
from pocketgb.apu import Apu
from pocketgb.assign import auto_assign_palette
from pocketgb.i2s import I2SConfig

palette = auto_assign_palette(0x14, "POKEMON RED")
print(palette.bg)

apu = Apu()
apu.write(0xFF12, 0xF0)
apu.write(0xFF14, 0x87)
samples = apu.render()

output = I2SConfig(dma_trans_count=len(samples) // 2)
output.set_volume(2)
words = output.prepare_dma_buffer(samples)
```

## What it does not do

There is no CPU, graphics or cartridge emulation here, and no command to run a
game. Nothing is drawn on a screen. `render()` produces samples, and
`prepare_dma_buffer` produces words ready for output, but no module sends
either to an audio device. `pocketgb.results` and `pocketgb.fattime` only
handle result codes, open flags and timestamps; the package does not read or
write a FAT volume or an SD card.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```