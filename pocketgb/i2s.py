"""Settings and sample preparation for the I2S audio output.

:class:`I2SConfig` holds the output setup and the attenuation level. The
volume runs from 0 (loudest) to 16 (silent): each step halves the samples
by shifting them right one bit before they are handed to the transfer
buffer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

MAX_ATTENUATION = 16


@dataclass
class I2SConfig:
    """Setup of the I2S output and its current volume."""

    sample_freq: int = 44100
    channel_count: int = 2
    data_pin: int = 26
    clock_pin_base: int = 27
    pio: int = 0
    sm: int = 0
    dma_channel: int = 0
    dma_trans_count: int = 0
    volume: int = 0

    def set_volume(self, volume: int) -> None:
        """Set the attenuation, 0 loudest to 16 quietest; larger values clamp to 16."""
        if volume < 0:
            raise ValueError(f"volume must not be negative: {volume}")
        self.volume = min(volume, MAX_ATTENUATION)

    def increase_volume(self) -> None:
        """Make the output one step louder, down to attenuation 0."""
        if self.volume > 0:
            self.volume -= 1

    def decrease_volume(self) -> None:
        """Make the output one step quieter, up to attenuation 16."""
        if self.volume < MAX_ATTENUATION:
            self.volume += 1

    def prepare_dma_buffer(self, samples: Sequence[int]) -> list[int]:
        """Return the 16-bit words sent in one transfer, volume applied.

        A transfer holds ``dma_trans_count`` stereo frames, so
        ``2 * dma_trans_count`` signed samples are taken from ``samples``.
        """
        count = self.dma_trans_count * 2
        if len(samples) < count:
            raise ValueError(
                f"need {count} samples for one transfer, got {len(samples)}"
            )
        shift = self.volume
        return [(sample >> shift) & 0xFFFF for sample in samples[:count]]