"""Game Boy colour palettes, audio processing unit emulation, I2S output settings and FAT storage helpers."""

__version__ = "0.1.0"