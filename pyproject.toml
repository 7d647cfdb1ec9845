[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketgb"
version = "0.1.0"
description = "Game Boy colour palettes, audio processing unit emulation and FAT storage helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["game boy", "emulator", "apu", "palette", "fat", "i2s", "rgb565"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketgb"]

[tool.pytest.ini_options]
addopts = "-ra"
