[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtaep"
version = "0.1.0"
description = "Block-based audio effects (gain, echo, distortion, reverb, pitch shift), effect chains and a rolling waveform buffer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "dsp", "effects", "reverb", "echo", "distortion", "pitch-shift"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rtaep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
