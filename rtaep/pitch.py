"""Naive pitch shifter based on index-resampling time stretch."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .base import AudioEffect

MAX_SEMITONES = 12.0


def time_stretch(samples: ArrayLike, stretch: float) -> np.ndarray:
    """Stretch a mono signal to ``int(len * stretch)`` samples by nearest-lower indexing."""
    factor = np.float32(stretch)
    if not factor > 0:
        raise ValueError(f"stretch must be positive, got {stretch}")
    source = np.asarray(samples, dtype=np.float32)
    if source.ndim != 1:
        raise ValueError("samples must be a one-dimensional signal")
    out_len = int(np.float32(source.size) * factor)
    indices = (np.arange(out_len, dtype=np.float32) / factor).astype(np.int64)
    out = np.zeros(out_len, dtype=np.float32)
    valid = indices < source.size
    out[valid] = source[indices[valid]]
    return out


class PitchShifterEffect(AudioEffect):
    """Shifts channel 0 by ``semitones`` (clamped to ±12); other channels pass through."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self.window_size = 1024
        self.hop_size = 256
        self._semitones = 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sample_rate={self.sample_rate!r}, "
            f"semitones={self._semitones!r})"
        )

    @property
    def semitones(self) -> float:
        return self._semitones

    @semitones.setter
    def semitones(self, value: float) -> None:
        self._semitones = min(max(float(value), -MAX_SEMITONES), MAX_SEMITONES)

    def process(self, samples: ArrayLike, channels: int) -> np.ndarray:
        """Return ``samples`` with channel 0 pitch-shifted."""
        buffer = self._interleaved(samples, channels)
        output = buffer.copy()
        left = buffer[::channels]
        factor = np.float32(2.0) ** (np.float32(self._semitones) / np.float32(12.0))

        stretched_len = int(np.float32(left.size) / factor)
        stretched = np.zeros(stretched_len, dtype=np.float32)
        produced = time_stretch(left, np.float32(1.0) / factor)[:stretched_len]
        stretched[: produced.size] = produced

        indices = (np.arange(left.size, dtype=np.float32) / factor).astype(np.int64)
        shifted = np.zeros(left.size, dtype=np.float32)
        valid = indices < stretched_len
        shifted[valid] = stretched[indices[valid]]
        output[::channels] = shifted
        return output