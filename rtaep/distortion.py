"""Distortion effect using hard clipping."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .base import AudioEffect


class DistortionEffect(AudioEffect):
    """Amplifies by ``drive`` and hard-clips the result to the range [-1, 1]."""

    def __init__(self, drive: float = 1.0) -> None:
        self.drive = float(drive)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(drive={self.drive!r})"

    def process(self, samples: ArrayLike, channels: int) -> np.ndarray:
        """Return ``samples`` driven and clipped."""
        buffer = self._interleaved(samples, channels)
        driven = buffer * np.float32(self.drive)
        return np.clip(driven, -1.0, 1.0).astype(np.float32, copy=False)

    def process_mono(self, samples: ArrayLike) -> np.ndarray:
        """Return a mono buffer driven and clipped."""
        return self.process(samples, 1)