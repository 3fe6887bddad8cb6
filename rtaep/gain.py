"""Gain effect: scales every sample by a constant factor."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .base import AudioEffect


class GainEffect(AudioEffect):
    """Multiplies each sample by ``gain``."""

    def __init__(self, gain: float = 1.0) -> None:
        self.gain = float(gain)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(gain={self.gain!r})"

    def process(self, samples: ArrayLike, channels: int) -> np.ndarray:
        """Return ``samples`` scaled by the current gain."""
        buffer = self._interleaved(samples, channels)
        return buffer * np.float32(self.gain)

    def process_mono(self, samples: ArrayLike) -> np.ndarray:
        """Return a mono buffer scaled by the current gain."""
        return self.process(samples, 1)