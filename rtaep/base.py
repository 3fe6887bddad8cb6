"""Common interface for effects that work on interleaved sample buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike


class AudioEffect(ABC):
    """An effect that turns an interleaved buffer into a new buffer of the same length."""

    @abstractmethod
    def process(self, samples: ArrayLike, channels: int) -> np.ndarray:
        """Return a processed copy of ``samples``, which holds ``channels`` interleaved channels."""

    @staticmethod
    def _interleaved(samples: ArrayLike, channels: int) -> np.ndarray:
        """Check an interleaved buffer and return it as a float32 array."""
        if channels < 1:
            raise ValueError(f"channel count must be positive, got {channels}")
        buffer = np.asarray(samples, dtype=np.float32)
        if buffer.ndim != 1:
            raise ValueError("samples must be a one-dimensional interleaved buffer")
        if buffer.size % channels:
            raise ValueError(
                f"buffer of {buffer.size} samples does not hold whole frames of {channels} channels"
            )
        return buffer