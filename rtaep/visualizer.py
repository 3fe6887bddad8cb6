"""Thread-safe rolling buffer of recent audio for waveform display."""

from __future__ import annotations

import threading
from collections import deque

import numpy as np
from numpy.typing import ArrayLike


class Visualizer:
    """Keeps the last ``buffer_ms`` milliseconds of samples, oldest first."""

    def __init__(self, sample_rate: int, buffer_ms: int = 500) -> None:
        size = (sample_rate * buffer_ms) // 1000
        if size < 1:
            raise ValueError(
                f"a {buffer_ms} ms buffer at {sample_rate} Hz holds no samples"
            )
        self.sample_rate = sample_rate
        self._samples: deque[float] = deque([0.0] * size, maxlen=size)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.buffer_size

    @property
    def buffer_size(self) -> int:
        """Number of samples the buffer holds."""
        return self._samples.maxlen or 0

    def push_audio(self, samples: ArrayLike) -> None:
        """Append samples, dropping the oldest ones once the buffer is full."""
        values = np.asarray(samples, dtype=np.float32).ravel().tolist()
        with self._lock:
            self._samples.extend(values)

    def waveform(self) -> np.ndarray:
        """Return a snapshot of the buffer, oldest sample first."""
        with self._lock:
            return np.array(self._samples, dtype=np.float32)