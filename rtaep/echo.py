"""Echo effect with feedback, applied to the first channel only."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .base import AudioEffect


class EchoEffect(AudioEffect):
    """Feedback delay line on channel 0; other channels pass through unchanged.

    The delay line keeps its contents between calls, so consecutive buffers
    form one continuous signal.
    """

    def __init__(self, delay_samples: int, feedback: float) -> None:
        self.feedback = float(feedback)
        self.delay_samples = delay_samples

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(delay_samples={self._delay!r}, "
            f"feedback={self.feedback!r})"
        )

    @property
    def delay_samples(self) -> int:
        """Length of the delay line in samples, at least 1."""
        return self._delay

    @delay_samples.setter
    def delay_samples(self, value: int) -> None:
        self._delay = max(1, int(value))
        self._line = [0.0] * self._delay
        self._position = 0

    def process(self, samples: ArrayLike, channels: int) -> np.ndarray:
        """Return ``samples`` with the echo mixed into channel 0."""
        buffer = self._interleaved(samples, channels)
        output = buffer.copy()
        output[::channels] = self._run(buffer[::channels].tolist())
        return output

    def process_mono(self, samples: ArrayLike) -> np.ndarray:
        """Return a mono buffer with the echo mixed in."""
        return self.process(samples, 1)

    def _run(self, dry: list[float]) -> list[float]:
        line = self._line
        position = self._position
        feedback = self.feedback
        wet = []
        for sample in dry:
            delayed = line[position]
            wet.append(sample + delayed)
            line[position] = sample + delayed * feedback
            position = (position + 1) % len(line)
        self._position = position
        return wet