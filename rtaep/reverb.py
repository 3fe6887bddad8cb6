"""Reverb built from parallel comb filters followed by series all-pass filters."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .base import AudioEffect

# Delay lengths in samples, tuned for 44.1 kHz.
COMB_DELAYS = (1116, 1188, 1277, 1356)
ALLPASS_DELAYS = (556, 441)
_ALLPASS_GAIN = 0.5


def _unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


class _DelayLine:
    """Circular delay line whose stored value is the input plus scaled feedback."""

    __slots__ = ("_buffer", "_position")

    def __init__(self, length: int) -> None:
        self._buffer = [0.0] * length
        self._position = 0

    def clear(self) -> None:
        self._buffer = [0.0] * len(self._buffer)
        self._position = 0

    def step(self, value: float, gain: float) -> float:
        """Return the delayed sample and store ``value + delayed * gain`` in its place."""
        delayed = self._buffer[self._position]
        self._buffer[self._position] = value + delayed * gain
        self._position = (self._position + 1) % len(self._buffer)
        return delayed


class ReverbEffect(AudioEffect):
    """Reverb on channel 0; the other channels pass through unchanged.

    ``room_size``, ``damping``, ``wet`` and ``dry`` are clamped to [0, 1].
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._room_size = 0.5
        self._damping = 0.5
        self._wet = 0.3
        self._dry = 0.7
        self._combs = [_DelayLine(length) for length in COMB_DELAYS]
        self._allpasses = [_DelayLine(length) for length in ALLPASS_DELAYS]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sample_rate={self.sample_rate!r}, "
            f"room_size={self._room_size!r}, damping={self._damping!r}, "
            f"wet={self._wet!r}, dry={self._dry!r})"
        )

    @property
    def room_size(self) -> float:
        return self._room_size

    @room_size.setter
    def room_size(self, value: float) -> None:
        self._room_size = _unit(value)

    @property
    def damping(self) -> float:
        return self._damping

    @damping.setter
    def damping(self, value: float) -> None:
        self._damping = _unit(value)

    @property
    def wet(self) -> float:
        return self._wet

    @wet.setter
    def wet(self, value: float) -> None:
        self._wet = _unit(value)

    @property
    def dry(self) -> float:
        return self._dry

    @dry.setter
    def dry(self, value: float) -> None:
        self._dry = _unit(value)

    def reset(self) -> None:
        """Silence every filter, discarding any reverberation tail."""
        for line in (*self._combs, *self._allpasses):
            line.clear()

    def process(self, samples: ArrayLike, channels: int) -> np.ndarray:
        """Return ``samples`` with reverb applied to channel 0."""
        buffer = self._interleaved(samples, channels)
        output = buffer.copy()
        output[::channels] = self._run(buffer[::channels].tolist())
        return output

    def _run(self, dry_signal: list[float]) -> list[float]:
        decay = self._room_size * (1.0 - self._damping)
        wet, dry = self._wet, self._dry
        result = []
        for sample in dry_signal:
            mixed = sum(comb.step(sample, decay) for comb in self._combs)
            for allpass in self._allpasses:
                delayed = allpass.step(mixed, _ALLPASS_GAIN)
                mixed = -mixed + delayed
            result.append(dry * sample + wet * mixed)
        return result