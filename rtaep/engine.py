"""Audio engine: runs stereo buffers through an effect chain and feeds a visualizer."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .chain import EffectChain
from .distortion import DistortionEffect
from .echo import EchoEffect
from .gain import GainEffect
from .pitch import PitchShifterEffect
from .reverb import ReverbEffect
from .visualizer import Visualizer

SAMPLE_RATE = 44100
CHANNELS = 2
FRAMES_PER_BUFFER = 256


class AudioEngine:
    """Processes interleaved stereo buffers as an audio callback would."""

    def __init__(self, visualizer: Visualizer | None = None) -> None:
        self.effect_chain = EffectChain()
        self.visualizer = visualizer

    def setup_default_effects(self) -> None:
        """Replace the chain with gain, echo, distortion, reverb and pitch shift."""
        self.effect_chain.clear_effects()
        self.effect_chain.add_effect(GainEffect(1.0))
        self.effect_chain.add_effect(EchoEffect(500, 0.4))
        self.effect_chain.add_effect(DistortionEffect(1.5))
        self.effect_chain.add_effect(ReverbEffect(float(SAMPLE_RATE)))
        self.effect_chain.add_effect(PitchShifterEffect(float(SAMPLE_RATE)))

    def process(self, samples: ArrayLike | None, frame_count: int) -> np.ndarray:
        """Return the output for ``frame_count`` stereo frames.

        Missing input yields silence; otherwise the effect chain output is
        returned and also pushed to the visualizer, if there is one.
        """
        if frame_count < 0:
            raise ValueError(f"frame count must not be negative, got {frame_count}")
        total = frame_count * CHANNELS
        if samples is None:
            return np.zeros(total, dtype=np.float32)
        buffer = np.asarray(samples, dtype=np.float32)
        if buffer.shape != (total,):
            raise ValueError(
                f"expected {total} interleaved samples for {frame_count} frames, "
                f"got shape {buffer.shape}"
            )
        output = self.effect_chain.process(buffer, CHANNELS)
        if self.visualizer is not None:
            self.visualizer.push_audio(output)
        return output