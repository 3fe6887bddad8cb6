"""Block-based audio effects, effect chains, a waveform buffer and a stereo processing engine."""

__version__ = "0.1.0"