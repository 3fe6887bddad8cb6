"""Ordered chain of effects applied one after another."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

import numpy as np
from numpy.typing import ArrayLike

from .base import AudioEffect

_E = TypeVar("_E", bound=AudioEffect)


class EffectChain:
    """Runs a buffer through each effect in turn; empty chains pass audio through."""

    def __init__(self, effects: Iterable[AudioEffect] = ()) -> None:
        self._effects: list[AudioEffect] = list(effects)

    def __len__(self) -> int:
        return len(self._effects)

    def __iter__(self) -> Iterator[AudioEffect]:
        return iter(self._effects)

    def add_effect(self, effect: AudioEffect) -> None:
        """Append an effect to the end of the chain."""
        self._effects.append(effect)

    def clear_effects(self) -> None:
        """Remove every effect from the chain."""
        self._effects.clear()

    def effect_by_type(self, effect_type: type[_E]) -> _E | None:
        """Return the first effect that is an instance of ``effect_type``, or None."""
        return next((e for e in self._effects if isinstance(e, effect_type)), None)

    def process(self, samples: ArrayLike, channels: int) -> np.ndarray:
        """Return ``samples`` after every effect in the chain has processed it."""
        buffer = AudioEffect._interleaved(samples, channels)
        if not self._effects:
            return buffer.copy()
        for effect in self._effects:
            buffer = effect.process(buffer, channels)
        return buffer