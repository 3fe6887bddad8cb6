import numpy as np
import pytest

from rtaep.base import AudioEffect
from rtaep.gain import GainEffect


def test_abstract_base_cannot_be_instantiated():
    assert "process" in AudioEffect.__abstractmethods__
    with pytest.raises(TypeError):
        AudioEffect()


def test_concrete_effect_processes_buffer():
    result = GainEffect(-1.0).process([0.25, -0.5, 1.0, 0.0], 2)
    assert result.dtype == np.float32
    assert np.array_equal(result, np.array([-0.25, 0.5, -1.0, 0.0], dtype=np.float32))


def test_accepts_lists_and_arrays_alike():
    values = [0.1, 0.2, 0.3]
    from_list = GainEffect(-1.0).process(values, 1)
    from_array = GainEffect(-1.0).process(np.array(values), 1)
    assert np.array_equal(from_list, from_array)


@pytest.mark.parametrize("channels", [0, -2])
def test_rejects_non_positive_channel_count(channels):
    with pytest.raises(ValueError):
        GainEffect(-1.0).process([0.0, 0.0], channels)


def test_rejects_partial_frames():
    with pytest.raises(ValueError):
        GainEffect(-1.0).process([0.0, 0.0, 0.0], 2)


def test_rejects_multidimensional_input():
    with pytest.raises(ValueError):
        GainEffect(-1.0).process([[0.0, 0.0], [0.0, 0.0]], 2)