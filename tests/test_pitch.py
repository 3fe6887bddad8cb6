import numpy as np
import pytest

from rtaep.pitch import PitchShifterEffect, time_stretch


def _ramp(n):
    return np.arange(n, dtype=np.float32) / n


def test_zero_semitones_is_identity():
    effect = PitchShifterEffect(44100.0)
    signal = _ramp(64)
    np.testing.assert_array_equal(effect.process(signal, 1), signal)


def test_octave_up_repeats_even_samples():
    effect = PitchShifterEffect(44100.0)
    effect.semitones = 12
    signal = _ramp(32)
    out = effect.process(signal, 1)
    np.testing.assert_array_equal(out[0::2], signal[0::2])
    np.testing.assert_array_equal(out[1::2], signal[0::2])


def test_octave_down_reproduces_input():
    effect = PitchShifterEffect(44100.0)
    effect.semitones = -12
    signal = _ramp(32)
    np.testing.assert_array_equal(effect.process(signal, 1), signal)


def test_right_channel_untouched():
    effect = PitchShifterEffect(44100.0)
    effect.semitones = 5
    rng = np.random.default_rng(7)
    stereo = rng.uniform(-1, 1, 2 * 100).astype(np.float32)
    out = effect.process(stereo, 2)
    assert out.shape == stereo.shape
    np.testing.assert_array_equal(out[1::2], stereo[1::2])


def test_semitones_clamped():
    effect = PitchShifterEffect(44100.0)
    effect.semitones = 20
    assert effect.semitones == 12.0
    effect.semitones = -30
    assert effect.semitones == -12.0
    effect.semitones = 3.5
    assert effect.semitones == 3.5


def test_shifted_output_values_come_from_input():
    effect = PitchShifterEffect(44100.0)
    effect.semitones = 7
    signal = _ramp(50)
    out = effect.process(signal, 1)
    assert set(out.tolist()) <= set(signal.tolist()) | {0.0}


def test_time_stretch_unity_is_identity():
    signal = _ramp(20)
    np.testing.assert_array_equal(time_stretch(signal, 1.0), signal)


@pytest.mark.parametrize("stretch", [0.5, 2.0, 3.0])
def test_time_stretch_length(stretch):
    signal = _ramp(20)
    assert time_stretch(signal, stretch).size == int(20 * stretch)


def test_time_stretch_doubles_each_sample():
    signal = _ramp(10)
    out = time_stretch(signal, 2.0)
    np.testing.assert_array_equal(out[0::2], signal)
    np.testing.assert_array_equal(out[1::2], signal)


@pytest.mark.parametrize("stretch", [0.0, -1.0])
def test_time_stretch_rejects_non_positive(stretch):
    with pytest.raises(ValueError):
        time_stretch(_ramp(4), stretch)