import threading

import numpy as np
import pytest

from rtaep.visualizer import Visualizer


def test_buffer_size_from_rate_and_duration():
    viz = Visualizer(1000, 10)
    assert viz.buffer_size == 10
    assert len(viz) == 10


def test_default_duration():
    viz = Visualizer(44100)
    assert viz.buffer_size == 44100 * 500 // 1000


def test_starts_silent():
    viz = Visualizer(1000, 10)
    wave = viz.waveform()
    assert wave.shape == (10,)
    assert not np.any(wave)


def test_push_appends_newest_at_end():
    viz = Visualizer(1000, 10)
    viz.push_audio([0.25, 0.5, 0.75])
    wave = viz.waveform()
    np.testing.assert_array_equal(wave[-3:], [0.25, 0.5, 0.75])
    assert not np.any(wave[:-3])


def test_overflow_keeps_latest_in_order():
    viz = Visualizer(1000, 10)
    data = np.arange(25, dtype=np.float32)
    viz.push_audio(data[:7])
    viz.push_audio(data[7:])
    np.testing.assert_array_equal(viz.waveform(), data[-10:])


def test_waveform_is_a_snapshot():
    viz = Visualizer(1000, 10)
    snapshot = viz.waveform()
    viz.push_audio(np.ones(10))
    assert not np.any(snapshot)
    assert np.all(viz.waveform() == 1.0)


def test_concurrent_pushes_keep_size():
    viz = Visualizer(1000, 100)
    threads = [
        threading.Thread(target=viz.push_audio, args=(np.full(500, i, dtype=np.float32),))
        for i in range(1, 5)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    wave = viz.waveform()
    assert wave.shape == (100,)
    assert set(wave.tolist()) <= {1.0, 2.0, 3.0, 4.0}


@pytest.mark.parametrize("rate,ms", [(1000, 0), (10, 10), (0, 500)])
def test_empty_buffer_rejected(rate, ms):
    with pytest.raises(ValueError):
        Visualizer(rate, ms)