# rtaep

Audio effects that work on blocks of interleaved 32-bit float samples. The
package also has a chain that runs effects one after another, a rolling
waveform buffer for display, and an engine that processes stereo blocks the
way an audio callback would.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Effects

Each effect is an `AudioEffect` (`rtaep.base`). Its `process(samples, channels)`
method takes an interleaved block and a channel count and returns a new
`numpy.float32` array of the same length. The input is left unchanged. A
`ValueError` is raised if `channels` is less than 1, if the block is not
one-dimensional, or if its length is not a whole number of frames.

| Class (module)                         | Settings                                        | What it does                                                        |
|----------------------------------------|-------------------------------------------------|---------------------------------------------------------------------|
| `GainEffect` (`rtaep.gain`)            | `gain`                                          | multiplies every sample by `gain`                                   |
| `DistortionEffect` (`rtaep.distortion`)| `drive`                                         | multiplies by `drive` and hard-clips to [-1, 1]                     |
| `EchoEffect` (`rtaep.echo`)            | `delay_samples` (at least 1), `feedback`        | feedback delay on channel 0; the other channels pass through        |
| `ReverbEffect` (`rtaep.reverb`)        | `room_size`, `damping`, `wet`, `dry` (each clamped to [0, 1]) | four parallel combs and two series all-pass stages on channel 0; the other channels pass through |
| `PitchShifterEffect` (`rtaep.pitch`)   | `semitones` (clamped to ±12)                    | shifts channel 0; the other channels pass through                   |

`GainEffect`, `DistortionEffect` and `EchoEffect` also have
`process_mono(samples)`, which is the same as `process(samples, 1)`.

The echo and the reverb keep their filter state between calls, so
consecutive blocks are treated as one continuous signal. Setting
`delay_samples` empties the echo's delay line. `ReverbEffect.reset()` clears
every comb and all-pass filter and drops any reverb tail.

```python
import numpy as np
from rtaep.chain import EffectChain
from rtaep.distortion import DistortionEffect
from rtaep.echo import EchoEffect
from rtaep.gain import GainEffect

chain = EffectChain([GainEffect(1.0), EchoEffect(500, 0.4)])
chain.add_effect(DistortionEffect(1.5))

block = np.zeros(256 * 2, dtype=np.float32)   # 256 stereo frames
out = chain.process(block, 2)

echo = chain.effect_by_type(EchoEffect)        # first effect of that type, or None
echo.feedback = 0.6
```

`EffectChain` supports `len()` and iteration over its effects. An empty chain
returns a copy of its input. `clear_effects()` removes every effect.

## Pitch shifting

```python
from rtaep.pitch import PitchShifterEffect, time_stretch

pitch = PitchShifterEffect(44100.0)
pitch.semitones = 5
stretched = time_stretch([0.0, 0.5, 1.0], 2.0)   # six samples, nearest-lower index
```

`time_stretch(samples, stretch)` resamples a mono signal to
`int(len * stretch)` samples by taking the sample at the nearest lower index.
It raises `ValueError` if `stretch` is not positive or if the signal is not
one-dimensional. The pitch shifter is built on it. It is a simple resampler,
not a phase vocoder.

## Waveform buffer

```python
from rtaep.visualizer import Visualizer

viz = Visualizer(44100, 500)     # holds the last 500 ms: 22050 samples
viz.push_audio(out)
samples = viz.waveform()          # float32 snapshot, oldest sample first
```

The buffer starts as silence, and once it is full the oldest samples are
dropped. `buffer_size` and `len()` give its capacity. Access is guarded by a
lock, so one thread can push while another reads. A rate and duration that
give no samples raise `ValueError`.

## Engine

```python
from rtaep.engine import AudioEngine
from rtaep.visualizer import Visualizer

engine = AudioEngine(visualizer=Visualizer(44100))
engine.setup_default_effects()
out = engine.process(block, 256)
```

`AudioEngine` holds an `effect_chain`, which starts empty.
`setup_default_effects()` fills it with gain (1.0), echo (500 samples, 0.4
feedback), distortion (drive 1.5), reverb and pitch shifter, in that order,
all at 44100 Hz. `process(samples, frame_count)` takes `frame_count`
interleaved stereo frames and returns the chain's output. If a visualizer was
given, the output is also pushed to it. Passing `None` as the samples returns
silence of the right length. A block whose shape does not match, or a
negative frame count, raises `ValueError`.

## What this package does not do

There is no sound-card input or output: the package never opens an audio
device or stream. You feed `AudioEngine.process` with blocks from your own
audio I/O. The package also has no graphical control panel and no waveform
plot. Effect settings are plain attributes to change from your own code, and
`Visualizer.waveform()` only returns the data to draw. There is no
command-line program.