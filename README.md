# audionodes

Small, dependency-free audio processing building blocks written in plain Python.
Samples are floats. Multi-channel audio is passed as flat interleaved sequences.
Arithmetic inside the filters is rounded to single precision at each step.

## What is included

- `audionodes.reverb.Reverb(sample_rate, channels)` is a Freeverb-style reverb for mono or stereo input.
  - It accepts sample rates from 22050 Hz to 176400 Hz.
  - Settable properties:
    - `room_size`, `damping`, `width`, `wet` and `dry`, each between 0.0 and 1.0.
    - `input_width`: at 0.0 a stereo input is summed to mono before the reverb. Above 0.0 the input is narrowed or widened.
    - `mode`: at 0.5 or above the reverb is frozen.
  - `process(samples)` returns the processed interleaved samples.
  - `mute()` clears the delay lines. It does nothing while the reverb is frozen.
  - `decay_time_in_frames()` estimates the decay for the current room size. It returns 0 when the reverb is frozen.
- `audionodes.reverb_filters` holds the parts the reverb is built from:
  - `CombFilter` and `AllpassFilter`.
  - `scaled_buffer_size(sample_rate, value)`, which scales a delay length tuned for 44.1 kHz to another sample rate.
- `audionodes.biquad` holds three things:
  - `Biquad`, a biquad filter. `Biquad.design(filter_type, db_gain, freq, sample_rate, bandwidth)` builds one for any kind listed in `FilterType`: lowpass, highpass, bandpass, notch, peaking, low shelf and high shelf. The bandwidth is given in octaves.
  - `Envelope`, a four-stage envelope follower.
  - `FilterType`, the list of filter kinds.
- `audionodes.channels` splits interleaved audio into mono buses and joins them back:
  - `deinterleave(samples, channels)` and `interleave(buses)` do the conversion directly.
  - `ChannelSeparatorNode` and `ChannelCombinerNode` wrap the same operations, for 1 to 254 channels.
- `audionodes.ltrim.LTrimNode(channels, threshold)` drops leading frames whose samples all lie within `[-threshold, threshold]`.
  - Once a louder frame is found, everything after it passes through.
  - `process(samples, max_frames=None)` returns a `TrimResult` with `frames_consumed`, `samples` and `frames_produced`.

## Installation

```
pip install .
```

## Examples

Add reverb to a mono impulse:

```python
from audionodes.reverb import Reverb

reverb = Reverb(sample_rate=48000, channels=1)
reverb.room_size = 0.8
wet = reverb.process([1.0] + [0.0] * 4799)
print(reverb.decay_time_in_frames())
```

Band-pass filter a signal:

```python
from audionodes.biquad import Biquad, FilterType

band = Biquad.design(FilterType.BPF, 0.0, 1000.0, 48000.0, 1.0)
filtered = [band.process(x) for x in [1.0, 0.0, 0.0, 0.0]]
```

Split stereo audio into mono buses and join it back:

```python
from audionodes.channels import ChannelSeparatorNode, ChannelCombinerNode

separator = ChannelSeparatorNode(channels=2)
combiner = ChannelCombinerNode(channels=2)

buses = separator.process([0.1, -0.1, 0.2, -0.2])   # [[0.1, 0.2], [-0.1, -0.2]]
stereo = combiner.process(buses)                     # [0.1, -0.1, 0.2, -0.2]
```

Trim leading silence:

```python
from audionodes.ltrim import LTrimNode

trim = LTrimNode(channels=1, threshold=0.01)
result = trim.process([0.0, 0.0, 0.5, 0.3], max_frames=4)
# result.frames_consumed == 4, result.samples == [0.5, 0.3]
```

Invalid settings raise `ValueError`. Examples:

- an unsupported channel count
- a sample rate out of range
- a sample count that is not a multiple of the channel count

## What this package does not do

- It does not play, record, decode or encode audio.
- It has no node graph that connects nodes together. Each node is driven by calling its `process` method with a block of samples.
- It has no command-line tool.
- It has no vocoder. The `Biquad` and `Envelope` parts are provided on their own.

## Running the tests

```
pip install .[test]
pytest
```