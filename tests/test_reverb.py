import pytest

from audionodes.reverb import Reverb


@pytest.mark.parametrize(
    "sample_rate, channels",
    [(44100, 0), (44100, 3), (22049, 1), (176401, 2), (8000, 2)],
)
def test_invalid_arguments_raise(sample_rate, channels):
    with pytest.raises(ValueError):
        Reverb(sample_rate, channels)


@pytest.mark.parametrize("sample_rate", [22050, 44100, 176400])
def test_limits_accepted(sample_rate):
    reverb = Reverb(sample_rate, 2)
    assert reverb.sample_rate == sample_rate


def test_default_parameters():
    reverb = Reverb(48000, 2)
    assert reverb.room_size == pytest.approx(0.5, abs=1e-6)
    assert reverb.damping == pytest.approx(0.25, abs=1e-6)
    assert reverb.wet == pytest.approx(1.0 / 3.0, abs=1e-6)
    assert reverb.dry == 0.0
    assert reverb.width == 1.0
    assert reverb.input_width == 0.0
    assert reverb.mode == 0.0


def test_parameter_round_trip():
    reverb = Reverb(44100, 1)
    reverb.room_size = 0.9
    reverb.damping = 0.6
    reverb.wet = 0.4
    reverb.dry = 0.7
    reverb.width = 0.3
    reverb.input_width = 1.5
    assert reverb.room_size == pytest.approx(0.9, abs=1e-5)
    assert reverb.damping == pytest.approx(0.6, abs=1e-5)
    assert reverb.wet == pytest.approx(0.4, abs=1e-5)
    assert reverb.dry == pytest.approx(0.7, abs=1e-5)
    assert reverb.width == pytest.approx(0.3, abs=1e-6)
    assert reverb.input_width == pytest.approx(1.5, abs=1e-6)


def test_mode_reports_freeze():
    reverb = Reverb(44100, 1)
    reverb.mode = 0.7
    assert reverb.mode == 1.0
    reverb.mode = 0.2
    assert reverb.mode == 0.0


def test_silence_gives_silence():
    reverb = Reverb(44100, 2)
    out = reverb.process([0.0] * 400)
    assert out == [0.0] * 400


def test_impulse_is_delayed_by_shortest_comb():
    reverb = Reverb(44100, 1)
    out = reverb.process([1.0] + [0.0] * 1200)
    assert len(out) == 1201
    assert all(value == 0.0 for value in out[:1116])
    assert abs(out[1116]) > 0.0


def test_dry_only_passes_input_through():
    reverb = Reverb(44100, 2)
    reverb.wet = 0.0
    reverb.dry = 0.5
    signal = [0.25, -0.5, 0.75, 0.125, -1.0, 0.5]
    assert reverb.process(signal) == signal


def test_stereo_channels_differ():
    reverb = Reverb(44100, 2)
    signal = [1.0, 1.0] + [0.0, 0.0] * 2000
    out = reverb.process(signal)
    left = out[0::2]
    right = out[1::2]
    assert any(abs(value) > 0.0 for value in left)
    assert left != right


def test_input_width_path_produces_output():
    reverb = Reverb(44100, 2)
    reverb.input_width = 1.0
    out = reverb.process([1.0, -1.0] + [0.0, 0.0] * 2000)
    assert any(abs(value) > 0.0 for value in out)


def test_odd_sample_count_for_stereo_raises():
    reverb = Reverb(44100, 2)
    with pytest.raises(ValueError):
        reverb.process([0.0, 0.0, 0.0])


def test_chunked_processing_matches_single_call():
    signal = [((i * 37) % 11 - 5) / 10.0 for i in range(3000)]
    whole = Reverb(44100, 2).process(signal)
    chunked_reverb = Reverb(44100, 2)
    chunked = chunked_reverb.process(signal[:1234]) + chunked_reverb.process(
        signal[1234:]
    )
    assert chunked == whole


def test_mute_clears_tail():
    reverb = Reverb(44100, 1)
    reverb.process([1.0] + [0.0] * 500)
    reverb.mute()
    assert reverb.process([0.0] * 2000) == [0.0] * 2000


def test_mute_is_ignored_when_frozen():
    reverb = Reverb(44100, 1)
    reverb.process([1.0] + [0.0] * 500)
    reverb.mode = 1.0
    reverb.mute()
    out = reverb.process([0.0] * 2000)
    assert any(abs(value) > 0.0 for value in out)


def test_decay_is_zero_when_frozen():
    reverb = Reverb(44100, 2)
    reverb.mode = 1.0
    assert reverb.decay_time_in_frames() == 0


def test_decay_grows_with_room_size():
    reverb = Reverb(44100, 2)
    reverb.room_size = 0.2
    small = reverb.decay_time_in_frames()
    reverb.room_size = 0.9
    large = reverb.decay_time_in_frames()
    assert 0 < small < large


def test_decay_scales_with_sample_rate():
    base = Reverb(44100, 1).decay_time_in_frames()
    doubled = Reverb(88200, 1).decay_time_in_frames()
    assert abs(doubled - 2 * base) <= 1