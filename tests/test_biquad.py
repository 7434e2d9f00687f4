import pytest

from audionodes.biquad import Biquad, Envelope, FilterType


def _impulse_response(filt, length=32):
    return [filt.process(1.0 if i == 0 else 0.0) for i in range(length)]


def test_lowpass_has_unity_dc_gain():
    filt = Biquad.design(FilterType.LPF, 0.0, 1000.0, 48000.0, 1.0)
    dc = (filt.a0 + filt.a1 + filt.a2) / (1.0 + filt.a3 + filt.a4)
    assert dc == pytest.approx(1.0, abs=1e-4)


def test_highpass_blocks_dc():
    filt = Biquad.design(FilterType.HPF, 0.0, 1000.0, 48000.0, 1.0)
    assert filt.a0 + filt.a1 + filt.a2 == pytest.approx(0.0, abs=1e-6)


def test_bandpass_is_antisymmetric():
    filt = Biquad.design(FilterType.BPF, 0.0, 500.0, 44100.0, 0.5)
    assert filt.a1 == 0.0
    assert filt.a2 == -filt.a0


def test_notch_is_symmetric():
    filt = Biquad.design(FilterType.NOTCH, 0.0, 500.0, 44100.0, 0.5)
    assert filt.a0 == filt.a2
    assert filt.a1 == filt.a3


@pytest.mark.parametrize("kind", [FilterType.PEQ, FilterType.LSH, FilterType.HSH])
def test_zero_gain_eq_filters_pass_signal_through(kind):
    filt = Biquad.design(kind, 0.0, 2000.0, 48000.0, 1.0)
    signal = [0.5, -0.25, 0.125, 0.75, -1.0, 0.0, 0.3]
    out = [filt.process(s) for s in signal]
    assert out == pytest.approx(signal, abs=1e-5)


def test_first_impulse_sample_equals_a0():
    filt = Biquad.design(FilterType.LPF, 0.0, 800.0, 16000.0, 1.0)
    response = _impulse_response(filt)
    assert response[0] == filt.a0


def test_reset_makes_response_repeatable():
    filt = Biquad.design(FilterType.BPF, 0.0, 300.0, 8000.0, 1.0)
    first = _impulse_response(filt)
    filt.reset()
    assert (filt.x1, filt.x2, filt.y1, filt.y2) == (0.0, 0.0, 0.0, 0.0)
    assert _impulse_response(filt) == first


def test_copy_coefficients_keeps_history():
    source = Biquad.design(FilterType.HPF, 0.0, 100.0, 8000.0, 1.0)
    target = Biquad()
    target.process(0.5)
    target.copy_coefficients(source)
    assert target.coefficients == source.coefficients
    assert target.x1 == 0.5


def test_copied_filter_matches_original():
    source = Biquad.design(FilterType.LPF, 0.0, 1200.0, 22050.0, 2.0)
    clone = Biquad()
    clone.copy_coefficients(source)
    assert _impulse_response(clone) == _impulse_response(source)


def test_invalid_filter_type_rejected():
    with pytest.raises(ValueError):
        Biquad.design("lowpass-ish", 0.0, 1000.0, 48000.0, 1.0)


def test_zero_frequency_rejected():
    with pytest.raises(ValueError):
        Biquad.design(FilterType.BPF, 0.0, 0.0, 48000.0, 1.0)


def test_silence_stays_silent():
    filt = Biquad.design(FilterType.BPF, 0.0, 1000.0, 48000.0, 1.0)
    assert all(filt.process(0.0) == 0.0 for _ in range(20))


def test_envelope_coefficient_from_configure():
    env = Envelope()
    env.configure(1.0, 1.0)
    assert env.coef == pytest.approx(0.01, rel=1e-6)


def test_envelope_configure_rejects_zero_time():
    with pytest.raises(ValueError):
        Envelope().configure(0.0, 48000.0)


def test_envelope_rises_towards_constant_level():
    env = Envelope()
    env.configure(0.03, 8000.0)
    values = [env.tick(1.0) for _ in range(2000)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert 0.0 < values[-1] <= 1.0
    assert values[-1] == pytest.approx(1.0, abs=1e-3)


def test_envelope_follows_magnitude():
    positive = Envelope()
    negative = Envelope()
    positive.configure(0.01, 8000.0)
    negative.configure(0.01, 8000.0)
    a = [positive.tick(0.5) for _ in range(50)]
    b = [negative.tick(-0.5) for _ in range(50)]
    assert a == b


def test_envelope_reset_clears_history():
    env = Envelope()
    env.configure(0.01, 8000.0)
    first = [env.tick(0.8) for _ in range(10)]
    env.reset()
    assert env.history == [0.0, 0.0, 0.0, 0.0]
    assert [env.tick(0.8) for _ in range(10)] == first