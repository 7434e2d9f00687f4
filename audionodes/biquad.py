"""Biquad filters and the envelope follower used by the vocoder."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from .reverb_filters import _f32

LN2 = 0.69314718055994530942
PI = 3.14159265358979323846


class FilterType(Enum):
    """The kinds of biquad filter that can be designed."""

    LPF = "lowpass"
    HPF = "highpass"
    BPF = "bandpass"
    NOTCH = "notch"
    PEQ = "peaking"
    LSH = "lowshelf"
    HSH = "highshelf"


@dataclass
class Biquad:
    """A direct-form biquad filter with normalised coefficients and history.

    ``a0``..``a2`` are the feed-forward coefficients and ``a3``/``a4`` the
    feedback ones, all already divided by the leading denominator term.
    """

    a0: float = 0.0
    a1: float = 0.0
    a2: float = 0.0
    a3: float = 0.0
    a4: float = 0.0
    x1: float = 0.0
    x2: float = 0.0
    y1: float = 0.0
    y2: float = 0.0

    @classmethod
    def design(
        cls,
        filter_type: FilterType,
        db_gain: float,
        freq: float,
        sample_rate: float,
        bandwidth: float,
    ) -> Biquad:
        """Build a filter from cookbook formulae.

        ``db_gain`` only matters for the peaking and shelf types;
        ``bandwidth`` is given in octaves.
        """
        if not isinstance(filter_type, FilterType):
            raise ValueError(f"unknown filter type: {filter_type!r}")
        if sample_rate <= 0:
            raise ValueError(f"sample rate must be positive, got {sample_rate}")

        gain_db = _f32(db_gain)
        amp = _f32(math.pow(10.0, _f32(gain_db / 40.0)))
        omega = _f32(2.0 * PI * _f32(freq) / _f32(sample_rate))
        sn = _f32(math.sin(omega))
        cs = _f32(math.cos(omega))
        if sn == 0.0:
            raise ValueError(
                f"frequency {freq} must lie strictly between 0 and the Nyquist frequency"
            )
        alpha = _f32(sn * _f32(math.sinh(LN2 / 2 * _f32(bandwidth) * omega / sn)))
        beta = _f32(math.sqrt(_f32(amp + amp)))

        one_minus_cs = _f32(1.0 - cs)
        one_plus_cs = _f32(1.0 + cs)
        minus_two_cs = _f32(-2.0 * cs)

        if filter_type is FilterType.LPF:
            b0 = _f32(one_minus_cs / 2)
            b1 = one_minus_cs
            b2 = b0
            a0 = _f32(1.0 + alpha)
            a1 = minus_two_cs
            a2 = _f32(1.0 - alpha)
        elif filter_type is FilterType.HPF:
            b0 = _f32(one_plus_cs / 2)
            b1 = -one_plus_cs
            b2 = b0
            a0 = _f32(1.0 + alpha)
            a1 = minus_two_cs
            a2 = _f32(1.0 - alpha)
        elif filter_type is FilterType.BPF:
            b0 = alpha
            b1 = 0.0
            b2 = -alpha
            a0 = _f32(1.0 + alpha)
            a1 = minus_two_cs
            a2 = _f32(1.0 - alpha)
        elif filter_type is FilterType.NOTCH:
            b0 = 1.0
            b1 = minus_two_cs
            b2 = 1.0
            a0 = _f32(1.0 + alpha)
            a1 = minus_two_cs
            a2 = _f32(1.0 - alpha)
        elif filter_type is FilterType.PEQ:
            b0 = _f32(1.0 + _f32(alpha * amp))
            b1 = minus_two_cs
            b2 = _f32(1.0 - _f32(alpha * amp))
            a0 = _f32(1.0 + _f32(alpha / amp))
            a1 = minus_two_cs
            a2 = _f32(1.0 - _f32(alpha / amp))
        else:
            ap1 = _f32(amp + 1.0)
            am1 = _f32(amp - 1.0)
            am1_cs = _f32(am1 * cs)
            ap1_cs = _f32(ap1 * cs)
            beta_sn = _f32(beta * sn)
            if filter_type is FilterType.LSH:
                b0 = _f32(amp * _f32(_f32(ap1 - am1_cs) + beta_sn))
                b1 = _f32(_f32(2.0 * amp) * _f32(am1 - ap1_cs))
                b2 = _f32(amp * _f32(_f32(ap1 - am1_cs) - beta_sn))
                a0 = _f32(_f32(ap1 + am1_cs) + beta_sn)
                a1 = _f32(-2.0 * _f32(am1 + ap1_cs))
                a2 = _f32(_f32(ap1 + am1_cs) - beta_sn)
            else:
                b0 = _f32(amp * _f32(_f32(ap1 + am1_cs) + beta_sn))
                b1 = _f32(_f32(-2.0 * amp) * _f32(am1 + ap1_cs))
                b2 = _f32(amp * _f32(_f32(ap1 + am1_cs) - beta_sn))
                a0 = _f32(_f32(ap1 - am1_cs) + beta_sn)
                a1 = _f32(2.0 * _f32(am1 - ap1_cs))
                a2 = _f32(_f32(ap1 - am1_cs) - beta_sn)

        return cls(
            a0=_f32(b0 / a0),
            a1=_f32(b1 / a0),
            a2=_f32(b2 / a0),
            a3=_f32(a1 / a0),
            a4=_f32(a2 / a0),
        )

    @property
    def coefficients(self) -> tuple[float, float, float, float, float]:
        return (self.a0, self.a1, self.a2, self.a3, self.a4)

    def copy_coefficients(self, other: Biquad) -> None:
        """Take the coefficients of ``other``, keeping this filter's history."""
        self.a0, self.a1, self.a2, self.a3, self.a4 = other.coefficients

    def process(self, sample: float) -> float:
        """Filter one sample and return the result."""
        sample = _f32(sample)
        result = _f32(
            _f32(
                _f32(
                    _f32(_f32(self.a0 * sample) + _f32(self.a1 * self.x1))
                    + _f32(self.a2 * self.x2)
                )
                - _f32(self.a3 * self.y1)
            )
            - _f32(self.a4 * self.y2)
        )
        self.x2 = self.x1
        self.x1 = sample
        self.y2 = self.y1
        self.y1 = result
        return result

    def reset(self) -> None:
        """Clear the filter history."""
        self.x1 = self.x2 = 0.0
        self.y1 = self.y2 = 0.0


@dataclass
class Envelope:
    """A four-stage one-pole envelope follower."""

    coef: float = 0.0
    history: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 0.0])

    def configure(self, time_in_seconds: float, sample_rate: float) -> None:
        """Set the smoothing so the envelope falls to 1% over the given time."""
        frames = time_in_seconds * sample_rate
        if frames <= 0:
            raise ValueError("time and sample rate must both be positive")
        self.coef = _f32(math.pow(0.01, 1.0 / frames))

    def tick(self, sample: float) -> float:
        """Feed one sample and return the smoothed envelope."""
        coef = self.coef
        keep = _f32(1.0 - coef)
        history = self.history
        history[0] = _f32(
            _f32(keep * abs(_f32(sample))) + _f32(coef * history[0])
        )
        for stage in range(1, 4):
            history[stage] = _f32(
                _f32(keep * history[stage - 1]) + _f32(coef * history[stage])
            )
        return history[3]

    def reset(self) -> None:
        """Clear the envelope history."""
        self.history[:] = [0.0, 0.0, 0.0, 0.0]