"""Comb and allpass filters that make up the reverb's network."""

from __future__ import annotations

import struct
from array import array

REFERENCE_SAMPLE_RATE = 44100

_F32 = struct.Struct("f")


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


def _undenormalise(value: float) -> float:
    """Flush very small values to zero the way single-precision adds do."""
    return _f32(_f32(value + 1.0) - 1.0)


def scaled_buffer_size(sample_rate: int, value: int) -> int:
    """Scale a delay length tuned for 44.1 kHz to ``sample_rate``.

    The result is truncated and never smaller than one sample.
    """
    if sample_rate < 0 or value < 0:
        raise ValueError("sample rate and value must not be negative")
    return max(1, (value * sample_rate) // REFERENCE_SAMPLE_RATE)


def _make_buffer(size: int) -> array:
    if size < 1:
        raise ValueError(f"filter size must be at least 1, got {size}")
    return array("f", bytes(4 * size))


class CombFilter:
    """A lowpass-feedback comb filter with a circular delay line."""

    def __init__(self, size: int, feedback: float = 0.0, damp: float = 0.0) -> None:
        self.buffer = _make_buffer(size)
        self.feedback = feedback
        self.filterstore = 0.0
        self.index = 0
        self.damp1 = 0.0
        self.damp2 = 1.0
        self.set_damp(damp)

    @property
    def size(self) -> int:
        return len(self.buffer)

    def set_damp(self, value: float) -> None:
        """Set the damping of the feedback path."""
        self.damp1 = _f32(value)
        self.damp2 = _f32(1.0 - value)

    def process(self, sample: float) -> float:
        """Push one sample through the filter and return the delayed output."""
        output = _undenormalise(self.buffer[self.index])
        self.filterstore = _undenormalise(
            output * self.damp2 + self.filterstore * self.damp1
        )
        self.buffer[self.index] = sample + self.filterstore * self.feedback
        self.index += 1
        if self.index >= len(self.buffer):
            self.index = 0
        return output

    def mute(self) -> None:
        """Clear the delay line."""
        self.buffer = array("f", bytes(4 * len(self.buffer)))


class AllpassFilter:
    """A Schroeder allpass filter with a circular delay line."""

    def __init__(self, size: int, feedback: float = 0.5) -> None:
        self.buffer = _make_buffer(size)
        self.feedback = feedback
        self.index = 0

    @property
    def size(self) -> int:
        return len(self.buffer)

    def process(self, sample: float) -> float:
        """Push one sample through the filter and return its output."""
        bufout = _undenormalise(self.buffer[self.index])
        output = _f32(-sample + bufout)
        self.buffer[self.index] = sample + bufout * self.feedback
        self.index += 1
        if self.index >= len(self.buffer):
            self.index = 0
        return output

    def mute(self) -> None:
        """Clear the delay line."""
        self.buffer = array("f", bytes(4 * len(self.buffer)))