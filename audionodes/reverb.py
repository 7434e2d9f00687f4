"""A Freeverb-style stereo/mono reverb built from comb and allpass filters."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .reverb_filters import (
    REFERENCE_SAMPLE_RATE,
    AllpassFilter,
    CombFilter,
    _f32,
    scaled_buffer_size,
)

MAX_SAMPLE_RATE_MULTIPLIER = 4
MIN_SAMPLE_RATE = 22050
MAX_SAMPLE_RATE = REFERENCE_SAMPLE_RATE * MAX_SAMPLE_RATE_MULTIPLIER

SILENCE_THRESHOLD_DB = 80.0

MUTED = 0.0
FIXED_GAIN = 0.015
SCALE_WET = 3.0
SCALE_DRY = 2.0
SCALE_DAMP = 0.8
SCALE_ROOM = 0.28
OFFSET_ROOM = 0.7
FREEZE_MODE = 0.5
STEREO_SPREAD = 23

INITIAL_ROOM = 0.5
INITIAL_DAMP = 0.25
INITIAL_WET = 1.0 / SCALE_WET
INITIAL_DRY = 0.0
INITIAL_WIDTH = 1.0
INITIAL_INPUT_WIDTH = 0.0
INITIAL_MODE = 0.0

COMB_TUNINGS = (1116, 1188, 1277, 1356, 1422, 1491, 1557, 1617)
ALLPASS_TUNINGS = (556, 441, 341, 225)
ALLPASS_FEEDBACK = 0.5


class Reverb:
    """A reverb for one or two interleaved channels at 22050 Hz and above."""

    def __init__(self, sample_rate: int, channels: int) -> None:
        if channels not in (1, 2):
            raise ValueError(f"channels must be 1 or 2, got {channels}")
        if sample_rate < MIN_SAMPLE_RATE:
            raise ValueError(
                f"sample rate must be at least {MIN_SAMPLE_RATE}, got {sample_rate}"
            )
        if sample_rate > MAX_SAMPLE_RATE:
            raise ValueError(
                f"sample rate must be at most {MAX_SAMPLE_RATE}, got {sample_rate}"
            )

        self.sample_rate = sample_rate
        self.channels = channels

        self.combs_left = [
            CombFilter(scaled_buffer_size(sample_rate, tuning))
            for tuning in COMB_TUNINGS
        ]
        self.combs_right = [
            CombFilter(scaled_buffer_size(sample_rate, tuning + STEREO_SPREAD))
            for tuning in COMB_TUNINGS
        ]
        self.allpasses_left = [
            AllpassFilter(scaled_buffer_size(sample_rate, tuning), ALLPASS_FEEDBACK)
            for tuning in ALLPASS_TUNINGS
        ]
        self.allpasses_right = [
            AllpassFilter(
                scaled_buffer_size(sample_rate, tuning + STEREO_SPREAD),
                ALLPASS_FEEDBACK,
            )
            for tuning in ALLPASS_TUNINGS
        ]

        self._gain = FIXED_GAIN
        self._roomsize = 0.0
        self._roomsize1 = 0.0
        self._damp = 0.0
        self._damp1 = 0.0
        self._wet = 0.0
        self._wet1 = 0.0
        self._wet2 = 0.0
        self._dry = 0.0
        self._width = 0.0
        self._input_width = 0.0
        self._mode = 0.0

        self.wet = INITIAL_WET
        self.room_size = INITIAL_ROOM
        self.dry = INITIAL_DRY
        self.damping = INITIAL_DAMP
        self.width = INITIAL_WIDTH
        self.input_width = INITIAL_INPUT_WIDTH
        self.mode = INITIAL_MODE

        self.mute()

    # Parameters -----------------------------------------------------------

    @property
    def room_size(self) -> float:
        """Size of the room, between 0.0 and 1.0."""
        return _f32((self._roomsize - OFFSET_ROOM) / SCALE_ROOM)

    @room_size.setter
    def room_size(self, value: float) -> None:
        self._roomsize = _f32(value * SCALE_ROOM + OFFSET_ROOM)
        self._update()

    @property
    def damping(self) -> float:
        """Amount of damping, between 0.0 and 1.0."""
        return _f32(self._damp / SCALE_DAMP)

    @damping.setter
    def damping(self, value: float) -> None:
        self._damp = _f32(value * SCALE_DAMP)
        self._update()

    @property
    def wet(self) -> float:
        """Volume of the wet signal, between 0.0 and 1.0."""
        return _f32(self._wet / SCALE_WET)

    @wet.setter
    def wet(self, value: float) -> None:
        self._wet = _f32(value * SCALE_WET)
        self._update()

    @property
    def dry(self) -> float:
        """Volume of the dry signal, between 0.0 and 1.0."""
        return _f32(self._dry / SCALE_DRY)

    @dry.setter
    def dry(self, value: float) -> None:
        self._dry = _f32(value * SCALE_DRY)

    @property
    def width(self) -> float:
        """Stereo width of the reverb, between 0.0 and 1.0."""
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = _f32(value)
        self._update()

    @property
    def input_width(self) -> float:
        """Stereo width of the input sent to the reverb; 0.0 sums it to mono."""
        return self._input_width

    @input_width.setter
    def input_width(self, value: float) -> None:
        self._input_width = _f32(value)

    @property
    def mode(self) -> float:
        """1.0 when frozen, 0.0 otherwise; values of 0.5 and above freeze."""
        return 1.0 if self._mode >= FREEZE_MODE else 0.0

    @mode.setter
    def mode(self, value: float) -> None:
        self._mode = _f32(value)
        self._update()

    @property
    def frozen(self) -> bool:
        return self._mode >= FREEZE_MODE

    def _update(self) -> None:
        self._wet1 = _f32(self._wet * (self._width / 2.0 + 0.5))
        self._wet2 = _f32(self._wet * ((1.0 - self._width) / 2.0))

        if self.frozen:
            self._roomsize1 = 1.0
            self._damp1 = 0.0
            self._gain = MUTED
        else:
            self._roomsize1 = self._roomsize
            self._damp1 = self._damp
            self._gain = _f32(FIXED_GAIN)

        for comb in (*self.combs_left, *self.combs_right):
            comb.feedback = self._roomsize1
            comb.set_damp(self._damp1)

    # Processing -----------------------------------------------------------

    def mute(self) -> None:
        """Clear every delay line, unless the reverb is frozen."""
        if self.frozen:
            return
        for filt in (
            *self.combs_left,
            *self.combs_right,
            *self.allpasses_left,
            *self.allpasses_right,
        ):
            filt.mute()

    def process(self, samples: Iterable[float]) -> list[float]:
        """Run interleaved samples through the reverb and return the output."""
        data = list(samples)
        if len(data) % self.channels:
            raise ValueError(
                f"sample count {len(data)} is not a multiple of {self.channels} channels"
            )
        if self.channels == 1:
            return [self._process_mono(sample) for sample in data]

        output: list[float] = []
        pairs = zip(data[0::2], data[1::2])
        if self._input_width > 0.0:
            tmp = _f32(1.0 / max(1.0 + self._input_width, 2.0))
            coef_mid = tmp
            coef_side = _f32(self._input_width * tmp)
            scale = _f32(self._gain * 2.0)
            for left, right in pairs:
                mid = _f32((left + right) * coef_mid)
                side = _f32((right - left) * coef_side)
                output.extend(
                    self._process_stereo(
                        left,
                        right,
                        _f32((mid - side) * scale),
                        _f32((mid + side) * scale),
                    )
                )
        else:
            for left, right in pairs:
                summed = _f32((left + right) * self._gain)
                output.extend(self._process_stereo(left, right, summed, summed))
        return output

    def _process_mono(self, sample: float) -> float:
        feed = _f32(_f32(sample * 2.0) * self._gain)
        out = 0.0
        for comb in self.combs_left:
            out = _f32(out + comb.process(feed))
        for allpass in self.allpasses_left:
            out = allpass.process(out)
        return _f32(out * self._wet1 + sample * self._dry)

    def _process_stereo(
        self, left: float, right: float, feed_left: float, feed_right: float
    ) -> tuple[float, float]:
        out_left = 0.0
        out_right = 0.0
        for comb_left, comb_right in zip(self.combs_left, self.combs_right):
            out_left = _f32(out_left + comb_left.process(feed_left))
            out_right = _f32(out_right + comb_right.process(feed_right))
        for ap_left, ap_right in zip(self.allpasses_left, self.allpasses_right):
            out_left = ap_left.process(out_left)
            out_right = ap_right.process(out_right)
        return (
            _f32(out_left * self._wet1 + out_right * self._wet2 + left * self._dry),
            _f32(out_right * self._wet1 + out_left * self._wet2 + right * self._dry),
        )

    def decay_time_in_frames(self) -> int:
        """Decay time in frames for the current room size; 0 when frozen."""
        if self.frozen:
            return 0
        decay = SILENCE_THRESHOLD_DB / abs(-20.0 * math.log(1.0 / self._roomsize1))
        decay *= float(self.combs_right[-1].size * 2)
        return int(decay)