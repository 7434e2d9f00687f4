"""A node that drops leading near-silent frames from a stream."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class TrimResult(NamedTuple):
    """What one call to :meth:`LTrimNode.process` consumed and produced."""

    frames_consumed: int
    samples: list[float]

    @property
    def frames_produced(self) -> int:
        return len(self.samples)


class LTrimNode:
    """Skips input frames until one sample leaves ``[-threshold, threshold]``.

    Once the start has been found every later frame passes through untouched.
    """

    def __init__(self, channels: int, threshold: float = 0.0) -> None:
        if channels < 1:
            raise ValueError(f"channels must be at least 1, got {channels}")
        self.channels = channels
        self.threshold = threshold
        self.found_start = False

    @property
    def input_channels(self) -> tuple[int, ...]:
        return (self.channels,)

    @property
    def output_channels(self) -> tuple[int, ...]:
        return (self.channels,)

    def _is_audible(self, frame: list[float]) -> bool:
        return any(
            sample < -self.threshold or sample > self.threshold for sample in frame
        )

    def process(
        self, samples: Iterable[float], max_frames: int | None = None
    ) -> TrimResult:
        """Trim one block of interleaved frames.

        At most ``max_frames`` frames are produced. Leading silent frames are
        always consumed, and so is every frame that was produced.
        """
        data = list(samples)
        channels = self.channels
        if len(data) % channels:
            raise ValueError(
                f"sample count {len(data)} is not a multiple of {channels} channels"
            )
        if max_frames is not None and max_frames < 0:
            raise ValueError(f"max_frames must not be negative, got {max_frames}")

        frame_count = len(data) // channels
        consumed = 0
        if not self.found_start:
            while consumed < frame_count:
                start = consumed * channels
                if self._is_audible(data[start : start + channels]):
                    self.found_start = True
                    break
                consumed += 1

        remaining = frame_count - consumed
        produced = remaining if max_frames is None else min(max_frames, remaining)
        start = consumed * channels
        output = data[start : start + produced * channels]
        return TrimResult(consumed + produced, output)