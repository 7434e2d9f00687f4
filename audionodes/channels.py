"""Splitting interleaved audio into mono buses and joining it back."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MAX_NODE_BUS_COUNT = 254


def interleave(buses: Iterable[Iterable[float]]) -> list[float]:
    """Join equally long mono buses into one interleaved sample list."""
    channels = [list(bus) for bus in buses]
    if not channels:
        raise ValueError("at least one bus is required")
    frames = len(channels[0])
    for index, bus in enumerate(channels):
        if len(bus) != frames:
            raise ValueError(
                f"bus {index} holds {len(bus)} samples, expected {frames}"
            )
    return [sample for frame in zip(*channels) for sample in frame]


def deinterleave(samples: Iterable[float], channels: int) -> list[list[float]]:
    """Split interleaved samples into one list per channel."""
    if channels < 1:
        raise ValueError(f"channels must be at least 1, got {channels}")
    data = list(samples)
    if len(data) % channels:
        raise ValueError(
            f"sample count {len(data)} is not a multiple of {channels} channels"
        )
    return [data[channel::channels] for channel in range(channels)]


def _check_channels(channels: int) -> None:
    if channels < 1:
        raise ValueError(f"channels must be at least 1, got {channels}")
    if channels > MAX_NODE_BUS_COUNT:
        raise ValueError(
            f"channels cannot exceed {MAX_NODE_BUS_COUNT} buses, got {channels}"
        )


class ChannelSeparatorNode:
    """One interleaved input bus in, one mono output bus per channel out."""

    def __init__(self, channels: int) -> None:
        _check_channels(channels)
        self.channels = channels

    @property
    def input_bus_count(self) -> int:
        return 1

    @property
    def output_bus_count(self) -> int:
        return self.channels

    @property
    def input_channels(self) -> tuple[int, ...]:
        return (self.channels,)

    @property
    def output_channels(self) -> tuple[int, ...]:
        return (1,) * self.channels

    def process(self, samples: Iterable[float]) -> list[list[float]]:
        """Split one block of interleaved frames into mono buses."""
        return deinterleave(samples, self.channels)


class ChannelCombinerNode:
    """One mono input bus per channel in, one interleaved output bus out."""

    def __init__(self, channels: int) -> None:
        _check_channels(channels)
        self.channels = channels

    @property
    def input_bus_count(self) -> int:
        return self.channels

    @property
    def output_bus_count(self) -> int:
        return 1

    @property
    def input_channels(self) -> tuple[int, ...]:
        return (1,) * self.channels

    @property
    def output_channels(self) -> tuple[int, ...]:
        return (self.channels,)

    def process(self, buses: Sequence[Iterable[float]]) -> list[float]:
        """Join one block of mono buses into interleaved frames."""
        bus_list = list(buses)
        if len(bus_list) != self.channels:
            raise ValueError(
                f"expected {self.channels} buses, got {len(bus_list)}"
            )
        return interleave(bus_list)