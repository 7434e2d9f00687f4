"""Audio processing nodes: reverb, biquad filters, channel routing and leading-silence trimming."""

__version__ = "0.1.0"

__all__ = ["biquad", "channels", "ltrim", "reverb", "reverb_filters"]