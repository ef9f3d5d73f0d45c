"""Shared utilities for pathsampler."""

from .errors import (
    DegenerateMotionError,
    FormatError,
    InputFileError,
    InvalidDirectionError,
    NumericParseError,
    PathSamplerError,
    SampleLimitError,
)

__all__ = [
    "PathSamplerError",
    "InputFileError",
    "FormatError",
    "NumericParseError",
    "InvalidDirectionError",
    "DegenerateMotionError",
    "SampleLimitError",
]
