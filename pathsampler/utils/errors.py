"""
Exception types raised while parsing and sampling motion commands.
Everything derives from PathSamplerError so the runner's error policy can
report a bad line without catching unrelated exceptions.
"""


class PathSamplerError(Exception):
    """Base class for all command-processing failures."""

    kind = "Error"

    def __init__(self, message: str, line_number: int | None = None):
        self.original_message = message
        self.line_number = line_number
        super().__init__(message)

    def with_line(self, line_number: int) -> "PathSamplerError":
        """Attach the 1-based input line number and return self."""
        self.line_number = line_number
        return self

    def __str__(self):
        if self.line_number is not None:
            return f"{self.kind} (line {self.line_number}): {self.original_message}"
        return f"{self.kind}: {self.original_message}"


class InputFileError(PathSamplerError):
    """Command file missing or unreadable."""

    kind = "Input File Error"


class FormatError(PathSamplerError):
    """Wrong token count in a command or wrong field count in a point literal."""

    kind = "Format Error"


class NumericParseError(FormatError):
    """A numeric field is not a valid finite real literal."""

    kind = "Numeric Parse Error"


class InvalidDirectionError(FormatError):
    """Rotation direction token is neither 'clockwise' nor 'counterclockwise'."""

    kind = "Invalid Direction"


class DegenerateMotionError(PathSamplerError):
    """Zero-length or zero-sweep motion rejected by a strict sampler."""

    kind = "Degenerate Motion"


class SampleLimitError(PathSamplerError):
    """Motion extent overflows or would produce more samples than allowed."""

    kind = "Sample Limit"
