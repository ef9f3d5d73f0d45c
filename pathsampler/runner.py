"""
Command runner for pathsampler

Reads command lines, dispatches each to the matching parser and sampler, and
reports a per-line result. Whether a bad line stops the run is decided by the
ErrorPolicy, not by the parsers.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import TextIO

from pathsampler.motion.base import PathSampler
from pathsampler.motion.parser import Motion, MotionParser
from pathsampler.utils.errors import InputFileError, PathSamplerError

logger = logging.getLogger(__name__)


class CommandStatus(Enum):
    """Outcome of processing one command line."""
    SAMPLED = "SAMPLED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


class ErrorPolicy(Enum):
    """What to do when a command line fails to parse."""
    ABORT = "abort"  # raise the first failure, stop reading
    SKIP = "skip"    # report the failure and continue with the next line


@dataclass
class CommandResult:
    """
    Result of processing one command line.
    """
    line_number: int
    line: str
    status: CommandStatus
    motion: Motion | None = None
    points: PathSampler | None = None
    error: PathSamplerError | None = None

    @classmethod
    def sampled(cls, line_number: int, line: str, motion: Motion, points: PathSampler) -> "CommandResult":
        return cls(line_number, line, CommandStatus.SAMPLED, motion=motion, points=points)

    @classmethod
    def skipped(cls, line_number: int, line: str) -> "CommandResult":
        return cls(line_number, line, CommandStatus.SKIPPED)

    @classmethod
    def failed(cls, line_number: int, line: str, error: PathSamplerError) -> "CommandResult":
        return cls(line_number, line, CommandStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status is not CommandStatus.FAILED


@dataclass
class RunSummary:
    """Running totals over a processed command stream."""
    commands: int = 0
    points: int = 0
    skipped: int = 0
    failures: list[PathSamplerError] = field(default_factory=list)

    def record(self, result: CommandResult, points_written: int = 0) -> None:
        if result.status is CommandStatus.SAMPLED:
            self.commands += 1
            self.points += points_written
        elif result.status is CommandStatus.SKIPPED:
            self.skipped += 1
        elif result.error is not None:
            self.failures.append(result.error)

    @property
    def failed(self) -> int:
        return len(self.failures)


def process_line(line: str, line_number: int, parser: MotionParser) -> CommandResult:
    """
    Parse one command line and build its sampler.

    Parse, degenerate-motion and sample-limit errors are captured in the result, never raised.
    """
    try:
        motion = parser.parse(line)
        if motion is None:
            return CommandResult.skipped(line_number, line)
        sampler = parser.sampler_for(motion)
    except PathSamplerError as e:
        e.with_line(line_number)
        logger.debug(f"Line {line_number} failed: {e}")
        return CommandResult.failed(line_number, line, e)
    return CommandResult.sampled(line_number, line, motion, sampler)


def run_commands(
    lines: Iterable[str],
    parser: MotionParser | None = None,
    policy: ErrorPolicy = ErrorPolicy.ABORT,
) -> Iterator[CommandResult]:
    """
    Process command lines in order.

    Args:
        lines: Raw command lines
        parser: Parser/sampler settings (default MotionParser())
        policy: ABORT raises the first failure; SKIP yields it and continues

    Yields:
        One CommandResult per input line

    Raises:
        PathSamplerError: first failing line, under ErrorPolicy.ABORT
    """
    if parser is None:
        parser = MotionParser()

    for line_number, line in enumerate(lines, start=1):
        result = process_line(line, line_number, parser)
        if result.error is not None and policy is ErrorPolicy.ABORT:
            raise result.error
        yield result


def read_command_file(path: str | PathLike) -> Iterator[str]:
    """
    Open a command file and return an iterator over its lines.

    The file is opened immediately so a missing file fails here, not on the
    first read. Line terminators are stripped.

    Raises:
        InputFileError: file missing or unreadable
    """
    try:
        handle = open(path, encoding="utf-8")
    except OSError as e:
        raise InputFileError(f"cannot open command file {str(path)!r}: {e.strerror or e}") from e
    logger.info(f"Reading commands from {path}")
    return _iter_lines(handle, path)


def _iter_lines(handle: TextIO, path: str | PathLike) -> Iterator[str]:
    with handle:
        try:
            for raw in handle:
                yield raw.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise InputFileError(f"error reading command file {str(path)!r}: {e}") from e
