import pytest

from pathsampler.motion.parser import MotionParser
from pathsampler.motion.types import LinearMotion, RotationalMotion
from pathsampler.runner import (
    CommandStatus,
    ErrorPolicy,
    RunSummary,
    process_line,
    read_command_file,
    run_commands,
)
from pathsampler.utils.errors import (
    DegenerateMotionError,
    FormatError,
    InputFileError,
    InvalidDirectionError,
)

PROGRAM = [
    "linear 0,0,0 3,4,0",
    "",
    "dwell 5",
    "rotational 0,0,0 1 counterclockwise 90",
]


@pytest.mark.unit
def test_process_line_outcomes(motion_parser):
    sampled = process_line("linear 0,0,0 3,4,0", 1, motion_parser)
    assert sampled.status is CommandStatus.SAMPLED and sampled.ok
    assert isinstance(sampled.motion, LinearMotion)
    assert len(list(sampled.points)) == 6

    skipped = process_line("pause", 2, motion_parser)
    assert skipped.status is CommandStatus.SKIPPED
    assert skipped.points is None and skipped.error is None

    failed = process_line("rotational 0,0,0 1 sideways 90", 3, motion_parser)
    assert failed.status is CommandStatus.FAILED and not failed.ok
    assert isinstance(failed.error, InvalidDirectionError)
    assert failed.error.line_number == 3
    assert "line 3" in str(failed.error)


@pytest.mark.unit
def test_run_commands_preserves_input_order(motion_parser):
    results = list(run_commands(PROGRAM, motion_parser))
    assert [r.line_number for r in results] == [1, 2, 3, 4]
    assert [r.status for r in results] == [
        CommandStatus.SAMPLED,
        CommandStatus.SKIPPED,
        CommandStatus.SKIPPED,
        CommandStatus.SAMPLED,
    ]
    assert isinstance(results[3].motion, RotationalMotion)
    assert len(results[3].points) == 19


@pytest.mark.unit
def test_abort_policy_raises_first_failure(motion_parser):
    lines = ["linear 0,0,0 1,0,0", "linear 1,2 3,4,5", "linear 0,0,0 q,0,0"]
    seen = []
    with pytest.raises(FormatError) as excinfo:
        for result in run_commands(lines, motion_parser, ErrorPolicy.ABORT):
            seen.append(result.line_number)
    assert seen == [1]
    assert excinfo.value.line_number == 2


@pytest.mark.unit
def test_skip_policy_reports_and_continues(motion_parser):
    lines = ["linear 1,2 3,4,5", "linear 0,0,0 2,0,0", "rotational 0,0,0 1 clockwise"]
    results = list(run_commands(lines, motion_parser, ErrorPolicy.SKIP))
    assert [r.status for r in results] == [
        CommandStatus.FAILED,
        CommandStatus.SAMPLED,
        CommandStatus.FAILED,
    ]

    summary = RunSummary()
    for r in results:
        summary.record(r, len(r.points) if r.points is not None else 0)
    assert summary.commands == 1
    assert summary.points == 3
    assert summary.failed == 2
    assert [e.line_number for e in summary.failures] == [1, 3]


@pytest.mark.unit
def test_strict_parser_reports_degenerate_motion_as_failure():
    parser = MotionParser(strict=True)
    results = list(run_commands(["linear 1,1,1 1,1,1"], parser, ErrorPolicy.SKIP))
    assert results[0].status is CommandStatus.FAILED
    assert isinstance(results[0].error, DegenerateMotionError)


@pytest.mark.unit
def test_run_commands_uses_default_parser():
    results = list(run_commands(["linear 0,0,0 0,0,2"]))
    assert len(results[0].points) == 3


@pytest.mark.integration
def test_read_command_file_strips_line_endings(tmp_path):
    path = tmp_path / "cmds.txt"
    path.write_bytes(b"linear 0,0,0 1,0,0\r\nrotational 0,0,0 1 clockwise 10\n")
    assert list(read_command_file(path)) == [
        "linear 0,0,0 1,0,0",
        "rotational 0,0,0 1 clockwise 10",
    ]


@pytest.mark.integration
def test_read_command_file_missing_file_fails_immediately(tmp_path):
    with pytest.raises(InputFileError) as excinfo:
        read_command_file(tmp_path / "missing.txt")
    assert "missing.txt" in str(excinfo.value)


@pytest.mark.integration
def test_read_command_file_undecodable_content(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"linear 0,0,0 1,0,0\n\xff\xfe\xfa\n")
    with pytest.raises(InputFileError):
        list(read_command_file(path))
