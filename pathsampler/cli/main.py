"""
CLI entry point for the pathsampler command.

Reads a motion command file and prints one sampled point per line.
"""

import argparse
import logging
import sys

from pathsampler import config
from pathsampler.config import TRACE
from pathsampler.motion.parser import MotionParser
from pathsampler.output import write_points
from pathsampler.runner import CommandStatus, ErrorPolicy, RunSummary, read_command_file, run_commands
from pathsampler.utils.errors import PathSamplerError

logger = logging.getLogger("pathsampler.cli")


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathsampler",
        description="Sample linear and rotational motion commands into 3D points",
    )
    parser.add_argument('input', nargs='?', default=config.INPUT_FILE,
                        help=f'Command file (default: {config.INPUT_FILE})')
    parser.add_argument('-o', '--output', help='Write points to this file instead of stdout')
    parser.add_argument('--precision', type=_non_negative_int, default=config.OUTPUT_PRECISION,
                        help='Decimal places per coordinate (default: %(default)s)')
    parser.add_argument('--linear-resolution', type=_positive_float, default=config.LINEAR_RESOLUTION,
                        help='Travel per linear sample (default: %(default)s)')
    parser.add_argument('--angular-step', type=_positive_float, default=config.ANGULAR_STEP_DEG,
                        help='Degrees per arc sample (default: %(default)s)')
    parser.add_argument('--continue-on-error', action=argparse.BooleanOptionalAction,
                        default=config.CONTINUE_ON_ERROR,
                        help='Report bad lines and keep going instead of aborting (default: %(default)s)')
    parser.add_argument('--strict', action='store_true',
                        help='Treat zero-length and zero-sweep motions as errors')
    parser.add_argument('--normalize-direction', action='store_true',
                        help='Sweep |stop angle| in the commanded direction')

    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only log errors')
    parser.add_argument('--log-level', choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set specific log level')
    return parser


def _resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == 'TRACE':
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3 or config.TRACE_ENABLED:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    return getattr(logging, config.LOG_LEVEL_DEFAULT)


def main(argv: list[str] | None = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=_resolve_log_level(args),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
        stream=sys.stderr,
    )

    motion_parser = MotionParser(
        linear_resolution=args.linear_resolution,
        angular_step=args.angular_step,
        strict=args.strict,
        normalize_direction=args.normalize_direction,
    )
    policy = ErrorPolicy.SKIP if args.continue_on_error else ErrorPolicy.ABORT
    logger.debug(f"Policy={policy.value} strict={args.strict} normalize_direction={args.normalize_direction}")

    # Input first: a missing command file must not truncate an existing output file
    try:
        lines = read_command_file(args.input)
    except PathSamplerError as e:
        logger.error(str(e))
        return 1

    if args.output:
        try:
            out = open(args.output, 'w', encoding='utf-8')
        except OSError as e:
            logger.error(f"Cannot open output file {args.output!r}: {e.strerror or e}")
            return 1
    else:
        out = sys.stdout

    summary = RunSummary()
    try:
        for result in run_commands(lines, motion_parser, policy):
            written = 0
            if result.status is CommandStatus.SAMPLED:
                written = write_points(result.points, out, args.precision)
            elif result.status is CommandStatus.FAILED:
                logger.error(str(result.error))
            summary.record(result, written)
    except PathSamplerError as e:
        logger.error(str(e))
        return 1
    finally:
        if out is not sys.stdout:
            out.close()

    logger.info(
        f"Sampled {summary.commands} commands into {summary.points} points "
        f"({summary.skipped} lines skipped, {summary.failed} failed)"
    )
    return 1 if summary.failed else 0


def main_entry():
    """Entry point for the pathsampler console script."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
