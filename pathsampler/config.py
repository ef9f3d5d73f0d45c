"""
Central configuration for pathsampler tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("PATHSAMPLER_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number, using {default}")
        return default
    if not value > 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be positive, using {default}")
        return default
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    return max(0, value)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    return default


# Command file read when no path is given on the command line
INPUT_FILE: str = os.getenv("PATHSAMPLER_INPUT_FILE", "input.txt")

# Linear motions: one sample per LINEAR_RESOLUTION units of travel
LINEAR_RESOLUTION: float = _env_float("PATHSAMPLER_LINEAR_RESOLUTION", 1.0)

# Rotational motions: one sample per ANGULAR_STEP_DEG degrees of arc (rounded up)
ANGULAR_STEP_DEG: float = _env_float("PATHSAMPLER_ANGULAR_STEP_DEG", 5.0)

# Upper bound on points produced by a single command
MAX_SAMPLES: int = _env_int("PATHSAMPLER_MAX_SAMPLES", 10_000_000)

# Decimal digits per coordinate in formatted output
OUTPUT_PRECISION: int = _env_int("PATHSAMPLER_PRECISION", 2)

# Keep processing after a bad command line instead of aborting the run
CONTINUE_ON_ERROR: bool = _env_bool("PATHSAMPLER_CONTINUE_ON_ERROR", False)

LOG_LEVEL_DEFAULT: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"
