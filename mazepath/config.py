"""
Configuration for the maze viewer and headless runner.

Defaults live here as module constants. Each can be overridden by an
environment variable, and then by a `--key=value` command-line argument:

    MAZE_ROWS / --rows=21        MAZE_COLS / --cols=31
    MAZE_ALGORITHM / --algo=A*   MAZE_SEED / --seed=7
    MAZE_DELAY_MS / --delay=50   LOG_LEVEL / --log-level=DEBUG
    --headless                   (no window; log the result instead)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from mazepath.core.errors import MazeConfigError

# =============================================================================
# Maze Configuration
# =============================================================================

# Default size (odd values keep the carved maze flush with the border)
DEFAULT_ROWS = 21
DEFAULT_COLS = 31

# Range the viewer clamps user-entered sizes into
MIN_DIMENSION = 5
MAX_DIMENSION = 50

# Seed for maze generation; None means a fresh random source every maze
DEFAULT_SEED: Optional[int] = None

# =============================================================================
# Search Configuration
# =============================================================================

DEFAULT_ALGORITHM = "A*"

# =============================================================================
# Replay Configuration
# =============================================================================

# Delay between replay frames in milliseconds (lower is faster)
DEFAULT_DELAY_MS = 50
MIN_DELAY_MS = 10
MAX_DELAY_MS = 200
DELAY_STEP_MS = 10

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    algorithm: str = DEFAULT_ALGORITHM
    seed: Optional[int] = DEFAULT_SEED
    delay_ms: int = DEFAULT_DELAY_MS
    log_level: str = LOG_LEVEL
    headless: bool = False


def clamp_dimension(n: int) -> int:
    return max(MIN_DIMENSION, min(MAX_DIMENSION, n))


def clamp_delay(ms: int) -> int:
    return max(MIN_DELAY_MS, min(MAX_DELAY_MS, ms))


def _to_int(label: str, raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise MazeConfigError(f"{label} must be an integer, got {raw!r}") from None


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Merge defaults, environment and `--key=value` arguments.

    Sizes are clamped to [MIN_DIMENSION, MAX_DIMENSION] and the delay to
    [MIN_DELAY_MS, MAX_DELAY_MS]. The algorithm name is validated later by
    the pathfinding entry point.

    Raises:
        MazeConfigError: If a numeric setting is not an integer
    """
    env = os.environ if environ is None else environ
    args = list(argv or [])

    values = {
        "rows": env.get("MAZE_ROWS"),
        "cols": env.get("MAZE_COLS"),
        "algo": env.get("MAZE_ALGORITHM"),
        "seed": env.get("MAZE_SEED"),
        "delay": env.get("MAZE_DELAY_MS"),
        "log-level": env.get("LOG_LEVEL"),
    }
    headless = False
    for arg in args:
        if arg == "--headless":
            headless = True
        elif arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            if key in values:
                values[key] = value

    s = Settings(headless=headless)
    if values["rows"] is not None:
        s.rows = clamp_dimension(_to_int("rows", values["rows"]))
    if values["cols"] is not None:
        s.cols = clamp_dimension(_to_int("cols", values["cols"]))
    if values["algo"]:
        s.algorithm = values["algo"]
    if values["seed"] not in (None, ""):
        s.seed = _to_int("seed", values["seed"])
    if values["delay"] is not None:
        s.delay_ms = clamp_delay(_to_int("delay", values["delay"]))
    if values["log-level"]:
        s.log_level = values["log-level"].upper()
    return s


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
