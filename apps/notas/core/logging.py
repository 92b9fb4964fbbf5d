import logging
import os
import sys
from typing import TextIO

LEVEL_ENV_VARS = ("NOTAS_LOG_LEVEL", "LOG_LEVEL")


def resolve_level(level: str | int | None = None) -> int:
    """Turn a level name, number or None into a logging level.

    None reads the first of LEVEL_ENV_VARS that is set. Unknown names map to INFO.
    """
    if level is None:
        level = next((os.environ[var] for var in LEVEL_ENV_VARS if os.environ.get(var)), None)
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def setup_logging(level: str | int | None = None, *, stream: TextIO | None = None) -> None:
    """Attach one handler to the root logger (first call only) and set its level.

    `stream` defaults to stdout; command-line entry points that print results
    on stdout pass stderr so log lines stay out of the output.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        root.addHandler(handler)
        logging.captureWarnings(True)
    root.setLevel(resolve_level(level))
