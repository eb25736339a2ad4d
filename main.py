from __future__ import annotations

import logging
import os
import re
import sys

from game.ruleset import (
    DEFAULT_RULES,
    MAX_PEG_COLORS,
    MIN_PEG_COLORS,
    MIN_TRIES_ALLOWED,
)
from ui.cli import gameloop

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: mastermind [OPTION]\n"
    "Options:\n"
    " -c NUMBER            [0 --> NUMBER) are the numbers used as color peg, "
    f"it should be great than 1 and less than {MAX_PEG_COLORS + 1}, "
    f"the default number is {DEFAULT_RULES['num_colors']}\n"
    " -t TRIES_ALLOWED     How many turns are allowed to try, "
    "it should be great than 1, "
    f"the default value is {DEFAULT_RULES['max_attempts']}"
)


def _atoi(value: str) -> int:
    # Leading sign and digits only, anything unparsable is 0
    m = re.match(r"\s*([+-]?\d+)", value)
    return int(m.group(1)) if m else 0


def parse_options(argv: list[str]) -> tuple[int, int]:
    """
    Read -c / -t from the command line.

    Flags only count when there are two or four arguments; any other
    number of arguments falls back to the defaults. A flag is anything that
    starts with -c or -t, and it always takes the next argument as its value,
    even when that looks like another flag.

    Returns:
        tuple[int, int]: (colors, tries), not yet clamped.
    """
    colors = DEFAULT_RULES["num_colors"]
    tries = DEFAULT_RULES["max_attempts"]
    if len(argv) not in (2, 4):
        return colors, tries

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg.startswith(("-c", "-t")) and i + 1 < len(argv):
            i += 1
            if arg.startswith("-c"):
                colors = _atoi(argv[i])
            else:
                tries = _atoi(argv[i])
        else:
            logger.debug("ignoring argument: %s", arg)
        i += 1
    return colors, tries


def clamp_options(colors: int, tries: int) -> tuple[int, int]:
    """
    Clamp colors to [MIN_PEG_COLORS, MAX_PEG_COLORS] and tries to at least
    MIN_TRIES_ALLOWED, printing a warning for each change.
    """
    if colors > MAX_PEG_COLORS:
        print(f"Wrong number of colors, set to {MAX_PEG_COLORS}")
        logger.info("colors %d out of range", colors)
        colors = MAX_PEG_COLORS
    if colors < MIN_PEG_COLORS:
        print(f"Wrong number of colors, set to {MIN_PEG_COLORS}")
        logger.info("colors %d out of range", colors)
        colors = MIN_PEG_COLORS
    if tries < MIN_TRIES_ALLOWED:
        print(f"Wrong turns, set to {MIN_TRIES_ALLOWED}")
        logger.info("tries %d out of range", tries)
        tries = MIN_TRIES_ALLOWED
    return colors, tries


def setup_logging() -> None:
    name = os.getenv("MASTERMIND_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)


def main(argv: list[str] | None = None, input_fn=input) -> int:
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    if len(argv) == 1 and argv[0].startswith("-h"):
        print(USAGE)
        return 0

    colors, tries = clamp_options(*parse_options(argv))
    return gameloop(colors, tries, input_fn=input_fn)


if __name__ == "__main__":
    sys.exit(main())
