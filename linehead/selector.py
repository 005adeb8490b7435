import logging
from itertools import islice
from typing import Iterator, Sequence

from linehead.options import Mode

logger = logging.getLogger(__name__)


# Mode -> (first position, step). EVEN/ODD name 1-based physical lines,
# so EVEN starts at position 1 and ODD at position 0.
MODE_SLICES = {
    Mode.NORMAL: (0, 1),
    Mode.EVEN: (1, 2),
    Mode.ODD: (0, 2),
}


def select_lines(lines: Sequence[bytes], mode: Mode, count: int) -> Iterator[bytes]:
    """Yield at most count lines from lines, filtered by mode, in order."""
    start, step = MODE_SLICES[mode]
    # islice rejects stops above sys.maxsize
    return islice(islice(lines, start, None, step), min(count, len(lines)))


def print_lines(lines: Sequence[bytes], mode: Mode, count: int, out) -> int:
    printed = 0
    for line in select_lines(lines, mode, count):
        out.write(line)
        printed += 1
    out.flush()

    logger.debug(f"Printed {printed} of {len(lines)} lines ({mode.name.lower()} mode)")
    return printed
