"""
Read the capped line buffer from a file, a .zst dump or standard input.
"""

import io
import logging
import sys
from contextlib import contextmanager
from typing import List, Optional

import zstandard as zst

from linehead.config import DEFAULT_LIMITS, Limits, ZSTD_MAGIC, ZSTD_MAX_WINDOW_SIZE, ZSTD_SUFFIX
from linehead.errors import DecompressionError, FileOpenError

logger = logging.getLogger(__name__)

STDIN_NAME = "-"


def is_stdin(path: Optional[str]) -> bool:
    return path is None or path == STDIN_NAME


@contextmanager
def open_input(path: Optional[str], stdin=None):
    """Yield a binary stream for path, closing it afterwards unless it is stdin."""
    if is_stdin(path):
        logger.info("Reading from standard input")
        yield stdin if stdin is not None else sys.stdin.buffer
        return

    try:
        fh = open(path, "rb")
    except OSError as e:
        raise FileOpenError(path, e.strerror or str(e)) from e

    logger.info(f"Reading from {path}")
    with fh:
        # a .zst name without the frame magic is read as plain bytes
        if path.endswith(ZSTD_SUFFIX) and fh.peek(len(ZSTD_MAGIC)).startswith(ZSTD_MAGIC):
            dctx = zst.ZstdDecompressor(max_window_size=ZSTD_MAX_WINDOW_SIZE)
            with dctx.stream_reader(fh) as reader:
                yield io.BufferedReader(reader)
        else:
            yield fh


def read_records(stream, limits: Limits = DEFAULT_LIMITS) -> List[bytes]:
    # readline(n) splits an over-long line; the rest becomes the next record
    lines = []
    while len(lines) < limits.max_lines:
        line = stream.readline(limits.max_line_length)
        if not line:
            return lines
        lines.append(line)

    logger.warning(f"Stopped reading at the line cap of {limits.max_lines} lines")
    return lines


def read_lines(path: Optional[str], limits: Limits = DEFAULT_LIMITS, stdin=None) -> List[bytes]:
    """
    Read up to limits.max_lines records of at most limits.max_line_length
    bytes each. Bytes are passed through as read.
    """
    with open_input(path, stdin=stdin) as stream:
        try:
            lines = read_records(stream, limits)
        except zst.ZstdError as e:
            raise DecompressionError(path, e) from e

    logger.debug(f"Read {len(lines)} lines")
    return lines
