"""
Command-line entry point: parse -> read-all -> select-and-print -> exit.
"""

import logging
import os
import sys

from linehead.config import DEFAULT_LIMITS, HELP_TEXT, PROG_NAME, VERSION_TEXT, Limits
from linehead.errors import HeadError
from linehead.logging_config import setup_logging
from linehead.options import Info, parse_options
from linehead.reader import read_lines
from linehead.selector import print_lines

logger = logging.getLogger(__name__)

SUCCESS = 0


def info_text(info: Info) -> str:
    if info is Info.VERSION:
        return VERSION_TEXT
    return HELP_TEXT.format(prog=PROG_NAME)


def run(argv, out, stdin=None, limits: Limits = DEFAULT_LIMITS) -> int:
    options = parse_options(argv, limits)

    if options.info is not None:
        out.write(info_text(options.info).encode())
        out.flush()
        return SUCCESS

    lines = read_lines(options.path, limits, stdin=stdin)
    print_lines(lines, options.mode, options.count, out)
    return SUCCESS


def main(argv=None, limits: Limits = DEFAULT_LIMITS) -> int:
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]

    try:
        return run(argv, sys.stdout.buffer, limits=limits)
    except HeadError as e:
        message = f"{PROG_NAME}: {e}"
        if e.show_help_hint:
            message += ". See the help section with -h for more details"
        print(message, file=sys.stderr)
        return e.exit_code
    except BrokenPipeError:
        # Reader of our output went away (e.g. `linehead big.txt | head -1`)
        logger.debug("Output pipe closed early")
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return SUCCESS
