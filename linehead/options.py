"""
Command-line option parsing.

    linehead [-n K | -e | -o] [-V] [-h] [FILE]

The last of -n/-e/-o wins. -V and -h win over everything else, whichever
comes first, and are resolved before any other argument is validated.
"""
import argparse
import enum
import re
from dataclasses import dataclass
from typing import Optional

from linehead.config import DEFAULT_LIMITS, Limits, PROG_NAME
from linehead.errors import InvalidArgument, UnrecognizedOption

# strtol accepts leading whitespace and a sign, nothing after the digits
COUNT_PATTERN = re.compile(r'\s*[+-]?\d+', re.ASCII)


class Mode(enum.Enum):
    NORMAL = 'n'
    EVEN = 'e'
    ODD = 'o'


class Info(enum.Enum):
    HELP = 'h'
    VERSION = 'V'


@dataclass(frozen=True)
class Options:
    mode: Mode = Mode.NORMAL
    count: int = DEFAULT_LIMITS.default_count
    path: Optional[str] = None
    info: Optional[Info] = None


class _CountAction(argparse.Action):
    """-n K: switch back to normal mode and remember the raw K."""

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.mode = Mode.NORMAL
        namespace.count = values


class _InfoAction(argparse.Action):
    """-h / -V: only the first one given counts."""

    def __init__(self, option_strings, dest, const, **kwargs):
        super().__init__(option_strings, dest, nargs=0, const=const, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        if namespace.info is None:
            namespace.info = self.const
        if parser.info is None:
            parser.info = self.const


class _Parser(argparse.ArgumentParser):
    info = None

    # argparse would print usage and exit(2)
    def error(self, message):
        raise InvalidArgument(f"Invalid argument: {message}")


def build_parser():
    parser = _Parser(prog=PROG_NAME, add_help=False, allow_abbrev=False)
    parser.add_argument("-n", dest="count", metavar="K", action=_CountAction)
    parser.add_argument("-e", dest="mode", action="store_const", const=Mode.EVEN)
    parser.add_argument("-o", dest="mode", action="store_const", const=Mode.ODD)
    parser.add_argument("-V", dest="info", action=_InfoAction, const=Info.VERSION)
    parser.add_argument("-h", dest="info", action=_InfoAction, const=Info.HELP)
    parser.add_argument("path", nargs="?", default=None)
    parser.set_defaults(mode=Mode.NORMAL, count=None, info=None)
    return parser


def split_clusters(argv):
    """
    Expand getopt-style clusters such as -eo or -eVn3 into single flags.

    argparse rejects an unknown letter inside a cluster before running the
    actions that follow it, so -ex -h would never reach -h. Split here and
    let unknown letters end up in the extras like any other unknown flag.
    """
    argv = list(argv)
    args = []
    expects_count = False
    for index, arg in enumerate(argv):
        if expects_count:
            # value of a detached -n, even when it looks like a flag
            args.append(arg)
            expects_count = False
        elif arg == "--":
            args.extend(argv[index:])
            break
        elif len(arg) <= 2 or not arg.startswith("-") or arg.startswith("--"):
            args.append(arg)
            expects_count = arg == "-n"
        else:
            for i, letter in enumerate(arg[1:], 1):
                if letter == "n":
                    # K is the rest of the cluster, or else the next argument
                    count = arg[i + 1:]
                    args.append("-n" + count)
                    expects_count = not count
                    break
                args.append("-" + letter)
    return args


def parse_count(value: str) -> int:
    if not COUNT_PATTERN.fullmatch(value):
        raise InvalidArgument(f"Invalid argument K '{value}', must be a positive integer")
    count = int(value)
    if count <= 0:
        raise InvalidArgument(f"Invalid argument K '{value}', must be a positive integer")
    return count


def parse_options(argv, limits: Limits = DEFAULT_LIMITS) -> Options:
    parser = build_parser()
    try:
        args, extras = parser.parse_known_args(split_clusters(argv))
    except InvalidArgument:
        # a malformed -n after -h or -V must not hide them
        if parser.info is not None:
            return Options(info=parser.info)
        raise

    if args.info is not None:
        return Options(info=args.info)

    for extra in extras:
        if extra.startswith("-") and extra != "-":
            raise UnrecognizedOption(extra)
    if extras:
        raise InvalidArgument(f"Unexpected extra argument: {extras[0]}")

    count = limits.default_count if args.count is None else parse_count(args.count)
    return Options(mode=args.mode, count=count, path=args.path)
