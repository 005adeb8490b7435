"""
Fixed limits and display text for linehead.
"""
from dataclasses import dataclass

MAX_LINES = 100
MAX_LINE_LENGTH = 100  # bytes per record, line terminator included
DEFAULT_COUNT = 10

# Same window the Reddit dump readers use for .zst input (2 GB)
ZSTD_MAX_WINDOW_SIZE = 2147483648
ZSTD_SUFFIX = ".zst"
ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"

PROG_NAME = "linehead"

VERSION_TEXT = (
    "Program Version: Implementation of head function in Python\n"
    "Name: Abdus'Samad Bhadmus\n"
    "Email: abdus.bhadmus@ucdconnect.ie\n"
    "Student Number: 23405234\n"
)

HELP_TEXT = (
    "Usage: {prog} [OPTION] ... [FILE]\n"
    "-n K output the first K lines\n"
    "-V output version info: name, email, and student number\n"
    "-h display all options (this text) and exit\n"
    "-e|-o print even|odd lines\n"
)


@dataclass(frozen=True)
class Limits:
    max_lines: int = MAX_LINES
    max_line_length: int = MAX_LINE_LENGTH
    default_count: int = DEFAULT_COUNT

    def __post_init__(self):
        if min(self.max_lines, self.max_line_length, self.default_count) < 1:
            raise ValueError(f"Invalid limits: {self}")


DEFAULT_LIMITS = Limits()
