class HeadError(Exception):
    """Base class for errors reported to the user before exiting."""

    exit_code = 1
    show_help_hint = False


class InvalidArgument(HeadError):
    show_help_hint = True


class UnrecognizedOption(HeadError):
    show_help_hint = True

    def __init__(self, option):
        super().__init__(f"Unexpected parameter: {option}")
        self.option = option


class FileOpenError(HeadError):
    def __init__(self, path, reason):
        super().__init__(f"Error opening file {path}: {reason}")
        self.path = path


class DecompressionError(HeadError):
    def __init__(self, path, reason):
        super().__init__(f"Zstandard decompression error in {path}: {reason}")
        self.path = path
