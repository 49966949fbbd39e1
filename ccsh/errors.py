class ShellError(Exception):
    """Base class for every error raised by ccsh."""


class ParseError(ShellError):
    """A non-blank line has an empty pipe segment."""

    def __init__(self, line):
        self.line = line
        super().__init__("syntax error near unexpected token '|'")


class PipelineError(ShellError):
    """A pipeline stage could not run to a clean exit."""

    def __init__(self, command, message):
        self.command = command
        super().__init__(message)


class CommandStartError(PipelineError):
    def __init__(self, command, cause):
        self.cause = cause
        super().__init__(command, f"{command.name}: {cause}")


class CommandFailedError(PipelineError):
    def __init__(self, command, returncode):
        self.returncode = returncode
        super().__init__(command, f"{command.name}: exited with status {returncode}")


class HistoryError(ShellError):
    """History file could not be read or written."""
