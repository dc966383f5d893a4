from __future__ import annotations

"""
Domain Exceptions.

Parsing failures are fatal for the call that triggered them and carry the
raw report line so interfaces can show it to the user.
"""


class DeptreediffError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(DeptreediffError, ValueError):
    """
    Raised when a dependency entry line lacks its coordinate delimiter.

    Attributes:
        line: The offending raw report line.
    """

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Unable to find coordinate delimiter: {line}")


class ReportReadError(DeptreediffError, OSError):
    """
    Raised when a report cannot be read from disk or stdin.

    Attributes:
        path: Location that failed to load.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Unable to read report '{path}': {reason}")
