from __future__ import annotations

from typing import Optional

from rich.console import Console

_stderr = Console(stderr=True)


class PicklistError(Exception):
    """
    Base exception for every PickLE failure.

    Each instance carries its own message plus, when known, the line
    number and raw text of the offending line.
    """

    def __init__(
        self,
        message: str,
        *,
        lineno: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.line = line
        super().__init__(self._render())

    def _render(self) -> str:
        text = self.message
        if self.lineno:
            text = f"Line {self.lineno}: {text}"
        if self.line is not None:
            text = f"{text} -> {self.line!r}"
        return text


class PicklistIOError(PicklistError):
    """Raised when a document stream cannot be opened, read or closed."""


class LineTooLongError(PicklistIOError):
    """Raised when a single line exceeds the reader's maximum length."""


class MalformedError(PicklistError, ValueError):
    """Raised when a line violates the PickLE grammar."""


class StructureError(MalformedError):
    """Raised when well-formed lines appear in an invalid order."""


class UnsupportedOperationError(PicklistError, NotImplementedError):
    """Raised for features that are recognised but not implemented."""


class DocumentStateError(PicklistError):
    """Raised when an operation is requested in the wrong lifecycle state."""


def print_error(exc: BaseException) -> None:
    """Print an error message to STDERR in the library's format."""
    _stderr.print(f"ERROR: {exc}", markup=False, highlight=False, soft_wrap=True)
