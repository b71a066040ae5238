# src/picklist_parser/loader/line_reader.py

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional, Tuple

from picklist_parser.core.exceptions import LineTooLongError, PicklistIOError

DEFAULT_MAX_LINE_LENGTH = 1024

_LF = b"\n"
_CR = b"\r"


class LineReader:
    """
    Pull logical lines, one at a time, from a binary stream.

    The stream is read byte by byte so lines of any length up to
    ``max_line_length`` are accepted. ``\\r`` bytes are dropped wherever they
    appear and the ``\\n`` terminator is stripped. End of stream in the
    middle of a line ends that line.
    """

    def __init__(
        self,
        stream: BinaryIO,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        encoding: str = "utf-8",
    ) -> None:
        if max_line_length < 1:
            raise ValueError("max_line_length must be positive")
        self.stream = stream
        self.max_line_length = max_line_length
        self.encoding = encoding
        self.lineno = 0
        self._eof = False

    def _read_byte(self) -> bytes:
        try:
            return self.stream.read(1)
        except (OSError, ValueError) as exc:
            raise PicklistIOError(
                f"Couldn't read from the document stream: {exc}",
                lineno=self.lineno + 1,
            ) from exc

    def _discard_rest_of_line(self) -> None:
        while True:
            c = self._read_byte()
            if not c:
                self._eof = True
                return
            if c == _LF:
                return

    def read_line(self) -> Optional[str]:
        """
        Read the next line.

        Returns:
            The line without its terminator (``""`` for a blank line), or
            None once the stream is exhausted.

        Raises:
            LineTooLongError: if the line exceeds ``max_line_length``. The rest
                of that line is consumed, so reading may continue.
            PicklistIOError: if the underlying stream fails.
        """
        if self._eof:
            return None

        buf = bytearray()
        read_any = False
        while True:
            c = self._read_byte()
            if not c:
                self._eof = True
                if not read_any:
                    return None
                break

            read_any = True
            if c == _LF:
                break
            if c == _CR:
                continue

            if len(buf) >= self.max_line_length:
                self.lineno += 1
                self._discard_rest_of_line()
                raise LineTooLongError(
                    f"Line is longer than {self.max_line_length} bytes",
                    lineno=self.lineno,
                )
            buf += c

        self.lineno += 1
        return buf.decode(self.encoding, errors="replace")

    def iter_lines(self) -> Iterator[Tuple[int, str]]:
        """Yield ``(lineno, line)`` pairs until end of stream."""
        while True:
            line = self.read_line()
            if line is None:
                return
            yield self.lineno, line
