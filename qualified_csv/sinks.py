"""
Writing records.

A record is formatted as its fields joined by the delimiter; the resulting lines
go to a sink chosen by the caller (stdout, a file, any text stream).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, TextIO, Union

from .models import DEFAULT_DIALECT, Dialect
from .rules import OUTPUT_ENCODING

logger = logging.getLogger(__name__)


class LineSink(Protocol):
    def write_lines(self, lines: Iterable[str]) -> int:
        ...


class StreamSink:
    """Writes lines to a text stream; with no stream, to whatever sys.stdout is at write time."""

    def __init__(self, stream: Optional[TextIO] = None, terminator: str = "\n"):
        self.stream = stream
        self.terminator = terminator

    def write_lines(self, lines: Iterable[str]) -> int:
        out = self.stream if self.stream is not None else sys.stdout
        count = 0
        for line in lines:
            out.write(line + self.terminator)
            count += 1
        out.flush()
        return count


class StdoutSink(StreamSink):
    def __init__(self):
        super().__init__(stream=None, terminator="\n")


class FileSink:
    """
    Writes lines to a file, replacing its contents.

    Each line ends with the dialect's line terminator so the file reads back
    with split_lines.
    """

    def __init__(self, path: Union[str, Path], dialect: Dialect = DEFAULT_DIALECT):
        self.path = Path(path)
        self.terminator = dialect.line_terminator

    def write_lines(self, lines: Iterable[str]) -> int:
        # newline="" keeps the terminator exactly as given
        with open(self.path, "w", encoding=OUTPUT_ENCODING, newline="") as fh:
            count = StreamSink(fh, self.terminator).write_lines(lines)
        logger.debug("Wrote %d lines to %s", count, self.path)
        return count


def format_record(record: Iterable[str], dialect: Dialect = DEFAULT_DIALECT) -> str:
    return dialect.delimiter.join(record)


def write_records(
    records: Iterable[Iterable[str]],
    sink: LineSink,
    dialect: Dialect = DEFAULT_DIALECT,
) -> int:
    """Format every record and hand the lines to the sink. Returns the number of lines written."""
    lines: List[str] = [format_record(record, dialect) for record in records]
    return sink.write_lines(lines)
