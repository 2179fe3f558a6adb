"""
Reading delimited text.

Files are read fully into memory, decoded, split on the dialect's line
terminator and tokenized line by line. I/O errors are not caught here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple, Union

from charset_normalizer import from_bytes

from .models import DEFAULT_DIALECT, Dialect
from .tokenizer import ends_in_text, tokenize_lines

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

UTF8_BOM = b"\xef\xbb\xbf"


def decode_bytes(raw: bytes) -> Tuple[str, str]:
    """
    Decode file bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is consumed, never returned as text.
    - If decode fails, fall back to UTF-8, then UTF-8 with replacement characters.

    Returns (text, encoding actually used).
    """
    if raw.startswith(UTF8_BOM):
        decode_used = "utf-8-sig"
    else:
        match = from_bytes(raw).best()
        decode_used = match.encoding if match is not None else "utf-8"

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
        except UnicodeDecodeError:
            logger.warning("Could not decode input cleanly; replacing invalid bytes")
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"

    logger.debug("Decoded %d bytes using %s", len(raw), decode_used)
    return text, decode_used


def read_text(path: PathLike) -> str:
    """Contents of a file as one string."""
    text, _ = decode_bytes(Path(path).read_bytes())
    return text


def split_lines(text: str, dialect: Dialect = DEFAULT_DIALECT) -> List[str]:
    """Split on the line terminator, dropping empty lines."""
    return [line for line in text.split(dialect.line_terminator) if line]


def read_lines(path: PathLike, dialect: Dialect = DEFAULT_DIALECT) -> List[str]:
    return split_lines(read_text(path), dialect)


def parse_text(text: str, dialect: Dialect = DEFAULT_DIALECT) -> List[List[str]]:
    """Tokenized records of delimited text held in memory."""
    lines = split_lines(text, dialect)
    for number, line in enumerate(lines, start=1):
        if ends_in_text(line, dialect):
            logger.debug("Line %d ends inside quoted text", number)
    logger.debug("Tokenizing %d lines", len(lines))
    return tokenize_lines(lines, dialect)


def read_records(path: PathLike, dialect: Dialect = DEFAULT_DIALECT) -> List[List[str]]:
    """Tokenized records of a file, one per non-empty line."""
    logger.debug("Reading records from %s", path)
    return parse_text(read_text(path), dialect)
