"""
Single-line field tokenizer.

A line is scanned left to right. Every text qualifier toggles the "inside
quoted text" state; a delimiter splits fields only outside quoted text.

Behaviour kept on purpose:
- qualifier characters stay in the field text (they are never trimmed);
- doubled qualifiers are two toggles, not an escaped qualifier;
- unbalanced qualifiers are not an error, the scan just ends inside quoted text;
- a delimiter at the very end of a line does not open an empty trailing field.
"""

from __future__ import annotations

from typing import Iterable, List

from .models import DEFAULT_DIALECT, Dialect


def tokenize_line(line: str, dialect: Dialect = DEFAULT_DIALECT) -> List[str]:
    if not line:
        return [""]

    delimiter = dialect.delimiter
    qualifier = dialect.text_qualifier
    edge_chars = " " + delimiter

    tokens: List[str] = []
    in_text = False
    last = -1

    for pos, ch in enumerate(line):
        if ch == qualifier:
            in_text = not in_text
        elif ch == delimiter and not in_text:
            # slice includes the delimiter itself; strip removes it again
            tokens.append(line[last + 1 : pos + 1].strip(edge_chars))
            last = pos

    if last != len(line) - 1:
        tokens.append(line[last + 1 :].strip())

    return tokens


def tokenize_lines(lines: Iterable[str], dialect: Dialect = DEFAULT_DIALECT) -> List[List[str]]:
    """Tokenize every line in order, one record per line."""
    return [tokenize_line(line, dialect) for line in lines]


def ends_in_text(line: str, dialect: Dialect = DEFAULT_DIALECT) -> bool:
    """True when the line holds an odd number of text qualifiers."""
    return line.count(dialect.text_qualifier) % 2 == 1
