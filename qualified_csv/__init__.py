from .models import DEFAULT_DIALECT, Dialect
from .reader import decode_bytes, parse_text, read_lines, read_records, read_text, split_lines
from .sinks import FileSink, LineSink, StdoutSink, StreamSink, format_record, write_records
from .tokenizer import tokenize_line, tokenize_lines

__all__ = [
    "DEFAULT_DIALECT",
    "Dialect",
    "FileSink",
    "LineSink",
    "StdoutSink",
    "StreamSink",
    "decode_bytes",
    "format_record",
    "parse_text",
    "read_lines",
    "read_records",
    "read_text",
    "split_lines",
    "tokenize_line",
    "tokenize_lines",
    "write_records",
]
