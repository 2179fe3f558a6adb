"""
Command line entry point.

    qualified-csv INPUT [-o OUTPUT] [--delimiter C] [--qualifier C]

Records are written to OUTPUT, or to stdout when no output path is given.
"""
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .logging_config import setup_logging
from .models import Dialect
from .reader import read_records
from .rules import DEFAULT_DELIMITER, DEFAULT_TEXT_QUALIFIER
from .sinks import FileSink, LineSink, StdoutSink, write_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qualified-csv",
        description="Tokenize a delimited text file and write the records back out.",
    )
    parser.add_argument("input", help="path of the delimited file to read")
    parser.add_argument("-o", "--output", default=None, help="path to write to (default: stdout)")
    parser.add_argument("--delimiter", default=DEFAULT_DELIMITER)
    parser.add_argument("--qualifier", default=DEFAULT_TEXT_QUALIFIER)
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level))

    try:
        dialect = Dialect(delimiter=args.delimiter, text_qualifier=args.qualifier)
    except ValidationError as exc:
        parser.error(f"invalid dialect: {exc.errors()[0]['msg']}")

    sink: LineSink = FileSink(args.output, dialect) if args.output else StdoutSink()

    try:
        records = read_records(args.input, dialect)
        written = write_records(records, sink, dialect)
    except OSError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("wrote %d records", written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
