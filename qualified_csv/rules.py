"""
Delimited text rules.

Defaults for the dialect and the file format live here so they can be read in one place.
"""

DEFAULT_DELIMITER = ","
DEFAULT_TEXT_QUALIFIER = '"'
LINE_TERMINATOR = "\r\n"  # record separator on disk
OUTPUT_ENCODING = "utf-8"
ACCEPTED_EXTENSIONS = (".csv", ".txt", ".tsv")
