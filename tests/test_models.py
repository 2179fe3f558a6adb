import pytest
from pydantic import ValidationError

from qualified_csv.models import DEFAULT_DIALECT, Dialect


def test_defaults():
    assert DEFAULT_DIALECT.delimiter == ","
    assert DEFAULT_DIALECT.text_qualifier == '"'
    assert DEFAULT_DIALECT.line_terminator == "\r\n"

@pytest.mark.parametrize(
    "kwargs",
    [
        {"delimiter": ";;"},
        {"delimiter": ""},
        {"text_qualifier": "''"},
        {"delimiter": "|", "text_qualifier": "|"},
        {"line_terminator": ""},
        {"delimiter": "\n"},
    ],
)
def test_invalid_dialects(kwargs):
    with pytest.raises(ValidationError):
        Dialect(**kwargs)

def test_dialect_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_DIALECT.delimiter = ";"
