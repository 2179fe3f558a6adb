from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .rules import DEFAULT_DELIMITER, DEFAULT_TEXT_QUALIFIER, LINE_TERMINATOR


class Dialect(BaseModel):
    """
    Characters that shape a delimited file.

    Passed explicitly to the tokenizer, the reader and the writer; instances are
    immutable so a parse never sees the dialect change under it.
    """

    model_config = ConfigDict(frozen=True)

    delimiter: str = Field(default=DEFAULT_DELIMITER, examples=[",", ";", "\t", "|"])
    text_qualifier: str = Field(default=DEFAULT_TEXT_QUALIFIER, examples=['"', "'"])
    line_terminator: str = Field(default=LINE_TERMINATOR, examples=["\r\n", "\n"])

    @field_validator("delimiter", "text_qualifier")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("must be exactly one character")
        return value

    @field_validator("line_terminator")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="after")
    def _distinct(self) -> "Dialect":
        if self.delimiter == self.text_qualifier:
            raise ValueError("delimiter and text_qualifier must differ")
        if self.delimiter in self.line_terminator or self.text_qualifier in self.line_terminator:
            raise ValueError("line_terminator must not contain the delimiter or text_qualifier")
        return self


DEFAULT_DIALECT = Dialect()


class ParseSummary(BaseModel):
    rows: int = 0
    max_columns: int = 0
    encoding: Optional[str] = Field(default=None, examples=["utf_8", "cp1252"])


class ParseResponse(BaseModel):
    records: List[List[str]] = Field(default_factory=list)
    summary: ParseSummary


class WriteRequest(BaseModel):
    records: List[List[str]]
    dialect: Dialect = Field(default_factory=Dialect)


class WriteResponse(BaseModel):
    content: str
    lines: int = 0


class HealthResponse(BaseModel):
    ok: bool = True
