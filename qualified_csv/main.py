import io

from fastapi import FastAPI, UploadFile, File, HTTPException, Query
from pydantic import ValidationError

from .models import Dialect, HealthResponse, ParseResponse, ParseSummary, WriteRequest, WriteResponse
from .reader import decode_bytes, parse_text
from .rules import ACCEPTED_EXTENSIONS, DEFAULT_DELIMITER, DEFAULT_TEXT_QUALIFIER
from .sinks import StreamSink, write_records

app = FastAPI(
    title="qualified-csv",
    description="Delimited text tokenizing with a configurable delimiter and text qualifier",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/parse", response_model=ParseResponse)
async def parse_file(
    file: UploadFile = File(...),
    delimiter: str = Query(DEFAULT_DELIMITER),
    text_qualifier: str = Query(DEFAULT_TEXT_QUALIFIER),
):
    if not (file.filename or "").lower().endswith(ACCEPTED_EXTENSIONS):
        raise HTTPException(status_code=422, detail="Only delimited text files are supported")

    try:
        dialect = Dialect(delimiter=delimiter, text_qualifier=text_qualifier)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False))

    raw = await file.read()
    text, encoding = decode_bytes(raw)
    records = parse_text(text, dialect)

    return ParseResponse(
        records=records,
        summary=ParseSummary(
            rows=len(records),
            max_columns=max((len(r) for r in records), default=0),
            encoding=encoding,
        ),
    )

@app.post("/write", response_model=WriteResponse)
def write(request: WriteRequest):
    buf = io.StringIO(newline="")
    sink = StreamSink(buf, terminator=request.dialect.line_terminator)
    lines = write_records(request.records, sink, request.dialect)
    return WriteResponse(content=buf.getvalue(), lines=lines)
