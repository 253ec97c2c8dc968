from __future__ import annotations
import csv
import logging
import os
from typing import Iterable, List, Sequence, Union

from . import config as CFG
from .config import QUOTE_MIN_FIELDS, TEXT_ENCODING
from .errors import LoadError
from .models import QuoteRecord

log = logging.getLogger(__name__)

# Column layout of the quote table (col 0 is a row number we don't use)
COL_TITLE = 1
COL_LOCATION = 2
COL_SPEAKER = 3
COL_QUOTE = 4


def load_corpus_text(path: str, encoding: str = TEXT_ENCODING) -> str:
    """Read the whole corpus file into memory."""
    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read corpus text: {exc}", path=path) from exc
    log.info("Loaded corpus text from %s: chars=%d", path, len(text))
    return text


def read_quote_rows(path: str, encoding: str = TEXT_ENCODING) -> List[List[str]]:
    """
    Read raw CSV rows. Rows may have any number of fields; blank lines are
    skipped. Malformed CSV (e.g. an unterminated quote) raises LoadError.
    """
    rows: List[List[str]] = []
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            reader = csv.reader(f, strict=True)
            try:
                for row in reader:
                    if row:
                        rows.append(row)
            except csv.Error as exc:
                raise LoadError(f"malformed CSV: {exc}", path=path, row=reader.line_num) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read quote table: {exc}", path=path) from exc
    log.info("Read %d quote rows from %s", len(rows), path)
    return rows


def parse_quote_row(row: Sequence[str], row_no: int | None = None) -> QuoteRecord:
    """Validate one table row and map its columns onto a QuoteRecord."""
    if len(row) < QUOTE_MIN_FIELDS:
        raise LoadError(
            f"quote row has {len(row)} fields, expected at least {QUOTE_MIN_FIELDS}",
            row=row_no,
        )
    return QuoteRecord(
        title=row[COL_TITLE],
        speaker=row[COL_SPEAKER],
        location=row[COL_LOCATION],
        quote=row[COL_QUOTE],
    )


def records_from_rows(rows: Iterable[Sequence[str]]) -> List[QuoteRecord]:
    """Parse every row, failing fast on the first malformed one."""
    records: List[QuoteRecord] = []
    for row_no, row in enumerate(rows, start=1):
        records.append(parse_quote_row(row, row_no))
    if CFG.VERBOSE:
        print(f"[done] quotes={len(records):,}")
    return records


def load_quote_records(path: str, encoding: str = TEXT_ENCODING) -> List[QuoteRecord]:
    rows = read_quote_rows(path, encoding)
    try:
        return records_from_rows(rows)
    except LoadError as exc:
        exc.path = path
        raise


def load_source(path: str, expect: str | None = None) -> Union[str, List[QuoteRecord]]:
    """
    Load a source file by extension:
      .csv -> list of QuoteRecord
      .txt -> corpus text
    With expect (".csv" or ".txt"), any other extension is rejected.
    """
    ext = os.path.splitext(path)[1].lower()
    if expect is not None and ext != expect:
        raise LoadError(f"unsupported file extension, expected {expect}", path=path)
    if ext == ".csv":
        return load_quote_records(path)
    if ext == ".txt":
        return load_corpus_text(path)
    raise LoadError("unsupported file extension", path=path)
