"""Dataset loader: delimited BÍN rows into a LexicalIndex."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from bin_paradigm.exceptions import DataLoadError
from bin_paradigm.index import LexicalIndex
from bin_paradigm.models import LexicalRow

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"

# headword, id, word class, register, form, tag
FIELD_COUNT = 6


def load_index(
    source: Iterable[str],
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> LexicalIndex:
    """Load a whole dataset stream into a LexicalIndex.

    *source* is a text stream or any iterable of lines. There is no header
    row. Any malformed record aborts the load with DataLoadError; a partial
    index is never returned.
    """
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")

    reader = csv.reader(source, delimiter=delimiter)
    pairs: list[tuple[str, LexicalRow]] = []
    try:
        for record in reader:
            if not record:
                continue
            pairs.append(_parse_record(record, reader.line_num))
    except csv.Error as e:
        raise DataLoadError(str(e), line=reader.line_num) from e
    except UnicodeDecodeError as e:
        # the undecodable line has not been counted yet
        raise DataLoadError(f"cannot decode input: {e.reason}", line=reader.line_num + 1) from e

    index = LexicalIndex.from_rows(pairs)
    logger.info(f"Loaded {index.row_count} rows for {len(index)} headwords")
    return index


def load_index_file(
    path: str | Path,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = "utf-8",
) -> LexicalIndex:
    """Load a dataset file into a LexicalIndex."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    logger.debug(f"Loading dataset from {path}")
    with open(path, "r", encoding=encoding, newline="") as f:
        return load_index(f, delimiter=delimiter)


def _parse_record(record: list[str], line: int) -> tuple[str, LexicalRow]:
    """Turn one csv record into a ``(headword, row)`` pair."""
    if len(record) != FIELD_COUNT:
        raise DataLoadError(
            f"expected {FIELD_COUNT} fields, got {len(record)}", line=line
        )

    headword, raw_id, word_class, register, form, tag = record

    for name, value in (
        ("headword", headword),
        ("id", raw_id),
        ("word class", word_class),
        ("form", form),
        ("tag", tag),
    ):
        if not value:
            raise DataLoadError(f"missing required field: {name}", line=line)

    if not (raw_id.isascii() and raw_id.isdigit()):
        raise DataLoadError(f"id must be a non-negative integer, got {raw_id!r}", line=line)

    row = LexicalRow(
        id=int(raw_id),
        word_class=word_class,
        register=register,
        form=form,
        tag=tag,
    )
    return headword, row
