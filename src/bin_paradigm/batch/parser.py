"""
YAML parser for paradigm query requests.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..exceptions import ParseError
from ..loader import DEFAULT_DELIMITER
from ..models import parse_category
from .schema import QUERY_FIELDS, DatasetSpec, Query, QueryRequest


def load_query_request(
    source: Union[str, Path, Dict[str, Any]],
) -> QueryRequest:
    """Load a query request from a YAML file, YAML string or dictionary.

    A relative dataset path in a file is resolved against the file's
    directory.

    Raises:
        ParseError: If the content cannot be parsed or is invalid
        FileNotFoundError: If the request file does not exist
    """
    source_path: Optional[Path] = None

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        source_path = Path(source)
        if not source_path.exists():
            raise FileNotFoundError(f"File not found: {source_path}")
        with open(source_path, "r", encoding="utf-8") as f:
            data = _load_yaml(f.read())
    else:
        data = _load_yaml(source)

    return _parse_query_request(data, source_path)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(text: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise ParseError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        raise ParseError("Empty YAML content")
    if not isinstance(data, dict):
        raise ParseError("YAML root must be a mapping (dictionary)")

    return data


def _parse_query_request(
    data: Dict[str, Any],
    source_path: Optional[Path] = None,
) -> QueryRequest:
    """Parse a dictionary into a QueryRequest."""
    dataset_data = data.get("dataset")
    if dataset_data is None:
        raise ParseError("Missing required field: 'dataset'")
    if not isinstance(dataset_data, dict):
        raise ParseError("Field 'dataset' must be a mapping")

    dataset = _parse_dataset(dataset_data, source_path)

    queries_data = data.get("queries")
    if queries_data is None:
        raise ParseError("Missing required field: 'queries'")
    if not isinstance(queries_data, list):
        raise ParseError("Field 'queries' must be a list")
    if len(queries_data) == 0:
        raise ParseError("Field 'queries' cannot be empty")

    return QueryRequest(
        dataset=dataset,
        queries=_parse_queries(queries_data),
        source_file=source_path,
    )


def _parse_dataset(data: Dict[str, Any], source_path: Optional[Path]) -> DatasetSpec:
    path = data.get("path")
    if not path:
        raise ParseError("Missing required field: 'dataset.path'")
    if not isinstance(path, str):
        raise ParseError("Field 'dataset.path' must be a string")

    delimiter = data.get("delimiter", DEFAULT_DELIMITER)
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ParseError("Field 'dataset.delimiter' must be a single character")

    encoding = data.get("encoding", "utf-8")
    if not isinstance(encoding, str):
        raise ParseError("Field 'dataset.encoding' must be a string")

    dataset_path = Path(path)
    if source_path is not None and not dataset_path.is_absolute():
        dataset_path = source_path.parent / dataset_path

    return DatasetSpec(path=dataset_path, delimiter=delimiter, encoding=encoding)


def _parse_queries(queries_data: List[Any]) -> List[Query]:
    """Parse a list of query dictionaries into Query objects."""
    queries = []

    for i, query_data in enumerate(queries_data):
        if not isinstance(query_data, dict):
            raise ParseError(f"Query #{i + 1} must be a mapping (dictionary)")

        for name in QUERY_FIELDS:
            value = query_data.get(name)
            if not value:
                raise ParseError(f"Query #{i + 1}: Missing required field '{name}'")
            if not isinstance(value, str):
                raise ParseError(f"Query #{i + 1}: Field '{name}' must be a string")

        category = parse_category(query_data["category"])
        if category is None:
            raise ParseError(
                f"Query #{i + 1}: Unknown category {query_data['category']!r}"
            )

        queries.append(Query(category=category, headword=query_data["headword"]))

    return queries
