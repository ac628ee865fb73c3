"""
Executor for paradigm query requests.
"""
from __future__ import annotations

import logging
import time
from typing import List, Optional

from ..index import LexicalIndex
from ..loader import load_index_file
from ..paradigms import build
from .schema import BatchResult, QueryRequest, QueryResult

logger = logging.getLogger(__name__)


def execute_query_request(
    request: QueryRequest,
    index: Optional[LexicalIndex] = None,
) -> BatchResult:
    """Run every query of a request.

    Args:
        request: The query request to execute
        index: An already loaded index; the request's dataset is loaded
            when omitted

    Returns:
        BatchResult with one QueryResult per query, misses included

    Raises:
        DataLoadError: If the dataset is malformed
    """
    start_time = time.time()

    if index is None:
        dataset = request.dataset
        index = load_index_file(
            dataset.path,
            delimiter=dataset.delimiter,
            encoding=dataset.encoding,
        )

    results: List[QueryResult] = []
    for i, query in enumerate(request.queries):
        paradigm = build(index, query.category, query.headword)
        if paradigm is None:
            logger.info(
                f"Query #{i + 1}: no {query.category.value} entry for {query.headword!r}"
            )
        results.append(QueryResult(index=i, query=query, paradigm=paradigm))

    return BatchResult(results=results, duration_seconds=time.time() - start_time)
