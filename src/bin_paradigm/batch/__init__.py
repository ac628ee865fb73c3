"""
Paradigm query requests for bin-paradigm.

A query request is a YAML file naming a dataset and a list of lookups.

Example usage:
    from bin_paradigm.batch import load_query_request, execute_query_request

    request = load_query_request("queries.yaml")
    result = execute_query_request(request)
    print(f"Found {result.found_count}/{result.total_count} paradigms")
"""

from .schema import (
    QUERY_FIELDS as QUERY_FIELDS,
    DatasetSpec as DatasetSpec,
    Query as Query,
    QueryRequest as QueryRequest,
    QueryResult as QueryResult,
    BatchResult as BatchResult,
)

from .parser import (
    load_query_request as load_query_request,
)

from .executor import (
    execute_query_request as execute_query_request,
)

__all__ = [
    # Constants
    "QUERY_FIELDS",
    # Data classes
    "DatasetSpec",
    "Query",
    "QueryRequest",
    "QueryResult",
    "BatchResult",
    # Functions
    "load_query_request",
    "execute_query_request",
]
