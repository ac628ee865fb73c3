"""
Schema definitions for paradigm query requests.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..loader import DEFAULT_DELIMITER
from ..models import Category, Paradigm

# =============================================================================
# Constants
# =============================================================================

QUERY_FIELDS = ("category", "headword")

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class DatasetSpec:
    """Where and how to read the dataset."""
    path: Path
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = "utf-8"


@dataclass
class Query:
    """Single paradigm lookup."""
    category: Category
    headword: str


@dataclass
class QueryRequest:
    """Parsed query request from YAML."""
    dataset: DatasetSpec
    queries: List[Query]
    source_file: Optional[Path] = None


@dataclass
class QueryResult:
    """Result of one lookup; paradigm is None on a miss."""
    index: int
    query: Query
    paradigm: Optional[Paradigm] = None

    @property
    def found(self) -> bool:
        return self.paradigm is not None


@dataclass
class BatchResult:
    """Result of executing a query request."""
    results: List[QueryResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def found_count(self) -> int:
        return sum(1 for r in self.results if r.found)

    @property
    def miss_count(self) -> int:
        return self.total_count - self.found_count
