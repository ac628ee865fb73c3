"""Headword index over the loaded dataset."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from bin_paradigm.models import LexicalRow


class LexicalIndex(Mapping[str, tuple[LexicalRow, ...]]):
    """Read-only mapping of headword to its rows, in source order.

    Headwords keep the order in which they first appeared, and rows keep
    their order within each headword. The index is never mutated after
    construction, so it can be shared between threads without locking.
    """

    __slots__ = ("_data", "_row_count")

    def __init__(self, data: Mapping[str, Iterable[LexicalRow]] | None = None) -> None:
        groups = {headword: tuple(rows) for headword, rows in (data or {}).items()}
        self._data: Mapping[str, tuple[LexicalRow, ...]] = MappingProxyType(groups)
        self._row_count = sum(len(rows) for rows in groups.values())

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[str, LexicalRow]]) -> LexicalIndex:
        """Group ``(headword, row)`` pairs into an index."""
        groups: dict[str, list[LexicalRow]] = {}
        for headword, row in rows:
            groups.setdefault(headword, []).append(row)
        return cls(groups)

    def __getitem__(self, headword: str) -> tuple[LexicalRow, ...]:
        return self._data[headword]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, headword: object) -> bool:
        return headword in self._data

    def __repr__(self) -> str:
        return f"LexicalIndex(headwords={len(self)}, rows={self._row_count})"

    @property
    def row_count(self) -> int:
        """Total number of rows across all headwords."""
        return self._row_count

    def rows(self, headword: str) -> tuple[LexicalRow, ...]:
        """Rows for *headword*, or an empty tuple if it is not indexed."""
        return self._data.get(headword, ())
