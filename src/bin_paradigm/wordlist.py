"""Word list store: roots to study, with a category and a definition."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import NamedTuple

from bin_paradigm.models import Category, parse_category

logger = logging.getLogger(__name__)

DEFAULT_DEFINITION = "—"


class WordKey(NamedTuple):
    """A word list key: one root under one category."""

    root: str
    category: Category


class WordList:
    """Definitions keyed by ``(root, category)``, in first-seen order."""

    def __init__(self) -> None:
        self._entries: dict[WordKey, str] = {}

    def add(self, root: str, category: Category, definition: str = DEFAULT_DEFINITION) -> None:
        """Add or replace the definition of *root* under *category*."""
        self._entries[WordKey(root, category)] = definition

    def definition(self, root: str, category: Category) -> str | None:
        return self._entries.get(WordKey(root, category))

    def items(self) -> Iterator[tuple[WordKey, str]]:
        return iter(self._entries.items())

    def roots(self, category: Category) -> list[str]:
        """Roots listed under *category*."""
        return [key.root for key in self._entries if key.category is category]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def load_wordlist(source: Iterable[str]) -> WordList:
    """Load a tab separated word list: root, category, optional definition.

    Records with fewer than two fields are ignored; records with an unknown
    category are skipped with a warning.
    """
    wordlist = WordList()
    reader = csv.reader(source, delimiter="\t")
    for record in reader:
        if len(record) < 2:
            continue
        root, raw_category = record[0], record[1]
        category = parse_category(raw_category)
        if category is None:
            logger.warning(
                f"Skipping {root!r} on line {reader.line_num}: unknown category {raw_category!r}"
            )
            continue
        definition = record[2] if len(record) > 2 else DEFAULT_DEFINITION
        wordlist.add(root, category, definition)
    return wordlist


def load_wordlist_file(path: str | Path, *, encoding: str = "utf-8") -> WordList:
    """Load a word list from a file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding=encoding, newline="") as f:
        return load_wordlist(f)
