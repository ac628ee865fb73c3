"""Domain model dataclasses and enums for bin-paradigm."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class WordClass(str, Enum):
    """BÍN word class codes the paradigm builders know about."""

    MASCULINE_NOUN = "kk"
    FEMININE_NOUN = "kvk"
    NEUTER_NOUN = "hk"
    ADJECTIVE = "lo"
    VERB = "so"
    INDEFINITE_PRONOUN = "fn"
    PERSONAL_PRONOUN = "pfn"
    NUMBER = "to"


class Gender(str, Enum):
    """Grammatical gender of a noun."""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class GrammaticalNumber(str, Enum):
    """Number marker; the value is the BÍN tag suffix."""

    SINGULAR = "ET"
    PLURAL = "FT"


class Category(str, Enum):
    """Part of speech a paradigm can be reconstructed for."""

    NOUN = "noun"
    ADJECTIVE = "adjective"
    ADJECTIVE_COMPARISON = "adjective_comparison"
    VERB = "verb"
    PERSONAL_PRONOUN = "personal_pronoun"
    INDEFINITE_PRONOUN = "indefinite_pronoun"
    NUMBER = "number"


_CATEGORY_ALIASES: dict[str, Category] = {
    "nouns": Category.NOUN,
    "adjectives": Category.ADJECTIVE,
    "comparison": Category.ADJECTIVE_COMPARISON,
    "verbs": Category.VERB,
    "pronoun": Category.PERSONAL_PRONOUN,
    "pronouns": Category.PERSONAL_PRONOUN,
    "numbers": Category.NUMBER,
}


def parse_category(value: str | Category) -> Category | None:
    """Return the category named by *value*, or None if it is unknown.

    Matching is case-insensitive, accepts hyphens for underscores and the
    plural spellings used in word lists ("nouns", "verbs", ...).
    """
    if isinstance(value, Category):
        return value
    key = value.strip().lower().replace("-", "_")
    try:
        return Category(key)
    except ValueError:
        return _CATEGORY_ALIASES.get(key)


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LexicalRow:
    """One tagged surface form of a headword."""

    id: int
    word_class: str
    register: str
    form: str
    tag: str


@dataclass(frozen=True, slots=True)
class Paradigm:
    """A reconstructed paradigm: every slot of a category's cell table.

    Slots without a matching row hold None, never an empty string.
    """

    headword: str
    category: Category
    cells: Mapping[str, str | None]
    gender: Gender | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    def __getitem__(self, slot: str) -> str | None:
        return self.cells[slot]

    def get(self, slot: str, default: str | None = None) -> str | None:
        value = self.cells.get(slot)
        return default if value is None else value

    def present(self) -> dict[str, str]:
        """Slots that have a form, in cell-table order."""
        return {k: v for k, v in self.cells.items() if v is not None}

    def missing(self) -> list[str]:
        """Slot names with no form."""
        return [k for k, v in self.cells.items() if v is None]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Paradigm):
            return NotImplemented
        return (
            self.headword == other.headword
            and self.category == other.category
            and self.gender == other.gender
            and dict(self.cells) == dict(other.cells)
        )

    def __hash__(self) -> int:
        return hash((self.headword, self.category, tuple(self.cells.items())))
