"""Paradigm builders: headword + index -> Paradigm, or None on a miss.

A miss (headword not indexed, no rows of the requested word class, or an
unknown personal pronoun) is a normal result and is returned as None.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Sequence

from bin_paradigm.cells import (
    CATEGORY_TABLES,
    PERSONAL_PRONOUN_CASES,
    CellTable,
)
from bin_paradigm.index import LexicalIndex
from bin_paradigm.models import Category, Gender, LexicalRow, Paradigm, WordClass, parse_category
from bin_paradigm.pronouns import resolve_pronoun

logger = logging.getLogger(__name__)

_GENDER_BY_CLASS = {
    WordClass.FEMININE_NOUN.value: Gender.FEMININE,
    WordClass.NEUTER_NOUN.value: Gender.NEUTER,
}


def first_form(rows: Sequence[LexicalRow], tags: Collection[str]) -> str | None:
    """Form of the first row whose tag is in *tags*; earlier rows win ties."""
    for row in rows:
        if row.tag in tags:
            return row.form
    return None


def fill_cells(rows: Sequence[LexicalRow], table: CellTable) -> dict[str, str | None]:
    return {slot: first_form(rows, tags) for slot, tags in table}


def filter_rows(
    index: LexicalIndex, headword: str, word_classes: Collection[str]
) -> list[LexicalRow]:
    """Rows of *headword* whose word class is in *word_classes*."""
    return [row for row in index.rows(headword) if row.word_class in word_classes]


def _build(index: LexicalIndex, headword: str, category: Category) -> Paradigm | None:
    word_classes, table = CATEGORY_TABLES[category]
    rows = filter_rows(index, headword, word_classes)
    if not rows:
        logger.debug(f"No {category.value} entry for {headword!r}")
        return None

    gender = None
    if category is Category.NOUN:
        gender = infer_gender(rows)
    return Paradigm(
        headword=headword,
        category=category,
        cells=fill_cells(rows, table),
        gender=gender,
    )


def infer_gender(rows: Sequence[LexicalRow]) -> Gender:
    """Noun gender from the word class of the first row.

    Anything other than a feminine or neuter code counts as masculine.
    """
    return _GENDER_BY_CLASS.get(rows[0].word_class, Gender.MASCULINE)


def noun(index: LexicalIndex, headword: str) -> Paradigm | None:
    """Noun paradigm: 4 cases x 2 numbers, indefinite and definite."""
    return _build(index, headword, Category.NOUN)


def adjective(index: LexicalIndex, headword: str) -> Paradigm | None:
    """Positive-degree adjective paradigm, strong and weak."""
    return _build(index, headword, Category.ADJECTIVE)


def adjective_comparison(index: LexicalIndex, headword: str) -> Paradigm | None:
    """Comparative and superlative adjective forms."""
    return _build(index, headword, Category.ADJECTIVE_COMPARISON)


def verb(index: LexicalIndex, headword: str) -> Paradigm | None:
    """Active indicative present and past, by person and number."""
    return _build(index, headword, Category.VERB)


def indefinite_pronoun(index: LexicalIndex, headword: str) -> Paradigm | None:
    return _build(index, headword, Category.INDEFINITE_PRONOUN)


def number(index: LexicalIndex, headword: str) -> Paradigm | None:
    return _build(index, headword, Category.NUMBER)


def personal_pronoun(index: LexicalIndex, lemma: str) -> Paradigm | None:
    """Case forms of a personal pronoun, following the lemma redirect.

    The stored lemma's rows are not filtered by word class; the redirect's
    number marker selects the singular or plural half of them.
    """
    redirect = resolve_pronoun(lemma)
    if redirect is None:
        logger.debug(f"{lemma!r} is not a known personal pronoun")
        return None

    rows = index.rows(redirect.storage_lemma)
    if not rows:
        logger.debug(f"No entry for {redirect.storage_lemma!r} (from {lemma!r})")
        return None

    suffix = redirect.number.value
    cells = {case: first_form(rows, (f"{code}{suffix}",)) for case, code in PERSONAL_PRONOUN_CASES}
    return Paradigm(headword=lemma, category=Category.PERSONAL_PRONOUN, cells=cells)


BUILDERS: dict[Category, Callable[[LexicalIndex, str], Paradigm | None]] = {
    Category.NOUN: noun,
    Category.ADJECTIVE: adjective,
    Category.ADJECTIVE_COMPARISON: adjective_comparison,
    Category.VERB: verb,
    Category.PERSONAL_PRONOUN: personal_pronoun,
    Category.INDEFINITE_PRONOUN: indefinite_pronoun,
    Category.NUMBER: number,
}


def build(index: LexicalIndex, category: Category | str, headword: str) -> Paradigm | None:
    """Build the paradigm of *headword* for *category*.

    Raises ValueError for an unknown category name; a missing headword is
    not an error and gives None.
    """
    resolved = parse_category(category)
    if resolved is None:
        raise ValueError(f"Unknown category: {category!r}")
    return BUILDERS[resolved](index, headword)
