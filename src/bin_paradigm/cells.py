"""Paradigm cell tables: slot name to the BÍN tag code(s) that fill it.

Every table is a tuple of ``(slot, tags)`` pairs. A slot is filled by the
first row whose tag is one of ``tags``; all tables except the number table
accept exactly one tag per slot.
"""

from __future__ import annotations

from bin_paradigm.models import Category, GrammaticalNumber, WordClass

CellTable = tuple[tuple[str, tuple[str, ...]], ...]

# Axes, as (slot fragment, tag fragment).
CASES: tuple[tuple[str, str], ...] = (
    ("nom", "NF"),
    ("acc", "ÞF"),
    ("dat", "ÞGF"),
    ("gen", "EF"),
)
NUMBERS: tuple[tuple[str, str], ...] = (
    ("sg", GrammaticalNumber.SINGULAR.value),
    ("pl", GrammaticalNumber.PLURAL.value),
)
GENDERS: tuple[tuple[str, str], ...] = (
    ("masc", "KK"),
    ("fem", "KVK"),
    ("neut", "HK"),
)
PERSONS: tuple[tuple[str, str], ...] = (
    ("1p", "1P"),
    ("2p", "2P"),
    ("3p", "3P"),
)

DEFINITE_SUFFIX = "gr"


def _gendered(prefix: str, suffix: str) -> CellTable:
    """Gender x number x case grid under one tag prefix (e.g. ``FSB-``)."""
    return tuple(
        (f"{g}_{c}_{n}{suffix}", (f"{prefix}{gt}-{ct}{nt}",))
        for n, nt in NUMBERS
        for g, gt in GENDERS
        for c, ct in CASES
    )


NOUN_CELLS: CellTable = tuple(
    (f"{c}_{n}", (f"{ct}{nt}",)) for n, nt in NUMBERS for c, ct in CASES
) + tuple(
    (f"{c}_{n}_def", (f"{ct}{nt}{DEFINITE_SUFFIX}",)) for n, nt in NUMBERS for c, ct in CASES
)

# FSB: strong (indefinite) positive, FVB: weak (definite) positive.
ADJECTIVE_CELLS: CellTable = _gendered("FSB-", "_strong") + _gendered("FVB-", "_weak")

# MST: comparative, ESB/EVB: strong/weak superlative.
ADJECTIVE_COMPARISON_CELLS: CellTable = (
    _gendered("MST-", "_comparative")
    + _gendered("ESB-", "_superlative_strong")
    + _gendered("EVB-", "_superlative_weak")
)

INDEFINITE_PRONOUN_CELLS: CellTable = _gendered("", "")

# Numbers do not contrast singular and plural the way nouns do, so each
# gender/case slot takes whichever of the two codes occurs first.
NUMBER_CELLS: CellTable = tuple(
    (f"{g}_{c}", tuple(f"{gt}-{ct}{nt}" for _, nt in NUMBERS))
    for g, gt in GENDERS
    for c, ct in CASES
)

# Active voice (GM), indicative mood (FH), present (NT) and past (ÞT) only.
# TODO: subjunctive (VH), mediopassive (MM), imperative and participles.
VERB_CELLS: CellTable = tuple(
    (f"{t}_ind_{p}_{n}", (f"GM-FH-{tt}-{pt}-{nt}",))
    for t, tt in (("pres", "NT"), ("past", "ÞT"))
    for n, nt in NUMBERS
    for p, pt in PERSONS
)

# Personal pronoun slots carry only the case; the number comes from the
# lemma redirect (see bin_paradigm.pronouns).
PERSONAL_PRONOUN_CASES: tuple[tuple[str, str], ...] = CASES

NOUN_CLASSES = frozenset({
    WordClass.MASCULINE_NOUN.value,
    WordClass.FEMININE_NOUN.value,
    WordClass.NEUTER_NOUN.value,
})
ADJECTIVE_CLASSES = frozenset({WordClass.ADJECTIVE.value})
VERB_CLASSES = frozenset({WordClass.VERB.value})
INDEFINITE_PRONOUN_CLASSES = frozenset({WordClass.INDEFINITE_PRONOUN.value})
NUMBER_CLASSES = frozenset({WordClass.NUMBER.value})

# Category -> (accepted word classes, cell table) for table-driven builders.
CATEGORY_TABLES: dict[Category, tuple[frozenset[str], CellTable]] = {
    Category.NOUN: (NOUN_CLASSES, NOUN_CELLS),
    Category.ADJECTIVE: (ADJECTIVE_CLASSES, ADJECTIVE_CELLS),
    Category.ADJECTIVE_COMPARISON: (ADJECTIVE_CLASSES, ADJECTIVE_COMPARISON_CELLS),
    Category.VERB: (VERB_CLASSES, VERB_CELLS),
    Category.INDEFINITE_PRONOUN: (INDEFINITE_PRONOUN_CLASSES, INDEFINITE_PRONOUN_CELLS),
    Category.NUMBER: (NUMBER_CLASSES, NUMBER_CELLS),
}


def slot_names(category: Category) -> tuple[str, ...]:
    """Slot names of *category*, in table order."""
    if category is Category.PERSONAL_PRONOUN:
        return tuple(c for c, _ in PERSONAL_PRONOUN_CASES)
    return tuple(slot for slot, _ in CATEGORY_TABLES[category][1])
