"""Export pipeline: paradigm records to plain data, YAML, JSON and study rows."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any, NamedTuple

import yaml

from bin_paradigm import paradigms
from bin_paradigm.index import LexicalIndex
from bin_paradigm.models import Category, Gender, Paradigm
from bin_paradigm.wordlist import WordList

logger = logging.getLogger(__name__)

GENDER_ABBREVIATIONS = {
    Gender.MASCULINE: "masc.",
    Gender.FEMININE: "fem.",
    Gender.NEUTER: "neut.",
}


class PluralRow(NamedTuple):
    """One noun-plural study item."""

    singular: str
    plural: str
    gender: str
    definition: str


def paradigm_to_dict(paradigm: Paradigm, *, include_missing: bool = False) -> dict[str, Any]:
    """Plain-data form of a paradigm.

    Missing cells are left out unless *include_missing* is set, in which
    case they appear with a None value.
    """
    data: dict[str, Any] = {
        "headword": paradigm.headword,
        "category": paradigm.category.value,
    }
    if paradigm.gender is not None:
        data["gender"] = paradigm.gender.value
    data["cells"] = dict(paradigm.cells) if include_missing else paradigm.present()
    return data


def dump_yaml(records: Iterable[dict[str, Any]]) -> str:
    return yaml.safe_dump(
        list(records), allow_unicode=True, sort_keys=False, default_flow_style=False
    )


def dump_json(records: Iterable[dict[str, Any]]) -> str:
    return json.dumps(list(records), ensure_ascii=False, indent=2)


def noun_plural_rows(index: LexicalIndex, wordlist: WordList) -> list[PluralRow]:
    """Singular/plural/gender/definition rows for the word list's nouns.

    Nouns missing from the index, or without a nominative plural, are
    skipped.
    """
    rows: list[PluralRow] = []
    for root in wordlist.roots(Category.NOUN):
        paradigm = paradigms.noun(index, root)
        if paradigm is None:
            logger.info(f"Skipping {root!r}: no noun entry")
            continue
        plural = paradigm["nom_pl"]
        if plural is None:
            logger.info(f"Skipping {root!r}: no nominative plural")
            continue
        gender = GENDER_ABBREVIATIONS[paradigm.gender]
        definition = wordlist.definition(root, Category.NOUN) or ""
        rows.append(PluralRow(root, plural, gender, definition))
    return rows
