"""Personal pronoun lemma redirection.

BÍN files the plural personal pronouns under their singular headword
("við" is stored as the plural rows of "ég"), so a surface lemma has to be
mapped to the stored lemma plus the number its forms are tagged with.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from bin_paradigm.models import GrammaticalNumber

_SG = GrammaticalNumber.SINGULAR
_PL = GrammaticalNumber.PLURAL


class PronounRedirect(NamedTuple):
    """Where a surface pronoun lemma's forms are stored."""

    storage_lemma: str
    number: GrammaticalNumber


PRONOUN_REDIRECTS = MappingProxyType({
    "ég": PronounRedirect("ég", _SG),
    "við": PronounRedirect("ég", _PL),
    "þú": PronounRedirect("þú", _SG),
    "þið": PronounRedirect("þú", _PL),
    "hann": PronounRedirect("hann", _SG),
    "þeir": PronounRedirect("hann", _PL),
    "hún": PronounRedirect("hún", _SG),
    "þær": PronounRedirect("hún", _PL),
    "það": PronounRedirect("það", _SG),
    "þau": PronounRedirect("það", _PL),
})


def resolve_pronoun(lemma: str) -> PronounRedirect | None:
    """Return the redirect for a surface pronoun lemma, or None."""
    return PRONOUN_REDIRECTS.get(lemma)
