"""bin-paradigm: inflectional paradigms from the BÍN dataset."""

__version__ = "0.1.0"

from bin_paradigm.exceptions import (
    DataLoadError as DataLoadError,
    ParadigmError as ParadigmError,
    ParseError as ParseError,
)
from bin_paradigm.index import LexicalIndex as LexicalIndex
from bin_paradigm.loader import (
    load_index as load_index,
    load_index_file as load_index_file,
)
from bin_paradigm.models import (
    Category as Category,
    Gender as Gender,
    GrammaticalNumber as GrammaticalNumber,
    LexicalRow as LexicalRow,
    Paradigm as Paradigm,
    WordClass as WordClass,
    parse_category as parse_category,
)
from bin_paradigm.paradigms import (
    adjective as adjective,
    adjective_comparison as adjective_comparison,
    build as build,
    indefinite_pronoun as indefinite_pronoun,
    noun as noun,
    number as number,
    personal_pronoun as personal_pronoun,
    verb as verb,
)
from bin_paradigm.pronouns import (
    PRONOUN_REDIRECTS as PRONOUN_REDIRECTS,
    PronounRedirect as PronounRedirect,
    resolve_pronoun as resolve_pronoun,
)

# Query requests - import as submodule
from bin_paradigm import batch

__all__ = [
    "batch",
    # Exceptions
    "ParadigmError",
    "DataLoadError",
    "ParseError",
    # Models
    "Category",
    "Gender",
    "GrammaticalNumber",
    "LexicalRow",
    "Paradigm",
    "WordClass",
    "parse_category",
    # Loading
    "LexicalIndex",
    "load_index",
    "load_index_file",
    # Builders
    "adjective",
    "adjective_comparison",
    "build",
    "indefinite_pronoun",
    "noun",
    "number",
    "personal_pronoun",
    "verb",
    # Pronoun redirection
    "PRONOUN_REDIRECTS",
    "PronounRedirect",
    "resolve_pronoun",
]
