"""Tests for the word list store and the export pipeline."""

import io
import json
import logging

import yaml

from bin_paradigm import Category, noun, personal_pronoun
from bin_paradigm.exporter import (
    PluralRow,
    dump_json,
    dump_yaml,
    noun_plural_rows,
    paradigm_to_dict,
)
from bin_paradigm.wordlist import (
    DEFAULT_DEFINITION,
    WordKey,
    load_wordlist,
    load_wordlist_file,
)


class TestWordList:
    """Tab separated word lists."""

    def test_load(self):
        wl = load_wordlist(io.StringIO(
            "foo\tnoun\tdefinition of foo\n"
            "bar\tverb\tdefinition of bar\n"
            "baz\tadjective\tdefinition of baz\n"
        ))
        assert wl.definition("foo", Category.NOUN) == "definition of foo"
        assert wl.definition("bar", Category.VERB) == "definition of bar"
        assert wl.definition("baz", Category.ADJECTIVE) == "definition of baz"
        assert wl.definition("baz", Category.NOUN) is None

    def test_default_definition(self):
        wl = load_wordlist(["hús\tnoun"])
        assert wl.definition("hús", Category.NOUN) == DEFAULT_DEFINITION

    def test_plural_category_names(self):
        wl = load_wordlist(["hús\tNouns\thouse"])
        assert WordKey("hús", Category.NOUN) in wl

    def test_later_entry_replaces_earlier(self):
        wl = load_wordlist(["hús\tnoun\tone", "hús\tnoun\ttwo"])
        assert len(wl) == 1
        assert wl.definition("hús", Category.NOUN) == "two"

    def test_skips_short_and_unknown(self, wordlist_path, caplog):
        with caplog.at_level(logging.WARNING, logger="bin_paradigm.wordlist"):
            wl = load_wordlist_file(wordlist_path)
        assert len(wl) == 6
        assert "gibberish" in caplog.text
        assert wl.roots(Category.NOUN) == ["aðalhenda", "aðalhellir", "aðalatriði", "hvalur"]


class TestParadigmToDict:
    """Plain-data rendering of paradigms."""

    def test_noun_dict(self, index):
        data = paradigm_to_dict(noun(index, "aðalatriði"))
        assert data["headword"] == "aðalatriði"
        assert data["category"] == "noun"
        assert data["gender"] == "neuter"
        assert "dat_pl" not in data["cells"]

    def test_include_missing(self, index):
        data = paradigm_to_dict(noun(index, "aðalatriði"), include_missing=True)
        assert len(data["cells"]) == 16
        assert data["cells"]["dat_pl"] is None

    def test_no_gender_key_for_pronouns(self, index):
        assert "gender" not in paradigm_to_dict(personal_pronoun(index, "við"))

    def test_yaml_keeps_icelandic_letters(self, index):
        text = dump_yaml([paradigm_to_dict(noun(index, "aðalhenda"))])
        assert "aðalhendurnar" in text
        assert yaml.safe_load(text)[0]["cells"]["gen_pl"] == "aðalhendna"

    def test_json(self, index):
        text = dump_json([paradigm_to_dict(personal_pronoun(index, "við"))])
        assert json.loads(text)[0]["cells"]["gen"] == "okkar"
        assert "\\u" not in text


class TestNounPluralRows:
    """Singular/plural study rows."""

    def test_rows(self, index, wordlist_path):
        rows = noun_plural_rows(index, load_wordlist_file(wordlist_path))
        assert rows == [
            PluralRow("aðalhenda", "aðalhendur", "fem.", "a principal rhyme"),
            PluralRow("aðalhellir", "aðalhellar", "masc.", "main cave"),
            PluralRow("aðalatriði", "aðalatriði", "neut.", DEFAULT_DEFINITION),
        ]

    def test_missing_nouns_skipped(self, index):
        wl = load_wordlist(["hvalur\tnoun\twhale", "fallegur\tnoun\tbeautiful"])
        assert noun_plural_rows(index, wl) == []
