"""Tests for the dataset loader and the headword index."""

import io

import pytest

from bin_paradigm import (
    DataLoadError,
    LexicalIndex,
    LexicalRow,
    load_index,
    load_index_file,
)


class TestLoadIndex:
    """Loading the sample extract."""

    def test_headword_and_row_counts(self, index):
        assert len(index) == 12
        assert index.row_count == 262
        assert len(index["aðalhellir"]) == 16
        assert len(index["aðalhenda"]) == 18
        assert len(index["fallegur"]) == 120

    def test_row_fields(self, index):
        row = index["aðalhenda"][0]
        assert row == LexicalRow(
            id=153961, word_class="kvk", register="alm",
            form="aðalhenda", tag="NFET",
        )

    def test_source_order_preserved(self, index):
        assert list(index)[:3] == ["aðalhellir", "aðalhenda", "fallegur"]
        tags = [row.tag for row in index["aðalhenda"]]
        assert tags[-4:] == ["EFFT", "EFFT2", "EFFTgr", "EFFTgr2"]

    def test_homograph_rows_kept_together(self, index):
        classes = [row.word_class for row in index["heiður"]]
        assert classes == ["lo"] * 4 + ["kk"] * 5

    def test_blank_lines_skipped(self):
        idx = load_index(io.StringIO("\nhús;1;hk;alm;hús;NFET\n\n"))
        assert list(idx) == ["hús"]

    def test_custom_delimiter(self):
        idx = load_index(["hús\t1\thk\talm\thúsið\tNFETgr\n"], delimiter="\t")
        assert idx["hús"][0].form == "húsið"

    def test_multi_character_delimiter_rejected(self):
        with pytest.raises(ValueError):
            load_index([], delimiter=";;")

    def test_empty_register_allowed(self):
        idx = load_index(["hús;1;hk;;hús;NFET"])
        assert idx["hús"][0].register == ""


class TestLoadFailures:
    """Malformed records fail the whole load."""

    def test_wrong_column_count(self):
        data = "hús;1;hk;alm;hús;NFET\nhús;1;hk;alm;húsið\n"
        with pytest.raises(DataLoadError) as exc_info:
            load_index(io.StringIO(data))
        assert exc_info.value.line == 2

    def test_too_many_columns(self):
        with pytest.raises(DataLoadError):
            load_index(["hús;1;hk;alm;hús;NFET;extra"])

    def test_non_numeric_id(self):
        with pytest.raises(DataLoadError, match="id"):
            load_index(["hús;x12;hk;alm;hús;NFET"])

    def test_negative_id(self):
        with pytest.raises(DataLoadError):
            load_index(["hús;-1;hk;alm;hús;NFET"])

    def test_missing_tag(self):
        with pytest.raises(DataLoadError, match="tag"):
            load_index(["hús;1;hk;alm;hús;"])

    def test_error_after_valid_rows(self):
        data = ["hús;1;hk;alm;hús;NFET"] * 3 + ["broken"]
        with pytest.raises(DataLoadError) as exc_info:
            load_index(data)
        assert exc_info.value.line == 4
        assert "line 4" in str(exc_info.value)

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_index_file(tmp_path / "missing.csv")

    def test_invalid_utf8(self, tmp_path):
        data = tmp_path / "latin1.csv"
        data.write_bytes("hús;1;hk;alm;hús;NFET\n".encode("latin-1"))
        with pytest.raises(DataLoadError, match="decode") as exc_info:
            load_index_file(data)
        assert exc_info.value.line == 1

    def test_oversized_field(self):
        with pytest.raises(DataLoadError, match="field limit") as exc_info:
            load_index(["hús;1;hk;alm;" + "a" * 200000 + ";NFET"])
        assert exc_info.value.line == 1


class TestLexicalIndex:
    """Read-only mapping behaviour."""

    def test_rows_for_unknown_headword(self, index):
        assert index.rows("ekkert") == ()
        assert "ekkert" not in index

    def test_groups_are_tuples(self, index):
        assert isinstance(index["fallegur"], tuple)

    def test_cannot_assign(self, index):
        with pytest.raises(TypeError):
            index["nýtt"] = ()

    def test_from_rows_groups_in_order(self):
        a = LexicalRow(1, "hk", "alm", "hús", "NFET")
        b = LexicalRow(2, "kk", "alm", "bíll", "NFET")
        c = LexicalRow(1, "hk", "alm", "húsið", "NFETgr")
        idx = LexicalIndex.from_rows([("hús", a), ("bíll", b), ("hús", c)])
        assert list(idx) == ["hús", "bíll"]
        assert idx["hús"] == (a, c)
        assert idx.row_count == 3

    def test_repr(self):
        assert repr(LexicalIndex()) == "LexicalIndex(headwords=0, rows=0)"
