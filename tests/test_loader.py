"""Unit tests for loader.py — text and spreadsheet reasons files."""

from __future__ import annotations

import logging
import zipfile

import pandas as pd
import pytest

from death import DEFAULT_DEATH_REASONS
from death.errors import ReasonsFileError
from death.loader import load_death_reasons, read_death_reasons


class TestTextFile:
    def test_non_empty_lines(self, tmp_path):
        p = tmp_path / "reasons.txt"
        p.write_text("falling piano\n\n  bees  \n\t\nboredom", encoding="utf-8")
        assert load_death_reasons(str(p)) == ["falling piano", "bees", "boredom"]

    def test_utf8(self, tmp_path):
        p = tmp_path / "reasons.txt"
        p.write_text("café\nλ\n", encoding="utf-8")
        assert read_death_reasons(str(p)) == ["café", "λ"]

    def test_empty_file_falls_back(self, tmp_path, caplog):
        p = tmp_path / "reasons.txt"
        p.write_text("\n   \n", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="death.loader"):
            assert load_death_reasons(str(p)) == list(DEFAULT_DEATH_REASONS)
        assert "empty" in caplog.text

    def test_not_utf8_falls_back(self, tmp_path):
        p = tmp_path / "reasons.txt"
        p.write_bytes(b"\xff\xfe\xfa")
        assert load_death_reasons(str(p)) == list(DEFAULT_DEATH_REASONS)


class TestMissingFile:
    def test_none_gives_defaults(self):
        assert load_death_reasons(None) == list(DEFAULT_DEATH_REASONS)

    def test_missing_falls_back(self, tmp_path):
        assert load_death_reasons(str(tmp_path / "nope.txt")) == list(DEFAULT_DEATH_REASONS)

    def test_missing_strict(self, tmp_path):
        with pytest.raises(ReasonsFileError):
            load_death_reasons(str(tmp_path / "nope.txt"), strict=True)

    def test_directory_strict(self, tmp_path):
        with pytest.raises(ReasonsFileError):
            load_death_reasons(str(tmp_path), strict=True)


class TestSpreadsheets:
    def test_csv_with_header(self, tmp_path):
        p = tmp_path / "reasons.csv"
        p.write_text("id,Death Reason\n1,shark\n2,\n3,meteor\n", encoding="utf-8")
        assert load_death_reasons(str(p)) == ["shark", "meteor"]

    def test_csv_without_header_uses_first_column(self, tmp_path):
        p = tmp_path / "reasons.csv"
        p.write_text("shark\nmeteor\n", encoding="utf-8")
        assert load_death_reasons(str(p)) == ["shark", "meteor"]

    def test_empty_csv_falls_back(self, tmp_path):
        p = tmp_path / "reasons.csv"
        p.write_text("", encoding="utf-8")
        assert load_death_reasons(str(p)) == list(DEFAULT_DEATH_REASONS)

    def test_xlsx(self, tmp_path):
        p = tmp_path / "reasons.xlsx"
        pd.DataFrame({"cause": ["volcano", None, "laughter"]}).to_excel(p, index=False, engine="openpyxl")
        assert load_death_reasons(str(p)) == ["volcano", "laughter"]

    def test_broken_xlsx(self, tmp_path):
        p = tmp_path / "reasons.xlsx"
        p.write_text("not a zip", encoding="utf-8")
        assert load_death_reasons(str(p)) == list(DEFAULT_DEATH_REASONS)
        with pytest.raises(ReasonsFileError):
            load_death_reasons(str(p), strict=True)

    def test_zip_that_is_not_a_workbook(self, tmp_path):
        p = tmp_path / "reasons.xlsx"
        with zipfile.ZipFile(p, "w") as z:
            z.writestr("hello.txt", "hi")
        assert load_death_reasons(str(p)) == list(DEFAULT_DEATH_REASONS)
        with pytest.raises(ReasonsFileError):
            load_death_reasons(str(p), strict=True)


class TestStrictEmptyFile:
    """An empty file falls back to the defaults whatever its extension."""

    @pytest.mark.parametrize("name", ["reasons.txt", "reasons.csv"])
    def test_empty_strict(self, tmp_path, name):
        p = tmp_path / name
        p.write_text("", encoding="utf-8")
        assert load_death_reasons(str(p), strict=True) == list(DEFAULT_DEATH_REASONS)

    def test_blank_lines_csv(self, tmp_path):
        p = tmp_path / "reasons.csv"
        p.write_text("\n\n", encoding="utf-8")
        assert read_death_reasons(str(p)) == []
