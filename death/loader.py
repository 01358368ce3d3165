"""
Reasons loader (file -> list of death reasons)
==============================================

Reads a custom death reasons file for the predictor.

Key ideas:
- Plain text: one reason per line, blank lines ignored.
- Spreadsheets (.csv / .xlsx) are read with pandas. We look for a column
  called "reason" (or a close variant) and otherwise use the first column.
- If nothing usable comes out of the file we fall back to the built-in list,
  unless the caller asked for the file to be strictly required.
"""

from __future__ import annotations
from typing import List, Optional
import logging
import os
import re
import zipfile

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from . import DEFAULT_DEATH_REASONS
from .errors import ReasonsFileError

log = logging.getLogger(__name__)

# normalized header names that mark the reasons column in a spreadsheet
_REASON_COLUMNS = ("reason", "reasons", "deathreason", "deathreasons", "cause", "causeofdeath")

# KeyError: a zip archive that is not a workbook
_READ_ERRORS = (OSError, ValueError, KeyError, zipfile.BadZipFile, InvalidFileException)


def _to_str(x) -> str:
    if pd.isna(x): return ""
    return str(x).strip()

def _norm(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "", str(s).lower())

def _read_text(path: str) -> List[str]:
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]

def _read_table(path: str) -> List[str]:
    """Read reasons from a CSV/XLSX file.

    The sheet is read without a header; if the first row names the reasons
    column it is treated as a header and skipped.
    """
    if path.lower().endswith(".csv"):
        try:
            df = pd.read_csv(path, header=None, dtype=str, encoding="utf-8")
        except pd.errors.EmptyDataError:
            return []
    else:
        df = pd.read_excel(path, header=None, engine="openpyxl")
    if df.empty:
        return []

    header = [_norm(_to_str(v)) for v in df.iloc[0]]
    col = next((i for i, h in enumerate(header) if h in _REASON_COLUMNS), None)
    if col is None:
        values = df.iloc[:, 0]
    else:
        values = df.iloc[1:, col]
    return [s for s in (_to_str(v) for v in values) if s]


def read_death_reasons(path: str) -> List[str]:
    """Read reasons from `path`, dispatching on the file extension.

    Raises OSError/ValueError (KeyError, BadZipFile or InvalidFileException
    for broken .xlsx) on failure. An empty file gives an empty list.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext in (".csv", ".xlsx"):
        return _read_table(path)
    return _read_text(path)


def load_death_reasons(path: Optional[str] = None, strict: bool = False) -> List[str]:
    """Reasons for the predictor, never empty.

    An empty file, or one with no usable reasons, gives DEFAULT_DEATH_REASONS.
    A missing or unreadable file does too, unless `strict=True`, in which
    case it raises ReasonsFileError.
    """
    if path is None:
        return list(DEFAULT_DEATH_REASONS)

    try:
        reasons = read_death_reasons(path)
    except _READ_ERRORS as e:
        if strict:
            raise ReasonsFileError(f"Cannot read death reasons file {path}: {e}") from e
        log.warning("Cannot read death reasons file %s (%s); using defaults", path, e)
        return list(DEFAULT_DEATH_REASONS)

    if not reasons:
        log.warning("Death reasons file %s is empty; using defaults", path)
        return list(DEFAULT_DEATH_REASONS)

    log.debug("Loaded %d death reasons from %s", len(reasons), path)
    return reasons
