"""
Locates the inventory export and reads its rows.
"""
from __future__ import annotations
import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional


class InputFileError(Exception):
    """Raised when the input file cannot be determined or read."""


def find_input_file(directory: Path, pattern: str = '*.csv') -> Path:
    """Returns the single file in ``directory`` matching ``pattern``."""
    candidates = sorted(p for p in directory.glob(pattern) if p.is_file())
    logging.info(f"Input candidates in '{directory}': {[p.name for p in candidates]}")
    if not candidates:
        raise InputFileError(
            f"No file matching '{pattern}' found in '{directory}'. "
            "Place exactly one inventory export there and run again."
        )
    if len(candidates) > 1:
        names = ', '.join(p.name for p in candidates)
        raise InputFileError(
            f"Found {len(candidates)} files matching '{pattern}' in '{directory}' ({names}). "
            "Leave exactly one and run again."
        )
    return candidates[0]


def read_records(path: Path, column: str) -> List[Dict[str, Optional[str]]]:
    """Reads all rows of a CSV file, checking that ``column`` is present."""
    try:
        with open(path, newline='', encoding='utf-8-sig') as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None or column not in reader.fieldnames:
                raise InputFileError(f"Column '{column}' not found in '{path.name}'.")
            return list(reader)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise InputFileError(f"Could not read '{path}': {e}") from e
