"""
Extracts host identifiers from inventory records.
"""
from __future__ import annotations
from typing import Dict, Iterable, Optional

from .models import ExtractionResult


class RecordExtractor:
    """Derives host identifiers from a text field of each input record."""

    def __init__(self, field_name: str, prefix: str):
        self.field_name = field_name
        self.prefix = prefix

    def extract(self, records: Iterable[Dict[str, Optional[str]]]) -> ExtractionResult:
        """
        Scans all records once, keeping source order.

        Records whose field does not start with the prefix are skipped silently.
        Matching records without a host after the prefix are reported in
        ``invalid_lines``. The returned width is the longest identifier found,
        so every output line can be aligned before the first one is written.
        """
        result = ExtractionResult()
        for record in records:
            value = record.get(self.field_name) or ''
            if not value.startswith(self.prefix):
                continue

            identifier = self.derive_identifier(value, self.prefix)
            if identifier is None:
                result.invalid_lines.append(value)
                continue

            result.identifiers.append(identifier)
            result.width = max(result.width, len(identifier))
        return result

    @staticmethod
    def derive_identifier(value: str, prefix: str) -> Optional[str]:
        """Strips the prefix and returns the first word after it, or None."""
        if not value.startswith(prefix):
            return None
        remainder = value[len(prefix):].split(None, 1)
        return remainder[0] if remainder else None
