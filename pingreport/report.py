"""
Writes the summary and detail logs of a run.

The summary log gets a timestamped header, one aligned line per host and a
final tally. The detail log collects the raw ping transcripts and is appended
to the summary log when the run finishes, then deleted.
"""
from __future__ import annotations
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TextIO

from .console import Console
from .models import Classification, Color, ProbeResult, RunSummary

DETAIL_DELIMITER = (
    "==================================================",
    "                Detailed ping output",
    "==================================================",
    "",
)


def format_utc_offset(moment: datetime) -> str:
    """Formats the UTC offset of an aware datetime as 'UTC+HH:MM'."""
    offset = moment.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    sign = '+' if minutes >= 0 else '-'
    hours, minutes = divmod(abs(minutes), 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def format_run_header(moment: datetime) -> str:
    return f"Ping results from {moment.strftime('%Y-%m-%d %H:%M:%S')} ({format_utc_offset(moment)})"


def _local_now() -> datetime:
    return datetime.now().astimezone()


class ReportAggregator:
    """Owns both log files of a run and the running RunSummary."""

    def __init__(
        self,
        summary_path: Path,
        detail_path: Path,
        width: int = 0,
        console: Optional[Console] = None,
        clock: Callable[[], datetime] = _local_now,
    ):
        self.summary_path = summary_path
        self.detail_path = detail_path
        self.width = width
        self.console = console or Console()
        self.clock = clock
        self.summary = RunSummary()
        self._summary_file: Optional[TextIO] = None
        self._detail_file: Optional[TextIO] = None

    def __enter__(self) -> ReportAggregator:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def begin(self):
        """Writes the run header and starts an empty detail log."""
        self._summary_file = open(self.summary_path, 'w', encoding='utf-8')
        self._detail_file = open(self.detail_path, 'w', encoding='utf-8')
        header = format_run_header(self.clock())
        self._write_summary(header)
        self._write_summary('')
        self.console.print_line(header)
        self.console.print_line()

    def close(self):
        for f in (self._summary_file, self._detail_file):
            if f is not None and not f.closed:
                f.close()

    def _opened(self, f: Optional[TextIO]) -> TextIO:
        if f is None:
            raise RuntimeError("begin() must be called first")
        return f

    def _write_summary(self, line: str):
        self._opened(self._summary_file).write(line + '\n')

    def _write_detail(self, line: str):
        self._opened(self._detail_file).write(line + '\n')

    def record_invalid(self, value: str):
        """Reports a record that matched the prefix but named no host."""
        message = f"No valid host found in line: {value}"
        logging.warning(message)
        self._write_summary(message)
        self.console.print_line(message, Color.WARNING)

    def record_no_hosts(self, source_name: str):
        """Ends a run that found nothing to probe."""
        message = f"No hosts found in '{source_name}'."
        self._write_summary(message)
        self.console.print_line(message, Color.STRONG_NEGATIVE)
        self.close()
        self._remove_detail_log()

    def record(self, result: ProbeResult, classification: Classification):
        """Appends one host to both logs and updates the tally."""
        line = f"{result.identifier.ljust(self.width)} : {classification.label}"
        self._write_summary(line)
        self.console.print_line(line, classification.color)

        self._write_detail(f"---{result.identifier}---")
        for transcript_line in result.transcript:
            self._write_detail(transcript_line)
        self._write_detail('')
        self._write_detail('')

        self.summary.total_hosts += 1
        if classification.responded:
            self.summary.hosts_responded += 1

    def finish(self) -> RunSummary:
        """Writes the tally, merges the detail log in and returns the summary."""
        final_line = f"{self.summary.hosts_responded}/{self.summary.total_hosts} hosts responded successfully."
        self._write_summary('')
        self._write_summary(final_line)
        self._write_summary('')
        self._write_summary('')
        for line in DETAIL_DELIMITER:
            self._write_summary(line)

        self.console.print_line()
        color = Color.STRONG_POSITIVE if self.summary.all_responded else Color.STRONG_NEGATIVE
        self.console.print_line(final_line, color)

        summary_file = self._opened(self._summary_file)
        self._opened(self._detail_file).close()
        with open(self.detail_path, 'r', encoding='utf-8') as detail:
            for line in detail:
                summary_file.write(line)
        self.close()
        self._remove_detail_log()
        return self.summary

    def _remove_detail_log(self):
        try:
            os.remove(self.detail_path)
        except FileNotFoundError:
            pass
