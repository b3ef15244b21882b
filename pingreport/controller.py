"""
Core pipeline controller for pingreport.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from . import configuration
from .classifier import classify
from .console import Console
from .locator import find_input_file, read_records
from .models import RunSummary
from .network import PingProber, ReachabilityProber
from .parsing import RecordExtractor
from .report import ReportAggregator


class PingReportController:
    """Runs extraction, probing, classification and reporting for one input file."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        prober: Optional[ReachabilityProber] = None,
        console: Optional[Console] = None,
        report_factory: Callable[..., ReportAggregator] = ReportAggregator,
    ):
        self.config = config if config is not None else configuration.DEFAULT_CONFIG.copy()
        self.prober = prober or PingProber(count=self.config['ping_count'])
        self.console = console or Console()
        self.report_factory = report_factory
        self.extractor = RecordExtractor(
            field_name=self.config['input_column'],
            prefix=self.config['host_prefix'],
        )

    def run_directory(self, directory: Path) -> Optional[RunSummary]:
        """Locates the single input file in ``directory`` and processes it."""
        input_path = find_input_file(directory, self.config['input_pattern'])
        return self.run(input_path)

    def run(self, input_path: Path) -> Optional[RunSummary]:
        """
        Processes one input file.

        Returns the final RunSummary, or None when the file holds no hosts.
        Raises InputFileError before any log is written if the file cannot be read.
        """
        records = read_records(input_path, self.config['input_column'])
        extraction = self.extractor.extract(records)
        logging.info(
            f"Extracted {len(extraction.identifiers)} hosts and "
            f"{len(extraction.invalid_lines)} invalid lines from '{input_path.name}'"
        )

        report = self.report_factory(
            summary_path=input_path.parent / self.config['summary_log_name'],
            detail_path=input_path.parent / self.config['detail_log_name'],
            width=extraction.width,
            console=self.console,
        )
        with report:
            for line in extraction.invalid_lines:
                report.record_invalid(line)

            if not extraction.identifiers:
                report.record_no_hosts(input_path.name)
                return None

            for identifier in extraction.identifiers:
                result = self.prober.probe(identifier)
                report.record(result, classify(result, self.prober.count))

            summary = report.finish()

        logging.info(f"Run finished: {summary.hosts_responded}/{summary.total_hosts} hosts responded")
        return summary
