"""
Command-line application for pingreport.

Loads the configuration, runs the pipeline on the inventory export found in
the given directory and waits for the user before the console closes.
"""
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import configuration
from .console import Console
from .controller import PingReportController
from .locator import InputFileError
from .models import Color


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pingreport',
        description='Pings every ESXi host listed in a CSV inventory export and writes ping_results.txt.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  pingreport
  pingreport exports/ --no-pause
  pingreport --config other.yaml
'''
    )
    parser.add_argument('directory', nargs='?', default='.',
                        help='Directory holding exactly one CSV export (default: current directory)')
    parser.add_argument('--config', default=None,
                        help='Path to the YAML configuration file (default: config.yaml)')
    parser.add_argument('--no-pause', action='store_true',
                        help='Do not wait for Enter before exiting')
    return parser


def wait_for_acknowledgement(prompt: str):
    """Blocks until the user presses Enter; returns at once without a stdin."""
    try:
        input(prompt)
    except EOFError:
        pass


def main(argv: Optional[List[str]] = None) -> int:
    """The main entry point for the application."""
    args = build_parser().parse_args(argv)
    config = configuration.load_or_create_config(args.config)

    logging.basicConfig(
        level=getattr(logging, str(config.get('log_level', 'WARNING')).upper(), logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    logging.info("pingreport starting up.")

    console = Console()
    controller = PingReportController(config=config, console=console)

    exit_code = 0
    try:
        controller.run_directory(Path(args.directory))
    except InputFileError as e:
        logging.error(f"Input file error: {e}")
        console.print_line(str(e), Color.STRONG_NEGATIVE)
        exit_code = 1

    if config.get('pause_on_exit', True) and not args.no_pause:
        wait_for_acknowledgement("Press Enter to exit...")
    return exit_code
