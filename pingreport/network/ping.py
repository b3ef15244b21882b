"""
Runs the system ping command against a host and counts the replies.
"""
import logging
import platform
import re
import subprocess
from typing import Iterable, List, Protocol, Tuple

from ..models import ProbeResult

SUCCESS_MARKERS = ('Reply from', 'bytes from')
FAILURE_MARKERS = ('Request timed out', 'Request timeout for icmp_seq')

# iputils: "4 packets transmitted, 3 received"; BSD/macOS: "4 packets transmitted, 3 packets received"
POSIX_STATISTICS = re.compile(r"(\d+) packets transmitted, (\d+) (?:packets )?received")


class ReachabilityProber(Protocol):
    """Anything that can probe one host and report reply counts."""
    count: int

    def probe(self, identifier: str) -> ProbeResult:
        ...


def build_ping_command(host: str, count: int, system: str = '') -> List[str]:
    """Returns the ping invocation for the current (or given) platform."""
    system = (system or platform.system()).lower()
    if system == 'windows':
        return ['ping', '-n', str(count), host]
    return ['ping', '-c', str(count), host]


def parse_transcript(lines: Iterable[str]) -> Tuple[int, int]:
    """
    Counts successful and failed echo requests in a ping transcript.

    Windows prints a line for every request, so reply and timeout lines are
    counted. POSIX ping does not print a line for every lost packet; its
    statistics line is authoritative when present.
    """
    success = failure = 0
    for line in lines:
        statistics = POSIX_STATISTICS.search(line)
        if statistics:
            transmitted, received = int(statistics.group(1)), int(statistics.group(2))
            return received, max(transmitted - received, 0)
        if any(marker in line for marker in SUCCESS_MARKERS):
            success += 1
        elif any(marker in line for marker in FAILURE_MARKERS):
            failure += 1
    return success, failure


class PingProber:
    """Probes hosts one at a time with a fixed number of echo requests."""

    def __init__(self, count: int = 4):
        self.count = count
        self.is_windows = platform.system().lower() == 'windows'

    def _run(self, command: List[str]) -> str:
        # On Windows, prevent a console window from appearing
        startupinfo = None
        if self.is_windows:
            startupinfo = subprocess.STARTUPINFO()
            startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW
            startupinfo.wShowWindow = subprocess.SW_HIDE

        # ping exits non-zero on packet loss, so no check=True here
        response = subprocess.run(
            command,
            capture_output=True,
            text=True,
            errors='replace',
            startupinfo=startupinfo
        )
        return response.stdout

    def probe(self, identifier: str) -> ProbeResult:
        """Pings ``identifier`` and returns the transcript with its reply counts."""
        command = build_ping_command(identifier, self.count)
        logging.info(f"Running: {' '.join(command)}")
        try:
            output = self._run(command)
        except OSError as e:
            logging.error(f"Could not run ping for '{identifier}': {e}")
            output = ''

        transcript = tuple(line.rstrip('\r') for line in output.splitlines())
        success, failure = parse_transcript(transcript)
        logging.debug(f"{identifier}: {success} replies, {failure} lost")
        return ProbeResult(
            identifier=identifier,
            success_count=success,
            failure_count=failure,
            transcript=transcript
        )
