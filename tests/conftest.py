from __future__ import annotations
import io
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Sequence

import pytest

from pingreport.console import Console
from pingreport.models import ProbeResult
from pingreport.network import parse_transcript

REPLY = "Reply from {host}: bytes=32 time<1ms TTL=64"
TIMEOUT = "Request timed out."


def transcript(host: str, replies: int, timeouts: int) -> List[str]:
    lines = [f"Pinging {host} with 32 bytes of data:"]
    lines += [REPLY.format(host=host)] * replies
    lines += [TIMEOUT] * timeouts
    return lines


class FakeProber:
    """Returns canned transcripts and remembers the order of probed hosts."""

    def __init__(self, transcripts: Dict[str, Sequence[str]], count: int = 4):
        self.transcripts = transcripts
        self.count = count
        self.probed: List[str] = []

    def probe(self, identifier: str) -> ProbeResult:
        self.probed.append(identifier)
        lines = tuple(self.transcripts.get(identifier, ()))
        success, failure = parse_transcript(lines)
        return ProbeResult(identifier, success, failure, lines)


@pytest.fixture
def console_stream():
    return io.StringIO()


@pytest.fixture
def console(console_stream):
    return Console(stream=console_stream, use_color=False)


@pytest.fixture
def fixed_clock():
    moment = datetime(2024, 3, 1, 9, 30, 0, tzinfo=timezone(timedelta(hours=2)))
    return lambda: moment


def write_csv(path, rows: List[str], column: str = 'short_description'):
    lines = [f"number,{column}"]
    lines += [f"INC{i:04d},{row}" for i, row in enumerate(rows)]
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path
