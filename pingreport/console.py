"""
Colored line output for the terminal.
"""
from __future__ import annotations
import os
import sys
from typing import Dict, Optional, TextIO

from .models import Color

ANSI_CODES: Dict[Color, str] = {
    Color.NEUTRAL: '',
    Color.STRONG_POSITIVE: '\033[92m',   # bright green
    Color.WARNING: '\033[93m',           # bright yellow
    Color.STRONG_NEGATIVE: '\033[91m',   # bright red
}
RESET = '\033[0m'


class Console:
    """Writes lines to a stream, colored when the stream is a terminal."""

    def __init__(self, stream: Optional[TextIO] = None, use_color: Optional[bool] = None):
        self.stream = stream or sys.stdout
        if use_color is None:
            use_color = self.stream.isatty() and 'NO_COLOR' not in os.environ
        self.use_color = use_color

    def print_line(self, text: str = '', color: Color = Color.NEUTRAL):
        code = ANSI_CODES[color] if self.use_color else ''
        if code:
            text = f"{code}{text}{RESET}"
        print(text, file=self.stream, flush=True)
