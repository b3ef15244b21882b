"""
Network-related utilities for pingreport.
"""

from .ping import PingProber, ReachabilityProber, build_ping_command, parse_transcript

__all__ = [
    "PingProber",
    "ReachabilityProber",
    "build_ping_command",
    "parse_transcript",
]
