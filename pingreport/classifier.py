"""
Maps probe reply counts to a verdict, a display label and a console color.
"""
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP

from .models import Classification, Color, Outcome, ProbeResult

NOT_FOUND_LABEL = "host not found"


def percentage(success: int, total: int) -> int:
    """Share of successful replies in percent, rounded half up."""
    ratio = Decimal(success) * 100 / Decimal(total)
    return int(ratio.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def classify(result: ProbeResult, probe_count: int) -> Classification:
    """
    Classifies a probe result.

    A result only counts as a measurement when every echo request is accounted
    for; anything else is reported as "host not found", just like a host that
    answered none of them.
    """
    success, total = result.success_count, result.total_responses

    if total != probe_count:
        return Classification(Outcome.NONE, NOT_FOUND_LABEL, Color.STRONG_NEGATIVE, responded=False)
    if success == 0:
        return Classification(Outcome.NONE_MEASURED, NOT_FOUND_LABEL, Color.STRONG_NEGATIVE, responded=False)

    label = f"{percentage(success, total)}% ({success}/{total}) pings received."
    if success == probe_count:
        return Classification(Outcome.FULL, label, Color.STRONG_POSITIVE, responded=True)
    return Classification(Outcome.PARTIAL, label, Color.WARNING, responded=True)
