# bulk_units/core/parse/ranges.py
"""
Range/count resolution (segment text → SegmentPlan).

Three modes, first match wins:
  1) explicit range   "101-150", "A1 to A50", "Bed 1–20"
  2) explicit count   "add 50 units", "30 beds starting at 101"
  3) single unit      "unit 7", "room B4"; with nothing at all → one unit numbered 1
"""

from __future__ import annotations

import logging
import re

from bulk_units.core.errors import MAX_BATCH, SegmentError
from bulk_units.schemas.models import SegmentPlan

logger = logging.getLogger(__name__)

SHARED_PREFIX = "Bed "

# ---------- Regex tables ----------

_ID = r"([a-z]?\d+)"
_RANGE_RE = re.compile(rf"(?i)\b(?:(?:unit|bed|room)s?\s*)?{_ID}\s*(?:-|–|\bto\b)\s*{_ID}\b")
_COUNT_RE = re.compile(r"(?i)\b(?:add\s+)?(\d+)\s+(?:units?|beds?|studios?|rooms?)\b")
_START_RE = re.compile(r"(?i)\b(?:start(?:ing)?|from)\s*(?:at\s+)?(\d+)")
_SINGLE_RE = re.compile(rf"(?i)\b(?:unit|bed|room)\s*{_ID}\b")
_ALPHA_PREFIX_RE = re.compile(r"^([A-Za-z]+)")

# ---------- Helpers ----------


def _split_id(token: str) -> tuple[str, int]:
    """Split an identifier token: A12 → ("A", 12); 105 → ("", 105)."""
    m = _ALPHA_PREFIX_RE.match(token)
    prefix = m.group(1) if m else ""
    return prefix, int(token[len(prefix) :])


def _check_batch(n: int, what: str) -> None:
    if n > MAX_BATCH:
        raise SegmentError(f"{what} too large ({n}). Maximum {MAX_BATCH:,} per batch.")


# ---------- Modes ----------


def match_range(segment: str) -> SegmentPlan | None:
    """
    Explicit range. The alphabetic prefix of the start (else the end) is reused for
    every identifier.

    Raises:
        SegmentError: end < start, or the span exceeds MAX_BATCH.
    """
    m = _RANGE_RE.search(segment)
    if not m:
        return None
    start_str, end_str = m.group(1), m.group(2)
    start_alpha, start_n = _split_id(start_str)
    end_alpha, end_n = _split_id(end_str)

    if end_n < start_n:
        raise SegmentError(f"Invalid range: {start_str} to {end_str}")
    span = end_n - start_n + 1
    _check_batch(span, "Range")
    return SegmentPlan(prefix=start_alpha or end_alpha, start=start_n, count=span)


def match_count(segment: str, shared_mode: bool = False) -> SegmentPlan | None:
    """
    Explicit count, numbered from an optional "starting at N"/"from N" (default 1).

    Raises:
        SegmentError: the count exceeds MAX_BATCH.
    """
    m = _COUNT_RE.search(segment)
    if not m:
        return None
    count = int(m.group(1))
    _check_batch(count, "Count")
    start = _START_RE.search(segment)
    return SegmentPlan(
        prefix=SHARED_PREFIX if shared_mode else "",
        start=int(start.group(1)) if start else 1,
        count=count,
    )


def match_single(segment: str) -> SegmentPlan | None:
    m = _SINGLE_RE.search(segment)
    if not m:
        return None
    prefix, n = _split_id(m.group(1))
    return SegmentPlan(prefix=prefix, start=n, count=1)


def resolve_plan(segment: str, shared_mode: bool = False) -> SegmentPlan:
    """
    Decide how many identifiers a segment expands to and what they look like.

    A segment that names neither a range, a count, nor a single unit still yields one
    unit numbered 1; this is logged, not reported.

    Raises:
        SegmentError: invalid or oversized range/count.
    """
    plan = match_range(segment) or match_count(segment, shared_mode) or match_single(segment)
    if plan is None:
        logger.debug("no range/count/unit mention in %r; defaulting to a single unit 1", segment)
        return SegmentPlan(prefix="", start=1, count=1)
    return plan


__all__ = ["SHARED_PREFIX", "match_range", "match_count", "match_single", "resolve_plan"]
