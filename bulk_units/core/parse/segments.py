# bulk_units/core/parse/segments.py

from __future__ import annotations

import re

_SEGMENT_SPLIT_RE = re.compile(r"[;\n]")


def split_segments(prompt: str) -> list[str]:
    """Split a prompt on semicolons/newlines into trimmed, non-empty segments."""
    return [s.strip() for s in _SEGMENT_SPLIT_RE.split(prompt or "") if s.strip()]
