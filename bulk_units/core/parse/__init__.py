# bulk_units/core/parse/__init__.py
from __future__ import annotations

from .attributes import extract_attributes
from .generator import generate_units
from .prompt import NOTHING_PARSED, parse, parse_bulk_prompt, parse_segment
from .ranges import resolve_plan
from .segments import split_segments

__all__ = [
    "split_segments",
    "extract_attributes",
    "resolve_plan",
    "generate_units",
    "parse_segment",
    "parse_bulk_prompt",
    "parse",
    "NOTHING_PARSED",
]
