# bulk_units/core/parse/prompt.py


"""
Bulk setup prompt parser (free text → ParseResult).

Pipeline per segment: attributes + range/count plan → generated candidates.
Errors are collected per segment and never raised, so one bad segment does not
stop the others from producing units.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from bulk_units.core.errors import SegmentError
from bulk_units.schemas.models import ParseResult

from .attributes import extract_attributes
from .generator import generate_units
from .ranges import resolve_plan
from .segments import split_segments

logger = logging.getLogger(__name__)

FORMAT_HINT = '"101-150: studio, 500 sq ft, 1 bath"'
NOTHING_PARSED = f"Could not parse any units. Try format: {FORMAT_HINT}"


def parse_segment(segment: str, shared_mode: bool = False) -> ParseResult:
    """
    Parse one segment. The range/count plan is resolved first, so a rejected range
    is reported as such even when the segment's attributes are also out of bounds.
    Either failure becomes one error and zero candidates.
    """
    try:
        plan = resolve_plan(segment, shared_mode)
    except SegmentError as exc:
        logger.warning("segment rejected: %s (%r)", exc, segment)
        return ParseResult(errors=[str(exc)])

    try:
        attrs = extract_attributes(segment, shared_mode)
    except ValidationError as exc:
        logger.warning("segment failed validation: %r (%d errors)", segment, exc.error_count())
        return ParseResult(errors=[f'Could not parse: "{segment[:60]}..."'])

    logger.debug("segment %r → prefix=%r start=%d count=%d", segment, plan.prefix, plan.start, plan.count)
    return ParseResult(candidates=generate_units(plan, attrs))


def parse_bulk_prompt(prompt: str, shared_mode: bool = False) -> ParseResult:
    """
    Parse a full prompt of semicolon/newline separated segments.

    Deterministic: the same prompt and mode always give equal results.
    """
    segments = split_segments(prompt)
    if not segments:
        return ParseResult(errors=[NOTHING_PARSED])

    result = ParseResult()
    for segment in segments:
        result.extend(parse_segment(segment, shared_mode))

    logger.debug("parsed %d segments → %d candidates, %d errors", len(segments), len(result.candidates), len(result.errors))
    return result


# Public entry point
parse = parse_bulk_prompt
