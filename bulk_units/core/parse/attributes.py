# bulk_units/core/parse/attributes.py
"""
Segment attribute extraction (segment text → UnitAttributes).

Each rule is a small pure function over the segment text that returns the matched
value or None. extract_attributes() composes them and fills defaults from the unit
type, so no field is ever left unset:
  - unit type   → studio
  - size        → per-type default (450 / 600 / 850 / 1100 / 1400 sq ft)
  - bedrooms    → 0 for studio, else the leading digit of the type code
  - bathrooms   → 1
All matching is case-insensitive.
"""

from __future__ import annotations

import re

from bulk_units.schemas.labels import (
    UnitType,
    default_bedrooms,
    default_size,
    detect_unit_type,
)
from bulk_units.schemas.models import UnitAttributes

# ---------- Regex tables ----------

_SQFT_RE = re.compile(r"(?i)\b(\d{1,3}(?:[,\u00A0\u2009\u202F]\d{3})+|\d{2,5})\s*(?:sq\.?\s*ft|sqft|square\s*(?:feet|foot)|sf)\b")
_BED_RE = re.compile(r"(?i)(?<![\w.])(\d+)\s*-?\s*(?:bed(?:room)?s?|bd)\b")
_BATH_RE = re.compile(r"(?i)(?<![\w.])(\d+)\s*-?\s*(?:bath(?:room)?s?|ba)\b")
_SHARED_RE = re.compile(r"(?i)\bshared\b")
_WASHROOM_RE = re.compile(r"(?i)\bindependent\s*washroom\b|\bprivate\s*bath(?:room)?\b")
_AMENITIES_RE = re.compile(r"(?i)\b(?:amenit(?:y|ies)|with)\b\s*[:\-]?\s*(.+?)(?:$|;)")
_NOTES_RE = re.compile(r"(?i)\bnotes?\s*[:\-]\s*(.+)$")

# Amenity tokens this long are almost always a swallowed sentence, not a tag
_MAX_AMENITY_LEN = 30

# ---------- Rules ----------


def match_unit_type(text: str) -> UnitType | None:
    return detect_unit_type(text)


def match_size(text: str) -> int | None:
    m = _SQFT_RE.search(text)
    return int(re.sub(r"\D", "", m.group(1))) if m else None


def match_bedrooms(text: str) -> int | None:
    m = _BED_RE.search(text)
    return int(m.group(1)) if m else None


def match_bathrooms(text: str) -> int | None:
    m = _BATH_RE.search(text)
    return int(m.group(1)) if m else None


def match_shared(text: str) -> bool:
    return bool(_SHARED_RE.search(text))


def match_independent_washroom(text: str) -> bool:
    return bool(_WASHROOM_RE.search(text))


def match_amenities(text: str) -> list[str] | None:
    """
    Capture the comma list after "amenities:" / "with". Tokens that start with a digit
    (sizes, prices) or run 30+ characters are discarded. Returned lower-cased.
    """
    m = _AMENITIES_RE.search(text)
    if not m:
        return None
    tokens = [t.strip().lower() for t in m.group(1).split(",")]
    return [t for t in tokens if t and not t[0].isdigit() and len(t) < _MAX_AMENITY_LEN]


def match_notes(text: str) -> str | None:
    m = _NOTES_RE.search(text)
    if not m:
        return None
    return m.group(1).strip() or None


# ---------- Composition ----------


def extract_attributes(segment: str, shared_mode: bool = False) -> UnitAttributes:
    """
    Extract the attribute set of one segment.

    shared_mode only changes vocabulary elsewhere (bed vs unit); the shared and
    washroom flags are computed for every segment.

    Raises:
        pydantic.ValidationError: a stated value breaks a model bound (e.g. "0 bath").
    """
    unit_type = match_unit_type(segment) or UnitType.studio

    size = match_size(segment)
    bedrooms = match_bedrooms(segment)
    bathrooms = match_bathrooms(segment)

    return UnitAttributes(
        size=size if size is not None else default_size(unit_type),
        unit_type=unit_type,
        bedrooms=bedrooms if bedrooms is not None else default_bedrooms(unit_type),
        bathrooms=bathrooms if bathrooms is not None else 1,
        is_shared=match_shared(segment),
        independent_washroom=match_independent_washroom(segment),
        amenities=match_amenities(segment) or [],
        notes=match_notes(segment) or "",
    )


__all__ = [
    "match_unit_type",
    "match_size",
    "match_bedrooms",
    "match_bathrooms",
    "match_shared",
    "match_independent_washroom",
    "match_amenities",
    "match_notes",
    "extract_attributes",
]
