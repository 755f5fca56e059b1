# bulk_units/core/parse/generator.py

from __future__ import annotations

from bulk_units.schemas.models import BulkUnitCandidate, SegmentPlan, UnitAttributes


def generate_units(plan: SegmentPlan, attrs: UnitAttributes) -> list[BulkUnitCandidate]:
    """Expand a plan into count candidates "{prefix}{start}", "{prefix}{start+1}", ... sharing attrs."""
    return [BulkUnitCandidate.from_segment(f"{plan.prefix}{plan.start + i}", attrs) for i in range(plan.count)]
