# bulk_units/tools/unit_store.py
"""
In-memory unit list of one property; the hand-off target of a confirmed bulk setup.

Ids come from an injected factory (default: uuid4 hex) so callers and tests control
identity without process-wide counters.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable

from bulk_units.core.errors import BulkSetupError
from bulk_units.core.session import BulkSetupSession
from bulk_units.inputs.inputs import BulkSetupConfig, ConfigLoader
from bulk_units.schemas.labels import PROPERTY_TYPE_LABELS, PropertyType, is_shared_occupancy, needs_units
from bulk_units.schemas.models import BulkUnitCandidate, PropertyUnit

logger = logging.getLogger(__name__)


def _uuid_id() -> str:
    return uuid.uuid4().hex


def to_property_unit(candidate: BulkUnitCandidate, unit_id: str) -> PropertyUnit:
    """Map a confirmed candidate to the stored shape (notes are not kept)."""
    return PropertyUnit(
        id=unit_id,
        unit_number=candidate.identifier,
        size=candidate.size,
        bedrooms=candidate.bedrooms,
        bathrooms=candidate.bathrooms,
        unit_type=candidate.unit_type,
        is_shared=candidate.is_shared,
        independent_washroom=candidate.independent_washroom,
        amenities=list(candidate.amenities),
    )


class PropertyUnitStore:
    """Unit list of a single property."""

    def __init__(
        self,
        property_type: PropertyType | str,
        units: Iterable[PropertyUnit] = (),
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.property_type = PropertyType(property_type)
        self.units: list[PropertyUnit] = list(units)
        self._next_id = id_factory or _uuid_id

    @property
    def shared_mode(self) -> bool:
        return is_shared_occupancy(self.property_type)

    def existing_identifiers(self) -> list[str]:
        return [u.unit_number for u in self.units]

    def add_batch(self, candidates: Iterable[BulkUnitCandidate]) -> list[PropertyUnit]:
        """Append all candidates or none: every row is mapped before the list changes."""
        new_units = [to_property_unit(c, self._next_id()) for c in candidates]
        self.units.extend(new_units)
        logger.info("stored %d units on %s property (now %d)", len(new_units), self.property_type.value, len(self.units))
        return new_units

    def open_session(self, config: BulkSetupConfig | None = None) -> BulkSetupSession:
        """
        Start a bulk setup session wired to this store. The property type fills in
        shared mode unless the config sets it explicitly.

        Raises:
            BulkSetupError: the property type does not host units.
        """
        if not needs_units(self.property_type):
            label = PROPERTY_TYPE_LABELS[self.property_type]
            raise BulkSetupError(f"{label} properties do not have units to set up.")
        cfg = config or BulkSetupConfig()
        if cfg.property_type is None:
            cfg = ConfigLoader().with_overrides(cfg, property_type=self.property_type)
        return BulkSetupSession(
            existing_identifiers=self.existing_identifiers(),
            on_confirm=self.add_batch,
            config=cfg,
        )


__all__ = ["PropertyUnitStore", "to_property_unit"]
