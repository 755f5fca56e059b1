# bulk_units/schemas/models.py

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bulk_units.schemas.labels import UnitType

# =========================
# Extraction outputs
# =========================


class UnitAttributes(BaseModel):
    """
    Attribute set extracted from one prompt segment. Every generated unit of that
    segment carries a copy of it; every field has a deterministic default.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    size: int = Field(..., gt=0, description="Floor area in square feet.")
    unit_type: UnitType = Field(UnitType.studio, description="Bedroom-count category.")
    bedrooms: int = Field(0, ge=0, description="Bedroom count (explicit or derived from unit_type).")
    bathrooms: int = Field(1, ge=1, description="Bathroom count; 1 when not stated.")
    is_shared: bool = Field(False, description="Shared-occupancy bed (student housing).")
    independent_washroom: bool = Field(False, description="Bed/unit has its own washroom.")
    amenities: list[str] = Field(default_factory=list, description="Free-text amenity tags, order preserved.")
    notes: str = Field("", description="Free-text note captured after a 'note:' marker.")


@dataclass(frozen=True)
class SegmentPlan:
    """How many identifiers one segment expands to: prefix + start, start+1, ..."""

    prefix: str
    start: int
    count: int


# =========================
# Candidates & results
# =========================


class BulkUnitCandidate(BaseModel):
    """
    One generated unit/bed, prior to persistence. Lives only inside a preview session.
    Assignments are validated so in-place edits keep the same constraints as parsing.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    identifier: str = Field(..., description='Unit/bed label, e.g. "105", "A12", "Bed 7".')
    size: int = Field(..., gt=0, description="Floor area in square feet.")
    unit_type: UnitType = Field(UnitType.studio)
    bedrooms: int = Field(0, ge=0)
    bathrooms: int = Field(1, ge=1)
    is_shared: bool = False
    independent_washroom: bool = False
    amenities: list[str] = Field(default_factory=list)
    notes: str = ""

    @field_validator("identifier")
    @classmethod
    def _identifier_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("identifier must not be blank")
        return v

    @classmethod
    def from_segment(cls, identifier: str, attrs: UnitAttributes) -> BulkUnitCandidate:
        data = attrs.model_dump()
        data["amenities"] = list(attrs.amenities)
        return cls(identifier=identifier, **data)


class ParseResult(BaseModel):
    """Candidates from every segment that parsed, plus one message per rejected segment."""

    candidates: list[BulkUnitCandidate] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    def extend(self, other: ParseResult) -> None:
        self.candidates.extend(other.candidates)
        self.errors.extend(other.errors)

    @property
    def identifiers(self) -> list[str]:
        return [c.identifier for c in self.candidates]


class ConfirmationReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=1, description="Number of candidates handed to the unit store.")
    message: str = Field(..., description='e.g. "50 units added successfully".')


# =========================
# Persisted unit shape
# =========================


class PropertyUnit(BaseModel):
    """A unit as kept on the property after a confirmed bulk setup."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., description="Store-assigned identity.")
    unit_number: str
    size: int = Field(..., gt=0)
    bedrooms: int = Field(..., ge=0)
    bathrooms: int = Field(..., ge=1)
    unit_type: UnitType | None = None
    is_shared: bool = False
    independent_washroom: bool = False
    amenities: list[str] = Field(default_factory=list)
