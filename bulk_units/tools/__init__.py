# bulk_units/tools/__init__.py
"""
Bulk units — tools package

Collaborators that consume the parser/session output:
  - PropertyUnitStore   (from .unit_store)
"""

from __future__ import annotations

from .unit_store import PropertyUnitStore, to_property_unit

__all__ = ["PropertyUnitStore", "to_property_unit"]
