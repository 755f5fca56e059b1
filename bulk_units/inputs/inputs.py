# bulk_units/inputs/inputs.py
"""
Configuration loader for bulk unit setup.

Goals
-----
- File-first JSON config validated via Pydantic; every field has a default, so a
  missing config file is not an error when no path is given.
- Minimal environment-variable overrides for CI/CLI convenience.

JSON shape
----------
    {
      "max_total_units": 1000,
      "shared_occupancy": true,
      "rows_per_page": 20,
      "property_type": "student_housing"
    }

Environment overrides (optional)
--------------------------------
- BULKUNITS_MAX_TOTAL_UNITS -> max_total_units (int >= 1)
- BULKUNITS_SHARED          -> shared_occupancy (1/0, true/false, yes/no, on/off)
- BULKUNITS_ROWS_PER_PAGE   -> rows_per_page (int >= 1)
Unparseable override values are ignored.

Public API
----------
- class ConfigLoader:
    - load(path: str | Path | None) -> BulkSetupConfig
    - load_json(text: str) -> BulkSetupConfig
    - with_overrides(cfg, **kwargs) -> BulkSetupConfig (non-destructive copies)
- function load_config(path: str | Path | None) -> BulkSetupConfig  (convenience)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, Field, ValidationError

from bulk_units.schemas.labels import PropertyType, is_shared_occupancy

DEFAULT_CONFIG_PATH = Path("bulk_units.json")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class BulkSetupConfig(BaseModel):
    """Options for one property's bulk setup session."""

    max_total_units: int = Field(1000, ge=1, description="Per-property ceiling on existing + new units.")
    shared_occupancy: bool | None = Field(
        None, description="Bed-by-bed (student housing) vocabulary. None → follow property_type."
    )
    rows_per_page: int = Field(20, ge=1, description="Preview rows shown before 'show all'.")
    property_type: PropertyType | None = Field(None, description="Hosting property type, if known.")

    @property
    def shared_mode(self) -> bool:
        if self.shared_occupancy is not None:
            return self.shared_occupancy
        if self.property_type is not None:
            return is_shared_occupancy(self.property_type)
        return False


@dataclass(frozen=True)
class ConfigLoader:
    """
    File-first config loader with light env overrides.

    Default search (when path=None): ./bulk_units.json, else built-in defaults.
    """

    env_prefix: str = "BULKUNITS_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> BulkSetupConfig:
        """
        Load config from a JSON file (path). If path is None, try ./bulk_units.json.

        Raises:
            FileNotFoundError: an explicit path does not exist.
            ValueError: invalid JSON or failed validation.
        """
        p = self._resolve_path(path)
        raw = self._read_json_file(p) if p is not None else {}
        cfg = self._parse_root(raw)
        return self._apply_env_overrides(cfg)

    def load_json(self, text: str) -> BulkSetupConfig:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError("Config JSON must be an object.")
        cfg = self._parse_root(raw)
        return self._apply_env_overrides(cfg)

    def with_overrides(
        self,
        cfg: BulkSetupConfig,
        *,
        max_total_units: int | None = None,
        shared_occupancy: bool | None = None,
        rows_per_page: int | None = None,
        property_type: PropertyType | str | None = None,
    ) -> BulkSetupConfig:
        """
        Return a *new* config with the provided non-null overrides applied and validated.
        Does not mutate the original instance.
        """
        updates: dict[str, Any] = {}
        if max_total_units is not None:
            updates["max_total_units"] = max_total_units
        if shared_occupancy is not None:
            updates["shared_occupancy"] = shared_occupancy
        if rows_per_page is not None:
            updates["rows_per_page"] = rows_per_page
        if property_type is not None:
            updates["property_type"] = property_type

        if not updates:
            return cfg
        return self._parse_root({**cfg.model_dump(), **updates})

    # ---------- Internals ----------

    def _resolve_path(self, path: str | Path | None) -> Path | None:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise FileNotFoundError(f"Config file not found: {p}")
            return p
        return DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else None

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported config format for {p.name}; only .json supported.")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Config in {p} must be a JSON object.")
        return cast(dict[str, Any], data)

    def _parse_root(self, data: dict[str, Any]) -> BulkSetupConfig:
        try:
            return BulkSetupConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Config validation failed:\n{e}") from e

    def _apply_env_overrides(self, cfg: BulkSetupConfig) -> BulkSetupConfig:
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        for key, env in (("max_total_units", "MAX_TOTAL_UNITS"), ("rows_per_page", "ROWS_PER_PAGE")):
            raw = os.getenv(f"{prefix}{env}")
            if not raw:
                continue
            try:
                value = int(raw)
            except ValueError:
                # Ignore bad value; keep validated cfg
                continue
            if value >= 1:
                updates[key] = value

        shared = os.getenv(f"{prefix}SHARED")
        if shared:
            normalized = shared.strip().lower()
            if normalized in _TRUTHY:
                updates["shared_occupancy"] = True
            elif normalized in _FALSY:
                updates["shared_occupancy"] = False

        if not updates:
            return cfg
        return cfg.model_copy(update=updates)


def load_config(path: str | Path | None = None) -> BulkSetupConfig:
    """Convenience wrapper for one-shot callers."""
    return ConfigLoader().load(path)
