"""
Preset registry: named tolerance bands loaded from YAML at startup.

The registry is a module-level singleton; call get_registry() to obtain it.
Every entry is normalized and validated once at load time, and all problems
in a file are reported together. Nothing writes to the registry afterwards.

A preset's tolerance is an ordinary Single or Pair, so it can be passed
anywhere a raw tolerance argument is accepted:

    resolve(500, get_registry().get("standard"))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from withintolerance.errors import InvalidToleranceError
from withintolerance.resolver import Tolerance, to_tolerance

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_PRESETS_FILE = "presets.yaml"


@dataclass(frozen=True)
class Preset:
    """A named tolerance with a free-text description."""

    name: str
    tolerance: Tolerance
    description: str = ""


class ToleranceRegistry:
    """
    Immutable registry of named tolerance presets.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.presets: MappingProxyType[str, Preset]
        self._load_presets()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Preset data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse preset data file {path}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
            raise ValueError(f"Preset data file {path} must define an 'entries' list")
        return cast(dict[str, Any], data)

    def _load_presets(self) -> None:
        data = self._load_yaml(_PRESETS_FILE)
        result: dict[str, Preset] = {}
        errors: list[str] = []
        for index, entry in enumerate(data["entries"]):
            preset = self._parse_entry(index, entry, errors)
            if preset is None:
                continue
            if preset.name in result:
                errors.append(f"entry {index}: duplicate preset name {preset.name!r}")
                continue
            result[preset.name] = preset

        if errors:
            raise ValueError(
                "Preset registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )
        self.presets = MappingProxyType(result)
        logger.info("Loaded %d tolerance presets from %s", len(result), self._data_dir)

    def _parse_entry(self, index: int, entry: Any, errors: list[str]) -> Preset | None:
        if not isinstance(entry, dict):
            errors.append(f"entry {index}: expected a mapping, got {entry!r}")
            return None
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"entry {index}: name must be a non-empty string, got {name!r}")
            return None
        if "tolerance" not in entry:
            errors.append(f"preset {name!r}: missing tolerance")
            return None
        try:
            tolerance = to_tolerance(entry["tolerance"])
        except InvalidToleranceError as exc:
            errors.append(f"preset {name!r}: {exc}")
            return None
        return Preset(
            name=name.strip(),
            tolerance=tolerance,
            description=(entry.get("description") or "").strip(),
        )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get(self, name: str) -> Tolerance:
        """Return the tolerance of the named preset.

        Raises KeyError if no preset has that name.
        """
        try:
            return self.presets[name].tolerance
        except KeyError:
            raise KeyError(f"No tolerance preset named {name!r}") from None

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self.presets))

    def __contains__(self, name: object) -> bool:
        return name in self.presets


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Loaded eagerly at import time; read-only afterwards, so safe to share
# across threads.

_registry: ToleranceRegistry = ToleranceRegistry()


def get_registry() -> ToleranceRegistry:
    """Return the module-level registry singleton."""
    return _registry
