"""Cairo project configuration models.

These models describe the content of a ``cairo_project.toml`` file: crate
roots plus a two-level crate settings model (one global record applied when
no override matches, and per-crate override records). The same
``CrateSettings`` type is used on both levels; the global record is derived
independently, never merged from overrides.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Wire form of a single cfg entry: "name" or ["key", "value"].
CfgWire = Union[str, List[str]]


class Edition(str, Enum):
    """Cairo language editions known to the compiler."""

    V2023_01 = "2023_01"
    V2023_10 = "2023_10"
    V2023_11 = "2023_11"
    V2024_07 = "2024_07"

    @classmethod
    def default(cls) -> "Edition":
        """Edition assumed when a package declares none."""
        return cls.V2023_01


class Cfg(BaseModel):
    """A conditional-compilation flag, optionally carrying a value."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: Optional[str] = None

    def sort_key(self) -> Tuple[str, bool, str]:
        # Valueless flags order before valued ones with the same key.
        return (self.key, self.value is not None, self.value or "")

    def to_wire(self) -> CfgWire:
        if self.value is None:
            return self.key
        return [self.key, self.value]


class CfgSet(BaseModel):
    """Deduplicated, sorted set of cfg flags."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[Cfg, ...] = ()

    @classmethod
    def from_cfgs(cls, cfgs: Iterable[Cfg]) -> "CfgSet":
        """Build a set from any iterable, dropping duplicates."""
        unique = {(cfg.key, cfg.value): cfg for cfg in cfgs}
        return cls(items=tuple(sorted(unique.values(), key=Cfg.sort_key)))

    def to_wire(self) -> List[CfgWire]:
        return [cfg.to_wire() for cfg in self.items]


class DependencySettings(BaseModel):
    """Settings of one crate dependency."""

    model_config = ConfigDict(frozen=True)

    discriminator: Optional[str] = None

    def to_toml_dict(self) -> Dict[str, Any]:
        if self.discriminator is None:
            return {}
        return {"discriminator": self.discriminator}


class ExperimentalFeaturesConfig(BaseModel):
    """Experimental compiler features a crate opts into."""

    model_config = ConfigDict(frozen=True)

    negative_impls: bool = False
    associated_item_constraints: bool = False
    coupons: bool = False


class CrateSettings(BaseModel):
    """Compilation settings of a crate (or the global default).

    Attributes:
        edition: Language edition.
        version: Semantic version of the owning package, when known.
        cfg_set: Cfg flags, or None when not set for this crate.
        dependencies: Crate identifier -> dependency settings, sorted by key.
        experimental_features: Experimental feature opt-ins.
    """

    model_config = ConfigDict(frozen=True)

    edition: Edition = Field(default_factory=Edition.default)
    version: Optional[str] = None
    cfg_set: Optional[CfgSet] = None
    dependencies: Dict[str, DependencySettings] = Field(default_factory=dict)
    experimental_features: ExperimentalFeaturesConfig = Field(
        default_factory=ExperimentalFeaturesConfig
    )

    def to_toml_dict(self) -> Dict[str, Any]:
        """Convert to the ``cairo_project.toml`` table layout.

        Absent optional fields are omitted rather than written as empty.
        """
        table: Dict[str, Any] = {"edition": self.edition.value}
        if self.version is not None:
            table["version"] = self.version
        if self.cfg_set is not None:
            table["cfg_set"] = self.cfg_set.to_wire()
        table["dependencies"] = {
            name: settings.to_toml_dict()
            for name, settings in self.dependencies.items()
        }
        table["experimental_features"] = self.experimental_features.model_dump()
        return table


class AllCratesConfig(BaseModel):
    """Global crate settings plus per-crate overrides."""

    model_config = ConfigDict(frozen=True)

    global_settings: CrateSettings = Field(default_factory=CrateSettings)
    override_map: Dict[str, CrateSettings] = Field(default_factory=dict)

    def to_toml_dict(self) -> Dict[str, Any]:
        return {
            "global": self.global_settings.to_toml_dict(),
            "override": {
                name: settings.to_toml_dict()
                for name, settings in self.override_map.items()
            },
        }


class ProjectConfigContent(BaseModel):
    """Full content of a ``cairo_project.toml`` file."""

    model_config = ConfigDict(frozen=True)

    crate_roots: Dict[str, str] = Field(default_factory=dict)
    crates_config: AllCratesConfig = Field(default_factory=AllCratesConfig)

    def to_toml_dict(self) -> Dict[str, Any]:
        return {
            "crate_roots": dict(self.crate_roots),
            "config": self.crates_config.to_toml_dict(),
        }


__all__ = [
    "AllCratesConfig",
    "Cfg",
    "CfgSet",
    "CrateSettings",
    "DependencySettings",
    "Edition",
    "ExperimentalFeaturesConfig",
    "ProjectConfigContent",
]
