"""Pydantic models of the ``scarb metadata --format-version 1`` document.

The models mirror only the fields the ejector reads. Unknown fields are
accepted and kept so that newer Scarb releases do not break loading.
Fields the ejector interprets best-effort (edition, experimental features,
cfg entries) are kept as raw JSON values: a malformed one must degrade a
single crate setting, not reject the snapshot. Interpretation happens later,
per crate, in ``scarb_eject.project.values``.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Only metadata format version 1 is understood.
METADATA_FORMAT_VERSION = 1


class _MetadataModel(BaseModel):
    """Common model configuration: read-only, tolerant of extra fields."""

    model_config = ConfigDict(extra="allow", frozen=True)


class WorkspaceMetadata(_MetadataModel):
    """Workspace section of the metadata document.

    Attributes:
        root: Workspace root directory.
        manifest_path: Path to the workspace ``Scarb.toml``.
        members: Package ids of the workspace members.
    """

    root: str
    manifest_path: Optional[str] = None
    members: List[str] = Field(default_factory=list)


class PackageMetadata(_MetadataModel):
    """A package known to the snapshot (workspace member or dependency)."""

    id: str
    name: str
    version: str
    edition: Optional[Any] = None
    root: Optional[str] = None
    manifest_path: Optional[str] = None
    experimental_features: Any = Field(default_factory=list)

    @field_validator("experimental_features", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class TargetMetadata(_MetadataModel):
    """Target a compilation unit builds (``lib``, ``starknet-contract``, ...)."""

    kind: str
    name: str
    source_path: Optional[str] = None
    params: Dict[str, Any] = Field(default_factory=dict)


class ComponentDependencyMetadata(_MetadataModel):
    """Reference from one component to a sibling component of the same unit."""

    id: str


class CompilationUnitComponentMetadata(_MetadataModel):
    """A crate-like node of a compilation unit."""

    package: str
    name: str
    source_path: str
    cfg: Optional[Any] = None
    discriminator: Optional[str] = None
    id: Optional[str] = None
    dependencies: Optional[List[ComponentDependencyMetadata]] = None

    @property
    def source_root(self) -> str:
        """Directory holding the component's main source file."""
        return str(PurePath(self.source_path).parent)


class CompilationUnitMetadata(_MetadataModel):
    """A buildable unit: one target of one package plus its components."""

    id: str
    package: str
    target: TargetMetadata
    components: List[CompilationUnitComponentMetadata] = Field(default_factory=list)
    cfg: Any = Field(default_factory=list)

    @field_validator("cfg", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Metadata(_MetadataModel):
    """Top-level metadata snapshot."""

    version: int
    workspace: WorkspaceMetadata
    packages: List[PackageMetadata] = Field(default_factory=list)
    compilation_units: List[CompilationUnitMetadata] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: int) -> int:
        if value != METADATA_FORMAT_VERSION:
            raise ValueError(
                f"unsupported metadata format version {value}, "
                f"expected {METADATA_FORMAT_VERSION}"
            )
        return value

    def workspace_packages(self) -> List[PackageMetadata]:
        """Return the workspace member packages, in member order."""
        by_id = {package.id: package for package in self.packages}
        return [by_id[member] for member in self.workspace.members if member in by_id]


__all__ = [
    "METADATA_FORMAT_VERSION",
    "ComponentDependencyMetadata",
    "CompilationUnitComponentMetadata",
    "CompilationUnitMetadata",
    "Metadata",
    "PackageMetadata",
    "TargetMetadata",
    "WorkspaceMetadata",
]
