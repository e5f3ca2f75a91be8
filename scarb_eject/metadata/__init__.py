"""Metadata snapshot acquisition and package selection."""

from .command import MetadataCommand, load_metadata, parse_metadata_stream
from .models import (
    CompilationUnitComponentMetadata,
    CompilationUnitMetadata,
    ComponentDependencyMetadata,
    Metadata,
    PackageMetadata,
    TargetMetadata,
    WorkspaceMetadata,
)
from .packages_filter import PackagesFilter

__all__ = [
    "CompilationUnitComponentMetadata",
    "CompilationUnitMetadata",
    "ComponentDependencyMetadata",
    "Metadata",
    "MetadataCommand",
    "PackageMetadata",
    "PackagesFilter",
    "TargetMetadata",
    "WorkspaceMetadata",
    "load_metadata",
    "parse_metadata_stream",
]
