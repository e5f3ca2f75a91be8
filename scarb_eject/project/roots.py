"""Project a compilation unit's components onto crate roots."""

from __future__ import annotations

from typing import Dict, Iterator

from scarb_eject.metadata.models import (
    CompilationUnitComponentMetadata,
    CompilationUnitMetadata,
)

# The compiler always provides the core library itself.
CORE_CRATE_NAME = "core"


def is_core(component: CompilationUnitComponentMetadata) -> bool:
    return component.name == CORE_CRATE_NAME


def ejectable_components(
    unit: CompilationUnitMetadata,
) -> Iterator[CompilationUnitComponentMetadata]:
    """Yield the unit's components except ``core``, in unit order."""
    for component in unit.components:
        if not is_core(component):
            yield component


def project_crate_roots(unit: CompilationUnitMetadata) -> Dict[str, str]:
    """Map each non-core component name to its source root directory."""
    return {
        component.name: component.source_root
        for component in ejectable_components(unit)
    }


__all__ = [
    "CORE_CRATE_NAME",
    "ejectable_components",
    "is_core",
    "project_crate_roots",
]
