"""Compose the full Cairo project configuration for one package."""

from __future__ import annotations

import logging

from scarb_eject.metadata.models import Metadata, PackageMetadata
from scarb_eject.project.components import ComponentIndex
from scarb_eject.project.models import AllCratesConfig, ProjectConfigContent
from scarb_eject.project.roots import project_crate_roots
from scarb_eject.project.selector import select_compilation_unit
from scarb_eject.project.settings import resolve_global_settings, resolve_override_map

logger = logging.getLogger("scarb_eject.project.assembler")


def build_project_config(
    metadata: Metadata,
    package: PackageMetadata,
    no_deps: bool = False,
) -> ProjectConfigContent:
    """Resolve ``package`` in ``metadata`` into a project configuration.

    Args:
        metadata: Metadata snapshot; never modified.
        package: Workspace member to eject.
        no_deps: Leave the global dependency mapping empty.

    Returns:
        ProjectConfigContent: Crate roots plus global and override settings.

    Raises:
        CompilationUnitNotFoundError: If ``package`` owns no compilation unit.
    """
    unit = select_compilation_unit(metadata, package.id)
    index = ComponentIndex.build(metadata, unit)

    config = ProjectConfigContent(
        crate_roots=project_crate_roots(unit),
        crates_config=AllCratesConfig(
            global_settings=resolve_global_settings(package, unit, no_deps=no_deps),
            override_map=resolve_override_map(index),
        ),
    )
    logger.info(
        "Resolved project config for %s: %d crate root(s)",
        package.name,
        len(config.crate_roots),
    )
    return config


__all__ = ["build_project_config"]
