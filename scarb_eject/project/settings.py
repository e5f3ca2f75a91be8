"""Derive crate settings: the global default record and per-crate overrides.

Both levels share the value parsers of ``scarb_eject.project.values``. Parse
diagnostics are logged here as warnings and the fallback value is used; an
unresolvable dependency reference or an unknown experimental feature is an
expected mismatch and is not logged at all.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from scarb_eject.metadata.models import (
    CompilationUnitComponentMetadata,
    CompilationUnitMetadata,
    PackageMetadata,
)
from scarb_eject.project.components import ComponentIndex
from scarb_eject.project.models import (
    CfgSet,
    CrateSettings,
    DependencySettings,
    Edition,
)
from scarb_eject.project.roots import ejectable_components
from scarb_eject.project.values import (
    ParseOutcome,
    convert_cfg_set,
    parse_edition,
    parse_experimental_features,
)

logger = logging.getLogger("scarb_eject.project.settings")


def _accept(outcome: ParseOutcome):
    """Log a parse diagnostic, if any, and return the outcome's value."""
    if outcome.diagnostic is not None:
        logger.warning("%s", outcome.diagnostic)
    return outcome.value


def resolve_edition(package: Optional[PackageMetadata], crate_name: str) -> Edition:
    return _accept(parse_edition(package, crate_name))


def resolve_cfg_set(entries: Any, crate_name: str) -> Optional[CfgSet]:
    return _accept(convert_cfg_set(entries, crate_name))


def dependency_map(
    components: Iterable[CompilationUnitComponentMetadata],
) -> Dict[str, DependencySettings]:
    """Map component names to dependency settings, sorted by name."""
    entries = {
        component.name: DependencySettings(discriminator=component.discriminator)
        for component in components
    }
    return {name: entries[name] for name in sorted(entries)}


def resolve_global_settings(
    package: PackageMetadata,
    unit: CompilationUnitMetadata,
    no_deps: bool = False,
) -> CrateSettings:
    """Compute the global settings record for the ejected package.

    Edition, version and experimental features come from ``package``; the
    cfg set comes from the unit's aggregate cfg. The dependency mapping lists
    every non-core component of the unit unless ``no_deps`` is set.
    """
    if no_deps:
        dependencies: Dict[str, DependencySettings] = {}
    else:
        dependencies = dependency_map(ejectable_components(unit))

    return CrateSettings(
        edition=resolve_edition(package, package.name),
        version=package.version,
        cfg_set=resolve_cfg_set(unit.cfg, package.name),
        dependencies=dependencies,
        experimental_features=parse_experimental_features(package),
    )


def resolve_override_settings(index: ComponentIndex, position: int) -> CrateSettings:
    """Compute the override settings record of one component.

    Args:
        index: Lookup structures of the unit being ejected.
        position: Position of the component in the unit.
    """
    component = index.graph.nodes[position]["component"]
    package = index.package_of(component)

    cfg_set = None
    if component.cfg is not None:
        cfg_set = resolve_cfg_set(component.cfg, component.name)

    return CrateSettings(
        edition=resolve_edition(package, component.name),
        version=package.version if package is not None else None,
        cfg_set=cfg_set,
        dependencies=dependency_map(index.dependencies_of(position)),
        experimental_features=parse_experimental_features(package),
    )


def resolve_override_map(index: ComponentIndex) -> Dict[str, CrateSettings]:
    """Compute override records for every non-core component, in unit order."""
    override_map: Dict[str, CrateSettings] = {}
    for position in index.positions():
        component = index.graph.nodes[position]["component"]
        override_map[component.name] = resolve_override_settings(index, position)
    return override_map


__all__ = [
    "dependency_map",
    "resolve_cfg_set",
    "resolve_edition",
    "resolve_global_settings",
    "resolve_override_map",
    "resolve_override_settings",
]
