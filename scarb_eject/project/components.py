"""Per-pass lookup structures over a snapshot and its selected unit.

Components reference their owning package by id and their sibling
dependencies by component id. Both joins are resolved once here: packages
through a dict, components through a ``networkx.DiGraph`` whose nodes are
component positions in the unit and whose edges are resolved dependency
references.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import networkx as nx

from scarb_eject.metadata.models import (
    CompilationUnitComponentMetadata,
    CompilationUnitMetadata,
    Metadata,
    PackageMetadata,
)
from scarb_eject.project.roots import is_core

logger = logging.getLogger("scarb_eject.project.components")


@dataclass(frozen=True)
class ComponentIndex:
    """Indexed view of one compilation unit.

    Attributes:
        unit: The compilation unit being ejected.
        packages: Package id -> package, for every package of the snapshot.
        graph: Dependency graph over non-core components. Nodes are positions
            in ``unit.components`` and carry the component under the
            ``component`` attribute.
    """

    unit: CompilationUnitMetadata
    packages: Dict[str, PackageMetadata]
    graph: nx.DiGraph

    @classmethod
    def build(cls, metadata: Metadata, unit: CompilationUnitMetadata) -> "ComponentIndex":
        """Index ``unit``'s components and the snapshot's packages."""
        packages: Dict[str, PackageMetadata] = {}
        for package in metadata.packages:
            packages.setdefault(package.id, package)

        graph = nx.DiGraph()
        by_component_id: Dict[str, int] = {}
        for position, component in enumerate(unit.components):
            if is_core(component):
                continue
            graph.add_node(position, component=component)
            if component.id is not None:
                by_component_id.setdefault(component.id, position)

        # References to core, to other units or to unknown ids find no node
        # and are dropped.
        for position, component in enumerate(unit.components):
            if is_core(component) or not component.dependencies:
                continue
            for dependency in component.dependencies:
                target = by_component_id.get(dependency.id)
                if target is not None:
                    graph.add_edge(position, target)

        logger.debug(
            "Indexed unit %s: %d component(s), %d dependency edge(s)",
            unit.id,
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return cls(unit=unit, packages=packages, graph=graph)

    def package_of(
        self, component: CompilationUnitComponentMetadata
    ) -> Optional[PackageMetadata]:
        """Return the package owning ``component``, if it is in the snapshot."""
        return self.packages.get(component.package)

    def dependencies_of(self, position: int) -> List[CompilationUnitComponentMetadata]:
        """Return the resolved dependencies of the component at ``position``."""
        if position not in self.graph:
            return []
        return [
            self.graph.nodes[target]["component"]
            for target in self.graph.successors(position)
        ]

    def positions(self) -> List[int]:
        """Return node positions in unit order."""
        return sorted(self.graph.nodes)


__all__ = ["ComponentIndex"]
