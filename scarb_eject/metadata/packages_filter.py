"""Resolve ``--package`` / ``--workspace`` to one workspace member."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from typing import List, Optional

from scarb_eject.errors import PackageSelectionError
from scarb_eject.metadata.models import Metadata, PackageMetadata

logger = logging.getLogger("scarb_eject.metadata.packages_filter")

PACKAGES_FILTER_ENV = "SCARB_PACKAGES_FILTER"

_GLOB_CHARS = set("*?[")


def split_specs(raw: Optional[str]) -> List[str]:
    """Split a comma separated package spec string, dropping blanks."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class PackagesFilter:
    """Package selector over the workspace members of a snapshot.

    Attributes:
        package: Package names or glob patterns. Empty means "not given".
        workspace: Consider every workspace member. Only used when no
            package spec is given.
    """

    package: List[str] = field(default_factory=list)
    workspace: bool = False

    def match_one(self, metadata: Metadata) -> PackageMetadata:
        """Return the single workspace member this filter selects.

        Raises:
            PackageSelectionError: If the workspace has no members, a spec
                matches nothing, or more than one package matches.
        """
        members = metadata.workspace_packages()
        if not members:
            raise PackageSelectionError("workspace has no members")

        # Explicit specs win over `workspace`, which may come from the config file.
        if not self.package:
            if len(members) > 1:
                names = ", ".join(p.name for p in members)
                raise PackageSelectionError(
                    "workspace has multiple members, use `--package` to "
                    f"specify one (found: {names})"
                )
            logger.debug("Selected sole workspace member %s", members[0].id)
            return members[0]

        matched: List[PackageMetadata] = []
        for spec in self.package:
            hits = [p for p in members if _matches(spec, p)]
            if not hits and not _is_glob(spec):
                raise PackageSelectionError(f"package `{spec}` not found in workspace")
            for hit in hits:
                if hit not in matched:
                    matched.append(hit)

        if not matched:
            specs = ", ".join(self.package)
            raise PackageSelectionError(f"package `{specs}` not found in workspace")
        if len(matched) > 1:
            specs = ", ".join(self.package)
            raise PackageSelectionError(
                "could not determine which package to work on, multiple packages "
                f"match `{specs}`; use `--package` to specify one"
            )

        logger.debug("Selected package %s", matched[0].id)
        return matched[0]


def _is_glob(spec: str) -> bool:
    return any(ch in _GLOB_CHARS for ch in spec)


def _matches(spec: str, package: PackageMetadata) -> bool:
    if _is_glob(spec):
        return fnmatchcase(package.name, spec)
    return package.name == spec


__all__ = ["PACKAGES_FILTER_ENV", "PackagesFilter", "split_specs"]
