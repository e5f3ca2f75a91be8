"""Pick the compilation unit to eject for a package."""

from __future__ import annotations

import logging
from typing import Tuple

from scarb_eject.errors import CompilationUnitNotFoundError
from scarb_eject.metadata.models import CompilationUnitMetadata, Metadata

logger = logging.getLogger("scarb_eject.project.selector")

# Contract units are preferred over library units, which are preferred over
# any custom target.
TARGET_KIND_RANKS = {
    "starknet-contract": 0,
    "lib": 1,
}
OTHER_TARGET_RANK = 2


def unit_priority(unit: CompilationUnitMetadata) -> Tuple[int, str]:
    """Sort key of a unit: lower is preferred."""
    kind = unit.target.kind
    return (TARGET_KIND_RANKS.get(kind, OTHER_TARGET_RANK), kind)


def select_compilation_unit(
    metadata: Metadata, package_id: str
) -> CompilationUnitMetadata:
    """Return the most suitable compilation unit of ``package_id``.

    Units are ranked by target kind (``starknet-contract``, then ``lib``,
    then anything else) with ties broken by the kind name. ``min`` keeps
    the first of fully equal candidates.

    Raises:
        CompilationUnitNotFoundError: If the package owns no unit.
    """
    candidates = [
        unit for unit in metadata.compilation_units if unit.package == package_id
    ]
    if not candidates:
        raise CompilationUnitNotFoundError(
            "could not find a compilation unit suitable for ejection for "
            f"package {package_id}"
        )

    unit = min(candidates, key=unit_priority)
    logger.debug(
        "Selected compilation unit %s (target kind %s) out of %d candidate(s)",
        unit.id,
        unit.target.kind,
        len(candidates),
    )
    return unit


__all__ = ["select_compilation_unit", "unit_priority"]
