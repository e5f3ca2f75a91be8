"""Convert loosely-typed Scarb metadata fields into compiler settings values.

The parsers in this module are pure. Each returns a ``ParseOutcome`` holding
the value to use (already the documented fallback when parsing failed) and,
when something was wrong, a diagnostic message. Callers decide whether and
how to report the diagnostic.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Tuple, TypeVar, Union

from pydantic import StrictStr, TypeAdapter, ValidationError

from scarb_eject.metadata.models import PackageMetadata
from scarb_eject.project.models import Cfg, CfgSet, Edition, ExperimentalFeaturesConfig

T = TypeVar("T")

# Compiler-side wire shape of a cfg list: "name" or ("key", "value").
_CFG_WIRE_ADAPTER: TypeAdapter = TypeAdapter(
    List[Union[StrictStr, Tuple[StrictStr, StrictStr]]]
)

# Experimental feature names recognised by the compiler. Anything else is ignored.
KNOWN_EXPERIMENTAL_FEATURES = (
    "negative_impls",
    "associated_item_constraints",
    "coupons",
)


@dataclass(frozen=True)
class ParseOutcome(Generic[T]):
    """Result of a best-effort parse.

    Attributes:
        value: Parsed value, or the fallback when parsing failed.
        diagnostic: Human-readable problem description, None on success.
    """

    value: T
    diagnostic: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


def parse_edition(
    package: Optional[PackageMetadata], crate_name: str
) -> ParseOutcome[Edition]:
    """Interpret a package's declared edition.

    A missing package or a missing edition silently yields the default
    edition. An unrecognised edition, or a value that is not a string,
    yields the default edition with a diagnostic.

    Args:
        package: Owning package, if it is part of the snapshot.
        crate_name: Crate name used in the diagnostic.
    """
    if package is None or package.edition is None:
        return ParseOutcome(Edition.default())
    try:
        if isinstance(package.edition, str):
            return ParseOutcome(Edition(package.edition))
    except ValueError:
        pass
    return ParseOutcome(
        Edition.default(),
        f"failed to parse edition of package: {crate_name}: "
        f"unknown edition `{package.edition}`",
    )


def convert_cfg_set(
    entries: Any, crate_name: str
) -> ParseOutcome[Optional[CfgSet]]:
    """Re-encode Scarb cfg entries as a compiler cfg set.

    The entries are serialised to JSON and validated against the compiler's
    cfg wire shape, mirroring how Scarb itself hands cfg to the compiler.
    Any structural mismatch, including ``entries`` not being a list, yields
    ``None`` with a diagnostic.

    Args:
        entries: Raw cfg entries from the metadata snapshot.
        crate_name: Crate name used in the diagnostic.
    """
    try:
        text = json.dumps(entries)
        wire = _CFG_WIRE_ADAPTER.validate_json(text)
    except (TypeError, ValueError, ValidationError) as e:
        return ParseOutcome(
            None,
            "scarb metadata cfg did not convert identically to cairo one "
            f"for crate: {crate_name}: {e}",
        )

    cfgs = []
    for item in wire:
        if isinstance(item, tuple):
            cfgs.append(Cfg(key=item[0], value=item[1]))
        else:
            cfgs.append(Cfg(key=item))
    return ParseOutcome(CfgSet.from_cfgs(cfgs))


def parse_experimental_features(
    package: Optional[PackageMetadata],
) -> ExperimentalFeaturesConfig:
    """Read experimental feature opt-ins declared by a package.

    Unknown feature names and non-string entries are ignored; an absent
    package, or a feature list that is not a list, enables nothing.
    """
    if package is None or not isinstance(package.experimental_features, list):
        return ExperimentalFeaturesConfig()
    declared = {name for name in package.experimental_features if isinstance(name, str)}
    return ExperimentalFeaturesConfig(
        **{name: name in declared for name in KNOWN_EXPERIMENTAL_FEATURES}
    )


__all__ = [
    "KNOWN_EXPERIMENTAL_FEATURES",
    "ParseOutcome",
    "convert_cfg_set",
    "parse_edition",
    "parse_experimental_features",
]
