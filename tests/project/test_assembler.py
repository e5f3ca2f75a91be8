"""End-to-end resolution of metadata snapshots into project configs."""

from __future__ import annotations

import pytest

from scarb_eject.errors import CompilationUnitNotFoundError
from scarb_eject.export import render_project_config
from scarb_eject.project import CORE_CRATE_NAME, build_project_config
from scarb_eject.project.models import Edition, ExperimentalFeaturesConfig


def _multi_crate(snapshot):
    core = snapshot.package("core", version="2.6.0", package_id="core 2.6.0 (std)")
    alpha = snapshot.package("alpha", edition="2023_10")
    beta = snapshot.package("beta", version="0.3.0")
    components = [
        snapshot.component("core", core, component_id="c0"),
        snapshot.component("alpha", alpha, component_id="c1", dependencies=["c0", "c2"]),
        snapshot.component("beta", beta, component_id="c2", discriminator="beta-x"),
    ]
    unit = snapshot.unit(alpha, components, kind="starknet-contract")
    return snapshot.validate(snapshot.metadata([core, alpha, beta], [unit], members=[alpha]))


def test_hello_world_scenario(snapshot) -> None:
    """Package without edition or features, depending only on core."""
    core = snapshot.package("core", version="2.6.0", package_id="core 2.6.0 (std)")
    pkg = snapshot.package("P")
    unit = snapshot.unit(
        pkg,
        [
            snapshot.component("core", core, component_id="core-id"),
            snapshot.component("P", pkg, component_id="p-id", dependencies=["core-id"]),
        ],
    )
    metadata = snapshot.validate(snapshot.metadata([core, pkg], [unit], members=[pkg]))

    config = build_project_config(metadata, metadata.packages[1])

    assert config.crate_roots == {"P": f"{snapshot.root}/P/src"}
    override = config.crates_config.override_map["P"]
    assert override.dependencies == {}
    assert override.edition is Edition.default()
    assert override.experimental_features == ExperimentalFeaturesConfig()
    global_settings = config.crates_config.global_settings
    assert global_settings.version == "0.1.0"
    assert list(global_settings.dependencies) == ["P"]


def test_core_never_appears_anywhere(snapshot) -> None:
    metadata = _multi_crate(snapshot)

    config = build_project_config(metadata, metadata.packages[1])

    assert CORE_CRATE_NAME not in config.crate_roots
    assert CORE_CRATE_NAME not in config.crates_config.override_map
    assert CORE_CRATE_NAME not in config.crates_config.global_settings.dependencies
    for settings in config.crates_config.override_map.values():
        assert CORE_CRATE_NAME not in settings.dependencies


def test_crate_roots_and_overrides_share_keys_in_component_order(snapshot) -> None:
    metadata = _multi_crate(snapshot)

    config = build_project_config(metadata, metadata.packages[1])

    assert list(config.crate_roots) == ["alpha", "beta"]
    assert list(config.crates_config.override_map) == list(config.crate_roots)


def test_dependencies_stay_within_the_unit(snapshot) -> None:
    metadata = _multi_crate(snapshot)

    config = build_project_config(metadata, metadata.packages[1])

    alpha = config.crates_config.override_map["alpha"]
    assert set(alpha.dependencies) <= set(config.crate_roots)
    assert alpha.dependencies["beta"].discriminator == "beta-x"
    assert config.crates_config.override_map["beta"].version == "0.3.0"


def test_resolution_is_idempotent_and_does_not_mutate_snapshot(snapshot) -> None:
    metadata = _multi_crate(snapshot)
    before = metadata.model_dump()

    first = build_project_config(metadata, metadata.packages[1])
    second = build_project_config(metadata, metadata.packages[1])

    assert first == second
    assert render_project_config(first) == render_project_config(second)
    assert metadata.model_dump() == before


def test_malformed_component_cfg_still_renders(snapshot) -> None:
    pkg = snapshot.package("hello")
    unit = snapshot.unit(
        pkg, [snapshot.component("hello", pkg, cfg=[["a", "b", "c"]])]
    )
    metadata = snapshot.validate(snapshot.metadata([pkg], [unit]))

    config = build_project_config(metadata, metadata.packages[0])

    assert config.crates_config.override_map["hello"].cfg_set is None
    assert "[crate_roots]" in render_project_config(config)


def test_package_without_unit_is_fatal(snapshot) -> None:
    pkg = snapshot.package("lonely")
    metadata = snapshot.validate(snapshot.metadata([pkg], []))

    with pytest.raises(CompilationUnitNotFoundError):
        build_project_config(metadata, metadata.packages[0])


def test_empty_unit_yields_empty_roots(snapshot) -> None:
    pkg = snapshot.package("hello")
    metadata = snapshot.validate(snapshot.metadata([pkg], [snapshot.unit(pkg, [])]))

    config = build_project_config(metadata, metadata.packages[0])

    assert config.crate_roots == {}
    assert config.crates_config.override_map == {}
    assert config.crates_config.global_settings.dependencies == {}
