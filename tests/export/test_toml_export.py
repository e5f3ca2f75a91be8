"""cairo_project.toml rendering tests."""

from __future__ import annotations

import io
import tomllib
from pathlib import Path

from scarb_eject.export import (
    default_output_path,
    render_project_config,
    write_project_config,
)
from scarb_eject.project.models import (
    AllCratesConfig,
    Cfg,
    CfgSet,
    CrateSettings,
    DependencySettings,
    Edition,
    ExperimentalFeaturesConfig,
    ProjectConfigContent,
)


def _config() -> ProjectConfigContent:
    return ProjectConfigContent(
        crate_roots={"hello": "/ws/hello/src", "dep": "/ws/dep/src"},
        crates_config=AllCratesConfig(
            global_settings=CrateSettings(
                edition=Edition.V2024_07,
                version="0.1.0",
                cfg_set=CfgSet.from_cfgs([Cfg(key="target", value="lib"), Cfg(key="test")]),
                dependencies={
                    "dep": DependencySettings(discriminator="dep-x"),
                    "hello": DependencySettings(),
                },
                experimental_features=ExperimentalFeaturesConfig(coupons=True),
            ),
            override_map={
                "hello": CrateSettings(edition=Edition.V2024_07, version="0.1.0"),
                "dep": CrateSettings(),
            },
        ),
    )


def test_rendered_layout_matches_cairo_project_toml() -> None:
    text = render_project_config(_config())
    data = tomllib.loads(text)

    assert text.endswith("\n")
    assert data["crate_roots"] == {"hello": "/ws/hello/src", "dep": "/ws/dep/src"}
    global_table = data["config"]["global"]
    assert global_table["edition"] == "2024_07"
    assert global_table["version"] == "0.1.0"
    assert global_table["cfg_set"] == [["target", "lib"], "test"]
    assert global_table["dependencies"] == {"dep": {"discriminator": "dep-x"}, "hello": {}}
    assert global_table["experimental_features"] == {
        "negative_impls": False,
        "associated_item_constraints": False,
        "coupons": True,
    }
    assert list(data["config"]["override"]) == ["hello", "dep"]


def test_absent_optional_fields_are_omitted() -> None:
    data = tomllib.loads(render_project_config(_config()))

    dep = data["config"]["override"]["dep"]
    assert dep["edition"] == "2023_01"
    assert "version" not in dep
    assert "cfg_set" not in dep


def test_write_to_file_and_stdout(tmp_path: Path) -> None:
    destination = default_output_path(tmp_path)
    write_project_config(_config(), destination)

    assert destination.name == "cairo_project.toml"
    assert destination.read_text(encoding="utf-8") == render_project_config(_config())

    stream = io.StringIO()
    write_project_config(_config(), "-", stdout=stream)
    assert stream.getvalue() == render_project_config(_config())
