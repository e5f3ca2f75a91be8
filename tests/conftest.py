"""Shared builders for metadata snapshots used across the test suite."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from scarb_eject.metadata.models import Metadata

WORKSPACE_ROOT = "/work/hello"


def _package_id(name: str, version: str = "0.1.0") -> str:
    return f"{name} {version} (path+file://{WORKSPACE_ROOT}/{name}/Scarb.toml)"


def _package(
    name: str,
    version: str = "0.1.0",
    edition: Optional[str] = None,
    experimental_features: Optional[List[str]] = None,
    package_id: Optional[str] = None,
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": package_id or _package_id(name, version),
        "name": name,
        "version": version,
        "root": f"{WORKSPACE_ROOT}/{name}",
        "manifest_path": f"{WORKSPACE_ROOT}/{name}/Scarb.toml",
        "experimental_features": experimental_features or [],
    }
    if edition is not None:
        data["edition"] = edition
    return data


def _component(
    name: str,
    package: Dict[str, Any],
    source_path: Optional[str] = None,
    cfg: Optional[List[Any]] = None,
    discriminator: Optional[str] = None,
    component_id: Optional[str] = None,
    dependencies: Optional[List[str]] = None,
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "package": package["id"],
        "name": name,
        "source_path": source_path or f"{WORKSPACE_ROOT}/{name}/src/lib.cairo",
    }
    if cfg is not None:
        data["cfg"] = cfg
    if discriminator is not None:
        data["discriminator"] = discriminator
    if component_id is not None:
        data["id"] = component_id
    if dependencies is not None:
        data["dependencies"] = [{"id": dep} for dep in dependencies]
    return data


def _unit(
    package: Dict[str, Any],
    components: List[Dict[str, Any]],
    kind: str = "lib",
    cfg: Optional[List[Any]] = None,
    unit_id: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "id": unit_id or f"{package['name']}-{kind}",
        "package": package["id"],
        "target": {
            "kind": kind,
            "name": package["name"],
            "source_path": f"{WORKSPACE_ROOT}/{package['name']}/src/lib.cairo",
            "params": {},
        },
        "components": components,
        "cfg": cfg if cfg is not None else [["target", kind]],
    }


def _metadata(
    packages: List[Dict[str, Any]],
    units: List[Dict[str, Any]],
    members: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    member_ids = [p["id"] for p in (members if members is not None else packages)]
    return {
        "version": 1,
        "app_exe": "/usr/bin/scarb",
        "workspace": {
            "manifest_path": f"{WORKSPACE_ROOT}/Scarb.toml",
            "root": WORKSPACE_ROOT,
            "members": member_ids,
        },
        "packages": packages,
        "compilation_units": units,
        "current_profile": "dev",
    }


def _hello_world(edition: Optional[str] = None) -> Dict[str, Any]:
    """Package `hello` depending on core, with a single lib unit."""
    core = _package("core", version="2.6.0", package_id="core 2.6.0 (std)")
    hello = _package("hello", edition=edition)
    unit = _unit(
        hello,
        [
            _component(
                "core",
                core,
                source_path="/scarb/core/src/lib.cairo",
                component_id="core-id",
            ),
            _component(
                "hello",
                hello,
                component_id="hello-id",
                dependencies=["core-id", "hello-id"],
                cfg=[["target", "lib"]],
            ),
        ],
    )
    return _metadata([core, hello], [unit], members=[hello])


@pytest.fixture
def snapshot() -> SimpleNamespace:
    """Builders producing metadata JSON documents as plain dicts."""
    return SimpleNamespace(
        root=WORKSPACE_ROOT,
        package=_package,
        component=_component,
        unit=_unit,
        metadata=_metadata,
        hello_world=_hello_world,
        validate=Metadata.model_validate,
    )
