"""Metadata-to-configuration resolution engine."""

from .assembler import build_project_config
from .components import ComponentIndex
from .models import (
    AllCratesConfig,
    Cfg,
    CfgSet,
    CrateSettings,
    DependencySettings,
    Edition,
    ExperimentalFeaturesConfig,
    ProjectConfigContent,
)
from .roots import CORE_CRATE_NAME, project_crate_roots
from .selector import select_compilation_unit
from .settings import resolve_global_settings, resolve_override_map

__all__ = [
    "AllCratesConfig",
    "CORE_CRATE_NAME",
    "Cfg",
    "CfgSet",
    "ComponentIndex",
    "CrateSettings",
    "DependencySettings",
    "Edition",
    "ExperimentalFeaturesConfig",
    "ProjectConfigContent",
    "build_project_config",
    "project_crate_roots",
    "resolve_global_settings",
    "resolve_override_map",
    "select_compilation_unit",
]
