"""Rendering and writing of cairo_project.toml files."""

from .toml import (
    PROJECT_CONFIG_FILENAME,
    STDOUT_SENTINEL,
    default_output_path,
    render_project_config,
    write_project_config,
)

__all__ = [
    "PROJECT_CONFIG_FILENAME",
    "STDOUT_SENTINEL",
    "default_output_path",
    "render_project_config",
    "write_project_config",
]
