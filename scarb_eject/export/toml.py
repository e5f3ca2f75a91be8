"""TOML export for resolved project configurations."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

import tomli_w

from scarb_eject.project.models import ProjectConfigContent

logger = logging.getLogger("scarb_eject.export.toml")

PROJECT_CONFIG_FILENAME = "cairo_project.toml"

# Destination meaning "write to standard output".
STDOUT_SENTINEL = "-"


def render_project_config(config: ProjectConfigContent) -> str:
    """Render ``config`` as ``cairo_project.toml`` text ending in a newline."""
    text = tomli_w.dumps(config.to_toml_dict())
    if not text.endswith("\n"):
        text += "\n"
    return text


def default_output_path(workspace_root: Union[str, Path]) -> Path:
    return Path(workspace_root) / PROJECT_CONFIG_FILENAME


def write_project_config(
    config: ProjectConfigContent,
    destination: Union[str, Path],
    stdout: Optional[TextIO] = None,
) -> None:
    """Write ``config`` to ``destination``, or to stdout for ``-``.

    Args:
        config: Configuration to write.
        destination: Output file path or ``-``.
        stdout: Stream used for ``-``; defaults to ``sys.stdout``.
    """
    text = render_project_config(config)

    if str(destination) == STDOUT_SENTINEL:
        stream = stdout if stdout is not None else sys.stdout
        stream.write(text)
        stream.flush()
        return

    output_path = Path(destination)
    logger.info("Writing project config to %s", output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info(
        "Project config written: %d crate root(s), %d override(s)",
        len(config.crate_roots),
        len(config.crates_config.override_map),
    )
