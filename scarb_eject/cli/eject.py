"""Eject command implementation."""

# The CLI reports every fatal error as a log line and a non-zero exit code.


import logging
import os
from pathlib import Path

from scarb_eject.config import EjectConfig, load_eject_config
from scarb_eject.errors import EjectError
from scarb_eject.export import default_output_path, write_project_config
from scarb_eject.metadata import Metadata, MetadataCommand, PackagesFilter, load_metadata
from scarb_eject.metadata.packages_filter import PACKAGES_FILTER_ENV, split_specs
from scarb_eject.project import build_project_config

logger = logging.getLogger("scarb_eject.cli.eject")


def eject_command(args) -> int:
    """Execute the eject command.

    Args:
        args: Parsed command-line arguments containing:
            - output: Destination path or ``-`` (optional)
            - package: Comma separated package specs (optional)
            - workspace: Consider all workspace members
            - no_deps: Skip the global dependency mapping
            - manifest_path: Scarb.toml forwarded to Scarb (optional)
            - metadata_file: Saved metadata JSON to use instead of Scarb (optional)
            - config: Tool configuration path or inline text (optional)

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        return _eject_command_impl(args)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        return 130
    except (EjectError, OSError) as e:
        logger.error("%s", e)
        return 1


def _eject_command_impl(args) -> int:
    config = load_eject_config(getattr(args, "config", None))

    metadata = _acquire_metadata(args, config)
    packages_filter = _packages_filter(args, config)
    package = packages_filter.match_one(metadata)
    logger.info("Ejecting package %s", package.id)

    no_deps = bool(getattr(args, "no_deps", False)) or config.no_deps
    project_config = build_project_config(metadata, package, no_deps=no_deps)

    output = getattr(args, "output", None) or config.output
    destination = output if output else default_output_path(metadata.workspace.root)
    write_project_config(project_config, destination)
    return 0


def _acquire_metadata(args, config: EjectConfig) -> Metadata:
    metadata_file = getattr(args, "metadata_file", None)
    if metadata_file:
        return load_metadata(Path(metadata_file))

    manifest_path = getattr(args, "manifest_path", None) or config.manifest_path
    command = MetadataCommand(
        scarb_path=config.scarb_path,
        manifest_path=manifest_path,
        timeout=config.metadata_timeout,
    )
    return command.exec()


def _packages_filter(args, config: EjectConfig) -> PackagesFilter:
    workspace = bool(getattr(args, "workspace", False)) or config.workspace
    specs = split_specs(getattr(args, "package", None))
    if not specs:
        specs = split_specs(os.environ.get(PACKAGES_FILTER_ENV)) or list(config.packages)
    return PackagesFilter(package=specs, workspace=workspace)
