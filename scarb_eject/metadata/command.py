"""Acquire the metadata snapshot from Scarb.

``MetadataCommand`` runs ``scarb --json metadata --format-version 1`` and
validates the document it prints. ``load_metadata`` reads a previously saved
document from disk, which is handy for offline runs and tests.
"""

# Subprocess and decoding failures are wrapped into MetadataError for the CLI.


from __future__ import annotations

import json
import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from scarb_eject.errors import MetadataError
from scarb_eject.metadata.models import METADATA_FORMAT_VERSION, Metadata

logger = logging.getLogger("scarb_eject.metadata.command")

DEFAULT_SCARB = "scarb"
SCARB_ENV = "SCARB"
DEFAULT_TIMEOUT = 300


def _validate(data: object, origin: str) -> Metadata:
    """Validate a decoded JSON document as ``Metadata``."""
    try:
        return Metadata.model_validate(data)
    except ValidationError as e:
        raise MetadataError(f"invalid metadata from {origin}: {e}") from e


def parse_metadata_stream(stdout: str, origin: str = "scarb metadata") -> Metadata:
    """Find and validate the metadata document in Scarb's JSON output.

    With ``--json`` Scarb prints one JSON value per line; status messages may
    precede the metadata document. The first object carrying a ``version``
    key is taken as the metadata.

    Args:
        stdout: Captured standard output.
        origin: Description of the output source, for error messages.

    Returns:
        Metadata: Validated snapshot.

    Raises:
        MetadataError: If no metadata line is present or it is invalid.
    """
    for line in stdout.splitlines():
        line = line.strip()
        if not line.startswith("{"):
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            logger.debug("Skipping non-JSON line from %s: %s", origin, line[:80])
            continue
        if isinstance(data, dict) and "version" in data and "workspace" in data:
            return _validate(data, origin)

    raise MetadataError(f"`{origin}` exited successfully but did not print metadata")


def load_metadata(path: Union[str, Path]) -> Metadata:
    """Load a metadata snapshot saved as a JSON file.

    Both a single JSON document and Scarb's line-delimited ``--json`` output
    are accepted.

    Raises:
        MetadataError: If the file cannot be read or holds no valid metadata.
    """
    path = Path(path)
    logger.info("Loading metadata from file: %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MetadataError(f"cannot read metadata file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return parse_metadata_stream(text, origin=str(path))
    return _validate(data, str(path))


class MetadataCommand:
    """Builder around the ``scarb metadata`` invocation."""

    def __init__(
        self,
        scarb_path: Optional[str] = None,
        manifest_path: Optional[Union[str, Path]] = None,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the command.

        Args:
            scarb_path: Scarb executable. Defaults to the ``SCARB`` environment
                variable, then to ``scarb`` on ``PATH``.
            manifest_path: Optional ``Scarb.toml`` forwarded to Scarb.
            timeout: Seconds to wait for Scarb before giving up.
        """
        self.scarb_path = scarb_path or os.environ.get(SCARB_ENV) or DEFAULT_SCARB
        self.manifest_path = manifest_path
        self.timeout = timeout

    def build_args(self) -> List[str]:
        """Return the full command line."""
        cmd = [
            self.scarb_path,
            "--json",
            "metadata",
            "--format-version",
            str(METADATA_FORMAT_VERSION),
        ]
        if self.manifest_path is not None:
            cmd.extend(["--manifest-path", str(self.manifest_path)])
        return cmd

    def exec(self) -> Metadata:
        """Run Scarb and return the parsed snapshot.

        Scarb's stderr is inherited so its diagnostics reach the user.

        Raises:
            MetadataError: On a missing executable, timeout, non-zero exit,
                or unusable output.
        """
        cmd = self.build_args()
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.PIPE,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise MetadataError(f"could not run `{self.scarb_path}`: {e}") from e
        except subprocess.TimeoutExpired as e:
            logger.error("scarb metadata timed out after %ss", self.timeout)
            raise MetadataError(
                f"`scarb metadata` timed out after {self.timeout}s"
            ) from e
        except subprocess.CalledProcessError as e:
            raise MetadataError(
                f"`scarb metadata` failed with exit code {e.returncode}"
            ) from e

        metadata = parse_metadata_stream(result.stdout)
        logger.info(
            "Loaded metadata: %d package(s), %d compilation unit(s)",
            len(metadata.packages),
            len(metadata.compilation_units),
        )
        return metadata


__all__ = ["MetadataCommand", "load_metadata", "parse_metadata_stream"]
