"""Helpers for loading the tool configuration from TOML/JSON sources.

This module provides a single entry point `load_eject_config` that accepts
various configuration sources:

* None -> default EjectConfig
* dict -> EjectConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from scarb_eject.config.schema import EjectConfig
from scarb_eject.errors import ConfigurationError

logger = logging.getLogger("scarb_eject.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _guess_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def _looks_inline(text: str) -> bool:
    # Multi-line or bracketed text is never a path.
    return "\n" in text or text.lstrip().startswith(("{", "["))


def _decode(text: str, fmt: str) -> Dict[str, Any]:
    try:
        data = json.loads(text) if fmt == "json" else tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid {fmt.upper()} configuration: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError("Top-level configuration must be a mapping/dict")
    return data


def _validate(data: Dict[str, Any]) -> EjectConfig:
    try:
        return EjectConfig.from_dict(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_eject_config(source: ConfigSource) -> EjectConfig:
    """Load EjectConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns the default EjectConfig
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        EjectConfig instance.

    Raises:
        ConfigurationError: If the source cannot be decoded or validated.
    """
    if source is None:
        logger.debug("No config source provided; using default EjectConfig")
        return EjectConfig()

    if isinstance(source, dict):
        logger.debug("Loading EjectConfig from provided dict")
        return _validate(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None

        if not _looks_inline(str(source)) and path.is_file():
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as e:
                raise ConfigurationError(f"Cannot read {path}: {e}") from e
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _guess_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _guess_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        return _validate(_decode(text, fmt))

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["ConfigSource", "load_eject_config"]
