"""Configuration schema and loading for scarb-eject."""

from .loader import load_eject_config
from .schema import EjectConfig

__all__ = [
    "EjectConfig",
    "load_eject_config",
]
