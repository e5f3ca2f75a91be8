"""scarb-eject: turn a Scarb workspace into a Cairo project configuration."""

__version__ = "0.1.0"
