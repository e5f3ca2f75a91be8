"""Tool configuration schema using Pydantic for validation.

Values here are defaults for the command-line flags; flags given on the
command line take precedence.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class EjectConfig(BaseModel):
    """Configuration of one ejection run.

    Attributes:
        output: Destination path, ``-`` for stdout. None means
            ``cairo_project.toml`` in the workspace root.
        no_deps: Leave the global dependency mapping empty.
        manifest_path: ``Scarb.toml`` forwarded to ``scarb metadata``.
        scarb_path: Scarb executable; None defers to ``$SCARB`` or ``scarb``.
        metadata_timeout: Seconds to wait for ``scarb metadata``.
        packages: Package names or glob patterns to select from.
        workspace: Consider every workspace member.
    """

    output: Optional[str] = None
    no_deps: bool = False
    manifest_path: Optional[str] = None
    scarb_path: Optional[str] = None
    metadata_timeout: int = Field(default=300, ge=1, le=3600)
    packages: List[str] = Field(default_factory=list)
    workspace: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, v: List[str]) -> List[str]:
        """Validate that package specs are non-empty strings."""
        for spec in v:
            if not spec.strip():
                raise ValueError("package specs must be non-empty")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EjectConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)
