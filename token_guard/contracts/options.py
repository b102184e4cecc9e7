"""
Options - Validated configuration for the lint rules.

Options are passed explicitly into every engine call; there is no
module-level "current options" state.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ConfigurationError
from ..semantic_tokens import SemanticTokens


class RuleOptions(BaseModel):
    """
    Options shared by every non-semantic token rule.

    Example:
        options = RuleOptions.from_dict({"exceptions": ["src/styles/"]})
        options.is_excepted("src/styles/tokens.ts")  # True
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    exceptions: List[str] = Field(
        default_factory=list,
        description="Path substrings; matching files are skipped entirely",
    )
    allowed_palettes: List[str] = Field(
        default_factory=list,
        description="Palettes whose raw color classes are never flagged",
    )

    @field_validator("exceptions")
    @classmethod
    def validate_exceptions(cls, v: List[str]) -> List[str]:
        """Reject empty entries, which would match every file."""
        for entry in v:
            if not entry.strip():
                raise ValueError("exception entries must be non-empty strings")
        return v

    @field_validator("allowed_palettes")
    @classmethod
    def validate_palettes(cls, v: List[str]) -> List[str]:
        """Only known palettes can be allowed."""
        unknown = [p for p in v if p not in SemanticTokens.COLOR_PALETTES]
        if unknown:
            raise ValueError(f"unknown palettes: {', '.join(unknown)}")
        return v

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RuleOptions":
        """
        Build options from raw (e.g. user supplied) configuration.

        Raises:
            ConfigurationError: If an option is unknown or has an invalid value
        """
        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(first["msg"], field=location) from e

    def is_excepted(self, filename: str) -> bool:
        """Check if a file path contains any configured exception substring."""
        return any(entry in filename for entry in self.exceptions)
