"""
Configuration module - centralized settings for token-guard.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..contracts.options import RuleOptions


# Design-system sources that intentionally use raw tokens
DEFAULT_EXCEPTIONS = [
    "packages/ui-library/src/styles/",
    "packages/ui-library/src/utils/semantic-token-utils.ts",
    "packages/ui-library/style-dictionary/",
    "packages/ui-library/src/stories/PaletteShowcase.stories.tsx",
]


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Every variable is prefixed with TOKEN_GUARD_, e.g.:
        export TOKEN_GUARD_INCLUDE_TESTS=true
        export TOKEN_GUARD_EXCEPTIONS='["src/legacy/"]'
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="TOKEN_GUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # RULE OPTIONS
    # ---------------------------------------------------------------------------
    # EXCEPTIONS: path substrings; matching files are never scanned
    EXCEPTIONS: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCEPTIONS))

    # ALLOWED_PALETTES: palettes whose raw classes are tolerated (showcase pages)
    ALLOWED_PALETTES: List[str] = Field(default_factory=list)

    # ---------------------------------------------------------------------------
    # SUGGESTIONS
    # ---------------------------------------------------------------------------
    # MAX_SUGGESTION_DISTANCE: rem distance still treated as a confident match
    # 0.0 means only exact scale matches become autofix candidates
    MAX_SUGGESTION_DISTANCE: float = Field(default=0.0, ge=0.0)

    # ---------------------------------------------------------------------------
    # BATCH VALIDATOR
    # ---------------------------------------------------------------------------
    INCLUDE_TESTS: bool = False

    # TOP_SUGGESTIONS: entries in the "top suggestions" ranking
    TOP_SUGGESTIONS: int = Field(default=20, ge=1)

    # SUMMARY_VIOLATION_LIMIT: violations listed in summary reports
    SUMMARY_VIOLATION_LIMIT: int = Field(default=10, ge=0)

    # WORKERS: files scanned in parallel (1 = serial)
    WORKERS: int = Field(default=1, ge=1)

    FILE_EXTENSIONS: List[str] = Field(
        default_factory=lambda: [".ts", ".tsx", ".js", ".jsx", ".html", ".htm"]
    )

    IGNORED_DIRECTORIES: List[str] = Field(
        default_factory=lambda: [
            "node_modules", "dist", "build", ".turbo", "coverage", "fixtures", ".git",
        ]
    )

    # ---------------------------------------------------------------------------
    # LOGGING
    # ---------------------------------------------------------------------------
    LOG_LEVEL: str = "WARNING"

    def rule_options(self) -> RuleOptions:
        """
        Build validated rule options from these settings.

        Raises:
            ConfigurationError: If exceptions or palettes are invalid
        """
        return RuleOptions.from_dict({
            "exceptions": self.EXCEPTIONS,
            "allowed_palettes": self.ALLOWED_PALETTES,
        })


# Create a single settings instance to import throughout the app
settings = Settings()
