"""Configuration management for article-renderer."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ConfigurationError


# ============================================================================
# Configuration Data Models
# ============================================================================

class RenderOptions(BaseModel):
    """Markdown renderer options.

    Instances are immutable and are passed explicitly into each render call,
    so no renderer state is shared between invocations.
    """

    model_config = ConfigDict(frozen=True)

    gfm: bool = Field(default=True, description="Enable GitHub-flavored extensions (tables, sane lists)")
    breaks: bool = Field(default=False, description="Convert bare newlines to <br>")
    pedantic: bool = Field(default=False, description="Disable every extension except code rendering")
    highlight: bool = Field(default=True, description="Syntax-highlight fenced code blocks")
    auto_detect_language: bool = Field(
        default=True,
        description="Guess the language of fenced blocks without a recognized tag"
    )

    def markdown_extensions(self) -> list[str]:
        """Get the Python-Markdown extension names enabled by these options.

        Returns:
            List of extension names, excluding the custom code extension.
        """
        if self.pedantic:
            return []

        extensions = []
        if self.gfm:
            extensions.extend(["tables", "sane_lists"])
        if self.breaks:
            extensions.append("nl2br")
        return extensions


class BatchConfig(BaseModel):
    """Batch conversion configuration."""

    limit: int = Field(default=100, description="Maximum number of articles converted per run")
    content_field: str = Field(default="content", description="Article field holding the body")
    title_field: str = Field(default="title", description="Article field holding the title")
    only_markdown: bool = Field(default=True, description="Convert only articles detected as markdown")

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        """Validate batch limit."""
        if v < 1:
            raise ValueError("limit must be at least 1")
        if v > 10000:
            raise ValueError("limit must be at most 10000")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level for the command-line interface")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level


class Config(BaseModel):
    """Main application configuration."""

    render: RenderOptions = Field(default_factory=RenderOptions)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # ========================================================================
    # Configuration Loading and Management
    # ========================================================================

    @classmethod
    def load_from_file(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from YAML file.

        Args:
            config_path: Path to configuration file. If None, uses default locations.

        Returns:
            Config instance.

        Raises:
            ConfigurationError: If the file is not valid YAML or holds invalid settings.
        """
        if config_path is None:
            config_path = cls._find_config_file()

        if config_path and config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}
                if not isinstance(config_data, dict):
                    raise ConfigurationError(f"Expected a mapping in {config_path}")
                return cls(**config_data)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e

        # Return default configuration if no file found
        return cls()

    @classmethod
    def _find_config_file(cls) -> Path | None:
        """Find configuration file in default locations.

        Returns:
            Path to configuration file, or None if not found.
        """
        possible_paths = [
            Path.cwd() / "config" / "config.yaml",
            Path.cwd() / "config.yaml",
            Path.cwd() / ".article-renderer.yaml",
            Path.home() / ".config" / "article-renderer" / "config.yaml",
            Path.home() / ".article-renderer.yaml",
        ]

        for path in possible_paths:
            if path.exists():
                return path

        return None

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path where to save the configuration.
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                indent=2,
                sort_keys=False
            )
