"""Configuration management for modmod.

Settings are read from TOML files and environment variables, in priority
order (highest first):

1. Environment variables
2. Project configuration file (.modmod/config.toml or modmod.toml)
3. User configuration file (~/.config/modmod/config.toml)
4. Default values

Environment variables use the prefix ``MODMOD_`` and a double underscore for
nested fields, e.g. ``MODMOD_LOGGING__LOG_LEVEL=DEBUG`` or
``MODMOD_BUILD__CLEAR_OUTPUT=true``.
"""

import logging
from pathlib import Path

import platformdirs
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    console_logging: bool = Field(
        default=False,
        description="Also show log messages on the console",
    )

    file_log_level: str = Field(
        default="DEBUG",
        description="Minimum level written to the log file",
    )

    log_file: str = Field(
        default="",
        description="Log file path (empty for the platform log directory)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}, got {v}")
        return v_upper


class BuildConfig(BaseModel):
    """Defaults for the build command."""

    output_dir: str = Field(
        default="output",
        description="Output directory used when none is given on the command line",
    )

    clear_output: bool = Field(
        default=False,
        description="Remove and recreate the output directory before building",
    )


class ModmodConfig(BaseSettings):
    """Main modmod configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MODMOD_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    build: BuildConfig = Field(
        default_factory=BuildConfig,
        description="Build defaults",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Environment first, then project file, then user file, then init values."""
        config_files = find_config_files()

        toml_sources = []
        for kind in ("project", "user"):
            config_file = config_files[kind]
            if config_file:
                toml_sources.append(TomlConfigSettingsSource(settings_cls, toml_file=config_file))
                logger.debug(f"Using {kind} config: {config_file}")

        return (env_settings, *toml_sources, init_settings)


def user_config_path() -> Path:
    user_config_dir = Path(platformdirs.user_config_dir("modmod", appauthor=False))
    return user_config_dir / "config.toml"


def find_config_files() -> dict[str, Path | None]:
    """Find configuration files in standard locations.

    Returns:
        Dictionary with keys 'user' and 'project', each containing a Path to
        the config file if it exists, or None otherwise.
    """
    config_files: dict[str, Path | None] = {"user": None, "project": None}

    user_config = user_config_path()
    if user_config.exists():
        config_files["user"] = user_config

    # .modmod/config.toml takes precedence over modmod.toml
    cwd = Path.cwd()
    for project_config in (cwd / ".modmod" / "config.toml", cwd / "modmod.toml"):
        if project_config.exists():
            config_files["project"] = project_config
            break

    return config_files


def get_config_file_locations() -> dict[str, Path]:
    """Get the locations where configuration files are looked up (may not exist)."""
    return {
        "user": user_config_path(),
        "project": Path.cwd() / ".modmod" / "config.toml",
    }


# Lazily initialized on first access
_config: ModmodConfig | None = None


def get_config(reload: bool = False) -> ModmodConfig:
    """Get the global configuration instance.

    Args:
        reload: If True, reload the configuration from files and environment.
    """
    global _config

    if _config is None or reload:
        _config = ModmodConfig()

    return _config


def create_example_config() -> str:
    return """# modmod Configuration File
#
# Configuration files are loaded from (in priority order):
#   1. .modmod/config.toml or modmod.toml (project directory)
#   2. ~/.config/modmod/config.toml (user directory)
#
# Environment variables can override any setting (highest priority).
# Nested settings use double underscores: MODMOD_<SECTION>__<KEY>
#
# Examples:
#   MODMOD_LOGGING__LOG_LEVEL=DEBUG
#   MODMOD_BUILD__OUTPUT_DIR=/tmp/course
#   MODMOD_BUILD__CLEAR_OUTPUT=true

[logging]
# Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL
log_level = "INFO"

# Also show log messages on the console (they always go to the log file)
console_logging = false

# Minimum level written to the log file
file_log_level = "DEBUG"

# Log file path; leave empty to use the platform log directory
log_file = ""

[build]
# Output directory used when none is given on the command line
output_dir = "output"

# Remove and recreate the output directory before building.
# If false, the output directory must exist and be empty.
clear_output = false
"""


def write_example_config(location: str = "user") -> Path:
    """Write an example configuration file to a standard location.

    Args:
        location: "user" or "project"

    Raises:
        ValueError: If location is invalid.
        PermissionError: If cannot write to the location.
    """
    locations = get_config_file_locations()

    if location not in locations:
        raise ValueError(f"Invalid location '{location}'. Must be one of: user, project")

    config_path = locations[location]
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(create_example_config(), encoding="utf-8")

    logger.info(f"Created example configuration at: {config_path}")

    return config_path
