"""
Configuration management for the personal site.

Uses Pydantic for validation and pydantic-settings for environment variable support.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from personal_site.models.feed import SiteMetadata


class SiteConfig(BaseSettings):
    """Site metadata advertised in the feed channel."""

    model_config = SettingsConfigDict(env_prefix="SITE_")

    title: str = Field(default="Md Sohail | Blog & TIL", description="Site title")
    description: str = Field(
        default=(
            "My personal blog and TIL posts where I write about technology, "
            "programming, and other interests."
        ),
        description="Site description",
    )
    url: str = Field(default="https://mdsohail.dev", description="Absolute base URL of the site")

    @field_validator("title", "description")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Require non-empty metadata strings."""
        v = v.strip()
        if not v:
            raise ValueError("Site metadata must not be empty")
        return v

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate the site URL is absolute http(s)."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Site URL must start with http:// or https://, got {v!r}")
        return v


class ContentConfig(BaseSettings):
    """Content store configuration.

    The ``files`` backend reads markdown files with YAML front matter from
    ``<content_dir>/<collection>/``. The ``database`` backend reads the
    ``posts`` table configured by :class:`DatabaseConfig`.
    """

    model_config = SettingsConfigDict(env_prefix="CONTENT_")

    backend: str = Field(default="files", description="Content backend: files or database")
    content_dir: str = Field(default="content", description="Root directory of the collections")
    collections: list[str] = Field(
        default_factory=lambda: ["blog", "til"],
        description="Collections merged into the feed",
    )
    fetch_workers: int = Field(default=2, ge=1, le=16, description="Parallel collection reads")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Validate content backend."""
        v = v.lower().strip()
        valid_backends = ["files", "database"]
        if v not in valid_backends:
            raise ValueError(f"Invalid content backend: {v!r}. Must be one of {valid_backends}")
        return v


class DatabaseConfig(BaseSettings):
    """Database configuration for the ``database`` content backend (SQLite)."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    path: str = Field(default="data/personal_site.db", description="Database file path")
    echo: bool = Field(default=False, description="Echo SQL statements")

    @field_validator("path")
    @classmethod
    def ensure_directory_exists(cls, v: str) -> str:
        """Ensure the database directory exists."""
        if v != ":memory:":
            Path(v).parent.mkdir(parents=True, exist_ok=True)
        return v


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        description="Log format"
    )

    # File logging
    file_enabled: bool = Field(default=True, description="Enable file logging")
    file_path: str = Field(default="logs/personal_site.log", description="Log file path")
    rotation: str = Field(default="10 MB", description="Log rotation size")
    retention: str = Field(default="14 days", description="Log retention period")

    # Console logging
    console_enabled: bool = Field(default=True, description="Enable console logging")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v

    @field_validator("file_path")
    @classmethod
    def ensure_directory_exists(cls, v: str) -> str:
        """Ensure the log directory exists."""
        Path(v).parent.mkdir(parents=True, exist_ok=True)
        return v


class WebConfig(BaseSettings):
    """Web server configuration."""

    model_config = SettingsConfigDict(env_prefix="WEB_")

    host: str = Field(default="127.0.0.1", description="Web server host")
    port: int = Field(default=4321, ge=1, le=65535, description="Web server port")
    debug: bool = Field(default=False, description="Debug mode")
    secret_key: str = Field(default="dev-secret-key", description="Secret key for sessions")


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SITE_APP_",
        case_sensitive=False,
    )

    # Sub-configurations
    site: SiteConfig = Field(default_factory=SiteConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    def site_metadata(self) -> "SiteMetadata":
        """Build the feed channel metadata from the site configuration."""
        from personal_site.models.feed import SiteMetadata

        return SiteMetadata(
            title=self.site.title,
            description=self.site.description,
            site=self.site.url,
        )


_NESTED_CONFIGS = {
    "site": SiteConfig,
    "content": ContentConfig,
    "database": DatabaseConfig,
    "logging": LoggingConfig,
    "web": WebConfig,
}

# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def load_config_from_yaml(yaml_path: str) -> Config:
    """Load configuration from a YAML file.

    Note: Values loaded from YAML take precedence over environment variables.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        Config instance loaded from the file.
    """
    import yaml

    yaml_file = Path(yaml_path)
    if not yaml_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

    with yaml_file.open("r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    main_config = {}
    nested_configs = {}

    for key, value in config_dict.items():
        if key in _NESTED_CONFIGS:
            nested_configs[key] = value
        else:
            main_config[key] = value

    # Nested configs are built individually so env vars still fill unset fields
    for key, config_class in _NESTED_CONFIGS.items():
        nested_configs[key] = config_class(**(nested_configs.get(key) or {}))

    main_config.update(nested_configs)
    return Config(**main_config)


def reload_config() -> Config:
    """Reload configuration from environment and YAML files."""
    global _config
    _config = None

    config_yaml = Path("config/config.yaml")
    if config_yaml.exists():
        _config = load_config_from_yaml(str(config_yaml))
    else:
        _config = Config()

    return _config
