"""CLI configuration loaded from environment variables.

The parser itself never reads configuration; only the command-line entry
point does, and command-line flags override these values.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from asc_timetable.models import ParseOptions


class AscConfig(BaseSettings):
    """Configuration loaded from ASC_-prefixed environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Parsing policy
    strict: bool = Field(
        default=True,
        description="Abort on missing required fields or an empty lesson list",
    )
    coerce_numbers: bool = Field(
        default=True,
        description="Extract lesson day/period as numbers",
    )

    # Output
    json_indent: int = Field(
        default=2,
        description="Indentation of the JSON document written by the CLI",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "ASC_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def parse_options(self) -> ParseOptions:
        """ParseOptions matching this configuration."""
        return ParseOptions(strict=self.strict, coerce_numbers=self.coerce_numbers)


# Singleton pattern
_config: AscConfig | None = None


def get_config() -> AscConfig:
    """Get the configuration singleton.

    Returns:
        AscConfig: Configuration instance
    """
    global _config
    if _config is None:
        _config = AscConfig()
    return _config
