"""Runtime settings read once when a Lambda builds its repository."""

from dataclasses import dataclass
import os

from utils.error_handling import ConfigurationError


@dataclass(frozen=True)
class RuntimeSettings:
    """Values the handlers need from the Lambda environment."""

    table_name: str
    environment: str = "dev"

    @classmethod
    def from_environment(cls) -> "RuntimeSettings":
        """Load settings from environment variables."""
        table_name = os.environ.get("TABLE_NAME", "").strip()
        if not table_name:
            raise ConfigurationError("TABLE_NAME must be set")

        return cls(
            table_name=table_name,
            environment=os.environ.get("ENVIRONMENT", "dev"),
        )
