"""
Environment-specific deployment settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    environment: str = "dev"
    aws_region: str = "eu-west-2"

    # Lambda Configuration
    lambda_memory_mb: int = 128
    lambda_timeout_seconds: int = 10
    log_level: str = "INFO"

    # Table Configuration
    point_in_time_recovery: bool = False

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", cls.aws_region)
        log_level = os.environ.get("LOG_LEVEL", "INFO")

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                lambda_memory_mb=256,
                log_level=log_level,
                point_in_time_recovery=True,
            )

        return cls(environment=env, aws_region=region, log_level=log_level)
