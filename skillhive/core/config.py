"""
Configuration management

- Immutable settings
- Environment separation (dev/staging/prod)
- Typed parameters
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal, Final

from skillhive.core.errors import ConfigurationError


class Environment(Enum):
    """Deployment environment"""
    DEVELOPMENT = "dev"
    STAGING = "staging"
    PRODUCTION = "prod"


@dataclass(frozen=True)
class MatchingParams:
    """Recommendation and teammate matching parameters"""
    recommendation_limit: int = 6
    # Off by default: recommendations follow fetch order, not match strength.
    rank_by_match_strength: bool = False
    active_statuses: tuple[str, ...] = ("Upcoming", "Ongoing")


@dataclass(frozen=True)
class RetryParams:
    """Retry parameters for the data-access boundary"""
    max_attempts: int = 3
    min_wait_seconds: float = 0.1
    max_wait_seconds: float = 2.0


@dataclass(frozen=True)
class LoggingParams:
    """Logging settings"""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    enable_json: bool = False
    enable_console: bool = True


@dataclass(frozen=True)
class ApiParams:
    """HTTP service settings"""
    cors_origins: tuple[str, ...] = (
        "http://localhost:5173",
        "http://localhost:8080",
    )
    seed_dir: Path | None = None


@dataclass(frozen=True)
class Config:
    """
    Application settings (immutable)

    Every setting is frozen; a new instance is created per environment.
    """
    environment: Environment
    matching: MatchingParams = field(default_factory=MatchingParams)
    retry: RetryParams = field(default_factory=RetryParams)
    logging: LoggingParams = field(default_factory=LoggingParams)
    api: ApiParams = field(default_factory=ApiParams)

    @classmethod
    def from_env(cls, env: str = "dev", seed_dir: str | Path | None = None) -> "Config":
        """
        Build settings for an environment name

        Args:
            env: Environment name (dev, staging, prod)
            seed_dir: Directory holding seed CSV files, if any

        Returns:
            Config instance
        """
        try:
            environment = Environment(env)
        except ValueError as e:
            allowed = [member.value for member in Environment]
            raise ConfigurationError(
                f"Unknown environment '{env}'", environment=env, allowed=allowed
            ) from e

        if environment in (Environment.PRODUCTION, Environment.STAGING):
            logging_params = LoggingParams(level="INFO", enable_json=True)
        else:
            logging_params = LoggingParams(level="DEBUG", enable_json=False)

        api_params = ApiParams(seed_dir=Path(seed_dir) if seed_dir else None)

        return cls(
            environment=environment,
            logging=logging_params,
            api=api_params,
        )

    @classmethod
    def default(cls) -> "Config":
        """Default (development) settings"""
        return cls.from_env("dev")


DEFAULT_CONFIG: Final[Config] = Config.default()


def get_config(env: str | None = None) -> Config:
    """
    Get settings

    Args:
        env: Environment name (None reads APP_ENV, defaulting to "dev")

    Returns:
        Config instance
    """
    if env is None:
        env = os.getenv("APP_ENV", "dev")

    return Config.from_env(env, seed_dir=os.getenv("SKILLHIVE_SEED_DIR"))
