"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - crosscutting/logger.py: reads log_level / log_json
  - infrastructure/services/jwt_token_service.py: reads JWT secret/algorithm
  - infrastructure/services/reset_codes.py: reads reset code length
  - application/usecases/auth/auth_use_case.py: reads reset code TTL

Constraints:
  - No business logic — pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = {"dev-secret", "changeme", "change-me", "password", "secret"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/test/production)
        log_level: Root log level for the application logger (default: INFO)
        log_json: Emit JSON log lines (default: True)
        jwt_secret: Secret for signing access tokens
        jwt_algorithm: JWT signing algorithm (default: HS256)
        reset_code_ttl_minutes: Lifetime of a forgot-password code (default: 15)
        reset_code_length: Digits in a forgot-password code (default: 6)
        reset_code_max_attempts: Wrong guesses a code tolerates (default: 5)
    """

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Security - JWT
    jwt_secret: str = "dev-secret"
    jwt_algorithm: str = "HS256"

    # Forgot password
    reset_code_ttl_minutes: int = 15
    reset_code_length: int = 6
    reset_code_max_attempts: int = 5

    @field_validator("log_level")
    @classmethod
    def log_level_valid(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard level name, got {v!r}")
        return level

    @field_validator("jwt_algorithm")
    @classmethod
    def jwt_algorithm_must_be_hmac(cls, v: str) -> str:
        algorithm = (v or "").strip().upper()
        if algorithm not in {"HS256", "HS384", "HS512"}:
            raise ValueError("jwt_algorithm must be one of HS256, HS384, HS512")
        return algorithm

    @field_validator("reset_code_ttl_minutes")
    @classmethod
    def reset_code_ttl_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("reset_code_ttl_minutes must be greater than 0")
        return v

    @field_validator("reset_code_max_attempts")
    @classmethod
    def reset_code_max_attempts_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("reset_code_max_attempts must be greater than 0")
        return v

    @field_validator("reset_code_length")
    @classmethod
    def reset_code_length_in_range(cls, v: int) -> int:
        if v < 4 or v > 12:
            raise ValueError("reset_code_length must be between 4 and 12")
        return v

    @model_validator(mode="after")
    def validate_security_requirements(self):
        if not self.is_production():
            return self

        jwt_secret = (self.jwt_secret or "").strip()
        if not jwt_secret or jwt_secret in _INSECURE_SECRETS:
            raise ValueError(
                "JWT_SECRET must be set to a strong, non-default value in production"
            )
        if len(jwt_secret) < 32:
            raise ValueError("JWT_SECRET must be at least 32 characters in production")
        return self

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
