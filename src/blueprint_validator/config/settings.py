# config/settings.py
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from enum import Enum
from dotenv import load_dotenv

from blueprint_validator.models.blueprint_models import ValidationLevel

# Load .env file explicitly
load_dotenv()


LOG_FORMATS = ("text", "json")


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class GCPSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GCP_")

    credentials_file: Optional[str] = Field(None, description="Path to a service account key file")
    quota_project_id: Optional[str] = Field(None, description="Project billed for API quota")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    validation_level: Optional[ValidationLevel] = Field(
        None, description="Overrides the blueprint's validation level when set"
    )
    log_level: LogLevel = Field(LogLevel.INFO, description="Log level")
    log_format: str = Field("text", description="Log format (json or text)")
    log_config_path: Optional[str] = Field(None, description="YAML logging dictConfig file")

    gcp: GCPSettings = Field(default_factory=lambda: GCPSettings())

    @field_validator('validation_level', mode='before')
    @classmethod
    def validate_validation_level(cls, v):
        if isinstance(v, str):
            return ValidationLevel(v.upper())
        return v

    @field_validator('log_format', mode='before')
    @classmethod
    def validate_log_format(cls, v):
        if isinstance(v, str):
            v = v.lower()
            if v not in LOG_FORMATS:
                raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @classmethod
    def create_from_env(cls) -> "Settings":
        """Create settings instance from environment variables."""
        return cls()
