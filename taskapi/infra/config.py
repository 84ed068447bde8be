from typing import List, Optional
from urllib.parse import quote
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import json


class Settings(BaseSettings):
    # Database
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="password")
    db_name: str = Field(default="user_task")
    db_pool_min_size: int = Field(default=1)
    db_pool_max_size: int = Field(default=10)
    # Overrides the DB_* settings when present, e.g. sqlite://:memory:
    database_url: Optional[str] = Field(default=None)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    shutdown_timeout: int = Field(default=10)

    # Security
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    # CORS
    cors_origins: List[str] = Field(default=["*"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator("port", "db_port")
    @classmethod
    def validate_port(cls, v):
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("db_pool_min_size", "db_pool_max_size")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("pool size must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def db_url(self) -> str:
        """Tortoise ORM の接続URL"""
        if self.database_url:
            return self.database_url
        return (
            f"postgres://{quote(self.db_user, safe='')}:{quote(self.db_password, safe='')}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
            f"?minsize={self.db_pool_min_size}&maxsize={self.db_pool_max_size}"
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )
