from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = Field(..., description="Database connection string")
    DATABASE_POOL_SIZE: int = Field(default=10, description="Connection pool size (ignored for SQLite)")
    DATABASE_MAX_OVERFLOW: int = Field(default=10, description="Extra connections allowed above the pool size")
    AUTO_CREATE_TABLES: bool = Field(default=True, description="Create missing tables when the app starts")

    SECRET_KEY: str = Field(default="your-secret-key-change-this-in-production", description="JWT secret key")
    ALGORITHM: str = Field(default="HS256", description="Algorithm for JWT (e.g., HS256)")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24 * 7, description="How long (in minutes) an access token is valid (default 7 days)")
    BCRYPT_ROUNDS: int = Field(default=12, description="bcrypt cost factor for password hashes")

    CORS_ORIGINS: List[str] = Field(default=["http://localhost:3000", "http://localhost:5173"], description="Allowed browser origins")

    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_FORMAT: str = Field(default="json", description="'json' for structured logs, anything else for plain text")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
