"""Application configuration for uploads, moderation mail and storage backends"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Voices for Frank O'Hara"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Community archive of audio readings of Frank O'Hara poems"

    # Security
    SECRET_KEY: str = Field(default="change-me-in-production", env="SECRET_KEY")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24, env="ACCESS_TOKEN_EXPIRE_MINUTES")
    ALGORITHM: str = "HS256"

    # Database
    DATABASE_URL: str = Field(default="sqlite:///./voices.db", env="DATABASE_URL")
    DB_TIMEOUT_SECONDS: int = Field(default=5, env="DB_TIMEOUT_SECONDS")

    # External identity provider
    GOOGLE_CLIENT_ID: Optional[str] = Field(default=None, env="GOOGLE_CLIENT_ID")

    # Email SMTP Configuration
    EMAIL_ENABLED: bool = Field(default=True, env="EMAIL_ENABLED")
    SMTP_HOST: str = Field(default="smtp.gmail.com", env="SMTP_HOST")
    SMTP_PORT: int = Field(default=587, env="SMTP_PORT")
    SMTP_USERNAME: str = Field(default="", env="SMTP_USERNAME")
    SMTP_PASSWORD: str = Field(default="", env="SMTP_PASSWORD")
    SMTP_USE_TLS: bool = Field(default=True, env="SMTP_USE_TLS")
    EMAIL_TIMEOUT_SECONDS: float = Field(default=10.0, env="EMAIL_TIMEOUT_SECONDS")
    FROM_EMAIL: str = Field(default="noreply@voicesforfrankohara.org", env="FROM_EMAIL")
    FROM_NAME: str = Field(default="Voices for Frank O'Hara", env="FROM_NAME")
    MODERATOR_EMAIL: str = Field(default="moderator@voicesforfrankohara.org", env="MODERATOR_EMAIL")

    # File Storage ("local" or "minio")
    STORAGE_BACKEND: str = Field(default="local", env="STORAGE_BACKEND")
    UPLOAD_DIR: str = Field(default="uploads", env="UPLOAD_DIR")
    STORAGE_TIMEOUT_SECONDS: float = Field(default=10.0, env="STORAGE_TIMEOUT_SECONDS")
    MINIO_ENDPOINT: str = Field(default="localhost:9000", env="MINIO_ENDPOINT")
    MINIO_ACCESS_KEY: str = Field(default="", env="MINIO_ACCESS_KEY")
    MINIO_SECRET_KEY: str = Field(default="", env="MINIO_SECRET_KEY")
    MINIO_BUCKET_NAME: str = Field(default="recordings", env="MINIO_BUCKET_NAME")
    MINIO_SECURE: bool = Field(default=False, env="MINIO_SECURE")  # Use HTTPS

    # CORS
    ALLOWED_HOSTS: list[str] = Field(default=["http://localhost:5000"], env="ALLOWED_HOSTS")

    # Application URLs
    FRONTEND_URL: str = Field(default="http://localhost:5000", env="FRONTEND_URL")
    BACKEND_URL: str = Field(default="http://localhost:8000", env="BACKEND_URL")

    # Upload Processing
    MAX_UPLOAD_SIZE_BYTES: int = Field(default=15 * 1024 * 1024, env="MAX_UPLOAD_SIZE_BYTES")  # 15MB
    ALLOWED_AUDIO_MIME_TYPES: list[str] = Field(default=[
        "audio/mpeg",
        "audio/mp3",
        "audio/wav",
        "audio/x-wav",
        "audio/wave",
        "audio/mp4",
        "audio/m4a",
        "audio/x-m4a",
    ])
    ALLOWED_AUDIO_EXTENSIONS: list[str] = Field(default=[".mp3", ".wav", ".m4a"])

    # Moderation
    ANONYMOUS_READER_NAME: str = Field(default="Anonymous Reader", env="ANONYMOUS_READER_NAME")

    # Development
    LOG_LEVEL: str = Field(default="INFO", env="LOG_LEVEL")
    DEBUG: bool = Field(default=False, env="DEBUG")
    TESTING: bool = Field(default=False, env="TESTING")
    ENVIRONMENT: str = Field(default="development", env="ENVIRONMENT")

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
