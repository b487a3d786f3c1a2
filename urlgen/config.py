from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Application
    app_name: str = "URL Generator"
    app_version: str = "1.0.0"

    # Database (DATABASE_URL, any SQLAlchemy URL)
    database_url: str = "sqlite:///./urlgen.db"

    # URL Shortener specific
    base_url: str = "http://127.0.0.1:8000"
    short_url_length: int = 5  # Max 5 characters for short codes
    max_retries: int = 5

    # Short code generation strategy
    short_code_strategy: str = "base62"  # Options: "random", "base62"
    short_code_salt: int = 1256  # Salt for Base62 strategy

    # Cache settings (seconds)
    cache_backend: str = "memory"  # Options: "memory", "null"
    cache_default_expiration: float = 3600  # Used when set() gets ttl=0; <= 0 never expires
    cache_cleanup_interval: float = 60  # Sweeper period; <= 0 disables sweeping
    cache_ttl: float = 0  # TTL the URL service passes to set(); 0 = cache default

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
