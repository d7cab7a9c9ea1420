from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # --- Core App Settings ---
    FLASK_ENV: str = "production"
    SECRET_KEY: str
    DEBUG: bool = False

    # --- Infrastructure ---
    MONGO_URI: str
    MONGO_TIMEOUT_MS: int = 5000
    COLLECTIONS_TABLE: str = "flashcards"

    # --- Security ---
    CORS_ORIGINS: str = "*"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

# Load settings
settings = Settings()

# Production readiness checks
if settings.FLASK_ENV == "production":
    if not settings.SECRET_KEY or settings.SECRET_KEY == "change-this-to-a-very-secret-key-in-production":
        raise ValueError("CRITICAL: SECRET_KEY is not set for production.")
    if settings.DEBUG:
        raise ValueError("CRITICAL: DEBUG mode must be disabled in production.")
