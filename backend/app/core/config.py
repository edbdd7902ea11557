"""Module: config."""

from pydantic_settings import BaseSettings

# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # Primary SQLAlchemy connection string for the backend database.
    database_url: str
    # Optional override for the ordered letters emitted in the QR payload.
    # Empty means "derive from the medication catalog".
    qr_payload_letters: str = ""
    # IANA timezone used when rendering prescription dates for display.
    display_timezone: str = "UTC"
    # Public origin of the lookup page that printed QR codes link to.
    scan_base_url: str = "http://localhost:3000"
    # Browser origins allowed to call the API.
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    log_level: str = "INFO"

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"

    @property
    def logging_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "app": {
                    "handlers": ["console"],
                    "level": self.log_level.upper(),
                    "propagate": False,
                },
            },
        }

# Global settings instance imported by app modules at runtime.
settings = Settings()
