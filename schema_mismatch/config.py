import logging
import os

from dotenv import load_dotenv


class Settings:
    def __init__(self):
        self.LOG_LEVEL: str = os.getenv("SCHEMA_MISMATCH_LOG_LEVEL", "WARNING")
        self.LOG_FORMAT: str = os.getenv(
            "SCHEMA_MISMATCH_LOG_FORMAT",
            "%(levelname)s | %(name)s | %(message)s",
        )


def get_settings() -> Settings:
    """Read settings from the environment, after loading a .env file if present."""
    load_dotenv()
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Set up log output for the schema_mismatch loggers."""
    settings = get_settings()
    logging.basicConfig(format=settings.LOG_FORMAT)
    logging.getLogger("schema_mismatch").setLevel((level or settings.LOG_LEVEL).upper())
