# ideascore_project/ideascore/config.py

import logging
import sys

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from pythonjsonlogger.json import JsonFormatter

load_dotenv()

# Custom JSON formatter that excludes null/None fields
class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that only includes fields with non-None values."""

    def add_fields(self, log_record, record, message_dict):
        """Override to filter out None values before adding to JSON output."""
        super().add_fields(log_record, record, message_dict)

        # Remove keys with None values
        log_record_copy = dict(log_record)
        for key, value in log_record_copy.items():
            if value is None:
                del log_record[key]

def setup_json_logging(log_level: int = logging.INFO) -> None:
    """Initialize JSON logging configuration for the engine."""
    handler = logging.StreamHandler(sys.stdout)

    # JSON formatter with common fields used across scoring and validation
    formatter = CustomJsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s "
        "%(idea_id)s %(hypothesis_id)s "
        "%(count)s %(total)s %(scored)s %(processed)s "
        "%(warning)s %(reason)s %(rice_score)s %(quadrant)s "
        "%(validation_rate)s %(success_rate)s"
    )

    handler.setFormatter(formatter)

    root_logger = logging.getLogger("ideascore")
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers = []

    root_logger.addHandler(handler)

    # Prevent propagation to avoid duplicate logs
    root_logger.propagate = False


class Settings(BaseSettings):
    # App
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Scoring defaults, applied at the service boundary only (never inside the engines)
    SCORING_DEFAULT_RICE_REACH: int = 1000
    SCORING_DEFAULT_RICE_IMPACT: int = 3
    SCORING_DEFAULT_RICE_CONFIDENCE: int = 80
    SCORING_DEFAULT_RICE_EFFORT: int = 3

    # Batch rescoring emits a progress log line every N ideas
    SCORING_BATCH_LOG_EVERY: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_rice_defaults(self) -> "Settings":
        """
        Defaults are fed straight into the RICE engine, so they must already
        satisfy its input ranges. Effort 0 is rejected here: a default that
        makes every unscored idea unscoreable is a misconfiguration.
        """
        if self.SCORING_DEFAULT_RICE_REACH < 0:
            raise ValueError("SCORING_DEFAULT_RICE_REACH must be >= 0")
        if not 1 <= self.SCORING_DEFAULT_RICE_IMPACT <= 5:
            raise ValueError("SCORING_DEFAULT_RICE_IMPACT must be between 1 and 5")
        if not 0 <= self.SCORING_DEFAULT_RICE_CONFIDENCE <= 100:
            raise ValueError("SCORING_DEFAULT_RICE_CONFIDENCE must be between 0 and 100")
        if not 1 <= self.SCORING_DEFAULT_RICE_EFFORT <= 5:
            raise ValueError("SCORING_DEFAULT_RICE_EFFORT must be between 1 and 5")
        if self.SCORING_BATCH_LOG_EVERY < 1:
            raise ValueError("SCORING_BATCH_LOG_EVERY must be >= 1")
        return self


settings = Settings()
