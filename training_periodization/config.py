"""Configuration management for the training periodization tool."""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./training_periodization.db")

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Plan defaults used by the CLI
    DEFAULT_TRAINING_FREQUENCY: int = int(os.getenv("DEFAULT_TRAINING_FREQUENCY", "4"))  # days/week
    DEFAULT_DURATION_MONTHS: int = int(os.getenv("DEFAULT_DURATION_MONTHS", "3"))
    DEFAULT_PERIODIZATION_TYPE: str = os.getenv("DEFAULT_PERIODIZATION_TYPE", "block")
    INCLUDE_NUTRITION_PERIODIZATION: bool = (
        os.getenv("INCLUDE_NUTRITION_PERIODIZATION", "true").lower() == "true"
    )

    # Fatigue score (1-10) that triggers an unplanned deload for autoregulated levels
    FATIGUE_DELOAD_THRESHOLD: float = float(os.getenv("FATIGUE_DELOAD_THRESHOLD", "7.5"))

    # Training frequency bounds (days/week)
    MIN_TRAINING_FREQUENCY: int = 1
    MAX_TRAINING_FREQUENCY: int = 7

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration values."""
        if not cls.MIN_TRAINING_FREQUENCY <= cls.DEFAULT_TRAINING_FREQUENCY <= cls.MAX_TRAINING_FREQUENCY:
            raise ValueError(
                f"DEFAULT_TRAINING_FREQUENCY must be between {cls.MIN_TRAINING_FREQUENCY} "
                f"and {cls.MAX_TRAINING_FREQUENCY}"
            )
        if cls.DEFAULT_DURATION_MONTHS <= 0:
            raise ValueError("DEFAULT_DURATION_MONTHS must be positive")
        if not 1 <= cls.FATIGUE_DELOAD_THRESHOLD <= 10:
            raise ValueError("FATIGUE_DELOAD_THRESHOLD must be on the 1-10 scale")
        return True


config = Config()
