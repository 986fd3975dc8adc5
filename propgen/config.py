"""
Configuration management for the propgen command line.
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Configuration settings loaded from environment variables."""

    # Data generation settings
    RANDOM_SEED = int(os.getenv("PROPGEN_SEED", "42"))
    ITERATIONS = int(os.getenv("PROPGEN_ITERATIONS", "1000"))

    # Logging
    LOG_LEVEL = os.getenv("PROPGEN_LOG_LEVEL", "WARNING").upper()

    @classmethod
    def get_log_level(cls) -> int:
        """
        Get the configured log level as a logging constant.

        Raises:
            ValueError: If PROPGEN_LOG_LEVEL is not a known level name
        """
        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(
                f"PROPGEN_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{cls.LOG_LEVEL}'"
            )
        return getattr(logging, cls.LOG_LEVEL)

    @classmethod
    def display(cls):
        """Return configuration as a dict for display."""
        return {
            "Random Seed": cls.RANDOM_SEED,
            "Iterations": f"{cls.ITERATIONS:,}",
            "Log Level": cls.LOG_LEVEL,
        }
