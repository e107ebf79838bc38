# src/kubedash/core/config.py

import logging
import os

from dotenv import load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # METRICS_HISTORY_LENGTH is a property so the value is read at access
    # time; callers that change the environment (tests, long-running
    # collectors) see the new bound without re-importing the module.
    @property
    def METRICS_HISTORY_LENGTH(self) -> int:
        raw = os.getenv("METRICS_HISTORY_LENGTH", "15")
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigurationError(f"METRICS_HISTORY_LENGTH must be an integer, got '{raw}'.") from e

    def validate_instance(self):
        """
        Validates the configuration values.

        Raises:
            ConfigurationError: If a value is malformed or out of range.
        """
        if self.METRICS_HISTORY_LENGTH < 1:
            raise ConfigurationError("METRICS_HISTORY_LENGTH must be at least 1.")
        logger.debug("Configuration validated: METRICS_HISTORY_LENGTH=%d", self.METRICS_HISTORY_LENGTH)


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
