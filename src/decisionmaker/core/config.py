# src/decisionmaker/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)


def _as_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "t", "y", "yes")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- API variables ---
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8080"))

    # --- OpenTelemetry variables ---
    OTEL_ENABLED = _as_bool(os.getenv("OTEL_ENABLED", "False"))
    OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318")

    # PROC_ROOT and MACHINE_ID are properties so tests (and operators running
    # the CLI against a captured process table) can override them through the
    # environment after import.
    @property
    def PROC_ROOT(self) -> str:
        return os.getenv("PROC_ROOT", "/proc")

    @property
    def MACHINE_ID(self) -> str:
        return os.getenv("MACHINE_ID", "")

    def validate_instance(self):
        if not self.PROC_ROOT:
            raise ValueError("PROC_ROOT must not be empty.")
        if not 0 < self.API_PORT < 65536:
            raise ValueError("API_PORT must be between 1 and 65535.")
        if self.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logging.warning("Unknown LOG_LEVEL '%s'.", self.LOG_LEVEL)


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
