"""
Environment-driven settings for the codec front ends.

Settings are read from the process environment after loading the .env file
found from the working directory upward (if one exists). The codec itself
has no options; these only affect logging.

Environment Variables:
    PRINT_CODEC_LOGS: "true"/"false" - Echo log lines to the console
    CODEC_LOG_FILE:   Path of the structured log file (default: logs/codec.log)
    CODEC_LOG_LEVEL:  Minimum level written to the log file (default: INFO)
"""

import os
from dataclasses import dataclass
from dotenv import find_dotenv, load_dotenv

DEFAULT_LOG_FILE = os.path.join("logs", "codec.log")
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    log_to_console: bool = False
    log_file: str = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Load .env from the working directory and build Settings from the environment."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        log_to_console=os.getenv("PRINT_CODEC_LOGS", "false").lower() == "true",
        log_file=os.getenv("CODEC_LOG_FILE", DEFAULT_LOG_FILE),
        log_level=os.getenv("CODEC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
