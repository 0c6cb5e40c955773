"""
Structured logging for codec operations.

Every encode/decode run by a front end is written as one column-aligned line:

    | Timestamp            | Level   | Event        | Size     | Data
    Example:
    [-] 2024-01-01T12:00:00Z | INFO    | ENCODE       | 3        | TWFu

The log file and console echo are configured through b64codec.config.
"""

import logging
import os
import sys
from datetime import datetime, timezone

from b64codec.config import Settings, load_settings

LOGGER_NAME = "b64codec"
HEADER = f"  | {'Timestamp':<20} | {'Level':<7} | {'Event':<12} | {'Size':<8} | {'Data'}\n"
HEADER += '~'*len(HEADER)


class Level:
    """Log level constants for consistent level naming."""
    LEVEL_INFO = 'INFO'
    LEVEL_WARNING = 'WARNING'
    LEVEL_ERROR = 'ERROR'


class Event:
    """
    Event type constants for standardized event logging.

        ENCODE/DECODE - Successful codec operations
        DECODE_FAILED - Input rejected by the decoder
        READ_FAILED   - Input file could not be read
    """
    ENCODE = 'ENCODE'
    DECODE = 'DECODE'
    DECODE_FAILED = 'DECODE_FAIL'
    READ_FAILED = 'READ_FAIL'


class Logger:
    """
    Structured logger for codec operations with consistent formatting.
    """

    def __init__(self, settings: Settings = None):
        """
        Args:
            settings: Logging settings (default: loaded from the environment)
        """
        self.settings = settings or load_settings()
        self.LOG_TO_CONSOLE = self.settings.log_to_console
        self._logger = logging.getLogger(LOGGER_NAME)

    def configure_logger(self):
        """
        Attach a file handler for the configured log file.

        Creates the log directory and writes the column header when the file
        is new or empty.
        """
        log_file = self.settings.log_file
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        if not os.path.exists(log_file) or os.path.getsize(log_file) == 0:
            with open(log_file, 'w') as file:
                # Write the header (column titles)
                file.write(HEADER + '\n')

        if self.LOG_TO_CONSOLE:
            print(HEADER, file=sys.stderr)

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(logging.Formatter('%(message)s'))
        self._logger.addHandler(file_handler)
        self._logger.setLevel(getattr(logging, self.settings.log_level, logging.INFO))
        self._logger.propagate = False

    def log_event(self, level, event, size='N/A', message='N/A'):
        """
        Log a codec event with consistent formatting.

        Args:
            level: Log level from Level class
            event: Event type from Event class
            size: Input size in bytes or characters (default: 'N/A')
            message: Additional event information, cut to 20 characters

        Symbols:
            [-] Info
            [!] Warning
            [x] Error
        """
        level_symbol = {
            Level.LEVEL_INFO: "[-]",
            Level.LEVEL_WARNING: "[!]",
            Level.LEVEL_ERROR: "[x]"
        }.get(level.upper(), "[-]")

        timestamp = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')
        message = str(message).replace('\n', '')
        log_message = f"{level_symbol} {timestamp:<20} | {level:<7} | {event:<12} | {str(size):<8} | {message:.20s}"
        log_function = getattr(self._logger, level.lower(), self._logger.info)
        log_function(log_message)

        if self.LOG_TO_CONSOLE:
            print(log_message, file=sys.stderr)
