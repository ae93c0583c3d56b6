"""
debug.py - Debug and logging functionality for Connect N

This module provides centralized debug and logging capabilities with configurable levels,
per-component filtering and simple performance timers. Everything goes through a single
standard library logger named "connectn".
"""

import logging
import sys
import time
from enum import Enum
from typing import List, Optional, Dict, Set

# Python logging doesn't have TRACE, register one below DEBUG
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Mapping to standard logging levels
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Manages debug and logging functionality for the game."""

    def __init__(self, level: DebugLevel = DebugLevel.WARNING):
        self._level = level
        self._enabled = True
        self._enabled_components: Set[str] = set()  # Empty set means all components
        self._logger = self._setup_logger()
        self._performance_markers: Dict[str, float] = {}

    def _setup_logger(self) -> logging.Logger:
        """Configure and return the package logger."""
        logger = logging.getLogger("connectn")
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
                   for h in logger.handlers):
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            logger.addHandler(console_handler)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[List[str]] = None):
        """
        Configure the debug manager settings.

        Args:
            level: Debug level to set
            enabled: Whether debugging is enabled
            log_file: Path to log file ("" removes file logging)
            components: List of components to enable debugging for (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            # Remove existing file handlers
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            if log_file:
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._enabled_components = set(components)

    def _should_log(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        """Determine if a message should be logged based on settings."""
        if not self._enabled or level == DebugLevel.NONE:
            return False

        if level.value > self._level.value:
            return False

        if component and self._enabled_components and component not in self._enabled_components:
            return False

        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None):
        """
        Log a message at the specified level.

        Args:
            level: Debug level for the message
            message: The message to log
            component: Optional component name for filtering
        """
        if not self._should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"

        self._logger.log(LEVEL_MAP[level], message)

    # Convenience methods for each level
    def error(self, message: str, component: Optional[str] = None):
        """Log an error message."""
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None):
        """Log a warning message."""
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None):
        """Log an info message."""
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None):
        """Log a debug message."""
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None):
        """Log a trace message."""
        self.log(DebugLevel.TRACE, message, component)

    # Performance tracking methods
    def start_timer(self, marker_name: str):
        """Start a timer for performance tracking."""
        self._performance_markers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        End a timer and log the elapsed time.

        Args:
            marker_name: Name of the marker to end
            component: Optional component name for the log entry

        Returns:
            Elapsed time in seconds, or None if marker not found
        """
        if marker_name not in self._performance_markers:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - self._performance_markers.pop(marker_name)
        self.trace(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set debug level from a string (for command line arguments)."""
        try:
            level = DebugLevel[level_str.upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")
        return True


# Create a singleton instance
debug = DebugManager()
