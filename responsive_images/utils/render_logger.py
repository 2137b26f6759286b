"""
Render Debug Logger for tracking responsive image set rendering.

Supports configurable log levels (NONE, INFO, DEBUG, TRACE) and dual output:
- Console: Human-readable formatted output
- File: JSON Lines format for parsing and analysis
"""

import json
import os
import time
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv


class LogLevel(Enum):
    """Logging levels for render debug output."""

    NONE = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3


class RenderLogger:
    """Centralized logger for responsive set rendering with configurable levels."""

    _instance: Optional["RenderLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()

        level_str = os.getenv("RESPONSIVE_IMAGES_DEBUG_LEVEL", "NONE").upper()
        try:
            self.level = LogLevel[level_str]
        except KeyError:
            self.level = LogLevel.NONE

        log_file = os.getenv("RESPONSIVE_IMAGES_LOG_FILE")
        self.log_file = Path(log_file) if log_file else None

        self._initialized = True

    def configure(
        self,
        level: Optional[Union[LogLevel, str]] = None,
        log_file: Optional[Union[str, Path]] = None,
    ):
        """
        Override the environment configuration.

        Args:
            level: New log level (LogLevel or its name).
            log_file: Path of the JSON Lines file, or None to keep the current one.
        """
        if level is not None:
            self.level = level if isinstance(level, LogLevel) else LogLevel[level.upper()]
        if log_file is not None:
            self.log_file = Path(log_file)

    def _should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        """Get ISO8601 formatted timestamp."""
        return datetime.now().isoformat()

    def _format_args(self, args: List[Any]) -> str:
        return ", ".join(str(arg) for arg in args)

    def _write_to_file(self, log_entry: Dict[str, Any]):
        """Write log entry to JSON Lines file."""
        if self.log_file is None:
            return

        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False, default=str) + "\n")

    def log_message(self, message: str):
        """Log a plain informational message."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        print(f"[{timestamp}] {message}")
        self._write_to_file({
            "timestamp": timestamp,
            "level": "INFO",
            "event": "message",
            "message": message,
        })

    def log_set_request(
        self,
        set_name: str,
        method: str,
        override_args: Optional[List[Any]] = None,
    ) -> str:
        """
        Log the start of a responsive set render.

        Returns:
            Invocation ID (UUID string) for tracking this render
        """
        if not self._should_log(LogLevel.INFO):
            return ""

        invocation_id = str(uuid.uuid4())
        timestamp = self._format_timestamp()

        console_msg = f"[{timestamp}] Responsive set: {set_name} | method: {method}"
        if override_args:
            console_msg += f" | overrides: ({self._format_args(override_args)})"
        print(console_msg)

        self._write_to_file({
            "timestamp": timestamp,
            "level": self.level.name,
            "event": "set_request",
            "invocation_id": invocation_id,
            "set_name": set_name,
            "method": method,
            "override_args": list(override_args or []),
        })
        return invocation_id

    def log_rendition(
        self,
        invocation_id: str,
        set_name: str,
        query: Optional[str],
        args: List[Any],
        start_time: float,
        end_time: float,
    ):
        """Log a single rendition produced for a set."""
        if not self._should_log(LogLevel.DEBUG):
            return

        timestamp = self._format_timestamp()
        latency_ms = (end_time - start_time) * 1000

        label = query if query is not None else "default"
        print(f"  [{label}] {self._format_args(args)} | {latency_ms:.1f}ms")

        log_entry = {
            "timestamp": timestamp,
            "level": self.level.name,
            "event": "rendition",
            "invocation_id": invocation_id,
            "set_name": set_name,
            "query": query,
            "timing": {"latency_ms": latency_ms},
        }
        if self.level == LogLevel.TRACE:
            log_entry["args"] = list(args)

        self._write_to_file(log_entry)

    def log_set_rendered(
        self,
        invocation_id: str,
        set_name: str,
        rendition_count: int,
        start_time: float,
        end_time: float,
    ):
        """Log a completed responsive set."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        latency_ms = (end_time - start_time) * 1000

        print(
            f"[{timestamp}] Rendered: {set_name} | "
            f"{rendition_count} sizes + default | {latency_ms:.1f}ms"
        )
        self._write_to_file({
            "timestamp": timestamp,
            "level": self.level.name,
            "event": "set_rendered",
            "invocation_id": invocation_id,
            "set_name": set_name,
            "rendition_count": rendition_count,
            "timing": {
                "latency_ms": latency_ms,
                "start_time": datetime.fromtimestamp(start_time).isoformat(),
                "end_time": datetime.fromtimestamp(end_time).isoformat(),
            },
        })

    def log_error(self, set_name: str, error: Exception):
        """Log a set that failed to render."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        print(f"[{timestamp}] Responsive set error: [{set_name}] {type(error).__name__}: {error}")
        self._write_to_file({
            "timestamp": timestamp,
            "level": "ERROR",
            "event": "error",
            "set_name": set_name,
            "error_type": type(error).__name__,
            "error": str(error),
        })


def get_logger() -> RenderLogger:
    """Get the singleton logger instance."""
    return RenderLogger()


class LoggedImageHost:
    """
    Wrapper around an image host to add debug logging.

    Intercepts format_image() calls and logs arguments and timing.
    """

    def __init__(self, host: Any, set_name: str, invocation_id: str = ""):
        """
        Initialize LoggedImageHost wrapper.

        Args:
            host: The wrapped image host
            set_name: Responsive set being rendered
            invocation_id: ID returned by RenderLogger.log_set_request
        """
        self.host = host
        self.set_name = set_name
        self.invocation_id = invocation_id
        self.logger = get_logger()

    def __getattr__(self, name: str):
        """Delegate all other attributes to wrapped host."""
        return getattr(self.host, name)

    def format_image(self, *args, query: Optional[str] = None) -> Any:
        """
        Format an image with logging.

        Args:
            *args: Method name followed by its arguments
            query: Media query the rendition is for, None for the default image

        Returns:
            Image handle from the wrapped host
        """
        if not self.invocation_id:
            return self.host.format_image(*args)

        start_time = time.time()
        image = self.host.format_image(*args)
        end_time = time.time()

        self.logger.log_rendition(
            invocation_id=self.invocation_id,
            set_name=self.set_name,
            query=query,
            args=list(args),
            start_time=start_time,
            end_time=end_time,
        )
        return image
