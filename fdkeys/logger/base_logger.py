"""Base logging functionality for tracing the key search."""

import logging
from collections import deque
from typing import Any, Callable, Deque, Optional, TypeVar, cast
from functools import wraps

F = TypeVar("F", bound=Callable[..., Any])


class AlgorithmLogger:
    """Logger that mirrors algorithm steps to ``logging`` and keeps a text trace."""

    def __init__(self, name: str, max_records: Optional[int] = 10_000):
        self.name = name
        self.disabled = False
        # Oldest records are dropped once max_records is reached
        self._records: Deque[str] = deque(maxlen=max_records)

        # Create logger with single handler to avoid duplication
        self.logger = logging.getLogger(name)

        # Only add a default StreamHandler if no handlers exist.
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(message)s")
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)
            # Prevent propagation to avoid duplicate logs when a root logger is configured
            self.logger.propagate = False
        elif self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)

    def section(self, title: str):
        """Start a new section in the trace."""
        if self.disabled:
            return
        line = f"{'=' * 20} {title} {'=' * 20}"
        self.logger.info(line)
        self._records.append(line)

    def subsection(self, title: str):
        """Start a new subsection in the trace."""
        if self.disabled:
            return
        line = f"{'-' * 15} {title} {'-' * 15}"
        self.logger.info(line)
        self._records.append(line)

    def info(self, message: str):
        if self.disabled:
            return
        self.logger.info(message)
        self._records.append(message)

    def warning(self, message: str):
        if self.disabled:
            return
        self.logger.warning(message)
        self._records.append(f"WARNING: {message}")

    def error(self, message: str):
        if self.disabled:
            return
        self.logger.error(message)
        self._records.append(f"ERROR: {message}")

    def debug(self, message: str):
        if self.disabled:
            return
        self.logger.debug(message)
        self._records.append(message)

    def result(self, label: str, value: Any):
        """Log a result with a label."""
        if self.disabled:
            return
        line = f"{label}: {value}"
        self.logger.info(line)
        self._records.append(line)

    def clear(self):
        """Clear all accumulated records."""
        self._records.clear()

    def get_content(self) -> str:
        """Return the accumulated trace as text."""
        return "\n".join(self._records)

    def write(self, path: Any) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.get_content())
            f.write("\n")

    def log_execution(self, func: F) -> F:
        """Decorator for logging function execution with type safety."""

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.section(f"Executing {func.__name__}")
            try:
                result = func(*args, **kwargs)
                self.info(f"{func.__name__} completed successfully")
                return result
            except Exception as e:
                self.error(f"Error in {func.__name__}: {str(e)}")
                raise

        return cast(F, wrapper)
