"""Performance monitoring utilities for the document text analytics system.

Tracks how long conversion and analytics operations take so slow
documents can be spotted in the logs. Conversion timings are also kept
per document format, since a PDF and a Markdown file of the same size
cost very different amounts of work.
"""

import functools
import logging
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, Iterable, Iterator, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Timings kept per operation; older entries are discarded first.
DEFAULT_HISTORY_SIZE = 100

CONVERSION_OPERATION = "convert_document"


@dataclass
class OperationTiming:
    """Timing of one pipeline step."""

    operation_name: str
    started_at: float = field(default_factory=time.perf_counter)
    duration: Optional[float] = None
    success: bool = True
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def stop(self, success: bool = True, error: Optional[str] = None) -> None:
        self.duration = time.perf_counter() - self.started_at
        self.success = success
        self.error = error


def summarize(timings: Iterable[OperationTiming]) -> Dict[str, Any]:
    """
    Summarize finished timings.

    Returns:
        Dictionary with count, average, min, max, total and success_rate,
        or an empty dictionary when nothing has finished.
    """
    finished = [t for t in timings if t.duration is not None]
    if not finished:
        return {}

    durations = [t.duration for t in finished]
    total = sum(durations)
    return {
        "count": len(finished),
        "average": total / len(finished),
        "min": min(durations),
        "max": max(durations),
        "total": total,
        "success_rate": sum(1 for t in finished if t.success) / len(finished),
    }


class PerformanceMonitor:
    """
    Bounded record of pipeline step timings.

    Each operation keeps only its ``history_size`` most recent timings, so
    a long-lived pipeline serving many requests holds a fixed amount of
    history. Steps running longer than ``max_processing_time`` are logged
    at WARNING level.
    """

    def __init__(
        self,
        max_processing_time: float = 60,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ):
        """
        Initialize the performance monitor.

        Args:
            max_processing_time: Maximum expected processing time in seconds.
            history_size: Timings retained per operation.
        """
        if history_size < 1:
            raise ValueError("history_size must be at least 1")
        self.max_processing_time = max_processing_time
        self.history_size = history_size
        self.history: Dict[str, Deque[OperationTiming]] = {}

    @contextmanager
    def track(self, operation_name: str, **metadata) -> Iterator[OperationTiming]:
        """
        Time the enclosed block as one operation.

        The yielded timing's metadata may be filled in inside the block.
        An exception marks the timing as failed and propagates.
        """
        timing = OperationTiming(operation_name=operation_name, metadata=metadata)
        try:
            yield timing
        except Exception as e:
            timing.stop(success=False, error=f"{e.__class__.__name__}: {e}")
            raise
        else:
            timing.stop()
        finally:
            self._record(timing)

    def _record(self, timing: OperationTiming) -> None:
        history = self.history.get(timing.operation_name)
        if history is None:
            history = deque(maxlen=self.history_size)
            self.history[timing.operation_name] = history
        history.append(timing)

        if timing.duration is not None and timing.duration > self.max_processing_time:
            logger.warning(
                f"Operation '{timing.operation_name}' exceeded max time: "
                f"{timing.duration:.2f}s > {self.max_processing_time}s"
            )

    def get_operation_stats(self, operation_name: str) -> Dict[str, Any]:
        """Get statistics for one operation; empty if it never ran."""
        return summarize(self.history.get(operation_name, ()))

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for every tracked operation."""
        return {name: summarize(timings) for name, timings in self.history.items()}

    def get_conversion_stats(self) -> Dict[str, Dict[str, Any]]:
        """
        Get conversion statistics grouped by document format.

        Keys are the ``file_type`` recorded on each conversion timing
        ("docx", "pdf", "md", or "text" for generic decoding).
        """
        by_format: Dict[str, list] = {}
        for timing in self.history.get(CONVERSION_OPERATION, ()):
            file_type = timing.metadata.get("file_type", "text")
            by_format.setdefault(file_type, []).append(timing)
        return {name: summarize(timings) for name, timings in by_format.items()}


def timed_operation(operation_name: Optional[str] = None):
    """
    Decorator that logs the wrapped call's duration at DEBUG level.

    The operation name defaults to the function's qualified name. Failures
    are logged at ERROR level with their duration and re-raised.

    Example:
        @timed_operation("extract_data")
        def extract_data(self, text):
            ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        name = operation_name or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            started_at = time.perf_counter()
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{name} failed after {time.perf_counter() - started_at:.3f}s: {e}"
                )
                raise
            finally:
                logger.debug(f"{name} took {time.perf_counter() - started_at:.3f}s")
        return wrapper
    return decorator
