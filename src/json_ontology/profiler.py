"""Performance profiler for outline operations."""

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

import psutil


@dataclass
class PerformanceMetrics:
    """Performance metrics for one profiled operation."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    rows_processed: int
    memory_peak_mb: float
    memory_start_mb: float
    memory_end_mb: float
    cpu_percent: float


class PerformanceProfiler:
    """
    Records duration, memory and CPU of flatten, nest and rematch runs.

    Nesting is linear in the number of rows and rematching is proportional
    to rows times source length, so these are the operations worth watching
    on large outlines.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: Optional[float] = None
        self.peak_memory: float = 0
        self.cpu_samples: List[float] = []
        self.process: Optional[psutil.Process] = None
        self.rows_processed = 0

    @contextmanager
    def profile_operation(self, operation_name: str) -> Iterator['PerformanceProfiler']:
        """
        Context manager for profiling operations.

        Set ``rows_processed`` on the yielded profiler to record the row count.

        Args:
            operation_name: Name of the operation being profiled
        """
        self.start_profiling(operation_name)
        self.rows_processed = 0
        try:
            yield self
        finally:
            self.stop_profiling(self.rows_processed)

    def start_profiling(self, operation_name: str) -> None:
        """
        Start profiling an operation.

        Args:
            operation_name: Name of the operation
        """
        self.current_operation = operation_name
        self.start_time = time.perf_counter()

        self.process = psutil.Process()
        # The first cpu_percent call only sets the baseline and reports 0.0.
        self.process.cpu_percent()
        self.start_memory = self.process.memory_info().rss / 1024 / 1024  # MB
        self.peak_memory = self.start_memory
        self.cpu_samples = []

        self.logger.debug(f"Started profiling: {operation_name}")

    def sample_performance(self) -> None:
        """Sample current performance metrics."""
        if not self.current_operation or self.process is None:
            return

        try:
            current_memory = self.process.memory_info().rss / 1024 / 1024  # MB
            self.peak_memory = max(self.peak_memory, current_memory)
            self.cpu_samples.append(self.process.cpu_percent())
        except psutil.Error as e:
            self.logger.warning(f"Performance sampling failed: {e}")

    def stop_profiling(self, rows_processed: int = 0) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Args:
            rows_processed: Number of rows handled by the operation

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        self.sample_performance()
        end_time = time.perf_counter()
        duration = end_time - self.start_time

        try:
            end_memory = self.process.memory_info().rss / 1024 / 1024  # MB
        except psutil.Error:
            end_memory = self.start_memory
        avg_cpu = sum(self.cpu_samples) / len(self.cpu_samples) if self.cpu_samples else 0

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            rows_processed=rows_processed,
            memory_peak_mb=self.peak_memory,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            cpu_percent=avg_cpu,
        )

        self.metrics_history.append(metrics)

        self.logger.info(
            f"Profiled {self.current_operation}: {duration * 1000:.2f}ms, "
            f"{rows_processed} rows, peak {self.peak_memory:.1f} MB"
        )

        # Reset state
        self.current_operation = None
        self.start_time = None
        self.start_memory = None
        self.process = None

        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in self.metrics_history)
        total_rows = sum(m.rows_processed for m in self.metrics_history)
        max_memory = max(m.memory_peak_mb for m in self.metrics_history)

        return {
            "total_operations": len(self.metrics_history),
            "total_duration": total_duration,
            "total_rows": total_rows,
            "max_memory_peak_mb": max_memory,
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "rows": m.rows_processed,
                    "memory_peak": m.memory_peak_mb,
                }
                for m in self.metrics_history
            ]
        }

    def export_metrics(self, format: str = "json") -> str:
        """
        Export performance metrics in specified format.

        Args:
            format: Export format ("json" or "summary")

        Returns:
            Formatted metrics string
        """
        if format == "json":
            return json.dumps([
                {
                    "operation": m.operation_name,
                    "duration": m.duration,
                    "rows_processed": m.rows_processed,
                    "memory_peak_mb": m.memory_peak_mb,
                    "cpu_percent": m.cpu_percent,
                }
                for m in self.metrics_history
            ], indent=2)

        elif format == "summary":
            lines = ["Performance Summary:"]
            for m in self.metrics_history:
                lines.append(
                    f"  {m.operation_name}: {m.duration * 1000:.2f}ms, "
                    f"{m.rows_processed} rows, peak {m.memory_peak_mb:.1f} MB"
                )
            return "\n".join(lines)

        else:
            raise ValueError(f"Unsupported export format: {format}")
