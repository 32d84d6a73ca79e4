"""Observability Module - Logging, Tracing, and Metrics

This module provides:
1. Process-wide logging configuration
2. Agent/tool execution tracing
3. Run counters and latency metrics
"""
import time
import logging
import functools
from typing import Dict, Any, Optional, Callable
from dataclasses import dataclass, field

from config.settings import LOG_LEVEL

# Configure structured logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger("veda")


@dataclass
class ToolTrace:
    """Represents a single agent execution trace."""
    agent_name: str
    start: float = field(default_factory=time.perf_counter)
    duration_ms: Optional[float] = None
    success: bool = True
    error: Optional[str] = None

    def complete(self, success: bool = True, error: str = None):
        """Mark trace as complete."""
        self.duration_ms = (time.perf_counter() - self.start) * 1000
        self.success = success
        self.error = error


@dataclass
class ToolMetrics:
    """Aggregated metrics for agent runs."""
    total_runs: int = 0
    successful_runs: int = 0
    failed_runs: int = 0
    total_latency_ms: float = 0
    agent_latencies: Dict[str, list] = field(default_factory=dict)

    @property
    def success_rate(self) -> float:
        if self.total_runs == 0:
            return 0.0
        return self.successful_runs / self.total_runs

    @property
    def avg_latency_ms(self) -> float:
        if self.total_runs == 0:
            return 0.0
        return self.total_latency_ms / self.total_runs

    def record(self, trace: ToolTrace):
        """Record a trace into metrics."""
        self.total_runs += 1
        if trace.success:
            self.successful_runs += 1
        else:
            self.failed_runs += 1

        if trace.duration_ms is not None:
            self.total_latency_ms += trace.duration_ms
            self.agent_latencies.setdefault(trace.agent_name, []).append(trace.duration_ms)

    def reset(self):
        self.total_runs = 0
        self.successful_runs = 0
        self.failed_runs = 0
        self.total_latency_ms = 0
        self.agent_latencies = {}

    def summary(self) -> Dict[str, Any]:
        """Return metrics summary."""
        agent_avg = {
            agent: sum(latencies) / len(latencies)
            for agent, latencies in self.agent_latencies.items()
            if latencies
        }
        return {
            "total_runs": self.total_runs,
            "success_rate": f"{self.success_rate:.1%}",
            "avg_latency_ms": f"{self.avg_latency_ms:.2f}ms",
            "agent_avg_latency": agent_avg,
        }


# Global metrics instance
metrics = ToolMetrics()


class Tracer:
    """Context manager for tracing agent execution."""

    def __init__(self, agent_name: str):
        self.trace = ToolTrace(agent_name=agent_name)

    def __enter__(self):
        logger.info(f"▶ {self.trace.agent_name} started")
        return self.trace

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.trace.complete(success=False, error=str(exc_val))
            logger.error(f"✖ {self.trace.agent_name} failed: {exc_val}")
        else:
            self.trace.complete(success=True)
            logger.info(f"✔ {self.trace.agent_name} completed in {self.trace.duration_ms:.1f}ms")

        metrics.record(self.trace)
        return False  # Don't suppress exceptions


def trace_agent(func: Callable) -> Callable:
    """Decorator to automatically trace agent methods."""
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        agent_name = self.__class__.__name__
        with Tracer(agent_name):
            return func(self, *args, **kwargs)
    return wrapper


def log_context(context: Dict[str, Any], stage: str):
    """Log context at a specific pipeline stage."""
    logger.debug(f"[{stage}] Context keys: {list(context.keys())}")

    if "metrics" in context:
        m = context["metrics"]
        logger.debug(f"[{stage}] BMI: {m.get('bmi')}, TDEE: {m.get('tdee')}")

    if context.get("insurance"):
        logger.debug(f"[{stage}] Annual premium: {context['insurance'].get('annual_premium')}")

    if context.get("errors"):
        logger.debug(f"[{stage}] Input errors: {context['errors']}")


def get_metrics_summary() -> Dict[str, Any]:
    """Get current metrics summary for dashboard/API."""
    return metrics.summary()
