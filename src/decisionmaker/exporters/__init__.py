"""Exporters for scheduler telemetry and discovery results."""

from .json_exporter import JSONExporter
from .prometheus_exporter import SchedulerMetricsCollector, build_registry

__all__ = ["JSONExporter", "SchedulerMetricsCollector", "build_registry"]
