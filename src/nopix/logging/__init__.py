"""Structured logging utilities."""

from .events import JsonlEventLogger, PipelineEvent, Reporter, format_event, utc_timestamp

__all__ = ["JsonlEventLogger", "PipelineEvent", "Reporter", "format_event", "utc_timestamp"]
