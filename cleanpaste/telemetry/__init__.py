"""Telemetry and observability helpers.

This package emits run events for deterministic auditing of CLI invocations.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
