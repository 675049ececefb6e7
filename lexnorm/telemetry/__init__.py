"""Telemetry and observability helpers.

This package emits deterministic run events for tokenizer stages.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
