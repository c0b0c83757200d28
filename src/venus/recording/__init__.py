"""
Trace recording utilities for mission runs.
"""

from .trace_recorder import TraceRecorder, TraceValidationError

__all__ = ["TraceRecorder", "TraceValidationError"]
