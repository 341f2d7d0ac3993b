"""
Trace Module.

This package contains tracing components:
- Trace context (per-run record of resolve/locate/load stages)
"""

from src.core.trace.trace_context import TraceContext

__all__ = ['TraceContext']
