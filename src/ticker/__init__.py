"""Time-spaced counter workload for debugger and tracer testing."""

__version__ = "0.1.0"
