"""Kernel time – Clock port + implementations."""
from retrykit.kernel.time.clock import Clock, SystemClock

__all__ = ["Clock", "SystemClock"]
