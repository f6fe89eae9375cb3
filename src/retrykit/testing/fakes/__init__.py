"""Testing fakes – in-memory doubles for the clock port and for operations."""
from retrykit.testing.fakes.clock import FakeClock
from retrykit.testing.fakes.operations import HANG, ScriptedOperation

__all__ = ["FakeClock", "HANG", "ScriptedOperation"]
