"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    from retrykit.testing.fixtures import fake_clock, fake_executor  # noqa: F401
"""

from retrykit.testing.fakes import HANG, FakeClock, ScriptedOperation

__all__ = ["HANG", "FakeClock", "ScriptedOperation"]
