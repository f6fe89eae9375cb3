"""Testing fixtures – pytest fixtures for fake doubles.

Enable in your ``conftest.py``::

    pytest_plugins = ["retrykit.testing.fixtures"]
"""
from retrykit.testing.fixtures.clock import fake_clock, fake_executor

__all__ = ["fake_clock", "fake_executor"]
