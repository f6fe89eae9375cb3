"""Shared pytest configuration: expose retrykit's own fixtures to the suite."""

from retrykit.testing.fixtures import fake_clock, fake_executor  # noqa: F401
