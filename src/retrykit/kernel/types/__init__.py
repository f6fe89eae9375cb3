"""Kernel types – tagged result variants."""
from retrykit.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
