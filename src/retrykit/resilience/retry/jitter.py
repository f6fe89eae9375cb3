"""Resilience – jitter strategies.

Jitter is opt-in: the default policy uses :class:`NoJitter`, so backoff stays
purely exponential unless a caller asks otherwise.
"""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    """Apply randomness to a backoff delay to spread thundering-herd."""

    name: str = ""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @abc.abstractmethod
    def apply(self, delay: float) -> float: ...

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoJitter(JitterStrategy):
    name = "none"

    def apply(self, delay: float) -> float:
        return delay


class FullJitter(JitterStrategy):
    """Uniform random in [0, delay]."""

    name = "full"

    def apply(self, delay: float) -> float:
        return self._rng.uniform(0, delay)


class EqualJitter(JitterStrategy):
    """Uniform random in [delay/2, delay]."""

    name = "equal"

    def apply(self, delay: float) -> float:
        half = delay / 2
        return half + self._rng.uniform(0, half)


_BY_NAME: dict[str, type[JitterStrategy]] = {
    cls.name: cls for cls in (NoJitter, FullJitter, EqualJitter)
}


def jitter_from_name(name: str) -> JitterStrategy:
    """Resolve ``"none"``, ``"full"`` or ``"equal"`` to a strategy instance."""
    try:
        return _BY_NAME[name.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown jitter {name!r}; expected one of {sorted(_BY_NAME)}"
        ) from None


__all__ = ["EqualJitter", "FullJitter", "JitterStrategy", "NoJitter", "jitter_from_name"]
