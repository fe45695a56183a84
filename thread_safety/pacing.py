"""Delays used by calculators and scenarios.

Every sleep in the package goes through :func:`pause` so that tests can
replace it and force, or rule out, a particular interleaving of workers.
"""
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Pacing:
    """Scenario framing delays, in milliseconds."""
    settle_millis: int = 3000  # before workers start, keeps scenario output apart
    flush_millis: int = 100    # after the join, lets buffered stdout/stderr drain


DEFAULT_PACING = Pacing()


def pause(millis: int) -> None:
    """Block the calling thread for ``millis`` milliseconds."""
    if millis < 0:
        raise ValueError(f"delay must be >= 0, got {millis}")
    time.sleep(millis / 1000.0)
