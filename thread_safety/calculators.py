"""
Calculators contrasting stateless and shared-state designs.

Both run the same business logic (add OFFSET to an input after a delay and
check the outcome). StatelessCalculator receives its input as a call
argument; SharedStateCalculator reads it from a field that every caller
writes through set_value(), which is the classic servlet instance-field bug.
"""

import threading
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Optional

from . import console, pacing

OFFSET = 55


class CalculationError(Exception):
    """Base class for business logic results that do not add up"""


class Unreachable(CalculationError):
    """A stateless calculation came out wrong. Always a logic defect."""

    def __init__(self, label: str, expected: int, actual: int):
        self.label = label
        self.expected = expected
        self.actual = actual
        super().__init__(
            f" -> Wrong calculation, expected: {expected} but was: {actual}\n"
            " THIS CANNOT HAPPEN"
        )


class ExpectedRaceMismatch(CalculationError):
    """A shared-state calculation read a value written by another worker."""

    def __init__(self, label: str, expected: int, actual: int):
        self.label = label
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{label} -> Wrong calculation, expected: {expected} but was: {actual}"
        )


@dataclass(frozen=True)
class Calculation:
    """Outcome of one run_business_logic call"""
    label: str
    observed: int
    result: int
    expected: int
    error: Optional[CalculationError] = None

    @property
    def correct(self) -> bool:
        return self.result == self.expected

    @property
    def intended(self) -> int:
        """Input the caller meant to calculate with."""
        return self.expected - OFFSET


class StatelessCalculator:
    """Thread safe: everything a call needs arrives as an argument."""

    def run_business_logic(self, label: str, input_value: int,
                           delay_millis: int, expected: int) -> Calculation:
        console.info(f"{label} -> SLEEP {delay_millis} before calculation: {input_value}")
        pacing.pause(delay_millis)

        console.info(f"{label} -> doing calculation with :{input_value}")
        result = input_value + OFFSET

        if result != expected:
            raise Unreachable(label, expected, result)
        console.info(f" -> Calculation correct: {result}\n")
        return Calculation(label, input_value, result, expected)


class SharedStateCalculator:
    """
    NOT thread safe: the input lives in ``value``, shared by all callers.

    A caller is expected to set_value() and then run_business_logic(), but
    nothing stops another caller's set_value() from landing in between.
    With ``guarded=True`` callers can hold exclusive() across both calls,
    which closes that window.
    """

    def __init__(self, guarded: bool = False):
        self.value = 0
        self.guarded = guarded
        self._guard = threading.Lock() if guarded else nullcontext()

    def exclusive(self):
        """Context held across a set_value/run_business_logic pair."""
        return self._guard

    def set_value(self, value: int) -> None:
        self.value = value

    def run_business_logic(self, label: str, delay_millis: int,
                           expected: int) -> Calculation:
        console.info(f"{label} -> SLEEP {delay_millis} before calculation: {self.value}")
        pacing.pause(delay_millis)

        # re-read after the pause: whatever the last writer left
        observed = self.value
        console.info(f"{label} -> doing calculation with :{observed}")
        result = observed + OFFSET

        mismatch = None
        if result == expected:
            console.info(f" -> Calculation correct: {result}\n")
        else:
            mismatch = ExpectedRaceMismatch(label, expected, result)
            console.error(str(mismatch))
        return Calculation(label, observed, result, expected, mismatch)
