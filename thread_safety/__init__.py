"""Thread Safety Explained: stateless versus shared-state objects under threads.

Runs four fixed scenarios that print interleaved output showing a data race
on a shared calculator and its absence on a stateless one.
"""

from .calculators import (
    OFFSET,
    Calculation,
    CalculationError,
    ExpectedRaceMismatch,
    SharedStateCalculator,
    StatelessCalculator,
    Unreachable,
)

__version__ = "1.0.0"

__all__ = [
    "OFFSET",
    "Calculation",
    "CalculationError",
    "ExpectedRaceMismatch",
    "SharedStateCalculator",
    "StatelessCalculator",
    "Unreachable",
]
