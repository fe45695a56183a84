#!/usr/bin/env python3
"""
Thread Safety Explained: scenario driver

Runs four fixed scenarios in order:

  A  two threads on a stateless calculator            (always correct)
  B  two threads on one shared-state calculator       (may go wrong)
  C  100 parallel workers on a stateless calculator   (always correct)
  D  100 parallel workers on one shared calculator    (goes wrong, a lot)

Progress goes to stdout, race mismatches to stderr. A wrong result from
the stateless calculator is a defect and aborts the run with exit code 1.
"""

import argparse
import random
import sys
import traceback
from enum import Enum
from typing import Dict, List, Optional

from . import console, pacing
from .calculators import (OFFSET, Calculation, SharedStateCalculator,
                          StatelessCalculator, Unreachable)
from .pacing import Pacing
from .race_report import build_report
from .workers import MAX_WORKERS, WorkerGroup, parallel_for_each


class Scenario(Enum):
    """The four scenarios with their banners"""
    SAFE_SIMPLE = (
        "safe simple",
        "Starting single instance, thread safe",
        "Finished single instance, thread safe\n\n",
        True,
    )
    UNSAFE_SIMPLE = (
        "unsafe simple",
        "\nStarting single instance, NOT thread safe, classic Servlet problem",
        "Finished single instance, NOT thread safe\n\n",
        False,
    )
    SAFE_EXHAUSTIVE = (
        "safe exhaustive",
        "Starting exhaustive single instance -> thread safe",
        "Finished exhaustive single instance, thread safe\n\n",
        True,
    )
    UNSAFE_EXHAUSTIVE = (
        "unsafe exhaustive",
        "Starting exhaustive single instance, NOT thread safe",
        "Finished exhaustive single instance, NOT thread safe",
        False,
    )

    def __init__(self, title, start_banner, finish_banner, thread_safe):
        self.title = title
        self.start_banner = start_banner
        self.finish_banner = finish_banner
        self.thread_safe = thread_safe


def _framed(scenario: Scenario, timing: Optional[Pacing], dispatch) -> List[Calculation]:
    """Banner, settle, run and join the workers, flush, report, banner."""
    timing = timing or pacing.DEFAULT_PACING
    console.info(scenario.start_banner)
    pacing.pause(timing.settle_millis)

    calculations = dispatch()

    pacing.pause(timing.flush_millis)
    if not scenario.thread_safe:
        console.info(build_report(scenario.title, calculations).summary())
    console.info(scenario.finish_banner)
    console.info(console.SEPARATOR)
    return calculations


def set_then_run(calculator: SharedStateCalculator, value: int, label: str,
                 delay_millis: int, expected: int) -> Calculation:
    """One shared-state worker: write the field, then calculate from it."""
    with calculator.exclusive():
        calculator.set_value(value)
        return calculator.run_business_logic(label, delay_millis, expected)


def safe_simple(calculator: StatelessCalculator,
                timing: Optional[Pacing] = None) -> List[Calculation]:
    def dispatch():
        group = WorkerGroup()
        group.spawn("safe-1", calculator.run_business_logic,
                    "Thread Safe Thread 1", 10, 50, 65)
        group.spawn("safe-2", calculator.run_business_logic,
                    "Thread Safe Thread 2", 5, 1, 60)
        return group.join_all()

    return _framed(Scenario.SAFE_SIMPLE, timing, dispatch)


def unsafe_simple(calculator: SharedStateCalculator,
                  timing: Optional[Pacing] = None) -> List[Calculation]:
    def dispatch():
        group = WorkerGroup()
        group.spawn("unsafe-1", set_then_run, calculator, 10,
                    "NOT Thread Safe Thread 1", 50, 65)
        group.spawn("unsafe-2", set_then_run, calculator, 5,
                    "NOT Thread Safe Thread 2", 1, 60)
        return group.join_all()

    return _framed(Scenario.UNSAFE_SIMPLE, timing, dispatch)


def safe_exhaustive(calculator: StatelessCalculator, timing: Optional[Pacing] = None,
                    rng=None, workers: int = MAX_WORKERS) -> List[Calculation]:
    rng = rng or random

    def work(index):
        return calculator.run_business_logic(
            f"Thread{index}", index, rng.randrange(10), index + OFFSET)

    return _framed(Scenario.SAFE_EXHAUSTIVE, timing,
                   lambda: parallel_for_each(range(workers), work, workers))


def unsafe_exhaustive(calculator: SharedStateCalculator, timing: Optional[Pacing] = None,
                      rng=None, workers: int = MAX_WORKERS) -> List[Calculation]:
    rng = rng or random

    def work(index):
        return set_then_run(calculator, index, f"Thread{index}",
                            rng.randrange(10), index + OFFSET)

    return _framed(Scenario.UNSAFE_EXHAUSTIVE, timing,
                   lambda: parallel_for_each(range(workers), work, workers))


def run_all(timing: Optional[Pacing] = None, rng=None) -> Dict[Scenario, List[Calculation]]:
    """Run A, B, C, D in order against one stateless and one shared calculator."""
    stateless = StatelessCalculator()
    shared = SharedStateCalculator()

    return {
        Scenario.SAFE_SIMPLE: safe_simple(stateless, timing),
        Scenario.UNSAFE_SIMPLE: unsafe_simple(shared, timing),
        Scenario.SAFE_EXHAUSTIVE: safe_exhaustive(stateless, timing, rng),
        Scenario.UNSAFE_EXHAUSTIVE: unsafe_exhaustive(shared, timing, rng),
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="thread-safety-explained",
        description="Demonstrate thread safe versus NOT thread safe object design",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Scenarios (always all four, in this order):
  A  safe simple        two threads, stateless calculator
  B  unsafe simple      two threads, one shared-state calculator
  C  safe exhaustive    100 workers, stateless calculator
  D  unsafe exhaustive  100 workers, one shared-state calculator

Exit codes:
  0  all scenarios ran (race mismatches in B and D are expected)
  1  a stateless calculation went wrong, which cannot happen
        """,
    )
    parser.parse_args(argv)

    try:
        run_all()
    except Unreachable:
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
