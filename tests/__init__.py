"""Test package for Thread Safety Explained.

Unit tests for the calculators, worker dispatch and race report, plus
scenario tests and the race differential under tests/unit/data_races.
"""

__all__ = ["test_calculators", "test_console", "test_race_report", "test_scenarios", "test_utils", "test_workers"]
