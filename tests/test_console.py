"""
Test file: test_console.py
Purpose: Console lines written by concurrent workers stay whole. Runs in a
         subprocess so that the real stdout, not pytest's capture, is used.
"""
import os
import re
import subprocess
import sys
from pathlib import Path

from thread_safety import console

ROOT = Path(__file__).parent.parent
PROGRESS = re.compile(r"Thread\d+ ->")

EXHAUSTIVE_RUNS = """
from thread_safety import StatelessCalculator
from thread_safety.pacing import Pacing
from thread_safety.scenarios import safe_exhaustive

for _ in range(20):
    safe_exhaustive(StatelessCalculator(), Pacing(0, 0))
"""


def run_python(*args):
    env = dict(os.environ, PYTHONPATH=str(ROOT))
    return subprocess.run(
        [sys.executable, *args], cwd=ROOT, env=env,
        capture_output=True, text=True, timeout=120,
    )


class TestConsole:

    def test_info_and_error_streams(self, capsys):
        console.info("to stdout")
        console.error("to stderr")
        captured = capsys.readouterr()
        assert captured.out == "to stdout\n"
        assert captured.err == "to stderr\n"

    def test_concurrent_lines_never_merge(self):
        result = run_python("-c", EXHAUSTIVE_RUNS)

        assert result.returncode == 0, result.stderr
        merged = [line for line in result.stdout.splitlines()
                  if len(PROGRESS.findall(line)) > 1]
        assert merged == []
        assert result.stdout.count("Calculation correct") == 20 * 100
