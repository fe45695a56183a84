"""Console reporting: progress to stdout, race warnings to stderr.

Each message goes out as a single write under one lock, so lines from
concurrent workers interleave but never merge.
"""
import sys
import threading

SEPARATOR = "-" * 72

_output_lock = threading.Lock()


def _write_line(stream, message: str) -> None:
    with _output_lock:
        stream.write(message + "\n")
        stream.flush()


def info(message: str) -> None:
    _write_line(sys.stdout, message)


def error(message: str) -> None:
    _write_line(sys.stderr, message)
