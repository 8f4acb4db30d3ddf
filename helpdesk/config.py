"""Reading the algorithm choices from the configuration file.

The first line of the file names the sorting algorithm; the second
whitespace-separated word names the searching algorithm.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CONFIG_PATH = "config.txt"

SORT_ALGORITHMS = (
    "bubblesort",
    "insertionsort",
    "selectionsort",
    "quicksort",
    "mergesort",
)
SEARCH_ALGORITHMS = ("binarysearch", "interpolationsearch")


class ConfigError(Exception):
    """Raised when the configuration file is missing or names an unknown algorithm."""


def _read(path: str | os.PathLike[str]) -> str:
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ConfigError("Error opening the file.") from exc


def read_sort_algorithm(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> str:
    """Return the sorting algorithm named on the first line of the file."""
    text = _read(path)
    choice = text.split("\n", 1)[0].rstrip("\r")
    if choice not in SORT_ALGORITHMS:
        raise ConfigError("Invalid sorting choice in the config file.")
    return choice


def read_search_algorithm(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> str:
    """Return the searching algorithm, the second word of the file.

    A file holding a single word yields that word.
    """
    words = _read(path).split()
    choice = words[1] if len(words) >= 2 else (words[0] if words else "")
    if choice not in SEARCH_ALGORITHMS:
        raise ConfigError("Invalid searching algorithm in the config file.")
    return choice