"""Character-class and repetition checks shared by scoring and validation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import groupby

_LOWER_PATTERN = re.compile(r"[a-z]")
_UPPER_PATTERN = re.compile(r"[A-Z]")
_DIGIT_PATTERN = re.compile(r"[0-9]")
_SYMBOL_PATTERN = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class CharacterCategories:
    """ASCII character categories present in one password."""

    has_lower: bool
    has_upper: bool
    has_digit: bool
    has_symbol: bool

    @property
    def count(self) -> int:
        return sum((self.has_lower, self.has_upper, self.has_digit, self.has_symbol))


def detect_categories(password: str) -> CharacterCategories:
    """Return which character categories occur in the password."""

    return CharacterCategories(
        has_lower=_LOWER_PATTERN.search(password) is not None,
        has_upper=_UPPER_PATTERN.search(password) is not None,
        has_digit=_DIGIT_PATTERN.search(password) is not None,
        has_symbol=_SYMBOL_PATTERN.search(password) is not None,
    )


def longest_run(password: str) -> int:
    """Return the length of the longest run of one identical character."""

    return max((len(list(run)) for _, run in groupby(password)), default=0)


def has_excessive_repeat(password: str, *, max_repeat: int) -> bool:
    """Return whether any character repeats more than max_repeat times in a row.

    A non-positive max_repeat disables the check.
    """

    if max_repeat <= 0:
        return False
    return longest_run(password) > max_repeat
