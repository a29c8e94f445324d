"""Enumerations used throughout the Hive/Phoenix bridge."""

from enum import StrEnum


class UnmatchedRowKeyPolicy(StrEnum):
    """What to do with a row-key entry that names no declared column."""

    FAIL = "fail"
    SKIP = "skip"
