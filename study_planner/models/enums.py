"""Enums for model fields."""

from enum import Enum


class TaskCategory(str, Enum):
    """Color-coding tag shared by todos, schedule items and assignments."""

    SCIENCE = "science"
    MATH = "math"
    ENGLISH = "english"
    BREAK = "break"
    SOCIAL = "social"
    BIOLOGY = "biology"
    PE = "pe"
    MUSIC = "music"
    FREE = "free"
    OTHER = "other"
    # Todo list groupings
    DAILY = "daily"
    MONTHLY = "monthly"


class Priority(str, Enum):
    """Priority levels for todos and quick tasks."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
