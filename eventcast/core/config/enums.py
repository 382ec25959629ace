"""Configuration enums for type-safe settings.

These enums provide type safety and IDE autocomplete for configuration values.
They inherit from str to maintain JSON serialization compatibility.
"""

from enum import Enum


class AdapterKind(str, Enum):
    """Short names of the analytics backends shipped with eventcast."""

    GOOGLE_ANALYTICS = "google_analytics"
    PLAUSIBLE = "plausible"
