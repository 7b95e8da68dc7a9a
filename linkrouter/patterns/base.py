"""Base pattern interface and errors."""

from abc import ABC, abstractmethod


class PatternError(ValueError):
    """Raised when a configured URL pattern cannot be compiled."""

    def __init__(self, pattern: str, message: str):
        super().__init__(message)
        self.pattern = pattern


class InvalidGlobError(PatternError):
    """Glob pattern without the mandatory protocol separator."""


class InvalidRawPatternError(PatternError):
    """Raw pattern that is not a valid regular expression."""


class BasePattern(ABC):
    """Abstract base class for compiled URL patterns."""

    def __init__(self, source: str):
        self.source = source

    @abstractmethod
    def is_match(self, url: str) -> bool:
        """Check if the URL matches this pattern."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"
