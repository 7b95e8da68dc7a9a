"""URL pattern compilers for linkrouter."""

from linkrouter.patterns.base import (
    BasePattern,
    InvalidGlobError,
    InvalidRawPatternError,
    PatternError,
)
from linkrouter.patterns.glob import GlobPattern, compile_glob, glob_to_regex
from linkrouter.patterns.regex import RegexPattern, compile_regex

__all__ = [
    "BasePattern",
    "PatternError",
    "InvalidGlobError",
    "InvalidRawPatternError",
    "GlobPattern",
    "compile_glob",
    "glob_to_regex",
    "RegexPattern",
    "compile_regex",
]
