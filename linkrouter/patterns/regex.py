"""Raw regular expression URL patterns."""

import re

from linkrouter.patterns.base import BasePattern, InvalidRawPatternError


class RegexPattern(BasePattern):
    """A regular expression applied to URLs as-is (unanchored search)."""

    def __init__(self, source: str, regex: re.Pattern):
        super().__init__(source)
        self.regex = regex

    def is_match(self, url: str) -> bool:
        return self.regex.search(url) is not None


def compile_regex(pattern: str) -> RegexPattern:
    """Compile a raw pattern string."""
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise InvalidRawPatternError(
            pattern, f"Invalid regex '{pattern}': {e}"
        ) from e
    return RegexPattern(pattern, regex)
