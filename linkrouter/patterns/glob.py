"""Glob patterns for URLs.

Globs are translated into anchored, case-insensitive regular expressions:

- ``*`` matches inside a single segment and never crosses ``.``, ``:`` or
  ``/``. After the ``?`` of a query string it matches anything.
- ``**`` matches anything, including nothing. Inside the protocol it behaves
  like ``*``.
- ``/`` is optional when the glob has no query string, and right before the
  ``?``. The ``://`` separator is always required.
- Any other character is literal.

Examples:
- ``https://*.example.com`` matches ``https://www.example.com``
- ``https://**.tracking.com/**`` matches every page of every subdomain
- ``https://example.com/search?q=*`` matches any search query

Each glob is compiled twice: once for URLs that carry a protocol and once,
from the part after ``://``, for bare ``host/path`` strings.
"""

import logging
import re
from typing import Optional

from linkrouter.patterns.base import BasePattern, InvalidGlobError

logger = logging.getLogger(__name__)

PROTOCOL_SEPARATOR = "://"
MATCH_ONE_SEGMENT = r"[^\.:/]*?"
MATCH_ANYTHING = ".*?"
OPTIONAL_SLASH = "/?"
REGEX_META_CHARACTERS = frozenset("\\.+*?()|[]{}^$#&-~")


class GlobPattern(BasePattern):
    """A compiled glob holding both the with- and without-protocol regex."""

    def __init__(self, source: str, with_protocol: re.Pattern, without_protocol: re.Pattern):
        super().__init__(source)
        self.with_protocol = with_protocol
        self.without_protocol = without_protocol

    def is_match(self, url: str) -> bool:
        """Check if the whole URL matches the glob."""
        if PROTOCOL_SEPARATOR in url:
            regex = self.with_protocol
        else:
            regex = self.without_protocol
        return regex.fullmatch(url) is not None


def find_query_index(glob: str, start: int = 0) -> Optional[int]:
    """Return the offset of the first ``?`` at or after ``start``."""
    index = glob.find("?", start)
    return None if index == -1 else index


def glob_to_regex(glob: str, protocol_index: Optional[int] = None) -> str:
    """Translate a glob into regex text.

    ``protocol_index`` is the offset of ``://`` in ``glob``, or ``None`` when
    the glob has already been stripped of its protocol.
    """
    if protocol_index is None:
        query_index = find_query_index(glob)
    else:
        query_index = find_query_index(glob, protocol_index + len(PROTOCOL_SEPARATOR))

    parts = ["(?i)^"]
    index = 0
    while index < len(glob):
        if index == protocol_index:
            parts.append(PROTOCOL_SEPARATOR)
            index += len(PROTOCOL_SEPARATOR)
            continue

        current = glob[index]
        following = glob[index + 1 : index + 2]

        if current == "/" and (query_index is None or index + 1 == query_index):
            parts.append(OPTIONAL_SLASH)
        elif current == "*" and following == "*":
            # The protocol is a single token
            if protocol_index is not None and index < protocol_index:
                parts.append(MATCH_ONE_SEGMENT)
            else:
                parts.append(MATCH_ANYTHING)
            index += 1
        elif current == "*":
            if query_index is not None and index > query_index:
                parts.append(MATCH_ANYTHING)
            else:
                parts.append(MATCH_ONE_SEGMENT)
        elif current in REGEX_META_CHARACTERS:
            parts.append("\\" + current)
        else:
            parts.append(current)
        index += 1

    if query_index is None and parts[-1] != OPTIONAL_SLASH:
        parts.append(OPTIONAL_SLASH)
    parts.append("$")
    return "".join(parts)


def compile_glob(glob: str) -> GlobPattern:
    """Compile a glob into a GlobPattern.

    Raises InvalidGlobError if the glob has no ``://``.
    """
    protocol_index = glob.find(PROTOCOL_SEPARATOR)
    if protocol_index == -1:
        raise InvalidGlobError(
            glob, f"Invalid glob '{glob}', missing protocol separator '{PROTOCOL_SEPARATOR}'"
        )

    if "***" in glob:
        logger.warning(
            f"Glob '{glob}' contains 3 or more consecutive '*', read as '**' followed by '*'"
        )

    bare = glob[protocol_index + len(PROTOCOL_SEPARATOR):]
    with_protocol = re.compile(glob_to_regex(glob, protocol_index))
    without_protocol = re.compile(glob_to_regex(bare))
    logger.debug(f"Compiled glob '{glob}' to {with_protocol.pattern}")
    return GlobPattern(glob, with_protocol, without_protocol)
