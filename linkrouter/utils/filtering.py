"""Ignore-list filtering for URLs."""

import logging
from typing import Iterable, Optional

from linkrouter.config import RouterConfig

logger = logging.getLogger(__name__)


def filter_ignored(urls: Iterable[str], config: Optional[RouterConfig]) -> list[str]:
    """Filter out URLs that match the configured ignore rules."""
    urls = list(urls)
    if config is None:
        logger.debug("No config loaded, not filtering URLs")
        return urls

    filtered = [url for url in urls if not config.is_ignored(url)]
    if len(filtered) != len(urls):
        logger.debug(
            f"Removed {len(urls) - len(filtered)} URLs due to configured URL filtering rules "
            f"({len(urls)} -> {len(filtered)})"
        )
    return filtered
