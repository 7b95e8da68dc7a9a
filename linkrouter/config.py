"""Configuration loading and validation."""

import json
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from linkrouter.patterns import GlobPattern, RegexPattern, compile_glob, compile_regex

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")
YAML_SUFFIXES = {".yaml", ".yml"}


class RouterConfig(BaseModel):
    """URL filtering rules.

    A URL is ignored when any glob in ``ignored_urls`` or any regex in
    ``ignored_urls_regex`` matches it. One invalid entry fails the whole
    config.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    ignored_urls: list[GlobPattern] = Field(default_factory=list)
    ignored_urls_regex: list[RegexPattern] = Field(default_factory=list)

    @field_validator("ignored_urls", mode="before")
    @classmethod
    def compile_globs(cls, value):
        if not isinstance(value, list):
            return value
        return [compile_glob(v) if isinstance(v, str) else v for v in value]

    @field_validator("ignored_urls_regex", mode="before")
    @classmethod
    def compile_regexes(cls, value):
        if not isinstance(value, list):
            return value
        return [compile_regex(v) if isinstance(v, str) else v for v in value]

    def is_ignored(self, url: str) -> bool:
        """Check if a URL matches any glob or regex rule."""
        return any(p.is_match(url) for p in self.ignored_urls) or any(
            p.is_match(url) for p in self.ignored_urls_regex
        )


def load_config(path: Path) -> Optional[RouterConfig]:
    """Load filtering rules from a JSON or YAML file.

    Returns None when the file is missing or blank, meaning no filtering.
    """
    if not path.exists():
        logger.debug(f"Config file not found: {path}")
        return None

    with open(path, "r", encoding="utf-8") as f:
        contents = f.read()

    if not contents.strip():
        logger.debug(f"Config file is empty: {path}")
        return None

    logger.debug(f"Config file found: {path}")

    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(contents) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
    else:
        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file: {e}")

    if not isinstance(data, dict):
        raise ValueError(
            f"Config file must contain an object, got {type(data).__name__}"
        )

    return RouterConfig(**data)
