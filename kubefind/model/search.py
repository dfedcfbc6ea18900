"""Search configuration and result models."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ..errors import ConfigurationError, PatternError

DEFAULT_CONTEXT_RADIUS = 10


class ReportFormat(str, Enum):
    """How matches are presented."""

    LOG = "log"
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def compile_pattern(expression: str) -> re.Pattern[str]:
    """Compile a user-supplied regular expression."""
    try:
        return re.compile(expression)
    except re.error as e:
        raise PatternError(expression, str(e)) from e


@dataclass(frozen=True)
class SearchConfig:
    """Compiled search settings, fixed for the whole run."""

    pattern: re.Pattern[str]
    exclude: Optional[re.Pattern[str]] = None
    context_radius: int = DEFAULT_CONTEXT_RADIUS

    def __post_init__(self):
        if self.context_radius < 0:
            raise ConfigurationError(
                f"context radius must be non-negative, got {self.context_radius}"
            )

    @classmethod
    def compile(
        cls,
        find: str,
        exclude: Optional[str] = None,
        context_radius: int = DEFAULT_CONTEXT_RADIUS,
    ) -> "SearchConfig":
        """Build a config from raw pattern strings; an empty exclude means none."""
        return cls(
            pattern=compile_pattern(find),
            exclude=compile_pattern(exclude) if exclude else None,
            context_radius=context_radius,
        )

    def is_excluded(self, key: str) -> bool:
        return self.exclude is not None and self.exclude.search(key) is not None


class SearchMatch(BaseModel):
    """A single match with its context window."""

    kind: str
    name: str
    namespace: str = ""
    match_start: int
    match_end: int
    start: int
    end: int
    snippet: str
