"""Pattern matching over collected objects."""

import logging
from typing import List, Optional, Tuple

from ..model.kubernetes import KubernetesObject
from ..model.search import SearchConfig, SearchMatch
from ..model.store import ObjectStore
from ..utils.logger import bind_logger, get_logger


def fold_case(text: str) -> Tuple[str, Optional[List[int]]]:
    """Lowercase ``text`` one character at a time and map folded offsets back.

    Each character is lowered on its own, so context rules such as the Greek
    final sigma do not apply. Returns the folded string and, when lowercasing
    changed the length, a list where entry ``i`` is the index in ``text`` of
    the character that produced folded character ``i``, followed by
    ``len(text)`` as a sentinel. When the length is unchanged the offsets line
    up and ``None`` is returned instead.
    """
    lowered = [char.lower() for char in text]
    folded = "".join(lowered)
    if len(folded) == len(text):
        return folded, None

    offsets: List[int] = []
    for index, part in enumerate(lowered):
        offsets.extend([index] * len(part))
    offsets.append(len(text))
    return folded, offsets


def _to_original(offsets: Optional[List[int]], start: int, end: int) -> Tuple[int, int]:
    if offsets is None:
        return start, end
    if end > start:
        # end is exclusive: take the source of the last folded character
        return offsets[start], offsets[end - 1] + 1
    return offsets[start], offsets[start]


def context_window(text: str, start: int, end: int, radius: int) -> Tuple[int, int, str]:
    """Cut ``[start - radius, end + radius)`` out of ``text``, clamped to its bounds.

    Newlines in the window are replaced with spaces so each match stays on one
    log line.
    """
    window_start = max(0, start - radius)
    window_end = min(len(text), end + radius)
    snippet = text[window_start:window_end].replace("\n", " ")
    return window_start, window_end, snippet


class ObjectMatcher:
    """Finds the search pattern in collected objects and reports each hit."""

    def __init__(self, config: SearchConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or get_logger(__name__)

    def _bind(self, obj) -> logging.LoggerAdapter:
        return bind_logger(self.logger, kind=obj.kind, name=obj.name, namespace=obj.namespace)

    def scan_object(self, obj: KubernetesObject) -> List[SearchMatch]:
        """Return every match in ``obj``; excluded objects yield none."""
        if self.config.is_excluded(obj.exclusion_key):
            self._bind(obj).debug("ignored")
            return []

        return self._find(obj)

    def _find(self, obj: KubernetesObject) -> List[SearchMatch]:
        folded, offsets = fold_case(obj.text)
        radius = self.config.context_radius

        matches = []
        previous_end = -1
        for found in self.config.pattern.finditer(folded):
            # An empty match right after the previous match is not a new hit
            if found.start() == found.end() == previous_end:
                continue
            previous_end = found.end()

            match_start, match_end = _to_original(offsets, found.start(), found.end())
            start, end, snippet = context_window(obj.text, match_start, match_end, radius)
            matches.append(
                SearchMatch(
                    kind=obj.kind,
                    name=obj.name,
                    namespace=obj.namespace,
                    match_start=match_start,
                    match_end=match_end,
                    start=start,
                    end=end,
                    snippet=snippet,
                )
            )
        return matches

    def scan(self, store: ObjectStore) -> List[SearchMatch]:
        """Scan every stored object in order."""
        matches: List[SearchMatch] = []
        for obj in store:
            matches.extend(self.scan_object(obj))
        return matches

    def report(self, store: ObjectStore) -> List[SearchMatch]:
        """Scan every stored object and log each match."""
        matches = self.scan(store)

        for match in matches:
            self._bind(match).info(match.snippet)

        return matches
