"""Secret-word filters for WordGrid.

Every word of the list stays a valid guess; filters only decide which words
may be drawn as the secret.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from collections.abc import Iterable

from better_profanity import profanity as _profanity

_profanity.load_censor_words()

__all__ = [
    "FilterConfig",
    "SolutionFilter",
    "apply_solution_filters",
    "load_filter_config",
]


@dataclass(slots=True)
class FilterConfig:
    """Blacklist and affix exclusions for secret-word candidates."""

    prefixes: tuple[str, ...] = field(default_factory=tuple)
    suffixes: tuple[str, ...] = field(default_factory=tuple)
    blacklist: tuple[str, ...] = field(default_factory=tuple)


def _config_path(name: str) -> str:
    """Return the path of ``filters/<name>.json`` next to this module."""

    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "filters", f"{name}.json")


def _lowered(data: dict, key: str) -> tuple[str, ...]:
    return tuple(dict.fromkeys(entry.strip().lower() for entry in data.get(key, []) if entry))


@lru_cache(maxsize=None)
def load_filter_config(name: str = "global") -> FilterConfig:
    """Load and cache the filter configuration stored in ``filters/<name>.json``.

    A missing file yields an empty configuration.
    """

    path = _config_path(name)
    if not os.path.isfile(path):
        return FilterConfig()
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    return FilterConfig(
        prefixes=_lowered(data, "prefixes"),
        suffixes=_lowered(data, "suffixes"),
        blacklist=_lowered(data, "blacklist"),
    )


def _contains_profanity(text: str) -> bool:
    """Return True when better_profanity flags the supplied text."""

    return bool(_profanity.contains_profanity(text))


class SolutionFilter:
    """Drops profane, blacklisted and affix-excluded words."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        self._config = config if config is not None else load_filter_config()

    @property
    def config(self) -> FilterConfig:
        return self._config

    def apply(self, words: Iterable[str]) -> list[str]:
        """Return the surviving words, deduplicated and sorted."""

        processed: list[str] = []
        seen: set[str] = set()
        for word in words:
            lower = word.lower()
            if lower in seen:
                continue
            seen.add(lower)
            if not lower.isalpha():
                continue
            if _contains_profanity(lower):
                continue
            if lower in self.config.blacklist:
                continue
            if self._matches_prefix(lower) or self._matches_suffix(lower):
                continue
            processed.append(lower)
        return sorted(processed)

    def _matches_prefix(self, word_lower: str) -> bool:
        return any(word_lower.startswith(prefix) for prefix in self.config.prefixes)

    def _matches_suffix(self, word_lower: str) -> bool:
        return any(word_lower.endswith(suffix) for suffix in self.config.suffixes)


def apply_solution_filters(
    words: Iterable[str],
    *,
    enable_filters: bool = True,
    config: FilterConfig | None = None,
) -> list[str]:
    """Filter secret-word candidates, or only deduplicate them when disabled."""

    if not enable_filters:
        return sorted(dict.fromkeys(w.lower() for w in words))
    return SolutionFilter(config).apply(words)
