"""
Subset catalog lookup.

Resolves subset names such as ``latin`` or ``cyrillic-ext`` into the Unicode
range tokens they cover, and bundles the result into a validated request.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from webfont_subset.config.subsets import SUBSET_ALIASES, SUBSET_RANGES
from webfont_subset.core.ranges import parse_ranges
from webfont_subset.utils.logging import logger


class SubsetCatalog:
    """Read-only mapping of subset names to range tokens."""

    def __init__(
        self,
        ranges: Mapping[str, Iterable[str]],
        aliases: Mapping[str, str] | None = None,
    ):
        self._ranges = MappingProxyType(
            {name: tuple(tokens) for name, tokens in ranges.items()}
        )
        self._aliases = MappingProxyType(dict(aliases or {}))

    def names(self) -> list[str]:
        """Canonical subset names, in catalog order."""
        return list(self._ranges)

    def tokens(self, name: str) -> tuple[str, ...] | None:
        """Range tokens for a single subset name, or None if unknown."""
        key = name.strip()
        key = self._aliases.get(key, key)
        return self._ranges.get(key)

    def resolve(self, requested: Iterable[str]) -> list[str]:
        """
        Flatten requested subset names into their range tokens.

        Names are trimmed before lookup. Unknown names are skipped. Tokens
        shared by several subsets are kept as-is; the selection built from
        them is a set.
        """
        resolved: list[str] = []
        for name in requested:
            tokens = self.tokens(name)
            if tokens is None:
                logger.debug(f"Unknown subset '{name.strip()}' skipped")
                continue
            resolved.extend(tokens)
        return resolved


DEFAULT_CATALOG = SubsetCatalog(SUBSET_RANGES, SUBSET_ALIASES)


@dataclass(frozen=True)
class SubsetRequest:
    """Validated codepoint selection shared by every file in a batch."""

    names: tuple[str, ...]
    tokens: tuple[str, ...]
    codepoints: frozenset[int]

    @classmethod
    def from_names(
        cls, names: Iterable[str], catalog: SubsetCatalog = DEFAULT_CATALOG
    ) -> "SubsetRequest":
        """
        Resolve subset names and parse their tokens.

        Raises:
            ConfigurationError: If any resolved token is malformed
        """
        names = tuple(name.strip() for name in names if name.strip())
        tokens = tuple(catalog.resolve(names))
        return cls(names, tokens, parse_ranges(tokens))

    @property
    def is_empty(self) -> bool:
        return not self.codepoints
