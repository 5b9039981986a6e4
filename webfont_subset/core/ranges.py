"""
Unicode range token parsing.

Tokens look like ``U+0041`` or ``U+0000-00FF``. The ``U+`` prefix is optional
and intervals are inclusive at both ends.
"""

import re
from collections.abc import Iterable

from webfont_subset.core.errors import ConfigurationError

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")


def _parse_codepoint(text: str, token: str) -> int:
    if not _HEX_RE.fullmatch(text):
        raise ConfigurationError(f"Invalid Unicode range token {token!r}")

    value = int(text, 16)
    if value > MAX_CODEPOINT or value in SURROGATES:
        raise ConfigurationError(
            f"Invalid Unicode range token {token!r}: "
            f"U+{value:04X} is not a Unicode scalar value"
        )
    return value


def parse_token(token: str) -> tuple[int, int]:
    """
    Parse one range token into an inclusive (start, end) pair.

    Single codepoints parse to (value, value).

    Raises:
        ConfigurationError: If the token is not valid hex, names a value outside
            the Unicode scalar range, or has start > end
    """
    body = token.strip()
    if body[:2].upper() == "U+":
        body = body[2:]

    if "-" in body:
        start_text, _, end_text = body.partition("-")
        start = _parse_codepoint(start_text, token)
        end = _parse_codepoint(end_text, token)
        if start > end:
            raise ConfigurationError(
                f"Invalid Unicode range token {token!r}: start is greater than end"
            )
        return start, end

    value = _parse_codepoint(body, token)
    return value, value


def parse_ranges(tokens: Iterable[str]) -> frozenset[int]:
    """
    Build the codepoint selection covered by the given tokens.

    Every token is validated before anything is returned, so a single bad
    token fails the whole selection.
    """
    codepoints: set[int] = set()
    for token in tokens:
        start, end = parse_token(token)
        codepoints.update(range(start, end + 1))
    return frozenset(codepoints)


def iter_intervals(codepoints: Iterable[int]) -> Iterable[tuple[int, int]]:
    """Yield the contiguous (start, end) runs of a codepoint set in order."""
    start = end = None
    for cp in sorted(set(codepoints)):
        if start is None:
            start = end = cp
        elif cp == end + 1:
            end = cp
        else:
            yield start, end
            start = end = cp
    if start is not None:
        yield start, end


def format_ranges(codepoints: Iterable[int], prefix: str = "U+") -> list[str]:
    """
    Serialize a codepoint selection to canonical range tokens.

    Contiguous runs collapse to ``START-END``. Use ``prefix=""`` for the form
    accepted by ``pyftsubset --unicodes``.
    """
    tokens = []
    for start, end in iter_intervals(codepoints):
        if start == end:
            tokens.append(f"{prefix}{start:04X}")
        else:
            tokens.append(f"{prefix}{start:04X}-{end:04X}")
    return tokens
