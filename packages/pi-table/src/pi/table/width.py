"""Display width of cell content in terminal columns.

ANSI escape sequences take no space, tabs count as three columns, and wide
(East Asian) characters and emoji sequences count as two.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# CSI, OSC 8 hyperlinks and APC payloads
_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"
    r"|\x1b\]8;;[^\x07]*\x07"
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"
)

_TAB = "   "

_cell_width_cache: dict[str, int] = {}
_CELL_WIDTH_CACHE_MAX = 1024


def strip_escapes(text: str) -> str:
    """Remove terminal escape sequences from *text*."""
    return _ESCAPE_RE.sub("", text)


def _cluster_width(cluster: str) -> int:
    """Width of a single grapheme cluster."""
    if len(cluster) == 1:
        cp = ord(cluster)
        if cp < 0x20 or 0x7F <= cp <= 0x9F:
            return 0
        return max(_wcwidth.wcwidth(cluster), 0)

    for ch in cluster:
        cp = ord(ch)
        # VS16, ZWJ, skin tones, regional indicators
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = cluster[0]
    cp = ord(first)
    if cp >= 0x1F000 or 0x2600 <= cp <= 0x27BF:
        return 2
    category = unicodedata.category(first)
    if category.startswith("M") or category == "Cf":
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies on one line."""
    if not text:
        return 0

    plain = strip_escapes(text).replace("\t", _TAB)
    if not plain:
        return 0
    if plain.isascii() and plain.isprintable():
        return len(plain)

    cached = _cell_width_cache.get(plain)
    if cached is not None:
        return cached

    total = sum(_cluster_width(cluster) for cluster in grapheme.graphemes(plain))
    if len(_cell_width_cache) >= _CELL_WIDTH_CACHE_MAX:
        _cell_width_cache.clear()
    _cell_width_cache[plain] = total
    return total


def content_width_of(text: str) -> int:
    """Width of the widest line of a (possibly multi-line) cell."""
    return max((visible_width(line) for line in text.split("\n")), default=0)
