"""Name normalization for Chinese administrative place names.

Both transforms are pure and total: a string without a matching
suffix comes back unchanged.
"""

from __future__ import annotations

import re

CITY_SUFFIX = "市"

ADMIN_SUFFIXES: tuple[str, ...] = ("特别行政区", "自治区", "省", "市")

_CITY_SUFFIX_RE = re.compile(f"(?<=.){CITY_SUFFIX}$")
_ADMIN_SUFFIX_RE = re.compile(
    "(?<=.)(?:" + "|".join(map(re.escape, ADMIN_SUFFIXES)) + ")$"
)


def strip_suffix(text: str) -> str:
    """Remove a trailing city marker (市).

    >>> strip_suffix("北京市")
    '北京'
    >>> strip_suffix("北京")
    '北京'
    """
    return _CITY_SUFFIX_RE.sub("", text, count=1)


def strip_admin_suffix(text: str) -> str:
    """Remove a trailing province-level suffix.

    Handles 省, 市, 自治区 and 特别行政区.

    >>> strip_admin_suffix("广东省")
    '广东'
    >>> strip_admin_suffix("香港特别行政区")
    '香港'
    """
    return _ADMIN_SUFFIX_RE.sub("", text, count=1)
