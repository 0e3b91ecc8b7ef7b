"""Tests for administrative suffix stripping."""

import pytest

from footprint.domain.names import strip_admin_suffix, strip_suffix


@pytest.mark.parametrize(
    "text, expected",
    [
        ("北京市", "北京"),
        ("成都", "成都"),
        ("广东省", "广东省"),
        ("市", "市"),
        ("", ""),
        ("Atlantis", "Atlantis"),
    ],
)
def test_strip_suffix(text, expected):
    assert strip_suffix(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("广东省", "广东"),
        ("上海市", "上海"),
        ("西藏自治区", "西藏"),
        ("香港特别行政区", "香港"),
        ("澳门特别行政区", "澳门"),
        ("广西壮族自治区", "广西壮族"),
        ("广东", "广东"),
        ("省", "省"),
        ("", ""),
    ],
)
def test_strip_admin_suffix(text, expected):
    assert strip_admin_suffix(text) == expected


def test_only_one_suffix_is_removed():
    assert strip_suffix("市市") == "市"
    assert strip_admin_suffix("某省市") == "某省"
