from __future__ import annotations

import pytest

from hashset.lines import collect_lines, normalize_line


@pytest.mark.parametrize(
    ("raw", "strip", "expected"),
    [
        ("a\n", True, "a"),
        ("  a  \r\n", True, "a"),
        ("  a  \r\n", False, "  a  "),
        ("", True, ""),
        ("tab\there\n", True, "tab\there"),
    ],
)
def test_normalize_line(raw: str, strip: bool, expected: str) -> None:
    assert normalize_line(raw, strip=strip) == expected


def test_collect_lines_deduplicates() -> None:
    values = collect_lines(["a\n", "b\n", "a\n", "c\n", "b\n"])
    assert values.len() == 3
    assert set(values.to_list()) == {"a", "b", "c"}


def test_collect_lines_strip_merges_padded_duplicates() -> None:
    assert collect_lines([" a\n", "a \n", "a\n"]).len() == 1
    assert collect_lines([" a\n", "a \n", "a\n"], strip=False).len() == 3


def test_collect_lines_blank_handling() -> None:
    raw = ["a\n", "\n", "   \n", "b\n"]
    assert set(collect_lines(raw).to_list()) == {"a", "b"}

    kept = collect_lines(raw, skip_blank=False)
    assert set(kept.to_list()) == {"a", "", "b"}

    kept_raw = collect_lines(raw, strip=False, skip_blank=False)
    assert set(kept_raw.to_list()) == {"a", "", "   ", "b"}


def test_collect_lines_empty_input() -> None:
    values = collect_lines([])
    assert values.len() == 0
    assert values.to_list() == []
