from __future__ import annotations

from collections.abc import Iterable

from hashset.hash_set import HashSet


def normalize_line(raw: str, *, strip: bool) -> str:
    line = raw.rstrip("\r\n")
    return line.strip() if strip else line


def collect_lines(
    lines: Iterable[str], *, strip: bool = True, skip_blank: bool = True
) -> HashSet[str]:
    """Distinct normalized lines; blank ones are dropped when skip_blank is set."""
    out: HashSet[str] = HashSet()
    for raw in lines:
        line = normalize_line(raw, strip=strip)
        if skip_blank and not line.strip():
            continue
        out.add(line)
    return out
