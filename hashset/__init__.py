"""
Public API: a dict-backed generic set.
"""

from __future__ import annotations

from .hash_set import HashSet


__all__ = [
    "HashSet",
]
