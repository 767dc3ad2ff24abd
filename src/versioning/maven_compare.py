"""Maven-style version ordering.

Versions are split into items on ".", "-" and digit/letter transitions.
Numeric items compare numerically, qualifiers by release maturity:

    alpha < beta < milestone < rc < snapshot < "" (release) < sp < unknown

Trailing zero and release-equivalent items are insignificant, so "1",
"1.0" and "1.0.0" compare equal, as do "1.0-final" and "1.0".
"""

from __future__ import annotations

import functools
import string
from itertools import zip_longest
from typing import Iterable, List, Optional, Union

_QUALIFIER_ORDER = {
    "alpha": 1,
    "beta": 2,
    "milestone": 3,
    "rc": 4,
    "snapshot": 5,
    "": 6,
    "sp": 7,
}
_QUALIFIER_ALIASES = {
    "cr": "rc",
    "ga": "",
    "final": "",
    "release": "",
}
# Single letters only count as qualifiers when directly followed by a number: "1.0-m2".
_SHORT_QUALIFIERS = {"a": "alpha", "b": "beta", "m": "milestone"}
_UNKNOWN_QUALIFIER = len(_QUALIFIER_ORDER) + 1

# Precedence between items whose separator or kind differ.
_KIND_ORDER = {
    (".", False): 0,
    ("-", False): 1,
    ("-", True): 2,
    (".", True): 3,
}


class _Item:
    __slots__ = ("prefix", "value")

    def __init__(self, prefix: str, value: Union[int, str]):
        self.prefix = prefix
        self.value = value

    @property
    def is_number(self) -> bool:
        return isinstance(self.value, int)

    def is_null(self) -> bool:
        return self.value == 0 or self.value == ""

    def __repr__(self) -> str:
        return f"{self.prefix}{self.value!r}"


def _make_item(prefix: str, token: str, followed_by_digit: bool = False) -> _Item:
    if token[0] in string.digits:
        return _Item(prefix, int(token))
    if followed_by_digit and token in _SHORT_QUALIFIERS:
        return _Item(prefix, _SHORT_QUALIFIERS[token])
    return _Item(prefix, _QUALIFIER_ALIASES.get(token, token))


def _tokenize(version: str) -> List[_Item]:
    items: List[_Item] = []
    prefix = "."
    buf = ""
    for ch in version.strip().lower():
        if ch in ".-":
            if buf:
                items.append(_make_item(prefix, buf))
                buf = ""
            prefix = ch
            continue
        if buf and (ch in string.digits) != (buf[-1] in string.digits):
            items.append(_make_item(prefix, buf, followed_by_digit=ch in string.digits))
            buf = ""
            prefix = "-"
        buf += ch
    if buf:
        items.append(_make_item(prefix, buf))

    # Drop insignificant items at the end of the version or of a "-" segment.
    idx = len(items) - 1
    while idx > 0:
        following = items[idx + 1] if idx + 1 < len(items) else None
        if items[idx].is_null() and (following is None or following.prefix == "-"):
            del items[idx]
        idx -= 1
    return items


def _qualifier_rank(value: str):
    order = _QUALIFIER_ORDER.get(value)
    if order is None:
        return (_UNKNOWN_QUALIFIER, value)
    return (order, "")


def _cmp(left, right) -> int:
    return (left > right) - (left < right)


def _compare_items(left: Optional[_Item], right: Optional[_Item]) -> int:
    if left is None:
        left = _Item(right.prefix, 0 if right.is_number else "")
    if right is None:
        right = _Item(left.prefix, 0 if left.is_number else "")

    if left.prefix == right.prefix and left.is_number == right.is_number:
        if left.is_number:
            return _cmp(left.value, right.value)
        return _cmp(_qualifier_rank(left.value), _qualifier_rank(right.value))

    return _cmp(
        _KIND_ORDER[(left.prefix, left.is_number)],
        _KIND_ORDER[(right.prefix, right.is_number)],
    )


def compare(left: str, right: str) -> int:
    """Compare two version strings, returning -1, 0 or 1."""
    for litem, ritem in zip_longest(_tokenize(left), _tokenize(right)):
        result = _compare_items(litem, ritem)
        if result:
            return result
    return 0


version_key = functools.cmp_to_key(compare)


def sort_versions(versions: Iterable[str]) -> List[str]:
    """Deduplicate and sort ascending; equal-ranking spellings are ordered lexically."""
    return sorted(set(versions), key=lambda v: (version_key(v), v))


def latest_version(versions: Optional[Iterable[str]]) -> Optional[str]:
    """Return the highest version, or None for an empty input."""
    if not versions:
        return None
    latest: Optional[str] = None
    for candidate in versions:
        if latest is None or compare(candidate, latest) == 1:
            latest = candidate
    return latest
