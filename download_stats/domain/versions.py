"""
download_stats/domain/versions.py

Comparable core version identifiers.

Ordering rules
--------------
A version is read as a list of items. ``.`` separates items within a list,
while ``-`` and every switch between digits and letters open a nested list
for the rest of the version::

    3.9.6          -> [3, 9, 6]
    4.0.0-alpha-7  -> [4, [alpha, [7]]]
    1.0-a1         -> [1, [alpha, [1]]]

Trailing ``0`` and release qualifiers are dropped from each list, including
those directly before a nested list, so ``3.0``, ``3`` and ``3.0.0-ga`` are
the same version, as are ``3.0.0-alpha`` and ``3-alpha``. Items are compared
pairwise:

    number    vs number     numeric comparison (``9 < 10``)
    number    vs list       the number is greater (``1-1 < 1.1``)
    list      vs qualifier  the list is greater
    number    vs qualifier  the number is greater
    qualifier vs qualifier  by rank, then by name for unknown qualifiers

Qualifier ranks::

    alpha < beta < milestone < rc < snapshot < (release) < sp < unknown

``a``, ``b`` and ``m`` only stand for alpha, beta and milestone when a digit
follows them. A missing item is ``0`` against a number, ``release`` against
a qualifier and an empty list against a list, so ``3.9.6-SNAPSHOT`` sorts
before ``3.9.6``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Final, Union

_VALID_VERSION = re.compile(r"[0-9][0-9A-Za-z]*(?:[.-][0-9A-Za-z]+)*")

_SHORT_QUALIFIERS: Final[dict[str, str]] = {
    "a": "alpha",
    "b": "beta",
    "m": "milestone",
}
_QUALIFIER_ALIASES: Final[dict[str, str]] = {
    "cr": "rc",
    "ga": "",
    "final": "",
    "release": "",
}

_QUALIFIER_RANKS: Final[dict[str, int]] = {
    "alpha": 0,
    "beta": 1,
    "milestone": 2,
    "rc": 3,
    "snapshot": 4,
    "": 5,
    "sp": 6,
}
_UNKNOWN_QUALIFIER_RANK: Final[int] = len(_QUALIFIER_RANKS)
_RELEASE_RANK: Final[int] = _QUALIFIER_RANKS[""]

Token = Union[int, str, "tuple[Token, ...]"]


def _qualifier_key(qualifier: str) -> tuple[int, str]:
    rank = _QUALIFIER_RANKS.get(qualifier, _UNKNOWN_QUALIFIER_RANK)
    return rank, qualifier if rank == _UNKNOWN_QUALIFIER_RANK else ""


def _compare_lists(left: tuple[Token, ...], right: tuple[Token, ...]) -> int:
    for index in range(max(len(left), len(right))):
        result = _compare_tokens(
            left[index] if index < len(left) else None,
            right[index] if index < len(right) else None,
        )
        if result:
            return result
    return 0


def _compare_tokens(left: Token | None, right: Token | None) -> int:
    if left is None and right is None:
        return 0
    if left is None:
        return -_compare_tokens(right, left)

    if isinstance(left, int):
        if right is None:
            return 0 if left == 0 else 1
        if isinstance(right, int):
            return (left > right) - (left < right)
        return 1

    if isinstance(left, tuple):
        if right is None:
            return _compare_lists(left, ())
        if isinstance(right, tuple):
            return _compare_lists(left, right)
        return -1 if isinstance(right, int) else 1

    left_key = _qualifier_key(left)
    if right is None:
        right_key = (_RELEASE_RANK, "")
    elif isinstance(right, str):
        right_key = _qualifier_key(right)
    else:
        return -1
    return (left_key > right_key) - (left_key < right_key)


def _is_null_token(token: object) -> bool:
    return token == 0 or token == "" or token == []


def _item(text: str, *, followed_by_digit: bool = False) -> Token:
    if text.isdigit():
        return int(text)
    if followed_by_digit and text in _SHORT_QUALIFIERS:
        return _SHORT_QUALIFIERS[text]
    return _QUALIFIER_ALIASES.get(text, text)


def _normalize(items: list) -> None:
    # Nulls before a trailing nested list go too: 3.0.0-alpha == 3-alpha.
    for index in range(len(items) - 1, -1, -1):
        if _is_null_token(items[index]):
            del items[index]
        elif not isinstance(items[index], list):
            break


def _freeze(items: list) -> tuple[Token, ...]:
    return tuple(_freeze(item) if isinstance(item, list) else item for item in items)


def _tokenize(text: str) -> tuple[Token, ...]:
    text = text.lower()
    root: list = []
    current = root
    lists = [root]
    start = 0
    in_digits = False

    def open_list() -> None:
        nonlocal current
        nested: list = []
        current.append(nested)
        current = nested
        lists.append(nested)

    for index, char in enumerate(text):
        if char in ".-":
            current.append(_item(text[start:index]) if index > start else 0)
            start = index + 1
            if char == "-":
                open_list()
        elif char.isdigit():
            if not in_digits and index > start:
                current.append(_item(text[start:index], followed_by_digit=True))
                start = index
                open_list()
            in_digits = True
        else:
            if in_digits and index > start:
                current.append(_item(text[start:index]))
                start = index
                open_list()
            in_digits = False
    if len(text) > start:
        current.append(_item(text[start:]))

    # Innermost first, so emptied nested lists count as null in their parent.
    for items in reversed(lists):
        _normalize(items)
    return _freeze(root)


@total_ordering
@dataclass(frozen=True, eq=False)
class CoreVersion:
    """
    A released core version, e.g. ``3.9.6`` or ``4.0.0-alpha-7``.

    Equality and hashing use the normalized tokens, so two spellings of the
    same version group together. ``str()`` returns the original spelling.
    """

    raw: str
    tokens: tuple[Token, ...] = field(repr=False)

    @classmethod
    def parse(cls, text: str) -> "CoreVersion":
        """
        Parse a version identifier.

        Raises ``ValueError`` when the text is not a structurally valid
        version (empty, leading non-digit, empty segments, stray characters).
        """
        value = text.strip()
        if not _VALID_VERSION.fullmatch(value):
            raise ValueError(f"{text!r} is not a valid version identifier")
        return cls(raw=value, tokens=_tokenize(value))

    def compare(self, other: "CoreVersion") -> int:
        return _compare_lists(self.tokens, other.tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoreVersion):
            return NotImplemented
        return self.tokens == other.tokens

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CoreVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self.tokens)

    def __str__(self) -> str:
        return self.raw
