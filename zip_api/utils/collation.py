"""Hungarian alphabetical ordering for the first-letter city index.

Ordering is done here rather than by the database: column collations differ
between backends (and between MySQL installs), so the store is only trusted
to hand back rows, never to order or compare letters.
"""
from __future__ import annotations

import unicodedata
from typing import Callable, Iterable

HUNGARIAN_ALPHABET: tuple[str, ...] = (
    "A", "Á", "B", "C", "D", "E", "É", "F", "G", "H", "I", "Í", "J", "K", "L",
    "M", "N", "O", "Ó", "Ö", "Ő", "P", "Q", "R", "S", "T", "U", "Ú", "Ü", "Ű",
    "V", "W", "X", "Y", "Z",
)

_RANK: dict[str, int] = {letter: i for i, letter in enumerate(HUNGARIAN_ALPHABET)}

# letters whose str.upper() expands to more than one character
_SINGLE_UPPER: dict[str, str] = {"ß": "ẞ"}

SortKey = Callable[[str], tuple]


def hungarian_key(letter: str) -> tuple:
    """Sort key for a single uppercase letter.

    Letters outside the table go after ``Z``, ordered among themselves by code
    point so the result does not depend on input order.
    """
    rank = _RANK.get(letter)
    if rank is None:
        return (len(HUNGARIAN_ALPHABET), letter)
    return (rank, "")


def _nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def first_letter(name: str) -> str | None:
    """First character of ``name``, uppercased; None for an empty name.

    Always a single character: "ß" becomes capital sharp s (U+1E9E), not "SS".
    """
    name = _nfc(name or "")
    if not name:
        return None
    ch = name[0]
    upper = ch.upper()
    if len(upper) == 1:
        return upper
    return _SINGLE_UPPER.get(ch, ch)


def build_letter_index(names: Iterable[str], key: SortKey = hungarian_key) -> list[str]:
    letters = {letter for letter in (first_letter(n) for n in names) if letter is not None}
    return sorted(letters, key=key)


def normalize_letter(letter: str) -> str:
    return _nfc(letter or "")


def matches_letter(name: str, letter: str) -> bool:
    """True when the first character of ``name`` equals ``letter`` ignoring case.

    Accents are significant: "a" matches "Abony" but not "Ábrahámhegy".
    """
    name = _nfc(name or "")
    letter = normalize_letter(letter)
    if not name or not letter:
        return False
    return name[0].casefold() == letter.casefold()
