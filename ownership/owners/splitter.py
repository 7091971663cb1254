"""Joint-owner splitter.

Assessor rolls list co-owners in one string joined by ``&`` or ``AND``::

    SMITH JOHN & JANE        ->  ["SMITH JOHN", "JANE"]
    DOE JOHN AND MARY SMITH  ->  ["DOE JOHN", "MARY SMITH"]

The splitter only cuts; it does not decide whether the string is a
company.  Callers must skip splitting for company strings
("JOHNSON & JOHNSON INC").

Surname hint
------------
In ``SMITH JOHN & JANE`` the second segment carries only a given name and
shares the first segment's surname.  ``hint_from()`` builds that hint from
the first segment's parsed ``Person``, or from the last one in
``JOHN & JANE DOE``.  The name parser uses it only for a segment that does
not resolve to two tokens on its own.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from ownership.lexicon.lexicon import DEFAULT_LEXICON, Lexicon
from ownership.owners.models import Person

_SEPARATOR_RE = re.compile(r"\s*&\s*|\s+and\s+|^and\s+|\s+and$", re.IGNORECASE)


@dataclass(frozen=True)
class SurnameHint:
    """Surname offered to sibling segments of a joint-owner string."""

    last_name: str


def has_separator(name: str) -> bool:
    """Return True if *name* contains a joint-owner separator."""
    return bool(name) and _SEPARATOR_RE.search(name) is not None


def split_joint_owners(name: str) -> list[str]:
    """Split *name* on ``&`` / ``and`` into trimmed, non-empty segments.

    Returns ``[name]`` when no separator is present and ``[]`` when the
    string holds nothing but separators.
    """
    if not name or not name.strip():
        return []
    if not has_separator(name):
        return [name.strip()]
    return [part.strip() for part in _SEPARATOR_RE.split(name) if part and part.strip()]


def hint_from(person: Person | None, lexicon: Lexicon = DEFAULT_LEXICON) -> SurnameHint | None:
    """Return the surname hint carried by *person*, without generational suffixes.

    ``Smith Jr`` yields ``Smith``: a spouse listed after ``SMITH JOHN JR``
    is not a junior.
    """
    if person is None:
        return None
    tokens = person.last_name.split()
    while len(tokens) > 1 and tokens[-1].rstrip(".").upper() in lexicon.generational_suffixes:
        tokens.pop()
    if not tokens:
        return None
    return SurnameHint(last_name=" ".join(tokens))
