"""Owner canonicalizer and deduplicator.

Two owners are the same owner when their canonical keys are equal:

  company|<name>
  person|<first>|<middle>|<last>

Every part is trimmed, whitespace-collapsed and lower-cased, so keys are
insensitive to letter case and stray spacing.  An owner whose parts are all
blank has the degenerate key ``""`` and is dropped by ``dedupe()`` rather
than kept as a zero-identity entry.
"""
from __future__ import annotations

from collections.abc import Iterable

from ownership.normalization.text import collapse_whitespace
from ownership.owners.models import Company, Owner, Person


def _part(value: str | None) -> str:
    return collapse_whitespace(value or "").lower()


def canonical_key(owner: Owner) -> str:
    """Return the identity key of *owner*; ``""`` when it has no identity."""
    if isinstance(owner, Company):
        name = _part(owner.name)
        return f"company|{name}" if name else ""
    if isinstance(owner, Person):
        first = _part(owner.first_name)
        last = _part(owner.last_name)
        if not first and not last:
            return ""
        return f"person|{first}|{_part(owner.middle_name)}|{last}"
    raise TypeError(f"Unsupported owner type: {type(owner).__name__}")


def dedupe(owners: Iterable[Owner]) -> list[Owner]:
    """Return *owners* without repeated keys, keeping first-seen order."""
    seen: set[str] = set()
    unique: list[Owner] = []
    for owner in owners:
        key = canonical_key(owner)
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(owner)
    return unique
