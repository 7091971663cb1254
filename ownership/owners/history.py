"""Temporal aggregator.

Builds the ``owners_by_date`` mapping for one record:

* dated entries are ordered by ISO date (string order is date order);
* entries keyed ``unknown_date_<n>`` follow the dated ones in the order
  they were first seen;
* entries that share a key are merged and deduplicated across entries,
  not only within each one;
* ``"current"`` is always present, filled from the current owners
  independently of the dated history, and placed last.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ownership.core.constants import CURRENT_KEY, UNKNOWN_DATE_PREFIX
from ownership.owners.canonical import dedupe
from ownership.owners.models import Owner, OwnerHistory


@dataclass
class DatedOwners:
    """Owners established by one transaction.

    ``date`` is an ISO ``YYYY-MM-DD`` string or an ``unknown_date_<n>`` key.
    """

    date: str
    owners: list[Owner] = field(default_factory=list)


def aggregate(
    entries: Iterable[DatedOwners],
    current: Iterable[Owner] | None = None,
) -> OwnerHistory:
    """Return the date-keyed owner history for *entries* plus ``current``."""
    by_date: dict[str, list[Owner]] = {}
    by_unknown: dict[str, list[Owner]] = {}
    for entry in entries:
        if entry.date == CURRENT_KEY:
            raise ValueError(f"{CURRENT_KEY!r} is reserved; pass current owners separately")
        target = by_unknown if entry.date.startswith(UNKNOWN_DATE_PREFIX) else by_date
        target.setdefault(entry.date, []).extend(entry.owners)

    history: OwnerHistory = {}
    for date_key in sorted(by_date):
        history[date_key] = dedupe(by_date[date_key])
    for key, owners in by_unknown.items():
        history[key] = dedupe(owners)
    history[CURRENT_KEY] = dedupe(current or [])
    return history
