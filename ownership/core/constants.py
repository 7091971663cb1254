"""Shared literals for the ownership output document.

``owners_by_date`` keys are ISO ``YYYY-MM-DD`` strings, then one
``unknown_date_<n>`` key per sale date that could not be parsed, then the
``CURRENT_KEY`` sentinel, which is always present.  The document itself is
keyed by ``RECORD_KEY_PREFIX + record_id``.
"""
from __future__ import annotations

CURRENT_KEY: str = "current"

UNKNOWN_RECORD_ID: str = "unknown_id"

RECORD_KEY_PREFIX: str = "property_"


def record_key(record_id: str | None) -> str:
    """Return the top-level document key for *record_id*.

    Blank or missing ids fall back to ``UNKNOWN_RECORD_ID``.
    """
    rid = (record_id or "").strip() or UNKNOWN_RECORD_ID
    return f"{RECORD_KEY_PREFIX}{rid}"


UNKNOWN_DATE_PREFIX: str = "unknown_date_"


def unknown_date_key(index: int) -> str:
    """Return the bucket key for the *index*-th (1-based) unparseable date."""
    return f"{UNKNOWN_DATE_PREFIX}{index}"
