"""Transaction date normalizer.

Sale dates arrive as ``M/D/YYYY`` or ``MM/DD/YYYY`` (county sale tables)
and occasionally already in ISO form.  Both are returned as ISO
``YYYY-MM-DD``; anything else, including impossible calendar dates such
as ``2/30/2020``, yields ``None``.
"""
from __future__ import annotations

import re
from datetime import date

_MDY_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def parse_transaction_date(raw: str | None) -> str | None:
    """Return *raw* as an ISO ``YYYY-MM-DD`` string, or ``None``."""
    if not raw or not raw.strip():
        return None

    text = raw.strip()
    m = _MDY_RE.match(text)
    if m:
        month, day, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
    else:
        m = _ISO_RE.match(text)
        if not m:
            return None
        year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))

    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None
