"""Address-line detection.

Owner blocks on assessor pages run straight into the mailing address, so
readers and the engine need to recognise a line that is an address rather
than a name.  Detection only; addresses are never parsed here.
"""
from __future__ import annotations

import re

# Digit run followed by whitespace then a word character ("123 Main").
_STREET_NUM_RE = re.compile(r"\b\d+\s+\w")

_STREET_TYPE_RE = re.compile(
    r"\b(?:AVE|AVENUE|ST|STREET|RD|ROAD|LN|LANE|DR|DRIVE|BLVD|BOULEVARD|CT|COURT|"
    r"CIR|CIRCLE|HWY|HIGHWAY|WAY|PL|PLACE|TER|TERRACE|PKWY|PARKWAY|TRL|TRAIL)\b\.?",
    re.IGNORECASE,
)
_PO_BOX_RE = re.compile(r"\bP\.?\s*O\.?\s*BOX\b", re.IGNORECASE)
_ZIP_TAIL_RE = re.compile(r"\b\d{5}(?:-\d{4})?$")
_STATE_ZIP_RE = re.compile(r"\b[A-Z]{2}\s+\d{5}(?:-\d{4})?\b")


def looks_like_address(text: str) -> bool:
    """Return True if *text* reads like a mailing-address line."""
    if not text:
        return False
    if _PO_BOX_RE.search(text):
        return True
    if _STREET_NUM_RE.search(text) and _STREET_TYPE_RE.search(text):
        return True
    if _STATE_ZIP_RE.search(text.upper()) or _ZIP_TAIL_RE.search(text):
        return True
    return False
