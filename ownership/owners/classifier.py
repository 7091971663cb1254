"""Entity classifier.

Decides whether a normalized owner segment names a company or a person.
A segment is a company when any keyword of the active lexicon occurs in it
as a bounded token: the characters on either side of the keyword must not
be letters or digits.  That keeps ``CO`` from firing on ``COOPER`` and
``BANK`` from firing on ``BANKS`` while still matching ``L.L.C.`` and
``N.A.``.

Classification is total: every segment is either a company or a person.
A person that cannot be parsed is a downstream failure, not an unknown
classification.
"""
from __future__ import annotations

import logging

from ownership.lexicon.lexicon import DEFAULT_LEXICON, Lexicon
from ownership.normalization.text import keyword_pattern
from ownership.owners.models import OwnerKind

logger = logging.getLogger(__name__)


class EntityClassifier:
    """Keyword-membership classifier bound to one lexicon."""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self.lexicon = lexicon
        self._pattern = keyword_pattern(lexicon.company_keywords)

    def matched_keyword(self, segment: str) -> str | None:
        """Return the first company keyword found in *segment*, upper-cased."""
        if not segment:
            return None
        m = self._pattern.search(segment)
        if m is None:
            return None
        return " ".join(m.group(0).upper().split())

    def is_company(self, segment: str) -> bool:
        return self.matched_keyword(segment) is not None

    def classify(self, segment: str) -> OwnerKind:
        """Return ``OwnerKind.COMPANY`` or ``OwnerKind.PERSON`` for *segment*."""
        keyword = self.matched_keyword(segment)
        if keyword is not None:
            logger.debug("Classified segment as company (keyword=%s)", keyword)
            return OwnerKind.COMPANY
        return OwnerKind.PERSON
