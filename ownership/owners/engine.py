"""Ownership engine.

Runs one source record's owner candidates through the full pipeline:

  normalize -> reject placeholders -> classify whole string
            -> split joint owners -> classify / parse each segment
            -> bucket by date -> aggregate

Every segment ends up either as exactly one owner in a date bucket or as
exactly one ``InvalidOwnerRecord``.  A segment whose owner duplicates one
already in the same bucket still counts as contributing.

Reason codes
------------
empty                          nothing left after normalization
cannot_classify                no letters, a placeholder such as UNKNOWN,
                               or a mailing-address line
ambiguous_name_with_ampersand  a joint-owner segment that does not resolve
                               even with the surname hint, or a string that
                               is only separators
insufficient_tokens            a single-owner segment with fewer than two
                               usable tokens
unparseable_person             enough tokens, but no strategy produced a
                               first and last name

Candidates whose date tag cannot be parsed are still resolved.  Their owners
go to an ``unknown_date_<n>`` bucket, one per distinct date string, and
they are counted in ``OwnershipResult.unknown_dates``.

Surname hints flow both ways in a joint string: forward from a first
segment that parses as a person (``SMITH JOHN & JANE``), or back from the
last segment when the first is a lone given name (``JOHN & JANE DOE``).

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from ownership.core.constants import CURRENT_KEY, unknown_date_key
from ownership.core.settings import Settings, get_settings
from ownership.lexicon.lexicon import DEFAULT_LEXICON, Lexicon
from ownership.normalization.address import looks_like_address
from ownership.normalization.dates import parse_transaction_date
from ownership.normalization.text import has_letters, normalize, title_case
from ownership.owners.classifier import EntityClassifier
from ownership.owners.history import DatedOwners, aggregate
from ownership.owners.invalid import InvalidCollector
from ownership.owners.models import (
    Company,
    Owner,
    OwnerCandidate,
    OwnerKind,
    OwnershipResult,
    Person,
    ReasonCode,
    SourceRecord,
)
from ownership.owners.name_parser import NATURAL_STRATEGIES, PersonNameParser
from ownership.owners.splitter import SurnameHint, hint_from, split_joint_owners

logger = logging.getLogger(__name__)


class OwnershipEngine:
    """Classify, parse, deduplicate and aggregate one record's owners."""

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        settings: Settings | None = None,
    ) -> None:
        lexicon = lexicon or DEFAULT_LEXICON
        settings = settings or get_settings()
        self.lexicon = lexicon
        self.classifier = EntityClassifier(lexicon)
        self.parser = PersonNameParser(
            lexicon, uppercase_ratio=settings.uppercase_ratio_threshold
        )
        self.propagate_hint = settings.propagate_surname_hint
        self._placeholders = frozenset(p.upper() for p in lexicon.placeholder_names)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def process(self, candidates: Iterable[OwnerCandidate | str]) -> OwnershipResult:
        """Return the ``OwnershipResult`` for *candidates* of one record.

        Plain strings are treated as undated (current) candidates.

        Raises
        ------
        TypeError
            If a candidate's text is not a string.
        """
        invalid = InvalidCollector()
        current: list[Owner] = []
        dated: dict[str, list[Owner]] = {}
        unknown: dict[str, str] = {}
        unknown_count = 0

        for candidate in candidates:
            if isinstance(candidate, str):
                candidate = OwnerCandidate(text=candidate)
            if not isinstance(candidate.text, str):
                raise TypeError(
                    f"candidate text must be str, got {type(candidate.text).__name__}"
                )

            if candidate.date is None or not candidate.date.strip():
                bucket = current
            else:
                iso = parse_transaction_date(candidate.date)
                if iso is None:
                    raw_date = candidate.date.strip()
                    if raw_date not in unknown:
                        unknown[raw_date] = unknown_date_key(len(unknown) + 1)
                    unknown_count += 1
                    iso = unknown[raw_date]
                bucket = dated.setdefault(iso, [])

            bucket.extend(self.resolve(candidate.text, invalid))

        if unknown_count:
            logger.warning(
                "%d candidate(s) with an unparseable date kept under %d unknown_date bucket(s)",
                unknown_count,
                len(unknown),
            )

        history = aggregate(
            [DatedOwners(date=d, owners=owners) for d, owners in dated.items()],
            current=current,
        )
        counts = invalid.counts()
        logger.info(
            "Processed record: %d dated bucket(s), %d current owner(s), %d invalid %s",
            len(history) - 1,
            len(history[CURRENT_KEY]),
            len(invalid),
            dict(counts) if counts else "",
        )
        return OwnershipResult(
            owners_by_date=history,
            invalid_owners=invalid.records,
            unknown_dates=unknown_count,
        )

    def process_record(self, record: SourceRecord) -> OwnershipResult:
        """Return the ``OwnershipResult`` for one reader-produced record."""
        logger.info(
            "Processing record %s (%d candidate(s))", record.record_id, len(record.candidates)
        )
        return self.process(record.candidates)

    def resolve(self, raw: str, invalid: InvalidCollector) -> list[Owner]:
        """Return the owners named in *raw*; failing segments go to *invalid*."""
        text = normalize(raw, self.lexicon)
        if not text:
            invalid.add(raw, ReasonCode.EMPTY)
            return []

        if not has_letters(text) or text.upper() in self._placeholders:
            invalid.add(text, ReasonCode.CANNOT_CLASSIFY)
            return []

        if self.classifier.classify(text) is OwnerKind.COMPANY:
            return [Company(name=title_case(text))]

        if looks_like_address(text):
            invalid.add(text, ReasonCode.CANNOT_CLASSIFY)
            return []

        segments = split_joint_owners(text)
        if not segments:
            invalid.add(text, ReasonCode.AMBIGUOUS_NAME_WITH_AMPERSAND)
            return []

        joint = len(segments) > 1
        owners: list[Owner] = []
        hint: SurnameHint | None = None
        trailing: Person | None = None
        if joint and self.propagate_hint:
            trailing = self._trailing_person(segments)
            hint = hint_from(trailing, self.lexicon)

        last = len(segments) - 1
        for index, segment in enumerate(segments):
            if trailing is not None and index == last:
                owners.append(trailing)
                continue
            segment_hint = hint if index > 0 or trailing is not None else None
            owner = self._resolve_segment(segment, segment_hint, joint, invalid)
            if owner is None:
                continue
            owners.append(owner)
            forward = index == 0 and joint and self.propagate_hint and trailing is None
            if forward and isinstance(owner, Person):
                hint = hint_from(owner, self.lexicon)
        return owners

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _trailing_person(self, segments: list[str]) -> Person | None:
        """Return the last segment as a person when it carries the shared surname.

        Only applies when the first segment is a lone given name, as in
        ``JOHN & JANE DOE``.  The last segment is then read in natural order.
        """
        first, last = segments[0], segments[-1]
        if len(self.parser.usable_tokens(first)) != 1 or self.classifier.is_company(first):
            return None
        if not has_letters(last) or last.upper() in self._placeholders:
            return None
        if self.classifier.is_company(last):
            return None
        return self.parser.parse(last, strategies=NATURAL_STRATEGIES)

    def _resolve_segment(
        self,
        segment: str,
        hint: SurnameHint | None,
        joint: bool,
        invalid: InvalidCollector,
    ) -> Owner | None:
        if not has_letters(segment) or segment.upper() in self._placeholders:
            invalid.add(segment, ReasonCode.CANNOT_CLASSIFY)
            return None

        if self.classifier.classify(segment) is OwnerKind.COMPANY:
            return Company(name=title_case(segment))

        person = self.parser.parse(segment, hint=hint)
        if person is not None:
            return person

        if joint:
            reason = ReasonCode.AMBIGUOUS_NAME_WITH_AMPERSAND
        elif len(self.parser.usable_tokens(segment)) < 2:
            reason = ReasonCode.INSUFFICIENT_TOKENS
        else:
            reason = ReasonCode.UNPARSEABLE_PERSON
        invalid.add(segment, reason)
        return None
