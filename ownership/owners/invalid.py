"""Invalid-owner collector.

Append-only sink for segments that produced no owner.  Each failing segment
is recorded exactly once with a ``ReasonCode``; nothing is ever removed.
"""
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator

from ownership.owners.models import InvalidOwnerRecord, ReasonCode

logger = logging.getLogger(__name__)


class InvalidCollector:
    """Collect ``InvalidOwnerRecord`` objects during one record's pass."""

    def __init__(self) -> None:
        self._records: list[InvalidOwnerRecord] = []

    def add(self, raw: str, reason: ReasonCode) -> InvalidOwnerRecord:
        record = InvalidOwnerRecord(raw=raw, reason=ReasonCode(reason))
        self._records.append(record)
        logger.debug("Invalid owner segment recorded (reason=%s)", record.reason.value)
        return record

    @property
    def records(self) -> list[InvalidOwnerRecord]:
        return list(self._records)

    def counts(self) -> Counter:
        """Return the number of records per reason code value."""
        return Counter(rec.reason.value for rec in self._records)

    def __iter__(self) -> Iterator[InvalidOwnerRecord]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
