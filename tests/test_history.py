"""Tests for ownership/owners/history.py and ownership/owners/invalid.py."""
from __future__ import annotations

import pytest

from ownership.owners.history import DatedOwners, aggregate
from ownership.owners.invalid import InvalidCollector
from ownership.owners.models import Company, Person, ReasonCode

A = Person(first_name="John", last_name="Smith")
B = Person(first_name="Jane", last_name="Smith")
C = Company(name="Acme Llc")


class TestAggregate:
    def test_current_always_present(self):
        assert aggregate([]) == {"current": []}

    def test_same_date_entries_unioned(self):
        history = aggregate(
            [
                DatedOwners(date="2020-05-01", owners=[A, B]),
                DatedOwners(date="2020-05-01", owners=[Person(first_name="JANE", last_name="SMITH"), C]),
            ]
        )
        assert history["2020-05-01"] == [A, B, C]

    def test_dates_ordered_and_current_last(self):
        history = aggregate(
            [
                DatedOwners(date="2021-01-15", owners=[C]),
                DatedOwners(date="2019-03-02", owners=[A]),
            ],
            current=[B],
        )
        assert list(history) == ["2019-03-02", "2021-01-15", "current"]
        assert history["current"] == [B]

    def test_unknown_dates_after_dated_in_first_seen_order(self):
        history = aggregate(
            [
                DatedOwners(date="unknown_date_2", owners=[C]),
                DatedOwners(date="2021-01-15", owners=[A]),
                DatedOwners(date="unknown_date_1", owners=[B]),
                DatedOwners(date="unknown_date_2", owners=[C, A]),
            ],
            current=[A],
        )
        assert list(history) == ["2021-01-15", "unknown_date_2", "unknown_date_1", "current"]
        assert history["unknown_date_2"] == [C, A]

    def test_current_independent_of_history(self):
        history = aggregate([DatedOwners(date="2019-03-02", owners=[A])])
        assert history["current"] == []

    def test_current_deduplicated(self):
        assert aggregate([], current=[A, A, C])["current"] == [A, C]

    def test_current_key_reserved(self):
        with pytest.raises(ValueError):
            aggregate([DatedOwners(date="current", owners=[A])])


class TestInvalidCollector:
    def test_append_only_in_order(self):
        invalid = InvalidCollector()
        invalid.add("&", ReasonCode.EMPTY)
        invalid.add("JOHN", ReasonCode.INSUFFICIENT_TOKENS)
        assert [rec.to_dict() for rec in invalid] == [
            {"raw": "&", "reason": "empty"},
            {"raw": "JOHN", "reason": "insufficient_tokens"},
        ]
        assert len(invalid) == 2

    def test_accepts_reason_value(self):
        invalid = InvalidCollector()
        rec = invalid.add("X", "cannot_classify")  # type: ignore[arg-type]
        assert rec.reason is ReasonCode.CANNOT_CLASSIFY

    def test_counts(self):
        invalid = InvalidCollector()
        invalid.add("A", ReasonCode.EMPTY)
        invalid.add("B", ReasonCode.EMPTY)
        assert invalid.counts()["empty"] == 2

    def test_records_is_a_copy(self):
        invalid = InvalidCollector()
        invalid.add("A", ReasonCode.EMPTY)
        invalid.records.clear()
        assert len(invalid) == 1
