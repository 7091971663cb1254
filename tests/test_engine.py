"""Tests for ownership/owners/engine.py — the end-to-end owner pipeline.

Covers:
- Worked scenarios: comma form, company, joint owners with shared surname,
  bare separator, same-date union, generational suffix
- Every reason code
- Each segment yields exactly one owner or one invalid record
- Date handling: ISO keys, unparseable dates kept under unknown_date keys
- Settings and jurisdiction lexicons change behaviour
- Raw names never reach the log
"""
from __future__ import annotations

import logging

import pytest

from ownership.core.settings import get_settings
from ownership.lexicon.registry import LexiconRegistry
from ownership.owners.engine import OwnershipEngine
from ownership.owners.invalid import InvalidCollector
from ownership.owners.models import (
    Company,
    OwnerCandidate,
    Person,
    SourceRecord,
)
from ownership.owners.name_parser import PersonNameParser, comma_form


@pytest.fixture
def engine() -> OwnershipEngine:
    return OwnershipEngine()


def _reasons(result) -> list[str]:
    return [rec.reason.value for rec in result.invalid_owners]


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_comma_form(self, engine):
        result = engine.process(["SMITH, JOHN MICHAEL"])
        assert result.current == [Person(first_name="John", middle_name="Michael", last_name="Smith")]
        assert result.invalid_owners == []

    def test_company(self, engine):
        result = engine.process(["ACME PROPERTIES LLC"])
        assert result.current == [Company(name="Acme Properties Llc")]

    def test_joint_owners_share_surname(self, engine):
        result = engine.process(["SMITH JOHN & JANE"])
        assert result.current == [
            Person(first_name="John", last_name="Smith"),
            Person(first_name="Jane", last_name="Smith"),
        ]

    def test_bare_ampersand(self, engine):
        result = engine.process(["&"])
        assert result.all_owners() == []
        assert [r.to_dict() for r in result.invalid_owners] == [{"raw": "&", "reason": "empty"}]

    def test_same_date_union(self, engine):
        result = engine.process(
            [
                OwnerCandidate(text="SMITH JOHN & JANE", date="5/1/2020"),
                OwnerCandidate(text="SMITH, JANE", date="05/01/2020"),
                OwnerCandidate(text="ACME LLC", date="2020-05-01"),
            ]
        )
        assert result.owners_by_date["2020-05-01"] == [
            Person(first_name="John", last_name="Smith"),
            Person(first_name="Jane", last_name="Smith"),
            Company(name="Acme Llc"),
        ]

    def test_generational_suffix(self, engine):
        result = engine.process(["DOE JOHN JR"])
        assert result.current == [Person(first_name="John", last_name="Doe Jr")]

    def test_spouse_does_not_inherit_suffix(self, engine):
        result = engine.process(["DOE JOHN JR & MARY"])
        assert result.current[1] == Person(first_name="Mary", last_name="Doe")

    def test_trailing_surname_shared_backwards(self, engine):
        result = engine.process(["JOHN & JANE DOE"])
        assert result.current == [
            Person(first_name="John", last_name="Doe"),
            Person(first_name="Jane", last_name="Doe"),
        ]
        assert result.invalid_owners == []

    def test_trailing_surname_drops_suffix_for_spouse(self, engine):
        result = engine.process(["MARY & JOHN A DOE JR"])
        assert result.current == [
            Person(first_name="Mary", last_name="Doe"),
            Person(first_name="John", middle_name="A", last_name="Doe Jr"),
        ]


# ---------------------------------------------------------------------------
# Classification before splitting
# ---------------------------------------------------------------------------


class TestCompanyStrings:
    def test_company_with_ampersand_not_split(self, engine):
        result = engine.process(["JOHNSON & JOHNSON INC"])
        assert result.current == [Company(name="Johnson & Johnson Inc")]

    def test_jurisdiction_keyword_removal(self):
        volusia = LexiconRegistry.default().get("volusia")
        assert OwnershipEngine().process(["SMITH PA"]).current == [Company(name="Smith Pa")]
        assert OwnershipEngine(lexicon=volusia).process(["SMITH PA"]).current == [
            Person(first_name="Pa", last_name="Smith")
        ]

    def test_descriptor_removed_before_classification(self, engine):
        result = engine.process(["SMITH JOHN TRUSTEE"])
        assert result.current == [Person(first_name="John", last_name="Smith")]


# ---------------------------------------------------------------------------
# Reason codes
# ---------------------------------------------------------------------------


class TestReasonCodes:
    def test_empty(self, engine):
        assert _reasons(engine.process(["", "  ", "ET AL"])) == ["empty", "empty", "empty"]

    def test_empty_keeps_original_raw(self, engine):
        result = engine.process(["  ET AL "])
        assert result.invalid_owners[0].raw == "  ET AL "

    @pytest.mark.parametrize("raw", ["UNKNOWN", "unknown seller", "12345", "123 MAIN ST", "PO BOX 44"])
    def test_cannot_classify(self, engine, raw):
        assert _reasons(engine.process([raw])) == ["cannot_classify"]

    def test_insufficient_tokens(self, engine):
        assert _reasons(engine.process(["JOHN"])) == ["insufficient_tokens"]

    def test_ambiguous_joint_segments(self, engine):
        result = engine.process(["JOHN & JANE"])
        assert result.all_owners() == []
        assert _reasons(result) == [
            "ambiguous_name_with_ampersand",
            "ambiguous_name_with_ampersand",
        ]

    def test_digit_segment_in_joint_string(self, engine):
        result = engine.process(["SMITH JOHN & 123"])
        assert result.current == [Person(first_name="John", last_name="Smith")]
        assert _reasons(result) == ["cannot_classify"]

    def test_unparseable_person(self, engine):
        engine.parser = PersonNameParser(strategies=(comma_form,))
        assert _reasons(engine.process(["SMITH JOHN"])) == ["unparseable_person"]

    def test_placeholder_from_jurisdiction(self):
        lex = LexiconRegistry.default().get("miami_dade")
        result = OwnershipEngine(lexicon=lex).process(["REFERENCE ONLY"])
        assert _reasons(result) == ["cannot_classify"]


# ---------------------------------------------------------------------------
# Partition
# ---------------------------------------------------------------------------


class TestPartition:
    @pytest.mark.parametrize(
        "raw, owners, invalid",
        [
            ("SMITH JOHN & JANE", 2, 0),
            ("SMITH JOHN & 123", 1, 1),
            ("JOHN & JANE", 0, 2),
            ("JOHN & JANE DOE", 2, 0),
            ("DOE JOHN AND MARY SMITH", 2, 0),
            ("ACME LLC", 1, 0),
            ("&", 0, 1),
        ],
    )
    def test_every_segment_accounted_for(self, engine, raw, owners, invalid):
        collector = InvalidCollector()
        resolved = engine.resolve(raw, collector)
        assert (len(resolved), len(collector)) == (owners, invalid)

    def test_duplicate_in_bucket_is_not_invalid(self, engine):
        result = engine.process(["SMITH JOHN", "smith,  john"])
        assert result.current == [Person(first_name="John", last_name="Smith")]
        assert result.invalid_owners == []


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


class TestDates:
    def test_current_always_present(self, engine):
        assert engine.process([]).to_dict() == {
            "owners_by_date": {"current": []},
            "invalid_owners": [],
        }

    def test_history_ordered_with_current_last(self, engine):
        result = engine.process(
            [
                OwnerCandidate(text="ACME LLC"),
                OwnerCandidate(text="DOE JANE", date="3/15/2021"),
                OwnerCandidate(text="ROE RICHARD", date="7/4/2012"),
            ]
        )
        assert list(result.owners_by_date) == ["2012-07-04", "2021-03-15", "current"]
        assert result.current == [Company(name="Acme Llc")]

    def test_blank_date_is_current(self, engine):
        result = engine.process([OwnerCandidate(text="ACME LLC", date="  ")])
        assert result.current == [Company(name="Acme Llc")]

    def test_unparseable_dates_kept_in_unknown_buckets(self, engine, caplog):
        with caplog.at_level(logging.WARNING, logger="ownership.owners.engine"):
            result = engine.process(
                [
                    OwnerCandidate(text="DOE JANE", date="13/45/2020"),
                    OwnerCandidate(text="ACME LLC", date="sometime"),
                ]
            )
        assert list(result.owners_by_date) == ["unknown_date_1", "unknown_date_2", "current"]
        assert result.owners_by_date["unknown_date_1"] == [Person(first_name="Jane", last_name="Doe")]
        assert result.owners_by_date["unknown_date_2"] == [Company(name="Acme Llc")]
        assert result.unknown_dates == 2
        assert result.invalid_owners == []
        assert "unparseable date" in caplog.text

    def test_unknown_buckets_follow_dated_and_share_date_text(self, engine):
        result = engine.process(
            [
                OwnerCandidate(text="ACME LLC", date="sometime"),
                OwnerCandidate(text="ROE RICHARD", date="7/4/2012"),
                OwnerCandidate(text="DOE JANE", date=" sometime "),
                OwnerCandidate(text="&", date="never"),
            ]
        )
        assert list(result.owners_by_date) == [
            "2012-07-04",
            "unknown_date_1",
            "unknown_date_2",
            "current",
        ]
        assert result.owners_by_date["unknown_date_1"] == [
            Company(name="Acme Llc"),
            Person(first_name="Jane", last_name="Doe"),
        ]
        assert result.owners_by_date["unknown_date_2"] == []
        assert _reasons(result) == ["empty"]
        assert result.unknown_dates == 3


# ---------------------------------------------------------------------------
# Contract and configuration
# ---------------------------------------------------------------------------


class TestContract:
    def test_non_string_text_raises(self, engine):
        with pytest.raises(TypeError):
            engine.process([OwnerCandidate(text=None)])  # type: ignore[arg-type]

    def test_process_record(self, engine):
        record = SourceRecord(record_id="42", candidates=[OwnerCandidate(text="ACME LLC")])
        assert engine.process_record(record).current == [Company(name="Acme Llc")]

    def test_surname_hint_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("PROPAGATE_SURNAME_HINT", "false")
        get_settings.cache_clear()
        result = OwnershipEngine().process(["SMITH JOHN & JANE"])
        assert len(result.current) == 1
        assert _reasons(result) == ["ambiguous_name_with_ampersand"]

    def test_trailing_surname_hint_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("PROPAGATE_SURNAME_HINT", "false")
        get_settings.cache_clear()
        result = OwnershipEngine().process(["JOHN & JANE DOE"])
        assert len(result.current) == 1
        assert _reasons(result) == ["ambiguous_name_with_ampersand"]

    def test_raw_names_not_logged(self, engine, caplog):
        with caplog.at_level(logging.DEBUG, logger="ownership"):
            engine.process(["ZEBULON QUARTERMAINE & XANTHIPPE", "ZEBULON"])
        assert "ZEBULON" not in caplog.text
        assert "XANTHIPPE" not in caplog.text
