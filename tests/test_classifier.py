"""Tests for ownership/owners/classifier.py."""
from __future__ import annotations

import pytest

from ownership.lexicon.lexicon import DEFAULT_LEXICON
from ownership.owners.classifier import EntityClassifier
from ownership.owners.models import OwnerKind


@pytest.fixture
def classifier() -> EntityClassifier:
    return EntityClassifier(DEFAULT_LEXICON)


class TestCompanyKeywords:
    @pytest.mark.parametrize(
        "segment",
        [
            "ACME PROPERTIES LLC",
            "ACME L.L.C.",
            "JOHNSON & JOHNSON INC",
            "WELLS FARGO BANK N.A.",
            "FIRST CREDIT UNION",
            "SMITH FAMILY TRUST",
            "acme holdings",
            "CITY OF PALM COAST",
        ],
    )
    def test_company(self, classifier, segment):
        assert classifier.classify(segment) is OwnerKind.COMPANY

    def test_matched_keyword_reported_upper(self, classifier):
        assert classifier.matched_keyword("Acme Llc") == "LLC"

    def test_multi_word_keyword_normalized(self, classifier):
        assert classifier.matched_keyword("FIRST CREDIT   UNION") == "CREDIT UNION"


class TestBoundedMatching:
    @pytest.mark.parametrize(
        "segment",
        ["COOPER JOHN", "BANKS MARY", "INCE ROBERT", "TRUSTY ANNE", "PACE DAVID", "SMITH JOHN"],
    )
    def test_keyword_inside_word_is_person(self, classifier, segment):
        assert classifier.classify(segment) is OwnerKind.PERSON


class TestTotality:
    @pytest.mark.parametrize("segment", ["", "   ", "12345", "!!", "X"])
    def test_always_returns_a_kind(self, classifier, segment):
        assert classifier.classify(segment) in (OwnerKind.COMPANY, OwnerKind.PERSON)

    def test_empty_is_person(self, classifier):
        assert classifier.is_company("") is False


class TestJurisdictionLexicon:
    def test_removed_keyword_no_longer_matches(self):
        lex = DEFAULT_LEXICON.extend("volusia", remove_company_keywords=["PA"])
        assert EntityClassifier(DEFAULT_LEXICON).is_company("SMITH PA") is True
        assert EntityClassifier(lex).is_company("SMITH PA") is False

    def test_added_keyword_matches(self):
        lex = DEFAULT_LEXICON.extend("miami_dade", company_keywords=["FUND"])
        assert EntityClassifier(lex).is_company("OPPORTUNITY FUND") is True
