"""Tests for ownership/owners/splitter.py."""
from __future__ import annotations

import pytest

from ownership.owners.models import Person
from ownership.owners.splitter import SurnameHint, has_separator, hint_from, split_joint_owners


class TestSplitJointOwners:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("SMITH JOHN & JANE", ["SMITH JOHN", "JANE"]),
            ("SMITH JOHN&JANE", ["SMITH JOHN", "JANE"]),
            ("DOE JOHN AND MARY SMITH", ["DOE JOHN", "MARY SMITH"]),
            ("doe john and mary", ["doe john", "mary"]),
            ("A & B & C", ["A", "B", "C"]),
        ],
    )
    def test_splits(self, raw, expected):
        assert split_joint_owners(raw) == expected

    def test_no_separator(self):
        assert split_joint_owners(" SMITH JOHN ") == ["SMITH JOHN"]

    def test_and_inside_word_not_split(self):
        assert split_joint_owners("ANDERSON SANDRA") == ["ANDERSON SANDRA"]

    @pytest.mark.parametrize("raw", ["", "   ", "&", " & & ", " AND "])
    def test_separators_only(self, raw):
        assert split_joint_owners(raw) == []

    def test_empty_parts_dropped(self):
        assert split_joint_owners("SMITH JOHN & & JANE") == ["SMITH JOHN", "JANE"]


class TestHasSeparator:
    def test_true(self):
        assert has_separator("A & B") is True

    def test_false(self):
        assert has_separator("SANDY BRANDT") is False
        assert has_separator("") is False


class TestHintFrom:
    def test_last_name(self):
        assert hint_from(Person(first_name="John", last_name="Smith")) == SurnameHint("Smith")

    def test_suffix_not_inherited(self):
        assert hint_from(Person(first_name="John", last_name="Smith Jr")) == SurnameHint("Smith")

    def test_none(self):
        assert hint_from(None) is None
