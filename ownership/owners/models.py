"""Owner data model.

``Owner`` is a tagged union of two frozen dataclasses, ``Person`` and
``Company``.  Every consumer dispatches on the concrete type and raises
``TypeError`` for anything else, so adding a third shape fails loudly
instead of being silently mis-serialised.

Invariants (checked at construction)
------------------------------------
* ``Person.first_name`` and ``Person.last_name`` are non-blank.
* ``Company.name`` is non-blank.
* ``Person.middle_name`` is ``None`` rather than ``""`` when absent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union

from ownership.core.constants import CURRENT_KEY, UNKNOWN_RECORD_ID


class OwnerKind(str, Enum):
    COMPANY = "company"
    PERSON = "person"


class ReasonCode(str, Enum):
    """Why a segment produced no owner.  Closed set; serialised by value."""

    EMPTY = "empty"
    CANNOT_CLASSIFY = "cannot_classify"
    UNPARSEABLE_PERSON = "unparseable_person"
    AMBIGUOUS_NAME_WITH_AMPERSAND = "ambiguous_name_with_ampersand"
    INSUFFICIENT_TOKENS = "insufficient_tokens"


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str
    middle_name: str | None = None
    type: Literal["person"] = field(default="person", init=False)

    def __post_init__(self) -> None:
        if not self.first_name or not self.first_name.strip():
            raise ValueError("Person.first_name must be non-empty")
        if not self.last_name or not self.last_name.strip():
            raise ValueError("Person.last_name must be non-empty")
        if self.middle_name is not None and not self.middle_name.strip():
            object.__setattr__(self, "middle_name", None)


@dataclass(frozen=True)
class Company:
    name: str
    type: Literal["company"] = field(default="company", init=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Company.name must be non-empty")


Owner = Union[Person, Company]


def owner_to_dict(owner: Owner) -> dict:
    """Serialise *owner* with its ``type`` tag."""
    if isinstance(owner, Person):
        return {
            "type": "person",
            "first_name": owner.first_name,
            "last_name": owner.last_name,
            "middle_name": owner.middle_name,
        }
    if isinstance(owner, Company):
        return {"type": "company", "name": owner.name}
    raise TypeError(f"Unsupported owner type: {type(owner).__name__}")


@dataclass(frozen=True)
class InvalidOwnerRecord:
    """A segment that produced no owner, kept for diagnosis."""

    raw: str
    reason: ReasonCode

    def to_dict(self) -> dict[str, str]:
        return {"raw": self.raw, "reason": self.reason.value}


@dataclass(frozen=True)
class OwnerCandidate:
    """One raw owner string from a reader, optionally tagged with a sale date."""

    text: str
    date: str | None = None


@dataclass
class SourceRecord:
    """Everything a reader found for one property record."""

    record_id: str = UNKNOWN_RECORD_ID
    candidates: list[OwnerCandidate] = field(default_factory=list)
    source_path: str = ""


# ISO date, unknown_date_<n> key or CURRENT_KEY -> owners in discovery order.
OwnerHistory = dict[str, list[Owner]]


@dataclass
class OwnershipResult:
    """Per-record output of the ownership engine."""

    owners_by_date: OwnerHistory = field(default_factory=lambda: {CURRENT_KEY: []})
    invalid_owners: list[InvalidOwnerRecord] = field(default_factory=list)
    # Candidates kept under unknown_date buckets because their date tag could not be parsed.
    unknown_dates: int = 0

    @property
    def current(self) -> list[Owner]:
        return self.owners_by_date.get(CURRENT_KEY, [])

    def all_owners(self) -> list[Owner]:
        """Return every owner across all buckets, dated buckets first."""
        return [owner for owners in self.owners_by_date.values() for owner in owners]

    def to_dict(self) -> dict:
        return {
            "owners_by_date": {
                key: [owner_to_dict(o) for o in owners]
                for key, owners in self.owners_by_date.items()
            },
            "invalid_owners": [rec.to_dict() for rec in self.invalid_owners],
        }
