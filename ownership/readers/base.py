"""Base class shared by all owner-document readers.

Every reader in ownership/readers/ returns one ``SourceRecord``: the record
identifier plus the raw owner candidates in document order, each optionally
tagged with the sale date it belongs to.  Readers only locate strings; all
cleaning, classification and parsing happens in ``ownership.owners``.

Field contract
--------------
record_id   : source identifier (folio, parcel, alternate key);
              ``"unknown_id"`` when the document has none
candidates  : ``OwnerCandidate(text, date)``; ``date`` is ``None`` for
              current owners and the raw sale-date string otherwise
source_path : path of the originating file
"""
from __future__ import annotations

from pathlib import Path

from ownership.owners.models import OwnerCandidate, SourceRecord  # noqa: F401 — re-exported


class BaseReader:
    """Base class for all owner-document readers.

    Subclasses must override read() to return a ``SourceRecord``.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> SourceRecord:
        """Return the ``SourceRecord`` found in the document."""
        raise NotImplementedError(
            f"{type(self).__name__}.read() is not yet implemented"
        )
