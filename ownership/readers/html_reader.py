"""HTML reader: owner candidates from assessor detail pages (BeautifulSoup4).

County pages differ in markup but share a few shapes, which this reader
looks for in order:

Record id
    ``input#altkey`` (alternate key), else a label/value table row labelled
    Prop ID, Property ID, Parcel ID, Folio or Account.

Current owners
    The value next to an ``Owner`` / ``Owner(s)`` / ``Owner Name`` label: the
    following cell of a table row, the ``dd`` of a ``dt``, or the element
    after the label's container.  ``<br>`` separates owners; collection stops
    at the first mailing-address line.

Sale history
    Any table whose header has a sale-date column and a grantee / buyer
    column.  Each grantee line becomes a candidate tagged with the row's
    sale date.
"""
from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from ownership.core.constants import UNKNOWN_RECORD_ID
from ownership.normalization.address import looks_like_address
from ownership.normalization.text import collapse_whitespace
from ownership.readers.base import BaseReader, OwnerCandidate, SourceRecord

logger = logging.getLogger(__name__)

# Tags whose content is removed entirely (not just the tag itself)
_SKIP_TAGS = {"script", "style", "head", "meta", "link", "noscript"}

_OWNER_LABEL_RE = re.compile(
    r"^(?:primary\s+)?owner(?:s|\(s\))?(?:\s+name(?:s|\(s\))?)?\s*:?$", re.IGNORECASE
)
_LABEL_TAGS = ("strong", "b", "th", "td", "dt", "label", "span", "div")

# Record-id labels in priority order.
_ID_LABEL_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:prop(?:erty)?\s*id|propid)\b", re.IGNORECASE),
    re.compile(r"\bparcel\s*(?:id|number|no\.?|#)", re.IGNORECASE),
    re.compile(r"\bfolio\b", re.IGNORECASE),
    re.compile(r"\baccount\b", re.IGNORECASE),
)

_SALE_DATE_HEADER_RE = re.compile(r"\b(?:sale\s*date|date\s*of\s*sale|date)\b", re.IGNORECASE)
_GRANTEE_HEADER_RE = re.compile(r"\b(?:grantee|buyer|new\s+owner)\b", re.IGNORECASE)

# Annotations appended after an owner name on the same line.
_TRAILING_NOTE_RE = re.compile(r"\s+(?:-|—|\|)\s+.*$")
_UI_LABELS = frozenset({"view map", "owner information", "mailing address"})


def _text(el: Tag) -> str:
    return collapse_whitespace(el.get_text(" "))


def _lines(el: Tag) -> list[str]:
    """Return the ``<br>``-separated text lines of *el*."""
    for br in el.find_all("br"):
        br.replace_with("\n")
    lines = []
    for line in el.get_text("\n").split("\n"):
        line = collapse_whitespace(line)
        if line:
            lines.append(line)
    return lines


def extract_record_id(soup: BeautifulSoup) -> str:
    """Return the record identifier of the page, or ``"unknown_id"``."""
    altkey = soup.find("input", id="altkey")
    if altkey is not None and collapse_whitespace(altkey.get("value") or ""):
        return collapse_whitespace(altkey["value"])

    pairs: list[tuple[str, str]] = []
    for tr in soup.find_all("tr"):
        cells = tr.find_all(["td", "th"], recursive=False)
        if len(cells) >= 2:
            pairs.append((_text(cells[0]), _text(cells[1])))

    for label_re in _ID_LABEL_RES:
        for label, value in pairs:
            if value and label_re.search(label):
                return value
    return UNKNOWN_RECORD_ID


def _value_element(label: Tag) -> Tag | None:
    if label.name in ("td", "th"):
        return label.find_next_sibling(["td", "th"])
    if label.name == "dt":
        return label.find_next_sibling("dd")
    container = label.parent if label.name in ("strong", "b", "label", "span") else label
    while container is not None and container.find_next_sibling() is None:
        if container.name in ("body", "html"):
            return None
        container = container.parent
    return container.find_next_sibling() if container is not None else None


def extract_current_owners(soup: BeautifulSoup) -> list[str]:
    """Return current-owner strings found next to owner labels."""
    found: list[str] = []
    seen: set[str] = set()
    for label in soup.find_all(_LABEL_TAGS):
        if not _OWNER_LABEL_RE.match(_text(label)):
            continue
        value = _value_element(label)
        if value is None:
            continue
        for line in _lines(value):
            if looks_like_address(line):
                break
            line = _TRAILING_NOTE_RE.sub("", line).strip()
            key = line.lower()
            if not line or key in _UI_LABELS or _OWNER_LABEL_RE.match(line) or key in seen:
                continue
            seen.add(key)
            found.append(line)
    return found


def _header_index(cells: list[str], pattern: re.Pattern[str]) -> int | None:
    for i, text in enumerate(cells):
        if pattern.search(text):
            return i
    return None


def extract_sale_history(soup: BeautifulSoup) -> list[OwnerCandidate]:
    """Return grantee candidates tagged with their sale dates."""
    candidates: list[OwnerCandidate] = []
    for table in soup.find_all("table"):
        rows = table.find_all("tr")
        if not rows:
            continue
        header = [_text(c) for c in rows[0].find_all(["th", "td"])]
        date_idx = _header_index(header, _SALE_DATE_HEADER_RE)
        owner_idx = _header_index(header, _GRANTEE_HEADER_RE)
        if date_idx is None or owner_idx is None:
            continue
        for tr in rows[1:]:
            cells = tr.find_all(["td", "th"])
            if len(cells) <= max(date_idx, owner_idx):
                continue
            sale_date = _text(cells[date_idx])
            for line in _lines(cells[owner_idx]):
                candidates.append(OwnerCandidate(text=line, date=sale_date or None))
    return candidates


def parse_owner_html(html: str, source_path: str = "") -> SourceRecord:
    """Return the ``SourceRecord`` found in an assessor detail page."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_SKIP_TAGS):
        tag.decompose()

    record_id = extract_record_id(soup)
    history = extract_sale_history(soup)
    current = [OwnerCandidate(text=line) for line in extract_current_owners(soup)]
    logger.info(
        "HTML record %s: %d current candidate(s), %d sale candidate(s)",
        record_id,
        len(current),
        len(history),
    )
    return SourceRecord(record_id=record_id, candidates=current + history, source_path=source_path)


class HTMLOwnerReader(BaseReader):
    """Read owner candidates from an HTML property page."""

    def read(self) -> SourceRecord:
        raw = self.path.read_text(encoding="utf-8", errors="replace")
        return parse_owner_html(raw, source_path=str(self.path))
