"""JSON reader: owner candidates from assessor API payloads.

Handles the ``OwnerInfos`` / ``SalesInfos`` payload shape served by county
property-search APIs::

    {
      "PropertyInfo": {"FolioNumber": "01-0101-000-0000"},
      "OwnerInfos": [{"Name": "SMITH JOHN & JANE"}],
      "SalesInfos": [
        {"DateOfSale": "5/1/2020", "GranteeName1": "DOE JANE", "GranteeName2": ""}
      ]
    }

The payload may sit at the top level or one level down under any key.
Current owners come from ``OwnerInfos[].Name``; history from the grantees
of each sale.
"""
from __future__ import annotations

import json
import logging

from ownership.core.constants import UNKNOWN_RECORD_ID
from ownership.readers.base import BaseReader, OwnerCandidate, SourceRecord

logger = logging.getLogger(__name__)

_PAYLOAD_KEYS = ("OwnerInfos", "SalesInfos")
_GRANTEE_KEYS = ("GranteeName1", "GranteeName2")
_ID_KEYS = ("FolioNumber", "folio", "parcel_id", "ParcelId", "PropertyId")


def _find_payload(data: dict) -> dict:
    if any(k in data for k in _PAYLOAD_KEYS):
        return data
    for value in data.values():
        if isinstance(value, dict) and any(k in value for k in _PAYLOAD_KEYS):
            return value
    return data


def _record_id(data: dict, payload: dict) -> str:
    for source in (payload.get("PropertyInfo"), payload, data.get("PropertyInfo"), data):
        if not isinstance(source, dict):
            continue
        for key in _ID_KEYS:
            value = source.get(key)
            if value is not None and str(value).strip():
                return str(value).strip()
    return UNKNOWN_RECORD_ID


def _str(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def parse_owner_json(data: object, source_path: str = "") -> SourceRecord:
    """Return the ``SourceRecord`` found in a decoded JSON payload.

    Raises
    ------
    ValueError
        If *data* is not a JSON object.
    """
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")

    payload = _find_payload(data)
    candidates: list[OwnerCandidate] = []

    for info in payload.get("OwnerInfos") or []:
        if isinstance(info, dict) and _str(info.get("Name")):
            candidates.append(OwnerCandidate(text=_str(info.get("Name"))))

    for sale in payload.get("SalesInfos") or []:
        if not isinstance(sale, dict):
            continue
        sale_date = _str(sale.get("DateOfSale")) or None
        for key in _GRANTEE_KEYS:
            name = _str(sale.get(key))
            if name:
                candidates.append(OwnerCandidate(text=name, date=sale_date))

    record_id = _record_id(data, payload)
    logger.info("JSON record %s: %d candidate(s)", record_id, len(candidates))
    return SourceRecord(record_id=record_id, candidates=candidates, source_path=source_path)


class JSONOwnerReader(BaseReader):
    """Read owner candidates from an assessor JSON payload."""

    def read(self) -> SourceRecord:
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return parse_owner_json(data, source_path=str(self.path))
