"""JSON export of ownership results.

The output document is keyed by record::

    {
      "property_<record_id>": {
        "owners_by_date": {"2019-05-01": [...], "current": [...]},
        "invalid_owners": [{"raw": "...", "reason": "..."}]
      }
    }

``build_payload()`` is pure and safe to call from the API.  ``JSONExporter``
merges payloads for several records and writes the file.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from ownership.core.constants import record_key
from ownership.owners.models import OwnershipResult

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILENAME = "owner_data.json"


# ---------------------------------------------------------------------------
# Pure builders
# ---------------------------------------------------------------------------


def build_payload(record_id: str | None, result: OwnershipResult) -> dict[str, dict]:
    """Return the single-record output document for *result*."""
    return {record_key(record_id): result.to_dict()}


def render_payload(payload: dict) -> str:
    """Serialise *payload* as indented UTF-8 JSON text."""
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Writer
# ---------------------------------------------------------------------------


def write_owner_data(
    payload: dict,
    output_dir: str | Path,
    filename: str = DEFAULT_OUTPUT_FILENAME,
) -> Path:
    """Write *payload* to ``output_dir/filename`` and return the path.

    The directory is created if needed; an existing file is replaced.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    file_path = out_dir / filename
    file_path.write_text(render_payload(payload), encoding="utf-8")
    logger.info("Wrote %d record(s) to %s", len(payload), file_path)
    return file_path


class JSONExporter:
    """Collect per-record results and write them as one document.

    Usage::

        exporter = JSONExporter()
        exporter.add(record.record_id, engine.process_record(record))
        exporter.write(Path("owners"))

    A later result for the same record id replaces the earlier one.
    """

    def __init__(self) -> None:
        self._payload: dict[str, dict] = {}

    def add(self, record_id: str | None, result: OwnershipResult) -> str:
        """Add *result* and return its document key."""
        entry = build_payload(record_id, result)
        key = next(iter(entry))
        if key in self._payload:
            logger.warning("Record key %s seen more than once; keeping the last", key)
        self._payload.update(entry)
        return key

    @property
    def payload(self) -> dict[str, dict]:
        return dict(self._payload)

    def __len__(self) -> int:
        return len(self._payload)

    def write(self, output_dir: str | Path, filename: str = DEFAULT_OUTPUT_FILENAME) -> Path:
        return write_owner_data(self._payload, output_dir, filename)
