"""Owner parsing routes.

POST /owners/parse  — resolve one record's raw owner strings
GET  /owners/lexicons — list available jurisdiction lexicon ids

Raw strings are echoed back only inside ``invalid_owners``, which is the
caller's own input.  They are never logged.
"""
from __future__ import annotations

import logging
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ownership.api.deps import get_engine_factory, get_lexicon_registry
from ownership.core.constants import UNKNOWN_RECORD_ID
from ownership.export.json_exporter import build_payload
from ownership.lexicon.registry import LexiconRegistry
from ownership.owners.engine import OwnershipEngine
from ownership.owners.models import OwnerCandidate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owners", tags=["owners"])


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class CandidateBody(BaseModel):
    text: str
    date: str | None = None


class ParseOwnersBody(BaseModel):
    record_id: str | None = None
    jurisdiction: str | None = None
    candidates: list[CandidateBody] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/parse", summary="Classify and parse raw owner strings for one record")
def parse_owners(
    body: ParseOwnersBody,
    build_engine: Callable[[str | None], OwnershipEngine] = Depends(get_engine_factory),
):
    try:
        engine = build_engine(body.jurisdiction)
    except KeyError:
        raise HTTPException(status_code=404, detail="Jurisdiction not found")

    result = engine.process(
        OwnerCandidate(text=c.text, date=c.date) for c in body.candidates
    )
    return build_payload(body.record_id or UNKNOWN_RECORD_ID, result)


@router.get("/lexicons", summary="List available jurisdiction lexicons")
def list_lexicons(registry: LexiconRegistry = Depends(get_lexicon_registry)):
    return [
        {
            "lexicon_id": lex.lexicon_id,
            "company_keywords": len(lex.company_keywords),
            "descriptor_tokens": len(lex.descriptor_tokens),
        }
        for lex in registry.list_all()
    ]
