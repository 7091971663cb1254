"""FastAPI dependency injection: lexicon registry and engine factories."""
from __future__ import annotations

from functools import lru_cache

from ownership.core.settings import get_settings
from ownership.lexicon.registry import LexiconRegistry
from ownership.owners.engine import OwnershipEngine


@lru_cache(maxsize=1)
def get_lexicon_registry() -> LexiconRegistry:
    """Return the lexicon registry loaded from LEXICON_DIR (once per process)."""
    return LexiconRegistry.default()


def get_engine_factory():
    """Return a callable that builds an ``OwnershipEngine`` for a lexicon id.

    Raises ``KeyError`` from the registry for an unknown id.
    """
    registry = get_lexicon_registry()
    settings = get_settings()

    def build(lexicon_id: str | None) -> OwnershipEngine:
        lexicon = registry.get(lexicon_id or settings.default_jurisdiction)
        return OwnershipEngine(lexicon=lexicon, settings=settings)

    return build
