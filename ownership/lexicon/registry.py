"""Lexicon registry.

Lookup table of available lexicons (built-in default + jurisdiction YAML)
keyed by ``lexicon_id``.  Built once per process and handed to the engine
for the jurisdiction being processed.
"""
from __future__ import annotations

import logging
from pathlib import Path

from ownership.lexicon.lexicon import DEFAULT_LEXICON, Lexicon
from ownership.lexicon.loader import load_all_lexicons

logger = logging.getLogger(__name__)


class LexiconRegistry:
    """In-memory registry of jurisdiction lexicons."""

    def __init__(self, lexicons: list[Lexicon] | None = None) -> None:
        self._lexicons: dict[str, Lexicon] = {DEFAULT_LEXICON.lexicon_id: DEFAULT_LEXICON}
        if lexicons is not None:
            for lex in lexicons:
                self._lexicons[lex.lexicon_id] = lex

    def register(self, lexicon: Lexicon) -> None:
        """Register (or replace) a lexicon."""
        self._lexicons[lexicon.lexicon_id] = lexicon

    def get(self, lexicon_id: str) -> Lexicon:
        """Return the lexicon with *lexicon_id* or raise ``KeyError``."""
        try:
            return self._lexicons[lexicon_id]
        except KeyError:
            raise KeyError(f"Lexicon not found: {lexicon_id!r}")

    def list_all(self) -> list[Lexicon]:
        """Return all registered lexicons sorted by ``lexicon_id``."""
        return sorted(self._lexicons.values(), key=lambda lex: lex.lexicon_id)

    @classmethod
    def from_directory(cls, directory: str | Path) -> LexiconRegistry:
        """Return a registry with the built-in default plus *directory*'s YAML files.

        A missing directory yields a registry holding only the default.
        """
        directory = Path(directory)
        if not directory.is_dir():
            logger.info("Lexicon directory %s not found; using built-in lexicon only", directory)
            return cls()
        lexicons = load_all_lexicons(directory)
        logger.info("Loaded %d jurisdiction lexicon(s) from %s", len(lexicons), directory)
        return cls(lexicons)

    @classmethod
    def default(cls) -> LexiconRegistry:
        """Return a registry loaded from the configured ``LEXICON_DIR``."""
        from ownership.core.settings import get_settings

        return cls.from_directory(get_settings().lexicon_dir)
