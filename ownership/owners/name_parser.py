"""Person name parser.

Resolves a segment already classified as a person into first / middle /
last names.  Property rolls mix several conventions, so the parser runs an
ordered chain of strategies and takes the first one that matches:

1. ``comma_form``      ``LAST, FIRST [MIDDLE...] [SUFFIX]``
2. ``uppercase_form``  mostly upper-case tokens: the assessor
                       convention ``LAST FIRST [MIDDLE...]``
3. ``default_form``    ``FIRST [MIDDLE...] LAST``

Each strategy is a pure function ``(text, parser) -> NameParts | None``.
``None`` means "not my format" and the next strategy is tried.

Token rules
-----------
* Surrounding ``. , ; : "`` are stripped; tokens without a letter are
  dropped.
* Honorifics and postnominals (``MR``, ``DR``, ``ESQ`` …) are dropped.
* Generational suffixes (``JR``, ``SR``, ``II`` … ``VI``) are removed
  while ordering names, then appended to the last name.  A suffix in the
  leading position is read as a name, except right after the comma of the
  comma form (``SMITH, JR JOHN`` is John Smith Jr).
* Fewer than two usable tokens: the segment's only token becomes the first
  name under a surname hint, otherwise the parse fails.

Output is title-cased; Roman numerals stay upper-case.  A parse that
leaves first or last name empty returns ``None``, never a partial person.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from ownership.lexicon.lexicon import DEFAULT_LEXICON, Lexicon
from ownership.normalization.text import collapse_whitespace, has_letters, title_case
from ownership.owners.models import Person
from ownership.owners.splitter import SurnameHint

logger = logging.getLogger(__name__)

DEFAULT_UPPERCASE_RATIO: float = 0.6

_TOKEN_STRIP = ".,;:\"'"
_UPPER_WORD_RE = re.compile(r"^[A-Z][A-Z'\-]*$")


@dataclass(frozen=True)
class NameParts:
    """Unformatted name pieces produced by a strategy."""

    first: str
    last: list[str]
    middle: list[str] = field(default_factory=list)
    suffixes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class _Tokens:
    names: list[str]
    suffixes: list[str]


def _clean_token(token: str) -> str:
    cleaned = token.strip(_TOKEN_STRIP)
    # Keep inner apostrophes (O'BRIEN) but not wrapping ones.
    return cleaned if has_letters(cleaned) else ""


def uppercase_ratio(tokens: list[str]) -> float:
    """Return the share of *tokens* written entirely in upper-case letters."""
    if not tokens:
        return 0.0
    upper = sum(1 for t in tokens if _UPPER_WORD_RE.match(t))
    return upper / len(tokens)


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def comma_form(text: str, parser: PersonNameParser) -> NameParts | None:
    """``LAST, FIRST [MIDDLE...]`` — split once on the first comma."""
    if "," not in text:
        return None
    left, _, right = text.partition(",")
    last = parser.tokens(left)
    given = parser.tokens(right.replace(",", " "), leading_suffix=True)
    if not last.names or not given.names:
        return None
    return NameParts(
        first=given.names[0],
        middle=given.names[1:],
        last=last.names,
        suffixes=last.suffixes + given.suffixes,
    )


def uppercase_form(text: str, parser: PersonNameParser) -> NameParts | None:
    """``LAST FIRST [MIDDLE...]`` when enough tokens are upper-case."""
    toks = parser.tokens(text.replace(",", " "))
    if len(toks.names) < 2:
        return None
    if uppercase_ratio(toks.names) < parser.uppercase_ratio:
        return None
    return NameParts(
        first=toks.names[1],
        middle=toks.names[2:],
        last=[toks.names[0]],
        suffixes=toks.suffixes,
    )


def default_form(text: str, parser: PersonNameParser) -> NameParts | None:
    """``FIRST [MIDDLE...] LAST``."""
    toks = parser.tokens(text.replace(",", " "))
    if len(toks.names) < 2:
        return None
    return NameParts(
        first=toks.names[0],
        middle=toks.names[1:-1],
        last=[toks.names[-1]],
        suffixes=toks.suffixes,
    )


Strategy = Callable[[str, "PersonNameParser"], "NameParts | None"]

DEFAULT_STRATEGIES: tuple[Strategy, ...] = (comma_form, uppercase_form, default_form)

# Natural order only, for a trailing segment that carries the shared surname.
NATURAL_STRATEGIES: tuple[Strategy, ...] = (comma_form, default_form)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class PersonNameParser:
    """Parse person segments with an ordered strategy chain."""

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        uppercase_ratio: float = DEFAULT_UPPERCASE_RATIO,
        strategies: tuple[Strategy, ...] = DEFAULT_STRATEGIES,
    ) -> None:
        if not 0.0 <= uppercase_ratio <= 1.0:
            raise ValueError(f"uppercase_ratio must be within [0, 1]; got {uppercase_ratio!r}")
        self.lexicon = lexicon
        self.uppercase_ratio = uppercase_ratio
        self.strategies = strategies

    def tokens(self, text: str, leading_suffix: bool = False) -> _Tokens:
        """Split *text* into name tokens and generational suffix tokens.

        A suffix before any name is kept as a name unless *leading_suffix*.
        """
        names: list[str] = []
        suffixes: list[str] = []
        for raw in collapse_whitespace(text or "").split(" "):
            token = _clean_token(raw)
            if not token:
                continue
            upper = token.upper()
            if upper in self.lexicon.honorifics:
                continue
            if upper in self.lexicon.generational_suffixes and (names or leading_suffix):
                suffixes.append(token)
                continue
            names.append(token)
        return _Tokens(names=names, suffixes=suffixes)

    def usable_tokens(self, segment: str) -> list[str]:
        """Return the name tokens of *segment* once suffixes and honorifics are gone."""
        return self.tokens((segment or "").replace(",", " ")).names

    def parse(
        self,
        segment: str,
        hint: SurnameHint | None = None,
        strategies: tuple[Strategy, ...] | None = None,
    ) -> Person | None:
        """Return a ``Person`` for *segment*, or ``None`` when it cannot be resolved.

        *strategies* replaces the parser's chain for this call.
        """
        text = collapse_whitespace(segment or "")
        if not text:
            return None

        toks = self.tokens(text.replace(",", " "))
        if len(toks.names) < 2:
            if hint is not None and len(toks.names) == 1 and hint.last_name.strip():
                logger.debug("Resolved single-token segment with surname hint")
                return self._build(
                    NameParts(first=toks.names[0], last=[hint.last_name], suffixes=toks.suffixes)
                )
            return None

        for strategy in strategies or self.strategies:
            parts = strategy(text, self)
            if parts is not None:
                return self._build(parts)
        return None

    @staticmethod
    def _build(parts: NameParts) -> Person | None:
        first = title_case(parts.first)
        last = title_case(" ".join(parts.last + parts.suffixes))
        middle = title_case(" ".join(parts.middle)) or None
        if not first or not parts.last or not " ".join(parts.last).strip():
            return None
        return Person(first_name=first, last_name=last, middle_name=middle)
