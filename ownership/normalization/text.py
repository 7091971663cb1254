"""Owner-string normalizer.

Turns a raw owner string as scraped from a property record into the clean
form every later stage works on.

Rules applied in order
----------------------
1. Collapse every whitespace run (tabs, newlines, U+00A0 non-breaking
   spaces) into one ASCII space and trim.
2. Unwrap a string that is entirely enclosed in parentheses; otherwise drop
   parenthetical / bracketed annotations such as ``(DECEASED)``.
3. Drop a leading ``*`` marker.
4. Remove descriptor tokens from the active lexicon (``TRUSTEE``,
   ``ET AL``, ``C/O``, ``ESTATE OF`` …) as whole words, case-insensitively.
5. Remove separators and commas left dangling at either end.
6. Collapse whitespace again.

``title_case()`` is the single casing policy applied to every emitted name,
person or company.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import re
from functools import lru_cache

from ownership.lexicon.lexicon import DEFAULT_LEXICON, Lexicon

_WHITESPACE_RE = re.compile(r"\s+")
_PAREN_RE = re.compile(r"\([^()]*\)|\[[^\[\]]*\]")
_STRAY_BRACKET_RE = re.compile(r"[()\[\]]")
_LEADING_MARKER_RE = re.compile(r"^\*+\s*")
_DANGLING_RE = re.compile(r"^(?:[&,;/]|\band\b|\s)+|(?:[&,;/]|\band\b|\s)+$", re.IGNORECASE)

# Letters and digits bound a word; punctuation does not.
_WORD_BOUNDARY_BEFORE = r"(?<![A-Za-z0-9])"
_WORD_BOUNDARY_AFTER = r"(?![A-Za-z0-9])"

_ROMAN_NUMERALS: frozenset[str] = frozenset({
    "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
})

_WORD_START_RE = re.compile(r"(^|[\s\-.])([a-z])")
# Single-letter prefixes such as O'Brien, D'Angelo.
_APOSTROPHE_PREFIX_RE = re.compile(r"(?<![a-z])([a-z])'([a-z])")


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def keyword_pattern(keywords) -> re.Pattern[str]:
    """Compile a bounded, case-insensitive alternation of *keywords*.

    Internal spaces in a keyword match any whitespace run.  Longer keywords
    are tried first so ``L.L.C`` is not shadowed by a shorter entry.
    """
    parts = []
    for kw in sorted(keywords, key=lambda k: (-len(k), k)):
        escaped = r"\s+".join(re.escape(piece) for piece in kw.split())
        if escaped:
            parts.append(escaped)
    if not parts:
        return re.compile(r"(?!x)x")
    return re.compile(
        _WORD_BOUNDARY_BEFORE + "(?:" + "|".join(parts) + ")" + _WORD_BOUNDARY_AFTER,
        re.IGNORECASE,
    )


@lru_cache(maxsize=32)
def _descriptor_re(descriptors: tuple[str, ...]) -> re.Pattern[str]:
    return keyword_pattern(descriptors)


def _strip_parentheticals(text: str) -> str:
    if text.startswith("(") and text.endswith(")") and _PAREN_RE.fullmatch(text):
        return text[1:-1]
    previous = None
    while previous != text:
        previous = text
        text = _PAREN_RE.sub(" ", text)
    return _STRAY_BRACKET_RE.sub(" ", text)


def normalize(raw: str | None, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Return *raw* cleaned of whitespace variants, annotations and descriptors.

    Never raises.  ``None``, non-string and empty input yield ``""``.
    """
    if not isinstance(raw, str) or not raw:
        return ""

    text = collapse_whitespace(raw)
    if not text:
        return ""

    text = collapse_whitespace(_strip_parentheticals(text))
    text = _LEADING_MARKER_RE.sub("", text)
    text = _descriptor_re(lexicon.descriptor_tokens).sub(" ", text)
    text = collapse_whitespace(text)
    text = _DANGLING_RE.sub("", text)
    return collapse_whitespace(text)


def title_case(text: str) -> str:
    """Return *text* in title case, keeping Roman numerals upper-case.

    A word starts after a space, hyphen or period; a single-letter prefix
    before an apostrophe is treated as its own word (``O'BRIEN`` →
    ``O'Brien``).
    """
    if not text:
        return text
    lowered = collapse_whitespace(text).lower()
    cased = _APOSTROPHE_PREFIX_RE.sub(lambda m: m.group(1).upper() + "'" + m.group(2).upper(), lowered)
    cased = _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), cased)

    words = []
    for word in cased.split(" "):
        if word.rstrip(".,").upper() in _ROMAN_NUMERALS:
            word = word.upper()
        words.append(word)
    return " ".join(words)


def has_letters(text: str) -> bool:
    """Return True if *text* contains at least one alphabetic character."""
    return any(ch.isalpha() for ch in text)
