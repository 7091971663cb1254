"""Lexicon dataclass.

A Lexicon is the keyword configuration for one jurisdiction: which words
mark an organisation, which descriptor tokens are boilerplate, which tokens
are generational suffixes or honorifics, and which strings are known
placeholders rather than owners.  Lexicons are immutable; jurisdictions
derive new ones with ``extend()`` (usually from a YAML file in
``config/lexicons/``) instead of editing the built-in sets.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace

# Entity suffixes, fiduciary / collective terms, financial institutions and
# service-sector words.  Matched as bounded, case-insensitive keywords.
_COMPANY_KEYWORDS: frozenset[str] = frozenset({
    # Entity suffixes
    "INC", "INCORPORATED", "LLC", "L.L.C", "LTD", "LIMITED", "CORP",
    "CORPORATION", "CO", "COMPANY", "LP", "L.P", "LLP", "PLC", "PC", "P.C",
    "PA", "P.A", "PLLC",
    # Collective / fiduciary
    "TRUST", "TRUSTEE", "ASSOCIATION", "ASSN", "FOUNDATION", "PARTNERS",
    "PARTNERSHIP", "HOLDINGS", "HOA", "ALLIANCE", "ASSOCIATES", "GROUP",
    # Financial institutions
    "BANK", "N.A", "MORTGAGE", "SAVINGS", "CREDIT UNION",
    # Service sector and property business
    "SERVICES", "SOLUTIONS", "MANAGEMENT", "PROPERTIES", "REALTY",
    "ENTERPRISES", "INVESTMENTS", "VENTURES", "DEVELOPMENT",
    # Religious and public bodies
    "CHURCH", "MINISTRIES", "COUNTY", "CITY OF", "STATE OF", "UNIVERSITY",
})

# Boilerplate removed by the normalizer before classification.  Longer
# phrases first so "AS TTEE" wins over "TTEE".
_DESCRIPTOR_TOKENS: tuple[str, ...] = (
    "ESTATE OF", "EST OF", "CARE OF", "AS TTEE", "ET AL", "ET UX", "ET VIR",
    "TRUSTEE", "TTEE", "TTE", "ETAL", "DECEASED", "DEC'D", "C/O", "TR.",
    "H/W", "H&W", "H & W",
)

_GENERATIONAL_SUFFIXES: frozenset[str] = frozenset({
    "JR", "SR", "II", "III", "IV", "V", "VI",
})

# Dropped outright; they never become part of a name.
_HONORIFICS: frozenset[str] = frozenset({
    "MR", "MRS", "MS", "MISS", "DR", "REV", "PROF", "ESQ", "MD", "PHD", "DDS",
})

# Values county systems use in place of a real owner.
_PLACEHOLDER_NAMES: frozenset[str] = frozenset({
    "UNKNOWN", "UNKNOWN SELLER", "UNKNOWN OWNER", "NOT AVAILABLE", "N/A",
    "NONE", "CONVERSION", "OWNER OF RECORD",
})


def _upper_set(values) -> frozenset[str]:
    return frozenset(str(v).strip().upper() for v in values if str(v).strip())


@dataclass(frozen=True)
class Lexicon:
    """Keyword configuration consumed by the normalizer, classifier and parser."""

    lexicon_id: str
    company_keywords: frozenset[str] = field(default_factory=lambda: _COMPANY_KEYWORDS)
    descriptor_tokens: tuple[str, ...] = _DESCRIPTOR_TOKENS
    generational_suffixes: frozenset[str] = field(default_factory=lambda: _GENERATIONAL_SUFFIXES)
    honorifics: frozenset[str] = field(default_factory=lambda: _HONORIFICS)
    placeholder_names: frozenset[str] = field(default_factory=lambda: _PLACEHOLDER_NAMES)

    def extend(
        self,
        lexicon_id: str,
        *,
        company_keywords=(),
        descriptor_tokens=(),
        generational_suffixes=(),
        honorifics=(),
        placeholder_names=(),
        remove_company_keywords=(),
    ) -> Lexicon:
        """Return a new lexicon with the given entries added (or removed).

        All entries are upper-cased.  Descriptor tokens keep their order and
        new ones are appended after the existing ones.
        """
        keywords = (self.company_keywords | _upper_set(company_keywords)) - _upper_set(
            remove_company_keywords
        )
        descriptors = list(self.descriptor_tokens)
        for token in descriptor_tokens:
            token = str(token).strip().upper()
            if token and token not in descriptors:
                descriptors.append(token)
        return replace(
            self,
            lexicon_id=lexicon_id,
            company_keywords=frozenset(keywords),
            descriptor_tokens=tuple(descriptors),
            generational_suffixes=self.generational_suffixes | _upper_set(generational_suffixes),
            honorifics=self.honorifics | _upper_set(honorifics),
            placeholder_names=self.placeholder_names | _upper_set(placeholder_names),
        )


DEFAULT_LEXICON = Lexicon(lexicon_id="default")
