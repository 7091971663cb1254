"""Lexicon configuration package.

Immutable keyword sets (company indicators, descriptor tokens, suffixes,
honorifics, placeholders) injected into the normalizer, classifier and
name parser.  Jurisdictions extend the built-in default through YAML
files in ``config/lexicons/``.
"""
