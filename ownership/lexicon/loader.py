"""Lexicon YAML loader.

Loads jurisdiction lexicons from ``config/lexicons/*.yaml``.  Each file
extends a base lexicon (the built-in default unless ``extends`` names
another one already loaded)::

    lexicon_id: flagler
    extends: default
    company_keywords: [MINISTRIES, CHURCH]
    remove_company_keywords: [PA]
    descriptor_tokens: [TR U/A]
    placeholder_names: [UNKNOWN SELLER]
"""
from __future__ import annotations

from pathlib import Path

import yaml

from ownership.lexicon.lexicon import DEFAULT_LEXICON, Lexicon

_REQUIRED_FIELDS: frozenset[str] = frozenset({"lexicon_id"})

_LIST_FIELDS: frozenset[str] = frozenset({
    "company_keywords",
    "descriptor_tokens",
    "generational_suffixes",
    "honorifics",
    "placeholder_names",
    "remove_company_keywords",
})


def _read_mapping(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a YAML mapping, got {type(data).__name__}")

    missing = _REQUIRED_FIELDS - data.keys()
    if missing:
        raise ValueError(f"{path}: missing required fields: {sorted(missing)}")

    unknown = data.keys() - _REQUIRED_FIELDS - _LIST_FIELDS - {"extends"}
    if unknown:
        raise ValueError(f"{path}: unknown fields: {sorted(unknown)}")

    for key in _LIST_FIELDS & data.keys():
        value = data[key]
        if value is None:
            data[key] = []
        elif not isinstance(value, list):
            raise ValueError(f"{path}: {key} must be a list, got {type(value).__name__}")
    return data


def load_lexicon(path: str | Path, base: Lexicon = DEFAULT_LEXICON) -> Lexicon:
    """Load a single lexicon from a YAML file, extending *base*.

    Raises
    ------
    ValueError
        If the document is not a mapping, lacks ``lexicon_id``, has unknown
        keys, or a list field is not a list.
    """
    path = Path(path)
    data = _read_mapping(path)
    return base.extend(
        str(data["lexicon_id"]),
        company_keywords=data.get("company_keywords", []),
        descriptor_tokens=data.get("descriptor_tokens", []),
        generational_suffixes=data.get("generational_suffixes", []),
        honorifics=data.get("honorifics", []),
        placeholder_names=data.get("placeholder_names", []),
        remove_company_keywords=data.get("remove_company_keywords", []),
    )


def load_all_lexicons(directory: str | Path = "config/lexicons") -> list[Lexicon]:
    """Load all ``*.yaml`` lexicon files from *directory*.

    Files are loaded in name order.  ``extends`` may reference the built-in
    ``default`` or any lexicon loaded earlier in that order.

    Raises
    ------
    ValueError
        If any YAML file fails validation or extends an unknown lexicon.
    """
    directory = Path(directory)
    loaded: dict[str, Lexicon] = {DEFAULT_LEXICON.lexicon_id: DEFAULT_LEXICON}
    lexicons: list[Lexicon] = []
    for path in sorted(directory.iterdir()):
        if path.suffix not in (".yaml", ".yml"):
            continue
        data = _read_mapping(path)
        base_id = str(data.get("extends") or DEFAULT_LEXICON.lexicon_id)
        if base_id not in loaded:
            raise ValueError(f"{path}: extends unknown lexicon {base_id!r}")
        lexicon = load_lexicon(path, base=loaded[base_id])
        loaded[lexicon.lexicon_id] = lexicon
        lexicons.append(lexicon)
    return lexicons
