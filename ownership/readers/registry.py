"""Reader registry: maps file extension to the correct reader class.

Usage
-----
    from ownership.readers.registry import get_reader

    record = get_reader("/data/input.html").read()

Rules
-----
- Always route document loading through get_reader().
- get_reader() raises ValueError for a missing or unsupported extension.
"""
from __future__ import annotations

import importlib
from pathlib import Path

from ownership.readers.base import BaseReader

# Extension → (module_path, class_name).  Imports are deferred to
# get_reader() so bs4 is only loaded when an HTML file is read.
_LAZY_REGISTRY: dict[str, tuple[str, str]] = {}

# Extension → eagerly registered reader class (for programmatic register()).
_REGISTRY: dict[str, type[BaseReader]] = {}


def register(extension: str, reader_cls: type[BaseReader]) -> None:
    """Register a reader class for a file extension.

    extension must be a non-empty string without a leading dot, e.g.
    "html".  Raises ValueError for invalid input.
    """
    if not extension or not extension.strip() or extension.startswith("."):
        raise ValueError(
            "extension must be a non-empty string without a leading dot (e.g. 'html')"
        )
    _REGISTRY[extension.lower()] = reader_cls


def supported_extensions() -> list[str]:
    return sorted(set(_REGISTRY) | set(_LAZY_REGISTRY))


def get_reader(path: str | Path) -> BaseReader:
    """Return an instantiated reader for the given file path."""
    p = Path(path)
    ext = p.suffix.lstrip(".").lower()
    if not ext:
        raise ValueError(f"Cannot determine file type: {p.name!r} has no file extension.")

    reader_cls = _REGISTRY.get(ext)
    if reader_cls is not None:
        return reader_cls(p)

    lazy_entry = _LAZY_REGISTRY.get(ext)
    if lazy_entry is not None:
        module_path, class_name = lazy_entry
        mod = importlib.import_module(module_path)
        reader_cls = getattr(mod, class_name)
        return reader_cls(p)

    raise ValueError(
        f"No reader registered for {p.name!r}; supported: {', '.join(supported_extensions())}"
    )


def _register_defaults() -> None:
    _LAZY_REGISTRY["html"] = ("ownership.readers.html_reader", "HTMLOwnerReader")
    _LAZY_REGISTRY["htm"] = ("ownership.readers.html_reader", "HTMLOwnerReader")
    _LAZY_REGISTRY["json"] = ("ownership.readers.json_reader", "JSONOwnerReader")


_register_defaults()
