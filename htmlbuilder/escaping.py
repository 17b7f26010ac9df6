"""Escaping helpers for HTML text content and attribute values."""

from __future__ import annotations

import html
import re

# Code points HTML5 disallows in character data: C0 controls other than
# tab/LF/FF/CR, DEL and C1 controls, lone surrogates, and noncharacters.
_SUPPLEMENTARY_NONCHARACTERS = "".join(
    f"{chr(plane << 16 | 0xFFFE)}-{chr(plane << 16 | 0xFFFF)}" for plane in range(1, 17)
)
_DISALLOWED = re.compile(
    "[\x00-\x08\x0b\x0e-\x1f\x7f-\x9f\ud800-\udfff\ufdd0-\ufdef\ufffe\uffff" + _SUPPLEMENTARY_NONCHARACTERS + "]"
)
_CAMEL_BOUNDARY = re.compile(r"([a-zA-Z])(?=[A-Z])")

REPLACEMENT_CHARACTER = "\ufffd"


def substitute_disallowed(value: str) -> str:
    return _DISALLOWED.sub(REPLACEMENT_CHARACTER, value)


def escape_text(value: str) -> str:
    """Escape `&`, `<` and `>` for use as element content; quotes are left alone."""
    return html.escape(substitute_disallowed(value), quote=False)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return html.escape(substitute_disallowed(value), quote=True)


def attribute_name(name: str) -> str:
    """Convert a camelCase attribute name to kebab-case, e.g. `dataFoo` -> `data-foo`."""
    return _CAMEL_BOUNDARY.sub(r"\1-", name).lower()


__all__ = [
    "REPLACEMENT_CHARACTER",
    "attribute_name",
    "escape_attribute",
    "escape_text",
    "substitute_disallowed",
]
