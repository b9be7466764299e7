"""Field key to display label conversion."""

import re
from types import MappingProxyType
from typing import Any, Mapping

from tradedoc.core.config import (
    DEFAULT_ABBREVIATIONS,
    DEFAULT_DOCUMENT_TITLE,
    GENERIC_CREDENTIAL_TYPE,
)

_UPPER = re.compile(r"([A-Z])")
_WHITESPACE = re.compile(r"\s+")


def _split_camel_case(key: str) -> str:
    """Insert spaces before uppercase letters and collapse whitespace."""
    spaced = _UPPER.sub(r" \1", key)
    return _WHITESPACE.sub(" ", spaced).strip()


class LabelFormatter:
    """Turns camelCase field keys into human-readable labels.

    The abbreviation table is copied into a read-only mapping at
    construction, so one formatter can be shared between threads.

    Apply exactly once per raw key: splitting runs before abbreviation
    substitution, so already formatted text is split again
    (e.g. "URL" -> "U R L").
    """

    def __init__(self, abbreviations: Mapping[str, str] = DEFAULT_ABBREVIATIONS):
        self.abbreviations: Mapping[str, str] = MappingProxyType(dict(abbreviations))
        self._patterns = tuple(
            (re.compile(rf"\b{re.escape(abbr)}\b", re.IGNORECASE), replacement)
            for abbr, replacement in self.abbreviations.items()
        )

    def format(self, key: str) -> str:
        """Format a field key for display.

        Args:
            key: Raw field key (e.g. "billOfLadingNumber", "unLocode").

        Returns:
            Label such as "Bill Of Lading Number" or "UN Locode".
        """
        label = _split_camel_case(key)
        if label:
            label = label[0].upper() + label[1:]
        for pattern, replacement in self._patterns:
            label = pattern.sub(replacement, label)
        return label


_default_formatter = LabelFormatter()


def format_label(key: str) -> str:
    """Format a field key with the default abbreviation table."""
    return _default_formatter.format(key)


def extract_document_title(document: Mapping[str, Any]) -> str:
    """Derive a display title from the credential's type tags.

    Uses the first type that is not the generic "VerifiableCredential",
    split on uppercase letters ("CommercialInvoice" -> "Commercial Invoice").

    Args:
        document: Parsed credential document.

    Returns:
        Title string, or "Trade Document" when no specific type is present.
    """
    types = document.get("type")
    if not isinstance(types, list):
        return DEFAULT_DOCUMENT_TITLE

    for type_tag in types:
        if isinstance(type_tag, str) and type_tag and type_tag != GENERIC_CREDENTIAL_TYPE:
            return _split_camel_case(type_tag)

    return DEFAULT_DOCUMENT_TITLE
