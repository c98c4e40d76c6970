"""Vault-wide lookups used to fill in filter and date-source settings."""

from collections.abc import Iterable

from linearcal.models import Document

# Keys Obsidian adds to frontmatter caches, never written by users
_INTERNAL_KEYS = {"position"}


def property_names(documents: Iterable[Document]) -> list[str]:
    """All frontmatter keys used anywhere in the vault, sorted."""
    names: set[str] = set()
    for doc in documents:
        names.update(k for k in doc.properties if k not in _INTERNAL_KEYS)
    return sorted(names)


def property_values(documents: Iterable[Document], key: str) -> list[str]:
    """Distinct values of one property across the vault, as strings.

    List values contribute each element. Missing and empty values are skipped.
    """
    values: set[str] = set()
    for doc in documents:
        value = doc.properties.get(key)
        if value is None or value == "":
            continue
        items = value if isinstance(value, list) else [value]
        values.update(str(item) for item in items if item is not None and item != "")
    return sorted(values)


def tag_names(documents: Iterable[Document]) -> list[str]:
    """All tags in the vault, from frontmatter and note bodies, sorted."""
    tags: set[str] = set()
    for doc in documents:
        tags.update(doc.tags)
    return sorted(tags)
