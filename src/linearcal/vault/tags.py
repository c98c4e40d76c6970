"""Tag parser for Obsidian #tags and frontmatter tag lists."""

import re

# Match #tag, #nested/tag, #tag-with-dash; a tag needs at least one non-digit
_INLINE_TAG_RE = re.compile(r"(?<![\w#&/])#([\w/-]*[^\W\d][\w/-]*)")

# Match fenced code blocks (```...```)
_FENCED_CODE_RE = re.compile(r"```[\s\S]*?```")

# Match inline code (`...`)
_INLINE_CODE_RE = re.compile(r"`[^`]+`")


def extract_inline_tags(text: str) -> list[str]:
    """Extract #tags from markdown text.

    Excludes tags inside code blocks and headings' leading hashes ("# Title").
    Returns a deduplicated list without the leading '#'.
    """
    cleaned = _FENCED_CODE_RE.sub("", text)
    cleaned = _INLINE_CODE_RE.sub("", cleaned)

    tags: list[str] = []
    seen: set[str] = set()
    for match in _INLINE_TAG_RE.finditer(cleaned):
        tag = match.group(1)
        if tag not in seen:
            seen.add(tag)
            tags.append(tag)
    return tags


def frontmatter_tags(value: object) -> list[str]:
    """Normalise a frontmatter ``tags`` value (list or comma/space separated string)."""
    if isinstance(value, str):
        items: list[object] = re.split(r"[,\s]+", value)
    elif isinstance(value, list):
        items = value
    else:
        return []
    return [str(item).lstrip("#") for item in items if item is not None and str(item).strip()]
