"""Markdown parser for Obsidian notes."""

from pathlib import PurePosixPath

import frontmatter

from linearcal.models import Document
from linearcal.vault.tags import extract_inline_tags, frontmatter_tags


def parse_markdown(path: str, content: str) -> Document:
    """Parse a markdown file with frontmatter.

    Args:
        path: The file path relative to the vault root.
        content: The raw markdown content.

    Returns:
        A Document carrying the frontmatter as its property bag.
    """
    post = frontmatter.loads(content)
    metadata = dict(post.metadata)
    note_path = PurePosixPath(path)
    folder = str(note_path.parent)

    tags = frontmatter_tags(metadata.get("tags"))
    tags += [t for t in extract_inline_tags(post.content) if t not in tags]

    return Document(
        path=path,
        name=note_path.stem,
        folder="" if folder == "." else folder,
        extension=note_path.suffix.lstrip("."),
        properties=metadata,
        tags=tags,
    )
