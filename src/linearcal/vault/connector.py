"""Reads the notes of an Obsidian vault as calendar documents."""

import fnmatch
import logging
from collections.abc import Iterator
from pathlib import Path

from linearcal.models import Document
from linearcal.vault.parser import parse_markdown

logger = logging.getLogger(__name__)


class VaultConnector:
    """A vault directory seen as a sorted collection of markdown documents.

    Paths handed out and stored on documents are POSIX-style and relative to
    the vault root, so ``file.path`` and ``file.folder`` filter conditions
    behave the same on every platform.
    """

    # App config, trash, tooling and Excalidraw drawings never hold dated notes
    DEFAULT_EXCLUDES = (
        ".obsidian/*",
        ".trash/*",
        ".git/*",
        "node_modules/*",
        "*.excalidraw.md",
    )

    def __init__(
        self,
        vault_path: Path,
        include_patterns: list[str] | None = None,
        exclude_patterns: list[str] | None = None,
    ) -> None:
        """
        Args:
            vault_path: Vault root directory.
            include_patterns: Globs relative to the root. Defaults to every ``.md`` file.
            exclude_patterns: fnmatch patterns on the relative POSIX path. An empty
                list turns the default excludes off.
        """
        self.vault_path = vault_path
        self.include_patterns = include_patterns or ["**/*.md"]
        self.exclude_patterns = list(
            self.DEFAULT_EXCLUDES if exclude_patterns is None else exclude_patterns
        )

    def is_excluded(self, relative_path: str) -> bool:
        return any(fnmatch.fnmatch(relative_path, p) for p in self.exclude_patterns)

    def list_notes(self) -> list[Path]:
        """Relative paths of every included, non-excluded note, sorted."""
        found: set[Path] = set()
        for pattern in self.include_patterns:
            for full_path in self.vault_path.glob(pattern):
                relative = full_path.relative_to(self.vault_path)
                if full_path.is_file() and not self.is_excluded(relative.as_posix()):
                    found.add(relative)
        return sorted(found)

    def read_document(self, relative_path: Path) -> Document:
        text = (self.vault_path / relative_path).read_text(encoding="utf-8")
        return parse_markdown(relative_path.as_posix(), text)

    def iter_documents(self) -> Iterator[Document]:
        """Yield documents in path order, skipping notes that fail to read or parse."""
        for relative_path in self.list_notes():
            try:
                yield self.read_document(relative_path)
            except Exception as e:
                logger.warning("Skipping %s: %s", relative_path.as_posix(), e)

    def read_all_documents(self) -> list[Document]:
        documents = list(self.iter_documents())
        logger.debug("Read %d documents from %s", len(documents), self.vault_path)
        return documents
