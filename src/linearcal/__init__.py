"""Linear Calendar: full-year grid layout for dated Obsidian notes."""

__version__ = "0.1.0"
