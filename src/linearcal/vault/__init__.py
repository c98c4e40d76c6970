"""Vault connector, parser and catalog modules."""

from linearcal.vault.catalog import property_names, property_values, tag_names
from linearcal.vault.connector import VaultConnector
from linearcal.vault.parser import parse_markdown

__all__ = ["VaultConnector", "parse_markdown", "property_names", "property_values", "tag_names"]
