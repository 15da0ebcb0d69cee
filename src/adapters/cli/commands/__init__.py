"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.import_commands import import_catalog
from src.adapters.cli.commands.catalog_commands import (
    add,
    delete,
    edit,
    genres,
    list_movies,
    show,
)
from src.adapters.cli.commands.lookup_commands import lookup

__all__ = [
    # import
    "import_catalog",
    # catalogue
    "list_movies",
    "show",
    "add",
    "edit",
    "delete",
    "genres",
    # metadonnees
    "lookup",
]
