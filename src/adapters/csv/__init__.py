"""
Adaptateurs pour les fichiers tabulaires (exports de tableur).

Ce module fournit:
- TabularParser: Parser de texte CSV en lignes brutes
- CsvDialect: Dialecte de decoupage (minimal ou standard)
- ParseResult: Resultat detaille (lignes acceptees et lignes ecartees)
"""

from .tabular_parser import CsvDialect, ParseResult, TabularParser, split_minimal

__all__ = ["TabularParser", "CsvDialect", "ParseResult", "split_minimal"]
