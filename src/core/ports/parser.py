"""
Interfaces ports pour le parsing de fichiers tabulaires.

Le parser transforme un texte délimité brut en lignes (en-tête -> valeur brute)
sans aucune connaissance du schéma cible du catalogue.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

# Ligne brute : en-tete de colonne -> valeur texte
RawRow = dict[str, str]


class MalformedTextError(ValueError):
    """Le texte ne respecte pas la grammaire du dialecte (decoupage impossible)."""


@dataclass
class ParseResult:
    """
    Résultat détaillé d'un parsing.

    Attributs:
        header: Colonnes de l'en-tête, dans l'ordre du fichier
        rows: Lignes acceptées (nombre de champs == nombre de colonnes)
        mismatched_lines: Numéros (1-based) des lignes du fichier écartées
            car leur nombre de champs diffère de celui de l'en-tête
    """

    header: list[str] = field(default_factory=list)
    rows: list[RawRow] = field(default_factory=list)
    mismatched_lines: list[int] = field(default_factory=list)


class ITabularParser(ABC):
    """
    Interface pour le parsing de texte tabulaire (export de tableur).
    """

    @abstractmethod
    def parse_with_diagnostics(self, text: str) -> ParseResult:
        """
        Parse un texte délimité complet en conservant les lignes écartées.

        Args:
            text: Contenu du fichier, déjà chargé en mémoire

        Retourne:
            ParseResult (vide si moins d'un en-tête et une ligne de données)
        """
        ...

    def parse(self, text: str) -> list[RawRow]:
        """
        Parse un texte délimité complet.

        Retourne:
            Liste ordonnée de lignes, une par ligne de données valide.
            Liste vide si le texte ne contient pas au moins un en-tête
            et une ligne de données.
        """
        return self.parse_with_diagnostics(text).rows
