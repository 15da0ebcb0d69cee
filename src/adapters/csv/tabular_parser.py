"""
Parser pour les exports de tableur au format CSV.

Transforme le texte complet d'un fichier en lignes brutes (en-tete -> valeur),
sans connaissance du schema du catalogue. Le fichier est deja charge en
memoire: pas de lecture en streaming.

Deux dialectes sont disponibles derriere le meme contrat parse(text):

- MINIMAL (defaut): decoupage caractere par caractere sur la virgule,
  un guillemet double bascule le mode "dans un champ cite". Ne gere PAS
  les guillemets echappes ("") ni les retours a la ligne dans un champ,
  et seule la virgule est un separateur.
- STANDARD: grammaire CSV complete du module csv de Python (guillemets
  echappes, champs multi-lignes).

Dans les deux cas, une ligne dont le nombre de champs differe du nombre
de colonnes de l'en-tete est ecartee. Elle n'apparait pas dans les lignes
retournees; son numero est conserve dans ParseResult.mismatched_lines.
"""

import csv
import io
from enum import Enum
from typing import Iterator

from loguru import logger

from src.core.ports.parser import ITabularParser, MalformedTextError, ParseResult, RawRow
from src.utils.helpers import strip_quotes


class CsvDialect(str, Enum):
    """Grammaire utilisee pour decouper les lignes de donnees."""

    MINIMAL = "minimal"
    STANDARD = "standard"


def split_minimal(line: str) -> list[str]:
    """
    Decoupe une ligne selon le dialecte minimal.

    Un '"' bascule le mode cite et n'est jamais conserve; une virgule
    ne separe les champs qu'en dehors du mode cite. Le contenu accumule
    en fin de ligne forme le dernier champ.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


class TabularParser(ITabularParser):
    """
    Parser de texte tabulaire delimite par des virgules.

    La premiere ligne non vide est l'en-tete (sensible a la casse, sans
    dedoublonnage: une colonne repetee ecrase la precedente dans la ligne
    construite). Les lignes vides ou blanches sont ignorees.

    Example:
        parser = TabularParser()
        rows = parser.parse('Title,Year\\n"Alien",1979\\n')
        # [{"Title": "Alien", "Year": "1979"}]
    """

    def __init__(self, dialect: CsvDialect = CsvDialect.MINIMAL) -> None:
        """
        Initialise le parser.

        Args:
            dialect: Grammaire de decoupage des lignes (MINIMAL par defaut)
        """
        self._dialect = CsvDialect(dialect)

    @property
    def dialect(self) -> CsvDialect:
        """Retourne le dialecte utilise."""
        return self._dialect

    def parse_with_diagnostics(self, text: str) -> ParseResult:
        """
        Parse le texte et conserve les numeros des lignes ecartees.

        Args:
            text: Contenu complet du fichier

        Returns:
            ParseResult avec en-tete, lignes acceptees et lignes ecartees

        Raises:
            MalformedTextError: Si le dialecte STANDARD ne peut pas decouper le texte
        """
        records = list(self._records(text))
        if len(records) < 2:
            return ParseResult()

        _, header = records[0]
        result = ParseResult(header=header)

        for line_number, values in records[1:]:
            if len(values) != len(header):
                result.mismatched_lines.append(line_number)
                continue
            result.rows.append(self._to_row(header, values))

        if result.mismatched_lines:
            logger.debug(
                f"{len(result.mismatched_lines)} ligne(s) ecartee(s), "
                f"{len(header)} champs attendus: {result.mismatched_lines}"
            )
        return result

    def _records(self, text: str) -> Iterator[tuple[int, list[str]]]:
        """Produit (numero de ligne, champs nettoyes) pour chaque ligne non vide."""
        if self._dialect == CsvDialect.STANDARD:
            yield from self._standard_records(text)
            return

        first = True
        for index, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            if first:
                # L'en-tete n'est pas decoupe en mode cite
                fields = line.split(",")
                first = False
            else:
                fields = split_minimal(line)
            yield index, [strip_quotes(value) for value in fields]

    @staticmethod
    def _standard_records(text: str) -> Iterator[tuple[int, list[str]]]:
        """
        Produit les enregistrements non vides via le module csv.

        Seule une ligne physiquement blanche est ignoree, comme en MINIMAL:
        une ligne ",", faite de champs vides, reste un enregistrement.

        Raises:
            MalformedTextError: Si le module csv ne peut pas decouper le texte
        """
        reader = csv.reader(io.StringIO(text, newline=""))
        try:
            for record in reader:
                if not record or (len(record) == 1 and not record[0].strip()):
                    continue
                yield reader.line_num, [value.strip() for value in record]
        except csv.Error as e:
            logger.debug(f"CSV illisible a la ligne {reader.line_num}: {e}")
            raise MalformedTextError(f"line {reader.line_num}: {e}") from e

    @staticmethod
    def _to_row(header: list[str], values: list[str]) -> RawRow:
        """Associe chaque colonne a la valeur de meme position."""
        row: RawRow = {}
        for position, column in enumerate(header):
            row[column] = values[position] if position < len(values) else ""
        return row
