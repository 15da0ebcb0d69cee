"""
Service d'import en masse du catalogue depuis un export CSV.

Orchestre le parser et le normaliseur ligne par ligne, transmet chaque
entree valide au repository et construit un rapport (compteurs et
messages d'erreur par ligne). Une ligne en echec n'interrompt jamais
l'import: seules les erreurs prealables au parsing (type de fichier,
fichier illisible ou vide) l'annulent.
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from src.core.ports.parser import ITabularParser, MalformedTextError
from src.core.ports.repositories import IMovieRepository
from src.services.normalizer import RowNormalizer
from src.utils.constants import CSV_MIME_TYPE, IMPORT_ERROR_PREVIEW


class ImportAbortedError(Exception):
    """
    Import annule avant le traitement de la moindre ligne.

    Le message est court et destine a l'utilisateur.
    """


class UnsupportedFileTypeError(ImportAbortedError):
    """Le type MIME declare n'est pas text/csv."""

    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__("Invalid file type. Please select a CSV file.")


class UnreadableFileError(ImportAbortedError):
    """Le fichier n'a pas pu etre lu comme du texte."""

    def __init__(self) -> None:
        super().__init__("Failed to read CSV file")


class EmptyImportError(ImportAbortedError):
    """Le fichier ne contient aucune ligne de donnees exploitable."""

    def __init__(self) -> None:
        super().__init__("No valid data found in CSV file")


@dataclass
class ImportSummary:
    """
    Vue presentable d'un rapport d'import.

    Attributs:
        success_count: Lignes importees
        failure_count: Lignes en echec
        shown_errors: Premiers messages d'erreur a afficher
        remaining_errors: Nombre de messages non affiches
    """

    success_count: int
    failure_count: int
    shown_errors: list[str]
    remaining_errors: int

    def to_dict(self) -> dict:
        return {
            "success_count": self.success_count,
            "failure_count": self.failure_count,
            "shown_errors": self.shown_errors,
            "remaining_errors": self.remaining_errors,
        }


@dataclass
class ImportReport:
    """
    Rapport d'un import en masse.

    success_count + failure_count est toujours egal au nombre de lignes
    produites par le parser. Les lignes ecartees par le parser (nombre de
    champs incorrect) ne sont comptees nulle part: leurs numeros de ligne
    sont seulement listes dans skipped_lines.

    Attributs:
        success_count: Lignes inserees dans le catalogue
        failure_count: Lignes rejetees ou dont l'insertion a echoue
        errors: Un message par ligne en echec, dans l'ordre du fichier
        skipped_lines: Numeros de ligne ecartes par le parser
    """

    success_count: int = 0
    failure_count: int = 0
    errors: list[str] = field(default_factory=list)
    skipped_lines: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Nombre de lignes traitees."""
        return self.success_count + self.failure_count

    def record_success(self) -> None:
        self.success_count += 1

    def record_failure(self, message: str) -> None:
        self.failure_count += 1
        self.errors.append(message)

    def summary(self, limit: int = IMPORT_ERROR_PREVIEW) -> ImportSummary:
        """
        Construit la vue presentable du rapport.

        Args:
            limit: Nombre maximum de messages d'erreur affiches

        Returns:
            ImportSummary avec les premiers messages et le nombre restant
        """
        shown = self.errors[:limit]
        return ImportSummary(
            success_count=self.success_count,
            failure_count=self.failure_count,
            shown_errors=shown,
            remaining_errors=len(self.errors) - len(shown),
        )


class CatalogImportService:
    """
    Service d'import en masse du catalogue.

    Le service ne conserve aucun etat entre deux imports: importer deux
    fois le meme fichier produit deux rapports independants et des
    entrees en double (pas de dedoublonnage).

    Attributs injectes:
        movie_repo: Repository du catalogue (insertion uniquement)
        parser: Parser de texte tabulaire
        normalizer: Normaliseur de lignes
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        parser: ITabularParser,
        normalizer: RowNormalizer,
    ) -> None:
        self._movie_repo = movie_repo
        self._parser = parser
        self._normalizer = normalizer

    async def import_file(self, path: Path, content_type: str | None) -> ImportReport:
        """
        Importe un fichier CSV depuis le disque.

        Le type est verifie avant toute lecture. Le fichier est lu en
        entier de maniere asynchrone, puis traite de maniere synchrone.

        Args:
            path: Chemin du fichier
            content_type: Type MIME declare du fichier

        Returns:
            Rapport d'import

        Raises:
            UnsupportedFileTypeError: Si le type n'est pas text/csv
            UnreadableFileError: Si le fichier ne peut pas etre lu ou decode
            EmptyImportError: Si aucune ligne de donnees n'est exploitable
        """
        self._check_content_type(content_type)

        loop = asyncio.get_running_loop()
        try:
            data = await loop.run_in_executor(None, Path(path).read_bytes)
        except OSError as e:
            logger.warning(f"Lecture impossible de {path}: {e}")
            raise UnreadableFileError() from e

        return self.import_text(self._decode(data))

    async def import_bytes(self, data: bytes, content_type: str | None) -> ImportReport:
        """
        Importe le contenu d'un fichier deja recu (upload web).

        Args:
            data: Contenu brut du fichier
            content_type: Type MIME declare du fichier

        Returns:
            Rapport d'import
        """
        self._check_content_type(content_type)
        return self.import_text(self._decode(data))

    def import_text(self, text: str) -> ImportReport:
        """
        Importe un texte CSV deja charge en memoire.

        Chaque ligne est numerotee comme dans le fichier d'origine en
        comptant l'en-tete (premiere ligne de donnees = ligne 2).

        Args:
            text: Contenu complet du fichier

        Returns:
            Rapport d'import

        Raises:
            UnreadableFileError: Si le texte ne peut pas etre decoupe
            EmptyImportError: Si le parser ne produit aucune ligne
        """
        try:
            parsed = self._parser.parse_with_diagnostics(text)
        except MalformedTextError as e:
            logger.warning(f"CSV illisible: {e}")
            raise UnreadableFileError() from e
        if not parsed.rows:
            raise EmptyImportError()

        report = ImportReport(skipped_lines=list(parsed.mismatched_lines))

        for index, row in enumerate(parsed.rows):
            row_number = index + 2
            movie = self._normalizer.normalize(row)
            if movie is None:
                report.record_failure(
                    f"Row {row_number}: Missing required fields (name, year)"
                )
                continue

            try:
                self._movie_repo.insert(movie)
            except Exception as e:
                logger.warning(f"Ligne {row_number}: echec d'insertion de {movie.name!r}: {e}")
                report.record_failure(
                    f'Row {row_number}: Failed to add movie "{movie.name or "Unknown"}"'
                )
                continue

            report.record_success()

        logger.info(
            "Import termine",
            imported=report.success_count,
            failed=report.failure_count,
            skipped_lines=len(report.skipped_lines),
        )
        return report

    @staticmethod
    def _check_content_type(content_type: str | None) -> None:
        if content_type != CSV_MIME_TYPE:
            logger.info(f"Type de fichier refuse: {content_type}")
            raise UnsupportedFileTypeError(content_type)

    @staticmethod
    def _decode(data: bytes) -> str:
        """Decode en UTF-8 (BOM eventuel retire)."""
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise UnreadableFileError() from e
