"""
Commande CLI d'import en masse du catalogue (import).
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer

from src.adapters.cli.display import render_import_report
from src.adapters.cli.helpers import (
    console,
    guess_content_type,
    suppress_loguru,
    with_container,
)
from src.adapters.csv.tabular_parser import CsvDialect, TabularParser
from src.services.catalog_importer import ImportAbortedError


def import_catalog(
    csv_file: Annotated[
        Path,
        typer.Argument(help="Export CSV a importer"),
    ],
    content_type: Annotated[
        Optional[str],
        typer.Option(
            "--content-type",
            help="Type MIME declare (deduit de l'extension par defaut)",
        ),
    ] = None,
    dialect: Annotated[
        Optional[CsvDialect],
        typer.Option(
            "--dialect",
            help="Grammaire CSV (minimal ou standard), surcharge la configuration",
        ),
    ] = None,
) -> None:
    """
    Importe des films depuis un export CSV.

    Colonnes requises: name/title et year. Colonnes optionnelles: director,
    genre, actors (separes par virgule ou |), format (Digital, DVD, Blu-ray),
    coverUrl. La premiere ligne doit contenir les en-tetes.
    """
    asyncio.run(_import_catalog_async(csv_file, content_type, dialect))


@with_container()
async def _import_catalog_async(
    container,
    csv_file: Path,
    content_type: Optional[str],
    dialect: Optional[CsvDialect],
) -> None:
    """Implementation async de la commande import."""
    config = container.config()

    if content_type is None:
        content_type = guess_content_type(csv_file)

    if dialect is not None:
        importer = container.import_service(parser=TabularParser(dialect=dialect))
    else:
        importer = container.import_service()

    console.print(f"[bold cyan]Import du catalogue[/bold cyan]: {csv_file}\n")

    try:
        with suppress_loguru(), console.status("[cyan]Import en cours..."):
            report = await importer.import_file(csv_file, content_type)
    except ImportAbortedError as e:
        console.print(f"[red]Import impossible:[/red] {e}")
        raise typer.Exit(code=1)

    render_import_report(report, config.import_error_preview)
