"""
Commande CLI de recherche de metadonnees (lookup).
"""

import asyncio
from typing import Annotated

import typer

from src.adapters.cli.display import render_movie
from src.adapters.cli.helpers import console, with_container


def lookup(
    query: Annotated[str, typer.Argument(help="Titre a rechercher")],
) -> None:
    """Recherche la fiche d'un film sur OMDb (sans l'ajouter)."""
    asyncio.run(_lookup_async(query))


@with_container(requires_db=False)
async def _lookup_async(container, query: str) -> None:
    service = container.lookup_service()
    if not service.enabled:
        console.print(
            "[yellow]Recherche desactivee:[/yellow] definir CINESHELF_OMDB_API_KEY"
        )
        raise typer.Exit(code=1)

    result = await service.prefill(query)
    if not result.found:
        console.print(f"[yellow]Aucune fiche trouvee:[/yellow] {result.error or query}")
        raise typer.Exit(code=1)
    render_movie(result.movie)
