"""
Commandes CLI de gestion du catalogue (list, show, add, edit, delete, genres).
"""

import asyncio
from dataclasses import replace
from datetime import date
from typing import Annotated, Optional

import typer

from src.adapters.cli.display import render_movie, render_movie_table
from src.adapters.cli.helpers import console, with_container
from src.core.entities.media import Movie, MovieFormat
from src.services.catalog import EntryValidationError


def list_movies(
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Texte recherche (titre, realisateur, acteurs)"),
    ] = "",
    genre: Annotated[
        Optional[list[str]],
        typer.Option("--genre", "-g", help="Filtrer par genre (repetable)"),
    ] = None,
    decade: Annotated[
        Optional[list[str]],
        typer.Option("--decade", "-d", help="Filtrer par decennie, ex: 1990s (repetable)"),
    ] = None,
) -> None:
    """Liste les films du catalogue, avec recherche et filtres."""
    asyncio.run(_list_movies_async(search, genre or [], decade or []))


@with_container()
async def _list_movies_async(
    container, search: str, genres: list[str], decades: list[str]
) -> None:
    catalog = container.catalog_service()
    movies = catalog.search(term=search, genres=genres, decades=decades)
    if not movies:
        console.print("[yellow]Aucun film ne correspond.[/yellow]")
        return
    render_movie_table(movies)


def show(
    movie_id: Annotated[str, typer.Argument(help="ID du film")],
) -> None:
    """Affiche la fiche d'un film."""
    asyncio.run(_show_async(movie_id))


@with_container()
async def _show_async(container, movie_id: str) -> None:
    movie = container.catalog_service().get(movie_id)
    if movie is None:
        console.print(f"[red]Erreur:[/red] Film introuvable: {movie_id}")
        raise typer.Exit(code=1)
    render_movie(movie)


def add(
    name: Annotated[Optional[str], typer.Option("--name", "-n", help="Titre")] = None,
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Annee")] = None,
    director: Annotated[Optional[str], typer.Option("--director", help="Realisateur")] = None,
    actor: Annotated[
        Optional[list[str]],
        typer.Option("--actor", "-a", help="Acteur principal (repetable)"),
    ] = None,
    genre: Annotated[Optional[str], typer.Option("--genre", "-g", help="Genre")] = None,
    movie_format: Annotated[
        MovieFormat,
        typer.Option("--format", "-f", help="Format possede"),
    ] = MovieFormat.DIGITAL,
    cover_url: Annotated[Optional[str], typer.Option("--cover-url", help="URL de la couverture")] = None,
    lookup: Annotated[
        Optional[str],
        typer.Option("--lookup", "-l", help="Pre-remplir la fiche depuis OMDb"),
    ] = None,
) -> None:
    """
    Ajoute un film au catalogue.

    Avec --lookup, la fiche est pre-remplie depuis OMDb; les options
    fournies remplacent les valeurs trouvees.
    """
    overrides = _collect_overrides(name, year, director, actor, genre, movie_format, cover_url)
    asyncio.run(_add_async(overrides, lookup))


@with_container()
async def _add_async(container, overrides: dict, lookup: Optional[str]) -> None:
    draft = Movie(year=date.today().year)
    if lookup:
        result = await container.lookup_service().prefill(lookup)
        if result.found:
            console.print(f"[green]Fiche trouvee:[/green] {result.movie.name}")
        else:
            console.print(
                f"[yellow]Aucune fiche trouvee[/yellow] ({result.error or 'Movie not found'}), "
                "saisie manuelle."
            )
        draft = result.movie or draft

    movie = replace(draft, **overrides)
    try:
        stored = container.catalog_service().add(movie)
    except EntryValidationError as e:
        console.print(f"[red]Informations manquantes:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]{stored.name}[/green] a ete ajoute au catalogue.")
    render_movie(stored)


def edit(
    movie_id: Annotated[str, typer.Argument(help="ID du film")],
    name: Annotated[Optional[str], typer.Option("--name", "-n", help="Titre")] = None,
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Annee")] = None,
    director: Annotated[Optional[str], typer.Option("--director", help="Realisateur")] = None,
    actor: Annotated[
        Optional[list[str]],
        typer.Option("--actor", "-a", help="Acteur principal (repetable, remplace la liste)"),
    ] = None,
    genre: Annotated[Optional[str], typer.Option("--genre", "-g", help="Genre")] = None,
    movie_format: Annotated[
        Optional[MovieFormat],
        typer.Option("--format", "-f", help="Format possede"),
    ] = None,
    cover_url: Annotated[Optional[str], typer.Option("--cover-url", help="URL de la couverture")] = None,
) -> None:
    """Modifie un film existant (seules les options fournies changent)."""
    overrides = _collect_overrides(name, year, director, actor, genre, movie_format, cover_url)
    asyncio.run(_edit_async(movie_id, overrides))


@with_container()
async def _edit_async(container, movie_id: str, overrides: dict) -> None:
    catalog = container.catalog_service()
    existing = catalog.get(movie_id)
    if existing is None:
        console.print(f"[red]Erreur:[/red] Film introuvable: {movie_id}")
        raise typer.Exit(code=1)

    try:
        updated = catalog.update(movie_id, replace(existing, **overrides))
    except EntryValidationError as e:
        console.print(f"[red]Informations manquantes:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]{updated.name}[/green] a ete mis a jour.")
    render_movie(updated)


def delete(
    movie_id: Annotated[str, typer.Argument(help="ID du film")],
    yes: Annotated[bool, typer.Option("--yes", help="Ne pas demander de confirmation")] = False,
) -> None:
    """Supprime un film du catalogue."""
    if not yes and not typer.confirm("Supprimer ce film du catalogue ?"):
        raise typer.Abort()
    asyncio.run(_delete_async(movie_id))


@with_container()
async def _delete_async(container, movie_id: str) -> None:
    if not container.catalog_service().delete(movie_id):
        console.print(f"[red]Erreur:[/red] Film introuvable: {movie_id}")
        raise typer.Exit(code=1)
    console.print(f"Film {movie_id} supprime.")


def genres() -> None:
    """Affiche les genres et decennies presents dans le catalogue."""
    asyncio.run(_genres_async())


@with_container()
async def _genres_async(container) -> None:
    catalog = container.catalog_service()
    console.print("[bold]Genres:[/bold] " + (", ".join(catalog.available_genres()) or "-"))
    console.print("[bold]Decennies:[/bold] " + (", ".join(catalog.available_decades()) or "-"))


def _collect_overrides(
    name: Optional[str],
    year: Optional[int],
    director: Optional[str],
    actors: Optional[list[str]],
    genre: Optional[str],
    movie_format: Optional[MovieFormat],
    cover_url: Optional[str],
) -> dict:
    """Retient uniquement les options fournies sur la ligne de commande."""
    values = {
        "name": name,
        "year": year,
        "director": director,
        "actors": tuple(actors) if actors else None,
        "genre": genre,
        "format": movie_format,
        "cover_url": cover_url,
    }
    return {key: value for key, value in values.items() if value is not None}
