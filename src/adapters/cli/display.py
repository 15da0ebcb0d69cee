"""
Affichage Rich des entrees du catalogue et des rapports d'import.
"""

from rich.panel import Panel
from rich.table import Table

from src.adapters.cli.helpers import console
from src.core.entities.media import Movie
from src.services.catalog_importer import ImportReport


def render_movie_table(movies: list[Movie], title: str = "Catalogue") -> None:
    """Affiche les entrees sous forme de tableau."""
    table = Table(title=f"{title} ({len(movies)})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Realisateur")
    table.add_column("Genre", style="cyan")
    table.add_column("Format", style="magenta")

    for movie in movies:
        table.add_row(
            movie.id or "-",
            movie.name,
            str(movie.year),
            movie.director or "-",
            movie.genre,
            movie.format.value,
        )
    console.print(table)


def render_movie(movie: Movie) -> None:
    """Affiche la fiche complete d'une entree."""
    lines = [
        f"[bold]{movie.name}[/bold] ({movie.year})",
        f"Realisateur : {movie.director or '-'}",
        f"Acteurs : {', '.join(movie.actors) or '-'}",
        f"Genre : {movie.genre or '-'}",
        f"Format : {movie.format.value}",
        f"Couverture : {movie.cover_url or '-'}",
    ]
    title = f"Film #{movie.id}" if movie.id else "Fiche"
    console.print(Panel("\n".join(lines), title=title, expand=False))


def render_import_report(report: ImportReport, error_preview: int) -> None:
    """Affiche le resume d'un import (premiers messages d'erreur seulement)."""
    summary = report.summary(limit=error_preview)

    console.print("\n[bold]Resume de l'import:[/bold]")
    console.print(f"  [green]{summary.success_count}[/green] film(s) importe(s)")
    if summary.failure_count > 0:
        console.print(f"  [red]{summary.failure_count}[/red] film(s) en echec")
        for error in summary.shown_errors:
            console.print(f"    [red]•[/red] {error}")
        if summary.remaining_errors > 0:
            console.print(
                f"    [red]•[/red] ... et {summary.remaining_errors} autre(s) erreur(s)"
            )
    if report.skipped_lines:
        lines = ", ".join(str(n) for n in report.skipped_lines)
        console.print(
            f"  [yellow]{len(report.skipped_lines)}[/yellow] ligne(s) ignoree(s) "
            f"(nombre de colonnes incorrect): {lines}"
        )
