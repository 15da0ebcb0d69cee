"""
Point d'entrée CLI de CineShelf.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    add,
    delete,
    edit,
    genres,
    import_catalog,
    list_movies,
    lookup,
    show,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="cineshelf",
    help="Gestion d'un catalogue personnel de films",
)
container = Container()


# Note: "import" et "list" masquent des noms Python, donc name= explicite
app.command(name="import")(import_catalog)
app.command(name="list")(list_movies)
app.command()(show)
app.command()(add)
app.command()(edit)
app.command()(delete)
app.command()(genres)
app.command()(lookup)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"API OMDb : {'activée' if config.lookup_enabled else 'désactivée'}")
    typer.echo(f"Dialecte CSV : {config.csv_dialect}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineShelf v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance l'API web CineShelf."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    container.database.init()

    logger.info("Démarrage de CineShelf", version=__version__)

    app()


if __name__ == "__main__":
    main()
