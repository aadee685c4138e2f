"""
Point d'entrée CLI du broker.

Configure le logging et fournit les commandes d'administration et de
lancement du serveur.
"""

import asyncio
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .infrastructure.persistence.database import init_db
from .logging_config import configure_logging

app = typer.Typer(
    name="bookstore-broker",
    help="Service broker de librairies",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.callback()
def main_callback() -> None:
    """Bookstore Broker - provisionnement de librairies à la demande."""
    settings = get_config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()

    table = Table(title="Configuration du broker")
    table.add_column("Paramètre", style="cyan")
    table.add_column("Valeur")
    table.add_row("URL de base", config.base_url)
    table.add_row("Base de données", config.database_url)
    table.add_row("Administrateur", config.admin_username)
    table.add_row("Longueur mots de passe", str(config.password_length))
    table.add_row("Service", f"{config.service_name} ({config.service_id})")
    table.add_row("Plan", f"{config.plan_name} ({config.plan_id})")
    table.add_row("Niveau de log", config.log_level)
    console.print(table)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Bookstore Broker v{__version__}")


async def _init_db_async() -> bool:
    engine = container.engine()
    try:
        await init_db(engine)
        return await container.user_service().initialize_users()
    finally:
        await engine.dispose()


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables et l'administrateur si la base est vide."""
    created = asyncio.run(_init_db_async())
    if created:
        typer.echo(f"Administrateur créé : {get_config().admin_username}")
    else:
        typer.echo("Base déjà initialisée")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8080,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web du broker."""
    import uvicorn

    logger.info("Démarrage du serveur", host=host, port=port)
    uvicorn.run("bookstore_broker.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
