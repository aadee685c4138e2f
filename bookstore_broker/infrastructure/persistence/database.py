"""
Configuration de la base de donnees pour le broker.

Ce module fournit :
- Engine asynchrone SQLAlchemy (SQLite via aiosqlite par defaut)
- Fabrique de sessions AsyncSession SQLModel
- Fonction d'initialisation des tables

La base de donnees est configuree via BOOKSTORE_DATABASE_URL
(defaut: sqlite+aiosqlite:///bookstore.db).
"""

from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession


def create_engine(database_url: str) -> AsyncEngine:
    """
    Cree l'engine asynchrone pour l'URL donnee.

    Pour un fichier SQLite, le repertoire parent est cree si necessaire.
    Une base SQLite en memoire utilise une connexion unique partagee
    (StaticPool), sans quoi chaque session verrait une base vide.
    """
    url = make_url(database_url)
    kwargs: dict = {"echo": False}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(exist_ok=True, parents=True)

    return create_async_engine(database_url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Fabrique de sessions SQLModel liees a l'engine.

    Utilisation :
        async with session_factory() as session:
            # operations
            await session.commit()

    expire_on_commit est desactive : les modeles restent lisibles apres commit.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Les modeles sont importes ici pour enregistrer leurs metadonnees
    dans SQLModel.metadata sans import circulaire.

    Doit etre appelee une fois au demarrage de l'application.
    """
    from bookstore_broker.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
