"""
Implementation SQLModel du repository BookStore.

La librairie est persistee d'un bloc : la liste des livres est serialisee
en JSON et reecrite a chaque sauvegarde (pas de persistance par livre).
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore_broker.core.entities import Book, BookStore
from bookstore_broker.core.ports.repositories import IBookStoreRepository
from bookstore_broker.infrastructure.persistence.models import BookStoreModel


class SQLModelBookStoreRepository(IBookStoreRepository):
    """
    Repository SQLModel pour les librairies.

    Implemente IBookStoreRepository ; les livres voyagent avec leur librairie.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialise le repository avec une fabrique de sessions.

        Args :
            session_factory : Fabrique de sessions AsyncSession
        """
        self._session_factory = session_factory

    def _to_entity(self, model: BookStoreModel) -> BookStore:
        """
        Convertit un modele DB en entite domaine.

        Retourne :
            La librairie avec ses livres dans l'ordre d'ajout
        """
        return BookStore(
            id=model.id,
            books=[Book(**book) for book in model.books],
        )

    def _to_model(self, entity: BookStore) -> BookStoreModel:
        return BookStoreModel(
            id=entity.id,
            books_json=json.dumps([asdict(book) for book in entity.books]),
            updated_at=datetime.now(timezone.utc),
        )

    async def exists(self, store_id: str) -> bool:
        async with self._session_factory() as session:
            return await session.get(BookStoreModel, store_id) is not None

    async def find_by_id(self, store_id: str) -> Optional[BookStore]:
        async with self._session_factory() as session:
            model = await session.get(BookStoreModel, store_id)
            return self._to_entity(model) if model else None

    async def save(self, store: BookStore) -> BookStore:
        async with self._session_factory() as session:
            model = await session.merge(self._to_model(store))
            await session.commit()
            return self._to_entity(model)

    async def delete(self, store_id: str) -> None:
        async with self._session_factory() as session:
            model = await session.get(BookStoreModel, store_id)
            if model is not None:
                await session.delete(model)
                await session.commit()

    async def count(self) -> int:
        async with self._session_factory() as session:
            result = await session.exec(select(func.count()).select_from(BookStoreModel))
            return result.one()
