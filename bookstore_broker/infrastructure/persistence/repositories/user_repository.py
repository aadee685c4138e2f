"""
Implementation SQLModel du repository User.

Le nom d'utilisateur est protege par un index unique : sauvegarder un
nouvel utilisateur sous un nom deja pris leve une IntegrityError SQLAlchemy,
propagee telle quelle.
"""

import json
from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore_broker.core.entities import User
from bookstore_broker.core.ports.repositories import IUserRepository
from bookstore_broker.infrastructure.persistence.models import UserModel


class SQLModelUserRepository(IUserRepository):
    """Repository SQLModel pour les utilisateurs."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            password=model.password,
            authorities=tuple(model.authorities),
        )

    def _to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            username=entity.username,
            password=entity.password,
            authorities_json=json.dumps(list(entity.authorities)),
        )

    async def exists(self, user_id: int) -> bool:
        async with self._session_factory() as session:
            return await session.get(UserModel, user_id) is not None

    async def find_by_id(self, user_id: int) -> Optional[User]:
        async with self._session_factory() as session:
            model = await session.get(UserModel, user_id)
            return self._to_entity(model) if model else None

    async def find_by_username(self, username: str) -> Optional[User]:
        async with self._session_factory() as session:
            result = await session.exec(
                select(UserModel).where(UserModel.username == username)
            )
            model = result.first()
            return self._to_entity(model) if model else None

    async def save(self, user: User) -> User:
        async with self._session_factory() as session:
            model = self._to_model(user)
            if user.id is None:
                session.add(model)
            else:
                model = await session.merge(model)
            await session.commit()
            await session.refresh(model)
            return self._to_entity(model)

    async def delete(self, user_id: int) -> None:
        async with self._session_factory() as session:
            model = await session.get(UserModel, user_id)
            if model is not None:
                await session.delete(model)
                await session.commit()

    async def count(self) -> int:
        async with self._session_factory() as session:
            result = await session.exec(select(func.count()).select_from(UserModel))
            return result.one()
