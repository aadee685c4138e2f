"""
Implementation SQLModel du repository ServiceBinding.
"""

import json
from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore_broker.core.entities import ServiceBinding
from bookstore_broker.core.ports.repositories import IServiceBindingRepository
from bookstore_broker.infrastructure.persistence.models import ServiceBindingModel


class SQLModelServiceBindingRepository(IServiceBindingRepository):
    """Repository SQLModel pour les bindings (parametres et identifiants en JSON)."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    def _to_entity(self, model: ServiceBindingModel) -> ServiceBinding:
        return ServiceBinding(
            binding_id=model.binding_id,
            parameters=model.parameters,
            credentials=model.credentials,
        )

    def _to_model(self, entity: ServiceBinding) -> ServiceBindingModel:
        return ServiceBindingModel(
            binding_id=entity.binding_id,
            parameters_json=json.dumps(entity.parameters or {}),
            credentials_json=json.dumps(entity.credentials or {}),
        )

    async def exists(self, binding_id: str) -> bool:
        async with self._session_factory() as session:
            return await session.get(ServiceBindingModel, binding_id) is not None

    async def find_by_id(self, binding_id: str) -> Optional[ServiceBinding]:
        async with self._session_factory() as session:
            model = await session.get(ServiceBindingModel, binding_id)
            return self._to_entity(model) if model else None

    async def save(self, binding: ServiceBinding) -> ServiceBinding:
        async with self._session_factory() as session:
            model = await session.merge(self._to_model(binding))
            await session.commit()
            return self._to_entity(model)

    async def delete(self, binding_id: str) -> None:
        async with self._session_factory() as session:
            model = await session.get(ServiceBindingModel, binding_id)
            if model is not None:
                await session.delete(model)
                await session.commit()

    async def count(self) -> int:
        async with self._session_factory() as session:
            result = await session.exec(
                select(func.count()).select_from(ServiceBindingModel)
            )
            return result.one()
