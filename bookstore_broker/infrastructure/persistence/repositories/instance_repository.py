"""
Implementation SQLModel du repository ServiceInstance.

Implemente l'interface IServiceInstanceRepository pour la persistance des
instances de service.
"""

import json
from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore_broker.core.entities import ServiceInstance
from bookstore_broker.core.ports.repositories import IServiceInstanceRepository
from bookstore_broker.infrastructure.persistence.models import ServiceInstanceModel


class SQLModelServiceInstanceRepository(IServiceInstanceRepository):
    """
    Repository SQLModel pour les instances de service.

    Implemente IServiceInstanceRepository avec conversion bidirectionnelle
    entre l'entite ServiceInstance (domaine) et ServiceInstanceModel (persistance).
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialise le repository avec une fabrique de sessions.

        Args :
            session_factory : Fabrique de sessions AsyncSession
        """
        self._session_factory = session_factory

    def _to_entity(self, model: ServiceInstanceModel) -> ServiceInstance:
        return ServiceInstance(
            instance_id=model.instance_id,
            service_definition_id=model.service_definition_id,
            plan_id=model.plan_id,
            parameters=model.parameters,
        )

    def _to_model(self, entity: ServiceInstance) -> ServiceInstanceModel:
        return ServiceInstanceModel(
            instance_id=entity.instance_id,
            service_definition_id=entity.service_definition_id,
            plan_id=entity.plan_id,
            parameters_json=json.dumps(entity.parameters or {}),
        )

    async def exists(self, instance_id: str) -> bool:
        async with self._session_factory() as session:
            return await session.get(ServiceInstanceModel, instance_id) is not None

    async def find_by_id(self, instance_id: str) -> Optional[ServiceInstance]:
        async with self._session_factory() as session:
            model = await session.get(ServiceInstanceModel, instance_id)
            return self._to_entity(model) if model else None

    async def save(self, instance: ServiceInstance) -> ServiceInstance:
        async with self._session_factory() as session:
            model = await session.merge(self._to_model(instance))
            await session.commit()
            return self._to_entity(model)

    async def delete(self, instance_id: str) -> None:
        async with self._session_factory() as session:
            model = await session.get(ServiceInstanceModel, instance_id)
            if model is not None:
                await session.delete(model)
                await session.commit()

    async def count(self) -> int:
        async with self._session_factory() as session:
            result = await session.exec(
                select(func.count()).select_from(ServiceInstanceModel)
            )
            return result.one()
