"""
Service de cycle de vie des instances de service.

Chaque instance est adossée à une librairie de même ID. Cycle de vie :
absente -> provisionnement -> présente -> déprovisionnement -> absente.

La création est idempotente (une instance existante est un succès sans
effet) ; la suppression d'une instance absente est une erreur.
La vérification d'existence et l'écriture qui suit sont faites sous un
verrou par ID d'instance.
"""

from typing import Optional

from loguru import logger

from bookstore_broker.core.entities import ServiceInstance
from bookstore_broker.core.exceptions import ServiceInstanceDoesNotExistError
from bookstore_broker.core.ports.repositories import IServiceInstanceRepository
from bookstore_broker.core.value_objects import (
    CreateServiceInstanceRequest,
    CreateServiceInstanceResponse,
    DeleteServiceInstanceRequest,
    GetLastServiceOperationRequest,
    GetServiceInstanceRequest,
    GetServiceInstanceResponse,
    UpdateServiceInstanceRequest,
)
from bookstore_broker.services.bookstore import BookStoreService
from bookstore_broker.utils.keyed_lock import KeyedLock


class ServiceInstanceService:
    """
    Gestionnaire du cycle de vie des instances.

    Doit être partagé (singleton) par toutes les requêtes : ses verrous
    n'excluent que les appels passant par la même instance du service.
    """

    def __init__(
        self,
        store_service: BookStoreService,
        instance_repo: IServiceInstanceRepository,
    ) -> None:
        """
        Initialise le service.

        Args :
            store_service : Service des librairies
            instance_repo : Repository des instances
        """
        self._store_service = store_service
        self._instance_repo = instance_repo
        self._locks = KeyedLock()

    async def create_service_instance(
        self, request: CreateServiceInstanceRequest
    ) -> CreateServiceInstanceResponse:
        """
        Provisionne une instance et sa librairie.

        Si l'instance existe déjà, retourne instance_existed=True sans
        revalider les paramètres. Sinon la librairie est créée AVANT
        l'enregistrement de l'instance : un échec de création n'enregistre rien.
        """
        instance_id = request.service_instance_id

        async with self._locks.hold(instance_id):
            if await self._instance_repo.exists(instance_id):
                logger.info("Instance déjà existante", instance_id=instance_id)
                return CreateServiceInstanceResponse(instance_existed=True)

            await self._store_service.create_book_store(instance_id)
            await self._instance_repo.save(
                ServiceInstance(
                    instance_id=instance_id,
                    service_definition_id=request.service_definition_id,
                    plan_id=request.plan_id,
                    parameters=dict(request.parameters),
                )
            )

        logger.info(
            "Instance créée",
            instance_id=instance_id,
            plan_id=request.plan_id,
        )
        return CreateServiceInstanceResponse(instance_existed=False)

    async def get_service_instance(
        self, request: GetServiceInstanceRequest
    ) -> GetServiceInstanceResponse:
        """
        Retourne la définition, le plan et les paramètres d'une instance.

        Raises :
            ServiceInstanceDoesNotExistError : Si l'instance n'existe pas
        """
        instance_id = request.service_instance_id
        instance = await self._instance_repo.find_by_id(instance_id)
        if instance is None:
            raise ServiceInstanceDoesNotExistError(instance_id)

        return GetServiceInstanceResponse(
            service_definition_id=instance.service_definition_id,
            plan_id=instance.plan_id,
            parameters=instance.parameters,
        )

    async def delete_service_instance(
        self, request: DeleteServiceInstanceRequest
    ) -> None:
        """
        Déprovisionne une instance : librairie d'abord, enregistrement ensuite.

        Un échec de suppression de la librairie laisse l'enregistrement en place.

        Raises :
            ServiceInstanceDoesNotExistError : Si l'instance n'existe pas
        """
        instance_id = request.service_instance_id

        async with self._locks.hold(instance_id):
            if not await self._instance_repo.exists(instance_id):
                raise ServiceInstanceDoesNotExistError(instance_id)

            await self._store_service.delete_book_store(instance_id)
            await self._instance_repo.delete(instance_id)

        logger.info("Instance supprimée", instance_id=instance_id)

    async def update_service_instance(
        self, request: UpdateServiceInstanceRequest
    ) -> None:
        """Mise à jour non supportée : sans effet."""
        logger.debug("Mise à jour ignorée", instance_id=request.service_instance_id)
        return None

    async def get_last_operation(
        self, request: GetLastServiceOperationRequest
    ) -> Optional[str]:
        """Pas d'opération asynchrone : aucune dernière opération à rapporter."""
        return None
