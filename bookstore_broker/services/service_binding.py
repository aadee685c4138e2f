"""
Service de cycle de vie des bindings.

Un binding émet des identifiants pour un utilisateur dédié, dont le nom est
l'ID du binding et dont les autorités donnent un accès complet à la seule
librairie de l'instance. Les identifiants sont émis une fois : une seconde
création retourne ceux déjà stockés.
"""

from typing import Any

from loguru import logger

from bookstore_broker.core.entities import ServiceBinding, User
from bookstore_broker.core.exceptions import ServiceBindingDoesNotExistError
from bookstore_broker.core.ports.repositories import IServiceBindingRepository
from bookstore_broker.core.value_objects import (
    CreateServiceInstanceBindingRequest,
    CreateServiceInstanceBindingResponse,
    DeleteServiceInstanceBindingRequest,
    GetServiceInstanceBindingRequest,
    GetServiceInstanceBindingResponse,
    SecurityAuthorities,
)
from bookstore_broker.services.user import UserService
from bookstore_broker.utils.constants import (
    BOOK_STORES_PATH,
    PASSWORD_KEY,
    URI_KEY,
    USERNAME_KEY,
)
from bookstore_broker.utils.keyed_lock import KeyedLock


def build_uri(base_url: str, *segments: str) -> str:
    """Ajoute des segments de chemin à une URL de base (un seul '/' entre chaque)."""
    return "/".join([base_url.rstrip("/"), *segments])


class ServiceInstanceBindingService:
    """
    Gestionnaire du cycle de vie des bindings.

    Doit être partagé (singleton) par toutes les requêtes, comme
    ServiceInstanceService.
    """

    def __init__(
        self,
        binding_repo: IServiceBindingRepository,
        user_service: UserService,
        base_url: str,
    ) -> None:
        """
        Initialise le service.

        Args :
            binding_repo : Repository des bindings
            user_service : Service des utilisateurs
            base_url : Adresse externe du déploiement
        """
        self._binding_repo = binding_repo
        self._user_service = user_service
        self._base_url = base_url
        self._locks = KeyedLock()

    async def create_service_instance_binding(
        self, request: CreateServiceInstanceBindingRequest
    ) -> CreateServiceInstanceBindingResponse:
        """
        Crée un binding et son utilisateur, ou retourne le binding existant.

        Le mot de passe renvoyé est le mot de passe en clair : c'est la seule
        occasion où il est communiqué.
        """
        binding_id = request.binding_id

        async with self._locks.hold(binding_id):
            existing = await self._binding_repo.find_by_id(binding_id)
            if existing is not None:
                logger.info("Binding déjà existant", binding_id=binding_id)
                return CreateServiceInstanceBindingResponse(
                    binding_existed=True,
                    credentials=existing.credentials,
                )

            user = await self._create_user(request)
            credentials = self._build_credentials(request.service_instance_id, user)
            try:
                await self._binding_repo.save(
                    ServiceBinding(
                        binding_id=binding_id,
                        parameters=dict(request.parameters),
                        credentials=credentials,
                    )
                )
            except BaseException:
                # Annulation comprise : un utilisateur sans binding bloquerait
                # toute nouvelle tentative avec ce nom
                await self._discard_user(binding_id)
                raise

        logger.info(
            "Binding créé",
            binding_id=binding_id,
            instance_id=request.service_instance_id,
        )
        return CreateServiceInstanceBindingResponse(
            binding_existed=False,
            credentials=credentials,
        )

    async def get_service_instance_binding(
        self, request: GetServiceInstanceBindingRequest
    ) -> GetServiceInstanceBindingResponse:
        """
        Retourne les paramètres et identifiants d'un binding.

        Raises :
            ServiceBindingDoesNotExistError : Si le binding n'existe pas
        """
        binding = await self._binding_repo.find_by_id(request.binding_id)
        if binding is None:
            raise ServiceBindingDoesNotExistError(request.binding_id)

        return GetServiceInstanceBindingResponse(
            parameters=binding.parameters,
            credentials=binding.credentials,
        )

    async def delete_service_instance_binding(
        self, request: DeleteServiceInstanceBindingRequest
    ) -> None:
        """
        Supprime un binding puis son utilisateur.

        Si la suppression de l'utilisateur échoue, l'enregistrement du binding
        est restauré avant de propager l'erreur : une nouvelle tentative reste
        possible.

        Raises :
            ServiceBindingDoesNotExistError : Si le binding n'existe pas
        """
        binding_id = request.binding_id

        async with self._locks.hold(binding_id):
            binding = await self._binding_repo.find_by_id(binding_id)
            if binding is None:
                raise ServiceBindingDoesNotExistError(binding_id)

            await self._binding_repo.delete(binding_id)
            try:
                await self._user_service.delete_user(binding_id)
            except Exception:
                logger.warning("Restauration du binding", binding_id=binding_id)
                await self._binding_repo.save(binding)
                raise

        logger.info("Binding supprimé", binding_id=binding_id)

    async def _discard_user(self, binding_id: str) -> None:
        """Supprime l'utilisateur d'un binding non enregistré sans masquer l'erreur d'origine."""
        try:
            await self._user_service.delete_user(binding_id)
        except Exception:
            logger.exception("Utilisateur orphelin non supprimé", binding_id=binding_id)

    async def _create_user(self, request: CreateServiceInstanceBindingRequest) -> User:
        return await self._user_service.create_user(
            request.binding_id,
            SecurityAuthorities.FULL_ACCESS,
            SecurityAuthorities.for_book_store(request.service_instance_id),
        )

    def _build_credentials(self, instance_id: str, user: User) -> dict[str, Any]:
        return {
            URI_KEY: build_uri(self._base_url, BOOK_STORES_PATH, instance_id),
            USERNAME_KEY: user.username,
            PASSWORD_KEY: user.password,
        }
