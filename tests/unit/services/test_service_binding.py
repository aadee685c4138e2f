"""
Tests pour ServiceInstanceBindingService.

Le repository des bindings et le service utilisateur sont des mocks.
"""

import asyncio
from unittest.mock import AsyncMock, call

import pytest

from bookstore_broker.core.entities import ServiceBinding, User
from bookstore_broker.core.exceptions import ServiceBindingDoesNotExistError
from bookstore_broker.core.ports.repositories import IServiceBindingRepository
from bookstore_broker.core.value_objects import (
    CreateServiceInstanceBindingRequest,
    DeleteServiceInstanceBindingRequest,
    GetServiceInstanceBindingRequest,
)
from bookstore_broker.services.service_binding import (
    ServiceInstanceBindingService,
    build_uri,
)
from bookstore_broker.services.user import UserService

SERVICE_INSTANCE_ID = "instance-id"
SERVICE_BINDING_ID = "binding-id"
BASE_URL = "https://broker.example.com"


@pytest.fixture
def repository() -> AsyncMock:
    return AsyncMock(spec=IServiceBindingRepository)


@pytest.fixture
def user_service() -> AsyncMock:
    """Mock du service utilisateur retournant un mot de passe en clair."""
    mock = AsyncMock(spec=UserService)
    mock.create_user.return_value = User(
        id=1,
        username=SERVICE_BINDING_ID,
        password="password",
        authorities=("FULL_ACCESS", "BOOK_STORE_ID_" + SERVICE_INSTANCE_ID),
    )
    return mock


@pytest.fixture
def service(repository, user_service) -> ServiceInstanceBindingService:
    return ServiceInstanceBindingService(
        binding_repo=repository,
        user_service=user_service,
        base_url=BASE_URL,
    )


def _create_request(**parameters) -> CreateServiceInstanceBindingRequest:
    return CreateServiceInstanceBindingRequest(
        binding_id=SERVICE_BINDING_ID,
        service_instance_id=SERVICE_INSTANCE_ID,
        parameters=parameters,
    )


class TestBuildUri:
    """Tests de build_uri."""

    def test_appends_segments(self):
        assert build_uri(BASE_URL, "bookstores", "i1") == f"{BASE_URL}/bookstores/i1"

    def test_no_double_slash(self):
        assert build_uri(BASE_URL + "/", "bookstores", "i1") == f"{BASE_URL}/bookstores/i1"


class TestCreateServiceInstanceBinding:
    """Tests de create_service_instance_binding."""

    @pytest.mark.asyncio
    async def test_when_binding_exists(self, service, repository, user_service):
        """Binding existant : identifiants stockes, aucun nouvel utilisateur."""
        credentials = {"uri": "u", "username": "n", "password": "p"}
        repository.find_by_id.return_value = ServiceBinding(
            binding_id=SERVICE_BINDING_ID,
            credentials=credentials,
        )

        response = await service.create_service_instance_binding(_create_request())

        assert response.binding_existed is True
        assert response.credentials == credentials
        user_service.create_user.assert_not_called()
        repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_when_binding_does_not_exist(self, service, repository, user_service):
        repository.find_by_id.return_value = None

        response = await service.create_service_instance_binding(
            _create_request(key="value")
        )

        assert response.binding_existed is False
        assert response.credentials == {
            "uri": f"{BASE_URL}/bookstores/{SERVICE_INSTANCE_ID}",
            "username": SERVICE_BINDING_ID,
            "password": "password",
        }
        user_service.create_user.assert_awaited_once_with(
            SERVICE_BINDING_ID,
            "FULL_ACCESS",
            "BOOK_STORE_ID_" + SERVICE_INSTANCE_ID,
        )
        repository.save.assert_awaited_once_with(
            ServiceBinding(
                binding_id=SERVICE_BINDING_ID,
                parameters={"key": "value"},
                credentials=response.credentials,
            )
        )

    @pytest.mark.asyncio
    async def test_credentials_keys(self, service, repository):
        repository.find_by_id.return_value = None

        response = await service.create_service_instance_binding(_create_request())

        assert set(response.credentials) == {"uri", "username", "password"}

    @pytest.mark.asyncio
    async def test_save_failure_deletes_user(self, service, repository, user_service):
        """Un echec d'enregistrement supprime l'utilisateur cree puis propage."""
        repository.find_by_id.return_value = None
        repository.save.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError, match="db down"):
            await service.create_service_instance_binding(_create_request())

        user_service.delete_user.assert_awaited_once_with(SERVICE_BINDING_ID)

    @pytest.mark.asyncio
    async def test_cancelled_save_deletes_user(self, service, repository, user_service):
        """Une requete abandonnee pendant l'enregistrement ne laisse pas d'utilisateur."""
        repository.find_by_id.return_value = None
        repository.save.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await service.create_service_instance_binding(_create_request())

        user_service.delete_user.assert_awaited_once_with(SERVICE_BINDING_ID)

    @pytest.mark.asyncio
    async def test_cleanup_failure_keeps_save_error(self, service, repository, user_service):
        repository.find_by_id.return_value = None
        repository.save.side_effect = RuntimeError("db down")
        user_service.delete_user.side_effect = RuntimeError("users down")

        with pytest.raises(RuntimeError, match="db down"):
            await service.create_service_instance_binding(_create_request())

    @pytest.mark.asyncio
    async def test_user_failure_saves_nothing(self, service, repository, user_service):
        repository.find_by_id.return_value = None
        user_service.create_user.side_effect = RuntimeError("hash failed")

        with pytest.raises(RuntimeError):
            await service.create_service_instance_binding(_create_request())

        repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_creates_issue_one_user(self, service, repository, user_service):
        """Deux creations concurrentes : un seul utilisateur, memes identifiants."""
        stored: dict[str, ServiceBinding] = {}

        async def find_by_id(binding_id):
            await asyncio.sleep(0)
            return stored.get(binding_id)

        async def save(binding):
            await asyncio.sleep(0)
            stored[binding.binding_id] = binding
            return binding

        repository.find_by_id.side_effect = find_by_id
        repository.save.side_effect = save

        first, second = await asyncio.gather(
            service.create_service_instance_binding(_create_request()),
            service.create_service_instance_binding(_create_request()),
        )

        assert first.credentials == second.credentials
        assert {first.binding_existed, second.binding_existed} == {True, False}
        user_service.create_user.assert_awaited_once()


class TestGetServiceInstanceBinding:
    """Tests de get_service_instance_binding."""

    @pytest.mark.asyncio
    async def test_when_binding_exists(self, service, repository):
        repository.find_by_id.return_value = ServiceBinding(
            binding_id=SERVICE_BINDING_ID,
            parameters={"key": "value"},
            credentials={"username": SERVICE_BINDING_ID},
        )

        response = await service.get_service_instance_binding(
            GetServiceInstanceBindingRequest(SERVICE_INSTANCE_ID, SERVICE_BINDING_ID)
        )

        assert response.parameters == {"key": "value"}
        assert response.credentials == {"username": SERVICE_BINDING_ID}

    @pytest.mark.asyncio
    async def test_when_binding_does_not_exist(self, service, repository):
        repository.find_by_id.return_value = None

        with pytest.raises(ServiceBindingDoesNotExistError) as exc_info:
            await service.get_service_instance_binding(
                GetServiceInstanceBindingRequest(SERVICE_INSTANCE_ID, SERVICE_BINDING_ID)
            )

        assert exc_info.value.binding_id == SERVICE_BINDING_ID


class TestDeleteServiceInstanceBinding:
    """Tests de delete_service_instance_binding."""

    @pytest.fixture
    def existing(self, repository) -> ServiceBinding:
        binding = ServiceBinding(binding_id=SERVICE_BINDING_ID, credentials={"a": 1})
        repository.find_by_id.return_value = binding
        return binding

    @pytest.mark.asyncio
    async def test_when_binding_exists(self, service, repository, user_service, existing):
        """Suppression de l'enregistrement puis de l'utilisateur."""
        manager = AsyncMock()
        manager.attach_mock(repository.delete, "delete")
        manager.attach_mock(user_service.delete_user, "delete_user")

        await service.delete_service_instance_binding(
            DeleteServiceInstanceBindingRequest(SERVICE_INSTANCE_ID, SERVICE_BINDING_ID)
        )

        assert manager.mock_calls == [
            call.delete(SERVICE_BINDING_ID),
            call.delete_user(SERVICE_BINDING_ID),
        ]

    @pytest.mark.asyncio
    async def test_when_binding_does_not_exist(self, service, repository, user_service):
        repository.find_by_id.return_value = None

        with pytest.raises(ServiceBindingDoesNotExistError):
            await service.delete_service_instance_binding(
                DeleteServiceInstanceBindingRequest(SERVICE_INSTANCE_ID, SERVICE_BINDING_ID)
            )

        repository.delete.assert_not_called()
        user_service.delete_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_user_failure_restores_binding(
        self, service, repository, user_service, existing
    ):
        """Echec de suppression de l'utilisateur : binding restaure, erreur propagee."""
        user_service.delete_user.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError, match="db down"):
            await service.delete_service_instance_binding(
                DeleteServiceInstanceBindingRequest(SERVICE_INSTANCE_ID, SERVICE_BINDING_ID)
            )

        repository.delete.assert_awaited_once_with(SERVICE_BINDING_ID)
        repository.save.assert_awaited_once_with(existing)
