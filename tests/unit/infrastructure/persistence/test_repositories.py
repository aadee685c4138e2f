"""
Tests des repositories SQLModel asynchrones sur une base SQLite en memoire.
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from bookstore_broker.core.entities import (
    Book,
    BookStore,
    ServiceBinding,
    ServiceInstance,
    User,
)
from bookstore_broker.infrastructure.persistence.models import (
    BookStoreModel,
    ServiceBindingModel,
    ServiceInstanceModel,
    UserModel,
)


class TestServiceInstanceRepository:
    """Tests pour SQLModelServiceInstanceRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, instance_repository):
        instance = ServiceInstance(
            instance_id="i1",
            service_definition_id="d1",
            plan_id="p1",
            parameters={"k": "v", "n": 3},
        )

        await instance_repository.save(instance)

        assert await instance_repository.exists("i1")
        assert await instance_repository.find_by_id("i1") == instance

    @pytest.mark.asyncio
    async def test_find_missing(self, instance_repository):
        assert await instance_repository.find_by_id("missing") is None
        assert not await instance_repository.exists("missing")

    @pytest.mark.asyncio
    async def test_save_overwrites(self, instance_repository):
        """Une seule ligne par ID : la derniere sauvegarde gagne."""
        await instance_repository.save(ServiceInstance(instance_id="i1", plan_id="p1"))
        await instance_repository.save(ServiceInstance(instance_id="i1", plan_id="p2"))

        assert await instance_repository.count() == 1
        assert (await instance_repository.find_by_id("i1")).plan_id == "p2"

    @pytest.mark.asyncio
    async def test_delete(self, instance_repository):
        await instance_repository.save(ServiceInstance(instance_id="i1"))

        await instance_repository.delete("i1")
        await instance_repository.delete("i1")

        assert await instance_repository.count() == 0


class TestServiceBindingRepository:
    """Tests pour SQLModelServiceBindingRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, binding_repository):
        binding = ServiceBinding(
            binding_id="b1",
            parameters={"p": True},
            credentials={"uri": "https://x/bookstores/i1", "username": "b1", "password": "pw"},
        )

        await binding_repository.save(binding)

        assert await binding_repository.find_by_id("b1") == binding
        assert await binding_repository.count() == 1

    @pytest.mark.asyncio
    async def test_delete_missing_is_silent(self, binding_repository):
        await binding_repository.delete("missing")

        assert not await binding_repository.exists("missing")


class TestBookStoreRepository:
    """Tests pour SQLModelBookStoreRepository."""

    @pytest.mark.asyncio
    async def test_books_round_trip_in_order(self, bookstore_repository):
        store = BookStore(
            id="s1",
            books=[
                Book(id="b1", isbn="1", title="Dune", author="Herbert"),
                Book(id="b2", isbn="2", title="Hyperion", author="Simmons"),
            ],
        )

        await bookstore_repository.save(store)

        assert await bookstore_repository.find_by_id("s1") == store

    @pytest.mark.asyncio
    async def test_save_rewrites_full_store(self, bookstore_repository):
        await bookstore_repository.save(BookStore(id="s1", books=[Book(id="b1")]))
        await bookstore_repository.save(BookStore(id="s1", books=[Book(id="b2")]))

        store = await bookstore_repository.find_by_id("s1")
        assert [book.id for book in store.books] == ["b2"]


class TestUserRepository:
    """Tests pour SQLModelUserRepository."""

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, user_repository):
        saved = await user_repository.save(
            User(username="u1", password="hash", authorities=("FULL_ACCESS",))
        )

        assert saved.id is not None
        assert await user_repository.exists(saved.id)
        assert await user_repository.find_by_id(saved.id) == saved

    @pytest.mark.asyncio
    async def test_find_by_username(self, user_repository):
        await user_repository.save(User(username="u1", password="hash"))

        found = await user_repository.find_by_username("u1")

        assert found.username == "u1"
        assert await user_repository.find_by_username("u2") is None

    @pytest.mark.asyncio
    async def test_username_unique(self, user_repository):
        await user_repository.save(User(username="u1", password="hash"))

        with pytest.raises(IntegrityError):
            await user_repository.save(User(username="u1", password="other"))

        assert await user_repository.count() == 1

    @pytest.mark.asyncio
    async def test_delete(self, user_repository):
        saved = await user_repository.save(User(username="u1", password="hash"))

        await user_repository.delete(saved.id)

        assert await user_repository.count() == 0


class TestTimestamps:
    """Les horodatages sont ecrits avec leur fuseau et relus depuis la base."""

    @pytest.mark.asyncio
    async def test_instance_created_at_persisted(self, instance_repository, session_factory):
        await instance_repository.save(ServiceInstance(instance_id="i1"))

        async with session_factory() as session:
            model = await session.get(ServiceInstanceModel, "i1")

        assert isinstance(model.created_at, datetime)

    @pytest.mark.asyncio
    async def test_user_created_at_persisted(self, user_repository, session_factory):
        saved = await user_repository.save(User(username="u1", password="hash"))

        async with session_factory() as session:
            model = await session.get(UserModel, saved.id)

        assert isinstance(model.created_at, datetime)

    @pytest.mark.asyncio
    async def test_bookstore_updated_at_persisted(self, bookstore_repository, session_factory):
        await bookstore_repository.save(BookStore(id="s1"))

        async with session_factory() as session:
            model = await session.get(BookStoreModel, "s1")

        assert isinstance(model.updated_at, datetime)


def test_default_timestamp_is_timezone_aware():
    assert ServiceBindingModel(binding_id="b1").created_at.tzinfo is not None
