"""
Service des librairies.

Porte les opérations métier de la ressource provisionnée : création et
suppression d'une librairie, ajout, lecture et retrait de livres. Chaque
mutation relit la librairie puis la réécrit en entier.
"""

import uuid
from typing import Optional

from loguru import logger

from bookstore_broker.core.entities import Book, BookStore
from bookstore_broker.core.exceptions import (
    BookStoreDoesNotExistError,
    InvalidBookIdError,
)
from bookstore_broker.core.ports.repositories import IBookStoreRepository


def generate_random_id() -> str:
    """Identifiant aléatoire (UUID4) pour les librairies et les livres."""
    return str(uuid.uuid4())


class BookStoreService:
    """
    Service des librairies et de leurs livres.

    create_book_store ne vérifie pas l'existence : un second appel pour le
    même ID écrase la librairie (dernier écrit gagnant). L'appelant
    (ServiceInstanceService) garantit un appel unique par instance.
    """

    def __init__(self, repository: IBookStoreRepository) -> None:
        """
        Initialise le service.

        Args :
            repository : Repository des librairies
        """
        self._repository = repository

    async def create_book_store(self, store_id: Optional[str] = None) -> BookStore:
        """Crée une librairie vide (ID aléatoire si non fourni)."""
        store = BookStore(id=store_id or generate_random_id())
        saved = await self._repository.save(store)
        logger.info("Librairie créée", store_id=saved.id)
        return saved

    async def get_book_store(self, store_id: str) -> Optional[BookStore]:
        """Retourne la librairie, ou None si elle n'existe pas."""
        return await self._repository.find_by_id(store_id)

    async def delete_book_store(self, store_id: str) -> None:
        """Supprime la librairie (sans erreur si elle est absente)."""
        await self._repository.delete(store_id)
        logger.info("Librairie supprimée", store_id=store_id)

    async def put_book_in_store(self, store_id: str, book: Book) -> Book:
        """
        Ajoute un livre à une librairie.

        Args :
            store_id : ID de la librairie
            book : Contenu du livre (son éventuel ID est ignoré)

        Retourne :
            Le livre stocké, avec son ID généré

        Raises :
            BookStoreDoesNotExistError : Si la librairie n'existe pas
        """
        store = await self.get_book_store(store_id)
        if store is None:
            raise BookStoreDoesNotExistError(store_id)

        book_with_id = book.with_id(generate_random_id())
        store.add_book(book_with_id)
        await self._repository.save(store)

        logger.debug("Livre ajouté", store_id=store_id, book_id=book_with_id.id)
        return book_with_id

    async def get_book_from_store(self, store_id: str, book_id: str) -> Book:
        """
        Retourne un livre d'une librairie.

        Raises :
            InvalidBookIdError : Si la librairie ou le livre est introuvable
        """
        store = await self.get_book_store(store_id)
        book = store.get_book_by_id(book_id) if store is not None else None
        if book is None:
            raise InvalidBookIdError(store_id, book_id)
        return book

    async def remove_book_from_store(self, store_id: str, book_id: str) -> Book:
        """
        Retire un livre d'une librairie et le retourne.

        Raises :
            InvalidBookIdError : Si la librairie ou le livre est introuvable
        """
        store = await self.get_book_store(store_id)
        if store is None:
            raise InvalidBookIdError(store_id, book_id)

        book = store.remove(book_id)
        if book is None:
            raise InvalidBookIdError(store_id, book_id)
        await self._repository.save(store)

        logger.debug("Livre retiré", store_id=store_id, book_id=book_id)
        return book
