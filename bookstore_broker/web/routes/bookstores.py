"""
Routes de l'API des librairies.

API utilisée par les applications liées, avec les identifiants émis par
leur binding. L'authentification n'est pas appliquée ici.
"""

from fastapi import APIRouter, Request, status

from ...core.entities import Book
from ...core.exceptions import BookStoreDoesNotExistError
from ..deps import get_container, with_timeout
from ..schemas import BookBody, BookStoreBody

router = APIRouter(prefix="/bookstores")


def _to_body(book: Book) -> BookBody:
    return BookBody(id=book.id, isbn=book.isbn, title=book.title, author=book.author)


@router.get("/{store_id}", response_model=BookStoreBody)
async def get_store(store_id: str, request: Request) -> BookStoreBody:
    service = get_container(request).bookstore_service()
    store = await with_timeout(request, service.get_book_store(store_id))
    if store is None:
        raise BookStoreDoesNotExistError(store_id)
    return BookStoreBody(id=store.id, books=[_to_body(book) for book in store.books])


@router.post(
    "/{store_id}/books",
    response_model=BookBody,
    status_code=status.HTTP_201_CREATED,
)
async def add_book(store_id: str, body: BookBody, request: Request) -> BookBody:
    service = get_container(request).bookstore_service()
    book = await with_timeout(
        request,
        service.put_book_in_store(
            store_id,
            Book(isbn=body.isbn, title=body.title, author=body.author),
        ),
    )
    return _to_body(book)


@router.get("/{store_id}/books/{book_id}", response_model=BookBody)
async def get_book(store_id: str, book_id: str, request: Request) -> BookBody:
    service = get_container(request).bookstore_service()
    book = await with_timeout(request, service.get_book_from_store(store_id, book_id))
    return _to_body(book)


@router.delete("/{store_id}/books/{book_id}", response_model=BookBody)
async def delete_book(store_id: str, book_id: str, request: Request) -> BookBody:
    service = get_container(request).bookstore_service()
    book = await with_timeout(request, service.remove_book_from_store(store_id, book_id))
    return _to_body(book)
