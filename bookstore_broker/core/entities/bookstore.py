"""
Entités librairie.

Une librairie (BookStore) est la ressource provisionnée par une instance de
service : elle partage l'identifiant de l'instance qui la possède. Les livres
qu'elle contient n'existent qu'à travers elle et sont persistés en réécrivant
la librairie complète.
"""

from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class Book:
    """
    Un livre stocké dans une librairie.

    Attributs :
        id : Identifiant aléatoire attribué à l'ajout (None avant stockage)
        isbn : Numéro ISBN
        title : Titre
        author : Auteur
    """

    id: Optional[str] = None
    isbn: str = ""
    title: str = ""
    author: str = ""

    def with_id(self, book_id: str) -> "Book":
        """Retourne une copie du livre portant l'identifiant donné."""
        return replace(self, id=book_id)


@dataclass
class BookStore:
    """
    Une librairie et ses livres.

    Les identifiants de livres sont uniques au sein d'une librairie.

    Attributs :
        id : Identifiant de la librairie (égal à l'ID de l'instance propriétaire)
        books : Livres de la librairie, dans l'ordre d'ajout
    """

    id: str
    books: list[Book] = field(default_factory=list)

    def add_book(self, book: Book) -> None:
        """Ajoute un livre déjà identifié."""
        if book.id is None:
            raise ValueError("Book must have an id before being stored")
        if self.get_book_by_id(book.id) is not None:
            raise ValueError(f"Book {book.id} already exists in store {self.id}")
        self.books.append(book)

    def get_book_by_id(self, book_id: str) -> Optional[Book]:
        """Retourne le livre d'identifiant donné, ou None."""
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def remove(self, book_id: str) -> Optional[Book]:
        """Retire le livre d'identifiant donné et le retourne (None si absent)."""
        book = self.get_book_by_id(book_id)
        if book is not None:
            self.books.remove(book)
        return book
