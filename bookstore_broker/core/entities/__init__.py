"""
Entités métier du broker.

Les entités sont des objets mutables dotés d'une identité, persistés dans
le temps. Elles portent les règles métier.

Exports :
- ServiceInstance : Une librairie provisionnée pour la plateforme
- ServiceBinding : Identifiants émis pour une instance
- BookStore : La librairie qui matérialise une instance
- Book : Un livre rangé dans une librairie
- User : Un principal d'accès (nom, mot de passe, autorités)
"""

from bookstore_broker.core.entities.broker import ServiceBinding, ServiceInstance
from bookstore_broker.core.entities.bookstore import Book, BookStore
from bookstore_broker.core.entities.user import User

__all__ = [
    "ServiceInstance",
    "ServiceBinding",
    "BookStore",
    "Book",
    "User",
]
