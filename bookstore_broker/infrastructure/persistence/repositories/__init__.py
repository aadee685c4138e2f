"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans bookstore_broker/core/ports/repositories.py, utilisant SQLModel
en mode asynchrone.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une fabrique de sessions via injection de dependances et ouvre
  une session par operation (les requetes concurrentes ne partagent rien)
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from bookstore_broker.infrastructure.persistence.repositories.binding_repository import (
    SQLModelServiceBindingRepository,
)
from bookstore_broker.infrastructure.persistence.repositories.bookstore_repository import (
    SQLModelBookStoreRepository,
)
from bookstore_broker.infrastructure.persistence.repositories.instance_repository import (
    SQLModelServiceInstanceRepository,
)
from bookstore_broker.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = [
    "SQLModelServiceInstanceRepository",
    "SQLModelServiceBindingRepository",
    "SQLModelBookStoreRepository",
    "SQLModelUserRepository",
]
