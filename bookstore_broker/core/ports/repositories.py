"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Toutes les opérations sont asynchrones : chaque appel est un point de suspension
explicite qui ne bloque jamais la boucle d'événements.

La sauvegarde écrase l'enregistrement existant (dernier écrit gagnant) et la
suppression d'un identifiant absent réussit silencieusement.
"""

from abc import ABC, abstractmethod
from typing import Optional

from bookstore_broker.core.entities import (
    BookStore,
    ServiceBinding,
    ServiceInstance,
    User,
)


class IServiceInstanceRepository(ABC):
    """
    Interface de stockage des instances de service.

    Définit les opérations pour persister et récupérer les entités ServiceInstance.
    """

    @abstractmethod
    async def exists(self, instance_id: str) -> bool:
        """Indique si une instance existe pour cet ID."""
        ...

    @abstractmethod
    async def find_by_id(self, instance_id: str) -> Optional[ServiceInstance]:
        """Récupère une instance par son ID."""
        ...

    @abstractmethod
    async def save(self, instance: ServiceInstance) -> ServiceInstance:
        """Sauvegarde une instance (insertion ou écrasement)."""
        ...

    @abstractmethod
    async def delete(self, instance_id: str) -> None:
        """Supprime une instance par ID (sans erreur si absente)."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Nombre d'instances stockées."""
        ...


class IServiceBindingRepository(ABC):
    """
    Interface de stockage des bindings.

    Définit les opérations pour persister et récupérer les entités ServiceBinding.
    """

    @abstractmethod
    async def exists(self, binding_id: str) -> bool:
        """Indique si un binding existe pour cet ID."""
        ...

    @abstractmethod
    async def find_by_id(self, binding_id: str) -> Optional[ServiceBinding]:
        """Récupère un binding par son ID."""
        ...

    @abstractmethod
    async def save(self, binding: ServiceBinding) -> ServiceBinding:
        """Sauvegarde un binding (insertion ou écrasement)."""
        ...

    @abstractmethod
    async def delete(self, binding_id: str) -> None:
        """Supprime un binding par ID (sans erreur si absent)."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Nombre de bindings stockés."""
        ...


class IBookStoreRepository(ABC):
    """
    Interface de stockage des librairies.

    Une librairie est toujours sauvegardée en entier, livres compris.
    """

    @abstractmethod
    async def exists(self, store_id: str) -> bool:
        """Indique si une librairie existe pour cet ID."""
        ...

    @abstractmethod
    async def find_by_id(self, store_id: str) -> Optional[BookStore]:
        """Récupère une librairie et ses livres."""
        ...

    @abstractmethod
    async def save(self, store: BookStore) -> BookStore:
        """Sauvegarde la librairie complète (insertion ou écrasement)."""
        ...

    @abstractmethod
    async def delete(self, store_id: str) -> None:
        """Supprime une librairie par ID (sans erreur si absente)."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Nombre de librairies stockées."""
        ...


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs.

    Le nom d'utilisateur est unique au niveau du stockage : la recherche par
    nom retourne au plus un utilisateur.
    """

    @abstractmethod
    async def exists(self, user_id: int) -> bool:
        """Indique si un utilisateur existe pour cet ID interne."""
        ...

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Récupère un utilisateur par son ID interne."""
        ...

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Récupère un utilisateur par son nom."""
        ...

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Sauvegarde un utilisateur.

        Retourne l'utilisateur tel que stocké, avec son ID interne.
        """
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Supprime un utilisateur par ID interne (sans erreur si absent)."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Nombre d'utilisateurs stockés."""
        ...
