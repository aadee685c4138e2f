"""
Couche application : services de cycle de vie et services métier.

- ServiceInstanceService : Provisionnement des instances (une librairie par instance)
- ServiceInstanceBindingService : Bindings et émission d'identifiants
- BookStoreService : Opérations sur les librairies et leurs livres
- UserService : Création et suppression des utilisateurs
"""

from bookstore_broker.services.bookstore import BookStoreService
from bookstore_broker.services.service_binding import ServiceInstanceBindingService
from bookstore_broker.services.service_instance import ServiceInstanceService
from bookstore_broker.services.user import UserService

__all__ = [
    "BookStoreService",
    "ServiceInstanceBindingService",
    "ServiceInstanceService",
    "UserService",
]
