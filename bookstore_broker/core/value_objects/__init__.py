"""
Objets valeur immutables du domaine.

Exports :
- SecurityAuthorities : Tags d'autorité attachés aux utilisateurs
- Requêtes et réponses du broker (instances et bindings)
"""

from bookstore_broker.core.value_objects.authorities import SecurityAuthorities
from bookstore_broker.core.value_objects.broker import (
    CreateServiceInstanceBindingRequest,
    CreateServiceInstanceBindingResponse,
    CreateServiceInstanceRequest,
    CreateServiceInstanceResponse,
    DeleteServiceInstanceBindingRequest,
    DeleteServiceInstanceRequest,
    GetLastServiceOperationRequest,
    GetServiceInstanceBindingRequest,
    GetServiceInstanceBindingResponse,
    GetServiceInstanceRequest,
    GetServiceInstanceResponse,
    UpdateServiceInstanceRequest,
)

__all__ = [
    "SecurityAuthorities",
    "CreateServiceInstanceRequest",
    "CreateServiceInstanceResponse",
    "GetServiceInstanceRequest",
    "GetServiceInstanceResponse",
    "DeleteServiceInstanceRequest",
    "UpdateServiceInstanceRequest",
    "GetLastServiceOperationRequest",
    "CreateServiceInstanceBindingRequest",
    "CreateServiceInstanceBindingResponse",
    "GetServiceInstanceBindingRequest",
    "GetServiceInstanceBindingResponse",
    "DeleteServiceInstanceBindingRequest",
]
