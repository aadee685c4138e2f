"""
Requêtes et réponses structurées du broker.

Ces objets valeur sont échangés entre la couche transport et les services
de cycle de vie. Ils ne portent que ce dont le domaine a besoin ; le format
filaire reste l'affaire de la couche web.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


# ============================================================================
# Service instances
# ============================================================================


@dataclass(frozen=True)
class CreateServiceInstanceRequest:
    """Demande de provisionnement d'une instance."""

    service_instance_id: str
    service_definition_id: Optional[str] = None
    plan_id: Optional[str] = None
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CreateServiceInstanceResponse:
    """
    Résultat du provisionnement.

    instance_existed vaut True lorsque l'instance existait déjà : l'appel est
    alors un succès sans effet.
    """

    instance_existed: bool = False


@dataclass(frozen=True)
class GetServiceInstanceRequest:
    service_instance_id: str


@dataclass(frozen=True)
class GetServiceInstanceResponse:
    service_definition_id: Optional[str]
    plan_id: Optional[str]
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteServiceInstanceRequest:
    service_instance_id: str
    service_definition_id: Optional[str] = None
    plan_id: Optional[str] = None


@dataclass(frozen=True)
class UpdateServiceInstanceRequest:
    service_instance_id: str
    plan_id: Optional[str] = None
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GetLastServiceOperationRequest:
    service_instance_id: str
    operation: Optional[str] = None


# ============================================================================
# Service bindings
# ============================================================================


@dataclass(frozen=True)
class CreateServiceInstanceBindingRequest:
    """Demande de création d'un binding sur une instance."""

    binding_id: str
    service_instance_id: str
    service_definition_id: Optional[str] = None
    plan_id: Optional[str] = None
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CreateServiceInstanceBindingResponse:
    """
    Résultat de la création d'un binding.

    Lorsque binding_existed vaut True, credentials contient les identifiants
    stockés lors de la première création.
    """

    binding_existed: bool = False
    credentials: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GetServiceInstanceBindingRequest:
    service_instance_id: str
    binding_id: str


@dataclass(frozen=True)
class GetServiceInstanceBindingResponse:
    parameters: dict[str, Any] = field(default_factory=dict)
    credentials: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteServiceInstanceBindingRequest:
    service_instance_id: str
    binding_id: str
