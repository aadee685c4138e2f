"""
Entités du service broker.

Enregistrements conservés par le broker pour chaque instance provisionnée et
chaque binding émis. Aucun n'est modifié sur place : ils sont créés une fois
puis supprimés une fois.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ServiceInstance:
    """
    Instance de service provisionnée.

    Attributs :
        instance_id : Identifiant fourni par la plateforme (unique)
        service_definition_id : Service du catalogue à l'origine de l'instance
        plan_id : Plan du catalogue à l'origine de l'instance
        parameters : Paramètres de provisionnement, stockés tels quels
    """

    instance_id: str
    service_definition_id: str | None = None
    plan_id: str | None = None
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class ServiceBinding:
    """
    Binding vers une instance de service.

    L'ID du binding est unique globalement : il n'est pas rattaché à l'ID
    d'instance.

    Attributs :
        binding_id : Identifiant fourni par la plateforme (unique)
        parameters : Paramètres du binding, stockés tels quels
        credentials : Identifiants remis à l'appelant (uri, username, password)
    """

    binding_id: str
    parameters: dict[str, Any] = field(default_factory=dict)
    credentials: dict[str, Any] = field(default_factory=dict)
